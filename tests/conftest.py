"""
Pytest configuration and shared fixtures for disk scheduler tests.
"""
import pytest
from disk import DiskHead
from workload import generate_trace
from test_utils import make_trace


@pytest.fixture
def disk():
    """Head parked on track 0, sweeping forward."""
    return DiskHead()


@pytest.fixture
def textbook_trace():
    """Classic textbook request set, all arriving at t=0."""
    return make_trace(*[(0, t) for t in [98, 183, 37, 122, 14, 124, 65, 67]])


@pytest.fixture
def staggered_trace():
    """Arrivals spread over time so new work shows up while the head is busy."""
    return make_trace(
        (0, 30), (5, 10), (12, 50), (12, 45), (40, 5), (41, 90), (60, 60), (60, 0)
    )


@pytest.fixture
def random_trace():
    """Medium-sized synthetic trace with some same-tick bursts."""
    return generate_trace(num_requests=60, arrival_rate=0.08, max_track=120,
                          burst_probability=0.2, seed=7)
