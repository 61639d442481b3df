"""
Performance metrics for disk scheduling evaluation.

Running totals are accumulated by the simulator tick by tick (Totals).
After a run, summarize() turns them into the classic summary line:
1. Total head movement and movement per tick (lower is better)
2. Average turnaround: arrival to completion (lower is better)
3. Average wait: arrival to dispatch (lower is better)
4. Maximum wait: worst-case postponement (lower is better, exposes starvation)

Distribution metrics (percentiles, spread) are computed from the completed
requests themselves.
"""
import numpy as np


class Totals:
    def __init__(self):
        self.movement = 0
        self.turnaround = 0
        self.wait = 0
        self.max_wait = 0

    def record_dispatch(self, request):
        wait = request.start - request.arrival
        self.wait += wait
        self.max_wait = max(self.max_wait, wait)

    def record_completion(self, request):
        self.turnaround += request.end - request.arrival

    def record_movement(self, tracks=1):
        self.movement += tracks


def summarize(sim):
    """
    Summary statistics for a finished simulation.

    Averages over zero ticks or zero requests are reported as 0.0.

    Returns:
        dict with final_clock, total_movement, avg_movement, avg_turnaround,
        avg_wait, max_wait and completed
    """
    n = len(sim.finished)
    totals = sim.totals
    return {
        'final_clock': sim.clock,
        'total_movement': totals.movement,
        'avg_movement': totals.movement / sim.clock if sim.clock > 0 else 0.0,
        'avg_turnaround': totals.turnaround / n if n > 0 else 0.0,
        'avg_wait': totals.wait / n if n > 0 else 0.0,
        'max_wait': totals.max_wait,
        'completed': n,
    }


def waits(requests):
    return [r.start - r.arrival for r in requests if r.start is not None]


def turnarounds(requests):
    return [r.end - r.arrival for r in requests if r.end is not None]


def p95_wait(requests):
    """95th percentile of wait time across dispatched requests, 0.0 if none."""
    values = waits(requests)
    if not values:
        return 0.0
    return float(np.percentile(values, 95))


def p99_wait(requests):
    """
    99th percentile of wait time across dispatched requests.

    Tail wait is where starvation shows up first: SSTF and LOOK can keep
    average wait low while a handful of requests wait far longer.
    """
    values = waits(requests)
    if not values:
        return 0.0
    return float(np.percentile(values, 99))


def p95_turnaround(requests):
    values = turnarounds(requests)
    if not values:
        return 0.0
    return float(np.percentile(values, 95))


def wait_stddev(requests):
    """Population standard deviation of wait time (fairness spread)."""
    values = waits(requests)
    if not values:
        return 0.0
    return float(np.std(values))
