"""
Tests for the tick-driven Simulator: lifecycle, timing edge cases, exit
condition and reuse across runs.
"""
import pytest
from test_utils import make_trace, run_scheduler_test, assert_request_invariants, path_length, service_order
from simulator import Simulator
from schedulers.fifo import FIFO
from schedulers.sstf import SSTF
from schedulers.look import LOOK
from schedulers.clook import CLOOK
from schedulers.flook import FLOOK


ALL_POLICIES = [FIFO, SSTF, LOOK, CLOOK, FLOOK]


class StallOnceFIFO(FIFO):
    """FIFO whose first select() comes back empty, forcing the engine's fallback."""

    def __init__(self):
        super().__init__()
        self.stalled = False

    def select(self, disk):
        if not self.stalled:
            self.stalled = True
            return None
        return super().select(disk)


def test_simulator_requires_policy():
    with pytest.raises(ValueError):
        Simulator(make_trace((0, 1)), None)


def test_simulator_rejects_out_of_order_arrivals():
    with pytest.raises(ValueError):
        Simulator(make_trace((5, 1), (3, 2)), FIFO())


@pytest.mark.parametrize("policy", ALL_POLICIES)
def test_empty_trace_stops_at_clock_zero(policy):
    result = run_scheduler_test(policy(), [])

    assert result['finished'] == []
    assert result['summary'] == {
        'final_clock': 0,
        'total_movement': 0,
        'avg_movement': 0.0,
        'avg_turnaround': 0.0,
        'avg_wait': 0.0,
        'max_wait': 0,
        'completed': 0,
    }


def test_zero_seek_completes_in_same_tick():
    """Requests on the head's track finish the tick they are dispatched."""
    result = run_scheduler_test(FIFO(), make_trace((0, 0), (0, 0)))

    for r in result['finished']:
        assert (r.arrival, r.start, r.end) == (0, 0, 0)
    assert result['summary']['final_clock'] == 0
    assert result['summary']['total_movement'] == 0


def test_zero_seek_after_movement():
    """A second request on the track just reached completes without an extra tick."""
    result = run_scheduler_test(FIFO(), make_trace((0, 4), (1, 4)))
    first, second = result['finished']

    assert (first.start, first.end) == (0, 4)
    assert (second.start, second.end) == (4, 4)
    assert result['summary']['final_clock'] == 4
    assert result['summary']['total_movement'] == 4


def test_idle_until_first_arrival():
    result = run_scheduler_test(FIFO(), make_trace((5, 3)))
    r = result['finished'][0]

    assert (r.arrival, r.start, r.end) == (5, 5, 8)
    assert result['summary']['final_clock'] == 8
    assert result['summary']['avg_movement'] == pytest.approx(3 / 8)


def test_no_preemption_of_in_service_request():
    """A request arriving right under the head still waits for the current one."""
    result = run_scheduler_test(SSTF(), make_trace((0, 20), (10, 10)))
    far, near = result['finished']

    assert (far.start, far.end) == (0, 20)
    assert (near.start, near.end) == (20, 30)


def test_empty_select_reverses_head_with_clamp():
    """Fallback on an empty select(): reverse, step, clamp at track 0 and count the step."""
    result = run_scheduler_test(StallOnceFIFO(), make_trace((0, 2)))
    sim = result['simulator']
    r = result['finished'][0]

    assert (r.start, r.end) == (1, 3)
    assert sim.disk.track == 2
    assert result['summary']['total_movement'] == 3
    assert result['summary']['final_clock'] == 3


def test_verbose_events(capsys):
    run_scheduler_test(FIFO(), make_trace((0, 50), (0, 20)), verbose=True)
    lines = capsys.readouterr().out.splitlines()

    assert lines == [
        "    0: 0 add 50",
        "    0: 1 add 20",
        "   50: 0 finish 50",
        "   80: 1 finish 80",
    ]


@pytest.mark.parametrize("policy", ALL_POLICIES)
def test_invariants_hold_for_every_policy(policy, staggered_trace, random_trace):
    for trace in (staggered_trace, random_trace):
        result = run_scheduler_test(policy(), trace)
        sim = result['simulator']

        assert_request_invariants(result['finished'], trace)
        assert sim.current is None
        assert sim.scheduler.is_empty()
        # Head only ever walks straight toward the request in service
        assert result['summary']['total_movement'] == path_length(result['finished'])
        last = service_order(result['finished'])[-1]
        assert sim.clock == last.end


def test_simulator_resets_state_between_runs():
    """One Simulator can replay the same trace under a different policy."""
    trace = make_trace((0, 90), (0, 10))
    sim = Simulator(trace, FIFO())
    first = sim.run()
    first_order = [r.track for r in service_order(first)]
    first_clock = sim.clock

    sim.scheduler = SSTF()
    second = sim.run()

    assert first_order == [90, 10]
    assert [r.track for r in service_order(second)] == [10, 90]
    assert [r.rid for r in second] == [0, 1], "Request ids restart on every run"
    assert first is not second
    assert first_clock == 170 and sim.clock == 90
    assert sim.totals.movement == 90
