"""
Tests for FIFO (First In First Out) disk scheduler.
"""
from test_utils import *
from disk import BACKWARD, FORWARD, DiskHead
from schedulers.fifo import FIFO


def test_fifo_arrival_order():
    """Requests are serviced in arrival order regardless of distance."""
    trace = make_trace((0, 50), (0, 20))
    result = run_scheduler_test(FIFO(), trace)

    assert result['order'] == [50, 20], "FIFO should service 50 before the closer 20"
    assert_request_invariants(result['finished'], trace)


def test_fifo_timing():
    """Head walks 0 -> 50 -> 20, one track per tick."""
    result = run_scheduler_test(FIFO(), make_trace((0, 50), (0, 20)))
    first, second = result['finished']

    assert (first.arrival, first.start, first.end) == (0, 0, 50)
    assert (second.arrival, second.start, second.end) == (0, 50, 80)

    summary = result['summary']
    assert summary['final_clock'] == 80
    assert summary['total_movement'] == 80
    assert summary['avg_movement'] == 1.0
    assert summary['avg_turnaround'] == 65.0
    assert summary['avg_wait'] == 25.0
    assert summary['max_wait'] == 50


def test_fifo_select_does_not_remove():
    scheduler = FIFO()
    disk = DiskHead()
    first = make_request(0, 10)
    scheduler.add_request(first)
    scheduler.add_request(make_request(1, 5))

    assert scheduler.select(disk) is first
    assert scheduler.select(disk) is first, "select() must leave the request pending"
    assert len(scheduler.pending()) == 2

    scheduler.remove_request(first)
    assert [r.rid for r in scheduler.pending()] == [1]


def test_fifo_direction_follows_request():
    scheduler = FIFO()
    disk = DiskHead(track=20, direction=BACKWARD)
    scheduler.add_request(make_request(0, 30))
    scheduler.select(disk)
    assert disk.direction == FORWARD

    scheduler = FIFO()
    disk = DiskHead(track=20, direction=FORWARD)
    scheduler.add_request(make_request(0, 20))
    scheduler.select(disk)
    assert disk.direction == BACKWARD, "Same track defaults to the smaller-track direction"


def test_fifo_empty():
    scheduler = FIFO()
    assert scheduler.is_empty()
    assert scheduler.select(DiskHead()) is None


def test_fifo_textbook_movement(textbook_trace):
    """Movement is the full zigzag across all requests in submission order."""
    result = run_scheduler_test(FIFO(), textbook_trace)

    assert result['order'] == [98, 183, 37, 122, 14, 124, 65, 67]
    assert result['summary']['total_movement'] == path_length(result['finished'])
    assert_request_invariants(result['finished'], textbook_trace)
