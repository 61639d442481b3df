"""
Replay an I/O trace under one disk scheduling policy.

Usage:
    python iosched.py -sL trace.txt        # LOOK
    python iosched.py -v -sF trace.txt     # FLOOK, print add/finish events
    python iosched.py --help               # Show options

Policies: N=FIFO, S=SSTF, L=LOOK, C=CLOOK, F=FLOOK

Output: one line per completed request (id, arrival, start, end) followed by
    SUM: <final clock> <total movement> <movement/tick> <avg turnaround> <avg wait> <max wait>
"""
import argparse
import sys

from simulator import Simulator
from schedulers.registry import create_scheduler
from workload import read_trace
import metrics


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Discrete-event simulator of disk I/O request scheduling",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Policies:
  N  FIFO   first in, first out
  S  SSTF   shortest seek time first
  L  LOOK   elevator
  C  CLOOK  circular LOOK
  F  FLOOK  two-queue LOOK
        """
    )
    parser.add_argument('-v', action='store_true', dest='verbose',
                        help='Print add/finish events as they happen')
    parser.add_argument('-q', action='store_true', help=argparse.SUPPRESS)
    parser.add_argument('-f', action='store_true', help=argparse.SUPPRESS)
    parser.add_argument('-s', dest='policy', default=None,
                        help='Scheduling policy: N, S, L, C or F')
    parser.add_argument('tracefile', help='Trace file with "time track" lines')

    return parser.parse_args(argv)


def print_details(sim):
    """Print the completed-request report and the summary line."""
    for r in sim.finished:
        print(f"{r.rid:5d}: {r.arrival:5d} {r.start:5d} {r.end:5d}")

    summary = metrics.summarize(sim)
    print(f"SUM: {summary['final_clock']} {summary['total_movement']} "
          f"{summary['avg_movement']:.4f} {summary['avg_turnaround']:.2f} "
          f"{summary['avg_wait']:.2f} {summary['max_wait']}")


def main(argv=None):
    args = parse_args(argv)

    scheduler = create_scheduler(args.policy)
    if scheduler is None:
        print(f"Unknown or missing policy {args.policy!r}; use -s with one of N, S, L, C, F",
              file=sys.stderr)
        return 1

    try:
        arrivals = read_trace(args.tracefile)
    except OSError as e:
        print(f"Cannot read trace file {args.tracefile}: {e}", file=sys.stderr)
        return 1

    try:
        sim = Simulator(arrivals, scheduler, verbose=args.verbose)
    except ValueError as e:
        print(f"Bad trace {args.tracefile}: {e}", file=sys.stderr)
        return 1

    sim.run()
    print_details(sim)
    return 0


if __name__ == "__main__":
    sys.exit(main())
