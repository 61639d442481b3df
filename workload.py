"""
I/O trace input and synthetic trace generation.

A trace is a sequence of arrivals, each an integer (time, track) pair in
non-decreasing time order. Traces come from two places:
- Trace files: one "time track" pair per line, '#' starts a comment line,
  anything that does not parse as two non-negative integers is skipped
- Synthetic workloads: Poisson arrivals on an integer clock with uniformly
  distributed target tracks, seeded for Common Random Numbers (CRN) so that
  every policy can replay the exact same trace
"""
import numpy as np


class Arrival:
    def __init__(self, time, track):
        self.time = time
        self.track = track

    def __eq__(self, other):
        if not isinstance(other, Arrival):
            return NotImplemented
        return (self.time, self.track) == (other.time, other.track)

    def __repr__(self):
        return f"Arrival(time={self.time}, track={self.track})"


def parse_trace(lines):
    """
    Parse trace lines into a list of Arrival objects.

    Comment lines, blank lines, lines without two integers and lines with
    negative values are skipped. Extra fields after the first two are ignored.
    """
    arrivals = []
    for line in lines:
        if line.startswith("#"):
            continue
        fields = line.split()
        if len(fields) < 2:
            continue
        try:
            time, track = int(fields[0]), int(fields[1])
        except ValueError:
            continue
        if time < 0 or track < 0:
            continue
        arrivals.append(Arrival(time, track))
    return arrivals


def read_trace(path):
    """Read a trace file. Raises OSError if the file cannot be opened."""
    with open(path, "r") as f:
        return parse_trace(f)


def generate_trace(
    num_requests=100,
    arrival_rate=0.05,       # requests per tick
    max_track=199,           # highest track a request may target
    burst_probability=0.0,   # chance a request arrives together with the previous one
    seed=42
):
    """
    Generate a synthetic trace.

    Interarrival times are exponential with mean 1/arrival_rate, rounded down
    onto the integer clock. With burst_probability > 0 some requests share the
    previous request's arrival time, which stresses same-tick arrivals.

    Returns a list of Arrival objects in non-decreasing time order.
    """
    rng = np.random.default_rng(seed)

    arrivals = []
    t = 0.0
    for _ in range(num_requests):
        if arrivals and rng.random() < burst_probability:
            arrivals.append(Arrival(arrivals[-1].time, int(rng.integers(0, max_track + 1))))
            continue
        t += rng.exponential(1.0 / arrival_rate)
        track = int(rng.integers(0, max_track + 1))
        arrivals.append(Arrival(int(t), track))

    return arrivals


def write_trace(arrivals, path, header=None):
    """Write arrivals in the trace file format read by read_trace()."""
    with open(path, "w") as f:
        if header:
            f.write(f"# {header}\n")
        for arrival in arrivals:
            f.write(f"{arrival.time} {arrival.track}\n")
