"""
Discrete-time simulation kernel for disk I/O scheduling.

Implements a tick-driven simulation with:
- An integer clock, one track of head movement per tick
- Request lifecycle tracking (pending → in service → finished)
- Scheduler integration via the policy contract (add_request, select,
  remove_request, is_empty)
- Running totals for movement, wait and turnaround

Each tick performs, in this order: arrivals, completion check, dispatch,
head movement, exit check, clock advance. A request whose track is already
under the head at dispatch completes within the same tick.
"""
from collections import deque

from disk import DiskHead
from io_request import Request
from metrics import Totals


class Simulator:
    def __init__(self, arrivals, scheduler, verbose=False):
        if scheduler is None:
            raise ValueError("Simulator needs a scheduling policy")
        arrivals = list(arrivals)
        for prev, arrival in zip(arrivals, arrivals[1:]):
            if arrival.time < prev.time:
                raise ValueError(
                    f"Arrival times must be non-decreasing (got {arrival.time} after {prev.time})")

        self.arrivals = arrivals
        self.scheduler = scheduler
        self.verbose = verbose
        self.clock = 0
        self.disk = DiskHead()
        self.source = deque()
        self.current = None  # request in service
        self.finished = []
        self.totals = Totals()
        self.next_rid = 0

    def log(self, msg):
        if self.verbose:
            print(f"{self.clock:5d}: {msg}")

    def process_arrivals(self):
        while self.source and self.source[0].time == self.clock:
            arrival = self.source.popleft()
            request = Request(self.next_rid, self.clock, arrival.track)
            self.next_rid += 1
            self.scheduler.add_request(request)
            self.log(f"{request.rid} add {request.track}")

    def process_completion(self):
        request = self.current
        if request is None or request.track != self.disk.track:
            return
        request.end = self.clock
        self.totals.record_completion(request)
        self.log(f"{request.rid} finish {request.end - request.arrival}")
        # rids are handed out in arrival order, so appending keeps the ledger sorted
        self.finished.append(request)
        self.scheduler.remove_request(request)
        self.current = None

    def dispatch(self):
        if self.current is not None or self.scheduler.is_empty():
            return
        # Non-empty scheduler: select() has something to return
        request = self.scheduler.select(self.disk)
        if request is None:
            self.disk.reverse()
            self.totals.record_movement()
            return

        request.start = self.clock
        self.totals.record_dispatch(request)
        self.current = request
        if request.track == self.disk.track:
            # Zero seek: rerun this tick so the completion check picks it up
            self.clock -= 1

    def move_head(self):
        if self.current is not None and self.disk.step_toward(self.current.track):
            self.totals.record_movement()

    def done(self):
        return self.current is None and self.scheduler.is_empty() and not self.source

    def reset(self):
        self.clock = 0
        self.disk.reset()
        self.source = deque(self.arrivals)
        self.current = None
        self.finished = []
        self.totals = Totals()
        self.next_rid = 0

    def run(self):
        # Fresh state on every run so one Simulator can replay the trace under another policy
        self.reset()

        while True:
            self.process_arrivals()
            self.process_completion()
            self.dispatch()
            self.move_head()

            if self.done():
                break

            self.clock += 1

        return self.finished
