class Request:
    def __init__(self, rid, arrival, track):
        self.rid = rid
        self.arrival = arrival
        self.track = track  # target cylinder, never negative
        self.start = None  # clock when the policy selected it
        self.end = None  # clock when the head reached its track

    @property
    def wait(self):
        """Ticks spent queued before dispatch, or None until dispatched."""
        if self.start is None:
            return None
        return self.start - self.arrival

    @property
    def turnaround(self):
        """Ticks from arrival to completion, or None until completed."""
        if self.end is None:
            return None
        return self.end - self.arrival

    def is_finished(self):
        return self.end is not None

    def __repr__(self):
        return f"Request({self.rid}, arrival={self.arrival}, track={self.track}, " \
               f"start={self.start}, end={self.end})"
