"""
Disk head model for the I/O scheduling simulator.

The head sits on one track at a time and carries a sweep direction
(+1 toward higher tracks, -1 toward lower tracks). Seeking is one track
per simulated tick. Only the lower bound (track 0) is enforced; traces
do not define a track count, so there is no upper bound.

Policies receive the head in select() and may change its direction
(LOOK/FLOOK reverse it, CLOOK pins it to +1).
"""

FORWARD = 1
BACKWARD = -1


class DiskHead:
    def __init__(self, track=0, direction=FORWARD):
        self.track = track
        self.direction = direction

    def step_toward(self, target):
        """Move one track toward target. Returns True if the head moved."""
        if target == self.track:
            return False
        self.track += 1 if target > self.track else -1
        return True

    def reverse(self):
        """
        Flip direction and move one track in the new direction.

        If that would take the head below track 0 it stays on track 0 and the
        direction is forced forward.
        """
        self.direction = -self.direction
        self.track += self.direction
        if self.track < 0:
            self.track = 0
            self.direction = FORWARD

    def reset(self):
        self.track = 0
        self.direction = FORWARD

    def __repr__(self):
        return f"DiskHead(track={self.track}, direction={self.direction:+d})"
