from .base import Scheduler
from disk import FORWARD


class CLOOK(Scheduler):
    """
    Circular LOOK (CLOOK) disk scheduler.

    Sweeps in one direction only: services the lowest pending track at or
    above the head, and when nothing is left above the head wraps around to
    the lowest pending track overall.

    Properties: Every track region gets the same treatment per cycle, so
    waits are more uniform than LOOK at the cost of the wrap-around seek.
    """

    name = "CLOOK"

    def select(self, disk):
        if not self.queue:
            return None
        disk.direction = FORWARD

        ahead = [r for r in self.queue if r.track >= disk.track]
        if ahead:
            return min(ahead, key=lambda r: r.track)
        # Wrap to the start of the next sweep
        return min(self.queue, key=lambda r: r.track)
