from .base import Scheduler
from disk import BACKWARD, FORWARD


class SSTF(Scheduler):
    """
    Shortest-Seek-Time-First (SSTF) disk scheduler.

    Always picks the pending request closest to the current head track.
    Equal distances go to the request that arrived first.

    Properties: Greedy, low average movement, but requests far from a busy
    region can be postponed indefinitely while closer work keeps arriving.
    """

    name = "SSTF"

    def select(self, disk):
        if not self.queue:
            return None
        # min() keeps the first of equal keys, which is the earliest arrival
        request = min(self.queue, key=lambda r: abs(r.track - disk.track))
        disk.direction = FORWARD if request.track >= disk.track else BACKWARD
        return request
