from .base import Scheduler
from disk import BACKWARD, FORWARD


class FIFO(Scheduler):
    """
    First-In, First-Out (FIFO) disk scheduler.

    Services requests strictly in arrival order regardless of where the head
    is. The head direction simply follows the selected request: forward if
    its track is above the head, backward otherwise (including the same track).

    Properties: Fair and starvation-free, but the head zigzags across the disk,
    so total movement is typically the highest of all policies.
    """

    name = "FIFO"

    def select(self, disk):
        if not self.queue:
            return None
        request = self.queue[0]  # oldest pending
        disk.direction = FORWARD if request.track > disk.track else BACKWARD
        return request
