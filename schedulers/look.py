from .base import Scheduler, look_select


class LOOK(Scheduler):
    """
    LOOK (elevator) disk scheduler.

    Keeps sweeping in the current direction, servicing the closest request
    ahead of the head, and reverses only when nothing is left on that side.
    Unlike SCAN the head turns around at the last request rather than the
    disk edge.

    Properties: Much less movement than FIFO and more even waits than SSTF.
    New arrivals just ahead of the head are picked up in the current sweep,
    so a steady stream at one end can still delay the other end.
    """

    name = "LOOK"

    def select(self, disk):
        return look_select(self.queue, disk)
