"""
Abstract base class for disk I/O scheduling policies.

All policies implement four operations on their private pending collection:
1. add_request: Accept a newly arrived request
2. select: Pick the next request to service, without removing it
3. remove_request: Drop the previously selected request once it is serviced
4. is_empty: Report whether anything is still pending

The simulator only calls select() when is_empty() is False and never selects
again before removing the current request. select() may change the head's
sweep direction (disk.direction) as part of its decision.

Subclasses implement concrete policies (FIFO, SSTF, LOOK, CLOOK, FLOOK).
"""
from abc import ABC, abstractmethod


class Scheduler(ABC):
    name = None

    def __init__(self):
        self.queue = []

    def add_request(self, request):
        """
        Handle a request arrival.

        Args:
            request: Request instance that just arrived
        """
        self.queue.append(request)

    @abstractmethod
    def select(self, disk):
        """
        Choose the next request to service.

        Args:
            disk: DiskHead instance (current track and sweep direction)

        Returns:
            The chosen Request, left in the pending collection, or None if
            nothing is pending
        """
        pass

    def remove_request(self, request):
        """
        Remove a serviced request from the pending collection.

        Args:
            request: The Request previously returned by select()
        """
        self.queue.remove(request)

    def is_empty(self):
        return not self.queue

    def pending(self):
        """Snapshot of pending requests in insertion order."""
        return list(self.queue)

    def __repr__(self):
        return f"{self.name} (pending: {len(self.pending())})"


def look_select(queue, disk):
    """
    LOOK selection over one queue.

    Picks the closest request on the current side of the head (>= head when
    moving forward, <= head when moving backward). If nothing lies on that
    side the direction is reversed and the scan runs once more. Ties go to the
    earliest inserted request.

    Returns None only for an empty queue; a non-empty queue always has a
    request on one side of the head, so the second pass cannot come up empty.
    """
    if not queue:
        return None

    for _ in range(2):
        closest = None
        for request in queue:
            distance = request.track - disk.track
            if (disk.direction > 0 and distance >= 0) or (disk.direction < 0 and distance <= 0):
                if closest is None or abs(distance) < abs(closest.track - disk.track):
                    closest = request
        if closest is not None:
            return closest
        disk.direction = -disk.direction

    return None
