from .base import Scheduler, look_select


class FLOOK(Scheduler):
    """
    Two-queue LOOK (FLOOK) disk scheduler.

    Pending requests live in two queues: the active batch being swept and an
    incoming queue collecting new arrivals. LOOK runs over the active batch
    only, so arrivals never jump ahead of requests already in the sweep. When
    the active batch runs dry the queues swap and the incoming batch becomes
    the next sweep.

    Properties: Same low movement as LOOK, but the number of requests serviced
    ahead of any given request is bounded by its batch, which removes LOOK's
    indefinite postponement under continuous arrivals near the head.
    """

    name = "FLOOK"

    def __init__(self):
        # Two queues replace the single base-class queue
        self.active = []
        self.incoming = []

    def _swap(self):
        self.active, self.incoming = self.incoming, self.active

    def add_request(self, request):
        self.incoming.append(request)
        # Idle scheduler: let new work become serviceable immediately
        if not self.active:
            self._swap()

    def select(self, disk):
        if not self.active:
            self._swap()
        return look_select(self.active, disk)

    def remove_request(self, request):
        self.active.remove(request)

    def is_empty(self):
        return not self.active and not self.incoming

    def pending(self):
        return list(self.active) + list(self.incoming)
