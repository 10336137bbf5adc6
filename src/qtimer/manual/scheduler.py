import heapq
import itertools

from .. import scheduler


class Scheduler(scheduler.Scheduler):
    """
    Virtual clock. Nothing happens until advance() or run_pending() is called,
    at which point every callback that has come due runs in due-time order,
    ties going to whichever was scheduled first.
    """

    def __init__(self, start_time=0.0):
        self.time = start_time
        self.queue = [] # [ (due, seq, callback, args), ... ]
        self.cancelled = set()
        self.seq = itertools.count()

    def now(self):
        return self.time

    def call_later(self, delay_s, callback, *args):
        handle = next(self.seq)
        heapq.heappush(self.queue, (self.time + delay_s, handle, callback, args))
        return handle

    def cancel(self, handle):
        if any(entry[1] == handle for entry in self.queue):
            self.cancelled.add(handle)

    def pending(self):
        return sum(1 for entry in self.queue if entry[1] not in self.cancelled)

    def run_pending(self):
        return self.advance(0)

    def advance(self, seconds):
        """
        Move the clock forward, firing due callbacks. Returns how many ran.

        If a callback raises, the clock still ends at the target time and the
        exception propagates; callbacks that were due after it stay queued
        and run on the next advance() or run_pending().
        """
        target = self.time + seconds
        fired = 0
        try:
            while self.queue and self.queue[0][0] <= target:
                due, handle, callback, args = heapq.heappop(self.queue)
                if handle in self.cancelled:
                    self.cancelled.remove(handle)
                    continue
                self.time = max(self.time, due)
                fired += 1
                callback(*args)
        finally:
            self.time = target
        return fired
