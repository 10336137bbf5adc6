class Timer:
    """Single-shot timer on a Scheduler. At most one expiry is pending at a time."""

    def __init__(self, scheduler, callback):
        self.scheduler = scheduler
        self.callback = callback
        self.token = 0
        self.due = None
        self._handle = None

    @property
    def active(self):
        return self._handle is not None

    def remaining(self):
        if self.due is None:
            return None
        return max(0.0, self.due - self.scheduler.now())

    def start(self, duration_s):
        self.stop()
        self.token += 1
        self.due = self.scheduler.now() + duration_s
        self._handle = self.scheduler.call_later(duration_s, self.timeout, self.token)

    def stop(self):
        self.token += 1
        self.due = None
        if self._handle is not None:
            self.scheduler.cancel(self._handle)
            self._handle = None

    def timeout(self, token):
        # stale expiries already queued by the backend are dropped here
        if token == self.token:
            self._handle = None
            self.due = None
            self.callback()
