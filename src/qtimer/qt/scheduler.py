import time

from PySide6.QtCore import QTimer

from .. import scheduler


class Scheduler(scheduler.Scheduler):
    def __init__(self):
        self.timers = set()

    def now(self):
        return time.monotonic()

    def call_later(self, delay_s, callback, *args):
        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._timeout(timer, callback, args))
        self.timers.add(timer)
        timer.start(int(1000 * delay_s))
        return timer

    def cancel(self, handle):
        handle.stop()
        self.timers.discard(handle)

    def _timeout(self, timer, callback, args):
        self.timers.discard(timer)
        callback(*args)
