class Scheduler:
    """
    One-shot delayed callbacks on the host's event loop.

    Backends implement call_later / cancel / now. A handle returned by
    call_later is opaque to callers; the only thing they may do with it
    is pass it back to cancel().
    """

    def call_later(self, delay_s, callback, *args):
        raise NotImplementedError()

    def cancel(self, handle):
        raise NotImplementedError()

    def now(self):
        raise NotImplementedError()
