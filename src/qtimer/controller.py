from types import MappingProxyType

from .config import CALLBACK_METHODS, check_delay, check_on_timeout
from .timer import Timer
from .ui import debug


class TimerController:
    """
    Owns the single timer of one wrapped instance.

    get_props is called whenever the delay or handler has to be resolved, so
    prop changes made while the timer is armed are seen when it fires.
    """

    def __init__(self, config, scheduler, get_props):
        self.config = config
        self.get_props = get_props
        self.timer = Timer(scheduler, self.timeout)
        self.callback_props = MappingProxyType(self.make_callback_props())

    def make_callback_props(self):
        props = {}
        for method in CALLBACK_METHODS:
            prop_name = self.config.prop_name(method)
            if method in self.config.passed_props and prop_name:
                props[prop_name] = getattr(self, method)
        return props

    @property
    def armed(self):
        return self.timer.active

    @property
    def remaining(self):
        return self.timer.remaining()

    def resolve_delay(self, delay_override=None):
        for delay in (delay_override, self.get_props().get('delay'), self.config.delay):
            if delay is not None:
                return delay
        return None

    def resolve_on_timeout(self, required=False):
        on_timeout = self.get_props().get('on_timeout')
        if on_timeout is None:
            on_timeout = self.config.on_timeout
        check_on_timeout(on_timeout, required)
        return on_timeout

    def resolve_armable_delay(self, delay_override=None):
        delay = self.resolve_delay(delay_override)
        check_delay(delay, True)
        self.resolve_on_timeout(required=True)
        return delay

    def start(self, delay_override=None):
        if self.armed:
            return
        delay = self.resolve_armable_delay(delay_override)
        debug("timer: armed for %ss", delay)
        self.timer.start(delay)

    def cancel(self):
        if self.armed:
            debug("timer: cancelled with %.3fs remaining", self.timer.remaining())
        self.timer.stop()

    def reset(self, delay_override=None):
        # checked before cancelling so a bad reset keeps the running timer
        self.resolve_armable_delay(delay_override)
        self.cancel()
        self.start(delay_override)

    def finish(self):
        on_timeout = self.resolve_on_timeout(required=True)
        self.cancel()
        self.fire(on_timeout)

    def timeout(self):
        self.fire(self.resolve_on_timeout(required=True))

    def fire(self, on_timeout):
        debug("timer: fired")
        on_timeout(dict(self.get_props()))
