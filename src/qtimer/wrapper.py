from .config import StaticConfig, check_delay, check_on_timeout
from .controller import TimerController
from . import ui


class WithTimer:
    """
    Host-side shell around a unit type. Subclasses are made by with_timer();
    the host calls attach() when the instance is shown and detach() when it
    goes away.
    """
    unit_cls = None
    config = None

    def __init__(self, scheduler=None, /, **props):
        check_delay(props.get('delay'), False)
        check_on_timeout(props.get('on_timeout'), False)
        self.props = props
        self.unit = None
        self.attached = False
        if scheduler is None:
            scheduler = ui.default_scheduler()
        self.controller = TimerController(self.config, scheduler, lambda: self.props)

    @property
    def callback_props(self):
        return self.controller.callback_props

    @property
    def armed(self):
        return self.controller.armed

    def start(self, delay_override=None):
        self.controller.start(delay_override)

    def cancel(self):
        self.controller.cancel()

    def reset(self, delay_override=None):
        self.controller.reset(delay_override)

    def finish(self):
        self.controller.finish()

    def child_props(self):
        # NOTE: a prop sharing a name with an injected callback hides the callback
        return {**self.callback_props, **self.props}

    def render(self):
        return self.unit_cls(**self.child_props())

    def set_props(self, **changes):
        props = self.props | changes
        check_delay(props.get('delay'), False)
        check_on_timeout(props.get('on_timeout'), False)
        self.props = props
        if self.attached:
            self.unit = self.render()

    def attach(self):
        if self.attached:
            raise RuntimeError("%s is already attached" % (type(self).__name__,))
        if self.config.start_on_mount:
            self.start()
        self.attached = True
        self.unit = self.render()

    def detach(self):
        self.cancel()
        self.attached = False
        self.unit = None


def with_timer(delay=None, on_timeout=None, options=None):
    """
    Validates the wrap-time settings and returns a decorator that turns a unit
    type into a WithTimer subclass. The unit receives its own props plus the
    timer callbacks named by the prop name options.
    """
    config = StaticConfig(delay, on_timeout, options)

    def wrap(unit_cls):
        name = 'WithTimer(%s)' % (getattr(unit_cls, '__name__', repr(unit_cls)),)
        return type(name, (WithTimer,), {
            'unit_cls': staticmethod(unit_cls),
            'config': config,
            '__qualname__': name,
            '__module__': getattr(unit_cls, '__module__', __name__),
        })
    return wrap
