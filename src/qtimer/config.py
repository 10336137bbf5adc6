from numbers import Real
from types import MappingProxyType

CALLBACK_METHODS = ('cancel', 'finish', 'reset', 'start')

DEFAULT_OPTIONS = MappingProxyType({
    'cancel_prop_name': 'cancel_timer',
    'finish_prop_name': 'finish_timer',
    'passed_props':     CALLBACK_METHODS,
    'reset_prop_name':  'reset_timer',
    'start_on_mount':   False,
    'start_prop_name':  'start_timer',
})


class ConfigError(ValueError):
    pass


def check_delay(delay, required):
    if not required and delay is None:
        return
    if isinstance(delay, bool) or not isinstance(delay, Real) or not delay >= 0:
        raise ConfigError("with_timer() delay must be >= 0. Current value: %r" % (delay,))


def check_on_timeout(on_timeout, required):
    if not required and on_timeout is None:
        return
    if not callable(on_timeout):
        raise ConfigError("with_timer() on_timeout must be a function. Current value: %r" % (
            on_timeout,))


def check_prop_name(prop_name, option_name):
    if prop_name is None or prop_name == '' or isinstance(prop_name, str):
        return
    raise ConfigError("with_timer() %s option must be of type string. Current value: %r" % (
        option_name, prop_name))


def check_passed_props(passed_props):
    if isinstance(passed_props, (list, tuple)) and \
       all(name in CALLBACK_METHODS for name in passed_props):
        return
    raise ConfigError("with_timer() passed_props option contains an invalid value. "
                      "Valid values: %s. Current value: %r" % (
                          ', '.join(CALLBACK_METHODS), passed_props))


def check_boolean_option(value, option_name):
    if not isinstance(value, bool):
        raise ConfigError("with_timer() %s option is not a boolean. Current value: %r" % (
            option_name, value))


class StaticConfig:
    """
    Wrap-time settings shared by every instance of one wrapped type.
    Validated on construction and read-only afterwards.
    """
    prop_name_options = ('cancel_prop_name', 'finish_prop_name',
                         'reset_prop_name', 'start_prop_name')

    def __init__(self, delay=None, on_timeout=None, options=None):
        if options is None:
            options = {}
        if not hasattr(options, 'keys'):
            raise ConfigError("with_timer() options must be a mapping. Current value: %r" % (
                options,))
        unknown = sorted(set(options) - set(DEFAULT_OPTIONS))
        if unknown:
            raise ConfigError("with_timer() does not take option(s) %s. Valid options: %s" % (
                ', '.join(map(repr, unknown)), ', '.join(DEFAULT_OPTIONS)))
        options = dict(DEFAULT_OPTIONS) | dict(options)

        check_delay(delay, False)
        check_on_timeout(on_timeout, False)
        for option_name in self.prop_name_options:
            check_prop_name(options[option_name], option_name)
        check_passed_props(options['passed_props'])
        check_boolean_option(options['start_on_mount'], 'start_on_mount')

        values = {'delay': delay, 'on_timeout': on_timeout} | options
        values['passed_props'] = tuple(options['passed_props'])
        for k, v in values.items():
            object.__setattr__(self, k, v)

    def __setattr__(self, key, value):
        raise AttributeError("%s is read-only" % (type(self).__name__,))

    def prop_name(self, method):
        return getattr(self, '%s_prop_name' % (method,))

    def __repr__(self):
        return '%s(delay=%r, passed_props=%r, start_on_mount=%r)' % (
            type(self).__name__, self.delay, self.passed_props, self.start_on_mount)
