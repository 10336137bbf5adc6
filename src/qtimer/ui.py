import importlib
import os
import sys

UI_TYPE = os.environ.get('UI', 'qt')
DEBUG = os.environ.get('DEBUG')

CLASSES = {
    'scheduler': 'scheduler.Scheduler',
}

_schedulers = {}


def debug(fmt, *args):
    if DEBUG:
        print(fmt % args, file=sys.stderr)


def cls(name, ui_type=None):
    ui_type = ui_type or UI_TYPE
    path = CLASSES[name.lower()]
    module_suffix, class_name = path.rsplit('.', 1)
    module_name = 'qtimer.%s.%s' % (ui_type, module_suffix)
    try:
        module = importlib.import_module(module_name)
        return getattr(module, class_name)
    except (ModuleNotFoundError, AttributeError):
        debug("WARNING: failed to import %s.%s", module_name, class_name)
        def _fail(*args, **kwargs):
            raise Exception("Failed to import %s.%s" % (module_name, class_name))
        return _fail


def default_scheduler(ui_type=None):
    ui_type = ui_type or UI_TYPE
    if ui_type not in _schedulers:
        _schedulers[ui_type] = cls('scheduler', ui_type)()
    return _schedulers[ui_type]
