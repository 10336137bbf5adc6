from .config import CALLBACK_METHODS, DEFAULT_OPTIONS, ConfigError, StaticConfig
from .controller import TimerController
from .wrapper import WithTimer, with_timer
