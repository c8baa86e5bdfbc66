from .config import ConsoleConfig, ConsoleMode, ColorSystem, TimeFormat
from .themes import OLDarkTheme
from .utils import apply_style
from .olconsole import OLConsole

__all__ = [
    "OLConsole",
    "ConsoleConfig",
    "ConsoleMode",
    "ColorSystem",
    "TimeFormat",
    "OLDarkTheme",
    "apply_style",
]
