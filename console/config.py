from dataclasses import dataclass
from enum import Enum


class TimeFormat(Enum):
    """Time display format options for console timestamps."""
    DEFAULT = "%I:%M:%S %p"              # 12-hour with AM/PM
    NO_AM_PM = "%I:%M:%S"                # 12-hour without AM/PM
    TWENTY_FOUR_HOUR = "%H:%M:%S"        # 24-hour with seconds
    TWENTY_FOUR_HOUR_NO_SECONDS = "%H:%M" # 24-hour without seconds


class ConsoleMode(Enum):
    """Console operation mode."""
    NORMAL = "normal"   # Standard Rich console output
    LOGGING = "logging" # Output to log file only
    NULL = "null"       # No output at all


class ColorSystem(Enum):
    """Color system configuration for the console."""
    AUTO = "auto"
    STANDARD = "standard"
    COLOR_256 = "256"
    TRUECOLOR = "truecolor"
    WINDOWS = "windows"


@dataclass
class ConsoleConfig:
    """
    Configuration for the OLConsole display system.

    :ivar mode: The operating mode for the console (NORMAL, LOGGING, NULL).
    :ivar use_colors: Whether to use colored output.
    :ivar show_time: Whether to show timestamps on messages.
    :ivar time_format: Format for timestamp display.
    :ivar timezone: Timezone for timestamp display (e.g., "UTC", "America/New_York").
    :ivar log_file: Path to log file when using LOGGING mode.
    :ivar color_system: Color system to use for output.
    """
    mode: ConsoleMode = ConsoleMode.NORMAL
    use_colors: bool = True
    show_time: bool = True
    time_format: TimeFormat = TimeFormat.DEFAULT
    timezone: str = "UTC"
    log_file: str | None = None
    color_system: ColorSystem = ColorSystem.TRUECOLOR
