import datetime
import sys
from typing import Any
from zoneinfo import ZoneInfo

from rich.console import Console, RenderableType
from rich.style import Style

from .config import ConsoleConfig, ConsoleMode
from .themes import OLDarkTheme
from .utils import apply_style


class OLConsole:
    """
    Singleton console used for every human-readable message the scheduler emits.

    The console wraps a Rich `Console` and supports three modes: NORMAL (styled
    terminal output), LOGGING (plain text appended to a log file) and NULL (all
    output discarded). Only one instance exists per process; constructing it with a
    different `ConsoleConfig` re-initializes the singleton in place, so code that
    holds a reference keeps working after the configuration changes.

    LOGGING mode requires `log_file` to be set. Unsupported modes raise `ValueError`.

    :ivar _instance: Singleton instance of the `OLConsole` class.
    :vartype _instance: OLConsole
    :ivar _console: The Rich console that performs the actual output.
    :vartype _console: Console | None
    :ivar _cfg: Configuration for the console behavior and attributes.
    :vartype _cfg: ConsoleConfig | None
    :ivar _log_file_handle: Opened file handle for logging mode, if applicable.
    :vartype _log_file_handle: Any | None
    :ivar _mode: The operating mode for the console.
    :vartype _mode: ConsoleMode | None
    :ivar _tz_info: Timezone information for timestamped messages.
    :vartype _tz_info: ZoneInfo | None
    """
    _instance = None
    _console: Console|None = None
    _cfg: ConsoleConfig|None = None
    _log_file_handle: Any|None = None
    _mode: ConsoleMode|None = None
    _tz_info: ZoneInfo|None = None

    def __new__(cls, cfg: ConsoleConfig|None = None):
        """
        Return the process-wide console, creating it on first use.

        Passing a config that differs from the active one re-initializes the
        singleton with a warning.

        :param cfg: Optional configuration object. If None is provided on first
            construction, default parameters are used.
        :returns: The singleton instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize(cfg)
        elif cfg is not None and cls._instance._cfg != cfg:
            cls._instance.print_warning("OLConsole already initialized with a different config. Re-initializing with new config.")
            cls._instance._initialize(cfg)
        return cls._instance

    def _initialize(self, cfg: ConsoleConfig|None = None):
        """
        Set up the Rich console for the configured mode.

        :param cfg: Console settings. Defaults to `ConsoleConfig()` when None.
        :raises ValueError: When using LOGGING mode without a `log_file` or
            providing an unsupported console mode.
        :raises RuntimeError: When the log file cannot be opened.
        """
        # Close existing log file if re-initializing
        if self._log_file_handle:
            self._log_file_handle.close()
            self._log_file_handle = None

        if cfg is None:
            print("Warning: OLConsole initialized without explicit config.", file=sys.stderr)
            self._cfg = ConsoleConfig()
        else:
            self._cfg = cfg

        self._mode = self._cfg.mode
        self._tz_info = ZoneInfo(self._cfg.timezone) if self._cfg.timezone else None

        theme = OLDarkTheme()

        if self._mode == ConsoleMode.NULL:
            self._console = Console(quiet=True)
            return

        elif self._mode == ConsoleMode.LOGGING:
            if not self._cfg.log_file:
                raise ValueError("log_file must be specified in ConsoleConfig for logging mode")
            try:
                self._log_file_handle = open(self._cfg.log_file, "a+", encoding="utf-8")
                self._console = Console(
                    file=self._log_file_handle,
                    theme=theme,
                    force_terminal=False,
                    no_color=True,
                )
            except IOError as e:
                raise RuntimeError(f"Failed to open log file {self._cfg.log_file}: {e}") from e

        elif self._mode == ConsoleMode.NORMAL:
            no_color = not self._cfg.use_colors or self._cfg.color_system is None
            self._console = Console(
                theme=theme,
                no_color=no_color,
                color_system=self._cfg.color_system.value if not no_color else None,
                highlight=False,
            )

        else:
            raise ValueError(f"Unsupported console mode: {self._mode}")

    def _should_do_print(self):
        return self._mode != ConsoleMode.NULL

    def print(self, content: str|RenderableType = "", style: str|Style = ""):
        """
        Print text (timestamped, optionally styled) or a Rich renderable as-is.

        :param content: Markup string or a Rich renderable (Table, Panel, ...).
        :param style: Optional style for string content. Ignored for renderables.
        """
        if hasattr(content, '__rich_console__') or hasattr(content, '__rich__'):
            self._print_message(content, with_time=False)
            return
        if style:
            content = apply_style(content, str(style))
        self._print_message(content)

    def print_notification(self, content: str):
        self._print_message(f"[notification.icon]ⓘ[/notification.icon] {apply_style(content, 'notification.content')}")

    def print_warning(self, content: str):
        self._print_message(f"[warning.icon]⚠[/warning.icon] {apply_style(content, 'warning.content')}")

    def print_error(self, content: str):
        self._print_message(f"[error.icon]ⓧ[/error.icon] {apply_style(content, 'error.content')}")

    def rule(self, content, style: str|Style = ""):
        if not self._should_do_print():
            return
        self._console.rule(apply_style(content, 'rule.text'), style=style)

    def get_console_config(self) -> ConsoleConfig:
        return self._cfg

    def _timestamp(self) -> str:
        now = datetime.datetime.now(tz=datetime.timezone.utc).astimezone(self._tz_info)
        formatted = now.strftime(self._cfg.time_format.value)
        formatted = formatted.replace(":", apply_style(":", "time.separator"))
        return (
            f"{apply_style('[', 'time.brackets')}"
            f"{apply_style(formatted, 'time.numbers')}"
            f"{apply_style(']', 'time.brackets')}"
        )

    def _print_message(self, text: str|RenderableType, with_time=True):
        if not self._should_do_print():
            return
        if isinstance(text, str) and with_time and self._cfg.show_time:
            text = f"{self._timestamp()} {text}"
        self._console.print(text)
