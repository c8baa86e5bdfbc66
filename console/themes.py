from rich.style import Style
from rich.theme import Theme


class OLDarkTheme(Theme):
    """
    Dark color palette for scheduler console output.

    Groups styles by role: message types (notification, warning, error),
    timestamps, rules, metric values, and the selection table rendered by
    the visualization hook.

    :ivar BLUE: Light blue used for notifications and rules.
    :type BLUE: str
    :ivar GREEN: Green used for the currently selected element.
    :type GREEN: str
    :ivar YELLOW: Yellow for warnings and separators.
    :type YELLOW: str
    :ivar RED: Red used for error indicators.
    :type RED: str
    :ivar MED_GREY: Medium grey for subtle text.
    :type MED_GREY: str
    :ivar BACKGROUND: Base background color for the theme.
    :type BACKGROUND: str
    """
    BLUE = '#61AFEF'
    RICH_BLUE = '#4B6BFF'
    CYAN = '#56B6C2'
    GREEN = '#98C379'
    YELLOW = '#E5C07B'
    RED = '#E06C75'
    ORANGE = '#D19A66'
    MED_GREY = '#8A8F98'
    PURPLE = '#663399'
    DARK_PURPLE = '#4B0082'
    LAVENDER = '#B87FD9'
    MAGENTA = '#BE50AE'
    BACKGROUND = '#282C34'
    DEFAULT_TEXT = '#F8E8EC'

    def __init__(self):
        super().__init__({
            # Basic colors
            "blue": Style(color=self.BLUE),
            "cyan": Style(color=self.CYAN),
            "green": Style(color=self.GREEN),
            "yellow": Style(color=self.YELLOW),
            "red": Style(color=self.RED),
            "orange": Style(color=self.ORANGE),
            "med_grey": Style(color=self.MED_GREY),
            "magenta": Style(color=self.MAGENTA),

            "default": Style(color=self.DEFAULT_TEXT),
            "text": Style(color=self.DEFAULT_TEXT),

            # Content type styles
            "notification.icon": Style(color=self.PURPLE),
            "notification.content": Style(color=self.BLUE),
            "warning.icon": Style(color=self.ORANGE),
            "warning.content": Style(color=self.YELLOW),
            "error.icon": Style(color=self.RED),
            "error.content": Style(color=self.RED),
            "info.icon": Style(color=self.BLUE),
            "info.content": Style(color=self.DEFAULT_TEXT),
            "success": Style(color=self.GREEN, bold=True),

            # Header types
            "rule.text": Style(color=self.ORANGE),
            "rule.line": Style(color=self.BLUE),

            # Time display
            "time.numbers": Style(color=self.ORANGE),
            "time.separator": Style(color=self.YELLOW),
            "time.brackets": Style(color=self.DARK_PURPLE),

            # Metrics
            "metric.value": Style(color=self.CYAN),
            "metric.label": Style(color=self.MED_GREY),
            "label": Style(color=self.MED_GREY),
            "detail": Style(color=self.MED_GREY),
            "table.header": Style(color=self.MED_GREY, bold=True),
            "hook.name": Style(color=self.GREEN, bold=True),

            # Selection table
            "selection.current": Style(color=self.GREEN, bold=True),
            "selection.previous": Style(color=self.LAVENDER),
            "selection.unevaluated": Style(color=self.MED_GREY, italic=True),
        })
