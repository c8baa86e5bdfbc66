"""Visualization hook contract and the console selection table.

Schedulers call ``visualize(state, previous_index)`` after the initial
selection (when plotting is enabled) and on every ``plot_step``-th
update. Hooks are read-only observers of the scheduler state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rich import box
from rich.table import Table

from console import OLConsole
from ..elements import nominal_loss
from ..utils.formatting import round_to_length

if TYPE_CHECKING:
    from ..state import SchedulerState


class VisualizationHook(ABC):
    """Base class for observers that render the scheduler's selection.

    Subclasses set ``name`` and implement ``visualize()``. Failures raised
    inside a hook are the hook's responsibility; the scheduler does not
    retry or swallow them.
    """

    name: str = "base_visualizer"

    @abstractmethod
    def visualize(self, state: 'SchedulerState', previous_index: int | None) -> None:
        """Render the transition from ``previous_index`` to ``state.element_index``."""
        ...


class SelectionTableHook(VisualizationHook):
    """Print every element's nominal loss with the selection change marked.

    Args:
        width: Width passed to ``round_to_length`` for the loss column.
        max_rows: Elements beyond this many are summarized in a caption.
    """

    name = "selection_table"

    def __init__(self, width: int = 10, max_rows: int = 50):
        self.width = width
        self.max_rows = max_rows
        self._console = OLConsole()

    def build_table(self, state: 'SchedulerState', previous_index: int | None) -> Table:
        table = Table(
            box=box.SIMPLE,
            show_header=True,
            header_style="table.header",
            title=f"Step {state.step}",
            title_style="detail",
            padding=(0, 1),
        )
        table.add_column("Index", justify="right", style="label")
        table.add_column("Element")
        table.add_column("Loss", justify="right", style="metric.value")
        table.add_column("Evaluations", justify="right", style="detail")
        table.add_column("")

        shown = min(state.num_elements, self.max_rows)
        for i in range(shown):
            element = state.batch[i]
            history = getattr(element, 'losses', ())
            loss = nominal_loss(element)
            if len(history) == 0:
                loss_str = "[selection.unevaluated]never[/selection.unevaluated]"
            else:
                loss_str = round_to_length(loss, self.width)

            marker = ""
            if i == state.element_index:
                marker = "[selection.current]◀ current[/selection.current]"
            elif i == previous_index:
                marker = "[selection.previous]previous[/selection.previous]"

            label = getattr(element, 'name', None) or ""
            table.add_row(str(i), label, loss_str, str(len(history)), marker)

        if state.num_elements > shown:
            table.caption = f"({state.num_elements - shown} more elements hidden)"
            table.caption_style = "detail"
        return table

    def visualize(self, state, previous_index):
        self._console.print(self.build_table(state, previous_index))
