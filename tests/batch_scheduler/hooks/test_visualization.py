"""Tests for batch_scheduler/hooks/visualization.py: SelectionTableHook."""

import io
from unittest.mock import patch

from rich.console import Console
from rich.table import Table

from console.themes import OLDarkTheme
from batch_scheduler.hooks.visualization import SelectionTableHook
from batch_scheduler.state import SchedulerState


def _render(table):
    """Render a table to plain text with the scheduler theme."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, theme=OLDarkTheme(), color_system=None)
    console.print(table)
    return buffer.getvalue()


class TestSelectionTableHook:

    def test_one_row_per_element(self, make_batch):
        state = SchedulerState(batch=make_batch([[1.0], [2.0], [3.0]]), step=4, element_index=2)
        table = SelectionTableHook().build_table(state, previous_index=0)
        assert table.row_count == 3
        assert table.title == "Step 4"
        assert table.caption is None

    def test_marks_current_and_previous(self, make_batch):
        state = SchedulerState(batch=make_batch([[1.0], [2.0], [3.0]]), element_index=2)
        text = _render(SelectionTableHook().build_table(state, previous_index=0))
        lines = text.splitlines()
        row_e0 = next(line for line in lines if " e0 " in line)
        row_e2 = next(line for line in lines if " e2 " in line)
        assert "previous" in row_e0
        assert "current" in row_e2

    def test_unevaluated_and_loss_columns(self, make_batch):
        state = SchedulerState(batch=make_batch([[], [0.5, 123.456]]), element_index=1)
        text = _render(SelectionTableHook(width=10).build_table(state, None))
        assert "never" in text
        assert "1.2346e+02" in text

    def test_hidden_rows_caption(self, make_batch):
        state = SchedulerState(batch=make_batch([[1.0]] * 5), element_index=0)
        table = SelectionTableHook(max_rows=2).build_table(state, None)
        assert table.row_count == 2
        assert table.caption == "(3 more elements hidden)"

    def test_visualize_prints_table(self, make_batch):
        hook = SelectionTableHook()
        state = SchedulerState(batch=make_batch([[1.0]]), element_index=0)
        with patch.object(hook._console, "print") as mock_print:
            hook.visualize(state, None)
        mock_print.assert_called_once()
        assert isinstance(mock_print.call_args.args[0], Table)
