"""Console sink for Rich-based metric display."""

from __future__ import annotations

from typing import Any

from rich import box
from rich.table import Table

from console import OLConsole
from ..hooks.hook_point import HookPoint
from .base import MetricSink, _format_metric_value


class ConsoleSink(MetricSink):
    """Display scheduler statistics in a Rich table via OLConsole.

    Only every ``every``-th UPDATE emit is printed so long runs don't
    spam the console; INITIALIZE emits are always printed.
    """

    def __init__(self, every: int = 1):
        if every <= 0:
            raise ValueError(f"every must be > 0, got {every}")
        self.every = every
        self._console = OLConsole()
        self._emit_count = 0

    def emit(self, metrics: dict[str, Any], step: int, hook_point: HookPoint):
        if not metrics:
            return
        if hook_point == HookPoint.UPDATE:
            self._emit_count += 1
            if self._emit_count % self.every != 0:
                return
        self._console.print(self.build_table(metrics, step, hook_point))

    @staticmethod
    def build_table(metrics: dict[str, Any], step: int, hook_point: HookPoint) -> Table:
        table = Table(
            box=box.SIMPLE,
            show_header=True,
            header_style="table.header",
            title=f"{hook_point.name.lower()} @ step {step}",
            title_style="detail",
            padding=(0, 1),
        )
        table.add_column("Group", style="hook.name")
        table.add_column("Metric")
        table.add_column("Value", justify="right", style="metric.value")

        for key in sorted(metrics.keys()):
            parts = key.split("/", 1)
            group = parts[0] if len(parts) > 1 else ""
            metric_name = parts[1] if len(parts) > 1 else parts[0]
            table.add_row(group, metric_name, _format_metric_value(metrics[key]))
        return table
