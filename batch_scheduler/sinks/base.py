"""Sink base classes and shared formatting helpers.

Defines the MetricSink ABC and the FilePathSink base for sinks that
write aggregate scheduler statistics to a file.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..hooks.hook_point import HookPoint


def _format_metric_value(value: Any) -> str:
    """Format a metric value for console display."""
    if value is None:
        return "-"
    if isinstance(value, float):
        return _format_number(value)
    return str(value)


def _format_number(value: float) -> str:
    """Format a numeric value with appropriate precision."""
    if value != 0 and (abs(value) < 0.001 or abs(value) > 10000):
        return f"{value:.4e}"
    return f"{value:.6f}"


class MetricSink(ABC):
    """Base class for aggregate-loss output destinations."""

    @abstractmethod
    def emit(self, metrics: dict[str, Any], step: int, hook_point: HookPoint):
        """Receive the statistics recorded by one driver call.

        Args:
            metrics: Namespaced metric dict (e.g., "scheduler/loss_sum": 1.23).
            step: Scheduler step after the call.
            hook_point: Which driver entry point produced these metrics.
        """
        ...

    def flush(self):
        """Flush any buffered output. Called at end of training."""
        pass


class FilePathSink(MetricSink):
    """Base for sinks that append to a fixed file path.

    The file is opened lazily on the first emit, creating parent
    directories as needed, and closed by ``flush()``.
    """

    def __init__(self, filepath: str | Path):
        self._filepath = Path(filepath)
        self._file = None

    @property
    def filepath(self) -> Path:
        return self._filepath

    def _ensure_open(self):
        if self._file is None:
            self._filepath.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self._filepath, 'a', newline='')

    def _close_file(self):
        """Flush and close the current file handle if open."""
        if self._file is not None:
            self._file.flush()
            self._file.close()
            self._file = None

    def flush(self):
        self._close_file()
