"""JSONL sink for appending scheduler statistics as JSON Lines."""

from __future__ import annotations

import json
from typing import Any

from ..hooks.hook_point import HookPoint
from ..utils import _json_default
from .base import FilePathSink


class JSONLSink(FilePathSink):
    """Append scheduler statistics as JSON Lines (one JSON object per line).

    Each record carries ``step`` and ``hook_point`` alongside the metrics,
    so a run's aggregate loss curve can be reloaded without the scheduler.
    """

    def emit(self, metrics: dict[str, Any], step: int, hook_point: HookPoint):
        if not metrics:
            return

        self._ensure_open()
        record = {"step": step, "hook_point": hook_point.name, **metrics}
        self._file.write(json.dumps(record, default=_json_default) + '\n')
        self._file.flush()
