"""Metric sinks that consume the scheduler's aggregate loss statistics.

Sinks receive per-update metrics from the driver and route them to
different destinations (console, JSONL).
"""

from .base import MetricSink, FilePathSink
from .console import ConsoleSink
from .jsonl import JSONLSink

__all__ = [
    'MetricSink',
    'FilePathSink',
    'ConsoleSink',
    'JSONLSink',
]
