"""Element-selection schedulers for training on a fixed batch.

At every training step a scheduler decides which single batch element
receives the next optimization update, from accumulated or freshly
measured per-element losses:

- BatchScheduler: shared driver (initialize/update) every policy inherits
- Policies: WorstElement, LossAccumulation, WorstGrow, Random, Sequential,
  TwoStageRandom (looked up by name via SchedulerRegistry)
- ElementEvaluator / TorchElementEvaluator: forward-run and loss recording
- Hooks and sinks: selection visualization and aggregate-loss output
"""

# Core abstractions
from .config import SchedulerConfig
from .state import SchedulerState
from .elements import BatchElement, nominal_loss
from .evaluation import ElementEvaluator, TorchElementEvaluator
from .registry import Registry, SchedulerRegistry
from .schedulers import (
    BatchScheduler, LossDrivenScheduler,
    WorstElementScheduler, LossAccumulationScheduler, WorstGrowScheduler,
    RandomScheduler, SequentialScheduler, TwoStageRandomScheduler,
    build_scheduler, refresh_losses, loss_derivative,
)

# Hooks and sinks
from .hooks import HookPoint, Cadence, VisualizationHook, SelectionTableHook
from .sinks import MetricSink, FilePathSink, ConsoleSink, JSONLSink

# Shared utilities
from .utils import round_to_length, format_status, make_rng

__all__ = [
    # Core abstractions
    'SchedulerConfig',
    'SchedulerState',
    'BatchElement', 'nominal_loss',
    'ElementEvaluator', 'TorchElementEvaluator',
    'Registry', 'SchedulerRegistry',
    'BatchScheduler', 'LossDrivenScheduler',
    'WorstElementScheduler', 'LossAccumulationScheduler', 'WorstGrowScheduler',
    'RandomScheduler', 'SequentialScheduler', 'TwoStageRandomScheduler',
    'build_scheduler', 'refresh_losses', 'loss_derivative',
    # Hooks and sinks
    'HookPoint', 'Cadence', 'VisualizationHook', 'SelectionTableHook',
    'MetricSink', 'FilePathSink', 'ConsoleSink', 'JSONLSink',
    # Utilities
    'round_to_length', 'format_status', 'make_rng',
]
