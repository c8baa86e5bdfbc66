"""Selection policies and the shared scheduler driver.

Importing this package registers every policy with SchedulerRegistry.
"""

from ..registry import SchedulerRegistry
from .base import BatchScheduler
from .loss_driven import LossDrivenScheduler
from .refresh import refresh_losses, refresh_element
from .worst_element import WorstElementScheduler
from .loss_accumulation import LossAccumulationScheduler
from .worst_grow import WorstGrowScheduler, loss_derivative
from .random_scheduler import RandomScheduler, TwoStageRandomScheduler
from .sequential import SequentialScheduler


def build_scheduler(name: str, model, batch, *args, **kwargs) -> BatchScheduler:
    """Construct the scheduler registered under ``name``.

    Extra positional and keyword arguments go to the scheduler's
    constructor (e.g. ``loss_fn`` or ``indices``).
    """
    return SchedulerRegistry.get(name)(model, batch, *args, **kwargs)


__all__ = [
    'BatchScheduler',
    'LossDrivenScheduler',
    'refresh_losses', 'refresh_element',
    'WorstElementScheduler',
    'LossAccumulationScheduler',
    'WorstGrowScheduler', 'loss_derivative',
    'RandomScheduler', 'TwoStageRandomScheduler',
    'SequentialScheduler',
    'build_scheduler',
]
