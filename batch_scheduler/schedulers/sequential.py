"""Sequential (round-robin) selection."""

from ..registry import SchedulerRegistry
from .base import BatchScheduler


@SchedulerRegistry.register
class SequentialScheduler(BatchScheduler):
    """Run over all elements in index order, wrapping around at the end."""

    name = "sequential"

    def apply(self, verbose=True):
        current = self.state.element_index
        next_index = 0 if current is None else current + 1
        if next_index >= self.state.num_elements:
            next_index = 0

        if verbose:
            self._print_selection(next_index)
        return next_index
