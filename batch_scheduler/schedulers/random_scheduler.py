"""Random selection policies: uniform and two-stage (grouped) sampling."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from ..registry import SchedulerRegistry
from ..utils.reproducibility import make_rng
from .base import BatchScheduler


@SchedulerRegistry.register
class RandomScheduler(BatchScheduler):
    """Pick a uniformly random element every selection pass (baseline).

    Args:
        rng: Generator to sample from. Defaults to one seeded with
            ``config.seed``.
    """

    name = "random"

    def __init__(
        self,
        model: Any,
        batch: Sequence[Any],
        *,
        rng: np.random.Generator | None = None,
        **kwargs,
    ):
        super().__init__(model, batch, **kwargs)
        self.rng = rng if rng is not None else make_rng(self.config.seed)

    def apply(self, verbose=True):
        next_index = int(self.rng.integers(0, self.state.num_elements))
        if verbose:
            self._print_selection(next_index)
        return next_index


@SchedulerRegistry.register
class TwoStageRandomScheduler(BatchScheduler):
    """Pick a random group, then a random element from that group.

    Groups may overlap or leave elements out. Every group is equally
    likely regardless of its size, so elements in small groups are
    sampled more often than elements in large ones; grouping elements by
    experiment or trajectory gives each experiment equal weight.

    Args:
        indices: Groups of 0-based element indices. Must be non-empty,
            every group non-empty, every index inside the batch.
        rng: Generator to sample from. Defaults to one seeded with
            ``config.seed``.
    """

    name = "two_stage_random"

    def __init__(
        self,
        model: Any,
        batch: Sequence[Any],
        indices: Iterable[Iterable[int]],
        *,
        rng: np.random.Generator | None = None,
        **kwargs,
    ):
        super().__init__(model, batch, **kwargs)
        self.indices = tuple(tuple(int(i) for i in group) for group in indices)
        if not self.indices:
            raise ValueError("indices must contain at least one group")
        for g, group in enumerate(self.indices):
            if not group:
                raise ValueError(f"indices group {g} is empty")
            out_of_range = [i for i in group if not 0 <= i < len(batch)]
            if out_of_range:
                raise ValueError(
                    f"indices group {g} out of range for batch of {len(batch)}: {out_of_range}"
                )
        self.rng = rng if rng is not None else make_rng(self.config.seed)

    def apply(self, verbose=True):
        group = self.indices[int(self.rng.integers(0, len(self.indices)))]
        next_index = group[int(self.rng.integers(0, len(group)))]
        if verbose:
            self._print_selection(next_index)
        return next_index
