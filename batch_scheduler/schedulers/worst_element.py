"""Worst-element selection: train on the element with the largest loss."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

import torch.nn.functional as F

from ..registry import SchedulerRegistry
from .loss_driven import LossDrivenScheduler


@SchedulerRegistry.register
class WorstElementScheduler(LossDrivenScheduler):
    """Select the element with the greatest nominal loss.

    Every ``update_step`` steps all element losses are recomputed; in
    between, the last recorded losses are reused. Elements listed in
    ``exclude_indices`` are never selected. Ties go to the lowest index.

    If no eligible element has a positive loss, ``apply()`` returns None
    and the driver keeps the previous selection.
    """

    name = "worst_element"

    def __init__(
        self,
        model: Any,
        batch: Sequence[Any],
        loss_fn: Callable = F.mse_loss,
        *,
        exclude_indices: Iterable[int] | None = None,
        **kwargs,
    ):
        super().__init__(model, batch, loss_fn, **kwargs)
        self.exclude_indices = frozenset(exclude_indices or ())
        out_of_range = sorted(i for i in self.exclude_indices if not 0 <= i < len(batch))
        if out_of_range:
            raise ValueError(
                f"exclude_indices out of range for batch of {len(batch)}: {out_of_range}"
            )

    def apply(self, verbose=True):
        refreshed = self.is_refresh_pass()
        losses = self.current_losses(refreshed)

        max_loss = 0.0
        max_index = None
        for i, loss in enumerate(losses):
            if i in self.exclude_indices:
                continue
            if loss > max_loss:
                max_loss = loss
                max_index = i

        if verbose:
            self._print_pass(losses, refreshed, max_index)
        return max_index
