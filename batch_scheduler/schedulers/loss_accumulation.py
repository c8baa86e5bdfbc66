"""Loss-accumulation selection: prevents starvation of low-loss elements."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np
import torch.nn.functional as F

from ..registry import SchedulerRegistry
from .loss_driven import LossDrivenScheduler


@SchedulerRegistry.register
class LossAccumulationScheduler(LossDrivenScheduler):
    """Select the element with the greatest accumulated loss.

    Each selection pass adds every element's (possibly cached) loss to its
    accumulator, after zeroing the accumulator of the currently selected
    element. An element that is never picked keeps accumulating until it
    overtakes the others, so small-loss elements are eventually trained.
    Ties go to the lowest index.
    """

    name = "loss_accumulation"

    def __init__(
        self,
        model: Any,
        batch: Sequence[Any],
        loss_fn: Callable = F.mse_loss,
        **kwargs,
    ):
        super().__init__(model, batch, loss_fn, **kwargs)
        self.loss_accu = np.zeros(len(batch), dtype=np.float64)

    def apply(self, verbose=True):
        # The current element was just trained; restart its accumulation
        if self.state.element_index is not None:
            self.loss_accu[self.state.element_index] = 0.0

        refreshed = self.is_refresh_pass()
        losses = self.current_losses(refreshed)
        for i, loss in enumerate(losses):
            self.loss_accu[i] += loss

        next_index = 0
        for i in range(len(self.loss_accu)):
            if self.loss_accu[i] > self.loss_accu[next_index]:
                next_index = i

        if verbose:
            self._print_pass(losses, refreshed, next_index)
        return next_index
