"""Worst-grow selection: train on the element whose loss grows fastest."""

from __future__ import annotations

import math
from typing import Any, Sequence

from ..elements import _to_float
from ..registry import SchedulerRegistry
from .loss_driven import LossDrivenScheduler


def loss_derivative(history: Sequence, current: float | None = None) -> float:
    """Estimate the loss growth of one element from its history.

    Returns ``current - history[-2]`` when at least two losses are
    recorded, otherwise the current loss itself, so elements with a large
    absolute loss win on a cold start. ``current`` defaults to
    ``history[-1]``.
    """
    if current is None:
        current = _to_float(history[-1])
    if len(history) >= 2:
        return current - _to_float(history[-2])
    return current


@SchedulerRegistry.register
class WorstGrowScheduler(LossDrivenScheduler):
    """Select the element with the greatest loss growth between evaluations.

    Every selection pass recomputes every element's loss, recorded in log
    scale, and compares ``log(loss_now) - log(loss_before)``. Ties go to the
    lowest index. ``update_step`` is ignored: every pass refreshes.
    """

    name = "worst_grow"
    log_loss = True

    def apply(self, verbose=True):
        losses = self.current_losses(refresh=True)

        max_derivative = -math.inf
        max_index = None
        for i, (element, loss) in enumerate(zip(self.state.batch, losses)):
            derivative = loss_derivative(element.losses, loss)
            if derivative > max_derivative:
                max_derivative = derivative
                max_index = i

        if verbose:
            self._print_pass(losses, True, max_index)
        return max_index
