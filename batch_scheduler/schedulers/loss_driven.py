"""Shared base for policies that select by per-element loss."""

from __future__ import annotations

from typing import Any, Callable, Sequence

import torch.nn.functional as F

from ..elements import nominal_loss, finite_or_zero
from ..evaluation import ElementEvaluator, TorchElementEvaluator
from ..utils.formatting import round_to_length
from .base import BatchScheduler
from .refresh import refresh_losses


class LossDrivenScheduler(BatchScheduler):
    """Base for schedulers that re-evaluate elements to compare their losses.

    Holds the loss function, the evaluator and the refresh cadence
    (``update_step``, counted in scheduler steps: a selection pass is a
    refresh pass when ``step % update_step == 0``).

    Args:
        model: The trainable model.
        batch: The scheduled elements.
        loss_fn: Loss function forwarded to the evaluator.
        evaluator: Forward-run/loss collaborator. Defaults to
            ``TorchElementEvaluator()``.
        **kwargs: Passed to ``BatchScheduler`` (config, visualizer, sinks,
            config overrides such as ``update_step``).
    """

    uses_run_kwargs = True

    def __init__(
        self,
        model: Any,
        batch: Sequence[Any],
        loss_fn: Callable = F.mse_loss,
        *,
        evaluator: ElementEvaluator | None = None,
        **kwargs,
    ):
        super().__init__(model, batch, **kwargs)
        self.loss_fn = loss_fn
        self.evaluator = evaluator if evaluator is not None else TorchElementEvaluator()
        self.update_step = self.config.update_step

    def is_refresh_pass(self) -> bool:
        return self.state.step % self.update_step == 0

    def refresh(self) -> list[float]:
        """Re-evaluate every element and return the recorded losses."""
        return refresh_losses(
            self.evaluator,
            self.state.model,
            self.state.batch,
            self.loss_fn,
            log_loss=self.state.log_loss,
            run_kwargs=self.run_kwargs,
            workers=self.config.refresh_workers,
        )

    def current_losses(self, refresh: bool) -> list[float]:
        """Per-element losses for one selection pass.

        Cached reads coerce the never-evaluated sentinel to 0. Freshly
        computed losses are returned as recorded, so a diverged element
        (loss ``inf``) stays the largest candidate.
        """
        if refresh:
            return self.refresh()
        return [finite_or_zero(nominal_loss(element)) for element in self.state.batch]

    def _print_pass(self, losses: list[float], refreshed: bool, next_index: int | None):
        avg_loss = sum(losses) / len(losses)
        max_loss = max(0.0, max(losses))
        source = "refreshed" if refreshed else "cached"
        self._console.print(
            f"Current step: {self.state.step} | {source} losses | "
            f"AVG: {round_to_length(avg_loss, 8)} | MAX: {round_to_length(max_loss, 8)} | "
            f"Current element={self.state.element_index} | Next element={next_index}"
        )
