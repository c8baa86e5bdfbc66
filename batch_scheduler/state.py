"""Shared mutable scheduler state.

SchedulerState is the common record every selection policy owns by
composition. Policy-specific state (accumulators, exclusions, groups)
lives on the policy itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass
class SchedulerState:
    """Common state of one training run.

    Fields:
        batch: The scheduled elements. Not owned; indices are their identity.
        model: The trainable model. Not owned; only forwarded to the evaluator.
        apply_step: Re-selection cadence (0 disables).
        plot_step: Visualization cadence (0 disables).
        log_loss: Whether element losses are recorded in log scale.
        step: Number of completed ``update()`` calls.
        element_index: Currently selected element (0-based), None before
            the first selection.
        losses: Aggregate loss (sum of finite nominal losses), one entry
            per ``update()``.
        status_message: Last status line produced by ``update()``.
    """
    batch: Sequence[Any]
    model: Any = None
    apply_step: int = 1
    plot_step: int = 1
    log_loss: bool = False
    step: int = 0
    element_index: int | None = None
    losses: list[float] = field(default_factory=list)
    status_message: str = ""

    @property
    def num_elements(self) -> int:
        return len(self.batch)

    def reset(self):
        """Return to the pre-training position (step 0, nothing selected)."""
        self.step = 0
        self.element_index = None
        self.losses = []
        self.status_message = ""
