"""Batch elements and their loss histories.

A batch is any fixed-length indexable sequence of elements. The scheduler
only ever reads an element's ``losses`` history; evaluating an element
(and thereby appending to that history) is the evaluator's job.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass
class BatchElement:
    """A single evaluable training element with its loss history.

    Fields beyond ``losses`` are deliberately untyped: the evaluator
    defines what ``inputs``, ``targets`` and ``outputs`` contain (tensors,
    tuples of tensors, trajectories...).
    """
    inputs: Any = None
    targets: Any = None
    losses: list[float] = field(default_factory=list)
    outputs: Any = None
    name: str | None = None


def _to_float(value) -> float:
    if hasattr(value, 'item'):
        return float(value.item())
    return float(value)


def nominal_loss(element: Any) -> float:
    """Most recently recorded loss of ``element``, or ``math.inf`` if never evaluated.

    Accepts either an element exposing a ``losses`` sequence or a bare
    loss history. Torch and numpy scalars are converted to ``float``.
    """
    history: Sequence = element.losses if hasattr(element, 'losses') else element
    if len(history) == 0:
        return math.inf
    return _to_float(history[-1])


def finite_or_zero(loss: float) -> float:
    """Coerce the never-evaluated sentinel to 0 for sums and comparisons."""
    return 0.0 if loss == math.inf else loss
