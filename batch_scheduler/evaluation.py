"""Element evaluation: the forward-run and loss-recording collaborators.

ElementEvaluator is the ABC loss-driven schedulers consume during a
refresh pass. TorchElementEvaluator is the reference implementation for
plain ``torch.nn.Module`` models.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable

import torch
import torch.nn.functional as F

from .elements import _to_float


class ElementEvaluator(ABC):
    """ABC for re-evaluating one batch element.

    Both methods may raise; schedulers never catch these errors, so a
    failure surfaces to whoever called ``initialize()``/``update()``.
    """

    @abstractmethod
    def run_forward(self, model: Any, element: Any, **run_kwargs) -> None:
        """Re-run ``model`` on ``element``, storing whatever compute_loss needs.

        Args:
            model: The trainable model.
            element: The batch element to evaluate.
            **run_kwargs: Run-time options forwarded verbatim from
                ``BatchScheduler.initialize`` (tolerances, horizons...).
        """
        ...

    @abstractmethod
    def compute_loss(self, element: Any, loss_fn: Callable, log_loss: bool = False) -> float:
        """Compute the element's loss, append it to ``element.losses`` and return it.

        Args:
            element: The batch element, already run through ``run_forward``.
            loss_fn: Loss function comparing outputs against targets.
            log_loss: Record the natural log of the loss instead of the loss.
        """
        ...


class TorchElementEvaluator(ElementEvaluator):
    """Evaluate ``BatchElement``s against a ``torch.nn.Module``.

    ``run_forward`` stores ``model(element.inputs, **run_kwargs)`` in
    ``element.outputs`` without tracking gradients; ``compute_loss``
    applies ``loss_fn(outputs, targets)``.

    Args:
        eps: Lower clamp applied before taking the log in log-loss mode.
    """

    def __init__(self, eps: float = 1e-12):
        if eps <= 0:
            raise ValueError(f"eps must be > 0, got {eps}")
        self.eps = eps

    def run_forward(self, model, element, **run_kwargs):
        with torch.no_grad():
            element.outputs = model(element.inputs, **run_kwargs)

    def compute_loss(self, element, loss_fn=F.mse_loss, log_loss=False):
        if element.outputs is None:
            raise RuntimeError(
                "compute_loss called before run_forward: element has no outputs"
            )
        loss = loss_fn(element.outputs, element.targets)
        value = _to_float(loss)
        if log_loss:
            value = math.log(max(value, self.eps))
        element.losses.append(value)
        return value
