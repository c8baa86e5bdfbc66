"""Refresh passes: re-evaluate every element of a batch.

A refresh pass runs the evaluator's forward pass and loss computation on
each element, one at a time in index order. With ``workers > 1`` the
elements are evaluated in a thread pool instead; the pass still returns
losses in index order, only after every element has finished, and the
failure of the lowest failing index is re-raised.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Sequence

from ..evaluation import ElementEvaluator


def refresh_element(
    evaluator: ElementEvaluator,
    model: Any,
    element: Any,
    loss_fn: Callable,
    log_loss: bool,
    run_kwargs: dict[str, Any],
) -> float:
    """Forward-run one element and record its loss. Returns the recorded loss."""
    evaluator.run_forward(model, element, **run_kwargs)
    return evaluator.compute_loss(element, loss_fn, log_loss=log_loss)


def refresh_losses(
    evaluator: ElementEvaluator,
    model: Any,
    batch: Sequence[Any],
    loss_fn: Callable,
    log_loss: bool = False,
    run_kwargs: dict[str, Any] | None = None,
    workers: int = 0,
) -> list[float]:
    """Re-evaluate every element of ``batch``.

    Args:
        evaluator: Forward-run and loss-recording collaborator.
        model: Model forwarded to the evaluator.
        batch: Elements to refresh.
        loss_fn: Loss function forwarded to ``compute_loss``.
        log_loss: Record losses in log scale.
        run_kwargs: Options forwarded to ``run_forward``.
        workers: Thread count; 0 or 1 evaluates sequentially.

    Returns:
        The freshly recorded loss of every element, in index order.
    """
    run_kwargs = run_kwargs or {}
    if workers <= 1 or len(batch) <= 1:
        return [
            refresh_element(evaluator, model, element, loss_fn, log_loss, run_kwargs)
            for element in batch
        ]

    with ThreadPoolExecutor(max_workers=min(workers, len(batch))) as pool:
        futures = [
            pool.submit(refresh_element, evaluator, model, element, loss_fn, log_loss, run_kwargs)
            for element in batch
        ]
    # The pool has joined: every element is done. result() re-raises in index order.
    return [future.result() for future in futures]
