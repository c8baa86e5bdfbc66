"""BatchScheduler abstract base class: the shared scheduler driver.

Every selection policy subclasses BatchScheduler and implements
``apply()``. The driver entry points ``initialize()`` and ``update()``
are shared: they advance the step counter, decide on the configured
cadence whether to re-select, record aggregate loss statistics, and fire
the visualization hook.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Iterable, Sequence

from console import OLConsole
from ..config import SchedulerConfig
from ..elements import nominal_loss, finite_or_zero
from ..hooks.hook_point import HookPoint, Cadence
from ..hooks.visualization import VisualizationHook, SelectionTableHook
from ..sinks.base import MetricSink
from ..state import SchedulerState
from ..utils.formatting import format_status


class BatchScheduler(ABC):
    """Base class for element-selection policies.

    Subclasses set ``name`` and implement ``apply()``, which returns the
    index of the element to train on next (or None when no element is
    eligible). ``apply()`` must not touch ``state.step`` or
    ``state.element_index``; the driver owns both.

    Args:
        model: The trainable model; forwarded to the evaluator only.
        batch: Fixed-length indexable sequence of batch elements.
        config: Cadences and verbosity. Keyword overrides are applied on
            top of it (or on top of the defaults when omitted).
        visualizer: Hook called on the ``plot_step`` cadence. Defaults to
            a console selection table; pass None to disable rendering.
        sinks: Destinations for per-update aggregate statistics.
    """

    name: str = "base"

    # Whether initialize() stores run-time keyword options for the evaluator
    uses_run_kwargs: bool = False

    # Whether element losses are recorded in log scale
    log_loss: bool = False

    _DEFAULT_VISUALIZER = object()

    def __init__(
        self,
        model: Any,
        batch: Sequence[Any],
        *,
        config: SchedulerConfig | None = None,
        visualizer: VisualizationHook | None = _DEFAULT_VISUALIZER,
        sinks: Iterable[MetricSink] | None = None,
        **overrides,
    ):
        if config is None:
            config = SchedulerConfig(**overrides)
        elif overrides:
            config = dataclasses.replace(config, **overrides)
        if len(batch) == 0:
            raise ValueError("batch must contain at least one element")

        self.config = config
        self.state = SchedulerState(
            batch=batch,
            model=model,
            apply_step=config.apply_step,
            plot_step=config.plot_step,
            log_loss=self.log_loss,
        )
        if visualizer is self._DEFAULT_VISUALIZER:
            visualizer = SelectionTableHook()
        self.visualizer = visualizer
        self.sinks: list[MetricSink] = list(sinks or [])
        self.run_kwargs: dict[str, Any] = {}
        self._console = OLConsole()

    # --- Read-only accessors ---

    @property
    def step(self) -> int:
        return self.state.step

    @property
    def element_index(self) -> int | None:
        """Index of the element the training driver should optimize next."""
        return self.state.element_index

    @property
    def losses(self) -> list[float]:
        """Aggregate loss history, one entry per ``update()``."""
        return list(self.state.losses)

    @property
    def batch(self) -> Sequence[Any]:
        return self.state.batch

    @property
    def model(self) -> Any:
        return self.state.model

    @property
    def status_message(self) -> str:
        return self.state.status_message

    # --- Selection ---

    @abstractmethod
    def apply(self, verbose: bool = True) -> int | None:
        """Choose the next element index from the current state.

        Args:
            verbose: Whether to print selection details.

        Returns:
            The 0-based index to select, or None when no element is eligible.
        """
        ...

    # --- Driver ---

    def initialize(self, verbose: bool | None = None, **run_kwargs):
        """Reset to step 0 and make the initial selection.

        Must be called once before the first ``update()``.

        Args:
            verbose: Overrides ``config.verbose`` for this call.
            **run_kwargs: Run-time options forwarded verbatim to the
                evaluator's ``run_forward`` (policies with
                ``uses_run_kwargs``). Ignored with a warning otherwise.
        """
        verbose = self._resolve_verbose(verbose)
        previous_index = None
        self.state.reset()

        if self.uses_run_kwargs:
            self.run_kwargs = dict(run_kwargs)
        elif run_kwargs:
            self._console.print_warning(
                f"{self.__class__.__name__} does not evaluate elements; "
                f"ignoring run options: {', '.join(sorted(run_kwargs))}"
            )

        self._select(verbose)
        self._emit({'scheduler/element_index': self.state.element_index}, HookPoint.INITIALIZE)

        if Cadence(self.state.plot_step).enabled:
            self._visualize(previous_index)

    def update(self, verbose: bool | None = None):
        """Advance one training step.

        Re-selects on the ``apply_step`` cadence, appends the aggregate
        loss of the batch to ``losses`` and fires the visualization hook on
        the ``plot_step`` cadence. Evaluator failures propagate unchanged.

        Args:
            verbose: Overrides ``config.verbose`` for this call.
        """
        verbose = self._resolve_verbose(verbose)
        state = self.state
        last_index = state.element_index

        state.step += 1

        if Cadence(state.apply_step).is_active(state.step):
            self._select(verbose)

        avg_loss, max_loss, loss_sum = self.aggregate_losses()
        state.losses.append(loss_sum)

        if verbose:
            state.status_message = format_status(avg_loss, max_loss, loss_sum)
            self._console.print(state.status_message)

        self._emit({
            'scheduler/avg_loss': avg_loss,
            'scheduler/max_loss': max_loss,
            'scheduler/loss_sum': loss_sum,
            'scheduler/element_index': state.element_index,
        }, HookPoint.UPDATE)

        if Cadence(state.plot_step).is_active(state.step):
            self._visualize(last_index)

    def aggregate_losses(self) -> tuple[float, float, float]:
        """Average, maximum and sum of the batch's nominal losses (never-evaluated count as 0)."""
        num = self.state.num_elements
        loss_sum = 0.0
        avg_sum = 0.0
        max_loss = 0.0
        for element in self.state.batch:
            loss = finite_or_zero(nominal_loss(element))
            loss_sum += loss
            avg_sum += loss / num
            if loss > max_loss:
                max_loss = loss
        return avg_sum, max_loss, loss_sum

    def flush(self):
        """Flush every attached sink. Call once training ends."""
        for sink in self.sinks:
            sink.flush()

    # --- Internals ---

    def _resolve_verbose(self, verbose: bool | None) -> bool:
        return self.config.verbose if verbose is None else verbose

    def _select(self, verbose: bool):
        selected = self.apply(verbose=verbose)
        if selected is None:
            self._console.print_warning(
                f"{self.name}: no eligible element at step {self.state.step}; "
                f"keeping element {self.state.element_index}"
            )
            return
        self.state.element_index = selected

    def _visualize(self, previous_index: int | None):
        if self.visualizer is not None:
            self.visualizer.visualize(self.state, previous_index)

    def _emit(self, metrics: dict[str, Any], hook_point: HookPoint):
        for sink in self.sinks:
            sink.emit(metrics, self.state.step, hook_point)

    def _print_selection(self, next_index: int | None):
        self._console.print(
            f"Current step: {self.state.step} | "
            f"Current element={self.state.element_index} | "
            f"Next element={next_index}"
        )
