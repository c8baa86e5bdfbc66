"""Tests for batch_scheduler/schedulers/refresh.py."""

import threading
import time

import pytest

from batch_scheduler.evaluation import ElementEvaluator
from batch_scheduler.schedulers import refresh_losses, refresh_element


class FailingEvaluator(ElementEvaluator):
    """Fails on the given element names; slower elements fail later."""

    def __init__(self, failures, delays=None):
        self.failures = failures
        self.delays = delays or {}
        self.finished = []
        self._lock = threading.Lock()

    def run_forward(self, model, element, **run_kwargs):
        time.sleep(self.delays.get(element.name, 0.0))
        if element.name in self.failures:
            raise RuntimeError(f"failed on {element.name}")
        element.outputs = 1.0

    def compute_loss(self, element, loss_fn, log_loss=False):
        element.losses.append(element.outputs)
        with self._lock:
            self.finished.append(element.name)
        return element.outputs


class TestRefreshLosses:

    def test_sequential_order(self, make_batch, scripted_evaluator):
        batch = make_batch([[]] * 3, scripts=[[3.0], [1.0], [2.0]])
        losses = refresh_losses(scripted_evaluator, None, batch, None)
        assert losses == [3.0, 1.0, 2.0]
        assert [name for name, _ in scripted_evaluator.forward_calls] == ["e0", "e1", "e2"]

    def test_run_kwargs_and_log_flag_forwarded(self, make_batch, scripted_evaluator):
        batch = make_batch([[]], scripts=[[0.5]])
        refresh_losses(scripted_evaluator, None, batch, None, log_loss=True, run_kwargs={"dt": 0.1})
        assert scripted_evaluator.forward_calls == [("e0", {"dt": 0.1})]
        assert scripted_evaluator.loss_calls == [("e0", True)]

    def test_parallel_matches_sequential(self, make_batch, scripted_evaluator):
        values = [float(v) for v in range(8)]
        batch = make_batch([[]] * 8, scripts=[[v] for v in values])
        losses = refresh_losses(scripted_evaluator, None, batch, None, workers=4)
        assert losses == values
        assert [e.losses for e in batch] == [[v] for v in values]

    def test_parallel_reraises_lowest_failing_index(self, make_batch):
        batch = make_batch([[]] * 4)
        evaluator = FailingEvaluator({"e1", "e3"}, delays={"e1": 0.05})
        with pytest.raises(RuntimeError, match="failed on e1"):
            refresh_losses(evaluator, None, batch, None, workers=4)
        # every element ran before the failure surfaced
        assert sorted(evaluator.finished) == ["e0", "e2"]

    def test_sequential_failure_stops_pass(self, make_batch):
        batch = make_batch([[]] * 3)
        evaluator = FailingEvaluator({"e1"})
        with pytest.raises(RuntimeError, match="failed on e1"):
            refresh_losses(evaluator, None, batch, None)
        assert evaluator.finished == ["e0"]

    def test_refresh_element_returns_recorded_loss(self, make_batch, scripted_evaluator):
        element = make_batch([[9.0]], scripts=[[4.0]])[0]
        assert refresh_element(scripted_evaluator, None, element, None, False, {}) == 4.0
        assert element.losses == [9.0, 4.0]
