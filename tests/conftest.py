"""Shared fixtures for batch-scheduler unit tests."""

import pytest
import torch
import torch.nn as nn

from batch_scheduler.elements import BatchElement
from batch_scheduler.evaluation import ElementEvaluator


# ---- Console singleton: force NULL mode before any test touches it ----

@pytest.fixture(autouse=True, scope="session")
def _silence_console():
    """Initialize OLConsole in NULL mode to suppress all output during tests.

    Session-scoped so the singleton is set once and stays NULL for the
    entire test run. Tests that exercise other modes re-initialize it and
    restore NULL mode afterwards.
    """
    from console.config import ConsoleConfig, ConsoleMode
    from console.olconsole import OLConsole
    OLConsole(ConsoleConfig(mode=ConsoleMode.NULL))


# ---- Scripted collaborators ----

class ScriptedEvaluator(ElementEvaluator):
    """Evaluator that replays scripted losses instead of running a model.

    Each element's ``inputs`` is a list of future losses; every refresh
    pops the next one. Records every call so tests can assert on order,
    forwarded run options and the log-scale flag.
    """

    def __init__(self):
        self.forward_calls = []
        self.loss_calls = []

    def run_forward(self, model, element, **run_kwargs):
        self.forward_calls.append((element.name, dict(run_kwargs)))
        element.outputs = element.inputs.pop(0)

    def compute_loss(self, element, loss_fn, log_loss=False):
        self.loss_calls.append((element.name, log_loss))
        element.losses.append(element.outputs)
        return element.outputs


def _build_batch(histories, scripts=None):
    """Build BatchElements named e0, e1, ... with given histories and scripted losses."""
    scripts = scripts or [[] for _ in histories]
    return [
        BatchElement(inputs=list(script), losses=list(history), name=f"e{i}")
        for i, (history, script) in enumerate(zip(histories, scripts))
    ]


@pytest.fixture
def make_batch():
    """Factory fixture: make_batch(histories, scripts=None) -> list of BatchElement."""
    return _build_batch


@pytest.fixture
def scripted_evaluator():
    return ScriptedEvaluator()


@pytest.fixture
def constant_batch():
    """Three elements that always evaluate to the same losses: 3, 7, 2."""
    return _build_batch(
        histories=[[], [], []],
        scripts=[[3.0] * 50, [7.0] * 50, [2.0] * 50],
    )


# ---- Tiny model fixtures ----

@pytest.fixture
def tiny_model():
    """4->2 linear model, 10 params, microseconds per forward."""
    torch.manual_seed(42)
    return nn.Linear(4, 2)


@pytest.fixture
def tensor_batch():
    """Four BatchElements with random inputs and targets."""
    torch.manual_seed(0)
    return [
        BatchElement(inputs=torch.randn(3, 4), targets=torch.randn(3, 2), name=f"t{i}")
        for i in range(4)
    ]


