"""Tests for batch_scheduler/evaluation.py: TorchElementEvaluator."""

import math

import pytest
import torch
import torch.nn as nn
import torch.nn.functional as F

from batch_scheduler.elements import BatchElement
from batch_scheduler.evaluation import TorchElementEvaluator


class ScaledIdentity(nn.Module):
    """Returns inputs * scale; scale is a run-time keyword option."""

    def forward(self, x, scale=1.0):
        return x * scale


class TestTorchElementEvaluator:

    def test_run_forward_stores_outputs_without_grad(self, tiny_model, tensor_batch):
        evaluator = TorchElementEvaluator()
        element = tensor_batch[0]
        evaluator.run_forward(tiny_model, element)
        assert element.outputs.shape == (3, 2)
        assert not element.outputs.requires_grad

    def test_compute_loss_appends_and_returns(self, tiny_model, tensor_batch):
        evaluator = TorchElementEvaluator()
        element = tensor_batch[0]
        evaluator.run_forward(tiny_model, element)
        loss = evaluator.compute_loss(element, F.mse_loss)

        expected = F.mse_loss(tiny_model(element.inputs), element.targets).item()
        assert loss == pytest.approx(expected)
        assert element.losses == [loss]
        assert isinstance(loss, float)

    def test_log_loss(self):
        evaluator = TorchElementEvaluator()
        element = BatchElement(inputs=torch.zeros(2), targets=torch.full((2,), 2.0))
        evaluator.run_forward(ScaledIdentity(), element)
        loss = evaluator.compute_loss(element, F.mse_loss, log_loss=True)
        assert loss == pytest.approx(math.log(4.0))

    def test_log_loss_clamps_zero(self):
        evaluator = TorchElementEvaluator(eps=1e-8)
        element = BatchElement(inputs=torch.ones(2), targets=torch.ones(2))
        evaluator.run_forward(ScaledIdentity(), element)
        loss = evaluator.compute_loss(element, F.mse_loss, log_loss=True)
        assert loss == pytest.approx(math.log(1e-8))

    def test_run_kwargs_forwarded_to_model(self):
        evaluator = TorchElementEvaluator()
        element = BatchElement(inputs=torch.ones(2), targets=torch.zeros(2))
        evaluator.run_forward(ScaledIdentity(), element, scale=3.0)
        assert torch.equal(element.outputs, torch.full((2,), 3.0))

    def test_compute_loss_before_forward_raises(self):
        evaluator = TorchElementEvaluator()
        with pytest.raises(RuntimeError, match="before run_forward"):
            evaluator.compute_loss(BatchElement(), F.mse_loss)

    def test_invalid_eps(self):
        with pytest.raises(ValueError):
            TorchElementEvaluator(eps=0.0)

    def test_plain_float_loss_fn(self):
        """Loss functions returning Python floats are accepted."""
        evaluator = TorchElementEvaluator()
        element = BatchElement(inputs=torch.ones(2), targets=torch.zeros(2))
        evaluator.run_forward(ScaledIdentity(), element)
        loss = evaluator.compute_loss(element, lambda out, tgt: 0.75)
        assert loss == 0.75
