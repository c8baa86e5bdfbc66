"""Tests for batch_scheduler/schedulers/worst_grow.py."""

import math

import pytest
import torch

from batch_scheduler.schedulers import WorstGrowScheduler, loss_derivative


class TestLossDerivative:

    def test_single_loss_is_its_own_growth(self):
        assert loss_derivative([5.0]) == 5.0

    def test_difference_of_last_two(self):
        assert loss_derivative([1.0, 5.0, 8.0]) == 3.0

    def test_explicit_current(self):
        assert loss_derivative([5.0, 8.0], current=8.0) == 3.0
        assert loss_derivative([5.0], current=2.0) == 2.0

    def test_tensor_history(self):
        history = [torch.tensor(2.0), torch.tensor(3.5)]
        assert loss_derivative(history) == pytest.approx(1.5)


class TestWorstGrowScheduler:

    def test_selects_fastest_growth(self, make_batch, scripted_evaluator):
        batch = make_batch(
            [[], [], []],
            scripts=[[1.0, 1.5], [2.0, 2.1], [0.5, 3.0]],
        )
        scheduler = WorstGrowScheduler(
            None, batch, evaluator=scripted_evaluator, plot_step=0,
        )
        scheduler.initialize()
        # cold start: largest absolute loss wins
        assert scheduler.element_index == 1

        scheduler.update()
        assert scheduler.element_index == 2

    def test_every_pass_refreshes(self, constant_batch, scripted_evaluator):
        scheduler = WorstGrowScheduler(
            None, constant_batch, evaluator=scripted_evaluator, update_step=100, plot_step=0,
        )
        scheduler.initialize()
        scheduler.update()
        scheduler.update()
        assert len(scripted_evaluator.forward_calls) == 9

    def test_records_log_losses(self, constant_batch, scripted_evaluator):
        scheduler = WorstGrowScheduler(None, constant_batch, evaluator=scripted_evaluator)
        scheduler.initialize()
        assert scheduler.state.log_loss is True
        assert scripted_evaluator.loss_calls
        assert all(log_loss is True for _, log_loss in scripted_evaluator.loss_calls)

    def test_shrinking_losses_still_select(self, make_batch, scripted_evaluator):
        """Negative growth everywhere still yields the least negative element."""
        batch = make_batch([[5.0], [5.0]], scripts=[[1.0], [4.0]])
        scheduler = WorstGrowScheduler(None, batch, evaluator=scripted_evaluator, verbose=False)
        assert scheduler.apply() == 1

    def test_diverged_refresh_loss_is_selected(self, make_batch, scripted_evaluator):
        batch = make_batch([[0.5], [0.5]], scripts=[[1.0], [math.inf]])
        scheduler = WorstGrowScheduler(None, batch, evaluator=scripted_evaluator, verbose=False)
        assert scheduler.apply() == 1
