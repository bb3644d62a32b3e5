"""
Tests for the iterative search algorithms.

Tests verify:
1. Gradient descent transitions, bounds and termination
2. Simulated annealing trace semantics and cooling
3. Monte Carlo best tracking
4. Shared reset / best-point contract and the comparison table
"""

import math

import numpy as np
import pytest

from inference_lab.landscape import loss, loss_with_trap
from inference_lab.search import (
	AnnealingConfig,
	GradientDescent,
	GradientDescentConfig,
	MethodResult,
	MonteCarloConfig,
	MonteCarloSearch,
	Point,
	SearchAlgorithm,
	SimulatedAnnealing,
	compare_methods,
	summarize,
)


def in_unit_square(points):
	return all(0.0 <= p.hot <= 1.0 and 0.0 <= p.cold <= 1.0 for p in points)


# =============================================================================
# Tests: Gradient descent
# =============================================================================

class TestGradientDescent:

	def test_step_before_start_is_noop(self):
		gd = GradientDescent()
		assert gd.step() is False
		assert gd.trace == ()
		assert gd.step_count == 0

	def test_start_seeds_trace(self):
		gd = GradientDescent()
		gd.start(0.5, 0.5)
		assert len(gd.trace) == 1
		assert gd.trace[0] == Point(0.5, 0.5, loss(0.5, 0.5))

	def test_single_step_follows_gradient(self):
		f = lambda h, c: (h - 0.3) ** 2 + (c - 0.6) ** 2
		gd = GradientDescent(GradientDescentConfig(learning_rate=0.1, tolerance=1e-9), loss_fn=f)
		gd.start(0.5, 0.5)
		assert gd.step() is True
		p = gd.trace[-1]
		assert p.hot == pytest.approx(0.5 - 0.1 * 0.4, abs=1e-8)
		assert p.cold == pytest.approx(0.5 + 0.1 * 0.2, abs=1e-8)
		assert gd.state.grad_norm == pytest.approx(math.hypot(0.4, -0.2), abs=1e-8)

	def test_default_scenario_terminates_inside_bounds(self):
		# at rate 0.05 the first steps overshoot into a clamped corner plateau, so
		# the final loss ends above the start; only the best point is bounded
		gd = GradientDescent(GradientDescentConfig(learning_rate=0.05))
		gd.start(0.5, 0.5)
		gd.run_to_completion()
		assert gd.best_point.loss <= gd.trace[0].loss
		assert gd.state.converged is True
		assert gd.terminated
		assert gd.step_count == len(gd.trace) - 1
		assert gd.step_count <= 500
		assert in_unit_square(gd.trace)

	def test_stable_rate_lowers_loss(self):
		gd = GradientDescent(GradientDescentConfig(learning_rate=0.001))
		gd.start(0.5, 0.5)
		gd.run_to_completion()
		assert gd.state.converged is True
		assert gd.trace[-1].loss < gd.trace[0].loss

	def test_large_rate_stays_in_bounds(self):
		gd = GradientDescent(GradientDescentConfig(learning_rate=0.5, max_steps=50))
		gd.start(0.9, 0.05)
		gd.run_to_completion()
		assert in_unit_square(gd.trace)

	def test_step_budget(self):
		f = lambda h, c: (h - 0.3) ** 2 + (c - 0.6) ** 2
		gd = GradientDescent(GradientDescentConfig(learning_rate=1e-4, max_steps=3, tolerance=1e-12), loss_fn=f)
		gd.start(0.9, 0.1)
		calls = gd.run_to_completion()
		assert calls == 3
		assert gd.step_count == 3
		assert len(gd.trace) == 4
		assert gd.state.converged is True

	def test_terminated_ignores_steps(self):
		gd = GradientDescent(GradientDescentConfig(max_steps=2))
		gd.start(0.4, 0.3)
		gd.run_to_completion()
		before = gd.state
		assert gd.step() is False
		assert gd.state is before

	def test_converges_on_flat_region(self):
		gd = GradientDescent(loss_fn=lambda h, c: 1.0)
		gd.start(0.2, 0.2)
		assert gd.step() is False
		assert gd.state.converged is True
		assert gd.step_count == 1

	def test_learning_rate_setter(self):
		gd = GradientDescent()
		gd.set_learning_rate(0.01)
		assert gd.config.learning_rate == 0.01
		with pytest.raises(ValueError):
			gd.set_learning_rate(0.0)

	def test_shared_config_is_copied(self):
		cfg = GradientDescentConfig()
		a = GradientDescent(cfg)
		b = GradientDescent(cfg)
		a.set_learning_rate(0.3)
		assert a.config.learning_rate == 0.3
		assert b.config.learning_rate == 0.05
		assert cfg.learning_rate == 0.05

	def test_budget_lowered_mid_run(self):
		f = lambda h, c: (h - 0.3) ** 2 + (c - 0.6) ** 2
		gd = GradientDescent(GradientDescentConfig(learning_rate=1e-4, max_steps=10, tolerance=1e-12), loss_fn=f)
		gd.start(0.9, 0.1)
		assert gd.step() is True
		assert gd.step() is True
		gd.config.max_steps = 2
		assert gd.step() is False
		assert gd.state.converged is True
		assert gd.step_count == 2
		assert len(gd.trace) == 3
		assert gd.events[-1].kind == "terminate"

	def test_start_outside_square_raises(self):
		with pytest.raises(ValueError):
			GradientDescent().start(1.2, 0.5)


# =============================================================================
# Tests: Simulated annealing
# =============================================================================

class TestSimulatedAnnealing:

	def test_full_run(self):
		sa = SimulatedAnnealing(seed=7)
		sa.start(0.15, 0.6)
		sa.run_to_completion()
		assert sa.terminated
		assert sa.step_count == 800
		assert len(sa.trace) == sa.step_count + 1
		assert sa.state.temperature == pytest.approx(200.0 * 0.995 ** 800)
		assert in_unit_square(sa.trace)

	def test_stops_on_min_temperature(self):
		cfg = AnnealingConfig(initial_temp=1.0, cooling_rate=0.5, min_temp=0.1, max_steps=800)
		sa = SimulatedAnnealing(cfg, seed=1)
		sa.start(0.5, 0.5)
		sa.run_to_completion()
		assert sa.step_count == 4
		assert sa.state.temperature < 0.1

	def test_rejections_repeat_previous_point(self):
		sa = SimulatedAnnealing(seed=3)
		sa.start(0.15, 0.6)
		sa.run_to_completion()
		repeats = sum(1 for a, b in zip(sa.trace[:-1], sa.trace[1:]) if b is a)
		assert repeats == sa.step_count - sa.state.accepted

	def test_zero_temperature_limit_rejects_uphill(self):
		cfg = AnnealingConfig(initial_temp=1e-9, cooling_rate=0.999, min_temp=1e-12, max_steps=20)
		sa = SimulatedAnnealing(cfg, loss_fn=lambda h, c: (h - 0.5) ** 2 + (c - 0.5) ** 2, seed=5)
		sa.start(0.5, 0.5)
		sa.run_to_completion()
		assert all(p is sa.trace[0] for p in sa.trace)

	def test_seeded_runs_are_reproducible(self):
		a = SimulatedAnnealing(seed=11)
		b = SimulatedAnnealing(seed=11)
		for s in (a, b):
			s.start(0.3, 0.3)
			s.run_to_completion()
		assert a.trace == b.trace

	def test_escapes_trap_more_often_than_not(self):
		gd = GradientDescent(GradientDescentConfig(learning_rate=0.05), loss_fn=loss_with_trap)
		gd.start(0.15, 0.6)
		gd.run_to_completion()
		gd_best = gd.best_point.loss
		wins = 0
		for seed in range(10):
			sa = SimulatedAnnealing(loss_fn=loss_with_trap, seed=seed)
			sa.start(0.15, 0.6)
			sa.run_to_completion()
			if sa.best_point.loss <= gd_best:
				wins += 1
		assert wins > 5

	def test_config_not_shared(self):
		cfg = AnnealingConfig()
		sa = SimulatedAnnealing(cfg, seed=0)
		cfg.max_steps = 1
		assert sa.config.max_steps == 800
		mc_cfg = MonteCarloConfig()
		mc = MonteCarloSearch(mc_cfg, seed=0)
		mc_cfg.max_samples = 1
		assert mc.config.max_samples == 500

	def test_invalid_cooling_rate(self):
		with pytest.raises(ValueError):
			SimulatedAnnealing(AnnealingConfig(cooling_rate=1.0))


# =============================================================================
# Tests: Monte Carlo
# =============================================================================

class TestMonteCarlo:

	def test_best_is_exact_minimum(self):
		mc = MonteCarloSearch(seed=42)
		mc.run_to_completion()
		assert mc.step_count == 500 == len(mc.state.samples)
		assert mc.state.done
		assert mc.best_point.loss == min(p.loss for p in mc.state.samples)
		assert all(0.0 <= p.hot < 1.0 and 0.0 <= p.cold < 1.0 for p in mc.state.samples)

	def test_first_found_wins_ties(self):
		mc = MonteCarloSearch(MonteCarloConfig(max_samples=5), loss_fn=lambda h, c: 3.0, seed=0)
		mc.run_to_completion()
		assert mc.best_point is mc.state.samples[0]

	def test_steps_without_start(self):
		mc = MonteCarloSearch(MonteCarloConfig(max_samples=3), seed=0)
		assert mc.step() is True
		assert mc.step() is True
		assert mc.step() is False
		assert mc.step() is False
		assert mc.step_count == 3

	def test_start_clears_samples(self):
		mc = MonteCarloSearch(MonteCarloConfig(max_samples=10), seed=0)
		mc.run_to_completion()
		mc.start(0.5, 0.5)
		assert mc.state.samples == ()
		assert mc.best_point is None


# =============================================================================
# Tests: Shared contract
# =============================================================================

class TestSharedContract:

	@pytest.mark.parametrize("factory", [
		lambda: GradientDescent(),
		lambda: SimulatedAnnealing(seed=0),
		lambda: MonteCarloSearch(seed=0),
	])
	def test_reset_is_idempotent(self, factory):
		algo = factory()
		fresh = algo.state
		algo.start(0.4, 0.4)
		algo.run_to_completion(max_iterations=25)
		first = algo.reset()
		second = algo.reset()
		assert first == second == fresh
		assert not algo.terminated

	def test_best_of_prefers_earliest_tie(self):
		a = Point(0.1, 0.1, 1.0)
		b = Point(0.9, 0.9, 1.0)
		c = Point(0.5, 0.5, 2.0)
		assert SearchAlgorithm.best_of([c, a, b]) is a
		assert SearchAlgorithm.best_of([]) is None

	def test_events_are_logged(self):
		gd = GradientDescent(GradientDescentConfig(max_steps=3))
		gd.start(0.4, 0.3)
		gd.run_to_completion()
		kinds = [e.kind for e in gd.events]
		assert kinds[0] == "start"
		assert kinds[-1] == "terminate"
		assert kinds.count("step") == gd.step_count
		assert gd.events[-1].payload["best_loss"] == gd.best_point.loss


class TestComparison:

	def test_table_sorted_by_best_loss(self):
		gd = GradientDescent(GradientDescentConfig(max_steps=20))
		gd.start(0.5, 0.5)
		gd.run_to_completion()
		mc = MonteCarloSearch(MonteCarloConfig(max_samples=200), seed=9)
		mc.run_to_completion()
		idle = MethodResult("Idle", 0, None)
		df = compare_methods([idle, summarize("GD", gd), summarize("MC", mc)])
		assert list(df.columns) == ["label", "steps", "best_loss", "best_hot", "best_cold"]
		assert df["label"].iloc[-1] == "Idle"
		assert np.isnan(df["best_loss"].iloc[-1])
		assert df["best_loss"].iloc[0] <= df["best_loss"].iloc[1]
