from __future__ import annotations
from dataclasses import replace
from typing import Optional

import numpy as np

from inference_lab.landscape import ShowerModel
from inference_lab.random_source import RandomSource
from inference_lab.search.base import SearchAlgorithm
from inference_lab.search.config import LogEvent, LossFn, MonteCarloConfig, MonteCarloState, Point


class MonteCarloSearch(SearchAlgorithm):
	"""
	Pure random search: every step draws (hot, cold) uniformly from the unit
	square and keeps the best sample seen so far (first found wins ties).
	"""

	name = "monte_carlo"

	def __init__(self,
				 config: Optional[MonteCarloConfig] = None,
				 loss_fn: LossFn = ShowerModel.loss,
				 rng: Optional[np.random.Generator] = None,
				 seed: Optional[int] = None) -> None:
		self.config = replace(config) if config is not None else MonteCarloConfig()
		self.rng = RandomSource.generator(rng, seed)
		super().__init__(loss_fn)

	@property
	def trace(self) -> tuple:
		return self.state.samples

	@property
	def best_point(self) -> Optional[Point]:
		return self.state.best

	def start(self, hot: float, cold: float) -> MonteCarloState:
		"""
		Sampling does not depend on a start point; the coordinates are checked
		and ignored so all algorithms can be driven the same way.
		"""
		self._check_unit(hot, cold)
		self.state = self._initial_state()
		self.events.append(LogEvent("start", {"algorithm": self.name}))
		return self.state

	def _initial_state(self) -> MonteCarloState:
		return MonteCarloState()

	def _has_started(self, state: MonteCarloState) -> bool:
		return True

	def _is_done(self, state: MonteCarloState) -> bool:
		return state.done

	def _mark_done(self, state: MonteCarloState) -> MonteCarloState:
		return replace(state, done=True)

	def _budget_exhausted(self, state: MonteCarloState) -> bool:
		return state.step_count >= self.config.max_samples

	def _transition(self, state: MonteCarloState) -> MonteCarloState:
		hot = float(self.rng.random())
		cold = float(self.rng.random())
		p = Point(hot, cold, float(self.loss_fn(hot, cold)))
		if state.best is None or p.loss < state.best.loss:
			best = p
		else:
			best = state.best
		step_count = state.step_count + 1
		return MonteCarloState(
			samples=state.samples + (p,),
			best=best,
			step_count=step_count,
			done=step_count >= self.config.max_samples,
		)
