from __future__ import annotations
from dataclasses import replace
from typing import Optional
import math

import numpy as np

from inference_lab.landscape import ShowerModel
from inference_lab.random_source import RandomSource
from inference_lab.search.base import SearchAlgorithm
from inference_lab.search.config import AnnealingConfig, AnnealingState, LossFn, Point


class SimulatedAnnealing(SearchAlgorithm):
	"""
	Metropolis random walk with geometric cooling.

	Proposals sit at distance 0.05·T/T0 + 0.005 from the last point in a
	uniformly random direction (clamped per axis). Downhill moves are always
	accepted, uphill ones with probability exp(-Δ/T). The temperature decays
	by `cooling_rate` on every step, accepted or not.
	"""

	name = "simulated_annealing"

	def __init__(self,
				 config: Optional[AnnealingConfig] = None,
				 loss_fn: LossFn = ShowerModel.loss_with_trap,
				 rng: Optional[np.random.Generator] = None,
				 seed: Optional[int] = None) -> None:
		self.config = replace(config) if config is not None else AnnealingConfig()
		if not (0.0 < self.config.cooling_rate < 1.0):
			raise ValueError(f"cooling_rate must lie in (0, 1), got {self.config.cooling_rate}")
		if self.config.initial_temp <= 0.0:
			raise ValueError(f"initial_temp must be positive, got {self.config.initial_temp}")
		self.rng = RandomSource.generator(rng, seed)
		super().__init__(loss_fn)

	def _initial_state(self) -> AnnealingState:
		return AnnealingState(temperature=float(self.config.initial_temp))

	def _seeded_state(self, start: Point) -> AnnealingState:
		return AnnealingState(trace=(start,), temperature=float(self.config.initial_temp))

	def _is_done(self, state: AnnealingState) -> bool:
		return state.done

	def _mark_done(self, state: AnnealingState) -> AnnealingState:
		return replace(state, done=True)

	def _budget_exhausted(self, state: AnnealingState) -> bool:
		return state.step_count >= self.config.max_steps or state.temperature < self.config.min_temp

	def step_radius(self, temperature: float) -> float:
		return 0.05 * (float(temperature) / float(self.config.initial_temp)) + 0.005

	def _transition(self, state: AnnealingState) -> AnnealingState:
		last = state.trace[-1]
		radius = self.step_radius(state.temperature)
		angle = float(self.rng.random()) * 2.0 * math.pi
		hot = ShowerModel.clamp(last.hot + radius * math.cos(angle), 0.0, 1.0)
		cold = ShowerModel.clamp(last.cold + radius * math.sin(angle), 0.0, 1.0)
		new_loss = float(self.loss_fn(hot, cold))
		delta = new_loss - last.loss
		accept = delta < 0.0 or float(self.rng.random()) < math.exp(-delta / state.temperature)
		if accept:
			nxt = Point(hot, cold, new_loss)
		else:
			nxt = last
		temp = state.temperature * self.config.cooling_rate
		step_count = state.step_count + 1
		return AnnealingState(
			trace=state.trace + (nxt,),
			step_count=step_count,
			temperature=temp,
			done=temp < self.config.min_temp or step_count >= self.config.max_steps,
			accepted=state.accepted + (1 if accept else 0),
		)

	def _step_payload(self, state: AnnealingState) -> dict:
		payload = super()._step_payload(state)
		payload["temperature"] = state.temperature
		payload["accepted"] = state.accepted
		return payload
