from __future__ import annotations
from dataclasses import replace
from typing import Optional

from inference_lab.landscape import Gradient, ShowerModel
from inference_lab.search.base import SearchAlgorithm
from inference_lab.search.config import GradientDescentConfig, GradientDescentState, LossFn, Point


class GradientDescent(SearchAlgorithm):
	"""
	Fixed-rate gradient descent on the unit square.

	Each step moves against the central-difference gradient at the last trace
	point and clamps the result to [0, 1]^2. The run ends once the pre-step
	gradient norm is below `tolerance` or `max_steps` steps have been taken.
	"""

	name = "gradient_descent"

	def __init__(self,
				 config: Optional[GradientDescentConfig] = None,
				 loss_fn: LossFn = ShowerModel.loss) -> None:
		self.config = replace(config) if config is not None else GradientDescentConfig()
		if self.config.learning_rate <= 0.0:
			raise ValueError(f"learning_rate must be positive, got {self.config.learning_rate}")
		super().__init__(loss_fn)

	def set_learning_rate(self, learning_rate: float) -> None:
		"""Takes effect on the next step."""
		if learning_rate <= 0.0:
			raise ValueError(f"learning_rate must be positive, got {learning_rate}")
		self.config.learning_rate = float(learning_rate)

	def _initial_state(self) -> GradientDescentState:
		return GradientDescentState()

	def _seeded_state(self, start: Point) -> GradientDescentState:
		return GradientDescentState(trace=(start,))

	def _is_done(self, state: GradientDescentState) -> bool:
		return state.converged

	def _mark_done(self, state: GradientDescentState) -> GradientDescentState:
		return replace(state, converged=True)

	def _budget_exhausted(self, state: GradientDescentState) -> bool:
		return state.step_count >= self.config.max_steps

	def _transition(self, state: GradientDescentState) -> GradientDescentState:
		last = state.trace[-1]
		g = Gradient.numeric(last.hot, last.cold, self.loss_fn)
		lr = float(self.config.learning_rate)
		hot = ShowerModel.clamp(last.hot - lr * g[0], 0.0, 1.0)
		cold = ShowerModel.clamp(last.cold - lr * g[1], 0.0, 1.0)
		nxt = Point(hot, cold, float(self.loss_fn(hot, cold)))
		grad_norm = Gradient.magnitude(g)
		step_count = state.step_count + 1
		converged = grad_norm < self.config.tolerance or step_count >= self.config.max_steps
		return GradientDescentState(
			trace=state.trace + (nxt,),
			step_count=step_count,
			converged=converged,
			grad_norm=grad_norm,
		)

	def _step_payload(self, state: GradientDescentState) -> dict:
		payload = super()._step_payload(state)
		payload["grad_norm"] = state.grad_norm
		return payload
