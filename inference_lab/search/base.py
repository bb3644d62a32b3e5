from __future__ import annotations
from typing import Iterable, List, Optional

from inference_lab.search.config import LogEvent, LossFn, Point


class SearchAlgorithm:
	"""
	Shared step / start / reset contract for the iterative optimizers.

	Subclasses own a frozen state value and provide:
	  • _initial_state()     : the empty state produced by reset()
	  • _seeded_state(p)     : the state after start() at point p
	  • _transition(state)   : exactly one step, returning the next state
	  • _is_done(state)      : termination flag stored in the state
	  • _mark_done(state)    : copy of state with the flag set
	  • _has_started(state)  : whether step() may run at all
	"""

	name = "search"

	def __init__(self, loss_fn: LossFn) -> None:
		self.loss_fn = loss_fn
		self.events: List[LogEvent] = []
		self.state = self._initial_state()

	def _initial_state(self):
		raise NotImplementedError

	def _seeded_state(self, start: Point):
		raise NotImplementedError

	def _transition(self, state):
		raise NotImplementedError

	def _is_done(self, state) -> bool:
		raise NotImplementedError

	def _mark_done(self, state):
		raise NotImplementedError

	def _has_started(self, state) -> bool:
		return len(state.trace) > 0

	def _budget_exhausted(self, state) -> bool:
		raise NotImplementedError

	def _step_payload(self, state) -> dict:
		last = self.trace[-1]
		return {"step": int(state.step_count), "hot": last.hot, "cold": last.cold, "loss": last.loss}

	@property
	def trace(self) -> tuple:
		return self.state.trace

	@property
	def step_count(self) -> int:
		return int(self.state.step_count)

	@property
	def terminated(self) -> bool:
		return bool(self._is_done(self.state))

	@property
	def best_point(self) -> Optional[Point]:
		return SearchAlgorithm.best_of(self.trace)

	@staticmethod
	def best_of(points: Iterable[Point]) -> Optional[Point]:
		"""Minimal-loss point; ties go to the earliest one."""
		best: Optional[Point] = None
		for p in points:
			if best is None or p.loss < best.loss:
				best = p
		return best

	@staticmethod
	def _check_unit(hot: float, cold: float) -> None:
		if not (0.0 <= hot <= 1.0 and 0.0 <= cold <= 1.0):
			raise ValueError(f"start point must lie in [0, 1]^2, got ({hot}, {cold})")

	def start(self, hot: float, cold: float):
		"""Seed the trace at (hot, cold); any previous run is discarded."""
		self._check_unit(hot, cold)
		p = Point(float(hot), float(cold), float(self.loss_fn(float(hot), float(cold))))
		self.state = self._seeded_state(p)
		self.events.append(LogEvent("start", {"algorithm": self.name, "hot": p.hot, "cold": p.cold, "loss": p.loss}))
		return self.state

	def reset(self):
		self.state = self._initial_state()
		self.events.append(LogEvent("reset", {"algorithm": self.name}))
		return self.state

	def step(self) -> bool:
		"""
		Advance by one transition. Returns True while further steps are useful;
		a terminated or unstarted algorithm is left untouched and returns False.
		"""
		if not self._has_started(self.state) or self._is_done(self.state):
			return False
		if self._budget_exhausted(self.state):
			self.state = self._mark_done(self.state)
			self._log_termination()
			return False
		self.state = self._transition(self.state)
		self.events.append(LogEvent("step", self._step_payload(self.state)))
		if self._is_done(self.state):
			self._log_termination()
			return False
		return True

	def run_to_completion(self, max_iterations: Optional[int] = None) -> int:
		"""Step until termination (or max_iterations calls); returns the number of calls made."""
		n = 0
		while max_iterations is None or n < int(max_iterations):
			n += 1
			if not self.step():
				break
		return n

	def _log_termination(self) -> None:
		best = self.best_point
		payload = {"algorithm": self.name, "steps": self.step_count}
		if best is not None:
			payload["best_loss"] = best.loss
			payload["best_hot"] = best.hot
			payload["best_cold"] = best.cold
		self.events.append(LogEvent("terminate", payload))
