"""
Cooperative run / stop / single-step driver for iterative algorithms.

A StepLoop is fed by any timer: the owner calls tick(now, token) from its
timer callback and the loop fires `on_step` at most once per `interval`
seconds (≈20 steps/s by default). Every run() and stop() bumps a generation
counter, so ticks scheduled under an older token are ignored and a stop takes
effect before the next step even if a tick is already queued.
"""

from __future__ import annotations
from typing import Callable, Optional
import time

from inference_lab.search.base import SearchAlgorithm


DEFAULT_INTERVAL = 0.05


class StepLoop:
	def __init__(self, on_step: Callable[[], bool], interval: float = DEFAULT_INTERVAL) -> None:
		if interval < 0.0:
			raise ValueError(f"interval must be non-negative, got {interval}")
		self._on_step = on_step
		self.interval = float(interval)
		self._running = False
		self._generation = 0
		self._last_fire: Optional[float] = None
		self._in_step = False
		self.fired = 0

	@property
	def running(self) -> bool:
		return self._running

	@property
	def generation(self) -> int:
		return self._generation

	def run(self) -> int:
		"""Enter run mode and return the token ticks must carry. No-op while already running."""
		if self._running:
			return self._generation
		self._generation += 1
		self._running = True
		self._last_fire = None
		return self._generation

	def stop(self) -> None:
		self._running = False
		self._generation += 1

	def step(self) -> bool:
		"""Stop run mode, then execute exactly one step synchronously."""
		self.stop()
		return self._fire()

	def tick(self, now: float, token: Optional[int] = None) -> bool:
		"""
		Timer callback. Returns True while the loop wants further ticks.
		"""
		if not self._running:
			return False
		if token is not None and token != self._generation:
			return False
		if self._last_fire is not None and float(now) - self._last_fire < self.interval:
			return True
		self._last_fire = float(now)
		gen = self._generation
		keep_going = self._fire()
		if not keep_going and gen == self._generation:
			self.stop()
		return self._running

	def drive(self,
			  clock: Callable[[], float] = time.monotonic,
			  sleep: Callable[[float], None] = time.sleep,
			  max_ticks: Optional[int] = None) -> int:
		"""
		Blocking driver: run() and tick until the step function asks to stop,
		stop() is called from inside a step, or max_ticks ticks have elapsed.
		Returns the number of steps fired.
		"""
		before = self.fired
		token = self.run()
		ticks = 0
		while self.tick(clock(), token):
			ticks += 1
			if max_ticks is not None and ticks >= int(max_ticks):
				self.stop()
				break
			sleep(self.interval)
		return self.fired - before

	def _fire(self) -> bool:
		if self._in_step:
			raise RuntimeError("a step is already in flight")
		self._in_step = True
		try:
			keep_going = bool(self._on_step())
		finally:
			self._in_step = False
		self.fired += 1
		return keep_going


class SearchSession:
	"""
	Binds one algorithm instance to its own StepLoop and exposes the UI-facing
	controls. start() and reset() always stop the loop first.
	"""

	def __init__(self, algorithm: SearchAlgorithm, interval: float = DEFAULT_INTERVAL) -> None:
		self.algorithm = algorithm
		self.loop = StepLoop(algorithm.step, interval)

	@property
	def running(self) -> bool:
		return self.loop.running

	def start(self, hot: float, cold: float):
		self.loop.stop()
		return self.algorithm.start(hot, cold)

	def step(self) -> bool:
		return self.loop.step()

	def run(self) -> int:
		return self.loop.run()

	def tick(self, now: float, token: Optional[int] = None) -> bool:
		return self.loop.tick(now, token)

	def stop(self) -> None:
		self.loop.stop()

	def reset(self):
		self.loop.stop()
		return self.algorithm.reset()

	def drive(self,
			  clock: Callable[[], float] = time.monotonic,
			  sleep: Callable[[float], None] = time.sleep,
			  max_ticks: Optional[int] = None) -> int:
		return self.loop.drive(clock, sleep, max_ticks)
