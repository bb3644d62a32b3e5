"""
Configuration and typed state containers for the search algorithms.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple


LossFn = Callable[[float, float], float]


@dataclass(frozen=True)
class Point:
	"""
	One evaluated location in (hot, cold) space.
	"""
	hot: float
	cold: float
	loss: float


@dataclass
class LogEvent:
	"""
	Structured event for run-time logging.
	"""
	kind: str
	payload: Dict[str, object]


@dataclass
class GradientDescentConfig:
	learning_rate: float = 0.05
	max_steps: int = 500
	tolerance: float = 0.5


@dataclass
class AnnealingConfig:
	"""
	Geometric cooling schedule: T_k = initial_temp · cooling_rate^k.
	"""
	initial_temp: float = 200.0
	cooling_rate: float = 0.995
	min_temp: float = 0.1
	max_steps: int = 800


@dataclass
class MonteCarloConfig:
	max_samples: int = 500


@dataclass(frozen=True)
class GradientDescentState:
	"""
	`converged` is the run's done flag: set when the pre-step gradient norm
	drops below tolerance or when the step budget is used up. `grad_norm`
	keeps the last measured norm so the two cases can be told apart.
	"""
	trace: Tuple[Point, ...] = ()
	step_count: int = 0
	converged: bool = False
	grad_norm: Optional[float] = None


@dataclass(frozen=True)
class AnnealingState:
	"""
	Trace length tracks elapsed steps, not accepted moves: a rejected proposal
	repeats the previous point. `accepted` counts accepted proposals.
	"""
	trace: Tuple[Point, ...] = ()
	step_count: int = 0
	temperature: float = 200.0
	done: bool = False
	accepted: int = 0


@dataclass(frozen=True)
class MonteCarloState:
	samples: Tuple[Point, ...] = ()
	best: Optional[Point] = None
	step_count: int = 0
	done: bool = False
