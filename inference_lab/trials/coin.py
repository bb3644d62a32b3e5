from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from inference_lab.random_source import RandomSource


HEADS = "H"
TAILS = "T"


@dataclass(frozen=True)
class CoinTrialState:
	outcomes: Tuple[str, ...] = ()
	heads: int = 0
	tails: int = 0

	@property
	def total(self) -> int:
		return len(self.outcomes)


class CoinTrial:
	"""
	Accumulates Bernoulli(true_bias) coin flips. Outcomes are only ever
	appended; reset() is the only way to drop them.
	"""

	def __init__(self,
				 true_bias: float = 0.5,
				 rng: Optional[np.random.Generator] = None,
				 seed: Optional[int] = None) -> None:
		self.true_bias = 0.5
		self.set_true_bias(true_bias)
		self.rng = RandomSource.generator(rng, seed)
		self.state = CoinTrialState()

	def set_true_bias(self, true_bias: float) -> None:
		if not (0.0 <= true_bias <= 1.0):
			raise ValueError(f"true_bias must lie in [0, 1], got {true_bias}")
		self.true_bias = float(true_bias)

	@property
	def heads(self) -> int:
		return self.state.heads

	@property
	def tails(self) -> int:
		return self.state.tails

	@property
	def total(self) -> int:
		return self.state.total

	def flip(self, count: int = 1) -> CoinTrialState:
		n = int(count)
		if n != count:
			raise ValueError(f"count must be an integer, got {count}")
		if n < 0:
			raise ValueError(f"count must be non-negative, got {count}")
		draws = self.rng.random(n) < self.true_bias
		batch = tuple(HEADS if d else TAILS for d in draws)
		new_heads = int(np.count_nonzero(draws))
		self.state = CoinTrialState(
			outcomes=self.state.outcomes + batch,
			heads=self.state.heads + new_heads,
			tails=self.state.tails + (n - new_heads),
		)
		return self.state

	def reset(self) -> CoinTrialState:
		self.state = CoinTrialState()
		return self.state

	def running_proportion(self) -> List[Tuple[int, float]]:
		"""(flip number, fraction of heads so far) after each flip."""
		out: List[Tuple[int, float]] = []
		heads = 0
		for i, o in enumerate(self.state.outcomes):
			if o == HEADS:
				heads += 1
			out.append((i + 1, heads / (i + 1)))
		return out
