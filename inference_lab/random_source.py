from __future__ import annotations
from typing import Optional

import numpy as np


class RandomSource:
	@staticmethod
	def generator(rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> np.random.Generator:
		"""
		Return `rng` when given, else a PCG64 Generator seeded with `seed`
		(fresh OS entropy when seed is None).
		"""
		if rng is not None:
			return rng
		if seed is None:
			return np.random.Generator(np.random.PCG64())
		return np.random.Generator(np.random.PCG64(int(seed)))
