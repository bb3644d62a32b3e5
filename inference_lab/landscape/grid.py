"""
Dense loss grids over the unit square for heatmap rendering, plus the flow
iso-lines drawn on top of them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import numpy as np

from .shower import ShowerModel


FLOW_ISO_VALUES = (0.25, 0.5, 0.7, 1.0, 1.25)


@dataclass(frozen=True)
class LossGrid:
	"""
	Row-major loss samples: data[row * width + col] = loss(hot=col/(w-1), cold=row/(h-1)).
	"""
	data: np.ndarray
	width: int
	height: int
	min: float
	max: float

	def as_matrix(self) -> np.ndarray:
		"""View of the data as a (height, width) array; row index is cold."""
		return self.data.reshape(self.height, self.width)

	def coords(self, col: int, row: int) -> Tuple[float, float]:
		return (col / (self.width - 1), row / (self.height - 1))


class LossGridBuilder:
	@staticmethod
	def compute(resolution: int, loss_fn: Callable[[float, float], float] = ShowerModel.loss) -> LossGrid:
		"""Evaluate loss_fn on a resolution × resolution lattice, tracking min / max."""
		n = int(resolution)
		if n < 2:
			raise ValueError(f"resolution must be >= 2, got {resolution}")
		data = np.empty(n * n, dtype=np.float64)
		lo = float("inf")
		hi = float("-inf")
		for row in range(n):
			cold = row / (n - 1)
			for col in range(n):
				hot = col / (n - 1)
				v = float(loss_fn(hot, cold))
				data[row * n + col] = v
				if v < lo:
					lo = v
				if v > hi:
					hi = v
		data.setflags(write=False)
		return LossGrid(data=data, width=n, height=n, min=lo, max=hi)

	@staticmethod
	def find_minimum(grid: LossGrid) -> Tuple[float, float]:
		"""(hot, cold) of the first cell holding the grid minimum."""
		idx = int(np.argmin(grid.data))
		col = idx % grid.width
		row = idx // grid.width
		return grid.coords(col, row)

	@staticmethod
	def flow_iso_segment(f: float) -> Optional[Tuple[Tuple[float, float], Tuple[float, float]]]:
		"""
		Endpoints of hot + cold = f clipped to the unit square, ordered by
		increasing hot. None when the line misses the square.
		"""
		fv = float(f)
		if fv < 0.0 or fv > 2.0:
			return None
		hot_lo = max(0.0, fv - 1.0)
		hot_hi = min(1.0, fv)
		return ((hot_lo, fv - hot_lo), (hot_hi, fv - hot_hi))
