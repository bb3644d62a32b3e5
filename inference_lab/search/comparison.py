from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from inference_lab.search.base import SearchAlgorithm
from inference_lab.search.config import Point


@dataclass(frozen=True)
class MethodResult:
	label: str
	steps: int
	best: Optional[Point]


class MethodComparison:
	"""Side-by-side summary of several search runs."""

	COLUMNS = ["label", "steps", "best_loss", "best_hot", "best_cold"]

	@staticmethod
	def summarize(label: str, algorithm: SearchAlgorithm) -> MethodResult:
		return MethodResult(label=str(label), steps=algorithm.step_count, best=algorithm.best_point)

	@staticmethod
	def table(results: Sequence[MethodResult]) -> pd.DataFrame:
		"""
		One row per method ordered by best loss (stable, runs without a best
		point last).
		"""
		rows = []
		for r in results:
			if r.best is None:
				rows.append({"label": r.label, "steps": int(r.steps), "best_loss": np.nan, "best_hot": np.nan, "best_cold": np.nan})
			else:
				rows.append({"label": r.label, "steps": int(r.steps), "best_loss": r.best.loss, "best_hot": r.best.hot, "best_cold": r.best.cold})
		df = pd.DataFrame(rows, columns=MethodComparison.COLUMNS)
		return df.sort_values("best_loss", kind="mergesort", na_position="last").reset_index(drop=True)
