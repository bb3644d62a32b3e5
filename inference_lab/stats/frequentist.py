"""
Frequentist estimators for a single proportion: the Wald interval and an exact
two-sided binomial test.
"""

from __future__ import annotations
from typing import Tuple

import numpy as np
from scipy import stats


_PMF_TOL = 1e-10


class ProportionEstimators:
	@staticmethod
	def _check_counts(success_count: int, total: int) -> None:
		if total < 0:
			raise ValueError(f"total must be non-negative, got {total}")
		if not (0 <= success_count <= total):
			raise ValueError(f"success_count must lie in [0, {total}], got {success_count}")

	@staticmethod
	def wald_confidence_interval(success_count: int, total: int, level: float = 0.95) -> Tuple[float, float]:
		"""
		Normal-approximation interval p̂ ± z·sqrt(p̂(1-p̂)/n), clipped to [0, 1].
		With no trials the whole unit interval is returned.
		"""
		ProportionEstimators._check_counts(success_count, total)
		if not (0.0 < level < 1.0):
			raise ValueError(f"level must lie in (0, 1), got {level}")
		if total == 0:
			return (0.0, 1.0)
		p_hat = float(success_count) / float(total)
		z = float(stats.norm.ppf(1.0 - (1.0 - float(level)) / 2.0))
		se = float(np.sqrt(p_hat * (1.0 - p_hat) / float(total)))
		return (max(0.0, p_hat - z * se), min(1.0, p_hat + z * se))

	@staticmethod
	def binomial_test_p_value(success_count: int, total: int, p0: float = 0.5) -> float:
		"""
		Exact two-sided binomial test for H0: p = p0.

		Sums the mass of every outcome k in [0, total] that is no more likely
		than the observed count (within 1e-10), which handles asymmetric p0.
		"""
		ProportionEstimators._check_counts(success_count, total)
		if not (0.0 <= p0 <= 1.0):
			raise ValueError(f"p0 must lie in [0, 1], got {p0}")
		if total == 0:
			return 1.0
		ks = np.arange(int(total) + 1)
		pmf = stats.binom.pmf(ks, int(total), float(p0))
		observed = float(pmf[int(success_count)])
		p_value = float(np.sum(pmf[pmf <= observed + _PMF_TOL]))
		return min(1.0, p_value)

	@staticmethod
	def point_estimate(success_count: int, total: int) -> float:
		"""Observed proportion, 0.5 when nothing has been observed yet."""
		ProportionEstimators._check_counts(success_count, total)
		if total == 0:
			return 0.5
		return float(success_count) / float(total)
