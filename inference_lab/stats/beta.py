"""
Beta distribution helpers for the coin-bias explorable.

All functions are pure and work on plain floats:

  • pdf / cdf / inv     : density, distribution and quantile functions
  • mean / mode         : closed-form summaries (mode uses the piecewise rule)
  • credible_interval   : symmetric two-tailed interval via the quantile function
  • curve_points        : sampled (x, y) pairs for distribution plots

The density is evaluated in log space using the log-gamma function so that
shape parameters from 0.1 up to several hundred stay finite.
"""

from __future__ import annotations
from typing import List, Tuple
import math

import numpy as np
from scipy import special


_CURVE_LO = 0.001
_CURVE_HI = 0.999


class BetaDistribution:
	@staticmethod
	def _check_shape(alpha: float, beta: float) -> None:
		if not (alpha > 0.0 and beta > 0.0):
			raise ValueError(f"beta shape parameters must be positive, got alpha={alpha}, beta={beta}")

	@staticmethod
	def _check_unit(name: str, v: float) -> None:
		if not (0.0 <= v <= 1.0):
			raise ValueError(f"{name} must lie in [0, 1], got {v}")

	@staticmethod
	def log_beta_fn(alpha: float, beta: float) -> float:
		"""log B(alpha, beta) = lgamma(alpha) + lgamma(beta) - lgamma(alpha + beta)."""
		return float(special.gammaln(alpha) + special.gammaln(beta) - special.gammaln(alpha + beta))

	@staticmethod
	def pdf(x: float, alpha: float, beta: float) -> float:
		"""
		Beta density at x.

		xlogy / xlog1py give 0·log(0) = 0, so the boundary values come out as
		the proper limits: inf when the matching shape is < 1, the finite limit
		when it equals 1 and 0 when it is > 1.
		"""
		BetaDistribution._check_shape(alpha, beta)
		BetaDistribution._check_unit("x", x)
		xf = float(x)
		log_den = special.xlogy(alpha - 1.0, xf) + special.xlog1py(beta - 1.0, -xf)
		return float(np.exp(log_den - BetaDistribution.log_beta_fn(alpha, beta)))

	@staticmethod
	def cdf(x: float, alpha: float, beta: float) -> float:
		"""Regularized incomplete beta I_x(alpha, beta)."""
		BetaDistribution._check_shape(alpha, beta)
		BetaDistribution._check_unit("x", x)
		return float(special.betainc(alpha, beta, float(x)))

	@staticmethod
	def inv(p: float, alpha: float, beta: float) -> float:
		"""
		Quantile function. Saturates to 0 / 1 at the ends instead of returning NaN.
		"""
		BetaDistribution._check_shape(alpha, beta)
		BetaDistribution._check_unit("p", p)
		pf = float(p)
		if pf <= 0.0:
			return 0.0
		if pf >= 1.0:
			return 1.0
		x = float(special.betaincinv(alpha, beta, pf))
		if not math.isfinite(x):
			if pf < 0.5:
				return 0.0
			return 1.0
		return min(1.0, max(0.0, x))

	@staticmethod
	def mean(alpha: float, beta: float) -> float:
		BetaDistribution._check_shape(alpha, beta)
		return float(alpha) / float(alpha + beta)

	@staticmethod
	def mode(alpha: float, beta: float) -> float:
		"""
		Mode with the degenerate cases pinned: 0.5 for the flat / U-shaped case,
		0 when only alpha <= 1, 1 when only beta <= 1.
		"""
		BetaDistribution._check_shape(alpha, beta)
		if alpha <= 1.0 and beta <= 1.0:
			return 0.5
		if alpha <= 1.0:
			return 0.0
		if beta <= 1.0:
			return 1.0
		return (float(alpha) - 1.0) / (float(alpha) + float(beta) - 2.0)

	@staticmethod
	def credible_interval(alpha: float, beta: float, level: float = 0.95) -> Tuple[float, float]:
		"""Equal-tailed interval holding `level` of the posterior mass."""
		if not (0.0 < level < 1.0):
			raise ValueError(f"level must lie in (0, 1), got {level}")
		tail = (1.0 - float(level)) / 2.0
		return (BetaDistribution.inv(tail, alpha, beta), BetaDistribution.inv(1.0 - tail, alpha, beta))

	@staticmethod
	def curve_points(alpha: float, beta: float, num_points: int = 200) -> List[Tuple[float, float]]:
		"""
		Sample the density at num_points + 1 evenly spaced x in [0, 1].

		The evaluation point is clamped to [0.001, 0.999]; non-finite densities
		are reported as 0 so the curve is always plottable.
		"""
		BetaDistribution._check_shape(alpha, beta)
		n = int(num_points)
		if n < 1:
			raise ValueError(f"num_points must be >= 1, got {num_points}")
		out: List[Tuple[float, float]] = []
		for i in range(n + 1):
			x = i / n
			xc = max(_CURVE_LO, min(_CURVE_HI, x))
			y = BetaDistribution.pdf(xc, alpha, beta)
			if not math.isfinite(y):
				y = 0.0
			out.append((x, y))
		return out
