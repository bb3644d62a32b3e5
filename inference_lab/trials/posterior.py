"""
Beta-binomial conjugate update and frequentist counterpart.

Both are recomputed from scratch on every call: the posterior only depends on
the prior and the current counts, never on the order the flips arrived in.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Tuple

from inference_lab.stats import BetaDistribution, ProportionEstimators


@dataclass(frozen=True)
class BetaParams:
	alpha: float
	beta: float


@dataclass(frozen=True)
class PriorPreset:
	params: BetaParams
	label: str


PRIORS: Dict[str, PriorPreset] = {
	"uniform": PriorPreset(BetaParams(1.0, 1.0), "No opinion (uniform)"),
	"weak_fair": PriorPreset(BetaParams(5.0, 5.0), "Weakly believe fair"),
	"strong_fair": PriorPreset(BetaParams(20.0, 20.0), "Strongly believe fair"),
	"weak_biased": PriorPreset(BetaParams(3.0, 7.0), "Weakly believe biased (tails)"),
}

DEFAULT_PRIOR = "uniform"


@dataclass(frozen=True)
class BayesianResult:
	posterior_alpha: float
	posterior_beta: float
	posterior_mean: float
	posterior_mode: float
	credible_interval: Tuple[float, float]
	prior_curve: List[Tuple[float, float]]
	posterior_curve: List[Tuple[float, float]]


@dataclass(frozen=True)
class FrequentistResult:
	point_estimate: float
	confidence_interval: Tuple[float, float]
	p_value: float
	reject_null: bool


class BayesianUpdate:
	@staticmethod
	def posterior_params(prior: BetaParams, heads: int, tails: int) -> BetaParams:
		if heads < 0 or tails < 0:
			raise ValueError(f"counts must be non-negative, got heads={heads}, tails={tails}")
		return BetaParams(prior.alpha + heads, prior.beta + tails)

	@staticmethod
	def compute(prior_alpha: float, prior_beta: float, heads: int, tails: int) -> BayesianResult:
		post = BayesianUpdate.posterior_params(BetaParams(float(prior_alpha), float(prior_beta)), int(heads), int(tails))
		return BayesianResult(
			posterior_alpha=post.alpha,
			posterior_beta=post.beta,
			posterior_mean=BetaDistribution.mean(post.alpha, post.beta),
			posterior_mode=BetaDistribution.mode(post.alpha, post.beta),
			credible_interval=BetaDistribution.credible_interval(post.alpha, post.beta),
			prior_curve=BetaDistribution.curve_points(prior_alpha, prior_beta),
			posterior_curve=BetaDistribution.curve_points(post.alpha, post.beta),
		)


class FrequentistTest:
	@staticmethod
	def compute(heads: int, total: int, alpha: float = 0.05) -> FrequentistResult:
		"""
		Point estimate, 95% Wald interval and exact two-sided p-value against a
		fair coin; the null is rejected when p < alpha.
		"""
		if not (0.0 < alpha < 1.0):
			raise ValueError(f"alpha must lie in (0, 1), got {alpha}")
		p_value = ProportionEstimators.binomial_test_p_value(int(heads), int(total))
		return FrequentistResult(
			point_estimate=ProportionEstimators.point_estimate(int(heads), int(total)),
			confidence_interval=ProportionEstimators.wald_confidence_interval(int(heads), int(total)),
			p_value=p_value,
			reject_null=p_value < float(alpha),
		)
