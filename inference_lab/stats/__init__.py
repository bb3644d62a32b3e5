"""
Closed-form statistics used by the inference demos.

Public API re-export:
	BetaDistribution     : beta pdf / cdf / quantile, mean, mode, intervals, curves
	ProportionEstimators : Wald interval, exact binomial test, point estimate
	DiagnosticTest       : Bayes' rule for a screening test
"""

from .beta import BetaDistribution
from .frequentist import ProportionEstimators
from .diagnostic import DiagnosticTest

beta_pdf = BetaDistribution.pdf
beta_cdf = BetaDistribution.cdf
beta_inv = BetaDistribution.inv
beta_mean = BetaDistribution.mean
beta_mode = BetaDistribution.mode
beta_credible_interval = BetaDistribution.credible_interval
beta_curve_points = BetaDistribution.curve_points

wald_confidence_interval = ProportionEstimators.wald_confidence_interval
binomial_test_p_value = ProportionEstimators.binomial_test_p_value

bayes_rule_posterior = DiagnosticTest.posterior

__all__ = [
	"BetaDistribution", "ProportionEstimators", "DiagnosticTest",
	"beta_pdf", "beta_cdf", "beta_inv", "beta_mean", "beta_mode",
	"beta_credible_interval", "beta_curve_points",
	"wald_confidence_interval", "binomial_test_p_value",
	"bayes_rule_posterior",
]
