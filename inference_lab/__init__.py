"""
Top-level re-exports so callers can reach the statistics, landscape, search
and trial APIs without knowing the subpackage layout.
"""

from .stats import (
	BetaDistribution, ProportionEstimators, DiagnosticTest,
	beta_pdf, beta_cdf, beta_inv, beta_mean, beta_mode,
	beta_credible_interval, beta_curve_points,
	wald_confidence_interval, binomial_test_p_value, bayes_rule_posterior,
)
from .landscape import (
	ShowerModel, Gradient, GradientDecomposition, LossGrid, LossGridBuilder,
	IDEAL_TEMP, IDEAL_FLOW, FLOW_ISO_VALUES,
	temperature, flow, comfort, loss, loss_with_trap, clamp,
	gradient, gradient_decomposed, compute_loss_grid, find_grid_minimum,
)
from .search import (
	Point, GradientDescent, SimulatedAnnealing, MonteCarloSearch,
	StepLoop, SearchSession, compare_methods,
)
from .trials import CoinTrial, PRIORS, bayesian_update, frequentist_test

__all__ = [
	"BetaDistribution", "ProportionEstimators", "DiagnosticTest",
	"beta_pdf", "beta_cdf", "beta_inv", "beta_mean", "beta_mode",
	"beta_credible_interval", "beta_curve_points",
	"wald_confidence_interval", "binomial_test_p_value", "bayes_rule_posterior",
	"ShowerModel", "Gradient", "GradientDecomposition", "LossGrid", "LossGridBuilder",
	"IDEAL_TEMP", "IDEAL_FLOW", "FLOW_ISO_VALUES",
	"temperature", "flow", "comfort", "loss", "loss_with_trap", "clamp",
	"gradient", "gradient_decomposed", "compute_loss_grid", "find_grid_minimum",
	"Point", "GradientDescent", "SimulatedAnnealing", "MonteCarloSearch",
	"StepLoop", "SearchSession", "compare_methods",
	"CoinTrial", "PRIORS", "bayesian_update", "frequentist_test",
]
