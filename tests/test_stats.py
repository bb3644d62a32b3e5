"""
Tests for the closed-form statistics helpers.

Tests verify:
1. Beta density, distribution and quantile functions
2. Mode piecewise rule and credible intervals
3. Wald interval and exact binomial test
4. Bayes' rule for screening tests
"""

import math

import numpy as np
import pytest

from inference_lab.stats import (
	BetaDistribution,
	bayes_rule_posterior,
	beta_cdf,
	beta_credible_interval,
	beta_curve_points,
	beta_inv,
	beta_mean,
	beta_mode,
	beta_pdf,
	binomial_test_p_value,
	wald_confidence_interval,
)


SHAPES = [(1.0, 1.0), (2.0, 5.0), (10.0, 10.0), (3.0, 7.0), (30.0, 12.0)]


def trapezoid(points):
	total = 0.0
	for (x0, y0), (x1, y1) in zip(points[:-1], points[1:]):
		total += (x1 - x0) * (y0 + y1) / 2.0
	return total


# =============================================================================
# Tests: Beta distribution
# =============================================================================

class TestBetaDensity:
	"""pdf / cdf / quantile behaviour."""

	@pytest.mark.parametrize("alpha,beta", SHAPES)
	def test_mean_identity(self, alpha, beta):
		assert beta_mean(alpha, beta) == alpha / (alpha + beta)

	@pytest.mark.parametrize("alpha,beta", SHAPES)
	def test_curve_integrates_to_one(self, alpha, beta):
		pts = beta_curve_points(alpha, beta)
		assert trapezoid(pts) == pytest.approx(1.0, abs=1e-2)

	def test_known_density_values(self):
		assert beta_pdf(0.5, 2, 2) == pytest.approx(1.5)
		assert beta_pdf(0.3, 1, 1) == pytest.approx(1.0)
		assert beta_cdf(0.5, 2, 2) == pytest.approx(0.5)

	def test_boundary_densities(self):
		assert beta_pdf(0.0, 1, 3) == pytest.approx(3.0)
		assert beta_pdf(1.0, 2, 2) == 0.0
		assert math.isinf(beta_pdf(0.0, 0.5, 0.5))

	def test_large_shapes_stay_finite(self):
		y = beta_pdf(0.5, 400.0, 400.0)
		assert math.isfinite(y)
		assert y > 0.0

	def test_inverse_near_edges_is_not_nan(self):
		for p in (0.0, 1e-12, 1e-6, 1 - 1e-6, 1 - 1e-12, 1.0):
			x = beta_inv(p, 2.0, 3.0)
			assert not math.isnan(x)
			assert 0.0 <= x <= 1.0
		assert beta_inv(0.0, 2.0, 3.0) == 0.0
		assert beta_inv(1.0, 2.0, 3.0) == 1.0

	def test_inverse_round_trip(self):
		x = beta_inv(0.3, 4.0, 9.0)
		assert beta_cdf(x, 4.0, 9.0) == pytest.approx(0.3, abs=1e-9)

	def test_domain_violations_raise(self):
		with pytest.raises(ValueError):
			beta_pdf(0.5, -1.0, 2.0)
		with pytest.raises(ValueError):
			beta_pdf(1.5, 2.0, 2.0)
		with pytest.raises(ValueError):
			beta_cdf(0.5, 2.0, 0.0)
		with pytest.raises(ValueError):
			beta_credible_interval(2.0, 2.0, level=1.5)


class TestBetaSummaries:
	"""Mode rule, intervals and curve sampling."""

	def test_mode_cases(self):
		assert beta_mode(1, 1) == 0.5
		assert beta_mode(0.5, 0.5) == 0.5
		assert beta_mode(0.5, 5) == 0
		assert beta_mode(5, 0.5) == 1
		assert beta_mode(3, 3) == 0.5
		assert beta_mode(8, 4) == pytest.approx(0.7)

	@pytest.mark.parametrize("alpha,beta", SHAPES + [(0.5, 0.5), (0.2, 3.0)])
	@pytest.mark.parametrize("level", [0.5, 0.9, 0.95])
	def test_credible_interval_mass(self, alpha, beta, level):
		lo, hi = beta_credible_interval(alpha, beta, level)
		assert 0.0 <= lo <= hi <= 1.0
		assert beta_cdf(hi, alpha, beta) - beta_cdf(lo, alpha, beta) == pytest.approx(level, abs=1e-6)

	def test_curve_shape(self):
		pts = beta_curve_points(0.5, 0.5, num_points=50)
		assert len(pts) == 51
		assert pts[0][0] == 0.0
		assert pts[-1][0] == 1.0
		assert all(math.isfinite(y) and y >= 0.0 for _, y in pts)

	def test_curve_edges_use_clamped_density(self):
		pts = beta_curve_points(2.0, 5.0, num_points=10)
		assert pts[0][1] == pytest.approx(beta_pdf(0.001, 2.0, 5.0))
		assert pts[-1][1] == pytest.approx(beta_pdf(0.999, 2.0, 5.0))

	def test_log_beta_matches_gamma(self):
		expected = math.lgamma(2.5) + math.lgamma(4.0) - math.lgamma(6.5)
		assert BetaDistribution.log_beta_fn(2.5, 4.0) == pytest.approx(expected)


# =============================================================================
# Tests: Frequentist estimators
# =============================================================================

class TestWaldInterval:

	def test_no_data(self):
		assert wald_confidence_interval(0, 0) == (0.0, 1.0)

	def test_contains_point_estimate(self):
		for total in (1, 5, 10, 37, 100):
			for heads in range(total + 1):
				lo, hi = wald_confidence_interval(heads, total)
				assert 0.0 <= lo <= heads / total <= hi <= 1.0

	def test_known_interval(self):
		lo, hi = wald_confidence_interval(50, 100)
		half = 1.959963984540054 * math.sqrt(0.25 / 100)
		assert lo == pytest.approx(0.5 - half)
		assert hi == pytest.approx(0.5 + half)

	def test_bad_counts_raise(self):
		with pytest.raises(ValueError):
			wald_confidence_interval(5, 3)


class TestBinomialTest:

	def test_no_data(self):
		assert binomial_test_p_value(0, 0) == 1.0

	@pytest.mark.parametrize("total", [2, 10, 20, 50])
	def test_symmetric_case_is_maximal(self, total):
		assert binomial_test_p_value(total // 2, total) == pytest.approx(1.0)

	def test_known_value(self):
		assert binomial_test_p_value(7, 10) == pytest.approx(352 / 1024)

	def test_monotone_away_from_null(self):
		total = 30
		upper = [binomial_test_p_value(k, total) for k in range(15, total + 1)]
		lower = [binomial_test_p_value(k, total) for k in range(15, -1, -1)]
		assert all(a >= b for a, b in zip(upper[:-1], upper[1:]))
		assert all(a >= b for a, b in zip(lower[:-1], lower[1:]))

	def test_asymmetric_null_in_range(self):
		vals = [binomial_test_p_value(k, 25, p0=0.3) for k in range(26)]
		assert all(0.0 <= v <= 1.0 for v in vals)
		assert int(np.argmax(vals)) in (7, 8)


# =============================================================================
# Tests: Diagnostic test
# =============================================================================

class TestBayesRule:

	def test_rare_condition(self):
		assert bayes_rule_posterior(0.01, 0.95, 0.95) == pytest.approx(0.0095 / 0.059)

	def test_impossible_positive(self):
		assert bayes_rule_posterior(0.0, 0.9, 1.0) == 0.0

	def test_out_of_range(self):
		with pytest.raises(ValueError):
			bayes_rule_posterior(1.2, 0.9, 0.9)
