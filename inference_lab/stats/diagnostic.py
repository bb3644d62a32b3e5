from __future__ import annotations


class DiagnosticTest:
	"""Bayes' rule for a binary screening test."""

	@staticmethod
	def positive_probability(prevalence: float, sensitivity: float, specificity: float) -> float:
		"""P(positive) = sensitivity·prev + (1 - specificity)·(1 - prev)."""
		for name, v in (("prevalence", prevalence), ("sensitivity", sensitivity), ("specificity", specificity)):
			if not (0.0 <= v <= 1.0):
				raise ValueError(f"{name} must lie in [0, 1], got {v}")
		return float(sensitivity) * float(prevalence) + (1.0 - float(specificity)) * (1.0 - float(prevalence))

	@staticmethod
	def posterior(prevalence: float, sensitivity: float, specificity: float) -> float:
		"""
		P(condition | positive) = sens·prev / P(positive); 0 when a positive
		result is impossible.
		"""
		p_pos = DiagnosticTest.positive_probability(prevalence, sensitivity, specificity)
		if p_pos <= 0.0:
			return 0.0
		return float(sensitivity) * float(prevalence) / p_pos
