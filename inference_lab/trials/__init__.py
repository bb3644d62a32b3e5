from .coin import CoinTrial, CoinTrialState, HEADS, TAILS
from .posterior import (
	BetaParams, PriorPreset, PRIORS, DEFAULT_PRIOR,
	BayesianResult, FrequentistResult, BayesianUpdate, FrequentistTest,
)

bayesian_update = BayesianUpdate.compute
frequentist_test = FrequentistTest.compute

__all__ = [
	"CoinTrial", "CoinTrialState", "HEADS", "TAILS",
	"BetaParams", "PriorPreset", "PRIORS", "DEFAULT_PRIOR",
	"BayesianResult", "FrequentistResult", "BayesianUpdate", "FrequentistTest",
	"bayesian_update", "frequentist_test",
]
