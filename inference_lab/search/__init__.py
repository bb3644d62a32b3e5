from .config import (
	Point, LogEvent, LossFn,
	GradientDescentConfig, AnnealingConfig, MonteCarloConfig,
	GradientDescentState, AnnealingState, MonteCarloState,
)
from .base import SearchAlgorithm
from .gradient_descent import GradientDescent
from .annealing import SimulatedAnnealing
from .monte_carlo import MonteCarloSearch
from .loop import StepLoop, SearchSession
from .comparison import MethodResult, MethodComparison

summarize = MethodComparison.summarize
compare_methods = MethodComparison.table

__all__ = [
	"Point", "LogEvent", "LossFn",
	"GradientDescentConfig", "AnnealingConfig", "MonteCarloConfig",
	"GradientDescentState", "AnnealingState", "MonteCarloState",
	"SearchAlgorithm", "GradientDescent", "SimulatedAnnealing", "MonteCarloSearch",
	"StepLoop", "SearchSession",
	"MethodResult", "MethodComparison", "summarize", "compare_methods",
]
