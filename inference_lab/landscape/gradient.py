"""
Numeric gradients of a 2-D loss and their chain-rule decomposition.

The chain rule over (temperature, flow) gives

	∂L/∂hot  = (∂L/∂T)(∂T/∂hot)  + (∂L/∂F)(∂F/∂hot)
	∂L/∂cold = (∂L/∂T)(∂T/∂cold) + (∂L/∂F)(∂F/∂cold)

with ∂F/∂hot = ∂F/∂cold = 1. The temperature Jacobian is derived once with
SymPy from the same formula as ShowerModel.temperature and lambdified; the two
scalar partials ∂L/∂T and ∂L/∂F are then recovered from the numeric gradient
by a 2×2 solve.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np
import sympy as sp

from .shower import ShowerModel, HOT_WATER_TEMP, COLD_WATER_TEMP


LossFn = Callable[[float, float], float]
Vec2 = Tuple[float, float]

_H = 1e-4
_DET_EPS = 1e-10


def _build_temperature_jacobian():
	hot, cold = sp.symbols("hot cold", real=True)
	temp = (hot * sp.Float(HOT_WATER_TEMP) + cold * sp.Float(COLD_WATER_TEMP)) / (hot + cold + sp.Rational(1, 100))
	d_hot = sp.simplify(sp.diff(temp, hot))
	d_cold = sp.simplify(sp.diff(temp, cold))
	return sp.lambdify((hot, cold), (d_hot, d_cold), modules="numpy")


_TEMPERATURE_JACOBIAN = _build_temperature_jacobian()


@dataclass(frozen=True)
class GradientDecomposition:
	"""Temperature and flow contributions to the total gradient, each as (d_hot, d_cold)."""
	temp_component: Vec2
	flow_component: Vec2
	total: Vec2


class Gradient:
	@staticmethod
	def numeric(hot: float, cold: float, loss_fn: LossFn = ShowerModel.loss) -> Vec2:
		"""Central differences with step 1e-4 on each axis."""
		h = float(hot)
		c = float(cold)
		d_hot = (float(loss_fn(h + _H, c)) - float(loss_fn(h - _H, c))) / (2.0 * _H)
		d_cold = (float(loss_fn(h, c + _H)) - float(loss_fn(h, c - _H))) / (2.0 * _H)
		return (d_hot, d_cold)

	@staticmethod
	def magnitude(g: Vec2) -> float:
		return float(np.hypot(g[0], g[1]))

	@staticmethod
	def temperature_jacobian(hot: float, cold: float) -> Vec2:
		"""(∂T/∂hot, ∂T/∂cold) at (hot, cold)."""
		d_hot, d_cold = _TEMPERATURE_JACOBIAN(float(hot), float(cold))
		return (float(d_hot), float(d_cold))

	@staticmethod
	def decomposed(hot: float, cold: float, loss_fn: LossFn = ShowerModel.loss) -> GradientDecomposition:
		"""
		Split the numeric gradient into temperature and flow parts.

		When the Jacobian determinant is below 1e-10 in magnitude the whole
		gradient is attributed to flow and the temperature part is zero.
		"""
		total = Gradient.numeric(hot, cold, loss_fn)
		dt_dh, dt_dc = Gradient.temperature_jacobian(hot, cold)
		det = dt_dh - dt_dc
		if abs(det) < _DET_EPS:
			return GradientDecomposition(temp_component=(0.0, 0.0), flow_component=total, total=total)
		dl_dtemp = (total[0] - total[1]) / det
		dl_dflow = total[0] - dl_dtemp * dt_dh
		return GradientDecomposition(
			temp_component=(dl_dtemp * dt_dh, dl_dtemp * dt_dc),
			flow_component=(dl_dflow, dl_dflow),
			total=total,
		)
