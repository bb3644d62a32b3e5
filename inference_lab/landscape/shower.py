"""
Shower-knob loss landscape.

Two knobs (hot, cold) in [0, 1] control

	temperature = (60·hot + 10·cold) / (hot + cold + 0.01)
	flow        = hot + cold                       ∈ [0, 2]

Comfort is the product of a Gaussian temperature term peaked at IDEAL_TEMP
(variance 25), an asymmetric Gaussian flow term peaked at IDEAL_FLOW (σ = 0.2
below, 0.5 above) and a flow-existence factor 1 - exp(-10·flow). Loss is the
inverse comfort, offset so that it stays finite.

Every function accepts floats or NumPy arrays; scalar inputs give floats.
"""

from __future__ import annotations
import numpy as np


IDEAL_TEMP = 38.0
IDEAL_FLOW = 0.7
HOT_WATER_TEMP = 60.0
COLD_WATER_TEMP = 10.0

_DENOM_GUARD = 0.01
_TEMP_VAR2 = 50.0
_FLOW_SIGMA_LOW = 0.2
_FLOW_SIGMA_HIGH = 0.5
_FLOW_EXIST_RATE = 10.0
_LOSS_OFFSET = 0.005

TRAP_CENTER = (0.15, 0.65)
TRAP_SPREAD = 0.06
TRAP_DEPTH = 0.8


def _out(v):
	if np.ndim(v) == 0:
		return float(v)
	return v


class ShowerModel:
	@staticmethod
	def temperature(hot, cold):
		h = np.asarray(hot, dtype=np.float64)
		c = np.asarray(cold, dtype=np.float64)
		return _out((h * HOT_WATER_TEMP + c * COLD_WATER_TEMP) / (h + c + _DENOM_GUARD))

	@staticmethod
	def flow(hot, cold):
		return _out(np.asarray(hot, dtype=np.float64) + np.asarray(cold, dtype=np.float64))

	@staticmethod
	def comfort(hot, cold):
		temp = np.asarray(ShowerModel.temperature(hot, cold), dtype=np.float64)
		f = np.asarray(ShowerModel.flow(hot, cold), dtype=np.float64)
		temp_c = np.exp(-((temp - IDEAL_TEMP) ** 2) / _TEMP_VAR2)
		sigma = np.where(f < IDEAL_FLOW, _FLOW_SIGMA_LOW, _FLOW_SIGMA_HIGH)
		flow_c = np.exp(-((f - IDEAL_FLOW) ** 2) / (2.0 * sigma ** 2))
		flow_exists = 1.0 - np.exp(-f * _FLOW_EXIST_RATE)
		return _out(temp_c * flow_c * flow_exists)

	@staticmethod
	def loss(hot, cold):
		"""1 / (comfort + 0.005): positive and bounded above by 200."""
		return _out(1.0 / (np.asarray(ShowerModel.comfort(hot, cold), dtype=np.float64) + _LOSS_OFFSET))

	@staticmethod
	def loss_with_trap(hot, cold):
		"""
		Loss with a Gaussian dent around TRAP_CENTER that removes up to 80% of
		the base loss, giving gradient methods a local minimum to fall into.
		The result never drops below 0.2 · loss.
		"""
		base = np.asarray(ShowerModel.loss(hot, cold), dtype=np.float64)
		tx, ty = TRAP_CENTER
		dist2 = (np.asarray(hot, dtype=np.float64) - tx) ** 2 + (np.asarray(cold, dtype=np.float64) - ty) ** 2
		trap = base * TRAP_DEPTH * np.exp(-dist2 / (2.0 * TRAP_SPREAD ** 2))
		return _out(base - trap)

	@staticmethod
	def clamp(v: float, lo: float, hi: float) -> float:
		return max(lo, min(hi, v))


PRESET_LOSSES = {
	"loss": ShowerModel.loss,
	"loss_with_trap": ShowerModel.loss_with_trap,
}
