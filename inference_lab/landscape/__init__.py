"""
Shower-knob loss landscape (production package)

Public API re-export:
	ShowerModel   : temperature, flow, comfort, loss, loss_with_trap, clamp
	Gradient      : numeric gradient and temperature/flow decomposition
	LossGridBuilder / LossGrid: dense grids, grid minimum, flow iso-lines
"""

from .shower import (
	ShowerModel, IDEAL_TEMP, IDEAL_FLOW, TRAP_CENTER, PRESET_LOSSES,
)
from .gradient import Gradient, GradientDecomposition
from .grid import LossGrid, LossGridBuilder, FLOW_ISO_VALUES

temperature = ShowerModel.temperature
flow = ShowerModel.flow
comfort = ShowerModel.comfort
loss = ShowerModel.loss
loss_with_trap = ShowerModel.loss_with_trap
clamp = ShowerModel.clamp

gradient = Gradient.numeric
gradient_decomposed = Gradient.decomposed

compute_loss_grid = LossGridBuilder.compute
find_grid_minimum = LossGridBuilder.find_minimum
flow_iso_segment = LossGridBuilder.flow_iso_segment

__all__ = [
	"ShowerModel", "IDEAL_TEMP", "IDEAL_FLOW", "TRAP_CENTER", "PRESET_LOSSES",
	"Gradient", "GradientDecomposition",
	"LossGrid", "LossGridBuilder", "FLOW_ISO_VALUES",
	"temperature", "flow", "comfort", "loss", "loss_with_trap", "clamp",
	"gradient", "gradient_decomposed",
	"compute_loss_grid", "find_grid_minimum", "flow_iso_segment",
]
