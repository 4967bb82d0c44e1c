"""
This module implements BodyView, a proxy providing Body-like access to one particle
stored in the simulation's numpy arrays.

Position and velocity components map to columns of the simulation arrays and can be
written; acceleration components are read-only and reflect the last force evaluation.
Writing a position or mass marks the simulation's cached acceleration stale.
Writes land in the floating-point arrays only: while the janus integrator holds a
fixed-point buffer of the same size, such edits are picked up at the next step only
when the simulation's recalculate_integer_coordinates flag is set.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
if TYPE_CHECKING:
	from .simulation import NBodySimulation


def _component(array_name: str, col: int, writable: bool = True) -> property:
	def fget(self) -> float:
		return float(getattr(self._sim, array_name)[self._i, col])

	def fset(self, v: float) -> None:
		getattr(self._sim, array_name)[self._i, col] = float(v)
		if array_name == "_pos":
			self._sim._acc_cached = False

	return property(fget, fset if writable else None)


class BodyView:
	__slots__ = ("_sim", "_i")

	def __init__(self, sim: "NBodySimulation", idx: int) -> None:
		self._sim = sim
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def mass(self) -> float:
		return float(self._sim._mass[self._i])
	@mass.setter
	def mass(self, v: float) -> None:
		self._sim._mass[self._i] = float(v)
		self._sim._acc_cached = False

	x = _component("_pos", 0)
	y = _component("_pos", 1)
	z = _component("_pos", 2)
	vx = _component("_vel", 0)
	vy = _component("_vel", 1)
	vz = _component("_vel", 2)
	ax = _component("_acc", 0, writable=False)
	ay = _component("_acc", 1, writable=False)
	az = _component("_acc", 2, writable=False)

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, x={self.x}, y={self.y}, z={self.z}, "
				f"vx={self.vx}, vy={self.vy}, vz={self.vz})")
