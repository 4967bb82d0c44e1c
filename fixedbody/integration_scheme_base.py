"""
This base class defines the interface shared by integration schemes.

A scheme advances the simulation in two halves: part1 does the work of a step on the
scheme's private state, and part2 publishes the result into the simulation arrays and
advances the clock. synchronize brings the public arrays up to date between the two
halves for schemes that can, and reset releases any private state so the next part1
starts from the public arrays. IntegrationScheme also provides flag_positions_changed
for invalidating cached accelerations after the public positions move. Subclasses
access the simulation through the owning Integrator.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from .integrator import Integrator



class IntegrationScheme:

	def __init__(self, integrator: "Integrator") -> None:
		self.integ = integrator

	def flag_positions_changed(self) -> None:
		self.integ.sim._acc_cached = False

	def part1(self) -> None:
		raise NotImplementedError(f"{type(self).__name__} does not implement part1")

	def part2(self) -> None:
		raise NotImplementedError(f"{type(self).__name__} does not implement part2")

	def synchronize(self) -> None:
		pass

	def reset(self) -> None:
		pass
