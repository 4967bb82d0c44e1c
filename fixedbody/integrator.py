from __future__ import annotations
from typing import TYPE_CHECKING
from .integration_scheme_base import IntegrationScheme
from .janus_scheme import JanusScheme

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module implements the Integrator class that coordinates timestepping for an N-body simulation. It builds the integration scheme named by the configuration, forwards the part1/part2/synchronize/reset protocol to it, and runs full steps as part1 followed by part2 with a guard against re-entrant calls. It also keeps per-step bookkeeping (force evaluations in the last step, steps taken) used by diagnostics and tests. The class assumes the simulation keeps valid particle arrays between calls.

"""

class Integrator:

	def __init__(self, sim: "NBodySimulation") -> None:
		self.sim = sim
		self._force_evals_in_last_step = 0
		self._steps_taken = 0
		self._warned_reentrant = False

		self._scheme: IntegrationScheme = self._make_scheme(sim._integrator_mode)

	def _make_scheme(self, mode: str) -> IntegrationScheme:
		if mode == "janus":
			return JanusScheme(self)
		raise ValueError(f"unknown integrator mode {mode!r}")

	@property
	def scheme(self) -> IntegrationScheme:
		return self._scheme

	@property
	def force_evals_in_last_step(self) -> int:
		return int(self._force_evals_in_last_step)

	@property
	def steps_taken(self) -> int:
		return int(self._steps_taken)

	def part1(self) -> None:
		self._force_evals_in_last_step = 0
		self._scheme.part1()

	def part2(self) -> None:
		self._scheme.part2()

	def synchronize(self) -> None:
		self._scheme.synchronize()

	def reset(self) -> None:
		self._scheme.reset()
		self._force_evals_in_last_step = 0

	def step(self) -> None:
		sim = self.sim
		if sim._in_integration:
			if not self._warned_reentrant:
				print("[warning] Integrator.step called re-entrantly; call ignored")
				self._warned_reentrant = True
			return

		sim._in_integration = True
		try:
			self.part1()
			self.part2()
		finally:
			sim._in_integration = False
		self._steps_taken += 1
