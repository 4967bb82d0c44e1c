from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING
from .geometry_cache import geometry_buffers
from .physics_utils import center_of_mass
if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module computes the conserved quantities used to monitor long integrations. The Diagnostics class provides kinetic and Plummer-softened potential energy, total energy, angular and linear momentum, centre-of-mass position and velocity, and relative drift of energy and angular momentum against reference values. All quantities are read from the simulation's float arrays, so they reflect the state published by the last completed step. Relative errors fall back to absolute errors when the reference is zero.

"""




class Diagnostics:

	def __init__(self, simulation: "NBodySimulation"):
		self.sim = simulation

	def kinetic_energy(self) -> float:
		m = self.sim._mass
		v = self.sim._vel
		return 0.5 * float(np.sum(m * np.sum(v * v, axis=1)))

	def potential_energy(self) -> float:
		sim = self.sim
		n = sim.n_bodies
		if n < 2 or sim.G == 0.0:
			return 0.0
		m = sim._mass
		eps = float(sim.softening)
		_, r2, _ = geometry_buffers(sim._pos, eps)
		iu = np.triu_indices(n, 1)
		r_soft = np.sqrt(r2[iu] + eps * eps)
		mprod = (m[:, None] * m[None, :])[iu]
		valid = r_soft > 0.0
		return -sim.G * float(np.sum(mprod[valid] / r_soft[valid]))

	def energy(self) -> float:
		return float(self.kinetic_energy() + self.potential_energy())

	def angular_momentum(self) -> np.ndarray:
		m = self.sim._mass
		L = np.cross(self.sim._pos, m[:, None] * self.sim._vel)
		return np.sum(L, axis=0) if L.size else np.zeros(3)

	def linear_momentum(self) -> np.ndarray:
		return np.sum(self.sim._mass[:, None] * self.sim._vel, axis=0)

	def center_of_mass(self) -> np.ndarray:
		return center_of_mass(self.sim._mass, self.sim._pos)

	def center_of_mass_velocity(self) -> np.ndarray:
		return center_of_mass(self.sim._mass, self.sim._vel)

	def relative_energy_error(self, E0: float) -> float:
		E = self.energy()
		if E0 == 0.0:
			return abs(E - E0)
		return abs((E - E0) / E0)

	def relative_angular_momentum_error(self, L0) -> float:
		L0 = np.asarray(L0, dtype=float)
		dL = float(np.linalg.norm(self.angular_momentum() - L0))
		norm0 = float(np.linalg.norm(L0))
		if norm0 == 0.0:
			return dL
		return dL / norm0

	def summary(self) -> dict:
		return {
			"t": float(self.sim.t),
			"energy": self.energy(),
			"kinetic": self.kinetic_energy(),
			"potential": self.potential_energy(),
			"angular_momentum": self.angular_momentum().tolist(),
			"linear_momentum": self.linear_momentum().tolist(),
		}
