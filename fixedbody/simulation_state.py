"""
This module manages the floating-point particle storage of an N-body simulation.

The SimulationState class keeps masses as an (N,) array and positions, velocities and
accelerations as (N, 3) float64 arrays, provides property accessors whose setters
validate shape before writing in place, builds the arrays from Body objects or raw
sequences, and adds or removes single particles. Storage is index-stable: a particle
keeps its row until a removal shifts the rows after it. The arrays are the externally
visible state; the integrator may hold a more precise private copy.
"""

from __future__ import annotations
import numpy as np
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
	from .body import Body




class SimulationState:

	def __init__(self):
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._acc: np.ndarray = np.empty((0, 3), dtype=np.float64)

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def mass(self) -> np.ndarray:
		return self._mass

	@property
	def acc(self) -> np.ndarray:
		return self._acc

	@staticmethod
	def _as_vectors(value, name: str, expected: tuple) -> np.ndarray | None:
		arr = np.asarray(value, dtype=np.float64)
		if arr.ndim == 1:
			if arr.size % 3 != 0:
				print(f"[warning] sim.{name} must be shape (N,3) or flat length 3N")
				return None
			arr = arr.reshape(-1, 3)
		elif arr.ndim != 2 or arr.shape[1] != 3:
			print(f"[warning] sim.{name} must be shape (N,3) or flat length 3N")
			return None
		if arr.shape != expected:
			print(f"[warning] shape mismatch when assigning to sim.{name}: "
				  f"expected {expected}, got {arr.shape}")
			return None
		return arr

	@pos.setter
	def pos(self, value: np.ndarray) -> None:
		arr = self._as_vectors(value, "pos", self._pos.shape)
		if arr is not None:
			self._pos[...] = arr

	@vel.setter
	def vel(self, value: np.ndarray) -> None:
		arr = self._as_vectors(value, "vel", self._vel.shape)
		if arr is not None:
			self._vel[...] = arr

	@mass.setter
	def mass(self, value: np.ndarray) -> None:
		arr = np.asarray(value, dtype=np.float64).ravel()
		if arr.shape != self._mass.shape:
			print(f"[warning] shape mismatch when assigning to sim.mass: "
				  f"expected {self._mass.shape}, got {arr.shape}")
			return
		if np.any(arr <= 0) or not np.all(np.isfinite(arr)):
			print("[warning] all masses must be positive finite numbers")
			return
		self._mass[...] = arr

	def build_state(self, bodies: List[Body] | None, masses, positions, velocities) -> bool:
		if bodies is None:
			if masses is None or positions is None:
				return False

			masses = list(masses)
			positions = list(positions)
			if velocities is None:
				velocities = []
			else:
				velocities = list(velocities)

			if len(velocities) == 0:
				velocities = [(0.0, 0.0, 0.0)] * len(masses)

			if len(velocities) != len(masses) or len(positions) != len(masses):
				return False

			self.n_bodies = len(masses)
			self._mass = np.asarray(masses, dtype=np.float64).reshape(-1)
			self._pos = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
			self._vel = np.asarray(velocities, dtype=np.float64).reshape(-1, 3)

		else:
			self.n_bodies = len(bodies)
			self._mass = np.array([b.mass for b in bodies], dtype=np.float64)
			self._pos = np.array([b.position for b in bodies], dtype=np.float64).reshape(-1, 3)
			self._vel = np.array([b.velocity for b in bodies], dtype=np.float64).reshape(-1, 3)

		if np.any(self._mass <= 0) or not np.all(np.isfinite(self._mass)):
			return False

		self._acc = np.zeros_like(self._pos)
		return True

	def add_body(self, mass: float, position, velocity) -> int:
		p = np.asarray(position, dtype=np.float64).reshape(1, 3)
		v = np.asarray(velocity, dtype=np.float64).reshape(1, 3)
		self._mass = np.append(self._mass, float(mass))
		self._pos = np.vstack((self._pos, p))
		self._vel = np.vstack((self._vel, v))
		self._acc = np.vstack((self._acc, np.zeros((1, 3), dtype=np.float64)))
		self.n_bodies = int(self._mass.size)
		return self.n_bodies - 1

	def remove_body(self, index: int) -> None:
		i = int(index)
		if i < 0:
			i += self.n_bodies
		if not 0 <= i < self.n_bodies:
			raise IndexError(f"body index {index} out of range for {self.n_bodies} bodies")
		self._mass = np.delete(self._mass, i)
		self._pos = np.delete(self._pos, i, axis=0)
		self._vel = np.delete(self._vel, i, axis=0)
		self._acc = np.delete(self._acc, i, axis=0)
		self.n_bodies = int(self._mass.size)

	def snapshot(self) -> dict:
		return {
			"masses": self._mass.copy(),
			"positions": self._pos.copy(),
			"velocities": self._vel.copy(),
		}
