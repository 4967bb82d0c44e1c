"""
This module provides validation utilities for N-body simulation states.

The SimulationValidator class offers static methods to check an initial state
(positive finite masses, finite (N, 3) positions and velocities of matching length,
non-negative softening) and to print a diagnostic report for a rejected state. It also
checks that a state fits the fixed-point range at a given scale, since values beyond
that range are not detected once stepping has started.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple
import numpy as np
from .fixed_point import magnitude_limit





Vec3 = Tuple[float, float, float]


class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec3],
		velocities: Sequence[Vec3],
		softening: float = 0.0,
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 3:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		if not (softening >= 0.0 and math.isfinite(softening)):
			return False

		return True

	@staticmethod
	def fits_int_scale(positions, velocities, int_scale: float, bits: int = 128) -> bool:
		limit = magnitude_limit(int_scale, bits)
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)
		if r.size and float(np.max(np.abs(r))) >= limit:
			return False
		if v.size and float(np.max(np.abs(v))) >= limit:
			return False
		return True

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
		softening=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			print("masses", masses)
		if positions is not None:
			print("positions", positions)
			for i, pos in enumerate(positions):
				if len(pos) != 3:
					print(f"  position[{i}] has {len(pos)} dimensions (expected 3)")
		if velocities is not None:
			print("velocities", velocities)
			for i, vel in enumerate(velocities):
				if len(vel) != 3:
					print(f"  velocity[{i}] has {len(vel)} dimensions (expected 3)")
		if softening is not None:
			print("softening", softening)
