"""
This module defines NBodySimulation, the host object that owns particle storage, the
simulation clock, the gravity evaluator and the integrator.

A simulation is built from Body objects or from parallel mass/position/velocity
sequences and a SimConfig. It exposes the global time t, the step size dt, the
particle count n_bodies, and update_acceleration, which fills the acceleration array
from the current float positions honouring gravity_ignore_terms. step runs one
part1/part2 cycle of the integrator and integrate repeats it until t reaches a target
time; the step size is never adjusted. Particles may be added or removed between
steps; the janus integrator notices the changed count and reseeds its fixed-point
buffer. Float positions or velocities edited without a count change take effect only
after setting recalculate_integer_coordinates.
"""

from __future__ import annotations
from typing import List, Sequence
import numpy as np

from .body import Body
from .body_view import BodyView
from .forces import gravitational_acceleration
from .integrator import Integrator
from .physics_utils import remove_center_of_mass_velocity
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator




class NBodySimulation:

	def __init__(
		self,
		bodies: Sequence[Body] | None = None,
		*,
		masses=None,
		positions=None,
		velocities=None,
		cfg: SimConfig | None = None,
	) -> None:
		self.cfg = (cfg if cfg is not None else SimConfig()).copy()
		if not self.cfg.validate():
			raise ValueError("invalid SimConfig")

		self._state = SimulationState()
		if bodies is not None or masses is not None:
			ok = self._state.build_state(
				list(bodies) if bodies is not None else None,
				masses, positions, velocities,
			)
			if ok:
				ok = SimulationValidator.state_is_valid(
					self._state.mass, self._state.pos, self._state.vel,
					float(self.cfg.softening),
				)
			if not ok:
				SimulationValidator.report_invalid_state(
					"initial state",
					masses=self._state.mass,
					positions=self._state.pos,
					velocities=self._state.vel,
					softening=self.cfg.softening,
				)
				raise ValueError("invalid initial state")
			if not SimulationValidator.fits_int_scale(
					self._state.pos, self._state.vel, self.cfg.int_scale):
				print(f"[warning] initial state exceeds the fixed-point range "
					  f"at int_scale={self.cfg.int_scale:.3e}")

		self.G = float(self.cfg.G)
		self.softening = float(self.cfg.softening)
		self.t = float(self.cfg.initial_time)
		self.dt = float(self.cfg.initial_dt)
		self.gravity_ignore_terms = 0
		self.recalculate_integer_coordinates = False

		self._integrator_mode = self.cfg.integrator_mode
		self._in_integration = False
		self._acc_cached = False

		self._integrator = Integrator(self)

	@property
	def n_bodies(self) -> int:
		return int(self._state.n_bodies)

	@property
	def _mass(self) -> np.ndarray:
		return self._state._mass

	@property
	def _pos(self) -> np.ndarray:
		return self._state._pos

	@property
	def _vel(self) -> np.ndarray:
		return self._state._vel

	@property
	def _acc(self) -> np.ndarray:
		return self._state._acc

	@property
	def mass(self) -> np.ndarray:
		return self._state.mass

	@mass.setter
	def mass(self, value) -> None:
		self._state.mass = value
		self._acc_cached = False

	@property
	def pos(self) -> np.ndarray:
		return self._state.pos

	@pos.setter
	def pos(self, value) -> None:
		self._state.pos = value
		self._acc_cached = False

	@property
	def vel(self) -> np.ndarray:
		return self._state.vel

	@vel.setter
	def vel(self, value) -> None:
		self._state.vel = value

	@property
	def acc(self) -> np.ndarray:
		if not self._acc_cached:
			self.update_acceleration()
		return self._state.acc

	@property
	def bodies(self) -> List[BodyView]:
		return [BodyView(self, i) for i in range(self.n_bodies)]

	@property
	def integrator(self) -> Integrator:
		return self._integrator

	def update_acceleration(self) -> np.ndarray:
		acc = gravitational_acceleration(
			self._state._pos,
			self._state._mass,
			G=self.G,
			eps=self.softening,
			ignore_terms=self.gravity_ignore_terms,
		)
		self._state._acc[...] = acc
		self._acc_cached = True
		return self._state._acc

	def add(self, body: Body | None = None, **kwargs) -> BodyView:
		if body is None:
			body = Body(**kwargs)
		if not (body.mass > 0.0 and np.isfinite(body.mass)):
			raise ValueError(f"body mass must be positive and finite, got {body.mass}")
		if not SimulationValidator.fits_int_scale(
				[body.position], [body.velocity], self.cfg.int_scale):
			print(f"[warning] added body exceeds the fixed-point range "
				  f"at int_scale={self.cfg.int_scale:.3e}")
		idx = self._state.add_body(body.mass, body.position, body.velocity)
		self._acc_cached = False
		return BodyView(self, idx)

	def remove(self, index: int) -> None:
		self._state.remove_body(index)
		self._acc_cached = False

	def move_to_com(self) -> None:
		self._state._vel[...] = remove_center_of_mass_velocity(
			self._state._mass, self._state._vel
		)

	def snapshot(self) -> dict:
		snap = self._state.snapshot()
		snap["t"] = float(self.t)
		snap["dt"] = float(self.dt)
		return snap

	def step(self) -> None:
		self._integrator.step()

	def integrate(self, t_end: float) -> int:
		t_end = float(t_end)
		if self.t >= t_end:
			return 0
		if not self.dt > 0.0:
			print(f"[error] cannot integrate forward to t={t_end} with dt={self.dt}")
			return 0
		n = 0
		while self.t < t_end:
			self.step()
			n += 1
		return n

	def synchronize(self) -> None:
		self._integrator.synchronize()

	def reset_integrator(self) -> None:
		self._integrator.reset()
