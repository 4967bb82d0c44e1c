"""
This module implements the janus integrator: a time-reversible, 4th-order symmetric
composition of leapfrog steps evolved on fixed-point particle state.

JanusScheme keeps positions and velocities in an (N, 6) buffer of Python integers
scaled by int_scale. Every drift and kick adds a truncated integer increment to that
buffer, so the state accumulates exactly and repeated stepping does not pick up
floating-point round-off; only the readout into the simulation's float arrays is
lossy. Because truncation toward zero is odd, a step followed by the same step with
negated velocities returns the buffer to its starting value bit for bit.

part1 (re)seeds the buffer from the float arrays when the particle count changed or a
reseed was requested, then runs the nine sub-steps of the composition with the
simulation's current dt. part2 writes the buffer back and advances time by that same
dt. The scheme assumes a single caller; nothing is locked.
"""

from __future__ import annotations
import numpy as np
from . import fixed_point
from .integration_scheme_base import IntegrationScheme
from .integrator_constants import IntegratorConstants



class JanusScheme(IntegrationScheme):

    def __init__(self, integrator) -> None:
        super().__init__(integrator)
        self.scale = float(integrator.sim.cfg.int_scale)
        self.p_int: np.ndarray | None = None
        self.allocated_n = 0
        self._dt_last: float | None = None
        self._warned_range = False
        self._warned_unallocated = False

    def _allocate(self, n: int) -> None:
        sim = self.integ.sim
        self.p_int = None
        try:
            buf = fixed_point.empty_state(n)
        except MemoryError:
            print(f"[error] could not allocate fixed-point buffer for {n} particles")
            raise
        self.p_int = fixed_point.to_fixed_point(sim._pos, sim._vel, self.scale, out=buf)
        self.allocated_n = n
        sim.recalculate_integer_coordinates = False

    def _half_drift(self, dt: float) -> None:
        p = self.p_int
        # velocity column is already in scaled units, so the increment is too
        p[:, 0:3] += fixed_point.truncate(dt / 2. * p[:, 3:6].astype(np.float64))

    def _leapfrog(self, dt: float) -> None:
        sim = self.integ.sim
        p = self.p_int

        self._half_drift(dt)

        sim.gravity_ignore_terms = 0
        fixed_point.to_floating_point(p, self.scale, sim._pos, sim._vel)
        self.flag_positions_changed()
        acc = sim.update_acceleration()
        self.integ._force_evals_in_last_step += 1

        p[:, 3:6] += fixed_point.truncate(self.scale * dt * acc)

        self._half_drift(dt)

    def part1(self) -> None:
        sim = self.integ.sim
        sim.gravity_ignore_terms = 0
        n = int(sim.n_bodies)
        if self.allocated_n != n or self.p_int is None or sim.recalculate_integer_coordinates:
            self._allocate(n)

        dt = float(sim.dt)
        self._dt_last = dt
        for gamma in IntegratorConstants.JANUS_SCHEDULE:
            self._leapfrog(gamma * dt)

    def part2(self) -> None:
        sim = self.integ.sim
        if self.p_int is None or self._dt_last is None:
            if not self._warned_unallocated:
                print("[warning] janus part2 called before part1; nothing to publish")
                self._warned_unallocated = True
            return

        fixed_point.to_floating_point(self.p_int, self.scale, sim._pos, sim._vel)
        self.flag_positions_changed()
        sim.t += self._dt_last

        if sim.cfg.check_int_range and not self._warned_range:
            if not fixed_point.in_range(self.p_int):
                limit = fixed_point.magnitude_limit(self.scale)
                print(f"[warning] fixed-point state exceeds the 128-bit range "
                      f"(|value| must stay below {limit:.3e} at int_scale={self.scale:.3e})")
                self._warned_range = True

    def synchronize(self) -> None:
        pass

    def reset(self) -> None:
        self.allocated_n = 0
        self.p_int = None
        self._dt_last = None
