"""
Tests for the janus scheme and its part1/part2/reset protocol.

Covers:
- composition coefficients
- zero-force drift
- time advancement and dt capture
- reseed on particle count change
- fixed-point buffer authority and explicit reseed
- determinism, reset, reversibility
"""

import numpy as np
import pytest

from fixedbody import Body, IntegratorConstants, JanusScheme, NBodySimulation, SimConfig
from fixedbody.fixed_point import to_fixed_point


def _scheme(sim) -> JanusScheme:
    return sim.integrator.scheme


def test_coefficients_sum_to_one():
    g = IntegratorConstants
    total = 2.0 * (g.GAMMA1 + g.GAMMA2 + g.GAMMA3 + g.GAMMA4) + g.GAMMA5
    assert abs(total - 1.0) < 1e-15
    assert abs(sum(g.JANUS_SCHEDULE) - 1.0) < 1e-15


def test_schedule_is_palindromic():
    sched = IntegratorConstants.JANUS_SCHEDULE
    assert len(sched) == 9
    assert tuple(reversed(sched)) == sched
    assert sched[4] == IntegratorConstants.GAMMA5


def test_unknown_constant_raises():
    with pytest.raises(AttributeError):
        IntegratorConstants.GAMMA6


@pytest.mark.parametrize("scale", [1.0e8, 1.0e16])
def test_free_particle_drifts_by_v_dt(scale):
    cfg = SimConfig(int_scale=scale, initial_dt=0.01, G=0.0)
    v = np.array([1.5, -0.25, 3.0])
    sim = NBodySimulation([Body(1.0, vx=v[0], vy=v[1], vz=v[2])], cfg=cfg)

    sim.step()

    assert sim.t == 0.01
    tol = 20.0 / scale
    assert np.all(np.abs(sim.pos[0] - v * 0.01) <= tol)
    assert np.all(np.abs(sim.vel[0] - v) <= 1.0 / scale)


def test_each_step_evaluates_forces_nine_times(binary_sim):
    calls = []
    original = binary_sim.update_acceleration

    def counting():
        calls.append(binary_sim.gravity_ignore_terms)
        return original()

    binary_sim.update_acceleration = counting
    binary_sim.gravity_ignore_terms = 2
    binary_sim.step()

    assert len(calls) == 9
    assert all(flag == 0 for flag in calls)
    assert binary_sim.integrator.force_evals_in_last_step == 9


def test_part2_publishes_final_buffer_and_time(binary_sim):
    pos0 = binary_sim.pos.copy()
    integ = binary_sim.integrator

    integ.part1()
    moved_internally = np.array(_scheme(binary_sim).p_int[:, 0:3].astype(float)) / 1.0e16
    assert binary_sim.t == 0.0
    assert not np.allclose(moved_internally, pos0)

    integ.part2()
    assert binary_sim.t == 0.01
    assert np.array_equal(binary_sim.pos, moved_internally)


def test_time_advances_by_dt_seen_at_part1(binary_sim):
    integ = binary_sim.integrator
    integ.part1()
    binary_sim.dt = 0.02
    integ.part2()

    assert binary_sim.t == 0.01

    integ.part1()
    integ.part2()
    assert binary_sim.t == 0.01 + 0.02


def test_synchronize_is_a_no_op(binary_sim):
    binary_sim.integrator.part1()
    before = binary_sim.pos.copy(), binary_sim.t
    binary_sim.synchronize()
    assert np.array_equal(binary_sim.pos, before[0])
    assert binary_sim.t == before[1]


def test_allocation_seeds_from_float_state(binary_sim):
    scheme = _scheme(binary_sim)
    assert scheme.p_int is None
    assert scheme.allocated_n == 0

    expected = to_fixed_point(binary_sim.pos, binary_sim.vel, scheme.scale)
    scheme._allocate(binary_sim.n_bodies)

    assert scheme.allocated_n == 2
    assert np.array_equal(scheme.p_int, expected)


def test_removal_reseeds_without_stale_history(three_body_sim, cfg):
    sim = three_body_sim
    sim.step()
    sim.step()
    sim.remove(0)
    remaining = sim.snapshot()

    sim.step()

    fresh = NBodySimulation(
        masses=remaining["masses"],
        positions=remaining["positions"],
        velocities=remaining["velocities"],
        cfg=cfg,
    )
    fresh.step()

    assert _scheme(sim).allocated_n == 2
    assert np.array_equal(sim.pos, fresh.pos)
    assert np.array_equal(sim.vel, fresh.vel)


def test_addition_reseeds_from_float_state(binary_sim, cfg):
    sim = binary_sim
    sim.step()
    sim.add(mass=1.0e-6, x=3.0, vy=0.5)
    current = sim.snapshot()

    sim.step()

    fresh = NBodySimulation(
        masses=current["masses"],
        positions=current["positions"],
        velocities=current["velocities"],
        cfg=cfg,
    )
    fresh.step()

    assert _scheme(sim).allocated_n == 3
    assert np.array_equal(sim.pos, fresh.pos)
    assert np.array_equal(sim.vel, fresh.vel)


def test_float_edit_ignored_without_reseed(binary_sim):
    sim = binary_sim
    sim.step()
    sim.pos[1, 2] = 0.5
    sim.step()

    assert abs(sim.pos[1, 2]) < 1e-12


def test_float_edit_respected_with_reseed(binary_sim):
    sim = binary_sim
    sim.step()
    sim.pos[1, 2] = 0.5
    sim.recalculate_integer_coordinates = True
    sim.step()

    assert sim.pos[1, 2] == pytest.approx(0.5, abs=1e-3)
    assert sim.recalculate_integer_coordinates is False


def test_runs_are_bit_identical(make_binary):
    a = make_binary()
    b = make_binary()
    for _ in range(25):
        a.step()
        b.step()

    assert np.array_equal(a.pos, b.pos)
    assert np.array_equal(a.vel, b.vel)
    assert np.array_equal(_scheme(a).p_int, _scheme(b).p_int)


def test_reset_restores_initial_bookkeeping(binary_sim, cfg):
    sim = binary_sim
    for _ in range(3):
        sim.step()

    sim.reset_integrator()
    scheme = _scheme(sim)
    assert scheme.p_int is None
    assert scheme.allocated_n == 0

    current = sim.snapshot()
    sim.step()

    fresh = NBodySimulation(
        masses=current["masses"],
        positions=current["positions"],
        velocities=current["velocities"],
        cfg=cfg,
    )
    fresh.step()
    assert np.array_equal(sim.pos, fresh.pos)
    assert np.array_equal(sim.vel, fresh.vel)


def test_part2_before_part1_is_ignored(binary_sim, capsys):
    pos0 = binary_sim.pos.copy()
    binary_sim.integrator.part2()

    assert binary_sim.t == 0.0
    assert np.array_equal(binary_sim.pos, pos0)
    assert "[warning]" in capsys.readouterr().out


def test_step_is_exactly_time_reversible(three_body_sim):
    sim = three_body_sim
    sim.step()
    scheme = _scheme(sim)
    start = scheme.p_int.copy()

    for _ in range(10):
        sim.step()
    scheme.p_int[:, 3:6] *= -1
    for _ in range(10):
        sim.step()
    scheme.p_int[:, 3:6] *= -1

    assert np.array_equal(scheme.p_int, start)


def test_range_check_warns_once(capsys):
    cfg = SimConfig(int_scale=1.0e30, check_int_range=True, G=0.0)
    sim = NBodySimulation([Body(1.0, x=1.0e10)], cfg=cfg)
    capsys.readouterr()

    sim.step()
    sim.step()

    out = capsys.readouterr().out
    assert out.count("exceeds the 128-bit range") == 1
