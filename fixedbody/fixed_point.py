"""
This module converts particle state between the floating point arrays of the
simulation and the fixed-point buffer evolved by the janus integrator.

The buffer is an (N, 6) numpy object array whose columns hold x, y, z, vx, vy, vz as
Python integers equal to the real value times the scale factor, truncated toward zero.
Python integers do not overflow, so the buffer always offers at least the range of a
signed 128-bit integer; magnitude_limit gives the nominal valid range for a scale and
in_range supports optional debug checks. The two conversions are not exact inverses:
a trip through fixed point drops everything below one unit of 1/scale, which is why
the integer buffer, not the floating copy, carries the state between steps.
"""

from __future__ import annotations
from typing import Tuple
import numpy as np

__all__ = [
    "N_FIELDS",
    "INT128_MAX",
    "INT128_MIN",
    "empty_state",
    "truncate",
    "to_fixed_point",
    "to_floating_point",
    "magnitude_limit",
    "in_range",
]

N_FIELDS = 6
INT128_MAX = (1 << 127) - 1
INT128_MIN = -(1 << 127)


def empty_state(n: int) -> np.ndarray:
    return np.zeros((int(n), N_FIELDS), dtype=object)


def truncate(values: np.ndarray) -> np.ndarray:
    # int() truncates toward zero, matching a C cast from double
    vals = np.asarray(values, dtype=np.float64)
    out = np.empty(vals.shape, dtype=object)
    for idx, v in np.ndenumerate(vals):
        out[idx] = int(v)
    return out


def to_fixed_point(
    pos: np.ndarray,
    vel: np.ndarray,
    scale: float,
    out: np.ndarray | None = None,
) -> np.ndarray:
    pos = np.asarray(pos, dtype=np.float64).reshape(-1, 3)
    vel = np.asarray(vel, dtype=np.float64).reshape(-1, 3)
    n = pos.shape[0]
    if out is None:
        out = empty_state(n)

    scale = float(scale)
    out[:, 0:3] = truncate(pos * scale)
    out[:, 3:6] = truncate(vel * scale)
    return out


def to_floating_point(
    state: np.ndarray,
    scale: float,
    pos_out: np.ndarray | None = None,
    vel_out: np.ndarray | None = None,
) -> Tuple[np.ndarray, np.ndarray]:
    n = state.shape[0]
    if pos_out is None:
        pos_out = np.empty((n, 3), dtype=np.float64)
    if vel_out is None:
        vel_out = np.empty((n, 3), dtype=np.float64)

    # float(int) rounds to nearest, same as the (double) cast of a wide integer
    vals = state.astype(np.float64)
    scale = float(scale)
    pos_out[...] = vals[:, 0:3] / scale
    vel_out[...] = vals[:, 3:6] / scale
    return pos_out, vel_out


def magnitude_limit(scale: float, bits: int = 128) -> float:
    """Largest |value| that fits a signed integer of `bits` bits at this scale."""
    return float((1 << (int(bits) - 1)) - 1) / float(scale)


def in_range(state: np.ndarray, bits: int = 128) -> bool:
    hi = (1 << (int(bits) - 1)) - 1
    lo = -(1 << (int(bits) - 1))
    for v in state.flat:
        if v > hi or v < lo:
            return False
    return True
