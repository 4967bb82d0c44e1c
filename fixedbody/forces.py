"""
This module implements the direct-summation gravity evaluator consumed by the
integrator.

gravitational_acceleration returns the Plummer-softened Newtonian acceleration of
every particle as an (N, 3) float array. The ignore_terms mask drops selected
interactions: 0 keeps every pair, 1 drops the pair formed by particles 0 and 1, and 2
drops every pair involving particle 0. The janus integrator always evaluates with 0.
gravitational_force gives the pairwise force sum (mass times acceleration) for
diagnostics. Both handle a single particle or G == 0 by returning zeros and never
modify their inputs.
"""

from __future__ import annotations
import numpy as np
from .geometry_cache import geometry_buffers
from numpy.typing import NDArray


IGNORE_NONE = 0
IGNORE_PAIR_01 = 1
IGNORE_CENTRAL = 2


def _pair_weights(
    m: np.ndarray,
    inv_r3: np.ndarray,
    ignore_terms: int,
) -> np.ndarray:
    w = m[None, :] * inv_r3
    n = w.shape[0]
    if ignore_terms == IGNORE_PAIR_01 and n >= 2:
        w[0, 1] = 0.0
        w[1, 0] = 0.0
    elif ignore_terms == IGNORE_CENTRAL:
        w[0, :] = 0.0
        w[:, 0] = 0.0
    return w


def gravitational_acceleration(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = 1.0,
    eps: float = 0.0,
    ignore_terms: int = IGNORE_NONE,
) -> NDArray[np.floating]:

    q_arr = np.asarray(q, dtype=float)
    m_arr = np.asarray(m, dtype=float)

    if q_arr.ndim != 2 or q_arr.shape[0] < 2:
        return np.zeros_like(q_arr, dtype=float)
    if float(G) == 0.0:
        return np.zeros_like(q_arr, dtype=float)

    dr, _, inv_r3 = geometry_buffers(q_arr, float(eps))
    w = _pair_weights(m_arr, inv_r3, int(ignore_terms))

    acc = -float(G) * np.einsum("ij,ijk->ik", w, dr, optimize=True)
    return np.asarray(acc, dtype=float)


def gravitational_force(q: np.ndarray,
                        m: np.ndarray,
                        eps: float = 0.0,
                        G: float = 1.0) -> np.ndarray:
    m = np.asarray(m, dtype=float)
    acc = gravitational_acceleration(q, m, G=G, eps=eps)
    return m[:, None] * acc
