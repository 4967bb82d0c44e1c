from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the geometric kernel shared by force and energy calculations. The geometry_buffers function takes (N, 3) positions and returns the pairwise separations q_i - q_j, their squared lengths, and the Plummer-softened factor (r^2 + eps^2)^-1.5. Self-pairs and coincident unsoftened pairs get a zero factor so they contribute nothing to a sum. The softening length is assumed non-negative.

"""




__all__ = ["geometry_buffers"]

def geometry_buffers(
    pos: np.ndarray,
    eps: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    q = np.asarray(pos, dtype=float).reshape(-1, 3)
    n = q.shape[0]

    sep = q[:, None, :] - q[None, :, :]
    r2 = np.einsum("ijk,ijk->ij", sep, sep, optimize=True)

    r2_soft = r2 + float(eps) ** 2
    live = r2_soft > 0.0
    live[np.diag_indices(n)] = False

    inv_r3 = np.zeros((n, n), dtype=float)
    np.power(r2_soft, -1.5, out=inv_r3, where=live)

    return sep, r2, inv_r3
