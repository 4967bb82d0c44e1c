import numpy as np

"""
This module provides centre-of-mass helpers. center_of_mass returns the mass-weighted mean of a set of vectors and remove_center_of_mass_velocity subtracts the centre-of-mass velocity so the system has zero total momentum. Both return zeros or an unchanged copy for an empty system, a single particle, or zero total mass, and assume masses and vectors have compatible first dimensions.


"""

def center_of_mass(masses: np.ndarray, vectors: np.ndarray) -> np.ndarray:
	vectors = np.asarray(vectors, dtype=np.float64)
	total_mass = float(np.sum(masses))
	if total_mass == 0 or vectors.size == 0:
		return np.zeros(vectors.shape[-1] if vectors.ndim == 2 else 3, dtype=np.float64)
	return np.sum(np.asarray(masses)[:, None] * vectors, axis=0) / total_mass


def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	if len(masses) <= 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	return velocities - center_of_mass(masses, velocities)
