import numpy as np
from numpy import ndarray as NDArray


def np_is_close_to_int(values: NDArray, tol: float = 1e-9) -> NDArray:
    """Vectorized: mask of entries within ``tol`` of an integer. Non-finite entries are False."""
    values = np.asarray(values, dtype=float)
    with np.errstate(invalid="ignore"):
        return np.abs(values - np.round(values)) <= tol


def np_is_odd_floor(values: NDArray) -> NDArray:
    """Vectorized: mask of entries whose floor is odd. Non-finite entries are False."""
    values = np.asarray(values, dtype=float)
    finite = np.isfinite(values)
    floors = np.floor(np.where(finite, values, 0.0))
    return finite & (np.mod(floors, 2.0) == 1.0)
