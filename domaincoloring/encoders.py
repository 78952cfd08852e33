"""
Magnitude encoders for the domain coloring.

Each encoder takes base colors and the complex samples they were computed
from and returns new colors; inputs are never modified. When combined they run
in a fixed order: lightness ramp (on L* before conversion to sRGB), then the
integer grid overlay (on the final sRGB colors) so markers stay solid.
"""

from __future__ import annotations
import numpy as np
from numpy import ndarray as NDArray

from .config import DomainColorConfig, DEFAULT_GRID_TOLERANCE
from .conversions.lab import np_lab_to_unit_rgb
from .types.color_types import ColorTuple
from .types.shader_kind import MagnitudeMode
from .utils import np_is_close_to_int

RAMP_DEPTH = 20.0
GRID_COLOR: ColorTuple = (0.0, 0.0, 0.0)


def ramp_position(w: NDArray, log: bool = False) -> NDArray:
    """
    Position in ``[0, 1)`` of each sample inside its magnitude band.

    Bands have unit width in ``|w|`` (or ``ln|w|`` when ``log``). A zero
    magnitude saturates to the darkest position (0) and an infinite one to the
    lightest (1) instead of producing NaN.
    """
    m = np.abs(np.asarray(w, dtype=complex))
    with np.errstate(divide="ignore", invalid="ignore"):
        if log:
            m = np.log(m)
        frac = np.mod(m, 1.0)
    frac = np.where(np.isposinf(m), 1.0, frac)
    frac = np.where(np.isneginf(m), 0.0, frac)
    return np.where(np.isnan(frac), 0.0, frac)


def lightness_ramp(lab: NDArray, w: NDArray, log: bool = False, depth: float = RAMP_DEPTH) -> NDArray:
    """
    Shift L* by ``depth·frac − depth/2`` so equal magnitude steps give equal brightness bands.

    Args:
        lab: base colors, shape ``(..., 3)``
        w: complex samples broadcastable to ``lab.shape[:-1]``
        log: band on ``ln|w|`` instead of ``|w|``

    Returns:
        new Lab array
    """
    out = np.array(lab, dtype=float, copy=True)
    out[..., 0] += depth * ramp_position(w, log=log) - depth / 2
    return out


def grid_mask(w: NDArray, tol: float = DEFAULT_GRID_TOLERANCE) -> NDArray:
    """Finite samples whose real or imaginary part lies within ``tol`` of an integer."""
    w = np.asarray(w, dtype=complex)
    near = np_is_close_to_int(w.real, tol) | np_is_close_to_int(w.imag, tol)
    return near & np.isfinite(w)


def grid_overlay(rgb: NDArray, w: NDArray, tol: float = DEFAULT_GRID_TOLERANCE) -> NDArray:
    """Paint `GRID_COLOR` over samples with (near) integer real or imaginary part."""
    return np.where(grid_mask(w, tol)[..., None], np.array(GRID_COLOR), rgb)


def encode_magnitude(lab: NDArray, w: NDArray, config: DomainColorConfig) -> NDArray:
    """
    Apply the encoders selected by ``config`` to Lab base colors.

    Returns:
        unclamped sRGB array, shape ``(..., 3)``
    """
    if config.magnitude is not MagnitudeMode.NONE:
        lab = lightness_ramp(lab, w, log=config.magnitude is MagnitudeMode.LOGABS)
    rgb = np_lab_to_unit_rgb(lab)
    if config.grid:
        rgb = grid_overlay(rgb, w, config.grid_tolerance)
    return rgb
