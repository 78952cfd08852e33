"""
CIE L*a*b* <-> sRGB conversions (D65 reference white).

Lab -> RGB results are *not* clamped: callers decide how to treat colors
outside the sRGB gamut, and the phase sweep measures that excess.
"""

from __future__ import annotations
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .srgb import linear_to_srgb, srgb_to_linear, np_linear_to_srgb, np_srgb_to_linear

# D65 reference white
WHITE_D65: Tuple[float, float, float] = (0.95047, 1.0, 1.08883)

_DELTA = 6.0 / 29.0

XYZ_TO_LINEAR_RGB = np.array([
    [ 3.2404542, -1.5371385, -0.4985314],
    [-0.9692660,  1.8760108,  0.0415560],
    [ 0.0556434, -0.2040259,  1.0572252],
])

LINEAR_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])


def _f_inv(t: float) -> float:
    if t > _DELTA:
        return t ** 3
    return 3 * _DELTA ** 2 * (t - 4.0 / 29.0)

def _f(t: float) -> float:
    if t > _DELTA ** 3:
        return t ** (1.0 / 3.0)
    return t / (3 * _DELTA ** 2) + 4.0 / 29.0

def _np_f_inv(t: NDArray) -> NDArray:
    return np.where(t > _DELTA, t ** 3, 3 * _DELTA ** 2 * (t - 4.0 / 29.0))

def _np_f(t: NDArray) -> NDArray:
    return np.where(t > _DELTA ** 3, np.cbrt(t), t / (3 * _DELTA ** 2) + 4.0 / 29.0)


def lab_to_unit_rgb(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert a CIE L*a*b* color to nonlinear sRGB.

    Args:
        l: Lightness L* in [0, 100]
        a, b: Chroma coordinates a*, b* (unbounded)

    Returns:
        (r, g, b) tuple, unclamped; in-gamut colors fall in [0, 1].
    """
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    xyz = (
        WHITE_D65[0] * _f_inv(fx),
        WHITE_D65[1] * _f_inv(fy),
        WHITE_D65[2] * _f_inv(fz),
    )
    return tuple(
        linear_to_srgb(float(sum(m * v for m, v in zip(row, xyz))))
        for row in XYZ_TO_LINEAR_RGB
    )  # type: ignore[return-value]


def unit_rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert nonlinear sRGB (0..1) to CIE L*a*b*."""
    lin = (srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))
    x, y, z = (
        float(sum(m * v for m, v in zip(row, lin))) / w
        for row, w in zip(LINEAR_RGB_TO_XYZ, WHITE_D65)
    )
    fx, fy, fz = _f(x), _f(y), _f(z)
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def np_lab_to_linear_rgb(lab: NDArray) -> NDArray:
    """Vectorized Lab -> linear-light RGB (..., 3), unclamped."""
    lab = np.asarray(lab, dtype=float)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    xyz = np.stack([
        WHITE_D65[0] * _np_f_inv(fx),
        WHITE_D65[1] * _np_f_inv(fy),
        WHITE_D65[2] * _np_f_inv(fz),
    ], axis=-1)
    return xyz @ XYZ_TO_LINEAR_RGB.T


def np_lab_to_unit_rgb(lab: NDArray) -> NDArray:
    """
    Vectorized Lab -> nonlinear sRGB.

    Args:
        lab: array of shape (..., 3) holding L*, a*, b*

    Returns:
        array of shape (..., 3), unclamped
    """
    return np_linear_to_srgb(np_lab_to_linear_rgb(lab))


def np_unit_rgb_to_lab(rgb: NDArray) -> NDArray:
    """Vectorized nonlinear sRGB (..., 3) -> Lab (..., 3)."""
    linear = np_srgb_to_linear(rgb)
    xyz = (linear @ LINEAR_RGB_TO_XYZ.T) / np.array(WHITE_D65)
    f = _np_f(xyz)
    return np.stack([
        116.0 * f[..., 1] - 16.0,
        500.0 * (f[..., 0] - f[..., 1]),
        200.0 * (f[..., 1] - f[..., 2]),
    ], axis=-1)
