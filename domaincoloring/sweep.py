"""
Phase Sweep
===========

Closed-form curve through CIE L*a*b* mapping a phase angle to a color:

    L*(θ) = 12·cos(3θ − π) + 67
    a*(θ) = 46·cos(θ + 4) − 3
    b*(θ) = 46·sin(θ + 4) − 16

The chroma terms trace a circle of radius 46 around (−3, −16); the lightness
ripple adds three light/dark lobes per revolution to help tell hues apart.
Converted to sRGB the curve leaves the gamut on part of the cycle, so every
color is clamped channel-wise to [0, 1]. With these constants the clamp is
active on about 45% of the cycle (`clipped_fraction()` ~ 0.451); at the light
blue lobe, θ = π/3, linear blue reaches about 1.52. `gamut_excess` and `clipped_fraction` measure this in linear light
and must be rechecked if the constants or the device space change.
"""

from __future__ import annotations
import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import clamp, cyclic_wrap_float

from .colors.rgb import ColorUnitRGB
from .conversions.lab import lab_to_unit_rgb, np_lab_to_linear_rgb, np_lab_to_unit_rgb
from .types.color_types import ColorTuple

TAU = 2 * math.pi

LIGHTNESS_MEAN = 67.0
LIGHTNESS_RIPPLE = 12.0
CHROMA_RADIUS = 46.0
CHROMA_CENTER = (-3.0, -16.0)
PHASE_OFFSET = 4.0


def lab_sweep(theta: float) -> ColorTuple:
    """Map a phase angle (radians, any real) to its (L*, a*, b*) coordinate."""
    t = cyclic_wrap_float(float(theta), 0.0, TAU)
    return (
        LIGHTNESS_RIPPLE * math.cos(3 * t - math.pi) + LIGHTNESS_MEAN,
        CHROMA_RADIUS * math.cos(t + PHASE_OFFSET) + CHROMA_CENTER[0],
        CHROMA_RADIUS * math.sin(t + PHASE_OFFSET) + CHROMA_CENTER[1],
    )


def np_lab_sweep(theta: NDArray) -> NDArray:
    """Vectorized `lab_sweep`; returns an array of shape ``theta.shape + (3,)``."""
    t = np.mod(np.asarray(theta, dtype=float), TAU)
    return np.stack([
        LIGHTNESS_RIPPLE * np.cos(3 * t - np.pi) + LIGHTNESS_MEAN,
        CHROMA_RADIUS * np.cos(t + PHASE_OFFSET) + CHROMA_CENTER[0],
        CHROMA_RADIUS * np.sin(t + PHASE_OFFSET) + CHROMA_CENTER[1],
    ], axis=-1)


def lab_color(theta: float) -> ColorUnitRGB:
    """
    Color of the phase wheel at ``theta``.

    Total and 2π-periodic; the result is always inside the sRGB gamut.
    """
    r, g, b = lab_to_unit_rgb(*lab_sweep(theta))
    return ColorUnitRGB((clamp(r, 0.0, 1.0), clamp(g, 0.0, 1.0), clamp(b, 0.0, 1.0)))


def np_lab_color(theta: NDArray) -> NDArray:
    """Vectorized `lab_color`; returns clamped unit RGB of shape ``theta.shape + (3,)``."""
    return np.clip(np_lab_to_unit_rgb(np_lab_sweep(theta)), 0.0, 1.0)


def gamut_excess(theta: NDArray) -> NDArray:
    """
    How far the unclamped sweep color lies outside the sRGB gamut, per angle.

    Measured in linear light, as the largest channel distance from [0, 1]; 0 when
    in gamut. The gamma-encoded values would exaggerate negative channels through
    the steep linear segment of the transfer curve.
    """
    rgb = np_lab_to_linear_rgb(np_lab_sweep(theta))
    return np.max(np.maximum(rgb - 1.0, 0.0) + np.maximum(-rgb, 0.0), axis=-1)


def clipped_fraction(samples: int = 3600, tol: float = 1e-9) -> float:
    """Fraction of a uniform sampling of one revolution where the gamut clamp is active."""
    if samples <= 0:
        raise ValueError("samples must be positive")
    theta = np.linspace(0.0, TAU, samples, endpoint=False)
    return float(np.mean(gamut_excess(theta) > tol))
