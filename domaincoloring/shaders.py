"""
Pixel Shaders
=============

A shader turns complex samples into display colors. Every shader here is
vectorized: it accepts a complex scalar or array ``w`` plus a resolved
configuration record and returns a new float array of shape
``w.shape + (3,)`` with channels in [0, 1]. Shaders keep no state, so disjoint
blocks of a grid may be shaded concurrently.

Samples that are not finite (poles, undefined points, failed evaluations)
render as `SENTINEL_COLOR`.

Shaders
-------
domaincolor_shader(w, config)
    Phase as hue via the Lab sweep, optional magnitude ramps and integer grid.
checker_shader(w, config)
    Black/white stripes on real part, imaginary part, phase and log-magnitude,
    combined by parity.
pdphase_shader(w), tphase_shader(w)
    Colorblind-safe phase plots on the ColorCET CBC1 / CBTC1 cyclic maps.
"""

from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple, Union
import numpy as np
from numpy import ndarray as NDArray
import colorcet

from .colors.rgb import ColorUnitRGB
from .config import CheckerConfig, DomainColorConfig, PhaseConfig, ShaderConfig, config_for, validate_config
from .conversions.palette import np_cyclic_lookup, np_hex_palette
from .encoders import encode_magnitude
from .sweep import TAU, np_lab_sweep
from .types.color_types import ColorTuple
from .types.shader_kind import ShaderKind
from .utils import np_is_odd_floor

SENTINEL_COLOR: ColorTuple = (0.5, 0.5, 0.5)
BLACK: ColorTuple = (0.0, 0.0, 0.0)
WHITE: ColorTuple = (1.0, 1.0, 1.0)

# ColorCET cyclic maps for colorblind viewers
PALETTE_NAMES: Dict[ShaderKind, str] = {
    ShaderKind.PDPHASE: "CET_CBC1",   # protanopic / deuteranopic
    ShaderKind.TPHASE: "CET_CBTC1",   # tritanopic
}

Shader = Callable[[NDArray, ShaderConfig], NDArray]


def _split_finite(w) -> Tuple[NDArray, NDArray]:
    w = np.asarray(w, dtype=complex)
    finite = np.isfinite(w)
    return np.where(finite, w, 0j), finite


def _finish(rgb: NDArray, finite: NDArray) -> NDArray:
    rgb = np.clip(rgb, 0.0, 1.0)
    return np.where(finite[..., None], rgb, np.array(SENTINEL_COLOR))


def domaincolor_shader(w, config: Optional[DomainColorConfig] = None) -> NDArray:
    """
    Shade samples as a domain coloring.

    Args:
        w: complex scalar or array
        config: resolved options, see `DomainColorConfig.from_flags`

    Returns:
        float array ``w.shape + (3,)``
    """
    config = config if config is not None else DomainColorConfig()
    safe, finite = _split_finite(w)
    with np.errstate(all="ignore"):
        lab = np_lab_sweep(np.angle(safe))
        rgb = encode_magnitude(lab, safe, config)
    return _finish(rgb, finite)


def stripe_tests(w, config: CheckerConfig) -> Dict[str, NDArray]:
    """
    Evaluate each enabled stripe test.

    A test is "on" where the floor of the scaled quantity is odd. The
    log-magnitude test is off where ``|w|`` is 0 or infinite.
    """
    w = np.asarray(w, dtype=complex)
    tests: Dict[str, NDArray] = {}
    with np.errstate(all="ignore"):
        if config.real:
            tests["real"] = np_is_odd_floor(config.real_rate * w.real)
        if config.imag:
            tests["imag"] = np_is_odd_floor(config.imag_rate * w.imag)
        if config.angle:
            tests["angle"] = np_is_odd_floor(config.angle_rate / TAU * np.angle(w))
        if config.abs:
            tests["abs"] = np_is_odd_floor(config.abs_rate * np.log(np.abs(w)))
    return tests


def checker_shader(w, config: Optional[CheckerConfig] = None) -> NDArray:
    """
    Shade samples as a checker plot.

    A pixel is black when an odd number of the enabled stripe tests are on and
    white otherwise.
    """
    config = config if config is not None else CheckerConfig()
    safe, finite = _split_finite(w)
    black = np.zeros(safe.shape, dtype=bool)
    for on in stripe_tests(safe, config).values():
        black ^= on
    rgb = np.where(black[..., None], np.array(BLACK), np.array(WHITE))
    return _finish(rgb, finite)


def phase_palette(kind: Union[ShaderKind, str]) -> NDArray:
    """The ``(N, 3)`` cyclic palette used by a colorblind-safe phase shader."""
    return np_hex_palette(getattr(colorcet, PALETTE_NAMES[ShaderKind(kind)]))


def palette_phase_shader(w, palette: NDArray) -> NDArray:
    """
    Shade the phase of ``w`` with a cyclic palette.

    Phase 0 sits at the middle of the palette and the palette runs backwards
    with increasing phase, so the ColorCET maps put yellow/red at 0, white at
    π/2, blue/cyan at π and black at 3π/2.
    """
    safe, finite = _split_finite(w)
    t = 0.5 - np.angle(safe) / TAU
    return _finish(np_cyclic_lookup(palette, t), finite)


def pdphase_shader(w, config: Optional[PhaseConfig] = None) -> NDArray:
    """Phase plot safe for protanopic and deuteranopic viewers (ColorCET CBC1)."""
    return palette_phase_shader(w, phase_palette(ShaderKind.PDPHASE))


def tphase_shader(w, config: Optional[PhaseConfig] = None) -> NDArray:
    """Phase plot safe for tritanopic viewers (ColorCET CBTC1)."""
    return palette_phase_shader(w, phase_palette(ShaderKind.TPHASE))


SHADERS: Dict[ShaderKind, Shader] = {
    ShaderKind.DOMAINCOLOR: domaincolor_shader,
    ShaderKind.CHECKER: checker_shader,
    ShaderKind.PDPHASE: pdphase_shader,
    ShaderKind.TPHASE: tphase_shader,
}


def get_shader(kind: Union[ShaderKind, str]) -> Shader:
    return SHADERS[ShaderKind(kind)]


def shade(w: complex, kind: Union[ShaderKind, str] = ShaderKind.DOMAINCOLOR,
          config: Optional[ShaderConfig] = None, **flags) -> ColorUnitRGB:
    """
    Shade a single sample.

    Either pass a resolved ``config`` or the shader's keyword flags.

    >>> shade(1j, "checker", real=True).value
    (1.0, 1.0, 1.0)
    """
    if config is None:
        config = config_for(kind, **flags)
    elif flags:
        raise TypeError("Pass either a config or keyword flags, not both")
    config = validate_config(kind, config)
    rgb = get_shader(kind)(np.asarray(w, dtype=complex), config)
    return ColorUnitRGB(tuple(float(c) for c in rgb))
