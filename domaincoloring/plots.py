"""
Plot entry points.

Each function samples ``f`` over ``axes`` at ``pixels`` resolution and returns
an `OutputImage`; displaying or saving it is up to the caller (see
`domaincoloring.export`).
"""

from __future__ import annotations
from typing import Optional, Union

from .config import (
    DEFAULT_AXES,
    DEFAULT_PIXELS,
    DEFAULT_GRID_TOLERANCE,
    CheckerConfig,
    DomainColorConfig,
    PhaseConfig,
    config_for,
)
from .grid import ComplexFunction, evaluate
from .image import OutputImage
from .shaders import Shader
from .types.color_types import AxisSpec, PixelSpec
from .types.shader_kind import ShaderKind


def shadedplot(
    f: ComplexFunction,
    shader: Union[ShaderKind, str, Shader],
    axes: AxisSpec = DEFAULT_AXES,
    *,
    pixels: PixelSpec = DEFAULT_PIXELS,
    workers: Optional[int] = None,
    vectorized: bool = False,
    **flags,
) -> OutputImage:
    """
    Shade ``f`` with any shader.

    For a built-in shader the remaining keyword flags are resolved into its
    configuration record; a custom callable shader receives them as a dict.
    """
    if callable(shader):
        config = dict(flags) if flags else None
    else:
        config = config_for(shader, **flags)
    return evaluate(f, axes, pixels, shader, config, workers=workers, vectorized=vectorized)


def domaincolor(
    f: ComplexFunction,
    axes: AxisSpec = DEFAULT_AXES,
    *,
    pixels: PixelSpec = DEFAULT_PIXELS,
    abs: bool = False,
    logabs: bool = False,
    grid: bool = False,
    all: bool = False,
    grid_tolerance: float = DEFAULT_GRID_TOLERANCE,
    workers: Optional[int] = None,
    vectorized: bool = False,
) -> OutputImage:
    """
    Domain coloring of ``f``.

    Hue follows the phase along `domaincoloring.sweep.lab_color`: blue at
    phase 0, violet at π/2, red at π and green at 3π/2. A zero shows the hues
    turning one way around the point, a pole the other way.

    Args:
        f: the complex function to plot
        axes: ``(re_min, re_max, im_min, im_max)``; one or two numbers are
            taken symmetric along the real and imaginary axis
        pixels: samples along the real and imaginary axis, one number for both
        abs: show the magnitude as lightness ramps between level curves
        logabs: like ``abs`` on the natural logarithm of the magnitude; wins over ``abs``
        grid: mark points with integer real or imaginary part in black
        all: shortcut for ``abs=True, grid=True``
    """
    config = DomainColorConfig.from_flags(
        abs=abs, logabs=logabs, grid=grid, all=all, grid_tolerance=grid_tolerance
    )
    return evaluate(f, axes, pixels, ShaderKind.DOMAINCOLOR, config, workers=workers, vectorized=vectorized)


def checkerplot(
    f: ComplexFunction,
    axes: AxisSpec = DEFAULT_AXES,
    *,
    pixels: PixelSpec = DEFAULT_PIXELS,
    real: bool = False,
    imag: bool = False,
    rect: bool = False,
    angle: bool = False,
    abs: bool = False,
    phase: bool = False,
    polar: bool = False,
    workers: Optional[int] = None,
    vectorized: bool = False,
) -> OutputImage:
    """
    Checker plot of ``f``. With no option set it defaults to ``rect=True``.

    Args:
        real: stripes orthogonal to the real axis, 5 per unit
        imag: stripes orthogonal to the imaginary axis, 5 per unit
        rect: shortcut for ``real`` and ``imag``
        angle: stripes orthogonal to the phase angle, 32 per full turn
        abs: stripes at 5 per unit of the natural logarithm of the magnitude
        phase: shortcut for ``angle`` and ``abs``; ``polar`` is a synonym
    """
    config = CheckerConfig.from_flags(
        real=real, imag=imag, rect=rect, angle=angle, abs=abs, phase=phase, polar=polar
    )
    return evaluate(f, axes, pixels, ShaderKind.CHECKER, config, workers=workers, vectorized=vectorized)


def pdphaseplot(
    f: ComplexFunction,
    axes: AxisSpec = DEFAULT_AXES,
    *,
    pixels: PixelSpec = DEFAULT_PIXELS,
    workers: Optional[int] = None,
    vectorized: bool = False,
) -> OutputImage:
    """
    Phase plot for protanopic and deuteranopic viewers (ColorCET CBC1).

    Yellow corresponds to phase 0, white to π/2, blue to π and black to 3π/2.
    """
    return evaluate(f, axes, pixels, ShaderKind.PDPHASE, PhaseConfig(), workers=workers, vectorized=vectorized)


def tphaseplot(
    f: ComplexFunction,
    axes: AxisSpec = DEFAULT_AXES,
    *,
    pixels: PixelSpec = DEFAULT_PIXELS,
    workers: Optional[int] = None,
    vectorized: bool = False,
) -> OutputImage:
    """
    Phase plot for tritanopic viewers (ColorCET CBTC1).

    Red corresponds to phase 0, white to π/2, cyan to π and black to 3π/2.
    """
    return evaluate(f, axes, pixels, ShaderKind.TPHASE, PhaseConfig(), workers=workers, vectorized=vectorized)
