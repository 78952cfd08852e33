"""
domaincoloring: shading engine for plots of complex functions.

Maps every sample of a rectangle of the complex plane to a color: phase as hue
along a smooth, perceptually motivated sweep through CIE L*a*b*, magnitude as
lightness ramps, checker stripes, or colorblind-safe cyclic phase maps.

Quick Start
-----------
>>> from domaincoloring import domaincolor, save_image
>>> img = domaincolor(lambda z: 1j * z**3 - 1, 2.5, pixels=400, logabs=True, grid=True)
>>> img.colors.shape
(400, 400, 3)
>>> save_image(img, "logo.png")

Modules
-------
- sweep: the analytic phase wheel (`lab_color`)
- encoders: magnitude ramps and integer grid overlay
- shaders: per-sample shaders for each plot kind
- grid: axis/pixel normalization and the parallel grid evaluator
- plots: `domaincolor`, `checkerplot`, `pdphaseplot`, `tphaseplot`, `shadedplot`
- colors, conversions: immutable color values and Lab/sRGB conversions
"""

from .colors import ColorBase, ColorRGBINT, ColorUnitRGB
from .config import (
    DEFAULT_AXES,
    DEFAULT_PIXELS,
    CheckerConfig,
    DomainColorConfig,
    PhaseConfig,
    config_for,
)
from .errors import DomainColoringError, InvalidAxes, InvalidResolution
from .export import save_image, to_pil_image
from .grid import evaluate, normalize_axes, normalize_pixels, sample_grid
from .image import OutputImage
from .plots import checkerplot, domaincolor, pdphaseplot, shadedplot, tphaseplot
from .shaders import (
    SENTINEL_COLOR,
    checker_shader,
    domaincolor_shader,
    pdphase_shader,
    shade,
    tphase_shader,
)
from .sweep import lab_color, lab_sweep, np_lab_color
from .types import AxisRect, FormatType, MagnitudeMode, PixelGrid, ShaderKind

__version__ = "0.1.0"

__all__ = [
    # plots
    "domaincolor",
    "checkerplot",
    "pdphaseplot",
    "tphaseplot",
    "shadedplot",
    # evaluation
    "evaluate",
    "normalize_axes",
    "normalize_pixels",
    "sample_grid",
    "OutputImage",
    # shading
    "lab_color",
    "lab_sweep",
    "np_lab_color",
    "domaincolor_shader",
    "checker_shader",
    "pdphase_shader",
    "tphase_shader",
    "shade",
    "SENTINEL_COLOR",
    # configuration
    "DomainColorConfig",
    "CheckerConfig",
    "PhaseConfig",
    "config_for",
    "DEFAULT_AXES",
    "DEFAULT_PIXELS",
    # types
    "AxisRect",
    "PixelGrid",
    "ShaderKind",
    "MagnitudeMode",
    "FormatType",
    "ColorBase",
    "ColorRGBINT",
    "ColorUnitRGB",
    # errors
    "DomainColoringError",
    "InvalidAxes",
    "InvalidResolution",
    # export
    "to_pil_image",
    "save_image",
    "__version__",
]
