"""
Color Space Conversions
=======================

Scalar and vectorized (numpy) conversions used by the shading engine.

sRGB transfer:
    srgb_to_linear / linear_to_srgb, np_srgb_to_linear / np_linear_to_srgb

CIE L*a*b* (D65):
    lab_to_unit_rgb(l, a, b), unit_rgb_to_lab(r, g, b)
    np_lab_to_unit_rgb(lab), np_lab_to_linear_rgb(lab), np_unit_rgb_to_lab(rgb)
        Lab -> RGB is unclamped; gamut handling is left to the caller.

Palettes:
    hex_to_unit_rgb(code), np_hex_palette(codes), np_cyclic_lookup(palette, t)

Examples
--------
>>> from domaincoloring.conversions import lab_to_unit_rgb
>>> r, g, b = lab_to_unit_rgb(50.0, 0.0, 0.0)   # mid gray
"""

from .srgb import srgb_to_linear, linear_to_srgb, np_srgb_to_linear, np_linear_to_srgb
from .lab import (
    lab_to_unit_rgb,
    unit_rgb_to_lab,
    np_lab_to_unit_rgb,
    np_lab_to_linear_rgb,
    np_unit_rgb_to_lab,
    WHITE_D65,
)
from .palette import hex_to_unit_rgb, np_hex_palette, np_cyclic_lookup

__all__ = [
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',
    'lab_to_unit_rgb',
    'unit_rgb_to_lab',
    'np_lab_to_unit_rgb',
    'np_lab_to_linear_rgb',
    'np_unit_rgb_to_lab',
    'WHITE_D65',
    'hex_to_unit_rgb',
    'np_hex_palette',
    'np_cyclic_lookup',
]
