"""
Color Classes
=============

Immutable display colors. A color holds either a single ``(r, g, b)`` tuple
or an ``ndarray`` whose last axis is the channel axis; values are validated,
clamped to the class maxima and frozen at construction.

>>> from domaincoloring.colors import ColorUnitRGB
>>> c = ColorUnitRGB((1.2, 0.5, -0.1))
>>> c.value
(1.0, 0.5, 0.0)
>>> c.convert("int").value
(255, 128, 0)

Notes
-----
- Non-finite channel values are rejected with ``ValueError``
- Array values are stored read-only
"""

from .color_base import ColorBase
from .rgb import ColorRGBINT, ColorUnitRGB

__all__ = ['ColorBase', 'ColorRGBINT', 'ColorUnitRGB']
