from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class AxisRect:
    """Axis-aligned rectangle of the complex plane, ``re_min < re_max`` and ``im_min < im_max``."""
    re_min: float
    re_max: float
    im_min: float
    im_max: float

    @property
    def width(self) -> float:
        return self.re_max - self.re_min

    @property
    def height(self) -> float:
        return self.im_max - self.im_min

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.re_min, self.re_max, self.im_min, self.im_max)

    def extent(self) -> Tuple[float, float, float, float]:
        """Limits in the ``(left, right, bottom, top)`` order of an image ``extent`` with the origin at the bottom."""
        return (self.re_min, self.re_max, self.im_min, self.im_max)


@dataclass(frozen=True, slots=True)
class PixelGrid:
    """Number of samples along the real (``nx``) and imaginary (``ny``) axis."""
    nx: int
    ny: int

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.nx, self.ny)

    @property
    def size(self) -> int:
        return self.nx * self.ny
