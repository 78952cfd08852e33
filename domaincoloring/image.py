"""
Output Image
============

`OutputImage` is the only thing the grid evaluator hands to a renderer: the
shaded colors plus the axis rectangle they cover.

Layout
------
``colors[i, j]`` is the color of the pixel whose center is
``re_min + (i + 0.5)/nx·width + 1j·(im_min + (j + 0.5)/ny·height)``, i.e. the
first index runs along the real axis and the second along the imaginary axis.
`to_display_array` reorders that into the row-major, top-row-first layout
image libraries expect.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from numpy import ndarray as NDArray
import numpy as np

from .colors.rgb import ColorUnitRGB
from .types.format_type import FormatType
from .types.grid_types import AxisRect, PixelGrid


@dataclass(frozen=True)
class OutputImage:
    """
    Shaded grid of colors.

    Attributes:
        color: ColorUnitRGB wrapping a read-only ``(nx, ny, 3)`` float array
        axes: the rectangle of the complex plane the grid samples
        finite: ``(nx, ny)`` mask, False where the function gave no finite value
    """
    color: ColorUnitRGB
    axes: AxisRect
    finite: NDArray = field(repr=False)

    def __post_init__(self):
        if not isinstance(self.color, ColorUnitRGB) or not self.color.is_array:
            raise TypeError("OutputImage requires a ColorUnitRGB array")
        if self.color.value.ndim != 3:
            raise ValueError(
                f"OutputImage requires a (nx, ny, 3) array, got shape {self.color.value.shape}"
            )
        finite = np.asarray(self.finite, dtype=bool)
        if finite.shape != self.color.value.shape[:2]:
            raise ValueError(
                f"finite mask shape {finite.shape} does not match image shape {self.color.value.shape[:2]}"
            )
        finite = finite.copy()
        finite.flags.writeable = False
        object.__setattr__(self, "finite", finite)

    @classmethod
    def from_array(cls, colors: NDArray, axes: AxisRect, finite: NDArray) -> OutputImage:
        return cls(ColorUnitRGB(np.asarray(colors, dtype=float)), axes, finite)

    @property
    def colors(self) -> NDArray:
        """The ``(nx, ny, 3)`` float array."""
        return self.color.value

    @property
    def pixels(self) -> PixelGrid:
        nx, ny = self.colors.shape[:2]
        return PixelGrid(nx, ny)

    def __array__(self, dtype=None, copy=None) -> NDArray:
        """Enable numpy array interface."""
        return np.asarray(self.colors, dtype=dtype)

    def to_display_array(self) -> NDArray:
        """Colors as ``(ny, nx, 3)`` with row 0 at ``im_max`` and column 0 at ``re_min``."""
        return np.flipud(np.transpose(self.colors, (1, 0, 2)))

    def to_rgb8(self) -> NDArray:
        """`to_display_array` quantized to ``uint8``."""
        display = ColorUnitRGB(np.ascontiguousarray(self.to_display_array()))
        return np.asarray(display.convert(FormatType.INT).value, dtype=np.uint8)
