from __future__ import annotations
from typing import Sequence, Tuple, Union
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorTuple = Tuple[float, float, float]
ColorValue = Union[ScalarVector, ndarray]  # Includes array support
AxisSpec = Union[Scalar, Sequence[Scalar]]
PixelSpec = Union[int, Sequence[int]]
