from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast
from ..types.format_type import FormatType, format_classes, format_valid_dtypes, default_format_dtypes, max_channel
from ..types.color_types import ColorValue, Scalar
from ..utils import get_dimension
from numpy import ndarray
import numpy as np
import math


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    maxima:     ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ColorValue) -> None:
        if isinstance(value, ColorBase):
            value = _rescale(value.value, value.format_type, self.format_type)

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            arr = value

            valid_types = format_valid_dtypes[self.format_type]
            if not isinstance(arr.dtype.type(0), valid_types):
                raise TypeError(
                    f"{self.__class__.__name__} expects dtype compatible with {valid_types}, "
                    f"got {arr.dtype}"
                )
            if arr.shape[-1] != self.num_channels:
                raise ValueError(
                    f"{self.__class__.__name__} expects last dimension to be {self.num_channels}, "
                    f"got shape {arr.shape}"
                )
            if not np.all(np.isfinite(arr)):
                raise ValueError(f"{self.__class__.__name__} values must be finite")

            arr = np.clip(arr, 0, np.array(self.maxima))
            target_dtype = default_format_dtypes[self.format_type]
            if arr.dtype != target_dtype:
                arr = arr.astype(target_dtype)
            # shared read-only view; the color never changes after construction
            arr.flags.writeable = False
            value = arr

        # ---- Handle scalar/tuple input ----
        else:
            if get_dimension(value) != self.num_channels:
                raise ValueError(f"{self.__class__.__name__} expects a {self.num_channels}-channel value")
            values = cast(Tuple[Any, ...], value)
            if not all(math.isfinite(v) for v in values):
                raise ValueError(f"{self.__class__.__name__} values must be finite")
            value = tuple(
                format_classes[self.format_type](max(0, min(v, m)))
                for v, m in zip(values, self.maxima)
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        return self._value

    @property
    def is_array(self) -> bool:
        """Check if this color contains an array of colors."""
        return isinstance(self._value, ndarray)

    @property
    def shape(self) -> Tuple[int, ...] | None:
        """Return shape of the array, or None if scalar."""
        if isinstance(self._value, ndarray):
            return self._value.shape
        return None

    def convert(self, to_format: FormatType) -> ColorBase:
        """Return the same color in another value format."""
        cls = rgb_format_to_class[FormatType(to_format)]
        if cls is self.__class__:
            return self
        return cls(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase) or other.format_type != self.format_type:
            return NotImplemented
        if self.is_array or other.is_array:
            return self.is_array and other.is_array and np.array_equal(self._value, other._value)
        return self._value == other._value

    def __hash__(self) -> int:
        if isinstance(self._value, ndarray):
            return hash((self.format_type, self._value.shape, self._value.tobytes()))
        return hash((self.format_type, self._value))

    def __repr__(self) -> str:
        if isinstance(self._value, ndarray):
            return f"{self.__class__.__name__}(<array {self._value.shape}>)"
        return f"{self.__class__.__name__}({self._value!r})"


def _rescale(value: ColorValue, from_format: FormatType, to_format: FormatType) -> ColorValue:
    if from_format == to_format:
        return value
    factor = max_channel[to_format] / max_channel[from_format]
    if isinstance(value, ndarray):
        scaled = value.astype(float) * factor
        return np.round(scaled).astype(np.int64) if to_format == FormatType.INT else scaled
    scaled_tuple = tuple(float(v) * factor for v in cast(Tuple[Scalar, ...], value))
    if to_format == FormatType.INT:
        return tuple(int(round(v)) for v in scaled_tuple)
    return scaled_tuple


rgb_format_to_class: dict[FormatType, type[ColorBase]] = {}


def build_registry(*classes: type[ColorBase]) -> dict[FormatType, type[ColorBase]]:
    return {
        cls.format_type: cls
        for cls in classes
    }
