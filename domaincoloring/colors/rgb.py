from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from .color_base import ColorBase, build_registry, rgb_format_to_class


class ColorRGBINT(ColorBase):
    num_channels: ClassVar[int] = 3
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


rgb_format_to_class.update(build_registry(ColorRGBINT, ColorUnitRGB))
