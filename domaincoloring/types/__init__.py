from .format_type import FormatType
from .shader_kind import ShaderKind, MagnitudeMode
from .grid_types import AxisRect, PixelGrid

__all__ = ["FormatType", "ShaderKind", "MagnitudeMode", "AxisRect", "PixelGrid"]
