from .default import value_or_default
from .dimension import get_dimension
from .num_utils import np_is_close_to_int, np_is_odd_floor

__all__ = [
    "value_or_default",
    "get_dimension",
    "np_is_close_to_int",
    "np_is_odd_floor",
]
