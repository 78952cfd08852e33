from __future__ import annotations
from typing import Sequence, Tuple
import numpy as np
from numpy import ndarray as NDArray


def hex_to_unit_rgb(code: str) -> Tuple[float, float, float]:
    """
    Parse a ``#rrggbb`` (or ``rrggbb``) string into unit RGB floats.

    Raises:
        ValueError: if the string is not six hexadecimal digits.
    """
    digits = code.strip().lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {code!r}")
    try:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Expected a #rrggbb color, got {code!r}") from None
    return (r / 255.0, g / 255.0, b / 255.0)


def np_hex_palette(codes: Sequence[str]) -> NDArray:
    """Turn a sequence of hex strings into an ``(N, 3)`` float array in [0, 1]."""
    if len(codes) == 0:
        raise ValueError("Palette must contain at least one color")
    return np.array([hex_to_unit_rgb(code) for code in codes], dtype=float)


def np_cyclic_lookup(palette: NDArray, t: NDArray) -> NDArray:
    """
    Sample a cyclic palette with linear interpolation.

    Args:
        palette: ``(N, 3)`` array; entry ``N`` wraps back to entry ``0``
        t: positions, taken modulo 1

    Returns:
        array of shape ``t.shape + (3,)``
    """
    palette = np.asarray(palette, dtype=float)
    n = palette.shape[0]
    pos = np.mod(np.asarray(t, dtype=float), 1.0) * n
    lo = np.floor(pos).astype(np.intp) % n
    hi = (lo + 1) % n
    frac = (pos - np.floor(pos))[..., None]
    return (1.0 - frac) * palette[lo] + frac * palette[hi]
