"""
Grid Evaluator
==============

Turns a complex function, an axis specification and a pixel specification into
an `OutputImage`:

1. normalize axes and pixels (fail fast with `InvalidAxes` /
   `InvalidResolution`, before anything is allocated)
2. build the pixel-center sample grid
3. evaluate the function at every sample; a point where it raises or returns
   something that is not a complex number becomes NaN
4. shade every sample

Steps 3 and 4 run over fixed blocks of grid columns. Workers only decide how
many blocks are processed at once, so the output is bit-identical for any
worker count, and blocks are reassembled in index order.
"""

from __future__ import annotations
import logging
import numbers
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Union
import numpy as np
from numpy import ndarray as NDArray

from .config import DEFAULT_AXES, DEFAULT_PIXELS, ShaderConfig, config_for, validate_config
from .errors import InvalidAxes, InvalidResolution
from .image import OutputImage
from .shaders import SENTINEL_COLOR, Shader, get_shader
from .types.color_types import AxisSpec, PixelSpec
from .types.grid_types import AxisRect, PixelGrid
from .types.shader_kind import ShaderKind
from .utils import get_dimension, value_or_default

_logger = logging.getLogger(__name__)

BLOCK_COLUMNS = 16

ComplexFunction = Callable[[complex], complex]


def _single(spec):
    """The one entry of a one-number specification: a scalar, a 0-d array or a 1-element sequence."""
    if isinstance(spec, np.ndarray):
        return spec.reshape(-1)[0].item()
    if hasattr(spec, "__len__"):
        return spec[0]
    return spec


def normalize_axes(axes: AxisSpec) -> AxisRect:
    """
    Resolve an axis specification.

    One number ``s`` gives ``(-s, s, -s, s)``, two numbers ``(r, i)`` give
    ``(-r, r, -i, i)``, four numbers are taken as ``(re_min, re_max, im_min, im_max)``.

    Raises:
        InvalidAxes: wrong arity, non-numeric or non-finite limits, or an empty/inverted extent.
    """
    if isinstance(axes, (str, bytes)):
        raise InvalidAxes(f"Axes must be real numbers, got {axes!r}")
    dim = get_dimension(axes)
    if dim not in (1, 2, 4):
        raise InvalidAxes(f"Axes must have 1, 2 or 4 entries, got {axes!r}")
    try:
        if dim == 1:
            s = float(_single(axes))
            limits = (-s, s, -s, s)
        elif dim == 2:
            r, i = (float(v) for v in axes)  # type: ignore[union-attr]
            limits = (-r, r, -i, i)
        else:
            limits = tuple(float(v) for v in axes)  # type: ignore[union-attr]
    except (TypeError, ValueError) as exc:
        raise InvalidAxes(f"Axes must be real numbers, got {axes!r}") from exc

    if not all(np.isfinite(limits)):
        raise InvalidAxes(f"Axes must be finite, got {limits!r}")
    rect = AxisRect(*limits)
    if not rect.re_min < rect.re_max:
        raise InvalidAxes(f"Real extent is empty or inverted: {rect.re_min} >= {rect.re_max}")
    if not rect.im_min < rect.im_max:
        raise InvalidAxes(f"Imaginary extent is empty or inverted: {rect.im_min} >= {rect.im_max}")
    return rect


def _positive_int(value, pixels) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidResolution(f"Pixel counts must be integers, got {pixels!r}")
    if value <= 0:
        raise InvalidResolution(f"Pixel counts must be positive, got {pixels!r}")
    return int(value)


def normalize_pixels(pixels: PixelSpec) -> PixelGrid:
    """
    Resolve a pixel specification: one integer for a square grid or ``(nx, ny)``.

    Raises:
        InvalidResolution: wrong arity, non-integer or non-positive counts.
    """
    if isinstance(pixels, (str, bytes)):
        raise InvalidResolution(f"Pixel counts must be integers, got {pixels!r}")
    dim = get_dimension(pixels)
    if dim == 1:
        n = _positive_int(_single(pixels), pixels)
        return PixelGrid(n, n)
    if dim == 2:
        nx, ny = pixels  # type: ignore[misc]
        return PixelGrid(_positive_int(nx, pixels), _positive_int(ny, pixels))
    raise InvalidResolution(f"Pixels must be one integer or a pair, got {pixels!r}")


def sample_grid(rect: AxisRect, grid: PixelGrid) -> NDArray:
    """Complex ``(nx, ny)`` array of pixel-center samples, indexed ``[i, j]``."""
    re = rect.re_min + (np.arange(grid.nx) + 0.5) / grid.nx * rect.width
    im = rect.im_min + (np.arange(grid.ny) + 0.5) / grid.ny * rect.height
    return re[:, None] + 1j * im[None, :]


def resolve_workers(workers: Optional[int]) -> int:
    """``None`` means one worker per CPU."""
    n = value_or_default(workers, os.cpu_count() or 1)
    if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 1:
        raise ValueError(f"workers must be a positive integer, got {workers!r}")
    return int(n)


def _map_blocks(func: Callable[[NDArray], NDArray], array: NDArray, workers: int) -> NDArray:
    blocks = [array[k:k + BLOCK_COLUMNS] for k in range(0, array.shape[0], BLOCK_COLUMNS)]
    if workers == 1 or len(blocks) == 1:
        results: List[NDArray] = [func(block) for block in blocks]
    else:
        with ThreadPoolExecutor(max_workers=min(workers, len(blocks))) as pool:
            results = list(pool.map(func, blocks))
    return np.concatenate(results, axis=0)


def _evaluate_point(f: ComplexFunction, z: complex) -> complex:
    try:
        return complex(f(z))
    except Exception as exc:
        _logger.debug("Function failed at %r: %r", z, exc)
        return complex(np.nan, np.nan)


def _evaluate_block(f: ComplexFunction, block: NDArray) -> NDArray:
    out = np.empty(block.shape, dtype=complex)
    with np.errstate(all="ignore"):
        for idx, z in np.ndenumerate(block):
            out[idx] = _evaluate_point(f, complex(z))
    return out


def evaluate_function(
    f: ComplexFunction,
    z: NDArray,
    workers: Optional[int] = None,
    vectorized: bool = False,
) -> NDArray:
    """
    Evaluate ``f`` on every sample of ``z``.

    Args:
        f: callable taking and returning one complex number
        z: complex sample array
        workers: threads used for per-point calls (None: one per CPU)
        vectorized: first try one call ``f(z)`` on the whole array; if that
            raises or returns the wrong shape, fall back to per-point calls

    Returns:
        complex array shaped like ``z``; NaN where ``f`` failed
    """
    z = np.asarray(z, dtype=complex)
    n_workers = resolve_workers(workers)
    if vectorized:
        try:
            with np.errstate(all="ignore"):
                w = np.asarray(f(z), dtype=complex)
            if w.shape != z.shape:
                raise ValueError(f"vectorized call returned shape {w.shape}, expected {z.shape}")
            return w
        except Exception:
            _logger.debug("Vectorized evaluation failed, falling back to per-point calls", exc_info=True)
    return _map_blocks(lambda block: _evaluate_block(f, block), z, n_workers)


def _sanitize(rgb: NDArray, shape) -> NDArray:
    rgb = np.asarray(rgb, dtype=float)
    if rgb.shape != tuple(shape) + (3,):
        raise ValueError(f"Shader returned shape {rgb.shape}, expected {tuple(shape) + (3,)}")
    bad = ~np.all(np.isfinite(rgb), axis=-1)
    rgb = np.where(bad[..., None], np.array(SENTINEL_COLOR), rgb)
    return np.clip(rgb, 0.0, 1.0)


def shade_samples(
    w: NDArray,
    shader: Shader,
    config: Optional[ShaderConfig],
    workers: Optional[int] = None,
) -> NDArray:
    """Apply ``shader`` to every sample; returns ``w.shape + (3,)`` colors in [0, 1]."""
    w = np.asarray(w, dtype=complex)
    n_workers = resolve_workers(workers)
    return _map_blocks(lambda block: _sanitize(shader(block, config), block.shape), w, n_workers)


def _resolve_shader(
    shader: Union[ShaderKind, str, Shader],
    config: Optional[ShaderConfig],
):
    if callable(shader):
        return shader, config
    kind = ShaderKind(shader)
    config = config if config is not None else config_for(kind)
    return get_shader(kind), validate_config(kind, config)


def evaluate(
    f: ComplexFunction,
    axes: AxisSpec = DEFAULT_AXES,
    pixels: PixelSpec = DEFAULT_PIXELS,
    shader: Union[ShaderKind, str, Shader] = ShaderKind.DOMAINCOLOR,
    config: Optional[ShaderConfig] = None,
    *,
    workers: Optional[int] = None,
    vectorized: bool = False,
) -> OutputImage:
    """
    Sample ``f`` over a rectangle and shade the result.

    Args:
        f: complex function; treated as opaque, may raise or return non-finite values
        axes: 1, 2 or 4 numbers, see `normalize_axes`
        pixels: one integer or ``(nx, ny)``
        shader: a `ShaderKind` (or its name) or a callable ``shader(w, config) -> (..., 3)``
        config: resolved shader configuration; defaults to the shader's defaults
        workers: threads to use (None: one per CPU, 1: serial)
        vectorized: try calling ``f`` once on the whole sample array

    Returns:
        OutputImage with ``(nx, ny, 3)`` colors and the resolved axes

    Raises:
        InvalidAxes, InvalidResolution: before any evaluation work starts
    """
    rect = normalize_axes(axes)
    grid = normalize_pixels(pixels)
    n_workers = resolve_workers(workers)
    shader_fn, config = _resolve_shader(shader, config)
    _logger.debug(
        "Evaluating %dx%d grid over %s with %d worker(s)", grid.nx, grid.ny, rect.as_tuple(), n_workers
    )

    z = sample_grid(rect, grid)
    w = evaluate_function(f, z, workers=n_workers, vectorized=vectorized)
    finite = np.isfinite(w)
    colors = shade_samples(w, shader_fn, config, workers=n_workers)

    undefined = grid.size - int(np.count_nonzero(finite))
    if undefined:
        _logger.debug("%d of %d samples are not finite", undefined, grid.size)
    return OutputImage.from_array(colors, rect, finite)
