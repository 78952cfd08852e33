import math
import numpy as np
import pytest
from domaincoloring.errors import DomainColoringError, InvalidAxes, InvalidResolution
from domaincoloring.grid import (
    BLOCK_COLUMNS,
    evaluate,
    evaluate_function,
    normalize_axes,
    normalize_pixels,
    resolve_workers,
    sample_grid,
)
from domaincoloring.image import OutputImage
from domaincoloring.shaders import SENTINEL_COLOR, domaincolor_shader
from domaincoloring.types import AxisRect, PixelGrid


@pytest.mark.parametrize("axes, expected", [
    (2, (-2.0, 2.0, -2.0, 2.0)),
    (2.5, (-2.5, 2.5, -2.5, 2.5)),
    ([3], (-3.0, 3.0, -3.0, 3.0)),
    ((1, 2), (-1.0, 1.0, -2.0, 2.0)),
    ((-1, 3, 0, 0.5), (-1.0, 3.0, 0.0, 0.5)),
    (np.array([0.0, 1.0, -1.0, 1.0]), (0.0, 1.0, -1.0, 1.0)),
    (np.array(2.0), (-2.0, 2.0, -2.0, 2.0)),
    (np.float64(1.5), (-1.5, 1.5, -1.5, 1.5)),
    (np.array([3.0]), (-3.0, 3.0, -3.0, 3.0)),
])
def test_normalize_axes(axes, expected):
    assert normalize_axes(axes).as_tuple() == expected


@pytest.mark.parametrize("axes", [
    (1, 1, -1, 1),     # empty real extent
    (1, -1, -1, 1),    # inverted
    (-1, 1, 2, 2),
    0,
    -1,
    (1, 2, 3),
    (1, 2, 3, 4, 5),
    (),
    None,
    "abc",
    ("a", 1),
    (math.nan, 1),
    (math.inf,),
    np.array(0.0),
    np.array(math.nan),
])
def test_invalid_axes(axes):
    with pytest.raises(InvalidAxes):
        normalize_axes(axes)


def test_invalid_axes_is_value_error():
    with pytest.raises(ValueError):
        normalize_axes((1, 1, -1, 1))
    assert issubclass(InvalidAxes, DomainColoringError)
    assert issubclass(InvalidResolution, DomainColoringError)


@pytest.mark.parametrize("pixels, expected", [
    (5, (5, 5)),
    ((3, 4), (3, 4)),
    ([7], (7, 7)),
    (np.int64(6), (6, 6)),
    (np.array(4), (4, 4)),
    (np.array([5]), (5, 5)),
    (np.array([3, 2]), (3, 2)),
])
def test_normalize_pixels(pixels, expected):
    assert normalize_pixels(pixels).shape == expected


@pytest.mark.parametrize("pixels", [0, -1, 2.5, True, (3, 4, 5), (3, 0), (3, -2), "12", None, (2.0, 3), np.array(0), np.array(2.5)])
def test_invalid_pixels(pixels):
    with pytest.raises(InvalidResolution):
        normalize_pixels(pixels)


def test_axis_rect_and_pixel_grid():
    rect = normalize_axes((-1, 3, -0.5, 0.5))
    assert (rect.width, rect.height) == (4.0, 1.0)
    assert rect.extent() == (-1.0, 3.0, -0.5, 0.5)
    assert rect.extent() == rect.as_tuple()
    grid = normalize_pixels((4, 3))
    assert grid.shape == (4, 3)
    assert grid.size == 12


def test_sample_grid_pixel_centers():
    z = sample_grid(AxisRect(-1.0, 1.0, -1.0, 1.0), PixelGrid(2, 4))
    assert z.shape == (2, 4)
    assert np.allclose(z[:, 0].real, [-0.5, 0.5])
    assert np.allclose(z[0, :].imag, [-0.75, -0.25, 0.25, 0.75])
    # first index runs along the real axis, second along the imaginary axis
    assert np.all(np.diff(z.real, axis=0) > 0)
    assert np.all(np.diff(z.imag, axis=1) > 0)


def test_resolve_workers():
    assert resolve_workers(None) >= 1
    assert resolve_workers(3) == 3
    for bad in (0, -2, 1.5, True):
        with pytest.raises(ValueError):
            resolve_workers(bad)


def test_evaluate_shape_and_range():
    image = evaluate(lambda z: z * z - 1, 2, (12, 9), workers=1)
    assert isinstance(image, OutputImage)
    assert image.colors.shape == (12, 9, 3)
    assert image.pixels == PixelGrid(12, 9)
    assert image.axes == AxisRect(-2.0, 2.0, -2.0, 2.0)
    assert np.all(np.isfinite(image.colors))
    assert image.colors.min() >= 0.0 and image.colors.max() <= 1.0
    assert image.finite.all()


def test_evaluate_matches_shader():
    image = evaluate(lambda z: z, 1, 4, workers=1)
    z = sample_grid(AxisRect(-1.0, 1.0, -1.0, 1.0), PixelGrid(4, 4))
    assert np.allclose(image.colors, domaincolor_shader(z))


def test_pole_renders_sentinel():
    # the center of a 3x3 grid over the unit square is exactly 0
    image = evaluate(lambda z: 1 / z, (-1, 1, -1, 1), 3, workers=1)
    assert not image.finite[1, 1]
    assert np.array_equal(image.colors[1, 1], SENTINEL_COLOR)
    assert image.finite.sum() == 8
    assert np.all(np.isfinite(image.colors))


@pytest.mark.parametrize("f", [
    lambda z: complex(math.nan, 0),
    lambda z: complex(math.inf, math.inf),
    lambda z: "not a number",
    lambda z: None,
])
def test_undefined_values_render_sentinel(f):
    image = evaluate(f, 1, (3, 2), workers=1)
    assert not image.finite.any()
    assert np.all(image.colors == np.array(SENTINEL_COLOR))


def test_raising_function_renders_sentinel():
    def f(z):
        raise RuntimeError("undefined")

    image = evaluate(f, 1, (4, 5))
    assert not image.finite.any()
    assert np.all(image.colors == np.array(SENTINEL_COLOR))


def test_invalid_input_fails_before_evaluation():
    calls = []

    def f(z):
        calls.append(z)
        return z

    with pytest.raises(InvalidAxes):
        evaluate(f, (1, 1, -1, 1), 10)
    with pytest.raises(InvalidResolution):
        evaluate(f, 1, 0)
    assert calls == []


def test_evaluates_every_sample_once():
    calls = []

    def f(z):
        calls.append(z)
        return z

    evaluate(f, 1, (5, 3), workers=1)
    assert len(calls) == 15
    assert len(set(calls)) == 15


def test_worker_count_does_not_change_output():
    f = lambda z: (z ** 3 - 1) / (z + 0.5j)
    nx = 3 * BLOCK_COLUMNS + 5
    serial = evaluate(f, 2, (nx, 17), workers=1)
    parallel = evaluate(f, 2, (nx, 17), workers=4)
    assert np.array_equal(serial.colors, parallel.colors)
    assert np.array_equal(serial.finite, parallel.finite)


def test_worker_count_does_not_change_checker_output():
    f = lambda z: np.exp(z) if z.real < 0 else 1 / z
    serial = evaluate(f, 2, 40, "checker", workers=1)
    parallel = evaluate(f, 2, 40, "checker", workers=3)
    assert np.array_equal(serial.colors, parallel.colors)


def test_vectorized_matches_pointwise():
    pointwise = evaluate(lambda z: np.sin(z) * z, 2, 20, workers=1)
    vectorized = evaluate(lambda z: np.sin(z) * z, 2, 20, workers=1, vectorized=True)
    assert np.allclose(pointwise.colors, vectorized.colors)


def test_vectorized_falls_back_to_pointwise():
    # math.sin rejects arrays, and a constant has the wrong shape
    z = sample_grid(AxisRect(-1.0, 1.0, -1.0, 1.0), PixelGrid(4, 3))
    w = evaluate_function(lambda z: math.sin(z.real), z, workers=1, vectorized=True)
    assert w.shape == (4, 3)
    assert np.allclose(w, np.sin(z.real))
    w = evaluate_function(lambda z: 1.0, z, workers=1, vectorized=True)
    assert np.array_equal(w, np.ones((4, 3), dtype=complex))


def test_shader_by_name_and_custom():
    image = evaluate(lambda z: z, 1, 6, "checker", workers=1)
    assert set(np.unique(image.colors)) <= {0.0, 1.0}

    def red(w, config):
        out = np.zeros(np.shape(w) + (3,))
        out[..., 0] = 1.0
        return out

    image = evaluate(lambda z: z, 1, 6, red, workers=1)
    assert np.all(image.colors[..., 0] == 1.0)
    assert np.all(image.colors[..., 1:] == 0.0)


def test_custom_shader_output_is_sanitized():
    def wild(w, config):
        out = np.full(np.shape(w) + (3,), 2.0)
        out[0, 0] = np.nan
        return out

    image = evaluate(lambda z: z, 1, 3, wild, workers=1)
    assert np.array_equal(image.colors[0, 0], SENTINEL_COLOR)
    assert np.all(image.colors[1:] == 1.0)


def test_mismatched_config_is_rejected():
    from domaincoloring.config import CheckerConfig

    with pytest.raises(TypeError):
        evaluate(lambda z: z, 1, 3, "domaincolor", CheckerConfig())


def test_output_image_is_read_only():
    image = evaluate(lambda z: z, 1, 3, workers=1)
    with pytest.raises(ValueError):
        image.colors[0, 0, 0] = 1.0
    with pytest.raises(ValueError):
        image.finite[0, 0] = False
    with pytest.raises(AttributeError):
        image.axes = AxisRect(0.0, 1.0, 0.0, 1.0)


def test_logs_undefined_samples(debug_log):
    evaluate(lambda z: 1 / z, (-1, 1, -1, 1), 3, workers=1)
    messages = [record.getMessage() for record in debug_log.records]
    assert any("Evaluating 3x3 grid" in m for m in messages)
    assert any("1 of 9 samples are not finite" in m for m in messages)
    assert any("Function failed at 0j" in m for m in messages)


def test_logs_count_against_grid_size(debug_log):
    evaluate(lambda z: None, 1, (4, 2), workers=1)
    messages = [record.getMessage() for record in debug_log.records]
    assert "8 of 8 samples are not finite" in messages
