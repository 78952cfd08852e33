import numpy as np
import pytest
from PIL import Image
from domaincoloring import (
    checkerplot,
    domaincolor,
    pdphaseplot,
    save_image,
    shadedplot,
    to_pil_image,
    tphaseplot,
    AxisRect,
    InvalidAxes,
    PixelGrid,
)
from domaincoloring.config import DEFAULT_PIXELS


def f(z):
    return (z - 0.5) * (z + 0.5j) ** 2 / (z + 1)


def test_default_resolution():
    image = domaincolor(lambda z: z, vectorized=True)
    assert image.pixels == PixelGrid(*DEFAULT_PIXELS)
    assert image.axes == AxisRect(-1.0, 1.0, -1.0, 1.0)


@pytest.mark.parametrize("plot", [domaincolor, checkerplot, pdphaseplot, tphaseplot])
def test_plots_return_images(plot):
    image = plot(f, 2, pixels=(10, 6), workers=1)
    assert image.colors.shape == (10, 6, 3)
    assert np.all(np.isfinite(image.colors))
    assert image.colors.min() >= 0.0 and image.colors.max() <= 1.0


def test_domaincolor_flags_change_output():
    plain = domaincolor(f, 2, pixels=16, workers=1)
    for flags in ({"abs": True}, {"logabs": True}, {"grid": True}, {"all": True}):
        assert not np.array_equal(plain.colors, domaincolor(f, 2, pixels=16, workers=1, **flags).colors)


def test_domaincolor_all_is_abs_and_grid():
    both = domaincolor(f, 2, pixels=16, workers=1, abs=True, grid=True)
    assert np.array_equal(domaincolor(f, 2, pixels=16, workers=1, all=True).colors, both.colors)


def test_logabs_wins_over_abs():
    logabs = domaincolor(f, 2, pixels=16, workers=1, logabs=True)
    assert np.array_equal(domaincolor(f, 2, pixels=16, workers=1, abs=True, logabs=True).colors, logabs.colors)


def test_checkerplot_defaults_to_rect():
    default = checkerplot(f, 2, pixels=16, workers=1)
    rect = checkerplot(f, 2, pixels=16, workers=1, rect=True)
    assert np.array_equal(default.colors, rect.colors)
    assert np.array_equal(default.colors, checkerplot(f, 2, pixels=16, workers=1, real=True, imag=True).colors)


def test_checkerplot_polar_is_phase():
    phase = checkerplot(f, 2, pixels=16, workers=1, phase=True)
    polar = checkerplot(f, 2, pixels=16, workers=1, polar=True)
    assert np.array_equal(phase.colors, polar.colors)


def test_shadedplot_matches_named_plots():
    assert np.array_equal(
        shadedplot(f, "domaincolor", 2, pixels=8, workers=1, logabs=True).colors,
        domaincolor(f, 2, pixels=8, workers=1, logabs=True).colors,
    )
    assert np.array_equal(
        shadedplot(f, "tphase", 2, pixels=8, workers=1).colors,
        tphaseplot(f, 2, pixels=8, workers=1).colors,
    )


def test_shadedplot_rejects_unknown_flags():
    with pytest.raises(TypeError):
        shadedplot(f, "pdphase", 2, pixels=8, grid=True)


def test_shadedplot_custom_shader_receives_flags():
    seen = []

    def gray(w, config):
        seen.append(config)
        return np.full(np.shape(w) + (3,), config["level"])

    image = shadedplot(f, gray, 2, pixels=8, workers=1, level=0.25)
    assert np.all(image.colors == 0.25)
    assert seen and all(config == {"level": 0.25} for config in seen)


def test_invalid_axes_propagate():
    with pytest.raises(InvalidAxes):
        checkerplot(f, (0, 0, -1, 1), pixels=8)


def test_display_orientation():
    # left half red, top half green
    def quadrants(w, config):
        w = np.asarray(w)
        out = np.zeros(w.shape + (3,))
        out[..., 0] = w.real < 0
        out[..., 1] = w.imag > 0
        return out

    image = shadedplot(lambda z: z, quadrants, 1, pixels=(4, 2), workers=1)
    display = image.to_display_array()
    assert display.shape == (2, 4, 3)
    assert display[0, 0].tolist() == [1.0, 1.0, 0.0]   # re_min, im_max
    assert display[0, 3].tolist() == [0.0, 1.0, 0.0]   # re_max, im_max
    assert display[1, 0].tolist() == [1.0, 0.0, 0.0]   # re_min, im_min
    assert display[1, 3].tolist() == [0.0, 0.0, 0.0]


def test_to_rgb8():
    image = domaincolor(f, 2, pixels=(5, 3), workers=1)
    rgb8 = image.to_rgb8()
    assert rgb8.dtype == np.uint8
    assert rgb8.shape == (3, 5, 3)
    assert np.allclose(rgb8 / 255, image.to_display_array(), atol=0.5 / 255 + 1e-9)
    assert np.asarray(image).shape == (5, 3, 3)


def test_to_pil_image():
    image = pdphaseplot(f, 2, pixels=(7, 4), workers=1)
    pil = to_pil_image(image)
    assert pil.size == (7, 4)
    assert pil.mode == "RGB"
    assert np.array_equal(np.asarray(pil), image.to_rgb8())


def test_save_image(tmp_path):
    image = checkerplot(f, 2, pixels=(9, 6), workers=1, polar=True)
    path = tmp_path / "checker.png"
    save_image(image, path)
    with Image.open(path) as saved:
        assert saved.size == (9, 6)
        assert np.array_equal(np.asarray(saved.convert("RGB")), image.to_rgb8())


def test_save_image_logs(tmp_path, debug_log):
    save_image(tphaseplot(f, 2, pixels=4, workers=1), tmp_path / "t.png")
    assert any("Saved 4x4 image" in record.getMessage() for record in debug_log.records)
