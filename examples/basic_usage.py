"""Basic domaincoloring usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from domaincoloring import (
    checkerplot,
    domaincolor,
    lab_color,
    pdphaseplot,
    save_image,
    shade,
    tphaseplot,
)


def f(z):
    return (z - 0.5) * (z + 0.5j) ** 2 / (z + 1)


def demonstrate_colors() -> None:
    # The phase wheel and single-sample shading.
    for theta in (0.0, np.pi / 2, np.pi, 3 * np.pi / 2):
        print(f"phase {theta:.3f} ->", lab_color(theta).value)
    print("checker at 0.3+0.1j:", shade(0.3 + 0.1j, "checker", real=True).value)


def demonstrate_plots() -> None:
    # Each plot returns an OutputImage; save it as PNG.
    plain = domaincolor(f, 2.5, pixels=400, vectorized=True)
    save_image(plain, "domaincolor.png")

    # Log-magnitude ramps plus the integer grid.
    rich = domaincolor(f, (2.5, 1.5), pixels=(500, 300), logabs=True, grid=True, vectorized=True)
    save_image(rich, "domaincolor_logabs.png")

    save_image(checkerplot(f, 2.5, pixels=400, polar=True), "checker_polar.png")
    save_image(pdphaseplot(f, 2.5, pixels=400), "pdphase.png")
    save_image(tphaseplot(f, 2.5, pixels=400), "tphase.png")
    print("undefined samples:", int((~rich.finite).sum()))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_plots()
