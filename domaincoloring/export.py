from __future__ import annotations
import logging
import os
from typing import Union

from .image import OutputImage

_logger = logging.getLogger(__name__)


def to_pil_image(image: OutputImage):
    """Convert an `OutputImage` to an RGB ``PIL.Image`` with the imaginary axis pointing up."""
    from PIL import Image

    return Image.fromarray(image.to_rgb8())


def save_image(image: OutputImage, path: Union[str, os.PathLike]) -> None:
    """Encode ``image`` to ``path``; the format follows the file extension."""
    to_pil_image(image).save(path)
    _logger.debug("Saved %dx%d image to %s", image.pixels.nx, image.pixels.ny, path)
