"""Pillow raster backend.

Draws the descriptor's ``pixel_map`` onto a white canvas in its single fill
color, encodes the canvas as PNG and exposes it as a NumPy array.
"""

import io
from typing import Sequence

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw

from identicon.config import (
    BACKGROUND,
    CANVAS_SIZE,
    IMAGE_FORMAT,
    IMAGE_MODE,
)
from identicon.descriptor import ImageDescriptor
from identicon.types import Color, Rect
from identicon.utils.validation import check_color, require_field

UInt8Array = npt.NDArray[np.uint8]


def fill_rects(image: Image.Image, rects: Sequence[Rect], color: Color) -> Image.Image:
    """
    Fill each ``(top_left, bottom_right)`` rectangle on ``image`` with ``color``.
    The bottom-right corner is exclusive so neighbouring squares never share a pixel row.
    """
    draw = ImageDraw.Draw(image)
    for (x0, y0), (x1, y1) in rects:
        draw.rectangle((x0, y0, x1 - 1, y1 - 1), fill=color)
    return image


def draw_image(
    descriptor: ImageDescriptor,
    size: int = CANVAS_SIZE,
    background: Color = BACKGROUND,
) -> Image.Image:
    """
    Draws a finished descriptor as a PIL Image: one color, one square per retained cell.
    """
    color: Color = check_color(require_field(descriptor, "color"))
    pixel_map: Sequence[Rect] = require_field(descriptor, "pixel_map")
    img = Image.new(IMAGE_MODE, (size, size), background)
    return fill_rects(img, pixel_map, color)


def encode_image(image: Image.Image, image_format: str = IMAGE_FORMAT) -> bytes:
    """Serialize ``image`` in ``image_format`` (PNG by default)."""
    buffer = io.BytesIO()
    image.save(buffer, format=image_format)
    return buffer.getvalue()


def to_array(image: Image.Image) -> UInt8Array:
    """Return the image as a ``(height, width, channels)`` uint8 array."""
    return np.array(image, dtype=np.uint8)


class RasterRenderer:
    size: int
    background: Color
    image_format: str

    def __init__(
        self,
        size: int = CANVAS_SIZE,
        background: Color = BACKGROUND,
        image_format: str = IMAGE_FORMAT,
    ):
        self.size = size
        self.background = background
        self.image_format = image_format

    def render(self, descriptor: ImageDescriptor) -> Image.Image:
        return draw_image(descriptor, size=self.size, background=self.background)

    def encode(self, descriptor: ImageDescriptor) -> bytes:
        return encode_image(self.render(descriptor), image_format=self.image_format)
