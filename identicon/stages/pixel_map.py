"""Pixel mapper stage.

Converts retained grid cells into canvas rectangles. Cell ``i`` occupies the
50x50 square whose top-left corner is ``((i % 5) * 50, (i // 5) * 50)``;
distinct indices never overlap and all corners lie within ``[0, 250]``.
"""

from dataclasses import replace
from typing import List, Sequence
from pyrsistent import pvector

from identicon.config import CELL_SIZE, GRID_SIZE
from identicon.descriptor import ImageDescriptor
from identicon.types import Cell, Rect
from identicon.utils.validation import check_cell_index, require_field


def cell_rect(index: int) -> Rect:
    """Return ``(top_left, bottom_right)`` for the grid cell at ``index``."""
    check_cell_index(index)
    column, row = index % GRID_SIZE, index // GRID_SIZE
    horizontal = column * CELL_SIZE
    vertical = row * CELL_SIZE
    return (horizontal, vertical), (horizontal + CELL_SIZE, vertical + CELL_SIZE)


def build_pixel_map(descriptor: ImageDescriptor) -> ImageDescriptor:
    """Map each cell of ``grid`` to its rectangle.

    Args:
        descriptor (ImageDescriptor): Descriptor with (usually filtered) ``grid``.

    Returns:
        ImageDescriptor: New descriptor with ``pixel_map`` set, one rectangle
            per grid cell in grid order.

    Raises:
        ValueError: If ``grid`` is missing or holds an index outside 0..24.
    """
    grid: Sequence[Cell] = require_field(descriptor, "grid")
    pixel_map: List[Rect] = [cell_rect(index) for _value, index in grid]
    return replace(descriptor, pixel_map=pvector(pixel_map))
