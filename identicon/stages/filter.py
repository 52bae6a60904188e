"""Square filter stage.

Only even valued cells are painted. An all-odd grid filters down to nothing,
which yields a blank image rather than an error.
"""

from dataclasses import replace
from typing import Sequence
from pyrsistent import pvector

from identicon.descriptor import ImageDescriptor
from identicon.types import Cell
from identicon.utils.validation import check_grid, require_field


def filter_odd_squares(descriptor: ImageDescriptor) -> ImageDescriptor:
    """Drop every ``(value, index)`` pair whose value is odd.

    Order is preserved and indices are left untouched.
    """
    grid: Sequence[Cell] = check_grid(require_field(descriptor, "grid"))
    filtered = [(value, index) for value, index in grid if value % 2 == 0]
    return replace(descriptor, grid=pvector(filtered))
