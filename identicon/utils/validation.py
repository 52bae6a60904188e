"""Invariant checks shared by the pipeline stages.

Stages assume fixed shapes (16 digest bytes, 25 grid cells). These helpers
fail fast with ``ValueError`` instead of letting a stage silently truncate or
pad malformed data.
"""

from typing import Any, Sequence

from identicon.config import CELL_COUNT, DIGEST_SIZE
from identicon.descriptor import ImageDescriptor
from identicon.types import Cell, Color


def require_field(descriptor: ImageDescriptor, name: str) -> Any:
    """Return ``descriptor.<name>``; raise if the owning stage has not run."""
    value = getattr(descriptor, name)
    if value is None:
        raise ValueError(f"ImageDescriptor.{name} is not populated")
    return value


def check_byte(value: int) -> int:
    """Return ``value`` if it is an unsigned byte."""
    if not 0 <= value <= 255:
        raise ValueError(f"Byte value out of range: {value}")
    return value


def check_hash_bytes(values: Sequence[int]) -> Sequence[int]:
    """Validate a digest sequence: exactly ``DIGEST_SIZE`` bytes."""
    if len(values) != DIGEST_SIZE:
        raise ValueError(
            f"Hash must produce exactly {DIGEST_SIZE} bytes, got {len(values)}"
        )
    for value in values:
        check_byte(value)
    return values


def check_color(color: Color) -> Color:
    """Validate an RGB triple."""
    if len(color) != 3:
        raise ValueError(f"Color must have 3 components, got {color}")
    for component in color:
        check_byte(component)
    return color


def check_cell_index(index: int) -> int:
    """Validate a row-major grid index (0..24)."""
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"Grid index out of range: {index}")
    return index


def check_grid(grid: Sequence[Cell]) -> Sequence[Cell]:
    """Validate every ``(value, index)`` pair of a grid."""
    for value, index in grid:
        check_byte(value)
        check_cell_index(index)
    return grid
