"""Grid builder stage.

Expands the digest into a left-right symmetric 5x5 grid. Only the first three
columns of each row come from the digest; the last two mirror the first two,
so 15 of the 16 digest bytes are used and the trailing byte is dropped.

Cells are stored flat in row-major order as ``(value, index)`` pairs, where
``index`` is the position in the 25 cell layout (``row = index // 5``,
``column = index % 5``).
"""

from dataclasses import replace
from typing import List, Sequence
from pyrsistent import pvector

from identicon.config import GRID_SIZE, SOURCE_COLUMNS
from identicon.descriptor import ImageDescriptor
from identicon.types import Cell
from identicon.utils.validation import check_hash_bytes, require_field


def chunk_values(values: Sequence[int], size: int) -> List[List[int]]:
    """Split ``values`` into consecutive chunks of ``size``.

    A trailing partial chunk is discarded.
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    full = len(values) - len(values) % size
    return [list(values[i : i + size]) for i in range(0, full, size)]


def mirror_row(chunk: Sequence[int]) -> List[int]:
    """Mirror ``[a, b, c]`` into the symmetric row ``[a, b, c, b, a]``."""
    if len(chunk) != SOURCE_COLUMNS:
        raise ValueError(f"Row source must have {SOURCE_COLUMNS} values, got {len(chunk)}")
    a, b, c = chunk
    return [a, b, c, b, a]


def build_grid(descriptor: ImageDescriptor) -> ImageDescriptor:
    """Build the indexed, row-mirrored grid from ``hash_bytes``.

    Args:
        descriptor (ImageDescriptor): Descriptor with ``hash_bytes`` populated.

    Returns:
        ImageDescriptor: New descriptor whose ``grid`` holds 25 ``(value, index)``
            pairs, top row first.

    Raises:
        ValueError: If ``hash_bytes`` is missing or not exactly 16 bytes.
    """
    hash_bytes: Sequence[int] = check_hash_bytes(
        require_field(descriptor, "hash_bytes")
    )
    rows = [mirror_row(chunk) for chunk in chunk_values(hash_bytes, SOURCE_COLUMNS)]
    flat = [value for row in rows[:GRID_SIZE] for value in row]
    grid: List[Cell] = [(value, index) for index, value in enumerate(flat)]
    return replace(descriptor, grid=pvector(grid))
