"""Color picker stage."""

from dataclasses import replace
from typing import Sequence

from identicon.descriptor import ImageDescriptor
from identicon.utils.validation import check_color, require_field


def pick_color(descriptor: ImageDescriptor) -> ImageDescriptor:
    """Use the first three digest bytes as ``(red, green, blue)``.

    Args:
        descriptor (ImageDescriptor): Descriptor with ``hash_bytes`` populated.

    Returns:
        ImageDescriptor: New descriptor with ``color`` set.

    Raises:
        ValueError: If ``hash_bytes`` is missing or shorter than 3 values.
    """
    hash_bytes: Sequence[int] = require_field(descriptor, "hash_bytes")
    if len(hash_bytes) < 3:
        raise ValueError(f"Need at least 3 hash bytes to pick a color, got {len(hash_bytes)}")
    red, green, blue = hash_bytes[0], hash_bytes[1], hash_bytes[2]
    return replace(descriptor, color=check_color((red, green, blue)))
