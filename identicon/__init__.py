"""identicon
=========

Deterministic GitHub-style identicons: a string is hashed, the digest picks a
color and a left-right symmetric 5x5 pattern, and the pattern is drawn as a
250x250 PNG.

The work is a chain of pure stages over an immutable
:class:`~identicon.descriptor.ImageDescriptor`::

    from identicon import generate

    descriptor = generate("elixir")
    descriptor.color  # (116, 181, 101)

:func:`identicon.pipeline.main` additionally draws and writes the image.
"""

from .descriptor import ImageDescriptor
from .pipeline import PIPELINE, generate, main
from .stages import (
    build_grid,
    build_pixel_map,
    filter_odd_squares,
    hash_input,
    md5_digest,
    pick_color,
)

__all__ = [
    "ImageDescriptor",
    "PIPELINE",
    "generate",
    "main",
    "hash_input",
    "md5_digest",
    "pick_color",
    "build_grid",
    "filter_odd_squares",
    "build_pixel_map",
]
