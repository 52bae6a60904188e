"""Pipeline orchestration.

Wires the stages together in their only valid order and hands the result to
the renderer and writer:

1. ``hash_input`` digests the input (16 bytes).
2. ``pick_color`` takes the fill color from the first three bytes.
3. ``build_grid`` mirrors the digest into a 5x5 grid.
4. ``filter_odd_squares`` keeps even cells only.
5. ``build_pixel_map`` turns kept cells into rectangles.

:func:`generate` is pure and returns the finished descriptor. :func:`main`
additionally draws, encodes and writes the PNG; that write is the pipeline's
only side effect.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from identicon.descriptor import ImageDescriptor
from identicon.renderer import RasterRenderer
from identicon.stages import (
    build_grid,
    build_pixel_map,
    filter_odd_squares,
    hash_input,
    md5_digest,
    pick_color,
)
from identicon.storage import PathLike, save_image
from identicon.types import HashFn, Stage

logger = logging.getLogger(__name__)

PIPELINE: Tuple[Stage, ...] = (
    pick_color,
    build_grid,
    filter_odd_squares,
    build_pixel_map,
)


def generate(data: Union[str, bytes], hash_fn: HashFn = md5_digest) -> ImageDescriptor:
    """Run every stage on ``data``.

    Args:
        data (str | bytes): Input string or bytes.
        hash_fn (HashFn): Digest primitive injected into the hasher.

    Returns:
        ImageDescriptor: Descriptor with all fields populated.
    """
    descriptor = hash_input(data, hash_fn=hash_fn)
    for stage in PIPELINE:
        descriptor = stage(descriptor)
    logger.debug("Generated identicon for %r: %s", data, dict(descriptor.description))
    return descriptor


def main(
    data: Union[str, bytes],
    directory: PathLike = ".",
    hash_fn: HashFn = md5_digest,
    renderer: Optional[RasterRenderer] = None,
) -> Path:
    """Generate, draw and save the identicon for ``data``.

    Returns:
        Path: Location of the written image.

    Raises:
        OSError: If the image file cannot be written.
    """
    descriptor = generate(data, hash_fn=hash_fn)
    renderer = renderer or RasterRenderer()
    payload = renderer.encode(descriptor)
    return save_image(payload, data, directory)
