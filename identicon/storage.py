"""Persisting encoded identicons.

The output file is named after the input itself, ``<input>.png``. An input
containing path separators therefore resolves to a nested path; if that path
cannot be written the underlying ``OSError`` reaches the caller untouched and
the write is not retried.
"""

import logging
import os
from pathlib import Path
from typing import Union

from identicon.config import IMAGE_EXTENSION

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def output_path(data: Union[str, bytes], directory: PathLike = ".") -> Path:
    """Return ``<directory>/<input>.<ext>`` for ``data``.

    Bytes are decoded with the filesystem encoding, so distinct inputs map to
    distinct file names.
    """
    name = os.fsdecode(data)
    return Path(directory) / f"{name}.{IMAGE_EXTENSION}"


def save_image(
    payload: bytes, data: Union[str, bytes], directory: PathLike = "."
) -> Path:
    """Write ``payload`` to the path derived from ``data``.

    Args:
        payload (bytes): Encoded image.
        data (str | bytes): Original pipeline input, used as the file stem.
        directory (str | Path): Existing directory to write into.

    Returns:
        Path: The written file.

    Raises:
        OSError: If the file cannot be written.
    """
    path = output_path(data, directory)
    path.write_bytes(payload)
    logger.info("Saved identicon to %s (%d bytes)", path, len(payload))
    return path
