"""Hasher stage.

Turns the raw input into the 16 integers every later stage reads. The digest
primitive is injected as a :data:`~identicon.types.HashFn`; MD5 is the
default so that outputs match previously generated identicons.
"""

import hashlib
from typing import Union
from pyrsistent import pvector

from identicon.descriptor import ImageDescriptor
from identicon.types import HashFn
from identicon.utils.validation import check_hash_bytes


def md5_digest(data: bytes) -> bytes:
    """Return the 16 byte MD5 digest of ``data``."""
    return hashlib.md5(data).digest()


def hash_input(data: Union[str, bytes], hash_fn: HashFn = md5_digest) -> ImageDescriptor:
    """Hash ``data`` into a fresh descriptor.

    Args:
        data (str | bytes): Input to hash. Strings are UTF-8 encoded with
            ``surrogateescape``, so undecodable command-line bytes hash as the
            original bytes. The empty input is valid.
        hash_fn (HashFn): Digest primitive. Must return exactly 16 bytes.

    Returns:
        ImageDescriptor: Descriptor with only ``hash_bytes`` populated.

    Raises:
        TypeError: If ``data`` is neither ``str`` nor bytes-like.
        ValueError: If ``hash_fn`` does not return a 16 byte digest.
    """
    if isinstance(data, str):
        raw = data.encode("utf-8", "surrogateescape")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"Input must be str or bytes, got {type(data).__name__}")
    digest = hash_fn(raw)
    hash_bytes = check_hash_bytes(list(digest))
    return ImageDescriptor(hash_bytes=pvector(hash_bytes))
