"""Common type aliases.

``HashFn`` and ``Stage`` are the two extension points of the pipeline: the
digest primitive is injected into the hasher, and every later step is a pure
``ImageDescriptor -> ImageDescriptor`` function.
"""

from typing import Callable, Tuple, TYPE_CHECKING


# descriptor.py imports this module at runtime
if TYPE_CHECKING:
    from identicon.descriptor import ImageDescriptor

Color = Tuple[int, int, int]
Cell = Tuple[int, int]  # (value, index)
Point = Tuple[int, int]  # (x, y)
Rect = Tuple[Point, Point]  # (top_left, bottom_right)

HashFn = Callable[[bytes], bytes]
Stage = Callable[["ImageDescriptor"], "ImageDescriptor"]
