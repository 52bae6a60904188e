"""Pipeline stages.

Each module exposes one pure stage. Given the previous
:class:`~identicon.descriptor.ImageDescriptor` it returns a new descriptor
with one more field populated:

* :func:`hash_input` - digest bytes (``hash_bytes``)
* :func:`pick_color` - fill color (``color``)
* :func:`build_grid` - mirrored 5x5 grid (``grid``)
* :func:`filter_odd_squares` - even cells only (``grid``, narrowed)
* :func:`build_pixel_map` - rectangle per cell (``pixel_map``)
"""

from .hasher import hash_input, md5_digest
from .color import pick_color
from .grid import build_grid, chunk_values, mirror_row
from .filter import filter_odd_squares
from .pixel_map import build_pixel_map, cell_rect

__all__ = [
    "hash_input",
    "md5_digest",
    "pick_color",
    "build_grid",
    "chunk_values",
    "mirror_row",
    "filter_odd_squares",
    "build_pixel_map",
    "cell_rect",
]
