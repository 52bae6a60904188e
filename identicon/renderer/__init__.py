"""Rendering subpackage.

Turns a finished :class:`~identicon.descriptor.ImageDescriptor` into pixels:

* A white 250x250 Pillow canvas with every ``pixel_map`` rectangle filled in
  the descriptor's single color.
* PNG encoding of that canvas.
* A NumPy view of the canvas for inspection.

See :mod:`identicon.renderer.raster` for the drawing routines.
"""

from .raster import RasterRenderer, draw_image, encode_image, to_array

__all__ = ["RasterRenderer", "draw_image", "encode_image", "to_array"]
