"""Immutable ``ImageDescriptor`` record threaded through the pipeline.

Every stage of :mod:`identicon.pipeline` is a pure function that takes the
previous descriptor and returns a *new* one with one more field populated;
nothing is mutated in place. A field left as ``None`` means the stage owning
it has not run yet.

Design notes:

* Sequences are persistent vectors (``pyrsistent.PVector``) so a descriptor
    can be shared between stages without any aliasing hazard.
* ``grid`` is narrowed in place of being replaced by a new field: after the
    square filter it only holds the even valued cells, still tagged with their
    original row-major index.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import pmap
from pyrsistent.typing import PMap, PVector

from identicon.types import Cell, Color, Rect


@dataclass(frozen=True)
class ImageDescriptor:
    """Value object describing one identicon at some point of the pipeline.

    Attributes:
        hash_bytes (PVector[int] | None): The 16 digest bytes as integers 0..255.
        color (Color | None): ``(red, green, blue)`` fill color.
        grid (PVector[Cell] | None): ``(value, index)`` pairs in row-major order.
            25 entries after grid building, only even values after filtering.
        pixel_map (PVector[Rect] | None): ``(top_left, bottom_right)`` rectangle
            per retained grid cell, in grid order.
    """

    hash_bytes: Optional[PVector[int]] = None
    color: Optional[Color] = None
    grid: Optional[PVector[Cell]] = None
    pixel_map: Optional[PVector[Rect]] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns:
            PMap[str, Any]: Persistent map of field name to value, skipping
            fields that are still ``None``.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            description = description.set(field, value)
        return description
