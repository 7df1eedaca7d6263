"""Bounding box of collected pads."""
from typing import Sequence

from rpt2paste.errors import EmptyPadListError

from .models import BoundingBox, Pad, Point


def bounding_box(pads: Sequence[Pad]) -> BoundingBox:
    """
    Componentwise min/max over pad positions.

    Raises:
        EmptyPadListError: if there are no pads
    """
    if not pads:
        raise EmptyPadListError("No dispensable pads found")

    xs = [pad.position.x for pad in pads]
    ys = [pad.position.y for pad in pads]
    return BoundingBox(Point(min(xs), min(ys)), Point(max(xs), max(ys)))
