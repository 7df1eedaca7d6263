from .parser import RptParser
from .collector import PadCollector
from .bounds import bounding_box
from .lexer import tokenize_report
from .models import (
    Point, Pad, ComponentContext, BoundingBox, ReportInfo, CollectorState,
    ComponentStart, ComponentEnd, PadStart, PadEnd,
    Position, Size, Drill, Orientation
)

__all__ = [
    "RptParser", "PadCollector", "bounding_box", "tokenize_report",
    "Point", "Pad", "ComponentContext", "BoundingBox", "ReportInfo", "CollectorState",
    "ComponentStart", "ComponentEnd", "PadStart", "PadEnd",
    "Position", "Size", "Drill", "Orientation",
]
