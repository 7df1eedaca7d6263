"""Data models for report elements and collector events."""
from __future__ import annotations
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(slots=True)
class Point:
    """2D point with basic vector operations."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Point) -> float:
        return (self - other).length()

    def __iter__(self):
        yield self.x
        yield self.y

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Pad:
    """A single solder paste target."""
    position: Point = field(default_factory=lambda: Point(0.0, 0.0))  # Global, scaled
    area: float = 0.0  # Paste footprint area (scaled units squared)
    drill: float = 0.0  # Nonzero for through-hole pads
    component: str = ""  # Enclosing component reference, if known
    name: str = ""  # Pad name/number, if known

    @property
    def is_through_hole(self) -> bool:
        return self.drill != 0

    @property
    def pad_id(self) -> str:
        """Pad identifier: component reference + pad name."""
        return f"{self.component}_{self.name}"


@dataclass
class ComponentContext:
    """Placement of the component whose pads are being read."""
    origin: Point = field(default_factory=lambda: Point(0.0, 0.0))  # Unscaled report units
    rotation: float = 0.0  # Radians, already sign-flipped
    reference: str = ""


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent of a set of points."""
    min: Point
    max: Point

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y


class CollectorState(Enum):
    """Where the pad collector is within the component/pad nesting."""
    IDLE = "idle"
    IN_COMPONENT = "in_component"
    IN_PAD = "in_pad"


# Events produced by the report lexer

@dataclass(frozen=True)
class ComponentStart:
    reference: str = ""


@dataclass(frozen=True)
class ComponentEnd:
    pass


@dataclass(frozen=True)
class PadStart:
    name: str = ""


@dataclass(frozen=True)
class PadEnd:
    pass


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Drill:
    diameter: float


@dataclass(frozen=True)
class Orientation:
    angle: float  # Degrees, as written in the report


Event = Union[
    ComponentStart, ComponentEnd, PadStart, PadEnd,
    Position, Size, Drill, Orientation,
]


@dataclass
class ReportInfo:
    """Summary of a parsed placement report."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float
    component_count: int
    pad_count: int  # Accepted (surface-mount) pads
    discarded_count: int  # Through-hole pads dropped

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y
