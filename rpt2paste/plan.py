"""Dispensing plan: ordered, machine-frame stops ready for rendering."""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import DispenseConfig
from .pcb import RptParser
from .pcb.bounds import bounding_box
from .pcb.models import BoundingBox, Pad, Point
from .routing import RouteOptimizer, apply_route, path_length

logger = logging.getLogger(__name__)


@dataclass
class DispenseStop:
    """One paste deposit in machine coordinates."""
    x: float
    y: float
    area: float  # mm^2
    dwell_ms: float
    pad_id: str = ""

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass
class DispensePlan:
    """Ordered stops plus the extent they occupy."""
    stops: list[DispenseStop]
    bounds: BoundingBox
    route: list[int] = field(default_factory=list)  # Indices into the collected pads

    @property
    def travel_length(self) -> float:
        """Length of the open path through all stops."""
        return path_length([stop.point for stop in self.stops])

    def __len__(self) -> int:
        return len(self.stops)


def build_plan(pads: Sequence[Pad], config: Optional[DispenseConfig] = None) -> DispensePlan:
    """
    Order pads and move them into the machine frame.

    X is shifted so the leftmost pad sits at ``offset_x``; Y is mirrored at
    the topmost pad (report Y grows the other way) and shifted by ``offset_y``.

    Raises:
        EmptyPadListError: if there are no pads
    """
    config = config or DispenseConfig()
    raw_bounds = bounding_box(pads)

    if config.optimize_route:
        optimizer = RouteOptimizer(max_passes=config.max_two_opt_passes)
        route = optimizer.optimize(pads)
    else:
        route = list(range(len(pads)))

    stops = []
    for pad in apply_route(pads, route):
        stops.append(DispenseStop(
            x=pad.position.x + config.offset_x - raw_bounds.min.x,
            y=raw_bounds.max.y - pad.position.y + config.offset_y,
            area=pad.area,
            dwell_ms=config.dwell_ms(pad.area),
            pad_id=pad.pad_id,
        ))

    bounds = BoundingBox(
        Point(config.offset_x, config.offset_y),
        Point(raw_bounds.width + config.offset_x, raw_bounds.height + config.offset_y),
    )
    plan = DispensePlan(stops=stops, bounds=bounds, route=route)
    logger.info("Planned %d stops, travel %.1f mm", len(stops), plan.travel_length)
    return plan


def plan_from_report(
    source: str | Path | TextIO,
    config: Optional[DispenseConfig] = None,
) -> DispensePlan:
    """Parse a placement report and build its dispensing plan."""
    config = config or DispenseConfig()
    parser = RptParser(source, config)
    return build_plan(parser.pads, config)
