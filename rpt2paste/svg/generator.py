"""SVG document generator for dispensing plans."""
import math
from xml.etree.ElementTree import Element, SubElement, tostring

from rpt2paste.plan import DispensePlan

from .styles import (
    BACKGROUND_COLOR, BOUNDS_COLOR, BOUNDS_STROKE_WIDTH, PAD_OPACITY,
    PASTE_COLOR, START_COLOR, TRAVEL_COLOR, TRAVEL_OPACITY, TRAVEL_STROKE_WIDTH
)


class SVGGenerator:
    """Generate an SVG preview of a dispensing plan."""

    def __init__(self, plan: DispensePlan):
        self.plan = plan

    def generate(self, margin: float = 3.0) -> str:
        """
        Generate SVG document.

        Machine Y grows upwards while SVG Y grows downwards, so stops are
        mirrored at the plan bounds.

        Args:
            margin: Margin around the plan bounds (mm)

        Returns:
            SVG document as string
        """
        bounds = self.plan.bounds
        min_x = bounds.min.x - margin
        min_y = bounds.min.y - margin
        width = bounds.width + 2 * margin
        height = bounds.height + 2 * margin

        svg = Element("svg", {
            "xmlns": "http://www.w3.org/2000/svg",
            "viewBox": f"{min_x:.4f} {min_y:.4f} {width:.4f} {height:.4f}",
            "width": f"{width:.4f}mm",
            "height": f"{height:.4f}mm",
            "preserveAspectRatio": "xMidYMid meet",
        })

        SubElement(svg, "rect", {
            "class": "background",
            "x": f"{min_x:.4f}",
            "y": f"{min_y:.4f}",
            "width": f"{width:.4f}",
            "height": f"{height:.4f}",
            "fill": BACKGROUND_COLOR,
        })

        SubElement(svg, "rect", {
            "class": "bounds",
            "x": f"{bounds.min.x:.4f}",
            "y": f"{bounds.min.y:.4f}",
            "width": f"{bounds.width:.4f}",
            "height": f"{bounds.height:.4f}",
            "fill": "none",
            "stroke": BOUNDS_COLOR,
            "stroke-width": f"{BOUNDS_STROKE_WIDTH:.4f}",
        })

        travel_group = SubElement(svg, "g", {"id": "travel", "class": "travel-layer"})
        self._add_travel(travel_group)

        pad_group = SubElement(svg, "g", {"id": "pads", "class": "pad-layer"})
        self._add_pads(pad_group)

        return tostring(svg, encoding="unicode")

    def _flip_y(self, y: float) -> float:
        bounds = self.plan.bounds
        return bounds.min.y + bounds.max.y - y

    def _add_travel(self, group: Element) -> None:
        """Add the travel path through all stops."""
        if len(self.plan.stops) < 2:
            return
        points = " ".join(
            f"{stop.x:.4f},{self._flip_y(stop.y):.4f}" for stop in self.plan.stops
        )
        SubElement(group, "polyline", {
            "points": points,
            "fill": "none",
            "stroke": TRAVEL_COLOR,
            "stroke-width": f"{TRAVEL_STROKE_WIDTH:.4f}",
            "stroke-opacity": str(TRAVEL_OPACITY),
            "stroke-linejoin": "round",
            "class": "travel",
        })

    def _add_pads(self, group: Element) -> None:
        """Add one circle per stop, sized like the deposited paste."""
        for index, stop in enumerate(self.plan.stops):
            radius = math.sqrt(stop.area / math.pi)
            SubElement(group, "circle", {
                "cx": f"{stop.x:.4f}",
                "cy": f"{self._flip_y(stop.y):.4f}",
                "r": f"{radius:.4f}",
                "fill": START_COLOR if index == 0 else PASTE_COLOR,
                "fill-opacity": str(PAD_OPACITY),
                "class": "pad",
                "data-order": str(index),
                "data-pad": stop.pad_id,
                "data-dwell": f"{stop.dwell_ms:.1f}",
            })
