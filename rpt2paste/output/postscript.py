"""PostScript preview of the dispensing route."""
import math

from rpt2paste.pcb.models import BoundingBox
from rpt2paste.plan import DispenseStop

from .base import Printer

MM_TO_POINT = 72.0 / 25.4

# Extra space around the plan bounds (mm)
PAGE_MARGIN = 3.0


class PostScriptPrinter(Printer):
    """Draw travel moves as thin lines and deposits as circles."""

    def begin(self, bounds: BoundingBox) -> None:
        min_x = (bounds.min.x - PAGE_MARGIN) * MM_TO_POINT
        min_y = (bounds.min.y - PAGE_MARGIN) * MM_TO_POINT
        max_x = (bounds.max.x + PAGE_MARGIN) * MM_TO_POINT
        max_y = (bounds.max.y + PAGE_MARGIN) * MM_TO_POINT
        self.write(
            "%!PS-Adobe-3.0\n"
            f"%%BoundingBox: {min_x:.0f} {min_y:.0f} {max_x:.0f} {max_y:.0f}\n"
            "% PastePad. Stack: <diameter>\n"
            "/pp { 1 setlinewidth 0 360 arc stroke } def\n"
            "% Move. Stack: <x> <y>\n"
            "/m { 0.1 setlinewidth lineto currentpoint stroke } def\n"
            "0 0 moveto "
        )

    def pad(self, stop: DispenseStop) -> None:
        x = stop.x * MM_TO_POINT
        y = stop.y * MM_TO_POINT
        radius = math.sqrt(stop.area / math.pi)
        self.write(
            f"{x:.3f} {y:.3f} m {radius:.3f} pp \n"
            f"{x:.3f} {y:.3f} moveto\n"
        )

    def finish(self) -> None:
        self.write("showpage\n")
