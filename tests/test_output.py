"""Tests for G-code, PostScript and SVG output."""
import io
import re
import xml.etree.ElementTree as ET

import pytest

from rpt2paste.config import DispenseConfig
from rpt2paste.output import GCodePrinter, PostScriptPrinter, get_printer
from rpt2paste.plan import build_plan
from rpt2paste.svg import SVGGenerator

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.fixture
def plan(make_pads):
    return build_plan(make_pads([(0, 0), (10, 0), (10, 5)], area=0.8))


class TestGCode:

    def test_preamble_and_trailer(self, plan):
        gcode = GCodePrinter().render(plan)
        lines = gcode.splitlines()

        assert lines[:4] == ["G21", "G0 F20000", "G1 F4000", "G0 Z4"]
        assert lines[-1] == ";done"

    def test_one_dispense_cycle_per_pad(self, plan):
        gcode = GCodePrinter().render(plan)

        assert gcode.count("M106") == 3
        assert gcode.count("M107") == 3
        moves = re.findall(r"^G0 X([\d.]+) Y([\d.]+) Z2$", gcode, re.MULTILINE)
        assert [(float(x), float(y)) for x, y in moves] == [
            (pytest.approx(s.x, abs=1e-3), pytest.approx(s.y, abs=1e-3)) for s in plan.stops
        ]

    def test_dwell_from_area(self, plan):
        gcode = GCodePrinter().render(plan)
        # 50 ms + 0.8 mm^2 * 25 ms/mm^2
        assert gcode.count("G4 P70.0") == 3

    def test_heights_follow_config(self, plan):
        config = DispenseConfig(z_dispense=0.3, z_hover=1.5, z_high=6)
        gcode = GCodePrinter(config=config).render(plan)

        assert "G1 Z0.3\n" in gcode
        assert "Z1.5\n" in gcode
        assert "G1 Z6\n" in gcode

    def test_writes_to_stream(self, plan):
        out = io.StringIO()
        printer = GCodePrinter(out)
        printer.render(plan)
        assert out.getvalue().startswith("G21\n")


class TestPostScript:

    def test_document_structure(self, plan):
        ps = PostScriptPrinter().render(plan)

        assert ps.startswith("%!PS-Adobe-3.0\n%%BoundingBox: ")
        assert ps.rstrip().endswith("showpage")
        assert ps.count(" pp ") == 3

    def test_bounding_box_in_points(self, plan):
        ps = PostScriptPrinter().render(plan)
        match = re.search(r"%%BoundingBox: (\S+) (\S+) (\S+) (\S+)", ps)
        min_x, min_y, max_x, max_y = (float(v) for v in match.groups())

        # Plan spans 50..60 x 50..55 mm plus a 3 mm margin
        assert min_x == pytest.approx(47 * 72 / 25.4, abs=1)
        assert max_x == pytest.approx(63 * 72 / 25.4, abs=1)
        assert min_y == pytest.approx(47 * 72 / 25.4, abs=1)
        assert max_y == pytest.approx(58 * 72 / 25.4, abs=1)


def test_get_printer():
    assert isinstance(get_printer("gcode"), GCodePrinter)
    assert isinstance(get_printer("postscript"), PostScriptPrinter)
    with pytest.raises(ValueError, match="Unknown output format"):
        get_printer("dxf")


class TestSVG:

    def test_svg_is_well_formed(self, plan):
        root = ET.fromstring(SVGGenerator(plan).generate())
        assert root.tag == f"{SVG_NS}svg"

    def test_one_circle_per_stop(self, plan):
        root = ET.fromstring(SVGGenerator(plan).generate())
        circles = root.findall(f".//{SVG_NS}circle")

        assert len(circles) == 3
        assert [c.get("data-order") for c in circles] == ["0", "1", "2"]

    def test_travel_polyline(self, plan):
        root = ET.fromstring(SVGGenerator(plan).generate())
        polyline = root.find(f".//{SVG_NS}polyline")

        assert polyline is not None
        assert len(polyline.get("points").split()) == 3

    def test_single_stop_has_no_travel(self, make_pads):
        plan = build_plan(make_pads([(1, 1)]))
        root = ET.fromstring(SVGGenerator(plan).generate())
        assert root.find(f".//{SVG_NS}polyline") is None
