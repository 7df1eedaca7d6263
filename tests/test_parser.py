"""Tests for the placement report parser."""
import pytest

from rpt2paste.config import DispenseConfig
from rpt2paste.errors import EmptyPadListError, ProtocolError
from rpt2paste.pcb import ReportInfo, RptParser


def test_parser_counts(parser):
    """Three components, six pads, two of them through-hole."""
    assert parser.component_count == 3
    assert parser.seen_pad_count == 6
    assert parser.discarded_count == 2
    assert len(parser.pads) == 4


def test_no_through_hole_pads(parser):
    assert all(pad.drill == 0 for pad in parser.pads)
    assert {pad.component for pad in parser.pads} == {"C1", "R1"}


def test_pad_positions_are_global(parser):
    positions = {pad.pad_id: pad.position for pad in parser.pads}

    assert positions["C1_1"].x == pytest.approx(3.97 * 25.4)
    assert positions["C1_1"].y == pytest.approx(3.0 * 25.4)
    assert positions["C1_2"].x == pytest.approx(4.03 * 25.4)

    # R1 is turned 90 degrees; its pads line up along Y
    assert positions["R1_1"].x == pytest.approx(4.5 * 25.4)
    assert positions["R1_1"].y == pytest.approx(3.53 * 25.4)
    assert positions["R1_2"].y == pytest.approx(3.47 * 25.4)


def test_pad_areas(parser):
    areas = {pad.pad_id: pad.area for pad in parser.pads}
    assert areas["C1_1"] == pytest.approx(0.03 * 0.04 * 25.4 ** 2)
    assert areas["R1_2"] == pytest.approx(0.025 * 0.03 * 25.4 ** 2)


def test_report_info(parser):
    info = parser.get_report_info()

    assert isinstance(info, ReportInfo)
    assert info.pad_count == 4
    assert info.discarded_count == 2
    assert info.min_x == pytest.approx(3.97 * 25.4)
    assert info.max_x == pytest.approx(4.5 * 25.4)
    assert info.min_y == pytest.approx(3.0 * 25.4)
    assert info.max_y == pytest.approx(3.53 * 25.4)
    assert info.width > 0
    assert info.height > 0


def test_scale_factor_is_configurable(sample_rpt):
    parser = RptParser(sample_rpt, DispenseConfig(scale=1.0))
    positions = {pad.pad_id: pad.position for pad in parser.pads}
    assert positions["C1_1"].x == pytest.approx(3.97)


def test_parse_from_string():
    text = '$MODULE "U1"\nposition 1 1\n$PAD "1"\nposition 0 0\ndrill 0\n$EndPAD\n$EndMODULE\n'
    parser = RptParser.from_string(text, DispenseConfig(scale=2.0))
    assert len(parser.pads) == 1
    assert parser.pads[0].position.to_tuple() == (2.0, 2.0)


def test_only_through_hole_pads_is_empty():
    text = '$MODULE "J1"\n$PAD "1"\ndrill 0.04\n$EndPAD\n$EndMODULE\n'
    parser = RptParser.from_string(text)

    assert parser.pads == []
    with pytest.raises(EmptyPadListError):
        parser.get_report_info()


def test_malformed_report_raises():
    with pytest.raises(ProtocolError):
        RptParser.from_string("$MODULE\n$PAD\n$PAD\n")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
