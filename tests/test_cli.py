"""Tests for the command-line interface."""
import logging

from rpt2paste.cli import main


def test_gcode_to_stdout(sample_rpt, capsys, caplog):
    with caplog.at_level(logging.INFO, logger="rpt2paste"):
        assert main([str(sample_rpt)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("G21\n")
    assert out.count("M106") == 4
    assert "Dispensed 4 pads." in caplog.text


def test_postscript_flag(sample_rpt, capsys):
    assert main(["-p", str(sample_rpt)]) == 0
    assert capsys.readouterr().out.startswith("%!PS-Adobe-3.0")


def test_svg_to_file(sample_rpt, tmp_path):
    output = tmp_path / "plan.svg"
    assert main(["--svg", "-o", str(output), str(sample_rpt)]) == 0
    assert output.read_text().startswith("<svg")


def test_missing_file(tmp_path, caplog):
    assert main([str(tmp_path / "missing.rpt")]) == 1
    assert "Report not found" in caplog.text


def test_empty_report_fails(tmp_path, caplog):
    rpt = tmp_path / "empty.rpt"
    rpt.write_text('$MODULE "J1"\n$PAD "1"\ndrill 0.04\n$EndPAD\n$EndMODULE\n')

    assert main([str(rpt)]) == 1
    assert "No dispensable pads" in caplog.text
