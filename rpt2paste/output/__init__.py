"""Output formats for dispensing plans."""
from typing import Optional, TextIO

from rpt2paste.config import DispenseConfig

from .base import Printer
from .gcode import GCodePrinter
from .postscript import PostScriptPrinter

PRINTERS: dict[str, type[Printer]] = {
    "gcode": GCodePrinter,
    "postscript": PostScriptPrinter,
}


def get_printer(
    name: str,
    out: Optional[TextIO] = None,
    config: Optional[DispenseConfig] = None,
) -> Printer:
    """Create the printer registered under ``name``."""
    try:
        printer_cls = PRINTERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown output format {name!r} (expected one of {', '.join(PRINTERS)})"
        ) from None
    return printer_cls(out, config)


__all__ = ["Printer", "GCodePrinter", "PostScriptPrinter", "PRINTERS", "get_printer"]
