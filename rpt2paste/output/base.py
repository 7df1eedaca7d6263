"""Common interface for dispensing plan printers."""
import io
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from rpt2paste.config import DispenseConfig
from rpt2paste.pcb.models import BoundingBox
from rpt2paste.plan import DispensePlan, DispenseStop


class Printer(ABC):
    """
    Writes a dispensing plan in some output format.

    Subclasses emit text for the start of the document, each stop, and the
    end of the document.
    """

    def __init__(self, out: Optional[TextIO] = None, config: Optional[DispenseConfig] = None):
        self.out = out if out is not None else io.StringIO()
        self.config = config or DispenseConfig()

    def write(self, text: str) -> None:
        self.out.write(text)

    @abstractmethod
    def begin(self, bounds: BoundingBox) -> None:
        """Emit the preamble for a plan occupying ``bounds``."""

    @abstractmethod
    def pad(self, stop: DispenseStop) -> None:
        """Emit one paste deposit."""

    @abstractmethod
    def finish(self) -> None:
        """Emit the trailer."""

    def render(self, plan: DispensePlan) -> str:
        """Write the whole plan; returns the text when writing to a buffer."""
        self.begin(plan.bounds)
        for stop in plan.stops:
            self.pad(stop)
        self.finish()

        if isinstance(self.out, io.StringIO):
            return self.out.getvalue()
        return ""
