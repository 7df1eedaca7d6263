"""KiCad placement report (.rpt) parser."""
import io
import logging
from pathlib import Path
from typing import Optional, TextIO

from rpt2paste.config import DispenseConfig

from .bounds import bounding_box
from .collector import PadCollector
from .lexer import tokenize_report
from .models import BoundingBox, Pad, ReportInfo

logger = logging.getLogger(__name__)


class RptParser:
    """Parser for KiCad placement reports."""

    def __init__(self, source: str | Path | TextIO, config: Optional[DispenseConfig] = None):
        """
        Load and parse a placement report.

        Args:
            source: Path to the .rpt file, or an open text stream
            config: Run settings; only the scale factor is used here
        """
        self.config = config or DispenseConfig()
        self.rpt_path: Optional[Path] = None

        self._collector = PadCollector(scale=self.config.scale)

        if isinstance(source, (str, Path)):
            self.rpt_path = Path(source)
            with open(self.rpt_path, encoding="utf-8", errors="replace") as f:
                self._parse(f)
        else:
            self._parse(source)

    @classmethod
    def from_string(cls, text: str, config: Optional[DispenseConfig] = None) -> "RptParser":
        """Parse report contents held in memory."""
        return cls(io.StringIO(text), config)

    def _parse(self, stream: TextIO) -> None:
        self._collector.feed_all(tokenize_report(stream))
        self._pads = self._collector.finish()
        logger.debug(
            "Parsed %s: %d components, %d pads",
            self.rpt_path or "<stream>", self._collector.component_count, len(self._pads)
        )

    @property
    def pads(self) -> list[Pad]:
        """Get all accepted (surface-mount) pads."""
        return self._pads

    @property
    def seen_pad_count(self) -> int:
        """Pads read from the report, including through-hole ones."""
        return self._collector.seen_pad_count

    @property
    def discarded_count(self) -> int:
        return self._collector.discarded_count

    @property
    def component_count(self) -> int:
        return self._collector.component_count

    def get_bounds(self) -> BoundingBox:
        """Extent of accepted pads; raises EmptyPadListError if there are none."""
        return bounding_box(self._pads)

    def get_report_info(self) -> ReportInfo:
        """Get overall report information."""
        bounds = self.get_bounds()
        return ReportInfo(
            min_x=bounds.min.x,
            min_y=bounds.min.y,
            max_x=bounds.max.x,
            max_y=bounds.max.y,
            component_count=self.component_count,
            pad_count=len(self._pads),
            discarded_count=self.discarded_count,
        )
