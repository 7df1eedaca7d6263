"""Pytest configuration for rpt2paste tests."""
import pytest
from pathlib import Path

from rpt2paste.config import DispenseConfig
from rpt2paste.pcb import Pad, Point, RptParser


DATA_DIR = Path(__file__).parent / "data"
SAMPLE_RPT = DATA_DIR / "sample.rpt"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (run with -m slow or skip with -m 'not slow')"
    )


def _make_pads(coords, area: float = 1.0) -> list[Pad]:
    """Build surface-mount pads at the given (x, y) positions."""
    return [
        Pad(position=Point(float(x), float(y)), area=area, component="U1", name=str(i + 1))
        for i, (x, y) in enumerate(coords)
    ]


@pytest.fixture
def make_pads():
    """Factory for pads at given positions."""
    return _make_pads


@pytest.fixture
def sample_rpt() -> Path:
    return SAMPLE_RPT


@pytest.fixture
def config():
    return DispenseConfig()


@pytest.fixture
def parser(config):
    """Parse the sample report."""
    return RptParser(SAMPLE_RPT, config)
