"""Configuration constants and per-run settings."""
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Mapping

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Report coordinates are in inches; dispensing happens in mm
DEFAULT_SCALE = 25.4

# Smallest point from machine origin (mm)
DEFAULT_OFFSET_X = 50.0
DEFAULT_OFFSET_Y = 50.0

# Dwell time: minimum plus a share proportional to pad area
MINIMUM_DWELL_MS = 50.0
AREA_TO_DWELL_MS = 25.0  # ms per mm^2

# Dispenser heights (mm)
Z_DISPENSE = 0.6  # Position to dispense paste
Z_HOVER = 2.0  # Hovering above position
Z_HIGH = 4.0  # High up to separate paste

# Feed rates (mm/min)
TRAVEL_FEED = 20000
WORK_FEED = 4000

# Upper bound on full 2-opt improvement passes
MAX_TWO_OPT_PASSES = 100

# Environment variable prefix for overrides
ENV_PREFIX = "RPT2PASTE_"

# Server settings
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class DispenseConfig:
    """Settings for one pipeline run.

    Only ``scale`` reaches the pad collector; everything else shapes the
    plan and the rendered output.
    """
    scale: float = DEFAULT_SCALE
    offset_x: float = DEFAULT_OFFSET_X
    offset_y: float = DEFAULT_OFFSET_Y
    minimum_dwell_ms: float = MINIMUM_DWELL_MS
    area_to_dwell_ms: float = AREA_TO_DWELL_MS
    z_dispense: float = Z_DISPENSE
    z_hover: float = Z_HOVER
    z_high: float = Z_HIGH
    travel_feed: int = TRAVEL_FEED
    work_feed: int = WORK_FEED
    max_two_opt_passes: int = MAX_TWO_OPT_PASSES
    optimize_route: bool = True

    def dwell_ms(self, area: float) -> float:
        """Dispense duration for a pad of the given area (mm^2)."""
        return self.minimum_dwell_ms + area * self.area_to_dwell_ms

    def with_overrides(self, **overrides) -> "DispenseConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "DispenseConfig":
        """
        Build a config from ``RPT2PASTE_*`` environment variables.

        e.g. ``RPT2PASTE_SCALE=1`` for reports already in mm.
        """
        if environ is None:
            environ = os.environ

        values = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            if f.type in (bool, "bool"):
                values[f.name] = raw.strip().lower() in ("1", "true", "yes", "on")
            elif f.type in (int, "int"):
                values[f.name] = int(raw)
            else:
                values[f.name] = float(raw)
        return cls(**values)
