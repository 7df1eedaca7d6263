"""G-code output for a paste dispenser driven by a fan output (solenoid)."""
from rpt2paste.pcb.models import BoundingBox
from rpt2paste.plan import DispenseStop

from .base import Printer


class GCodePrinter(Printer):
    """Emit G-code; the machine is expected to be homed already."""

    def begin(self, bounds: BoundingBox) -> None:
        cfg = self.config
        self.write(
            "G21\n"  # Millimeters
            f"G0 F{cfg.travel_feed}\n"
            f"G1 F{cfg.work_feed}\n"
            # X0 Y0 may be outside the reachable area, so only lift
            f"G0 Z{cfg.z_high:g}\n"
        )

    def pad(self, stop: DispenseStop) -> None:
        cfg = self.config
        self.write(
            f"G0 X{stop.x:.3f} Y{stop.y:.3f} Z{cfg.z_hover:g}\n"  # Move above the pad
            f"G1 Z{cfg.z_dispense:g}\n"
            "M106\n"  # Fan on = solenoid open
            f"G4 P{stop.dwell_ms:.1f}\n"
            "M107\n"
            f"G1 Z{cfg.z_high:g}\n"  # Lift high to tear off the paste
        )

    def finish(self) -> None:
        self.write(";done\n")
