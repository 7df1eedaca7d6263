"""PNG rendering of dispensing plan previews."""
from io import BytesIO
from pathlib import Path
from typing import Optional

import cairosvg
from PIL import Image

from rpt2paste.config import DispenseConfig
from rpt2paste.plan import DispensePlan, plan_from_report

from .generator import SVGGenerator

# Preview resolution
DEFAULT_PIXELS_PER_MM = 10.0


def preview_size(plan: DispensePlan, pixels_per_mm: float, margin: float) -> tuple[int, int]:
    """Pixel size of a plan preview including its margin."""
    bounds = plan.bounds
    width = max(1, round((bounds.width + 2 * margin) * pixels_per_mm))
    height = max(1, round((bounds.height + 2 * margin) * pixels_per_mm))
    return width, height


def render_plan_to_png(
    plan: DispensePlan,
    output_path: str | Path | None = None,
    pixels_per_mm: float = DEFAULT_PIXELS_PER_MM,
    margin: float = 3.0,
) -> Image.Image:
    """
    Render a plan preview to PNG at a fixed board resolution.

    The image size follows the plan bounds, so one millimetre of board
    always covers `pixels_per_mm` pixels regardless of board size.

    Args:
        plan: Plan to draw
        output_path: Optional path to save the PNG file
        pixels_per_mm: Output resolution
        margin: Margin around the plan bounds (mm)

    Returns:
        PIL Image object
    """
    if pixels_per_mm <= 0:
        raise ValueError(f"pixels_per_mm must be positive, got {pixels_per_mm}")

    width, height = preview_size(plan, pixels_per_mm, margin)
    svg_content = SVGGenerator(plan).generate(margin=margin)
    png_bytes = cairosvg.svg2png(
        bytestring=svg_content.encode('utf-8'),
        output_width=width,
        output_height=height,
    )

    image = Image.open(BytesIO(png_bytes))
    if output_path:
        image.save(str(output_path))
    return image


def render_report_to_png(
    rpt_path: str | Path,
    output_path: str | Path | None = None,
    config: Optional[DispenseConfig] = None,
    pixels_per_mm: float = DEFAULT_PIXELS_PER_MM,
) -> Image.Image:
    """Plan a placement report and render its preview to PNG."""
    plan = plan_from_report(rpt_path, config)
    return render_plan_to_png(plan, output_path, pixels_per_mm)
