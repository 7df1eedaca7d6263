"""FastAPI application exposing the report-to-paste pipeline."""
import logging
from typing import Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import DEFAULT_HOST, DEFAULT_PORT, DispenseConfig
from .errors import Rpt2PasteError
from .output import get_printer
from .pcb import RptParser
from .plan import DispensePlan, build_plan
from .svg import SVGGenerator

logger = logging.getLogger(__name__)

app = FastAPI(title="rpt2paste", version="0.1.0")


class PlanRequest(BaseModel):
    """Request model: a placement report plus optional overrides."""
    report: str
    scale: Optional[float] = None
    optimize: Optional[bool] = None


class StopModel(BaseModel):
    """A single dispensing stop."""
    x: float
    y: float
    area: float
    dwell_ms: float
    pad_id: str = ""


class PlanResponse(BaseModel):
    """Response model for a computed plan."""
    pad_count: int
    discarded_count: int
    travel_length: float
    bounds: list[list[float]]  # [[min_x, min_y], [max_x, max_y]]
    stops: list[StopModel]


def _plan_for(request: PlanRequest) -> tuple[DispensePlan, RptParser]:
    """Build a fresh config and plan for one request."""
    config = DispenseConfig.from_env().with_overrides(
        scale=request.scale,
        optimize_route=request.optimize,
    )
    parser = RptParser.from_string(request.report, config)
    return build_plan(parser.pads, config), parser


@app.exception_handler(Rpt2PasteError)
async def pipeline_error_handler(request: Request, exc: Rpt2PasteError):
    """Report malformed or empty reports as unprocessable input."""
    logger.warning("Rejected report: %s", exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.post("/api/plan", response_model=PlanResponse)
async def compute_plan(request: PlanRequest):
    """Return the ordered dispensing stops as JSON."""
    plan, parser = _plan_for(request)
    return PlanResponse(
        pad_count=len(plan),
        discarded_count=parser.discarded_count,
        travel_length=plan.travel_length,
        bounds=[list(plan.bounds.min.to_tuple()), list(plan.bounds.max.to_tuple())],
        stops=[
            StopModel(x=s.x, y=s.y, area=s.area, dwell_ms=s.dwell_ms, pad_id=s.pad_id)
            for s in plan.stops
        ],
    )


@app.post("/api/gcode")
async def export_gcode(request: PlanRequest):
    """Return the plan as a G-code program."""
    plan, parser = _plan_for(request)
    content = get_printer("gcode", config=parser.config).render(plan)
    return Response(
        content=content,
        media_type="text/x-gcode",
        headers={"Content-Disposition": "attachment; filename=paste.gcode"}
    )


@app.post("/api/postscript")
async def export_postscript(request: PlanRequest):
    """Return a PostScript preview of the plan."""
    plan, parser = _plan_for(request)
    content = get_printer("postscript", config=parser.config).render(plan)
    return Response(content=content, media_type="application/postscript")


@app.post("/api/svg")
async def export_svg(request: PlanRequest):
    """Return an SVG preview of the plan."""
    plan, _ = _plan_for(request)
    return Response(content=SVGGenerator(plan).generate(), media_type="image/svg+xml")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=DEFAULT_HOST, port=DEFAULT_PORT)
