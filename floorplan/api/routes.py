"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from floorplan.models import (
    EstimateConfig, FloorGeometry, FloorPlan, FloorPlanStats, ValidationIssue,
)
from floorplan.services.plan_service import PlanAnalysis, PlanService
from floorplan.api.schemas import (
    AnalyzeRequest, EditRequest, EditResponse, RuleInfo, StatsRequest,
    ValidateRequest,
)

router = APIRouter()

# Shared service instance
_service = PlanService()


@router.post("/geometry", response_model=FloorGeometry)
async def floor_geometry(floor_plan: FloorPlan) -> FloorGeometry:
    """Absolute wall segments and openings, scaled for drawing."""
    return _service.geometry(floor_plan)


@router.post("/validate", response_model=list[ValidationIssue])
async def validate_plan(request: ValidateRequest) -> list[ValidationIssue]:
    return _service.validate(request.floor_plan, request.config)


@router.post("/stats", response_model=FloorPlanStats)
async def plan_stats(request: StatsRequest) -> FloorPlanStats:
    """Measurements, materials and budget for a plan."""
    return _service.stats(request.floor_plan, request.config)


@router.post("/analyze", response_model=PlanAnalysis)
async def analyze_plan(request: AnalyzeRequest) -> PlanAnalysis:
    """Geometry, validation and statistics in one call."""
    return _service.analyze(request.floor_plan, request.estimate, request.validation)


@router.post("/edit", response_model=EditResponse)
async def edit_plan(request: EditRequest) -> EditResponse:
    """Apply one editing action and revalidate the result."""
    edited = _service.edit(request.floor_plan, request.action)
    return EditResponse(floor_plan=edited, issues=_service.validate(edited))


@router.get("/estimate-config", response_model=EstimateConfig)
async def estimate_config() -> EstimateConfig:
    """The default estimation coefficients and prices."""
    return EstimateConfig()


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all available validation rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
