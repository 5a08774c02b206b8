"""API request/response schemas."""

from __future__ import annotations

from floorplan.models import (
    EditAction, EstimateConfig, FloorPlan, PlanModel, ValidationConfig,
    ValidationIssue,
)


class ValidateRequest(PlanModel):
    """Request body for the /validate endpoint."""
    floor_plan: FloorPlan
    config: ValidationConfig = ValidationConfig()


class StatsRequest(PlanModel):
    """Request body for the /stats endpoint."""
    floor_plan: FloorPlan
    config: EstimateConfig = EstimateConfig()


class AnalyzeRequest(PlanModel):
    """Request body for the /analyze endpoint."""
    floor_plan: FloorPlan
    estimate: EstimateConfig = EstimateConfig()
    validation: ValidationConfig = ValidationConfig()


class EditRequest(PlanModel):
    floor_plan: FloorPlan
    action: EditAction


class EditResponse(PlanModel):
    """The edited plan, revalidated."""
    floor_plan: FloorPlan
    issues: list[ValidationIssue]


class RuleInfo(PlanModel):
    id: str
    name: str
