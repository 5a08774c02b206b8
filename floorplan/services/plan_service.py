"""Plan service — facade for the API layer."""

from __future__ import annotations
import logging
from typing import Any

from floorplan.models import (
    EditAction, EstimateConfig, FloorGeometry, FloorPlan, FloorPlanStats,
    PlanModel, ValidationConfig, ValidationIssue,
)
from floorplan.core.editing import apply_action
from floorplan.core.geometry import calculate_floor_geometry
from floorplan.core.statistics import calculate_floor_plan_stats
from floorplan.core.validator import PlanValidator
from floorplan.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class PlanAnalysis(PlanModel):
    """All three engine passes over one plan snapshot."""
    geometry: FloorGeometry
    issues: list[ValidationIssue]
    stats: FloorPlanStats


class PlanService:
    """Parses plans and runs the geometry, validation and statistics passes.

    The passes are independent and recompute everything from the plan;
    nothing is cached between calls.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.validator = PlanValidator(self.registry)

    def load(self, raw: str | bytes | dict[str, Any]) -> FloorPlan:
        """Parse a plan document. Raises ``pydantic.ValidationError`` on bad structure."""
        if isinstance(raw, dict):
            return FloorPlan.model_validate(raw)
        return FloorPlan.model_validate_json(raw)

    def geometry(self, plan: FloorPlan) -> FloorGeometry:
        return calculate_floor_geometry(plan)

    def validate(
        self, plan: FloorPlan, config: ValidationConfig | None = None,
    ) -> list[ValidationIssue]:
        return self.validator.validate(plan, config)

    def stats(self, plan: FloorPlan, config: EstimateConfig | None = None) -> FloorPlanStats:
        return calculate_floor_plan_stats(plan, config)

    def analyze(
        self,
        plan: FloorPlan,
        estimate: EstimateConfig | None = None,
        validation: ValidationConfig | None = None,
    ) -> PlanAnalysis:
        analysis = PlanAnalysis(
            geometry=self.geometry(plan),
            issues=self.validate(plan, validation),
            stats=self.stats(plan, estimate),
        )
        logger.debug(
            "Analyzed plan with %d rooms: %d issues",
            len(plan.floor.rooms), len(analysis.issues),
        )
        return analysis

    def edit(self, plan: FloorPlan, action: EditAction) -> FloorPlan:
        """Apply an editing action. Raises ``FloorPlanError`` for bad addresses."""
        return apply_action(plan, action)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
