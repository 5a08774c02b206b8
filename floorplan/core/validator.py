"""Plan validator — runs the analyzer, then the rules, over one plan.

Also holds the small queries the editor uses to highlight issues.
"""

from __future__ import annotations
import logging

from floorplan.models import (
    FloorPlan, IssueType, Rect, Segment, Severity, ValidationConfig,
    ValidationContext, ValidationIssue,
)
from floorplan.core.registry import RuleRegistry, create_default_registry
from floorplan.core.analyzer import PlanAnalyzer

logger = logging.getLogger(__name__)


class PlanValidator:
    """Validates plans against a rule registry. Holds no per-plan state."""

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = PlanAnalyzer()

    def validate(
        self,
        floor_plan: FloorPlan,
        config: ValidationConfig | None = None,
    ) -> list[ValidationIssue]:
        if config is None:
            config = ValidationConfig()

        context = ValidationContext(floor_plan=floor_plan, config=config)

        # Room bounds and wall segments first
        self.analyzer.analyze(context)

        # Then every applicable rule, in dependency order
        for rule in self.registry.get_applicable_rules(context):
            issues = rule.check(context)
            if issues:
                logger.debug("Rule %s reported %d issues", rule.get_id(), len(issues))
            context.add_issues(issues)

        return context.issues


# Shared validator with the standard rules
_validator = PlanValidator()


def validate_floor_plan(
    floor_plan: FloorPlan, config: ValidationConfig | None = None,
) -> list[ValidationIssue]:
    """Validate a floor plan with the standard rules."""
    return _validator.validate(floor_plan, config)


def rooms_with_errors(issues: list[ValidationIssue]) -> set[str]:
    """Ids of rooms involved in error-severity issues (for highlighting)."""
    room_ids: set[str] = set()
    for issue in issues:
        if issue.severity == Severity.ERROR:
            room_ids.update(issue.room_ids)
    return room_ids


def overlap_areas(issues: list[ValidationIssue]) -> list[Rect]:
    return [
        issue.details.overlap_area
        for issue in issues
        if issue.type == IssueType.OVERLAP
        and issue.details is not None
        and issue.details.overlap_area is not None
    ]


def duplicate_wall_positions(issues: list[ValidationIssue]) -> list[Segment]:
    return [
        issue.details.wall_position
        for issue in issues
        if issue.type == IssueType.DUPLICATE_WALL
        and issue.details is not None
        and issue.details.wall_position is not None
    ]
