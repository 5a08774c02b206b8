"""Flags rooms whose effective width or height is not positive."""

from __future__ import annotations

from floorplan.rules.base import ValidationRule
from floorplan.models import (
    IssueType, Severity, ValidationContext, ValidationIssue,
)


class InvalidDimensionRule(ValidationRule):
    """One error per room with width <= 0 or height <= 0."""

    priority = 10

    def get_id(self) -> str:
        return "room.invalid_dimension"

    def get_name(self) -> str:
        return "Invalid Room Dimensions"

    def check(self, context: ValidationContext) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        for b in context.bounds:
            if b.width <= 0 or b.height <= 0:
                issues.append(ValidationIssue(
                    id=f"invalid-dimension-{b.id}",
                    severity=Severity.ERROR,
                    type=IssueType.INVALID_DIMENSION,
                    message=f'"{b.name}" has invalid dimensions ({b.width} x {b.height})',
                    room_ids=[b.id],
                ))
        return issues
