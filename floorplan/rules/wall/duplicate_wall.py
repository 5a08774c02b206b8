"""Duplicate walls — two rooms each building their own wall on the same line.

A shared boundary should be built once; the user resolves it by marking
one side virtual (``exists: false``), which silences the warning.
"""

from __future__ import annotations

from floorplan.rules.base import ValidationRule
from floorplan.core.analyzer import TOLERANCE
from floorplan.models import (
    IssueDetails, IssueType, Segment, Severity, ValidationContext,
    ValidationIssue, WallSegment,
)


class DuplicateWallRule(ValidationRule):
    """Warns about collinear, overlapping, physically existing walls of different rooms."""

    priority = 30

    def get_id(self) -> str:
        return "wall.duplicate"

    def get_name(self) -> str:
        return "Duplicate Walls"

    def applies(self, context: ValidationContext) -> bool:
        return len(context.bounds) > 1

    def check(self, context: ValidationContext) -> list[ValidationIssue]:
        issues: list[ValidationIssue] = []
        walls = context.segments

        for i in range(len(walls)):
            for j in range(i + 1, len(walls)):
                w1, w2 = walls[i], walls[j]

                if w1.room_id == w2.room_id:
                    continue
                if not w1.exists or not w2.exists:
                    continue
                if not self._overlap(w1, w2):
                    continue

                issues.append(ValidationIssue(
                    id=f"duplicate-wall-{w1.room_id}-{w1.side.value}-{w2.room_id}-{w2.side.value}",
                    severity=Severity.WARNING,
                    type=IssueType.DUPLICATE_WALL,
                    message=(
                        f'Double wall: "{w1.room_name}" ({w1.side.value}) '
                        f'and "{w2.room_name}" ({w2.side.value})'
                    ),
                    room_ids=[w1.room_id, w2.room_id],
                    details=IssueDetails(
                        wall_side=w1.side,
                        wall_position=Segment(x1=w1.x1, y1=w1.y1, x2=w1.x2, y2=w1.y2),
                    ),
                ))

        return issues

    def _overlap(self, w1: WallSegment, w2: WallSegment) -> bool:
        """Same orientation, same line within tolerance, shared stretch > tolerance."""
        if w1.is_horizontal != w2.is_horizontal:
            return False

        if w1.is_horizontal:
            offset = abs(w1.y1 - w2.y1)
            lo1, hi1 = min(w1.x1, w1.x2), max(w1.x1, w1.x2)
            lo2, hi2 = min(w2.x1, w2.x2), max(w2.x1, w2.x2)
        else:
            offset = abs(w1.x1 - w2.x1)
            lo1, hi1 = min(w1.y1, w1.y2), max(w1.y1, w1.y2)
            lo2, hi2 = min(w2.y1, w2.y2), max(w2.y1, w2.y2)

        if offset > TOLERANCE:
            return False
        return min(hi1, hi2) - max(lo1, lo2) > TOLERANCE
