"""Interface shared by the validation rules.

A rule looks at the analyzed plan (room bounds and wall segments) and
reports issues of one kind. Rules never change the plan and never raise
for odd geometry; a degenerate room is something to report, not an error.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from floorplan.models.context import ValidationContext
from floorplan.models.validation import ValidationIssue


class ValidationRule(ABC):
    """
    One kind of modelling check.

    The registry runs rules in ascending `priority`, so priority also
    fixes where each issue category appears in the report.
    """

    priority: int = 100

    # Ids of rules whose issues must be reported before this rule's.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Stable dotted id used in configs (e.g. 'room.overlap')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        ...

    def applies(self, context: ValidationContext) -> bool:
        """False skips the rule; by default it runs whenever the floor has rooms."""
        return len(context.bounds) > 0

    @abstractmethod
    def check(self, context: ValidationContext) -> list[ValidationIssue]:
        """Issues found in ``context``, in a deterministic order."""
        ...
