"""Rule registry — stores and resolves validation rules."""

from __future__ import annotations
import logging

from floorplan.models import ValidationConfig, ValidationContext
from floorplan.rules.base import ValidationRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Validation rules keyed by id.

    The validator asks it, once per plan, for the rules to run: filtered
    by the request's rule selection and by `applies()`, then ordered.
    """

    def __init__(self) -> None:
        self._rules: dict[str, ValidationRule] = {}

    def register(self, rule: ValidationRule) -> None:
        """Register a validation rule."""
        rule_id = rule.get_id()
        if rule_id in self._rules:
            logger.warning("Overwriting existing rule '%s'", rule_id)
        self._rules[rule_id] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> ValidationRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[ValidationRule]:
        """Return all registered rules, in run order."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    def is_selected(self, rule_id: str, config: ValidationConfig) -> bool:
        """Whether the rule selection in ``config`` lets ``rule_id`` run."""
        if config.enabled_rules and rule_id not in config.enabled_rules:
            return False
        return rule_id not in config.disabled_rules

    def get_applicable_rules(self, context: ValidationContext) -> list[ValidationRule]:
        """
        Rules selected by the context's config that apply to it, in run order.

        Run order is priority (lower first), except that a rule's
        dependencies run before it when they are applicable too.
        """
        applicable = sorted(
            (
                r for r in self._rules.values()
                if self.is_selected(r.get_id(), context.config) and r.applies(context)
            ),
            key=lambda r: r.priority,
        )
        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[ValidationRule]) -> list[ValidationRule]:
        """Depth-first topological sort; dependencies that will not run are skipped."""
        by_id = {r.get_id(): r for r in rules}
        seen: set[str] = set()
        ordered: list[ValidationRule] = []

        def place(rule_id: str) -> None:
            if rule_id in seen:
                return
            seen.add(rule_id)
            rule = by_id.get(rule_id)
            if rule is None:
                logger.debug("Dependency '%s' is not running, skipped", rule_id)
                return
            for dep_id in rule.dependencies:
                place(dep_id)
            ordered.append(rule)

        for rule in rules:
            place(rule.get_id())
        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard validation rules."""
    from floorplan.rules.room.invalid_dimension import InvalidDimensionRule
    from floorplan.rules.room.overlap import RoomOverlapRule
    from floorplan.rules.wall.duplicate_wall import DuplicateWallRule

    registry = RuleRegistry()
    registry.register(InvalidDimensionRule())
    registry.register(RoomOverlapRule())
    registry.register(DuplicateWallRule())
    return registry
