"""Rule condition evaluation against a trigger context."""

from typing import Any, Mapping, Sequence

from ..core.entities import Condition
from ..core.value_objects import ConditionOperator

_MISSING = object()


class ConditionEvaluator:
    """Evaluates conditions over a flat-or-nested context mapping.

    A missing (or None) field fails every operator except
    `exists: false`. Ordering operators only compare numbers; any other
    value fails the test instead of raising.
    """

    @staticmethod
    def resolve(context: Mapping[str, Any], path: str) -> Any:
        current: Any = context
        for part in path.split("."):
            if isinstance(current, Mapping) and part in current:
                current = current[part]
            else:
                return _MISSING
        return current

    def evaluate(self, condition: Condition, context: Mapping[str, Any]) -> bool:
        actual = self.resolve(context, condition.field_name)
        operator = condition.operator
        expected = condition.value

        if operator is ConditionOperator.EXISTS:
            present = actual is not _MISSING and actual is not None
            return present == expected

        if actual is _MISSING or actual is None:
            return False

        if operator is ConditionOperator.EQUALS:
            return bool(actual == expected)
        if operator is ConditionOperator.NOT_EQUALS:
            return bool(actual != expected)

        if operator.is_numeric:
            if isinstance(actual, bool) or not isinstance(actual, (int, float)):
                return False
            if operator is ConditionOperator.GREATER_THAN:
                return actual > expected
            return actual < expected

        if operator is ConditionOperator.CONTAINS:
            if isinstance(actual, str):
                return str(expected) in actual
            if isinstance(actual, (list, tuple, set, frozenset, Mapping)):
                return expected in actual
            return False

        return False

    def evaluate_all(self, conditions: Sequence[Condition], context: Mapping[str, Any]) -> bool:
        """True when every condition holds.

        Conditions are always ANDed; a condition's logical_operator does
        not change the result. An empty list passes.
        """
        return all(self.evaluate(c, context) for c in conditions)
