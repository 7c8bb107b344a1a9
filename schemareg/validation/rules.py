"""Validation rule evaluator.

Applies a ValidationRule to a candidate value. REGEX, RANGE and ENUM rules
are interpreted directly; CUSTOM rules name a predicate registered with
:func:`register_custom_rule`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from schemareg.models.schema import RuleType, ValidationRule

CustomPredicate = Callable[[Any], bool]

_CUSTOM_RULES: dict[str, CustomPredicate] = {}


@dataclass
class RuleOutcome:
    passed: bool
    message: str = ""


def register_custom_rule(name: str, predicate: CustomPredicate) -> None:
    """Make ``predicate`` available to CUSTOM rules whose expression is ``name``."""
    _CUSTOM_RULES[name] = predicate


def unregister_custom_rule(name: str) -> None:
    _CUSTOM_RULES.pop(name, None)


def evaluate_rule(rule: ValidationRule, value: Any) -> RuleOutcome:
    """Evaluate ``rule`` against ``value``.

    Returns a failing outcome (never raises) when the value does not satisfy
    the rule or the rule expression itself is unusable.
    """
    evaluator = _EVALUATORS[rule.rule_type]
    try:
        passed = evaluator(rule.rule_expression, value)
    except (re.error, ValueError, TypeError) as e:
        return RuleOutcome(False, f"Rule {rule.rule_id} could not be evaluated: {e}")

    if passed:
        return RuleOutcome(True)
    return RuleOutcome(False, rule.error_message or f"Value failed rule {rule.rule_name or rule.rule_id}")


def expression_issues(rule: ValidationRule) -> list[str]:
    """Structural problems with a rule's expression, independent of any value."""
    issues: list[str] = []
    if rule.rule_type == RuleType.REGEX:
        try:
            re.compile(rule.rule_expression)
        except re.error as e:
            issues.append(f"Rule {rule.rule_id} has an invalid pattern: {e}")
    elif rule.rule_type == RuleType.RANGE:
        try:
            _parse_range(rule.rule_expression)
        except ValueError as e:
            issues.append(f"Rule {rule.rule_id} has an invalid range: {e}")
    return issues


def _eval_regex(expression: str, value: Any) -> bool:
    return re.fullmatch(expression, str(value)) is not None


def _parse_range(expression: str) -> tuple[float | None, float | None]:
    if ".." not in expression:
        raise ValueError(f"expected 'min..max', got '{expression}'")
    low, high = (part.strip() for part in expression.split("..", 1))
    return (float(low) if low else None, float(high) if high else None)


def _eval_range(expression: str, value: Any) -> bool:
    low, high = _parse_range(expression)
    number = float(value)
    if low is not None and number < low:
        return False
    if high is not None and number > high:
        return False
    return True


def _eval_enum(expression: str, value: Any) -> bool:
    allowed = [v.strip() for v in expression.split(",") if v.strip()]
    return str(value) in allowed


def _eval_custom(expression: str, value: Any) -> bool:
    predicate = _CUSTOM_RULES.get(expression)
    if predicate is None:
        raise ValueError(f"no custom rule named '{expression}'")
    return bool(predicate(value))


_EVALUATORS: dict[RuleType, Callable[[str, Any], bool]] = {
    RuleType.REGEX: _eval_regex,
    RuleType.RANGE: _eval_range,
    RuleType.ENUM: _eval_enum,
    RuleType.CUSTOM: _eval_custom,
}
