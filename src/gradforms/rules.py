"""Composable field rules.

A rule is a named predicate over ``(value, record)``: the coerced value of the
field under test and the typed record of the whole step, so a rule can read
sibling fields without touching them. A failing predicate yields the rule's
message; rules never raise on malformed values.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from gradforms.typing.enums import ErrorKind

if TYPE_CHECKING:
    from gradforms.typing.models import StepRecord

RulePredicate = Callable[[Any, "StepRecord"], bool]
SiblingCondition = Callable[["StepRecord"], bool]

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)
_URL_SCHEMES = frozenset({"http", "https", "ftp"})


@dataclass(frozen=True)
class FieldRule:
    """Named check applied to one field."""

    name: str
    kind: ErrorKind
    message: str
    predicate: RulePredicate

    def check(self, value: Any, record: StepRecord) -> bool:
        """Return whether the value passes the rule.

        Args:
            value (Any): Coerced field value.
            record (StepRecord): Typed record of the whole step.

        Returns:
            bool: True when the rule is satisfied.
        """
        return self.predicate(value, record)


def is_blank(value: Any) -> bool:
    """Return whether a value counts as not provided."""
    return value is None or (isinstance(value, str) and not value)


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _compile(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.ASCII)


def required(message: str) -> FieldRule:
    """Fail when the value is absent or an empty string."""
    return FieldRule("required", ErrorKind.REQUIRED, message, lambda value, _: not is_blank(value))


def matches(pattern: str | re.Pattern[str], message: str) -> FieldRule:
    """Fail when a supplied value does not fully match the pattern.

    Absent values pass; empty strings are matched like any other string.
    """
    compiled = _compile(pattern)

    def _predicate(value: Any, _: StepRecord) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and compiled.fullmatch(value) is not None

    return FieldRule("matches", ErrorKind.PATTERN_MISMATCH, message, _predicate)


def url(message: str) -> FieldRule:
    """Fail when a non-empty value is not an absolute web URL.

    Accepted schemes are http, https and ftp; a scheme-relative ``//host``
    form is read as http. The host must be a dotted name or address, and
    whitespace is never allowed.
    """

    def _predicate(value: Any, _: StepRecord) -> bool:
        if is_blank(value):
            return True
        if not isinstance(value, str) or any(char.isspace() for char in value):
            return False
        candidate = f"http:{value}" if value.startswith("//") else value
        try:
            parsed = _URL_ADAPTER.validate_python(candidate)
        except ValidationError:
            return False
        host = parsed.host or ""
        return parsed.scheme in _URL_SCHEMES and "." in host.strip(".")

    return FieldRule("url", ErrorKind.PATTERN_MISMATCH, message, _predicate)


def one_of(options: Collection[Any], message: str) -> FieldRule:
    """Fail when a supplied value is not one of the options."""
    allowed = frozenset(options)

    def _predicate(value: Any, _: StepRecord) -> bool:
        if value is None:
            return True
        try:
            return value in allowed
        except TypeError:
            return False

    return FieldRule("one_of", ErrorKind.NOT_IN_SET, message, _predicate)


def min_value(limit: float, message: str) -> FieldRule:
    """Fail when a supplied number is below ``limit``."""
    return FieldRule(
        "min",
        ErrorKind.OUT_OF_RANGE,
        message,
        lambda value, _: value is None or (_is_number(value) and value >= limit),
    )


def max_value(limit: float, message: str) -> FieldRule:
    """Fail when a supplied number is above ``limit``."""
    return FieldRule(
        "max",
        ErrorKind.OUT_OF_RANGE,
        message,
        lambda value, _: value is None or (_is_number(value) and value <= limit),
    )


def between(low: float, high: float, message: str) -> FieldRule:
    """Fail unless the value is a number within ``[low, high]``.

    Unlike ``min_value``/``max_value``, an absent value fails.
    """
    return FieldRule(
        "between",
        ErrorKind.OUT_OF_RANGE,
        message,
        lambda value, _: _is_number(value) and low <= value <= high,
    )


def min_items(count: int, message: str) -> FieldRule:
    """Fail when a supplied list has fewer than ``count`` items."""
    return FieldRule(
        "min_items",
        ErrorKind.OUT_OF_RANGE,
        message,
        lambda value, _: value is None or len(value) >= count,
    )


def each_matches(pattern: str | re.Pattern[str], message: str) -> FieldRule:
    """Fail when any item of a supplied list does not fully match the pattern."""
    compiled = _compile(pattern)

    def _predicate(value: Any, _: StepRecord) -> bool:
        if not value:
            return True
        return all(isinstance(item, str) and compiled.fullmatch(item) is not None for item in value)

    return FieldRule("each_matches", ErrorKind.PATTERN_MISMATCH, message, _predicate)


def required_if(condition: SiblingCondition, message: str) -> FieldRule:
    """Fail when ``condition(record)`` holds and the value is blank."""
    return FieldRule(
        "required_if",
        ErrorKind.CONDITIONAL_REQUIRED,
        message,
        lambda value, record: not condition(record) or not is_blank(value),
    )


def when(condition: SiblingCondition, rule: FieldRule) -> FieldRule:
    """Apply ``rule`` only while ``condition(record)`` holds."""
    kind = ErrorKind.CONDITIONAL_REQUIRED if rule.kind == ErrorKind.REQUIRED else ErrorKind.CONDITIONAL_CONSTRAINT
    return FieldRule(
        f"when_{rule.name}",
        kind,
        rule.message,
        lambda value, record: not condition(record) or rule.check(value, record),
    )


def custom(name: str, message: str, predicate: RulePredicate) -> FieldRule:
    """Wrap a custom sibling-aware predicate as a rule."""
    return FieldRule(name, ErrorKind.CONDITIONAL_CONSTRAINT, message, predicate)
