"""
Contains the leaf validators. Each of them is a trivial predicate with a default message and a stable constraint
identifier. Use `CustomConstraint` if you need a different identifier or message.
"""
import re
from typing import Any, Collection, Optional

from treeval.errors import InvalidDefinitionError
from treeval.validator import Predicate


def _literal(value: Any) -> str:
    """the repr of value with its braces escaped so that it may be embedded into a message template"""
    return _escape(repr(value))


def _escape(text: str) -> str:
    return text.replace("{", "{{").replace("}", "}}")


# pylint: disable=invalid-name
def Equals(expected: Any) -> Predicate[Any]:
    """valid iff value == expected"""
    return Predicate(
        lambda value: value == expected, f"must be equal to {_literal(expected)}, but was {{value}}", "equals"
    )


def NotEquals(unexpected: Any) -> Predicate[Any]:
    """valid iff value != unexpected"""
    return Predicate(lambda value: value != unexpected, f"must not be equal to {_literal(unexpected)}", "not_equals")


def GreaterThan(bound: Any) -> Predicate[Any]:
    """valid iff value > bound"""
    return Predicate(
        lambda value: value > bound, f"must be greater than {_literal(bound)}, but was {{value}}", "greater_than"
    )


def GreaterOrEqual(bound: Any) -> Predicate[Any]:
    """valid iff value >= bound"""
    return Predicate(
        lambda value: value >= bound,
        f"must be greater than or equal to {_literal(bound)}, but was {{value}}",
        "greater_or_equal",
    )


def LessThan(bound: Any) -> Predicate[Any]:
    """valid iff value < bound"""
    return Predicate(
        lambda value: value < bound, f"must be less than {_literal(bound)}, but was {{value}}", "less_than"
    )


def LessOrEqual(bound: Any) -> Predicate[Any]:
    """valid iff value <= bound"""
    return Predicate(
        lambda value: value <= bound,
        f"must be less than or equal to {_literal(bound)}, but was {{value}}",
        "less_or_equal",
    )


def Between(lower: Any, upper: Any) -> Predicate[Any]:
    """valid iff lower <= value <= upper"""
    if lower > upper:
        raise InvalidDefinitionError(f"The lower bound {lower!r} is greater than the upper bound {upper!r}")
    return Predicate(
        lambda value: lower <= value <= upper,
        f"must be between {_literal(lower)} and {_literal(upper)}, but was {{value}}",
        "between",
    )


def CloseTo(expected: float, tolerance: float) -> Predicate[float]:
    """valid iff abs(value - expected) <= tolerance"""
    if tolerance < 0:
        raise InvalidDefinitionError(f"The tolerance must not be negative, got {tolerance!r}")
    return Predicate(
        lambda value: abs(value - expected) <= tolerance,
        f"must be {_literal(expected)} +/- {_literal(tolerance)}, but was {{value}}",
        "close_to",
    )


def NotBlank() -> Predicate[str]:
    """valid iff the string contains at least one non-whitespace character"""
    return Predicate(lambda value: value.strip() != "", "must not be blank, but was {value}", "not_blank")


def Blank() -> Predicate[str]:
    """valid iff the string is empty or whitespace only"""
    return Predicate(lambda value: value.strip() == "", "must be blank, but was {value}", "blank")


def NotEmpty() -> Predicate[Collection[Any]]:
    """valid iff len(value) > 0"""
    return Predicate(lambda value: len(value) > 0, "must not be empty", "not_empty")


def Matches(pattern: "str | re.Pattern[str]", description: Optional[str] = None) -> Predicate[str]:
    """
    valid iff the whole string matches the regular expression. The pattern is compiled once.
    Pass a description to get a more readable message than the raw pattern.
    """
    try:
        compiled = re.compile(pattern)
    except re.error as error:
        raise InvalidDefinitionError(f"Invalid regular expression {pattern!r}: {error}") from error
    expected = _escape(description) if description is not None else f"the pattern {_literal(compiled.pattern)}"
    return Predicate(
        lambda value: compiled.fullmatch(value) is not None, f"must match {expected}, but was {{value}}", "matches"
    )


def IsNull() -> Predicate[Any]:
    """valid iff value is None"""
    return Predicate(lambda value: value is None, "must be null, but was {value}", "is_null")


def OneOf(allowed: Collection[Any]) -> Predicate[Any]:
    """valid iff value in allowed"""
    allowed_values = tuple(allowed)
    return Predicate(
        lambda value: value in allowed_values,
        f"must be one of {_literal(list(allowed_values))}, but was {{value}}",
        "one_of",
    )
