"""
Contains the result model of the validation engine. Every validator returns either `Valid` or `Invalid`, the latter
carrying the failure reasons. These are plain immutable records without any merging logic.
"""
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

import attrs

from treeval.errors import InvalidResultError


@attrs.define(frozen=True)
class FailureReason:
    """
    One unit of explanation why a value was invalid.
    """

    message: str = attrs.field(validator=attrs.validators.instance_of(str))
    """
    a human-readable description of what is wrong
    """
    constraint: Optional[str] = attrs.field(
        validator=attrs.validators.optional(attrs.validators.instance_of(str)), default=None
    )
    """
    a machine-stable identifier of the violated rule (e.g. "not_blank"); None if the rule has no identifier
    """
    path: str = attrs.field(validator=attrs.validators.instance_of(str), default="")
    """
    The location of the offending sub-value inside the validated root, e.g. ".contacts[2].email".
    The empty string denotes the root itself.
    """


class ValidationResult(ABC):
    """
    The result of a single `Validator.check_valid` call. It is either `Valid` or `Invalid`.
    A result is truthy iff it is valid.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """True iff the candidate satisfied all constraints"""

    @property
    @abstractmethod
    def reasons(self) -> tuple[FailureReason, ...]:
        """All failure reasons in the order they were reported (empty if valid)"""

    def __bool__(self) -> bool:
        return self.is_valid


@attrs.define(frozen=True)
class Valid(ValidationResult):
    """
    The candidate satisfied all constraints. All instances are equal to each other.
    """

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def reasons(self) -> tuple[FailureReason, ...]:
        return ()

    def __repr__(self) -> str:
        return "Valid()"


VALID = Valid()


def _check_not_empty(instance: Any, attribute: attrs.Attribute, value: tuple[FailureReason, ...]) -> None:
    if len(value) == 0:
        raise InvalidResultError("An Invalid result must carry at least one failure reason")


@attrs.define(frozen=True)
class Invalid(ValidationResult):
    """
    The candidate violated at least one constraint. The reasons are kept in the order they were reported.
    """

    _reasons: tuple[FailureReason, ...] = attrs.field(
        converter=tuple,
        validator=[
            _check_not_empty,
            attrs.validators.deep_iterable(member_validator=attrs.validators.instance_of(FailureReason)),
        ],
        alias="reasons",
    )

    @property
    def is_valid(self) -> bool:
        return False

    @property
    def reasons(self) -> tuple[FailureReason, ...]:
        return self._reasons

    def __iter__(self) -> Iterator[FailureReason]:
        return iter(self._reasons)

    def __len__(self) -> int:
        return len(self._reasons)

    def __repr__(self) -> str:
        return f"Invalid({list(self._reasons)!r})"
