"""
Contains validators composed of other validators with boolean semantics (AND/OR/NOT/XOR) or null-awareness.
The combinators know nothing about paths or object structure; they only aggregate the results of their children.
None of the combinators short-circuits: every child is evaluated, so the reported reasons are always complete.
"""
import itertools
import logging
from typing import Any, Iterable, Optional, Sequence

import attrs

from treeval.errors import InvalidDefinitionError
from treeval.result import VALID, FailureReason, Invalid, ValidationResult
from treeval.validator import CandidateT, Validator, ensure_validator

_logger = logging.getLogger(__name__)


def _children(validators: Iterable[Validator[CandidateT]], owner: str) -> tuple[Validator[CandidateT], ...]:
    if isinstance(validators, Validator):
        raise InvalidDefinitionError(f"{owner} expects an iterable of validators, not a single validator")
    children = tuple(ensure_validator(validator, owner) for validator in validators)
    _logger.debug("Created %s with %i children", owner, len(children))
    return children


def _single_child(validators: tuple[Any, ...], owner: str) -> Validator[Any]:
    if len(validators) != 1:
        raise InvalidDefinitionError(f"{owner} expects exactly one validator but got {len(validators)}")
    return ensure_validator(validators[0], owner)


def _all_reasons(results: Iterable[ValidationResult]) -> list[FailureReason]:
    return list(itertools.chain.from_iterable(result.reasons for result in results))


def all_of(results: Sequence[ValidationResult]) -> ValidationResult:
    """
    AND-aggregation: valid iff every result is valid (which includes an empty sequence). Otherwise, Invalid with the
    reasons of all failing results in order.
    """
    reasons = _all_reasons(results)
    if len(reasons) == 0:
        return VALID
    return Invalid(reasons)


def any_of(results: Sequence[ValidationResult], empty_reason: FailureReason) -> ValidationResult:
    """
    OR-aggregation: valid iff at least one result is valid. Otherwise, Invalid with the reasons of all results. An
    empty sequence is invalid with the provided `empty_reason`.
    """
    if len(results) == 0:
        return Invalid([empty_reason])
    if any(result.is_valid for result in results):
        return VALID
    return Invalid(_all_reasons(results))


def only_one_of(
    results: Sequence[ValidationResult], empty_reason: FailureReason, conflict_reason: FailureReason
) -> ValidationResult:
    """
    XOR-aggregation: valid iff exactly one result is valid. If none is valid, Invalid with the reasons of all results.
    If more than one is valid, Invalid with the `conflict_reason` whose message is formatted with the list of indices
    of the valid results (`{indices}` placeholder). An empty sequence is invalid with the provided `empty_reason`.
    """
    if len(results) == 0:
        return Invalid([empty_reason])
    valid_indices = [index for index, result in enumerate(results) if result.is_valid]
    if len(valid_indices) == 1:
        return VALID
    if len(valid_indices) == 0:
        return Invalid(_all_reasons(results))
    return Invalid(
        [attrs.evolve(conflict_reason, message=conflict_reason.message.replace("{indices}", str(valid_indices)))]
    )


class AllValid(Validator[CandidateT]):
    """
    Valid iff every child is valid. Without any children it is always valid.
    """

    def __init__(self, validators: Iterable[Validator[CandidateT]]):
        self.validators = _children(validators, "AllValid")

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        return all_of([validator.check_valid(candidate) for validator in self.validators])

    def __repr__(self) -> str:
        return f"AllValid({list(self.validators)!r})"


class AnyValid(Validator[CandidateT]):
    """
    Valid iff at least one child is valid. Without any children it is always invalid.
    """

    def __init__(self, validators: Iterable[Validator[CandidateT]]):
        self.validators = _children(validators, "AnyValid")

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        return any_of(
            [validator.check_valid(candidate) for validator in self.validators],
            empty_reason=FailureReason("must satisfy at least one constraint, but none is defined", "any_valid"),
        )

    def __repr__(self) -> str:
        return f"AnyValid({list(self.validators)!r})"


class OnlyOneValid(Validator[CandidateT]):
    """
    Valid iff exactly one child is valid. Without any children it is always invalid.
    """

    def __init__(self, validators: Iterable[Validator[CandidateT]]):
        self.validators = _children(validators, "OnlyOneValid")

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        return only_one_of(
            [validator.check_valid(candidate) for validator in self.validators],
            empty_reason=FailureReason("must satisfy exactly one constraint, but none is defined", "only_one_valid"),
            conflict_reason=FailureReason(
                "must satisfy exactly one constraint, but constraints {indices} were satisfied", "only_one_valid"
            ),
        )

    def __repr__(self) -> str:
        return f"OnlyOneValid({list(self.validators)!r})"


class NotValid(Validator[CandidateT]):
    """
    Valid iff the child is invalid.
    """

    def __init__(self, *validators: Validator[CandidateT], message: Optional[str] = None):
        self.validator = _single_child(validators, "NotValid")
        if message is not None and not isinstance(message, str):
            raise InvalidDefinitionError(f"The message must be a string, got {message.__class__.__name__}")
        self.message = message if message is not None else f"must not satisfy {self.validator!r}"

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        if self.validator.check_valid(candidate).is_valid:
            return Invalid([FailureReason(self.message, "not_valid")])
        return VALID

    def __repr__(self) -> str:
        return f"NotValid({self.validator!r})"


class NotNullAndValid(Validator[Optional[CandidateT]]):
    """
    Valid iff the candidate is not None and the child is valid for it.
    """

    def __init__(self, *validators: Validator[CandidateT]):
        self.validator = _single_child(validators, "NotNullAndValid")

    def check_valid(self, candidate: Optional[CandidateT]) -> ValidationResult:
        if candidate is None:
            return Invalid([FailureReason("must not be null", "not_null")])
        return self.validator.check_valid(candidate)

    def __repr__(self) -> str:
        return f"NotNullAndValid({self.validator!r})"


class NullOrValid(Validator[Optional[CandidateT]]):
    """
    Valid iff the candidate is None or the child is valid for it.
    """

    def __init__(self, *validators: Validator[CandidateT]):
        self.validator = _single_child(validators, "NullOrValid")

    def check_valid(self, candidate: Optional[CandidateT]) -> ValidationResult:
        if candidate is None:
            return VALID
        return self.validator.check_valid(candidate)

    def __repr__(self) -> str:
        return f"NullOrValid({self.validator!r})"


class CustomConstraint(Validator[CandidateT]):
    """
    Delegates to the wrapped validator but overwrites the `constraint` of every failure reason. If a message is
    given, it overwrites the message of every failure reason as well.
    E.g.:
    ```
    CustomConstraint(NotBlank(), "must not be blank").check_valid("")
    # Invalid([FailureReason(message="must not be blank, but was ''", constraint="must not be blank", path="")])
    ```
    """

    def __init__(self, validator: Validator[CandidateT], constraint: str, *, message: Optional[str] = None):
        self.validator = ensure_validator(validator, "CustomConstraint")
        if not isinstance(constraint, str):
            raise InvalidDefinitionError(f"The constraint must be a string, got {constraint.__class__.__name__}")
        if message is not None and not isinstance(message, str):
            raise InvalidDefinitionError(f"The message must be a string, got {message.__class__.__name__}")
        self.constraint = constraint
        self.message = message

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        result = self.validator.check_valid(candidate)
        if result.is_valid:
            return result
        changes: dict[str, Any] = {"constraint": self.constraint}
        if self.message is not None:
            changes["message"] = self.message
        return Invalid(attrs.evolve(reason, **changes) for reason in result.reasons)

    def __repr__(self) -> str:
        return f"CustomConstraint({self.validator!r}, {self.constraint!r})"
