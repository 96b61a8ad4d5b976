"""
Contains validators which lift a validator to operate on a collection, either on its size or on its elements.
The element quantifiers reuse the aggregation of the combinators, so they share their empty-collection conventions:
`AllElements` is valid on an empty collection, `AnyElement` and `OnlyOneElement` are not.

Failure reasons of elements are prefixed with the element index, e.g. `[2].email`. The path of the collection itself
(e.g. `.contacts`) is prepended by the enclosing node validator.
"""
from collections.abc import Iterable, Sized
from typing import Collection

from treeval.combinators import all_of, any_of, only_one_of
from treeval.errors import InvalidCandidateError
from treeval.mapper import prefix_path
from treeval.result import FailureReason, ValidationResult
from treeval.validator import CandidateT, Validator, ensure_validator


class Size(Validator[Sized]):
    """
    Applies a numeric validator to the number of elements. The elements themselves are not inspected.
    """

    def __init__(self, count_validator: Validator[int]):
        self.count_validator = ensure_validator(count_validator, "Size")

    def check_valid(self, candidate: Sized) -> ValidationResult:
        if not isinstance(candidate, Sized):
            raise InvalidCandidateError("Size", candidate)
        return self.count_validator.check_valid(len(candidate))

    def __repr__(self) -> str:
        return f"Size({self.count_validator!r})"


class _ElementValidator(Validator[Collection[CandidateT]]):
    """
    Base class for the element quantifiers. It validates every element and prefixes the results with the index.
    Elements of unordered collections (e.g. sets) are indexed in iteration order.
    """

    def __init__(self, element_validator: Validator[CandidateT]):
        self.element_validator = ensure_validator(element_validator, self.__class__.__name__)

    def _element_results(self, candidate: Iterable[CandidateT]) -> list[ValidationResult]:
        if not isinstance(candidate, Iterable):
            raise InvalidCandidateError(self.__class__.__name__, candidate)
        return [
            prefix_path(f"[{index}]", self.element_validator.check_valid(element))
            for index, element in enumerate(candidate)
        ]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.element_validator!r})"


class AllElements(_ElementValidator[CandidateT]):
    """
    Valid iff every element is valid. An empty collection is valid.
    """

    def check_valid(self, candidate: Collection[CandidateT]) -> ValidationResult:
        return all_of(self._element_results(candidate))


class AnyElement(_ElementValidator[CandidateT]):
    """
    Valid iff at least one element is valid. An empty collection is invalid.
    """

    def check_valid(self, candidate: Collection[CandidateT]) -> ValidationResult:
        return any_of(
            self._element_results(candidate),
            empty_reason=FailureReason("must contain at least one matching element, but was empty", "any_element"),
        )


class OnlyOneElement(_ElementValidator[CandidateT]):
    """
    Valid iff exactly one element is valid. An empty collection is invalid.
    """

    def check_valid(self, candidate: Collection[CandidateT]) -> ValidationResult:
        return only_one_of(
            self._element_results(candidate),
            empty_reason=FailureReason(
                "must contain exactly one matching element, but was empty", "only_one_element"
            ),
            conflict_reason=FailureReason(
                "must contain exactly one matching element, but elements {indices} matched", "only_one_element"
            ),
        )
