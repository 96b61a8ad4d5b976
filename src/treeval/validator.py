"""
Contains the contract every constraint implements. Leaf predicates, combinators and node validators are all
`Validator`s and can therefore be nested arbitrarily.
"""
import logging
import string
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Optional, TypeVar

from treeval.errors import InvalidDefinitionError
from treeval.result import VALID, FailureReason, Invalid, ValidationResult

_logger = logging.getLogger(__name__)
CandidateT = TypeVar("CandidateT", contravariant=True)  #: the type of values a validator accepts


class Validator(ABC, Generic[CandidateT]):
    """
    A validator tests one value for one or more constraints:
        - `check_valid` must not have side effects (no I/O, no mutation of the candidate)
        - Calling it twice with the same input must yield equal results
        - A failed constraint is returned as `Invalid`, never raised. Exceptions are reserved for broken validator
          trees (see `treeval.errors`).

    Validators are immutable after construction and can therefore be shared between threads.
    """

    @abstractmethod
    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        """
        Validates the candidate and returns `Valid` or `Invalid` with all failure reasons.
        """
        raise NotImplementedError("The inheriting class has to implement this method")

    def __call__(self, candidate: CandidateT) -> ValidationResult:
        return self.check_valid(candidate)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def ensure_validator(value: Any, owner: str) -> "Validator[Any]":
    """
    Returns the value if it is a validator. Otherwise, raises an InvalidDefinitionError naming the owner which was
    about to be constructed with it.
    """
    if not isinstance(value, Validator):
        raise InvalidDefinitionError(f"{owner} expects Validator instances but got {value.__class__.__name__}")
    return value


def _check_message_template(message: str) -> None:
    try:
        fields = [field for _, field, _, _ in string.Formatter().parse(message) if field is not None]
    except ValueError as error:
        raise InvalidDefinitionError(f"The message template {message!r} is malformed: {error}") from error
    if any(field != "value" for field in fields):
        raise InvalidDefinitionError(f"The message template {message!r} may only contain the placeholder {{value}}")


class Predicate(Validator[CandidateT]):
    """
    The generic leaf validator. It is valid iff the test function returns True for the candidate.
    The message is a `str.format` template that may contain a `{value}` placeholder which will be filled with the
    repr of the candidate. Literal braces have to be doubled (`{{` and `}}`).
    """

    def __init__(self, test: Callable[[CandidateT], bool], message: str, constraint: Optional[str] = None):
        if not callable(test):
            raise InvalidDefinitionError(f"The predicate test must be callable, got {test.__class__.__name__}")
        if not isinstance(message, str):
            raise InvalidDefinitionError(f"The predicate message must be a string, got {message.__class__.__name__}")
        if constraint is not None and not isinstance(constraint, str):
            raise InvalidDefinitionError(
                f"The predicate constraint must be a string or None, got {constraint.__class__.__name__}"
            )
        _check_message_template(message)
        self.test = test
        self.message = message
        self.constraint = constraint
        _logger.debug("Created predicate: %s", self.constraint or self.message)

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        if self.test(candidate):
            return VALID
        return Invalid([FailureReason(self.message.format(value=repr(candidate)), self.constraint)])

    def __repr__(self) -> str:
        return f"Predicate({self.constraint or self.message!r})"
