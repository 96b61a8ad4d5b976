"""
Contains the errors raised by treeval. Note that a failed validation is never raised: it is returned as `Invalid`.
Everything in here signals a broken validator tree (or a candidate the tree was never meant for) instead.
"""
import logging
from typing import Any, Optional

_logger = logging.getLogger(__name__)


class ValidatorTreeError(Exception):
    """
    Base class of all errors raised by treeval.
    """

    def __init__(self, message: str):
        super().__init__(message)
        _logger.debug("%s: %s", self.__class__.__name__, message)


class InvalidDefinitionError(ValidatorTreeError, ValueError):
    """
    Raised when a validator is assembled wrongly, e.g. a `NotValid` without a child or a node pair which is not a
    (Mapper, Validator) tuple.
    """


class InvalidResultError(ValidatorTreeError, ValueError):
    """
    Raised when somebody tries to construct an `Invalid` result without any failure reason.
    """


class InvalidCandidateError(ValidatorTreeError, TypeError):
    """
    Raised by the collection adapters if the candidate is not a (sized) collection.
    """

    def __init__(self, adapter_name: str, candidate: Any):
        super().__init__(f"{adapter_name} expects a collection but got {candidate.__class__.__name__}")
        self.adapter_name = adapter_name
        self.candidate = candidate


class MapperError(ValidatorTreeError, RuntimeError):
    """
    Raised if a mapper could not be applied to a candidate, e.g. because the mapped attribute does not exist on it.
    The original exception is available as `__cause__`.
    """

    def __init__(self, path: str, candidate: Any, detail: Optional[str] = None):
        message = f"Mapper '{path}' could not be applied to {candidate.__class__.__name__}"
        if detail is not None:
            message += f": {detail}"
        super().__init__(message)
        self.path = path
        self.candidate = candidate
