"""
treeval performs structural validation of arbitrary values. The main classes are `NodeValidator` to validate
structured values path by path and the combinators to compose validators with boolean semantics.
"""

from treeval.analysis import ValidationSummary, validate_all
from treeval.combinators import (
    AllValid,
    AnyValid,
    CustomConstraint,
    NotNullAndValid,
    NotValid,
    NullOrValid,
    OnlyOneValid,
)
from treeval.config import DEFAULT_CONFIG, ValidationConfig
from treeval.errors import (
    InvalidCandidateError,
    InvalidDefinitionError,
    InvalidResultError,
    MapperError,
    ValidatorTreeError,
)
from treeval.iterables import AllElements, AnyElement, OnlyOneElement, Size
from treeval.mapper import Mapper, attribute, item, method
from treeval.node import NodeValidator
from treeval.predicates import (
    Between,
    Blank,
    CloseTo,
    Equals,
    GreaterOrEqual,
    GreaterThan,
    IsNull,
    LessOrEqual,
    LessThan,
    Matches,
    NotBlank,
    NotEmpty,
    NotEquals,
    OneOf,
)
from treeval.result import VALID, FailureReason, Invalid, Valid, ValidationResult
from treeval.validator import Predicate, Validator
