"""
Contains the mappers used by node validators to get from a parent value to a child value. A mapper is a pure function
paired with a path label which describes how the child was derived from the parent, e.g. `.email`, `[3]` or
`.total()`. The path labels are concatenated to build the paths of the failure reasons.
"""
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

import attrs
from typeguard import TypeCheckError, check_type

from treeval.config import DEFAULT_CONFIG, ValidationConfig
from treeval.errors import InvalidDefinitionError, MapperError
from treeval.result import Invalid, ValidationResult

ParentT = TypeVar("ParentT")
ChildT = TypeVar("ChildT")

_MAPPER_ERRORS = (AttributeError, KeyError, IndexError, TypeError)


@attrs.define(frozen=True)
class Mapper(Generic[ParentT, ChildT]):
    """
    A pure projection from a parent value to a child value.
    A child value of None is an ordinary value and not a failure; wrap the paired validator in `NotNullAndValid` or
    `NullOrValid` to decide what None means.
    """

    func: Callable[[ParentT], ChildT] = attrs.field()
    path: str = attrs.field(validator=attrs.validators.instance_of(str))
    result_type: Any = attrs.field(default=None, kw_only=True)
    """
    If set, the mapped value is type checked with typeguard (unless disabled in the ValidationConfig).
    """

    @func.validator
    def _check_func(self, _attribute: attrs.Attribute, value: Any) -> None:
        if not callable(value):
            raise InvalidDefinitionError(f"The mapper function for '{self.path}' must be callable")

    def apply(self, candidate: ParentT, config: ValidationConfig = DEFAULT_CONFIG) -> ChildT:
        """
        Applies the mapper to the candidate. If the mapper does not fit the candidate (e.g. the attribute does not
        exist) a MapperError will be raised. This is a programming error and not a validation failure.
        """
        try:
            value = self.func(candidate)
        except _MAPPER_ERRORS as error:
            raise MapperError(self.path, candidate, str(error)) from error
        if self.result_type is not None and config.check_mapper_types:
            try:
                check_type(value, self.result_type)
            except TypeCheckError as error:
                raise MapperError(self.path, candidate, str(error)) from error
        return value

    def __repr__(self) -> str:
        return f"Mapper({self.path!r})"


def prefix_path(prefix: str, result: ValidationResult) -> ValidationResult:
    """
    Prepends the prefix to the path of every failure reason of the result. Valid results are returned unchanged.
    """
    if result.is_valid or prefix == "":
        return result
    return Invalid(attrs.evolve(reason, path=prefix + reason.path) for reason in result.reasons)


def attribute(attribute_path: str, result_type: Any = None) -> Mapper[Any, Any]:
    """
    Returns a mapper which queries the candidate by the provided attribute path. Nested attributes are separated
    by dots, e.g. `attribute("address.city")` results in the path `.address.city`.
    """
    splitted_path = attribute_path.split(".")
    if any(attr_name == "" for attr_name in splitted_path):
        raise InvalidDefinitionError(f"Invalid attribute path '{attribute_path}'")

    def _get_attribute(candidate: Any) -> Any:
        current_obj = candidate
        for index, attr_name in enumerate(splitted_path):
            try:
                current_obj = getattr(current_obj, attr_name)
            except AttributeError as error:
                current_path = ".".join(splitted_path[0 : index + 1])
                raise AttributeError(f"'{current_path}' does not exist") from error
        return current_obj

    return Mapper(_get_attribute, f".{attribute_path}", result_type=result_type)


def item(key: Hashable, result_type: Any = None) -> Mapper[Any, Any]:
    """
    Returns a mapper which subscripts the candidate, e.g. `item(3)` for the fourth list element (path `[3]`) or
    `item("street")` for a dictionary entry (path `[street]`).
    """
    return Mapper(lambda candidate: candidate[key], f"[{key}]", result_type=result_type)


def method(method_name: str, result_type: Any = None) -> Mapper[Any, Any]:
    """
    Returns a mapper which calls the zero-argument method of the candidate, e.g. `method("total")` with the path
    `.total()`.
    """

    def _call_method(candidate: Any) -> Any:
        return getattr(candidate, method_name)()

    return Mapper(_call_method, f".{method_name}()", result_type=result_type)


def as_mapper(value: "Mapper[Any, Any] | str", result_type: Optional[Any] = None) -> Mapper[Any, Any]:
    """
    Returns the value if it is already a Mapper, otherwise interprets the string as attribute path.
    """
    if isinstance(value, Mapper):
        return value
    if isinstance(value, str):
        return attribute(value, result_type=result_type)
    raise InvalidDefinitionError(f"Expected a Mapper or an attribute path but got {value.__class__.__name__}")
