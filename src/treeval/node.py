"""
Here is the main stuff. A NodeValidator bundles several (mapper, validator) pairs and validates a structured value by
applying each mapper and delegating the mapped sub-value to the paired validator. The failure reasons of the
children get the mapper path prepended, so nested node validators build the full path from the root, e.g.
`.orders[1].lines[0].price`.

Note that cyclic object graphs are not supported: validating a self-referential structure with a self-referential
validator tree recurses until Python's recursion limit is hit.
"""
from typing import Any, Iterable, Optional, Self

from treeval.config import DEFAULT_CONFIG, ValidationConfig
from treeval.errors import InvalidDefinitionError
from treeval.logging import logger
from treeval.mapper import Mapper, as_mapper, prefix_path
from treeval.result import VALID, FailureReason, Invalid, ValidationResult
from treeval.validator import CandidateT, Validator, ensure_validator

Pair = tuple[Mapper[Any, Any], Validator[Any]]


def _to_pair(pair: Any) -> Pair:
    """
    Checks a single pair of the node definition. The mapper may also be given as attribute path string.
    """
    if not isinstance(pair, tuple) or len(pair) != 2:
        raise InvalidDefinitionError(f"A node pair must be a tuple of (Mapper, Validator), got {pair!r}")
    mapper, validator = pair
    return as_mapper(mapper), ensure_validator(validator, "NodeValidator")


class NodeValidator(Validator[CandidateT]):
    """
    Validates a candidate by an ordered sequence of (mapper, validator) pairs:
        - Every pair is evaluated, even if a previous one failed. Hence, a single call reports all violations.
        - The result is valid iff every pair is valid. The order of the pairs only determines the order of the
          reported reasons.
        - A mapper which cannot be applied to the candidate raises a MapperError. This is never reported as Invalid.

    E.g.:
    ```
    person_validator = NodeValidator(
        [
            (attribute("name"), NotBlank()),
            (attribute("age"), GreaterOrEqual(18)),
        ]
    )
    person_validator.check_valid(Person(name="", age=15))
    # -> Invalid with two reasons, the first one with path ".name", the second one with path ".age"
    ```
    """

    def __init__(
        self,
        pairs: Iterable[tuple["Mapper[CandidateT, Any] | str", Validator[Any]]] = (),
        config: Optional[ValidationConfig] = None,
    ):
        self.pairs: tuple[Pair, ...] = tuple(_to_pair(pair) for pair in pairs)
        self.config: ValidationConfig = config if config is not None else DEFAULT_CONFIG

    def with_pair(self, mapper: "Mapper[CandidateT, Any] | str", validator: Validator[Any]) -> Self:
        """
        Returns a new node validator with the pair appended. This instance stays unchanged.
        """
        return self.__class__([*self.pairs, (mapper, validator)], config=self.config)

    def check_valid(self, candidate: CandidateT) -> ValidationResult:
        reasons: list[FailureReason] = []
        for mapper, validator in self.pairs:
            sub_value = mapper.apply(candidate, self.config)
            result = validator.check_valid(sub_value)
            if not result.is_valid:
                reasons.extend(prefix_path(mapper.path, result).reasons)
        if len(reasons) == 0:
            return VALID
        if self.config.log_failures:
            logger.get().debug(
                "%s is invalid (%i reasons): %s",
                candidate.__class__.__name__,
                len(reasons),
                ", ".join(reason.path or "<root>" for reason in reasons),
            )
        return Invalid(reasons)

    def __repr__(self) -> str:
        return f"NodeValidator({[mapper.path for mapper, _ in self.pairs]!r})"
