"""
Contains functionality to validate many candidates at once and to analyze the results
"""
import itertools
from typing import Any, Generic, Optional, TypeVar

from frozendict import frozendict

from treeval.logging import logger
from treeval.result import FailureReason, Invalid
from treeval.validator import Validator

CandidateT = TypeVar("CandidateT")


def _extract_constraint(reason: FailureReason) -> tuple[bool, str]:
    # reasons without identifier sort before those with an empty one
    return reason.constraint is not None, reason.constraint or ""


class ValidationSummary(Generic[CandidateT]):
    """
    The function `validate_all` will return an instance of this class. This class provides properties for further
    analysis of the failure reasons reported for the candidates. Note that the values are calculated only if you use
    them - this saves some CPU time if you are only interested in e.g. the succeeding candidates.
    """

    def __init__(self, results: list[tuple[CandidateT, Optional[Invalid]]]):
        self._results = results

        self._succeeded: Optional[list[CandidateT]] = None
        self._failed: Optional[list[tuple[CandidateT, Invalid]]] = None
        self._reasons: Optional[list[FailureReason]] = None
        self._num_reasons_per_constraint: Optional[frozendict[Optional[str], int]] = None

    def _determine_succeeds(self):
        """Determines which candidates succeeded and keeps the invalid results of the failed ones"""
        self._succeeded = []
        self._failed = []
        for candidate, invalid in self._results:
            if invalid is None:
                self._succeeded.append(candidate)
            else:
                self._failed.append((candidate, invalid))

    @property
    def succeeded(self) -> list[CandidateT]:
        """List of candidates which got validated without any failure, in input order"""
        if self._succeeded is None:
            self._determine_succeeds()
            assert self._succeeded is not None
        return self._succeeded

    @property
    def failed(self) -> list[tuple[CandidateT, Invalid]]:
        """List of the invalid candidates together with their Invalid result, in input order"""
        if self._failed is None:
            self._determine_succeeds()
            assert self._failed is not None
        return self._failed

    @property
    def total(self) -> int:
        """Number of all validated candidates"""
        return len(self._results)

    @property
    def num_succeeds(self) -> int:
        """Number of positively validated candidates (equivalent to `len(self.succeeded)`)"""
        return len(self.succeeded)

    @property
    def num_fails(self) -> int:
        """Number of negatively validated candidates (equivalent to `len(self.failed)`)"""
        return len(self.failed)

    @property
    def all_reasons(self) -> list[FailureReason]:
        """
        This is a complete list of all failure reasons from all invalid candidates.
        It is sorted by the constraint identifier (reasons without one first, then an empty identifier) to enable
        grouping by it using itertools.
        """
        if self._reasons is None:
            self._reasons = sorted(
                itertools.chain.from_iterable(invalid.reasons for _, invalid in self.failed),
                key=_extract_constraint,
            )
        return self._reasons

    @property
    def num_reasons_total(self) -> int:
        """Number of failure reasons from all candidates in total"""
        return len(self.all_reasons)

    @property
    def num_reasons_per_constraint(self) -> frozendict[Optional[str], int]:
        """
        This maps the constraint identifier to the number of times it was violated (taking all candidates into
        account). Reasons without identifier are counted under None, separately from an empty identifier "".
        """
        if self._num_reasons_per_constraint is None:
            self._num_reasons_per_constraint = frozendict(
                (key[1] if key[0] else None, sum(1 for _ in values_iter))
                for key, values_iter in itertools.groupby(self.all_reasons, key=_extract_constraint)
            )
        return self._num_reasons_per_constraint


def validate_all(
    validator: Validator[Any], *candidates: CandidateT, log_summary: bool = False
) -> ValidationSummary[CandidateT]:
    """
    Validates each of the provided candidates with the validator. A failing candidate does not stop the others from
    being validated. The returned `ValidationSummary` supports several analytical methods - most importantly the
    property `succeeded` to retrieve the positively validated candidates.
    """
    results: list[tuple[CandidateT, Optional[Invalid]]] = []
    for candidate in candidates:
        result = validator.check_valid(candidate)
        results.append((candidate, result if isinstance(result, Invalid) else None))

    summary: ValidationSummary[CandidateT] = ValidationSummary(results)
    if log_summary:
        logger.get().info(
            "Validation Summary: %i succeeded, %i failed, %i reasons. %s",
            summary.num_succeeds,
            summary.num_fails,
            summary.num_reasons_total,
            str(dict(summary.num_reasons_per_constraint)),
        )
    return summary
