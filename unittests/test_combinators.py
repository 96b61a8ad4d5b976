import pytest

from treeval import (
    VALID,
    AllValid,
    AnyValid,
    CustomConstraint,
    FailureReason,
    GreaterThan,
    Invalid,
    InvalidDefinitionError,
    LessThan,
    NotBlank,
    NotNullAndValid,
    NotValid,
    NullOrValid,
    OnlyOneValid,
    Predicate,
    Validator,
)

always_valid = Predicate(lambda _: True, "never fails", "always")
always_invalid = Predicate(lambda _: False, "always fails", "never")
other_invalid = Predicate(lambda _: False, "fails as well", "never_again")

ALWAYS_INVALID_REASON = FailureReason("always fails", "never")
OTHER_INVALID_REASON = FailureReason("fails as well", "never_again")


class TestCombinators:
    @pytest.mark.parametrize("candidate", [None, 0, "", "hello", [1, 2]])
    def test_empty_children(self, candidate):
        assert AllValid([]).check_valid(candidate) == VALID
        assert not AnyValid([]).check_valid(candidate).is_valid
        assert not OnlyOneValid([]).check_valid(candidate).is_valid

    def test_empty_children_reasons(self):
        assert AnyValid([]).check_valid(1).reasons[0].constraint == "any_valid"
        assert OnlyOneValid([]).check_valid(1).reasons[0].constraint == "only_one_valid"

    @pytest.mark.parametrize(
        ["validators", "expected"],
        [
            pytest.param([always_valid], VALID, id="one valid"),
            pytest.param([always_valid, always_valid], VALID, id="two valid"),
            pytest.param([always_valid, always_invalid], Invalid([ALWAYS_INVALID_REASON]), id="one invalid"),
            pytest.param(
                [always_invalid, always_valid, other_invalid],
                Invalid([ALWAYS_INVALID_REASON, OTHER_INVALID_REASON]),
                id="reasons in child order",
            ),
        ],
    )
    def test_all_valid(self, validators: list[Validator], expected):
        assert AllValid(validators).check_valid("candidate") == expected

    @pytest.mark.parametrize(
        ["validators", "expected"],
        [
            pytest.param([always_valid], VALID, id="one valid"),
            pytest.param([always_invalid, always_valid], VALID, id="one of two valid"),
            pytest.param(
                [always_invalid, other_invalid],
                Invalid([ALWAYS_INVALID_REASON, OTHER_INVALID_REASON]),
                id="union of all reasons",
            ),
        ],
    )
    def test_any_valid(self, validators: list[Validator], expected):
        assert AnyValid(validators).check_valid("candidate") == expected

    @pytest.mark.parametrize(
        ["first", "second", "expected_valid"],
        [
            pytest.param(always_valid, always_invalid, True, id="first valid"),
            pytest.param(always_invalid, always_valid, True, id="second valid"),
            pytest.param(always_valid, always_valid, False, id="both valid"),
            pytest.param(always_invalid, other_invalid, False, id="none valid"),
        ],
    )
    def test_only_one_valid_two_children(self, first: Validator, second: Validator, expected_valid: bool):
        assert OnlyOneValid([first, second]).check_valid(42).is_valid is expected_valid

    def test_only_one_valid_multiple_valid_reason(self):
        result = OnlyOneValid([always_valid, always_invalid, always_valid]).check_valid(42)
        assert result == Invalid(
            [
                FailureReason(
                    "must satisfy exactly one constraint, but constraints [0, 2] were satisfied", "only_one_valid"
                )
            ]
        )

    def test_only_one_valid_none_valid_reasons(self):
        result = OnlyOneValid([always_invalid, other_invalid]).check_valid(42)
        assert result == Invalid([ALWAYS_INVALID_REASON, OTHER_INVALID_REASON])

    @pytest.mark.parametrize(
        ["validator", "candidate"],
        [
            pytest.param(always_valid, 1, id="valid child"),
            pytest.param(always_invalid, 1, id="invalid child"),
            pytest.param(GreaterThan(3), 5, id="greater than, valid"),
            pytest.param(GreaterThan(3), 2, id="greater than, invalid"),
        ],
    )
    def test_not_valid_inverts(self, validator: Validator, candidate):
        assert NotValid(validator).check_valid(candidate).is_valid is not validator.check_valid(candidate).is_valid

    def test_not_valid_reason(self):
        result = NotValid(always_valid, message="must not be anything").check_valid(1)
        assert result == Invalid([FailureReason("must not be anything", "not_valid")])

    def test_not_null_and_valid(self):
        validator = NotNullAndValid(NotBlank())
        assert validator.check_valid(None) == Invalid([FailureReason("must not be null", "not_null")])
        assert validator.check_valid("hello") == VALID
        assert validator.check_valid(" ").reasons[0].constraint == "not_blank"

    def test_null_or_valid(self):
        validator = NullOrValid(NotBlank())
        assert validator.check_valid(None) == VALID
        assert validator.check_valid("hello") == VALID
        assert validator.check_valid("").reasons[0].constraint == "not_blank"

    def test_custom_constraint(self):
        result = CustomConstraint(NotBlank(), "must not be blank").check_valid("")
        assert len(result.reasons) == 1
        assert result.reasons[0].constraint == "must not be blank"
        assert result.reasons[0].message == "must not be blank, but was ''"

    def test_custom_constraint_overwrites_all_reasons(self):
        validator = CustomConstraint(AllValid([GreaterThan(10), LessThan(0)]), "out_of_range", message="bad number")
        result = validator.check_valid(5)
        assert result == Invalid(
            [FailureReason("bad number", "out_of_range"), FailureReason("bad number", "out_of_range")]
        )
        assert validator.check_valid(11) == Invalid([FailureReason("bad number", "out_of_range")])

    def test_custom_constraint_valid(self):
        assert CustomConstraint(NotBlank(), "my_constraint").check_valid("x") == VALID

    def test_idempotence(self):
        validator = AllValid([AnyValid([always_invalid, other_invalid]), NotValid(always_valid)])
        assert validator.check_valid("x") == validator.check_valid("x")
        assert validator("x") == validator.check_valid("x")

    @pytest.mark.parametrize(
        ["factory", "argument"],
        [
            pytest.param(AllValid, [always_valid, "no validator"], id="AllValid with a string"),
            pytest.param(AnyValid, always_valid, id="AnyValid with a single validator"),
            pytest.param(NotValid, [always_valid], id="NotValid with a list"),
            pytest.param(NotNullAndValid, None, id="NotNullAndValid with None"),
            pytest.param(NullOrValid, lambda x: True, id="NullOrValid with a function"),
        ],
    )
    def test_illegal_definitions(self, factory, argument):
        with pytest.raises(InvalidDefinitionError):
            factory(argument)

    def test_custom_constraint_illegal_constraint(self):
        with pytest.raises(InvalidDefinitionError) as error:
            CustomConstraint(NotBlank(), 42)  # type:ignore[arg-type]
        assert str(error.value) == "The constraint must be a string, got int"

    @pytest.mark.parametrize(
        "factory",
        [
            pytest.param(lambda: NotValid(always_valid, always_invalid), id="NotValid with two validators"),
            pytest.param(lambda: NotValid(), id="NotValid without validator"),
            pytest.param(lambda: NotNullAndValid(always_valid, always_invalid), id="NotNullAndValid with two"),
            pytest.param(lambda: NotNullAndValid(), id="NotNullAndValid without validator"),
            pytest.param(lambda: NullOrValid(always_valid, always_invalid), id="NullOrValid with two validators"),
            pytest.param(lambda: NullOrValid(), id="NullOrValid without validator"),
            pytest.param(lambda: NotValid(always_valid, message=42), id="NotValid with int message"),
            pytest.param(lambda: CustomConstraint(always_valid, "c", message=42), id="CustomConstraint int message"),
        ],
    )
    def test_illegal_arity_and_messages(self, factory):
        with pytest.raises(InvalidDefinitionError):
            factory()

    def test_not_valid_with_two_validators_names_the_count(self):
        with pytest.raises(InvalidDefinitionError) as error:
            NotValid(always_valid, always_invalid)
        assert str(error.value) == "NotValid expects exactly one validator but got 2"
