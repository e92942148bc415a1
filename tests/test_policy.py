import math

import pytest
from hypothesis import given, strategies as st

from geoconform.errors import ConformanceFailure
from geoconform.report import ValidationReport, open_walk
from geoconform.validators.base import Validator, is_empty_collection
from geoconform.validators.container import ValidatorContainer


class NotReflexive:
    """Never equal to anything, not even itself."""

    def __eq__(self, other):
        return False

    def __hash__(self):
        return 1


class EqualToEverything:
    """Claims equality with any object, including None."""

    def __eq__(self, other):
        return True

    def __hash__(self):
        return 2


class Value:
    """Equal when the keys are equal, but the hash also depends on the label."""

    def __init__(self, key, label=""):
        self.key = key
        self.label = label

    def __eq__(self, other):
        return isinstance(other, Value) and self.key == other.key

    def __hash__(self):
        return hash((self.key, self.label))


class OneWay:
    """Equal to a Value with the same key, while Value does not return the favour."""

    def __init__(self, key):
        self.key = key

    def __eq__(self, other):
        return getattr(other, "key", None) == self.key

    def __hash__(self):
        return hash((self.key, ""))


class Unhashable:
    __hash__ = None


class ChangingHash:
    def __init__(self):
        self.calls = 0

    def __hash__(self):
        self.calls += 1
        return self.calls


@pytest.fixture
def validator(container):
    return Validator(container)


class TestEquivalenceLaw:
    @given(st.lists(st.one_of(st.integers(), st.floats(allow_nan=True), st.text(max_size=5), st.none(),
                              st.tuples(st.integers(), st.booleans()))))
    def test_well_behaved_collections_pass(self, values):
        """For any collection of built-in values the equality contract holds."""
        Validator(ValidatorContainer.default()).validate_collection(values)

    def test_none_collection_is_ignored(self, validator):
        validator.validate_collection(None)

    def test_not_reflexive_fails(self, validator):
        with pytest.raises(ConformanceFailure, match="reflexive"):
            validator.validate_collection([1, NotReflexive(), 2])

    def test_equal_to_none_fails(self, validator):
        with pytest.raises(ConformanceFailure, match=r"equals\(None\) shall be false"):
            validator.validate_collection([EqualToEverything()])

    def test_inconsistent_hash_fails(self, validator):
        with pytest.raises(ConformanceFailure, match="Inconsistent hash codes"):
            validator.validate_collection([Value(1, "a"), Value(1, "b")])

    def test_asymmetric_equality_fails(self, validator):
        """The reflected operand is not consulted, so asymmetry shows up."""
        class Strict(Value):
            def __eq__(self, other):
                return type(other) is Strict and self.key == other.key

            __hash__ = Value.__hash__

        with pytest.raises(ConformanceFailure, match="symmetric and transitive"):
            validator.validate_collection([Strict(1), OneWay(1)])

    def test_unhashable_element_fails(self, validator):
        with pytest.raises(ConformanceFailure, match="not hashable"):
            validator.validate_collection([Unhashable()])

    def test_changing_hash_fails(self, validator):
        with pytest.raises(ConformanceFailure):
            validator.validate_collection([ChangingHash()])

    def test_nan_is_reflexive(self, validator):
        """A NaN element equals itself, as a measured value may legitimately be NaN."""
        nan = math.nan
        validator.validate_collection([1.5, nan, float("nan")])
        validator.validate_collection([nan, nan])


class TestMandatoryForbidden:
    def test_empty_collection_detection(self):
        assert is_empty_collection([])
        assert is_empty_collection(())
        assert not is_empty_collection("")
        assert not is_empty_collection([None])
        assert not is_empty_collection(None)

    def test_strict_mandatory(self, validator):
        validator.mandatory("present", "x")
        with pytest.raises(ConformanceFailure, match="missing"):
            validator.mandatory("missing", None)
        with pytest.raises(ConformanceFailure, match="empty"):
            validator.mandatory("empty", [])

    def test_lenient_mandatory_records_warning(self, validator):
        """A relaxed policy turns the failure into a warning of the active report."""
        validator.require_mandatory = False
        report = ValidationReport()
        with open_walk(report, max_depth=8, fail_fast=False):
            validator.mandatory("Thing: shall have a name.", None)
        assert report.passed
        assert report.warnings_by_category() == {"base": ["Thing: shall have a name."]}
        assert report.warnings[0].obligation == "mandatory"

    def test_strict_forbidden(self, validator):
        validator.forbidden("absent", None)
        validator.forbidden("empty", ())
        with pytest.raises(ConformanceFailure):
            validator.forbidden("present", 3)
        with pytest.raises(ConformanceFailure):
            validator.forbidden("non-empty", [1])

    def test_lenient_forbidden_without_walk(self, validator):
        """Outside of a validation call a downgrade is only logged."""
        validator.enforce_forbidden = False
        validator.forbidden("present", 3)

    def test_conditional(self, validator):
        validator.conditional("required", 1, True)
        validator.conditional("forbidden", None, False)
        with pytest.raises(ConformanceFailure):
            validator.conditional("required", None, True)
        with pytest.raises(ConformanceFailure):
            validator.conditional("forbidden", 1, False)

    def test_container_is_required(self):
        with pytest.raises(ValueError):
            Validator(None)
