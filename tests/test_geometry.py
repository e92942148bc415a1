import math

import numpy as np
import pytest
from hypothesis import given, strategies as st

from geoconform.api import DirectPosition, RangeMeaning, position_hash
from geoconform.conformance import validate
from geoconform.errors import ConformanceFailure, StructuralInconsistency
from geoconform.simple import SimpleDirectPosition, SimpleEnvelope, geographic_crs
from geoconform.validators.container import ValidatorContainer
from geoconform.validators.geometry import is_positive_to_negative_zero


class LeakyPosition(DirectPosition):
    """Returns its internal list instead of a copy."""

    def __init__(self, coordinates):
        self.coordinates = list(coordinates)

    @property
    def dimension(self):
        return len(self.coordinates)

    def get_coordinate(self):
        return self.coordinates

    def get_ordinate(self, dimension):
        return self.coordinates[dimension]

    def __hash__(self):
        return position_hash(None, self.coordinates)


class BadHashPosition(SimpleDirectPosition):
    def __hash__(self):
        return 42


class SkewedEnvelope(SimpleEnvelope):
    """Reports one of its derived values shifted away from what the corners give."""

    def __init__(self, lower, upper, accessor, offset=5.0):
        super().__init__(lower, upper)
        self.accessor = accessor
        self.offset = offset

    def _shift(self, name, value):
        return value + self.offset if name == self.accessor else value

    def get_minimum(self, dimension):
        return self._shift("minimum", super().get_minimum(dimension))

    def get_maximum(self, dimension):
        return self._shift("maximum", super().get_maximum(dimension))

    def get_span(self, dimension):
        return self._shift("span", super().get_span(dimension))

    def get_median(self, dimension):
        return self._shift("median", super().get_median(dimension))


class TestDirectPosition:
    def test_hash_contract(self):
        """Without CRS, the hash is the hash of the coordinate tuple."""
        position = SimpleDirectPosition([1.0, 2.0])
        assert hash(position) == hash((1.0, 2.0))
        assert hash(position) == position_hash(None, np.array([1.0, 2.0]))

    def test_defensive_copy(self):
        """Mutating the returned array leaves later reads unchanged."""
        position = SimpleDirectPosition([1.0, 2.0])
        coordinates = position.get_coordinate()
        coordinates[0] = 99.0
        assert position.get_ordinate(0) == 1.0

    def test_valid_position(self, container):
        report = validate(SimpleDirectPosition([1.0, 2.0]), container)
        assert report.passed, report.failure_messages()

    def test_leaky_position_fails(self, container):
        report = validate(LeakyPosition([1.0, 2.0]), container)
        assert len(report.failures) == 1
        assert report.failures[0].message.startswith("DirectPosition: coordinate array shall be cloned.")

    def test_hash_contract_with_crs(self, container):
        crs = geographic_crs()
        position = SimpleDirectPosition([1.0, 2.0], crs)
        assert hash(position) == position_hash(crs, [1.0, 2.0])
        assert hash(position) != hash(SimpleDirectPosition([1.0, 2.0]))
        assert validate(position, container).passed

    def test_bad_hash_fails(self, container):
        with pytest.raises(ConformanceFailure, match="position_hash contract"):
            container.geometry.validate_position(BadHashPosition([1.0, 2.0]))

    def test_coordinate_outside_exact_axis(self, container):
        """Latitude 95 lies outside the [-90 ... 90] exact axis range."""
        position = SimpleDirectPosition([10.0, 95.0], geographic_crs())
        report = validate(position, container)
        assert any("out of axis bounds" in message for message in report.failure_messages())

    def test_longitude_outside_wraparound_axis_is_accepted(self, container):
        position = SimpleDirectPosition([200.0, 45.0], geographic_crs())
        assert validate(position, container).passed

    @given(st.lists(st.floats(min_value=-1e9, max_value=1e9), min_size=1, max_size=4))
    def test_any_simple_position_is_valid(self, coordinates):
        """For any finite coordinates without CRS, the simple position passes."""
        assert validate(SimpleDirectPosition(coordinates), ValidatorContainer.default()).passed


class TestEnvelope:
    def test_antimeridian_envelope_passes(self, container):
        """lower > upper on a wraparound longitude axis uses the wraparound branch."""
        envelope = SimpleEnvelope((170.0, -10.0), (-170.0, 10.0), geographic_crs())
        report = validate(envelope, container)
        assert report.passed, report.failure_messages()

    def test_antimeridian_envelope_on_exact_axis_fails(self, container):
        envelope = SimpleEnvelope((170.0, -10.0), (-170.0, 10.0), geographic_crs(RangeMeaning.EXACT))
        report = validate(envelope, container)
        assert not report.passed
        assert all(failure.category == "geometry" for failure in report.failures)

    def test_normal_envelope(self, container):
        envelope = SimpleEnvelope((-10.0, -20.0), (30.0, 40.0), geographic_crs())
        assert validate(envelope, container).passed

    def test_envelope_without_crs(self, container):
        assert validate(SimpleEnvelope((0.0, 0.0, 0.0), (1.0, 2.0, 3.0)), container).passed

    @pytest.mark.parametrize("accessor, message", [
        ("minimum", "Envelope: minimum value shall be equal to the lower corner coordinate."),
        ("maximum", "Envelope: maximum value shall be equal to the upper corner coordinate."),
        ("span", "Envelope: unexpected span value."),
        ("median", "Envelope: unexpected median value."),
    ])
    def test_inconsistent_derived_value_fails(self, container, accessor, message):
        envelope = SkewedEnvelope((0.0, 0.0), (10.0, 20.0), accessor)
        report = validate(envelope, container)
        assert len(report.failures) == 1
        assert report.failures[0].message.startswith(message)

    def test_derived_values_within_tolerance_pass(self, container):
        envelope = SkewedEnvelope((0.0, 0.0), (10.0, 20.0), "median", offset=1e-9)
        assert validate(envelope, container).passed

    def test_full_revolution_sentinel(self, container):
        """[+0 ... -0] is legal on a wraparound axis only."""
        envelope = SimpleEnvelope((0.0, -10.0), (-0.0, 10.0), geographic_crs())
        assert validate(envelope, container).passed
        envelope = SimpleEnvelope((0.0, -10.0), (-0.0, 10.0), geographic_crs(RangeMeaning.EXACT))
        report = validate(envelope, container)
        assert any("wraparound" in message for message in report.failure_messages())

    def test_dimension_mismatch_is_structural(self, container):
        envelope = SimpleEnvelope((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), geographic_crs())
        report = validate(envelope, container)
        assert len(report.failures) == 1
        assert isinstance(report.failures[0], StructuralInconsistency)

    def test_corners_with_other_crs_fail(self, container):
        crs = geographic_crs()
        envelope = SimpleEnvelope((1.0, 2.0), (3.0, 4.0), crs)
        envelope.lower_corner = SimpleDirectPosition((1.0, 2.0), geographic_crs())
        with pytest.raises(ConformanceFailure, match="same than the envelope CRS"):
            container.geometry.validate_envelope(envelope)

    def test_negative_zero_sentinel_detection(self):
        assert is_positive_to_negative_zero(0.0, -0.0)
        assert not is_positive_to_negative_zero(-0.0, 0.0)
        assert not is_positive_to_negative_zero(0.0, 0.0)
        assert not is_positive_to_negative_zero(math.nan, -0.0)
