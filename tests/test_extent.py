import math
from datetime import datetime

import pytest
from hypothesis import given, strategies as st

from geoconform.conformance import validate
from geoconform.errors import ConformanceFailure
from geoconform.simple import vertical_crs
from geoconform.simple.extent import (
    SimpleBoundingPolygon,
    SimpleExtent,
    SimpleGeographicBoundingBox,
    SimpleGeographicDescription,
    SimpleSpatialTemporalExtent,
    SimpleTemporalExtent,
    SimpleVerticalExtent,
)
from geoconform.simple.geometry import SimpleDirectPosition
from geoconform.simple.metadata import identifier
from geoconform.validators.container import ValidatorContainer


class TestGeographicBoundingBox:
    def test_illegal_west_bound(self, container):
        report = validate(SimpleGeographicBoundingBox(-200, 10, -10, 10), container)
        assert len(report.failures) == 1
        assert report.failures[0].message.startswith("GeographicBoundingBox: illegal west bound.")
        assert report.failures[0].category == "extent"

    def test_inverted_latitudes(self, container):
        report = validate(SimpleGeographicBoundingBox(-10, 10, 10, -10), container)
        assert report.failure_messages() == ["GeographicBoundingBox: invalid range of latitudes."]

    def test_nan_bound_is_accepted(self, container):
        assert validate(SimpleGeographicBoundingBox(-10, 10, math.nan, 10), container).passed

    def test_antimeridian_box(self, container):
        """west > east is legal for boxes spanning the anti-meridian."""
        assert validate(SimpleGeographicBoundingBox(170, -170, -10, 10), container).passed

    @given(st.floats(-180, 180), st.floats(-180, 180), st.floats(-90, 90), st.floats(-90, 90))
    def test_valid_bounds(self, west, east, south, north):
        south, north = min(south, north), max(south, north)
        box = SimpleGeographicBoundingBox(west, east, south, north)
        assert validate(box, ValidatorContainer.default()).passed


class TestOtherExtents:
    def test_geographic_description(self, container):
        description = SimpleGeographicDescription(identifier("FRA", "ISO 3166"))
        report = validate(description, container)
        assert report.passed
        assert report.visited_count == 3

    def test_description_without_identifier(self, container):
        with pytest.raises(ConformanceFailure, match="shall have an identifier"):
            container.extent.validate_geographic_description(SimpleGeographicDescription(None))

    def test_bounding_polygon(self, container):
        polygon = SimpleBoundingPolygon((SimpleDirectPosition((1.0, 2.0)),))
        assert validate(polygon, container).passed

    def test_vertical_extent(self, container):
        assert validate(SimpleVerticalExtent(-100.0, 8000.0, vertical_crs()), container).passed

    def test_inverted_vertical_extent(self, container):
        report = validate(SimpleVerticalExtent(100.0, -100.0), container)
        assert report.failure_messages() == ["VerticalExtent: invalid range."]

    def test_missing_vertical_bound(self, container):
        report = validate(SimpleVerticalExtent(None, 10.0), container)
        assert report.failure_messages() == ["VerticalExtent: shall have a minimum value."]

    def test_temporal_extent(self, container):
        extent = SimpleTemporalExtent(datetime(2020, 1, 1), datetime(2021, 1, 1))
        assert validate(extent, container).passed
        extent = SimpleTemporalExtent(datetime(2021, 1, 1), datetime(2020, 1, 1))
        assert not validate(extent, container).passed

    def test_spatial_temporal_extent(self, container):
        extent = SimpleSpatialTemporalExtent(spatial_extent=(SimpleGeographicBoundingBox(0, 10, 100, 10),))
        report = validate(extent, container)
        assert report.failures[0].message.startswith("GeographicBoundingBox: illegal south bound.")

    def test_extent(self, container):
        extent = SimpleExtent(
            description="Europe",
            geographic_elements=(SimpleGeographicBoundingBox(-10, 40, 35, 70),),
            vertical_elements=(SimpleVerticalExtent(0.0, 100.0),),
            temporal_elements=(SimpleTemporalExtent(datetime(2020, 1, 1)),),
        )
        assert validate(extent, container).passed

    def test_extent_elements_shall_have_the_right_kind(self, container):
        extent = SimpleExtent(vertical_elements=(SimpleGeographicBoundingBox(0, 1, 0, 1),))
        report = validate(extent, container)
        assert report.failures[0].message.startswith("Collection element shall be an instance of VerticalExtent.")
