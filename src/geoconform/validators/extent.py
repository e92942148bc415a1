"""Validators for extents: geographic, vertical and temporal."""

from typing import Optional

from ..api import (
    BoundingPolygon,
    Extent,
    GeographicBoundingBox,
    GeographicDescription,
    GeographicExtent,
    SpatialTemporalExtent,
    TemporalExtent,
    VerticalExtent,
)
from ..assertions import assert_between, assert_false, assert_true
from .metadata import MetadataValidator


class ExtentValidator(MetadataValidator):
    """Validates Extent and its geographic, vertical and temporal elements."""

    category = "extent"

    def dispatch(self, obj: Optional[GeographicExtent]) -> int:
        """Invokes the validate method of every geographic extent kind obj is an instance of."""
        n = 0
        if obj is not None:
            if isinstance(obj, GeographicDescription):
                self.validate_geographic_description(obj)
                n += 1
            if isinstance(obj, GeographicBoundingBox):
                self.validate_bounding_box(obj)
                n += 1
            if isinstance(obj, BoundingPolygon):
                self.validate_bounding_polygon(obj)
                n += 1
        return n

    def validate_geographic_description(self, obj: Optional[GeographicDescription]) -> None:
        if obj is None:
            return
        identifier = obj.geographic_identifier
        self.mandatory("GeographicDescription: shall have an identifier.", identifier)
        self.container.dispatch(identifier)

    def validate_bounding_polygon(self, obj: Optional[BoundingPolygon]) -> None:
        if obj is None:
            return
        for polygon in self.elements(object, obj.polygons):
            self.container.dispatch(polygon)

    def validate_bounding_box(self, obj: Optional[GeographicBoundingBox]) -> None:
        """
        Checks the bounds of a geographic bounding box, in decimal degrees.

        west > east is not checked: ISO 19115 does not require west <= east,
        and boxes spanning the anti-meridian use it.
        """
        if obj is None:
            return
        west = obj.west_bound_longitude
        east = obj.east_bound_longitude
        south = obj.south_bound_latitude
        north = obj.north_bound_latitude
        assert_between("GeographicBoundingBox: illegal west bound.", -180, +180, west)
        assert_between("GeographicBoundingBox: illegal east bound.", -180, +180, east)
        assert_between("GeographicBoundingBox: illegal south bound.", -90, +90, south)
        assert_between("GeographicBoundingBox: illegal north bound.", -90, +90, north)
        assert_false(south > north, "GeographicBoundingBox: invalid range of latitudes.")     # accept NaN

    def validate_vertical_extent(self, obj: Optional[VerticalExtent]) -> None:
        if obj is None:
            return
        minimum = obj.minimum_value
        maximum = obj.maximum_value
        self.mandatory("VerticalExtent: shall have a minimum value.", minimum)
        self.mandatory("VerticalExtent: shall have a maximum value.", maximum)
        if minimum is not None and maximum is not None:
            assert_true(minimum <= maximum, "VerticalExtent: invalid range.")
        self.container.dispatch(obj.vertical_crs)

    def validate_temporal_extent(self, obj: Optional[TemporalExtent]) -> None:
        if obj is None:
            return
        begin, end = obj.begin, obj.end
        if begin is not None and end is not None:
            assert_false(end < begin, f"TemporalExtent: end ({end}) shall not precede begin ({begin}).")
        if isinstance(obj, SpatialTemporalExtent):
            for element in self.elements(GeographicExtent, obj.spatial_extent):
                self.dispatch(element)

    def validate_extent(self, obj: Optional[Extent]) -> None:
        if obj is None:
            return
        self.validate_optional(obj.description)
        for element in self.elements(GeographicExtent, obj.geographic_elements):
            self.dispatch(element)
        for element in self.elements(VerticalExtent, obj.vertical_elements):
            self.validate_vertical_extent(element)
        for element in self.elements(TemporalExtent, obj.temporal_elements):
            self.validate_temporal_extent(element)
