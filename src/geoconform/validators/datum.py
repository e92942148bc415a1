"""Validators for datums, ellipsoids and prime meridians."""

import math
from typing import Optional

from ..api import (
    Datum,
    Ellipsoid,
    EngineeringDatum,
    GeodeticDatum,
    ImageDatum,
    PixelInCell,
    PrimeMeridian,
    TemporalDatum,
    VerticalDatum,
)
from ..assertions import assert_between, assert_close, assert_equal, assert_instance_of, assert_true
from ..config import DEFAULT_TOLERANCE
from .referencing import ReferencingValidator


class DatumValidator(ReferencingValidator):
    """
    Validates datums and the ellipsoid and prime meridian of geodetic datums.

    Attributes:
        tolerance: relative tolerance of the consistency check between the
            inverse flattening and the semi-axis lengths.
    """

    category = "datum"

    def __init__(self, container, logger_name: Optional[str] = None):
        super().__init__(container, logger_name)
        self.tolerance = DEFAULT_TOLERANCE

    def dispatch(self, obj: Optional[Datum]) -> int:
        if obj is None:
            return 0
        n = 0
        if isinstance(obj, GeodeticDatum):
            self.validate_geodetic_datum(obj)
            n += 1
        if isinstance(obj, TemporalDatum):
            self.validate_temporal_datum(obj)
            n += 1
        if isinstance(obj, ImageDatum):
            self.validate_image_datum(obj)
            n += 1
        if isinstance(obj, (VerticalDatum, EngineeringDatum)):
            n += 1
        self.validate_datum(obj)
        return n

    def validate_datum(self, obj: Datum) -> None:
        self.validate_identified_object(obj)
        self.validate_text(obj.anchor_point)
        self.validate_text(obj.scope)
        self.container.dispatch(obj.domain_of_validity)

    def validate_geodetic_datum(self, obj: GeodeticDatum) -> None:
        ellipsoid = obj.ellipsoid
        self.mandatory("GeodeticDatum: shall have an ellipsoid.", ellipsoid)
        if ellipsoid is not None:
            assert_instance_of(Ellipsoid, ellipsoid, "GeodeticDatum: ellipsoid shall be an Ellipsoid.")
            self.container.dispatch(ellipsoid)
        prime_meridian = obj.prime_meridian
        self.mandatory("GeodeticDatum: shall have a prime meridian.", prime_meridian)
        if prime_meridian is not None:
            assert_instance_of(PrimeMeridian, prime_meridian,
                               "GeodeticDatum: prime meridian shall be a PrimeMeridian.")
            self.container.dispatch(prime_meridian)

    def validate_temporal_datum(self, obj: TemporalDatum) -> None:
        self.mandatory("TemporalDatum: shall have an origin.", obj.origin)

    def validate_image_datum(self, obj: ImageDatum) -> None:
        pixel_in_cell = obj.pixel_in_cell
        self.mandatory("ImageDatum: shall have a pixel in cell.", pixel_in_cell)
        if pixel_in_cell is not None:
            assert_instance_of(PixelInCell, pixel_in_cell, "ImageDatum: pixel in cell shall be a PixelInCell.")

    def validate_prime_meridian(self, obj: Optional[PrimeMeridian]) -> None:
        if obj is None:
            return
        self.validate_identified_object(obj)
        assert_between("PrimeMeridian: expected longitude in [-180 ... +180] range.",
                       -180, +180, obj.greenwich_longitude)
        self.mandatory("PrimeMeridian: shall have an angular unit.", obj.angular_unit)

    def validate_ellipsoid(self, obj: Optional[Ellipsoid]) -> None:
        """
        Checks the ellipsoid axis lengths and their consistency with the
        inverse flattening, which is infinite for a sphere.
        """
        if obj is None:
            return
        self.validate_identified_object(obj)
        semi_major = obj.semi_major_axis
        semi_minor = obj.semi_minor_axis
        inverse_flattening = obj.inverse_flattening
        assert_true(semi_major > 0, f"Ellipsoid: semi-major axis shall be greater than zero. Value is {semi_major}.")
        assert_true(semi_minor > 0, f"Ellipsoid: semi-minor axis shall be greater than zero. Value is {semi_minor}.")
        assert_true(semi_minor <= semi_major,
                    f"Ellipsoid: semi-minor axis ({semi_minor}) shall not be greater than "
                    f"the semi-major axis ({semi_major}).")
        assert_true(inverse_flattening > 0,
                    f"Ellipsoid: inverse flattening shall be greater than zero. Value is {inverse_flattening}.")
        if obj.is_sphere:
            assert_equal(semi_major, semi_minor, "Ellipsoid: a sphere shall have equal semi-axis lengths.")
            assert_true(math.isinf(inverse_flattening), "Ellipsoid: a sphere shall have an infinite inverse flattening.")
        expected = semi_major * (1 - 1 / inverse_flattening)
        assert_close(expected, semi_minor, semi_major * self.tolerance,
                     "Ellipsoid: semi-minor axis inconsistent with the inverse flattening.")
