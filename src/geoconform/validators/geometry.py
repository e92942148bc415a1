"""Validators for envelopes and direct positions."""

import math
from collections.abc import MutableSequence
from typing import Any, Optional

import numpy as np

from ..api import DirectPosition, Envelope, RangeMeaning, position_hash
from ..assertions import (
    assert_between,
    assert_close,
    assert_equal,
    assert_positive,
    assert_same,
    assert_true,
    assert_valid_range,
)
from ..config import DEFAULT_TOLERANCE
from ..errors import StructuralInconsistency
from .base import Validator

_NEGATIVE_ZERO_BITS = np.iinfo(np.int64).min


def is_positive_to_negative_zero(lower: float, upper: float) -> bool:
    """
    True for the [+0 ... -0] range, which stands for a full revolution on a
    wraparound axis.
    """
    return (
        int(np.float64(lower).view(np.int64)) == 0
        and int(np.float64(upper).view(np.int64)) == _NEGATIVE_ZERO_BITS
    )


def _is_mutable(coordinates: Any) -> bool:
    if isinstance(coordinates, np.ndarray):
        return bool(coordinates.flags.writeable)
    return isinstance(coordinates, MutableSequence)


def _check_dimension(expected: int, actual: int, message: str) -> None:
    if expected != actual:
        raise StructuralInconsistency(f"{message} Expected {expected} but got {actual}.", expected, actual)


class GeometryValidator(Validator):
    """
    Validates Envelope and DirectPosition.

    Attributes:
        tolerance: relative tolerance of the envelope cross-checks, multiplied
            by the span of each axis.
    """

    category = "geometry"

    def __init__(self, container, logger_name: Optional[str] = None):
        super().__init__(container, logger_name)
        self.tolerance = DEFAULT_TOLERANCE

    def validate_envelope(self, obj: Optional[Envelope]) -> None:
        if obj is None:
            return
        dimension = obj.dimension
        assert_positive("Envelope: dimension can not be negative.", dimension)
        crs = obj.coordinate_reference_system
        self.container.dispatch(crs)
        cs = None
        if crs is not None:
            cs = crs.coordinate_system
            if cs is not None:
                _check_dimension(dimension, cs.dimension,
                                 "Envelope: CRS dimension shall be equal to the envelope dimension.")

        lower_corner = obj.lower_corner
        upper_corner = obj.upper_corner
        self.mandatory("Envelope: shall have a lower corner.", lower_corner)
        self.mandatory("Envelope: shall have an upper corner.", upper_corner)
        self.validate_position(lower_corner)
        self.validate_position(upper_corner)
        lower_crs = upper_crs = None
        if lower_corner is not None:
            lower_crs = lower_corner.coordinate_reference_system
            _check_dimension(dimension, lower_corner.dimension,
                             "Envelope: lower corner dimension shall be equal to the envelope dimension.")
        if upper_corner is not None:
            upper_crs = upper_corner.coordinate_reference_system
            _check_dimension(dimension, upper_corner.dimension,
                             "Envelope: upper corner dimension shall be equal to the envelope dimension.")
        if crs is not None:
            if lower_crs is not None:
                assert_same(crs, lower_crs, "Envelope: lower CRS shall be the same than the envelope CRS.")
            if upper_crs is not None:
                assert_same(crs, upper_crs, "Envelope: upper CRS shall be the same than the envelope CRS.")
        elif lower_crs is not None and upper_crs is not None:
            assert_same(lower_crs, upper_crs, "Envelope: the two corners shall have the same CRS.")

        for i in range(dimension):
            meaning = None
            if cs is not None:
                axis = cs.get_axis(i)
                if axis is not None:        # null axes are reported by the cs validator
                    meaning = axis.range_meaning
            lower = lower_corner.get_ordinate(i) if lower_corner is not None else math.nan
            upper = upper_corner.get_ordinate(i) if upper_corner is not None else math.nan
            minimum = obj.get_minimum(i)
            maximum = obj.get_maximum(i)
            median = obj.get_median(i)
            span = obj.get_span(i)
            sentinel = is_positive_to_negative_zero(lower, upper)
            if not math.isnan(minimum) and not math.isnan(maximum):
                if lower <= upper and not sentinel:             # NaN excluded
                    eps = (upper - lower) * self.tolerance
                    assert_close(lower, minimum, eps,
                                 "Envelope: minimum value shall be equal to the lower corner coordinate.")
                    assert_close(upper, maximum, eps,
                                 "Envelope: maximum value shall be equal to the upper corner coordinate.")
                    assert_close(maximum - minimum, span, eps, "Envelope: unexpected span value.")
                    assert_close((maximum + minimum) / 2, median, eps, "Envelope: unexpected median value.")
                elif meaning is RangeMeaning.EXACT:
                    # assert_between tolerates NaN values.
                    assert_valid_range("Envelope: invalid minimum or maximum.", minimum, maximum)
                    assert_between("Envelope: invalid lower coordinate.", minimum, maximum, lower)
                    assert_between("Envelope: invalid upper coordinate.", minimum, maximum, upper)
                    assert_between("Envelope: invalid median coordinate.", minimum, maximum, median)
            if meaning is not None and (lower > upper or sentinel):
                assert_equal(RangeMeaning.WRAPAROUND, meaning,
                             "Envelope: lower coordinate value may be greater than upper coordinate value "
                             "only on axis having wraparound range.")

    def validate_position(self, obj: Optional[DirectPosition]) -> None:
        if obj is None:
            return
        dimension = obj.dimension
        assert_positive("DirectPosition: dimension can not be negative.", dimension)
        coordinates = obj.get_coordinate()
        self.mandatory("DirectPosition: coordinate array can not be None.", coordinates)
        if coordinates is None:
            return
        _check_dimension(dimension, len(coordinates),
                         "DirectPosition: coordinate array length shall be equal to the dimension.")
        for i in range(dimension):
            # No tolerance, exact match wanted.
            assert_equal(coordinates[i], obj.get_ordinate(i),
                         "DirectPosition: get_ordinate(i) shall be the same than coordinate[i].")

        crs = obj.coordinate_reference_system
        self.container.dispatch(crs)
        if crs is not None:
            cs = crs.coordinate_system
            if cs is not None:
                _check_dimension(dimension, cs.dimension,
                                 "DirectPosition: CRS dimension shall match the position dimension.")
                for i in range(dimension):
                    axis = cs.get_axis(i)
                    if axis is not None and axis.range_meaning is RangeMeaning.EXACT:
                        assert_between("DirectPosition: coordinate out of axis bounds.",
                                       axis.minimum_value, axis.maximum_value, coordinates[i])

        assert_equal(position_hash(crs, coordinates), hash(obj),
                     "DirectPosition: hash shall be compliant with the position_hash contract.")
        assert_true(obj == obj, "DirectPosition: shall be equal to itself.")

        if _is_mutable(coordinates):
            for i in range(dimension):
                old_value = coordinates[i]
                coordinates[i] *= 2
                assert_equal(old_value, obj.get_ordinate(i), "DirectPosition: coordinate array shall be cloned.")
