"""Validators for coordinate systems and their axes."""

from typing import Dict, Optional, Tuple

from ..api import (
    AxisDirection,
    CartesianCS,
    CoordinateSystem,
    CoordinateSystemAxis,
    CylindricalCS,
    EllipsoidalCS,
    LinearCS,
    PolarCS,
    RangeMeaning,
    SphericalCS,
    TimeCS,
    UserDefinedCS,
    VerticalCS,
)
from ..assertions import (
    assert_contains,
    assert_instance_of,
    assert_not_none,
    assert_strictly_positive,
    assert_valid_range,
    fail,
)
from ..errors import StructuralInconsistency
from .referencing import ReferencingValidator

# Axis names defined by ISO 19111, in lower case.
STANDARD_AXIS_NAMES = frozenset((
    "geodetic latitude",
    "geodetic longitude",
    "ellipsoidal height",
    "gravity-related height",
    "depth",
    "geocentric x",
    "geocentric y",
    "geocentric z",
    "geocentric latitude",
    "geocentric longitude",
    "geocentric radius",
    "spherical latitude",
    "spherical longitude",
    "easting",
    "northing",
    "westing",
    "southing",
    "time",
    "distance",
    "bearing",
))

# (minimum, maximum) number of axes of each coordinate system kind.
_DIMENSIONS: Tuple[Tuple[type, Tuple[int, int]], ...] = (
    (EllipsoidalCS, (2, 3)),
    (CartesianCS, (1, 3)),
    (SphericalCS, (3, 3)),
    (CylindricalCS, (3, 3)),
    (PolarCS, (2, 2)),
    (LinearCS, (1, 1)),
    (VerticalCS, (1, 1)),
    (TimeCS, (1, 1)),
    (UserDefinedCS, (2, 3)),
)


class CSValidator(ReferencingValidator):
    """
    Validates coordinate systems and axes.

    Attributes:
        enforce_standard_names: when True, axis names shall be one of the names
            defined by ISO 19111.
    """

    category = "cs"

    def __init__(self, container, logger_name: Optional[str] = None):
        super().__init__(container, logger_name)
        self.enforce_standard_names = False

    def dispatch(self, obj: Optional[CoordinateSystem]) -> int:
        """Validates obj as every coordinate system kind it belongs to."""
        if obj is None:
            return 0
        n = 0
        for kind, (minimum, maximum) in _DIMENSIONS:
            if isinstance(obj, kind):
                self._validate_dimension(obj, kind.__name__, minimum, maximum)
                n += 1
        self.validate_coordinate_system(obj)
        return n

    def _validate_dimension(self, obj: CoordinateSystem, kind: str, minimum: int, maximum: int) -> None:
        dimension = obj.dimension
        if not minimum <= dimension <= maximum:
            expected = str(minimum) if minimum == maximum else f"{minimum} to {maximum}"
            raise StructuralInconsistency(f"{kind}: expected {expected} dimensions but got {dimension}.",
                                          dimension)

    def validate_coordinate_system(self, obj: Optional[CoordinateSystem]) -> None:
        """Checks common to all coordinate systems: axes present and not colinear."""
        if obj is None:
            return
        self.validate_identified_object(obj)
        dimension = obj.dimension
        assert_strictly_positive("CoordinateSystem: dimension shall be greater than zero.", dimension)
        directions: Dict[AxisDirection, int] = {}
        for i in range(dimension):
            axis = obj.get_axis(i)
            assert_not_none(axis, f"CoordinateSystem: axis {i} can not be None.")
            self.container.dispatch(axis)
            direction = axis.direction
            if direction is None or direction is AxisDirection.OTHER:
                continue
            absolute = direction.absolute()
            if absolute in directions:
                raise StructuralInconsistency(
                    f"CoordinateSystem: axes {directions[absolute]} and {i} are colinear "
                    f"({absolute.value}).", obj.get_axis(directions[absolute]), axis)
            directions[absolute] = i

    def validate_axis(self, obj: Optional[CoordinateSystemAxis]) -> None:
        if obj is None:
            return
        self.validate_identified_object(obj)
        self.mandatory("CoordinateSystemAxis: abbreviation is mandatory.", obj.abbreviation)
        self.mandatory("CoordinateSystemAxis: direction is mandatory.", obj.direction)
        if obj.direction is not None:
            assert_instance_of(AxisDirection, obj.direction,
                               "CoordinateSystemAxis: direction shall be an AxisDirection.")
        self.mandatory("CoordinateSystemAxis: unit is mandatory.", obj.unit)
        assert_valid_range("CoordinateSystemAxis: minimum shall be less than or equal to maximum.",
                           obj.minimum_value, obj.maximum_value)
        self.mandatory("CoordinateSystemAxis: range meaning is mandatory.", obj.range_meaning)
        if obj.range_meaning is not None:
            assert_instance_of(RangeMeaning, obj.range_meaning,
                               "CoordinateSystemAxis: range meaning shall be a RangeMeaning.")
        if self.enforce_standard_names and obj.name is not None:
            code = obj.name.code
            if code is None:
                fail("CoordinateSystemAxis: name shall have a code.")
            assert_contains("CoordinateSystemAxis: name is not an ISO 19111 axis name.",
                            STANDARD_AXIS_NAMES, code.lower())
