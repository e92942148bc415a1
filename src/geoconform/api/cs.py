"""Coordinate system and axis interfaces."""

from __future__ import annotations

import math
from abc import abstractmethod
from enum import Enum
from typing import Optional

from .referencing import IdentifiedObject


class RangeMeaning(Enum):
    """How coordinates outside the axis [minimum ... maximum] range are interpreted."""
    EXACT = "exact"
    WRAPAROUND = "wraparound"


class AxisDirection(Enum):
    OTHER = "other"
    NORTH = "north"
    NORTH_NORTH_EAST = "northNorthEast"
    NORTH_EAST = "northEast"
    EAST_NORTH_EAST = "eastNorthEast"
    EAST = "east"
    EAST_SOUTH_EAST = "eastSouthEast"
    SOUTH_EAST = "southEast"
    SOUTH_SOUTH_EAST = "southSouthEast"
    SOUTH = "south"
    SOUTH_SOUTH_WEST = "southSouthWest"
    SOUTH_WEST = "southWest"
    WEST_SOUTH_WEST = "westSouthWest"
    WEST = "west"
    WEST_NORTH_WEST = "westNorthWest"
    NORTH_WEST = "northWest"
    NORTH_NORTH_WEST = "northNorthWest"
    UP = "up"
    DOWN = "down"
    GEOCENTRIC_X = "geocentricX"
    GEOCENTRIC_Y = "geocentricY"
    GEOCENTRIC_Z = "geocentricZ"
    FUTURE = "future"
    PAST = "past"
    COLUMN_POSITIVE = "columnPositive"
    COLUMN_NEGATIVE = "columnNegative"
    ROW_POSITIVE = "rowPositive"
    ROW_NEGATIVE = "rowNegative"
    DISPLAY_RIGHT = "displayRight"
    DISPLAY_LEFT = "displayLeft"
    DISPLAY_UP = "displayUp"
    DISPLAY_DOWN = "displayDown"

    def opposite(self) -> Optional["AxisDirection"]:
        return _OPPOSITES.get(self)

    def absolute(self) -> "AxisDirection":
        """Returns the first direction of the pair made of this direction and its opposite."""
        return _ABSOLUTE.get(self, self)


_PAIRS = (
    ("NORTH", "SOUTH"), ("NORTH_NORTH_EAST", "SOUTH_SOUTH_WEST"), ("NORTH_EAST", "SOUTH_WEST"),
    ("EAST_NORTH_EAST", "WEST_SOUTH_WEST"), ("EAST", "WEST"), ("EAST_SOUTH_EAST", "WEST_NORTH_WEST"),
    ("SOUTH_EAST", "NORTH_WEST"), ("SOUTH_SOUTH_EAST", "NORTH_NORTH_WEST"), ("UP", "DOWN"),
    ("FUTURE", "PAST"), ("COLUMN_POSITIVE", "COLUMN_NEGATIVE"), ("ROW_POSITIVE", "ROW_NEGATIVE"),
    ("DISPLAY_RIGHT", "DISPLAY_LEFT"), ("DISPLAY_UP", "DISPLAY_DOWN"),
)
_OPPOSITES = {}
_ABSOLUTE = {}
for _first, _second in _PAIRS:
    _OPPOSITES[AxisDirection[_first]] = AxisDirection[_second]
    _OPPOSITES[AxisDirection[_second]] = AxisDirection[_first]
    _ABSOLUTE[AxisDirection[_second]] = AxisDirection[_first]


class CoordinateSystemAxis(IdentifiedObject):
    abbreviation: str
    direction: AxisDirection
    unit: str
    minimum_value: float = -math.inf
    maximum_value: float = math.inf
    range_meaning: Optional[RangeMeaning] = None


class CoordinateSystem(IdentifiedObject):
    dimension: int

    @abstractmethod
    def get_axis(self, dimension: int) -> CoordinateSystemAxis: ...


class AffineCS(CoordinateSystem):
    pass


class CartesianCS(AffineCS):
    pass


class EllipsoidalCS(CoordinateSystem):
    pass


class SphericalCS(CoordinateSystem):
    pass


class CylindricalCS(CoordinateSystem):
    pass


class PolarCS(CoordinateSystem):
    pass


class LinearCS(CoordinateSystem):
    pass


class VerticalCS(CoordinateSystem):
    pass


class TimeCS(CoordinateSystem):
    pass


class UserDefinedCS(CoordinateSystem):
    pass
