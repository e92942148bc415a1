"""Direct position and envelope backed by tuples of floats."""

from typing import Any, Optional, Sequence

import numpy as np

from ..api import DirectPosition, Envelope, RangeMeaning, position_hash


class SimpleDirectPosition(DirectPosition):
    """An immutable position. get_coordinate() returns a new numpy array on each call."""

    def __init__(self, coordinates: Sequence[float], crs: Any = None):
        self._coordinates = tuple(float(c) for c in coordinates)
        self.coordinate_reference_system = crs

    @property
    def dimension(self) -> int:
        return len(self._coordinates)

    def get_coordinate(self) -> np.ndarray:
        return np.array(self._coordinates, dtype=np.float64)

    def get_ordinate(self, dimension: int) -> float:
        return self._coordinates[dimension]

    def __eq__(self, other):
        if not isinstance(other, SimpleDirectPosition):
            return NotImplemented
        return (self._coordinates == other._coordinates
                and self.coordinate_reference_system == other.coordinate_reference_system)

    def __hash__(self):
        return position_hash(self.coordinate_reference_system, self._coordinates)

    def __repr__(self):
        return f"SimpleDirectPosition({list(self._coordinates)})"


class SimpleEnvelope(Envelope):
    """
    An envelope given by its two corners.

    On an axis with wraparound range meaning, a lower corner coordinate greater
    than the upper one means the envelope crosses the axis limit; minimum and
    maximum are then the axis bounds.
    """

    def __init__(self, lower: Sequence[float], upper: Sequence[float], crs: Any = None):
        if len(lower) != len(upper):
            raise ValueError(f"Corner dimensions differ: {len(lower)} and {len(upper)}.")
        self.coordinate_reference_system = crs
        self.lower_corner = SimpleDirectPosition(lower, crs)
        self.upper_corner = SimpleDirectPosition(upper, crs)

    @property
    def dimension(self) -> int:
        return self.lower_corner.dimension

    def _wrapping_axis(self, dimension: int) -> Optional[Any]:
        crs = self.coordinate_reference_system
        if crs is None or crs.coordinate_system is None:
            return None
        axis = crs.coordinate_system.get_axis(dimension)
        lower = self.lower_corner.get_ordinate(dimension)
        upper = self.upper_corner.get_ordinate(dimension)
        if lower > upper and axis.range_meaning is RangeMeaning.WRAPAROUND:
            return axis
        return None

    def get_minimum(self, dimension: int) -> float:
        axis = self._wrapping_axis(dimension)
        return axis.minimum_value if axis is not None else self.lower_corner.get_ordinate(dimension)

    def get_maximum(self, dimension: int) -> float:
        axis = self._wrapping_axis(dimension)
        return axis.maximum_value if axis is not None else self.upper_corner.get_ordinate(dimension)

    def get_span(self, dimension: int) -> float:
        span = self.upper_corner.get_ordinate(dimension) - self.lower_corner.get_ordinate(dimension)
        axis = self._wrapping_axis(dimension)
        if axis is not None:
            span += axis.maximum_value - axis.minimum_value
        return span

    def get_median(self, dimension: int) -> float:
        lower = self.lower_corner.get_ordinate(dimension)
        axis = self._wrapping_axis(dimension)
        if axis is None:
            return (lower + self.upper_corner.get_ordinate(dimension)) / 2
        median = lower + self.get_span(dimension) / 2
        if median > axis.maximum_value:
            median -= axis.maximum_value - axis.minimum_value
        return median

    def __repr__(self):
        return (f"SimpleEnvelope({list(self.lower_corner.get_coordinate())}, "
                f"{list(self.upper_corner.get_coordinate())})")
