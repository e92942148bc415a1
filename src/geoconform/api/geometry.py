"""
Geometry interfaces: direct positions and envelopes.

position_hash() states the hash contract every DirectPosition implementation
shall honour, so that positions from different libraries hash alike.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from .crs import CoordinateReferenceSystem


def position_hash(crs: Any, coordinates: Sequence[float]) -> int:
    """Hash of the coordinate tuple, combined with the hash of the CRS when there is one."""
    code = hash(tuple(float(c) for c in coordinates))
    if crs is None:
        return code
    return hash(hash(crs) + code)


class Geometry(ABC):
    coordinate_reference_system: Optional[CoordinateReferenceSystem] = None


class DirectPosition(ABC):
    """A position in a coordinate reference system."""
    dimension: int
    coordinate_reference_system: Optional[CoordinateReferenceSystem] = None

    @abstractmethod
    def get_coordinate(self) -> Sequence[float]:
        """Returns a new array of the coordinates; changes to it do not affect this position."""

    @abstractmethod
    def get_ordinate(self, dimension: int) -> float:
        """Returns the coordinate at the given dimension."""


class Envelope(ABC):
    """
    Minimum bounding box of a geometry.

    On wraparound axes the lower corner may have a greater value than the
    upper corner, for example an envelope crossing the anti-meridian.
    """
    dimension: int
    coordinate_reference_system: Optional[CoordinateReferenceSystem] = None
    lower_corner: DirectPosition
    upper_corner: DirectPosition

    @abstractmethod
    def get_minimum(self, dimension: int) -> float: ...

    @abstractmethod
    def get_maximum(self, dimension: int) -> float: ...

    @abstractmethod
    def get_median(self, dimension: int) -> float: ...

    @abstractmethod
    def get_span(self, dimension: int) -> float: ...
