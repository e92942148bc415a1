"""Extent interfaces (ISO 19115 EX_* types)."""

from __future__ import annotations

from abc import ABC
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from .crs import VerticalCRS
    from .metadata import Identifier, Text


class GeographicExtent(ABC):
    inclusion: Optional[bool] = True


class GeographicBoundingBox(GeographicExtent):
    """
    Geographic area in decimal degrees.

    west > east is legal and denotes a box spanning the anti-meridian.
    """
    west_bound_longitude: float
    east_bound_longitude: float
    south_bound_latitude: float
    north_bound_latitude: float


class GeographicDescription(GeographicExtent):
    geographic_identifier: Identifier


class BoundingPolygon(GeographicExtent):
    polygons: Sequence[Any]


class VerticalExtent(ABC):
    minimum_value: Optional[float]
    maximum_value: Optional[float]
    vertical_crs: Optional[VerticalCRS] = None


class TemporalExtent(ABC):
    begin: Optional[datetime] = None
    end: Optional[datetime] = None


class SpatialTemporalExtent(TemporalExtent):
    spatial_extent: Sequence[GeographicExtent] = ()


class Extent(ABC):
    description: Optional[Text] = None
    geographic_elements: Sequence[GeographicExtent] = ()
    vertical_elements: Sequence[VerticalExtent] = ()
    temporal_elements: Sequence[TemporalExtent] = ()
