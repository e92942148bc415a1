"""Immutable implementations of the extent interfaces."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from ..api import (
    BoundingPolygon,
    Extent,
    GeographicBoundingBox,
    GeographicDescription,
    GeographicExtent,
    Identifier,
    SpatialTemporalExtent,
    TemporalExtent,
    VerticalExtent,
)
from ..api.metadata import Text


@dataclass(frozen=True)
class SimpleGeographicBoundingBox(GeographicBoundingBox):
    west_bound_longitude: float
    east_bound_longitude: float
    south_bound_latitude: float
    north_bound_latitude: float
    inclusion: Optional[bool] = True


@dataclass(frozen=True)
class SimpleGeographicDescription(GeographicDescription):
    geographic_identifier: Identifier
    inclusion: Optional[bool] = True


@dataclass(frozen=True)
class SimpleBoundingPolygon(BoundingPolygon):
    polygons: Tuple[Any, ...]
    inclusion: Optional[bool] = True


@dataclass(frozen=True)
class SimpleVerticalExtent(VerticalExtent):
    minimum_value: Optional[float]
    maximum_value: Optional[float]
    vertical_crs: Any = None


@dataclass(frozen=True)
class SimpleTemporalExtent(TemporalExtent):
    begin: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class SimpleSpatialTemporalExtent(SpatialTemporalExtent):
    begin: Optional[datetime] = None
    end: Optional[datetime] = None
    spatial_extent: Tuple[GeographicExtent, ...] = ()


@dataclass(frozen=True)
class SimpleExtent(Extent):
    description: Optional[Text] = None
    geographic_elements: Tuple[GeographicExtent, ...] = ()
    vertical_elements: Tuple[VerticalExtent, ...] = ()
    temporal_elements: Tuple[TemporalExtent, ...] = ()
