"""Datum, ellipsoid and prime meridian interfaces."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .referencing import IdentifiedObject

if TYPE_CHECKING:
    from .extent import Extent
    from .metadata import Text


class PixelInCell(Enum):
    CELL_CENTER = "cellCenter"
    CELL_CORNER = "cellCorner"


class PrimeMeridian(IdentifiedObject):
    greenwich_longitude: float
    angular_unit: str


class Ellipsoid(IdentifiedObject):
    semi_major_axis: float
    semi_minor_axis: float
    inverse_flattening: float          # infinite for a sphere
    is_ivf_definitive: bool = True
    is_sphere: bool = False
    axis_unit: Optional[str] = None


class Datum(IdentifiedObject):
    anchor_point: Optional[Text] = None
    realization_epoch: Optional[datetime] = None
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None


class GeodeticDatum(Datum):
    ellipsoid: Ellipsoid
    prime_meridian: PrimeMeridian


class VerticalDatum(Datum):
    pass


class TemporalDatum(Datum):
    origin: datetime


class EngineeringDatum(Datum):
    pass


class ImageDatum(Datum):
    pixel_in_cell: PixelInCell
