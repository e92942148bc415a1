"""Coordinate reference system interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .referencing import ReferenceSystem

if TYPE_CHECKING:
    from .cs import CoordinateSystem
    from .datum import Datum
    from .operation import Conversion


class CoordinateReferenceSystem(ReferenceSystem):
    coordinate_system: CoordinateSystem


class SingleCRS(CoordinateReferenceSystem):
    datum: Datum


class GeodeticCRS(SingleCRS):
    pass


class GeographicCRS(GeodeticCRS):
    pass


class GeocentricCRS(GeodeticCRS):
    pass


class GeneralDerivedCRS(SingleCRS):
    base_crs: SingleCRS
    conversion_from_base: Conversion


class DerivedCRS(GeneralDerivedCRS):
    pass


class ProjectedCRS(GeneralDerivedCRS):
    pass


class VerticalCRS(SingleCRS):
    pass


class TemporalCRS(SingleCRS):
    pass


class EngineeringCRS(SingleCRS):
    pass


class ImageCRS(SingleCRS):
    pass


class CompoundCRS(CoordinateReferenceSystem):
    components: Sequence[CoordinateReferenceSystem]
