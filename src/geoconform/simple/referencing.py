"""
Immutable implementations of the referencing interfaces, with builders for
the common WGS 84 objects.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from ..api import (
    AxisDirection,
    CartesianCS,
    CompoundCRS,
    ConcatenatedOperation,
    Conversion,
    CoordinateOperation,
    CoordinateReferenceSystem,
    CoordinateSystem,
    CoordinateSystemAxis,
    Ellipsoid,
    EllipsoidalCS,
    EngineeringCRS,
    EngineeringDatum,
    Extent,
    Formula,
    GenericName,
    GeocentricCRS,
    GeodeticDatum,
    GeographicCRS,
    Identifier,
    MathTransform,
    OperationMethod,
    ParameterDescriptorGroup,
    ParameterValueGroup,
    PassThroughOperation,
    PrimeMeridian,
    ProjectedCRS,
    RangeMeaning,
    TemporalCRS,
    TemporalDatum,
    TimeCS,
    Transformation,
    VerticalCRS,
    VerticalCS,
    VerticalDatum,
)
from ..api.metadata import Text
from .metadata import SimpleCitation, SimpleIdentifier

EPSG = SimpleCitation(title="EPSG Geodetic Parameter Dataset", alternate_titles=("EPSG",))


def epsg(code: str, name: str) -> SimpleIdentifier:
    """Name of an object defined in the EPSG dataset."""
    return SimpleIdentifier(code=name, authority=EPSG, code_space="EPSG", version=code)


# Coordinate systems


@dataclass(frozen=True)
class SimpleAxis(CoordinateSystemAxis):
    name: Identifier
    abbreviation: str
    direction: AxisDirection
    unit: str
    minimum_value: float = -math.inf
    maximum_value: float = math.inf
    range_meaning: Optional[RangeMeaning] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class _SimpleCS(CoordinateSystem):
    name: Identifier
    axes: Tuple[CoordinateSystemAxis, ...]
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None

    @property
    def dimension(self) -> int:
        return len(self.axes)

    def get_axis(self, dimension: int) -> CoordinateSystemAxis:
        return self.axes[dimension]


class SimpleEllipsoidalCS(_SimpleCS, EllipsoidalCS):
    pass


class SimpleCartesianCS(_SimpleCS, CartesianCS):
    pass


class SimpleVerticalCS(_SimpleCS, VerticalCS):
    pass


class SimpleTimeCS(_SimpleCS, TimeCS):
    pass


# Datums


@dataclass(frozen=True)
class SimplePrimeMeridian(PrimeMeridian):
    name: Identifier
    greenwich_longitude: float = 0.0
    angular_unit: str = "degree"
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class SimpleEllipsoid(Ellipsoid):
    name: Identifier
    semi_major_axis: float
    semi_minor_axis: float
    inverse_flattening: float
    is_ivf_definitive: bool = True
    is_sphere: bool = False
    axis_unit: Optional[str] = "metre"
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None

    @classmethod
    def from_inverse_flattening(cls, name: Identifier, semi_major_axis: float,
                                inverse_flattening: float) -> "SimpleEllipsoid":
        semi_minor_axis = semi_major_axis * (1 - 1 / inverse_flattening)
        return cls(name, semi_major_axis, semi_minor_axis, inverse_flattening,
                   is_sphere=math.isinf(inverse_flattening))


@dataclass(frozen=True)
class _SimpleDatum:
    name: Identifier
    anchor_point: Optional[Text] = None
    realization_epoch: Optional[datetime] = None
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class SimpleGeodeticDatum(GeodeticDatum):
    name: Identifier
    ellipsoid: Ellipsoid
    prime_meridian: PrimeMeridian
    anchor_point: Optional[Text] = None
    realization_epoch: Optional[datetime] = None
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


class SimpleVerticalDatum(_SimpleDatum, VerticalDatum):
    pass


class SimpleEngineeringDatum(_SimpleDatum, EngineeringDatum):
    pass


@dataclass(frozen=True)
class SimpleTemporalDatum(TemporalDatum):
    name: Identifier
    origin: datetime
    anchor_point: Optional[Text] = None
    realization_epoch: Optional[datetime] = None
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


# Coordinate reference systems


@dataclass(frozen=True)
class _SimpleSingleCRS:
    name: Identifier
    coordinate_system: CoordinateSystem
    datum: Any
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


class SimpleGeographicCRS(_SimpleSingleCRS, GeographicCRS):
    pass


class SimpleGeocentricCRS(_SimpleSingleCRS, GeocentricCRS):
    pass


class SimpleVerticalCRS(_SimpleSingleCRS, VerticalCRS):
    pass


class SimpleTemporalCRS(_SimpleSingleCRS, TemporalCRS):
    pass


class SimpleEngineeringCRS(_SimpleSingleCRS, EngineeringCRS):
    pass


@dataclass(frozen=True)
class SimpleProjectedCRS(ProjectedCRS):
    name: Identifier
    coordinate_system: CoordinateSystem
    datum: GeodeticDatum
    base_crs: GeographicCRS
    conversion_from_base: Conversion
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class SimpleCompoundCRS(CompoundCRS):
    name: Identifier
    coordinate_system: CoordinateSystem
    components: Tuple[CoordinateReferenceSystem, ...]
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


# Coordinate operations


@dataclass(frozen=True)
class SimpleMathTransform(MathTransform):
    source_dimensions: int
    target_dimensions: int
    is_identity: bool = False


@dataclass(frozen=True)
class SimpleFormula(Formula):
    formula: Optional[Text] = None
    citation: Optional[SimpleCitation] = None


@dataclass(frozen=True)
class SimpleOperationMethod(OperationMethod):
    name: Identifier
    formula: Formula
    source_dimensions: Optional[int] = None
    target_dimensions: Optional[int] = None
    parameters: Optional[ParameterDescriptorGroup] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class _SimpleSingleOperation:
    name: Identifier
    method: OperationMethod
    parameter_values: ParameterValueGroup
    source_crs: Optional[CoordinateReferenceSystem] = None
    target_crs: Optional[CoordinateReferenceSystem] = None
    operation_version: Optional[str] = None
    coordinate_operation_accuracy: Tuple[Any, ...] = ()
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    math_transform: Optional[MathTransform] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


class SimpleConversion(_SimpleSingleOperation, Conversion):
    pass


class SimpleTransformation(_SimpleSingleOperation, Transformation):
    pass


@dataclass(frozen=True)
class SimpleConcatenatedOperation(ConcatenatedOperation):
    name: Identifier
    operations: Tuple[CoordinateOperation, ...]
    source_crs: Optional[CoordinateReferenceSystem] = None
    target_crs: Optional[CoordinateReferenceSystem] = None
    operation_version: Optional[str] = None
    coordinate_operation_accuracy: Tuple[Any, ...] = ()
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    math_transform: Optional[MathTransform] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class SimplePassThroughOperation(PassThroughOperation):
    name: Identifier
    operation: CoordinateOperation
    modified_coordinates: Tuple[int, ...]
    method: Optional[OperationMethod] = None
    parameter_values: Optional[ParameterValueGroup] = None
    source_crs: Optional[CoordinateReferenceSystem] = None
    target_crs: Optional[CoordinateReferenceSystem] = None
    operation_version: Optional[str] = None
    coordinate_operation_accuracy: Tuple[Any, ...] = ()
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    math_transform: Optional[MathTransform] = None
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


# Builders


def longitude_axis(range_meaning: RangeMeaning = RangeMeaning.WRAPAROUND) -> SimpleAxis:
    return SimpleAxis(epsg("106", "Geodetic longitude"), "λ", AxisDirection.EAST, "degree",
                      -180.0, +180.0, range_meaning)


def latitude_axis() -> SimpleAxis:
    return SimpleAxis(epsg("107", "Geodetic latitude"), "φ", AxisDirection.NORTH, "degree",
                      -90.0, +90.0, RangeMeaning.EXACT)


def height_axis() -> SimpleAxis:
    return SimpleAxis(epsg("114", "Gravity-related height"), "H", AxisDirection.UP, "metre",
                      range_meaning=RangeMeaning.EXACT)


def ellipsoidal_cs(*axes: CoordinateSystemAxis) -> SimpleEllipsoidalCS:
    """Ellipsoidal CS with the given axes, by default (longitude, latitude) in degrees."""
    if not axes:
        axes = (longitude_axis(), latitude_axis())
    return SimpleEllipsoidalCS(SimpleIdentifier("Ellipsoidal CS"), tuple(axes))


def wgs84_datum() -> SimpleGeodeticDatum:
    ellipsoid = SimpleEllipsoid.from_inverse_flattening(epsg("7030", "WGS 84"), 6378137.0, 298.257223563)
    greenwich = SimplePrimeMeridian(epsg("8901", "Greenwich"))
    return SimpleGeodeticDatum(epsg("6326", "World Geodetic System 1984"), ellipsoid, greenwich)


def geographic_crs(longitude_range_meaning: RangeMeaning = RangeMeaning.WRAPAROUND) -> SimpleGeographicCRS:
    """WGS 84 with (longitude, latitude) axis order."""
    cs = ellipsoidal_cs(longitude_axis(longitude_range_meaning), latitude_axis())
    return SimpleGeographicCRS(SimpleIdentifier("WGS 84 (lon, lat)"), cs, wgs84_datum())


def vertical_crs() -> SimpleVerticalCRS:
    cs = SimpleVerticalCS(SimpleIdentifier("Vertical CS"), (height_axis(),))
    datum = SimpleVerticalDatum(epsg("5100", "Mean Sea Level"))
    return SimpleVerticalCRS(epsg("5714", "MSL height"), cs, datum)
