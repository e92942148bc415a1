"""
Read-only accessor interfaces of the validated entities.

Each class is a tag: an object is subject to the invariants of every interface
it is an instance of, either by subclassing or through ABC.register().
Attributes with a class-level default are optional; the others are mandatory
and declared by annotation only.
"""

from .util import GenericName, InternationalString, LocalName, NameSpace, ScopedName
from .metadata import (
    Address,
    Citation,
    CitationDate,
    Contact,
    DateType,
    Identification,
    Identifier,
    Metadata,
    OnlineResource,
    ResponsibleParty,
    Role,
    Telephone,
)
from .extent import (
    BoundingPolygon,
    Extent,
    GeographicBoundingBox,
    GeographicDescription,
    GeographicExtent,
    SpatialTemporalExtent,
    TemporalExtent,
    VerticalExtent,
)
from .quality import ConformanceResult, DataQuality, Element, QuantitativeResult, Result
from .geometry import DirectPosition, Envelope, Geometry, position_hash
from .referencing import IdentifiedObject, ReferenceSystem
from .cs import (
    AffineCS,
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
from .datum import (
    Datum,
    Ellipsoid,
    EngineeringDatum,
    GeodeticDatum,
    ImageDatum,
    PixelInCell,
    PrimeMeridian,
    TemporalDatum,
    VerticalDatum,
)
from .crs import (
    CompoundCRS,
    CoordinateReferenceSystem,
    DerivedCRS,
    EngineeringCRS,
    GeneralDerivedCRS,
    GeocentricCRS,
    GeodeticCRS,
    GeographicCRS,
    ImageCRS,
    ProjectedCRS,
    SingleCRS,
    TemporalCRS,
    VerticalCRS,
)
from .operation import (
    ConcatenatedOperation,
    Conversion,
    CoordinateOperation,
    Formula,
    MathTransform,
    OperationMethod,
    PassThroughOperation,
    SingleOperation,
    Transformation,
)
from .parameter import (
    GeneralParameterDescriptor,
    GeneralParameterValue,
    ParameterDescriptor,
    ParameterDescriptorGroup,
    ParameterNotFoundError,
    ParameterValue,
    ParameterValueGroup,
)

__all__ = [
    "Address", "AffineCS", "AxisDirection", "BoundingPolygon", "CartesianCS", "Citation",
    "CitationDate", "CompoundCRS", "ConcatenatedOperation", "ConformanceResult", "Contact",
    "Conversion", "CoordinateOperation", "CoordinateReferenceSystem", "CoordinateSystem",
    "CoordinateSystemAxis", "CylindricalCS", "DataQuality", "DateType", "Datum", "DerivedCRS",
    "DirectPosition", "Element", "Ellipsoid", "EllipsoidalCS", "EngineeringCRS", "EngineeringDatum",
    "Envelope", "Extent", "Formula", "GeneralDerivedCRS", "GeneralParameterDescriptor",
    "GeneralParameterValue", "GenericName", "GeocentricCRS", "GeodeticCRS", "GeodeticDatum",
    "GeographicBoundingBox", "GeographicCRS", "GeographicDescription", "GeographicExtent",
    "Geometry", "IdentifiedObject", "Identification", "Identifier", "ImageCRS", "ImageDatum",
    "InternationalString", "LinearCS", "LocalName", "MathTransform", "Metadata", "NameSpace",
    "OnlineResource", "OperationMethod", "ParameterDescriptor", "ParameterDescriptorGroup",
    "ParameterNotFoundError", "ParameterValue", "ParameterValueGroup", "PassThroughOperation",
    "PixelInCell", "PolarCS", "PrimeMeridian", "ProjectedCRS", "QuantitativeResult", "RangeMeaning",
    "ReferenceSystem", "ResponsibleParty", "Result", "Role", "ScopedName", "SingleCRS",
    "SingleOperation", "SpatialTemporalExtent", "SphericalCS", "Telephone", "TemporalCRS",
    "TemporalDatum", "TemporalExtent", "TimeCS", "Transformation", "UserDefinedCS",
    "VerticalCS", "VerticalCRS", "VerticalDatum", "VerticalExtent", "position_hash",
]
