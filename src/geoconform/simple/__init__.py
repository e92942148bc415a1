"""
Minimal implementations of the accessor interfaces.

They are the reference objects the validators are exercised against, and a
starting point for adapting third-party classes.
"""

from .extent import (
    SimpleBoundingPolygon,
    SimpleExtent,
    SimpleGeographicBoundingBox,
    SimpleGeographicDescription,
    SimpleSpatialTemporalExtent,
    SimpleTemporalExtent,
    SimpleVerticalExtent,
)
from .geometry import SimpleDirectPosition, SimpleEnvelope
from .metadata import (
    SimpleAddress,
    SimpleCitation,
    SimpleCitationDate,
    SimpleContact,
    SimpleIdentification,
    SimpleIdentifier,
    SimpleMetadata,
    SimpleOnlineResource,
    SimpleResponsibleParty,
    SimpleTelephone,
    identifier,
)
from .names import GLOBAL, DefaultLocalName, DefaultNameSpace, DefaultScopedName, SimpleInternationalString, create_name
from .parameter import (
    SimpleParameterDescriptor,
    SimpleParameterDescriptorGroup,
    SimpleParameterValue,
    SimpleParameterValueGroup,
)
from .quality import SimpleConformanceResult, SimpleDataQuality, SimpleElement, SimpleQuantitativeResult
from .referencing import geographic_crs, vertical_crs, wgs84_datum

__all__ = [
    "GLOBAL",
    "DefaultLocalName",
    "DefaultNameSpace",
    "DefaultScopedName",
    "SimpleAddress",
    "SimpleBoundingPolygon",
    "SimpleCitation",
    "SimpleCitationDate",
    "SimpleConformanceResult",
    "SimpleContact",
    "SimpleDataQuality",
    "SimpleDirectPosition",
    "SimpleElement",
    "SimpleEnvelope",
    "SimpleExtent",
    "SimpleGeographicBoundingBox",
    "SimpleGeographicDescription",
    "SimpleIdentification",
    "SimpleIdentifier",
    "SimpleInternationalString",
    "SimpleMetadata",
    "SimpleOnlineResource",
    "SimpleParameterDescriptor",
    "SimpleParameterDescriptorGroup",
    "SimpleParameterValue",
    "SimpleParameterValueGroup",
    "SimpleQuantitativeResult",
    "SimpleResponsibleParty",
    "SimpleSpatialTemporalExtent",
    "SimpleTelephone",
    "SimpleTemporalExtent",
    "SimpleVerticalExtent",
    "create_name",
    "geographic_crs",
    "identifier",
    "vertical_crs",
    "wgs84_datum",
]
