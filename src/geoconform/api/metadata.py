"""Metadata and citation interfaces (ISO 19115)."""

from __future__ import annotations

from abc import ABC
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence, Union

if TYPE_CHECKING:
    from .util import InternationalString
    from .extent import Extent
    from .quality import DataQuality

Text = Union[str, "InternationalString"]


class DateType(Enum):
    """Reference date categories, in declaration order of the code list."""
    CREATION = "creation"
    PUBLICATION = "publication"
    REVISION = "revision"
    EXPIRY = "expiry"
    LAST_UPDATE = "lastUpdate"
    LAST_REVISION = "lastRevision"
    NEXT_UPDATE = "nextUpdate"
    UNAVAILABLE = "unavailable"
    IN_FORCE = "inForce"
    ADOPTED = "adopted"
    DEPRECATED = "deprecated"
    SUPERSEDED = "superseded"
    VALIDITY_BEGINS = "validityBegins"
    VALIDITY_EXPIRES = "validityExpires"
    RELEASED = "released"
    DISTRIBUTION = "distribution"

    @property
    def identifier(self) -> str:
        return self.value

    @property
    def ordinal(self) -> int:
        return _DATE_TYPE_ORDER.index(self)


_DATE_TYPE_ORDER = list(DateType)


class Role(Enum):
    RESOURCE_PROVIDER = "resourceProvider"
    CUSTODIAN = "custodian"
    OWNER = "owner"
    USER = "user"
    DISTRIBUTOR = "distributor"
    ORIGINATOR = "originator"
    POINT_OF_CONTACT = "pointOfContact"
    PRINCIPAL_INVESTIGATOR = "principalInvestigator"
    PROCESSOR = "processor"
    PUBLISHER = "publisher"
    AUTHOR = "author"


class CitationDate(ABC):
    date: datetime
    date_type: DateType


class Identifier(ABC):
    """A value uniquely identifying an object within a namespace."""
    code: str
    authority: Optional[Citation] = None
    code_space: Optional[str] = None
    version: Optional[str] = None


class Telephone(ABC):
    voices: Sequence[str] = ()
    facsimiles: Sequence[str] = ()


class Address(ABC):
    delivery_points: Sequence[Text] = ()
    city: Optional[Text] = None
    administrative_area: Optional[Text] = None
    postal_code: Optional[str] = None
    country: Optional[Text] = None
    electronic_mail_addresses: Sequence[str] = ()


class OnlineResource(ABC):
    linkage: str
    protocol: Optional[str] = None
    name: Optional[str] = None
    description: Optional[Text] = None


class Contact(ABC):
    phone: Optional[Telephone] = None
    address: Optional[Address] = None
    online_resource: Optional[OnlineResource] = None
    hours_of_service: Optional[Text] = None
    contact_instructions: Optional[Text] = None


class ResponsibleParty(ABC):
    role: Role
    individual_name: Optional[str] = None
    organisation_name: Optional[Text] = None
    position_name: Optional[Text] = None
    contact_info: Optional[Contact] = None


class Citation(ABC):
    """Standardized resource reference."""
    title: Text
    alternate_titles: Sequence[Text] = ()
    dates: Sequence[CitationDate] = ()
    edition: Optional[Text] = None
    edition_date: Optional[datetime] = None
    identifiers: Sequence[Identifier] = ()
    cited_responsible_parties: Sequence[ResponsibleParty] = ()
    online_resources: Sequence[OnlineResource] = ()
    other_citation_details: Optional[Text] = None


class Identification(ABC):
    """Basic information about a described resource."""
    citation: Citation
    abstract: Text
    point_of_contacts: Sequence[ResponsibleParty] = ()
    extents: Sequence[Extent] = ()


class Metadata(ABC):
    """Root of a metadata tree."""
    file_identifier: Optional[str] = None
    language: Optional[str] = None
    contacts: Sequence[ResponsibleParty] = ()
    date_stamp: Optional[datetime] = None
    identification_info: Sequence[Identification] = ()
    reference_system_info: Sequence[Any] = ()
    data_quality_info: Sequence[DataQuality] = ()
    spatial_representation_info: Sequence[Any] = ()
    content_info: Sequence[Any] = ()
    metadata_constraints: Sequence[Any] = ()
    metadata_extension_info: Sequence[Any] = ()
