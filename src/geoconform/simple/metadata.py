"""Immutable implementations of the citation and metadata interfaces."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Tuple

from ..api import (
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
from ..api.metadata import Text


@dataclass(frozen=True)
class SimpleCitationDate(CitationDate):
    date: datetime
    date_type: DateType


@dataclass(frozen=True)
class SimpleCitation(Citation):
    title: Text
    alternate_titles: Tuple[Text, ...] = ()
    dates: Tuple[CitationDate, ...] = ()
    edition: Optional[Text] = None
    edition_date: Optional[datetime] = None
    identifiers: Tuple[Identifier, ...] = ()
    cited_responsible_parties: Tuple[ResponsibleParty, ...] = ()
    online_resources: Tuple[OnlineResource, ...] = ()
    other_citation_details: Optional[Text] = None


@dataclass(frozen=True)
class SimpleIdentifier(Identifier):
    code: str
    authority: Optional[Citation] = None
    code_space: Optional[str] = None
    version: Optional[str] = None

    def __str__(self):
        return f"{self.code_space}:{self.code}" if self.code_space else self.code


@dataclass(frozen=True)
class SimpleTelephone(Telephone):
    voices: Tuple[str, ...] = ()
    facsimiles: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SimpleAddress(Address):
    delivery_points: Tuple[Text, ...] = ()
    city: Optional[Text] = None
    administrative_area: Optional[Text] = None
    postal_code: Optional[str] = None
    country: Optional[Text] = None
    electronic_mail_addresses: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SimpleOnlineResource(OnlineResource):
    linkage: str
    protocol: Optional[str] = None
    name: Optional[str] = None
    description: Optional[Text] = None


@dataclass(frozen=True)
class SimpleContact(Contact):
    phone: Optional[Telephone] = None
    address: Optional[Address] = None
    online_resource: Optional[OnlineResource] = None
    hours_of_service: Optional[Text] = None
    contact_instructions: Optional[Text] = None


@dataclass(frozen=True)
class SimpleResponsibleParty(ResponsibleParty):
    role: Role
    individual_name: Optional[str] = None
    organisation_name: Optional[Text] = None
    position_name: Optional[Text] = None
    contact_info: Optional[Contact] = None


@dataclass(frozen=True)
class SimpleIdentification(Identification):
    citation: Citation
    abstract: Text
    point_of_contacts: Tuple[ResponsibleParty, ...] = ()
    extents: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class SimpleMetadata(Metadata):
    identification_info: Tuple[Identification, ...] = ()
    contacts: Tuple[ResponsibleParty, ...] = ()
    file_identifier: Optional[str] = None
    language: Optional[str] = None
    date_stamp: Optional[datetime] = None
    reference_system_info: Tuple[Any, ...] = ()
    data_quality_info: Tuple[Any, ...] = ()
    spatial_representation_info: Tuple[Any, ...] = ()
    content_info: Tuple[Any, ...] = ()
    metadata_constraints: Tuple[Any, ...] = ()
    metadata_extension_info: Tuple[Any, ...] = ()


def identifier(code: str, authority: Optional[str] = None, code_space: Optional[str] = None) -> SimpleIdentifier:
    """Identifier whose authority, if any, is a citation with the given title."""
    citation = SimpleCitation(title=authority) if authority is not None else None
    return SimpleIdentifier(code=code, authority=citation, code_space=code_space)
