"""Validators for citations and the responsible parties and contacts they cite."""

from typing import Iterable, Optional

from ..api import (
    Address,
    Citation,
    CitationDate,
    Contact,
    DateType,
    Identifier,
    OnlineResource,
    ResponsibleParty,
    Role,
    Telephone,
)
from ..assertions import assert_instance_of, fail
from .metadata import MetadataValidator

# Date types that shall not precede the creation date.
_LAST_CREATION_BOUND = DateType.REVISION.ordinal


def _assert_ordered(earlier_type: DateType, earlier, later_type: DateType, later) -> None:
    if earlier is not None and later < earlier:
        fail(f"The ‘{later_type.identifier}’ date ({later}) shall be equal or after "
             f"the ‘{earlier_type.identifier}’ date ({earlier}).", earlier, later)


class CitationValidator(MetadataValidator):
    """Validates Citation, CitationDate, ResponsibleParty, Contact, Telephone, Address and OnlineResource."""

    category = "citation"

    def validate_citation(self, obj: Optional[Citation]) -> None:
        if obj is None:
            return
        self.validate_mandatory(obj.title)
        self.validate_optional(obj.edition)
        self.validate_optional(obj.other_citation_details)
        for title in self.elements(object, obj.alternate_titles):
            self.validate_optional(title)
        for identifier in self.elements(Identifier, obj.identifiers):
            self.container.dispatch(identifier)
        self.validate_dates(self.elements(CitationDate, obj.dates))
        for party in self.elements(ResponsibleParty, obj.cited_responsible_parties):
            self.container.dispatch(party)
        for resource in self.elements(OnlineResource, obj.online_resources):
            self.container.dispatch(resource)

    def validate_date(self, obj: Optional[CitationDate]) -> None:
        """Validates a single date. Ordering is checked by validate_dates()."""
        if obj is None:
            return
        self.mandatory("CitationDate: shall have a date type.", obj.date_type)
        self.mandatory("CitationDate: shall have a timestamp.", obj.date)
        if obj.date_type is not None:
            assert_instance_of(DateType, obj.date_type, "CitationDate: date type shall be a DateType.")

    def validate_dates(self, dates: Optional[Iterable[CitationDate]]) -> None:
        """
        Checks the chronological order of the dates of one citation.

        Dates are examined in iteration order. A date ranked up to REVISION
        shall not precede the latest creation date seen so far, a next update
        shall not precede the latest update and a validity expiry shall not
        precede the latest validity begin.
        """
        if dates is None:
            return
        creation = last_update = validity_begins = None
        for entry in dates:
            if entry is None:
                continue
            date_type = entry.date_type
            time = entry.date
            self.mandatory("CitationDate: shall have a date type.", date_type)
            self.mandatory("CitationDate: shall have a timestamp.", time)
            if date_type is None or time is None:
                continue
            if date_type is DateType.CREATION:
                creation = time
            elif date_type is DateType.LAST_UPDATE:
                last_update = time
            elif date_type is DateType.VALIDITY_BEGINS:
                validity_begins = time
            if date_type.ordinal <= _LAST_CREATION_BOUND:
                _assert_ordered(DateType.CREATION, creation, date_type, time)
            elif date_type is DateType.NEXT_UPDATE:
                _assert_ordered(DateType.LAST_UPDATE, last_update, date_type, time)
            elif date_type is DateType.VALIDITY_EXPIRES:
                _assert_ordered(DateType.VALIDITY_BEGINS, validity_begins, date_type, time)

    def validate_responsible_party(self, obj: Optional[ResponsibleParty]) -> None:
        if obj is None:
            return
        self.mandatory("ResponsibleParty: shall have a role.", obj.role)
        if obj.role is not None:
            assert_instance_of(Role, obj.role, "ResponsibleParty: role shall be a Role.")
        names = [obj.individual_name, obj.organisation_name, obj.position_name]
        self.mandatory("ResponsibleParty: shall have an individual, organisation or position name.",
                       [name for name in names if name is not None])
        for name in names:
            self.validate_optional(name)
        self.container.dispatch(obj.contact_info)

    def validate_contact(self, obj: Optional[Contact]) -> None:
        if obj is None:
            return
        self.validate_optional(obj.contact_instructions)
        self.validate_optional(obj.hours_of_service)
        self.container.dispatch(obj.phone)
        self.container.dispatch(obj.address)
        self.container.dispatch(obj.online_resource)

    def validate_telephone(self, obj: Optional[Telephone]) -> None:
        if obj is None:
            return
        self.elements(str, obj.voices)
        self.elements(str, obj.facsimiles)

    def validate_address(self, obj: Optional[Address]) -> None:
        if obj is None:
            return
        for point in self.elements(object, obj.delivery_points):
            self.validate_optional(point)
        self.validate_optional(obj.city)
        self.validate_optional(obj.administrative_area)
        self.validate_optional(obj.postal_code)
        self.validate_optional(obj.country)
        self.elements(str, obj.electronic_mail_addresses)

    def validate_online_resource(self, obj: Optional[OnlineResource]) -> None:
        if obj is None:
            return
        self.mandatory("OnlineResource: shall have a linkage.", obj.linkage)
        self.validate_optional(obj.protocol)
        self.validate_optional(obj.name)
        self.validate_optional(obj.description)
