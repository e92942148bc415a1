"""
Validators for the root of a metadata tree, its identification parts and
identifiers.

MetadataValidator is the base of every ISO 19115 validator: it knows how to
validate text that may be either a plain string or an InternationalString,
and how to check a collection attribute.
"""

from typing import Any, Iterable, List, Optional

from ..api import (
    Citation,
    DataQuality,
    Extent,
    Identification,
    Identifier,
    InternationalString,
    Metadata,
    ResponsibleParty,
)
from ..assertions import assert_instance_of, assert_not_none
from .base import Validator


class MetadataValidator(Validator):
    """Base class of validators for metadata, citations, extents and quality."""

    category = "metadata"

    def validate_mandatory(self, text: Any) -> None:
        """Text that shall be present, either a str or a valid InternationalString."""
        self.mandatory("Missing mandatory text.", text)
        self.validate_optional(text)

    def validate_optional(self, text: Any) -> None:
        if isinstance(text, InternationalString):
            self.container.dispatch(text)
        elif text is not None:
            assert_instance_of(str, text, "Text shall be a str or an InternationalString.")

    def elements(self, kind: type, collection: Optional[Iterable[Any]]) -> List[Any]:
        """
        Checks a collection attribute and returns its elements.

        A None collection is reported as a missing mandatory value, since
        absent collections shall be empty instead. The elements shall follow
        the equality contract, be non-None and be instances of kind.
        """
        if collection is None:
            self.mandatory(f"Collection of {kind.__name__} shall be an empty collection, not None.", None)
            return []
        items = list(collection)
        self.validate_collection(items)
        for element in items:
            assert_not_none(element, f"Collection of {kind.__name__} shall not contain None element.")
            assert_instance_of(kind, element, f"Collection element shall be an instance of {kind.__name__}.")
        return items


class MetadataBaseValidator(MetadataValidator):
    """Validates Metadata, Identification and Identifier."""

    def validate_metadata(self, obj: Optional[Metadata]) -> None:
        if obj is None:
            return
        for contact in self.elements(ResponsibleParty, obj.contacts):
            self.container.dispatch(contact)
        self.validate_collection(obj.spatial_representation_info)
        for reference_system in self.elements(object, obj.reference_system_info):
            self.container.dispatch(reference_system)
        self.validate_collection(obj.metadata_extension_info)
        identifications = obj.identification_info
        self.mandatory("Metadata: shall have an identification information.", identifications)
        for identification in self.elements(Identification, identifications):
            self.container.dispatch(identification)
        self.validate_collection(obj.content_info)
        for quality in self.elements(DataQuality, obj.data_quality_info):
            self.container.dispatch(quality)
        self.validate_collection(obj.metadata_constraints)

    def validate_identification(self, obj: Optional[Identification]) -> None:
        if obj is None:
            return
        citation = obj.citation
        self.mandatory("Identification: shall have a citation.", citation)
        if citation is not None:
            assert_instance_of(Citation, citation, "Identification: citation shall be a Citation.")
            self.container.dispatch(citation)
        self.validate_mandatory(obj.abstract)
        for contact in self.elements(ResponsibleParty, obj.point_of_contacts):
            self.container.dispatch(contact)
        for extent in self.elements(Extent, obj.extents):
            self.container.dispatch(extent)

    def validate_identifier(self, obj: Optional[Identifier]) -> None:
        if obj is None:
            return
        self.mandatory("Identifier: shall have a code.", obj.code)
        self.validate_optional(obj.code_space)
        self.validate_optional(obj.version)
        authority = obj.authority
        # The visited set guards deeper cycles; this catches the direct one early.
        if authority is not obj:
            self.container.dispatch(authority)
