"""
Base class of the validators for the referencing model (ISO 19111).

Every referencing object carries a name, identifiers, aliases and remarks.
The checks of those properties are shared by the CRS, coordinate system,
datum, parameter and coordinate operation validators.
"""

from typing import Any, Optional

from ..api import GenericName, Identifier, IdentifiedObject, InternationalString, ReferenceSystem
from ..assertions import assert_instance_of, assert_not_none
from .base import Validator


class ReferencingValidator(Validator):

    category = "referencing"

    def dispatch_object(self, obj: Optional[IdentifiedObject]) -> None:
        """Validates an identified object that is not of any more specific kind."""
        if obj is None:
            return
        if isinstance(obj, ReferenceSystem):
            self.validate_reference_system(obj)
        else:
            self.validate_identified_object(obj)

    def validate_text(self, text: Any) -> None:
        if isinstance(text, InternationalString):
            self.container.dispatch(text)
        elif text is not None:
            assert_instance_of(str, text, "Text shall be a str or an InternationalString.")

    def validate_reference_system(self, obj: ReferenceSystem) -> None:
        """Checks common to all reference systems, invoked once the type is known."""
        self.validate_identified_object(obj)
        self.validate_text(obj.scope)
        self.container.dispatch(obj.domain_of_validity)

    def validate_identified_object(self, obj: IdentifiedObject) -> None:
        """Checks common to all identified objects, invoked once the type is known."""
        name = obj.name
        self.mandatory(f"{type(obj).__name__}: shall have a name.", name)
        if name is not None:
            assert_instance_of(Identifier, name, "IdentifiedObject: name shall be an Identifier.")
            self.container.dispatch(name)
        identifiers = obj.identifiers
        if identifiers is not None:
            self.validate_collection(identifiers)
            for identifier in identifiers:
                assert_not_none(identifier, "IdentifiedObject: identifiers can not contain None element.")
                self.container.dispatch(identifier)
        alias = obj.alias
        if alias is not None:
            self.validate_collection(alias)
            for name in alias:
                assert_not_none(name, "IdentifiedObject: alias can not contain None element.")
                assert_instance_of(GenericName, name, "IdentifiedObject: alias shall be a GenericName.")
                self.container.dispatch(name)
        self.validate_text(obj.remarks)
