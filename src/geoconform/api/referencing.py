"""Base interfaces of the referencing model (ISO 19111)."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from .extent import Extent
    from .metadata import Identifier, Text
    from .util import GenericName


class IdentifiedObject(ABC):
    """Identification and remarks common to every referencing object."""
    name: Identifier
    alias: Sequence[GenericName] = ()
    identifiers: Sequence[Identifier] = ()
    remarks: Optional[Text] = None


class ReferenceSystem(IdentifiedObject):
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
