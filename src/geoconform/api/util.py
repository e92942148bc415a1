"""
Name and text interfaces (ISO 19103).

A local name is a one-element path. A scoped name is a head local name
followed by a tail generic name. Every name lives in a namespace whose own
name is fully qualified.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence


class InternationalString(ABC):
    """Text that may be rendered differently for each locale."""

    @abstractmethod
    def to_string(self, locale: Optional[str] = None) -> Optional[str]:
        """Returns the text for the given locale, or the default text when locale is None."""

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(str(self))


class NameSpace(ABC):
    """A domain in which names are defined."""
    is_global: bool
    name: GenericName            # fully qualified name of this namespace


class GenericName(ABC):
    """A sequence of local names forming a path in nested namespaces."""
    scope: NameSpace
    depth: int
    parsed_names: Sequence[LocalName]
    head: LocalName
    tip: LocalName

    @abstractmethod
    def to_fully_qualified_name(self) -> GenericName:
        """Returns this name prefixed by the name of its scope, or self for a global scope."""

    @abstractmethod
    def to_international_string(self) -> InternationalString:
        """Returns a localizable rendering of this name."""


class LocalName(GenericName):
    """A name with a single element."""


class ScopedName(GenericName):
    """A name made of a head and a tail."""
    tail: GenericName            # every element except the head
    path: GenericName            # every element except the tip
