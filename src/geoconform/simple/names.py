"""
Plain implementations of names, namespaces and international strings.

create_name("a:b:c") builds a scoped name of three local names: "a" in the
global namespace, "b" in namespace "a" and "c" in namespace "a:b".
"""

from __future__ import annotations

from functools import total_ordering
from typing import Dict, Optional, Sequence, Tuple

from ..api import GenericName, InternationalString, LocalName, NameSpace, ScopedName

SEPARATOR = ":"


@total_ordering
class SimpleInternationalString(InternationalString):
    """A text with optional translations, keyed by locale code."""

    def __init__(self, text: str, translations: Optional[Dict[str, str]] = None):
        self.text = text
        self.translations = dict(translations or {})

    def to_string(self, locale: Optional[str] = None) -> Optional[str]:
        if locale is None:
            return self.text
        return self.translations.get(locale, self.text)

    def __eq__(self, other):
        if not isinstance(other, SimpleInternationalString):
            return NotImplemented
        return self.text == other.text and self.translations == other.translations

    def __lt__(self, other):
        if not isinstance(other, InternationalString):
            return NotImplemented
        return str(self) < str(other)

    def __hash__(self):
        return hash(self.text)

    def __repr__(self):
        return f"SimpleInternationalString({self.text!r})"


class DefaultNameSpace(NameSpace):
    """A namespace identified by a fully qualified name. Use GLOBAL for the root."""

    def __init__(self, name: Optional[GenericName]):
        self._name = name

    @property
    def is_global(self) -> bool:
        return self is GLOBAL

    @property
    def name(self) -> GenericName:
        return self._name

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, DefaultNameSpace):
            return NotImplemented
        return self.is_global == other.is_global and self._name == other._name

    def __hash__(self):
        return hash(str(self._name))

    def __repr__(self):
        return "GLOBAL" if self.is_global else f"DefaultNameSpace({str(self._name)!r})"


@total_ordering
class _AbstractName(GenericName):

    def __str__(self) -> str:
        return SEPARATOR.join(name.text for name in self.parsed_names)

    def __hash__(self):
        return hash(str(self))

    def __lt__(self, other):
        if not isinstance(other, GenericName):
            return NotImplemented
        return str(self) < str(other)

    @property
    def depth(self) -> int:
        return len(self.parsed_names)

    @property
    def head(self) -> LocalName:
        return self.parsed_names[0]

    @property
    def tip(self) -> LocalName:
        return self.parsed_names[-1]

    def to_fully_qualified_name(self) -> GenericName:
        scope = self.scope
        if scope is None or scope.is_global:
            return self
        return DefaultScopedName(tuple(scope.name.parsed_names) + tuple(self.parsed_names))

    def to_international_string(self) -> InternationalString:
        return SimpleInternationalString(str(self))


class DefaultLocalName(_AbstractName, LocalName):

    def __init__(self, scope: NameSpace, text: str):
        self.scope = scope
        self.text = text

    @property
    def parsed_names(self) -> Tuple[LocalName]:
        return (self,)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, DefaultLocalName):
            return NotImplemented
        return self.text == other.text and self.scope == other.scope

    __hash__ = _AbstractName.__hash__

    def __repr__(self):
        return f"DefaultLocalName({self.text!r})"


class DefaultScopedName(_AbstractName, ScopedName):
    """A name made of at least two local names, scoped by the scope of the first one."""

    def __init__(self, parsed_names: Sequence[LocalName]):
        if len(parsed_names) < 2:
            raise ValueError("A scoped name needs at least two local names.")
        self._parsed_names = tuple(parsed_names)

    @property
    def parsed_names(self) -> Tuple[LocalName, ...]:
        return self._parsed_names

    @property
    def scope(self) -> NameSpace:
        return self._parsed_names[0].scope

    @property
    def tail(self) -> GenericName:
        return _from_parsed_names(self._parsed_names[1:])

    @property
    def path(self) -> GenericName:
        return _from_parsed_names(self._parsed_names[:-1])

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, DefaultScopedName):
            return NotImplemented
        return self._parsed_names == other._parsed_names

    __hash__ = _AbstractName.__hash__

    def __repr__(self):
        return f"DefaultScopedName({str(self)!r})"


def _from_parsed_names(parsed_names: Sequence[LocalName]) -> GenericName:
    if len(parsed_names) == 1:
        return parsed_names[0]
    return DefaultScopedName(parsed_names)


GLOBAL = DefaultNameSpace(None)
GLOBAL._name = DefaultLocalName(GLOBAL, "global")


def create_name(text: str, separator: str = SEPARATOR) -> GenericName:
    """
    Parses a name in the global namespace.

    Each element after the first is scoped by a namespace named by the
    elements preceding it.

    Args:
        text: the name, e.g. "EPSG:4326".
        separator: the separator between the name elements.

    Returns:
        A local name if text has no separator, a scoped name otherwise.
    """
    names = []
    scope = GLOBAL
    for element in text.split(separator):
        local = DefaultLocalName(scope, element)
        names.append(local)
        scope = DefaultNameSpace(_from_parsed_names(tuple(names)))
    return _from_parsed_names(names)
