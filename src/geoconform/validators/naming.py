"""
Validators for names, namespaces and international strings.

Namespaces and names refer to each other: a name has a scope, and a scope is
identified by a name. To terminate, the routine shared by local and scoped
names never validates the scope; only the public entry points do.
"""

from typing import Any, Optional, Sequence

from ..api import GenericName, InternationalString, LocalName, NameSpace, ScopedName
from ..assertions import assert_equal, assert_false, assert_not_none, assert_not_same, assert_same, assert_true
from .base import Validator


def _is_high_surrogate(c: str) -> bool:
    return 0xD800 <= ord(c) <= 0xDBFF


def _is_low_surrogate(c: str) -> bool:
    return 0xDC00 <= ord(c) <= 0xDFFF


def _self_comparable(obj: Any) -> bool:
    try:
        return not (obj < obj) and not (obj > obj)
    except TypeError:
        return False


class NameValidator(Validator):
    """Validates GenericName, LocalName, ScopedName, NameSpace and InternationalString."""

    category = "naming"

    def validate_international_string(self, obj: Optional[InternationalString]) -> None:
        if obj is None:
            return
        text = str(obj)
        self.mandatory("InternationalString: str() shall never return None.", text)
        if text is not None:
            assert_equal(len(text), len(obj), "InternationalString: length is inconsistent with str() length.")
            expect_low_surrogate = False
            for c in text:
                if expect_low_surrogate:
                    assert_true(_is_low_surrogate(c),
                                "InternationalString: high surrogate shall be followed by low surrogate.")
                else:
                    assert_false(_is_low_surrogate(c),
                                 "InternationalString: low surrogate shall follow a high surrogate.")
                expect_low_surrogate = _is_high_surrogate(c)
            assert_false(expect_low_surrogate,
                         "InternationalString: high surrogate shall be followed by low surrogate.")
        self.mandatory("InternationalString: to_string(None) shall not return None.", obj.to_string(None))
        assert_true(obj == obj, "InternationalString: shall be equal to itself.")
        assert_true(_self_comparable(obj), "InternationalString: shall be comparable to itself.")

    def validate_namespace(self, obj: Optional[NameSpace]) -> None:
        """
        Validates a namespace and, if it is not the global one, its name.

        The name of a namespace is fully qualified: its scope is global and it
        is its own fully qualified form.
        """
        if obj is None:
            return
        name = obj.name
        self.mandatory("NameSpace: shall have a name.", name)
        if name is None:
            return
        scope = name.scope
        self.mandatory("NameSpace: identifier shall have a global scope.", scope)
        if scope is not None:
            assert_true(scope.is_global, "NameSpace: identifier scope shall be global.")
        # Identity, not equality.
        assert_same(name, name.to_fully_qualified_name(),
                    "NameSpace: the identifier shall be fully qualified.")
        if not obj.is_global:
            self._validate_generic_name(name, name.parsed_names)

    def dispatch(self, obj: Optional[GenericName]) -> int:
        """Invokes the validate method of every name kind obj is an instance of."""
        n = 0
        if obj is not None:
            if isinstance(obj, LocalName):
                self.validate_local_name(obj)
                n += 1
            if isinstance(obj, ScopedName):
                self.validate_scoped_name(obj)
                n += 1
        return n

    def _validate_generic_name(self, obj: GenericName, parsed_names: Optional[Sequence[LocalName]]) -> None:
        # Shall not validate the scope, see module docstring.
        self.mandatory("GenericName: parsed_names shall not be None.", parsed_names)
        if parsed_names is not None:
            self.validate_collection(parsed_names)
            assert_false(len(parsed_names) == 0, "GenericName: parsed_names shall not be an empty list.")
            size = len(parsed_names)
            assert_equal(size, obj.depth, "GenericName: parsed_names size shall be equal to depth.")
            assert_equal(parsed_names[0], obj.head, "GenericName: head shall be the first parsed name.")
            assert_equal(parsed_names[size - 1], obj.tip, "GenericName: tip shall be the last parsed name.")

        fully_qualified = obj.to_fully_qualified_name()
        self.mandatory("GenericName: to_fully_qualified_name() shall not return None.", fully_qualified)
        if fully_qualified is not None:
            assert_equal(obj.scope.is_global, fully_qualified is obj,
                         "GenericName: to_fully_qualified_name() inconsistent with the global scope status.")

        unlocalized = str(obj)
        self.mandatory("GenericName: str() shall never return None.", unlocalized)
        if unlocalized is not None and fully_qualified is not None:
            assert_true(str(fully_qualified).endswith(unlocalized),
                        "GenericName: fully qualified name shall end with the name.")
        localized = obj.to_international_string()
        self.validate_international_string(localized)
        if localized is not None and fully_qualified is not None:
            assert_true(str(fully_qualified.to_international_string()).endswith(str(localized)),
                        "GenericName: fully qualified name shall end with the name (localized version).")

        assert_true(obj == obj, "GenericName: shall be equal to itself.")
        assert_true(_self_comparable(obj), "GenericName: shall be comparable to itself.")

    def validate_local_name(self, obj: Optional[LocalName]) -> None:
        if obj is None:
            return
        self.validate_namespace(obj.scope)
        parsed_names = obj.parsed_names
        self._validate_generic_name(obj, parsed_names)
        if parsed_names is not None:
            assert_equal(1, len(parsed_names), "LocalName: shall have exactly one parsed name.")
            assert_same(obj, parsed_names[0], "LocalName: the parsed name element shall be the enclosing local name.")

    def validate_scoped_name(self, obj: Optional[ScopedName]) -> None:
        if obj is None:
            return
        parsed_names = obj.parsed_names
        self._validate_generic_name(obj, parsed_names)
        scope = obj.scope
        self.validate_namespace(scope)
        if scope is not None:
            assert_equal(scope, obj.head.scope, "ScopedName: head scope shall be equal to the scope.")
        if parsed_names is not None:
            is_global = scope is not None and scope.is_global
            for name in parsed_names:
                assert_not_none(name, "ScopedName: parsed_names can not contain None element.")
                assert_not_same(obj, name, "ScopedName: the enclosing scoped name can not be in any parsed name.")
                assert_equal(is_global, name.scope.is_global, "ScopedName: inconsistent value of is_global.")
                is_global = False           # only the first name may be global
                self.validate_local_name(name)

        depth = obj.depth
        tail = obj.tail
        self.mandatory("ScopedName: tail shall not be None.", tail)
        if tail is not None:
            assert_equal(depth - 1, tail.depth,
                         "ScopedName: tail shall have one less element than the enclosing scoped name.")
            assert_equal(str(obj.tip), str(tail.tip), "ScopedName: tip and tail.tip shall be equal.")
            if parsed_names is not None:
                assert_equal(list(parsed_names[1:depth]), list(tail.parsed_names),
                             "ScopedName: tail shall be defined as parsed_names[1:depth].")

        path = obj.path
        self.mandatory("ScopedName: path shall not be None.", path)
        if path is not None:
            assert_equal(depth - 1, path.depth,
                         "ScopedName: path shall have one less element than the enclosing scoped name.")
            assert_equal(obj.head, path.head, "ScopedName: head and path.head shall be equal.")
            if parsed_names is not None:
                assert_equal(list(parsed_names[0:depth - 1]), list(path.parsed_names),
                             "ScopedName: path shall be defined as parsed_names[0:depth - 1].")
