import pytest
from hypothesis import given, strategies as st

from geoconform.conformance import validate
from geoconform.errors import ConformanceFailure
from geoconform.simple.names import (
    GLOBAL,
    DefaultLocalName,
    DefaultNameSpace,
    DefaultScopedName,
    SimpleInternationalString,
    create_name,
)
from geoconform.validators.container import ValidatorContainer


class DetachedLocalName(DefaultLocalName):
    """parsed_names returns a copy instead of the name itself."""

    @property
    def parsed_names(self):
        return (DefaultLocalName(self.scope, self.text),)


class ShiftedScopedName(DefaultScopedName):
    """tail returns the path."""

    @property
    def tail(self):
        return self.path


class CopyQualifiedLocalName(DefaultLocalName):
    """Returns an equal copy as its fully qualified name, even in the global namespace."""

    def to_fully_qualified_name(self):
        return DefaultLocalName(self.scope, self.text)


class SelfQualifiedLocalName(DefaultLocalName):
    """Claims to be fully qualified whatever its scope."""

    def to_fully_qualified_name(self):
        return self


class ElsewhereQualifiedLocalName(DefaultLocalName):
    """Qualifies itself as a name with another tip."""

    def to_fully_qualified_name(self):
        return create_name("a:x")


class DecoratedLocalName(DefaultLocalName):
    """The localized form carries a suffix that the qualified form lacks."""

    def to_international_string(self):
        return SimpleInternationalString(f"{self.text} (en)")


class SkippingPathScopedName(DefaultScopedName):
    """path keeps the head and the tip instead of dropping the tip."""

    @property
    def path(self):
        return DefaultScopedName((self.parsed_names[0], self.parsed_names[-1]))


class SelfPrecedingLocalName(DefaultLocalName):
    """Claims to sort before everything, itself included."""

    def __lt__(self, other):
        return True


class TestSimpleNames:
    def test_scoped_name_structure(self):
        name = create_name("a:b:c")
        assert name.depth == 3
        assert str(name.head) == "a"
        assert str(name.tip) == "c"
        assert name.tail.depth == 2
        assert name.path.depth == 2
        assert str(name.tail) == "b:c"
        assert str(name.path) == "a:b"
        assert name.tail.tip == name.tip

    def test_scopes(self):
        name = create_name("a:b:c")
        assert name.scope is GLOBAL
        assert str(name.tip.scope.name) == "a:b"
        assert name.to_fully_qualified_name() is name
        assert str(name.tip.to_fully_qualified_name()) == "a:b:c"

    def test_local_name(self):
        name = create_name("EPSG")
        assert isinstance(name, DefaultLocalName)
        assert name.parsed_names == (name,)
        assert name.scope.is_global

    def test_custom_separator(self):
        assert create_name("urn/ogc/def", "/").depth == 3

    def test_global_namespace(self):
        assert GLOBAL.is_global
        assert not DefaultNameSpace(create_name("a")).is_global
        assert GLOBAL.name.to_fully_qualified_name() is GLOBAL.name

    def test_scoped_name_needs_two_elements(self):
        with pytest.raises(ValueError):
            DefaultScopedName([DefaultLocalName(GLOBAL, "a")])


class TestNameValidator:
    def test_scoped_name_passes(self, container):
        report = validate(create_name("a:b:c"), container)
        assert report.passed, report.failure_messages()

    def test_dispatch_count(self, container):
        assert container.naming.dispatch(create_name("a")) == 1
        assert container.naming.dispatch(create_name("a:b")) == 1
        assert container.naming.dispatch(None) == 0

    def test_namespace_passes(self, container):
        namespace = create_name("a:b").tip.scope
        assert validate(namespace, container).passed

    @given(st.lists(st.text(alphabet="abxyz", min_size=1, max_size=4), min_size=1, max_size=4))
    def test_created_names_pass(self, elements):
        """Every name built by create_name follows the name invariants."""
        name = create_name(":".join(elements))
        report = validate(name, ValidatorContainer.default())
        assert report.passed, report.failure_messages()

    def test_global_scope_after_head_fails(self, container):
        name = DefaultScopedName([DefaultLocalName(GLOBAL, "a"), DefaultLocalName(GLOBAL, "b")])
        report = validate(name, container)
        assert len(report.failures) == 1
        assert report.failures[0].message.startswith("ScopedName: inconsistent value of is_global.")
        assert report.failures[0].category == "naming"

    def test_detached_parsed_name_fails(self, container):
        with pytest.raises(ConformanceFailure, match="enclosing local name"):
            container.naming.validate_local_name(DetachedLocalName(GLOBAL, "a"))

    def test_wrong_tail_fails(self, container):
        name = create_name("a:b:c")
        shifted = ShiftedScopedName(name.parsed_names)
        with pytest.raises(ConformanceFailure, match="tip and tail.tip"):
            container.naming.validate_scoped_name(shifted)

    def test_global_name_shall_be_its_own_qualified_name(self, container):
        with pytest.raises(ConformanceFailure, match="inconsistent with the global scope status"):
            container.naming.validate_local_name(CopyQualifiedLocalName(GLOBAL, "a"))

    def test_scoped_local_name_shall_not_be_its_own_qualified_name(self, container):
        scope = create_name("a:b").tip.scope
        with pytest.raises(ConformanceFailure, match="inconsistent with the global scope status"):
            container.naming.validate_local_name(SelfQualifiedLocalName(scope, "b"))

    def test_qualified_name_shall_end_with_name(self, container):
        scope = create_name("a:b").tip.scope
        with pytest.raises(ConformanceFailure, match=r"fully qualified name shall end with the name\.$"):
            container.naming.validate_local_name(ElsewhereQualifiedLocalName(scope, "b"))

    def test_localized_qualified_name_shall_end_with_name(self, container):
        scope = create_name("a:b").tip.scope
        with pytest.raises(ConformanceFailure, match="localized version"):
            container.naming.validate_local_name(DecoratedLocalName(scope, "b"))

    def test_wrong_path_fails(self, container):
        name = SkippingPathScopedName(create_name("a:b:c").parsed_names)
        with pytest.raises(ConformanceFailure, match=r"path shall be defined as parsed_names\[0:depth - 1\]"):
            container.naming.validate_scoped_name(name)

    def test_name_shall_be_comparable_to_itself(self, container):
        with pytest.raises(ConformanceFailure, match="GenericName: shall be comparable to itself"):
            container.naming.validate_local_name(SelfPrecedingLocalName(GLOBAL, "a"))

    def test_namespace_name_shall_be_global(self, container):
        namespace = DefaultNameSpace(create_name("a:b").tip)
        with pytest.raises(ConformanceFailure, match="scope shall be global"):
            container.naming.validate_namespace(namespace)


class TestInternationalString:
    def test_plain_text(self, container):
        text = SimpleInternationalString("Geodetic latitude", {"fr": "Latitude géodésique"})
        assert text.to_string("fr") == "Latitude géodésique"
        assert text.to_string("de") == "Geodetic latitude"
        assert validate(text, container).passed

    def test_surrogate_pair(self, container):
        container.naming.validate_international_string(SimpleInternationalString("x😀"))

    def test_lone_high_surrogate_fails(self, container):
        with pytest.raises(ConformanceFailure, match="high surrogate"):
            container.naming.validate_international_string(SimpleInternationalString("\ud800x"))

    def test_lone_low_surrogate_fails(self, container):
        with pytest.raises(ConformanceFailure, match="low surrogate shall follow"):
            container.naming.validate_international_string(SimpleInternationalString("\udc00"))
