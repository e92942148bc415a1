import pytest

from geoconform.api import Citation, Identifier
from geoconform.config import Settings
from geoconform.conformance import assert_valid, validate
from geoconform.errors import ConformanceError, ConformanceFailure, StructuralInconsistency
from geoconform.simple import SimpleCitation, SimpleEnvelope, SimpleIdentification, SimpleMetadata, geographic_crs
from geoconform.simple.metadata import SimpleIdentifier, identifier
from geoconform.validators import CATEGORIES, CRSValidator, CSValidator, GeometryValidator, ValidatorContainer


class CountingCRSValidator(CRSValidator):
    """Counts the CRS that reach the crs category."""

    def __init__(self, container, logger_name=None):
        super().__init__(container, logger_name)
        self.count = 0

    def dispatch(self, obj):
        self.count += 1
        super().dispatch(obj)


class LoopCitation(Citation):
    """Citation whose identifier names the citation itself as authority."""

    def __init__(self):
        self.title = "Loop authority"
        self.identifiers = (LoopIdentifier(self),)


class LoopIdentifier(Identifier):
    def __init__(self, authority):
        self.code = "loop"
        self.authority = authority


class SelfCitingIdentifier(Identifier, Citation):
    """An identifier that is its own authority."""

    def __init__(self):
        self.code = "self"
        self.title = "Self"

    @property
    def authority(self):
        return self


def nested_metadata():
    citation = SimpleCitation("Dataset", identifiers=(identifier("dataset-1", "Registry"),))
    return SimpleMetadata(identification_info=(SimpleIdentification(citation, "Abstract"),))


class TestContainerSetup:
    def test_one_validator_per_category(self, container):
        assert [v.category for v in container.all] == list(CATEGORIES)
        assert len(container.all) == 11
        for validator in container.all:
            assert validator.container is container

    def test_category_attributes(self, container):
        assert isinstance(container.crs, CRSValidator)
        assert isinstance(container.cs, CSValidator)
        assert isinstance(container.geometry, GeometryValidator)

    def test_factory_at_construction(self):
        container = ValidatorContainer(crs=CountingCRSValidator)
        assert isinstance(container.crs, CountingCRSValidator)
        assert container.crs.container is container

    def test_unknown_factory(self):
        with pytest.raises(ValueError, match="Unknown validator categories"):
            ValidatorContainer(bogus=CRSValidator)

    def test_replace_rejects_wrong_type(self, container):
        with pytest.raises(TypeError):
            container.replace("crs", GeometryValidator(container))
        with pytest.raises(ValueError):
            container.replace("bogus", GeometryValidator(container))

    def test_replaced_validator_receives_callbacks(self, container):
        """An envelope reaches the replaced crs validator through the container."""
        counting = CountingCRSValidator(container)
        container.crs = counting
        envelope = SimpleEnvelope((-10.0, -10.0), (10.0, 10.0), geographic_crs())
        assert validate(envelope, container).passed
        assert counting.count == 1

    def test_settings_become_flags(self):
        container = ValidatorContainer.default(Settings(require_mandatory=False, tolerance=1e-3))
        assert all(not v.require_mandatory for v in container.all)
        assert container.geometry.tolerance == 1e-3
        assert container.datum.tolerance == 1e-3


class TestConfigure:
    def test_configure_all(self, container):
        container.configure(enforce_forbidden=False)
        assert all(not v.enforce_forbidden for v in container.all)

    def test_configure_declared_only(self, container):
        container.configure(enforce_standard_names=True)
        assert container.cs.enforce_standard_names
        assert not hasattr(container.geometry, "enforce_standard_names")

    def test_unknown_flag(self, container):
        with pytest.raises(ValueError, match="no_such_flag"):
            container.configure(no_such_flag=True)

    def test_copy_is_independent(self, container):
        container.configure(require_mandatory=False)
        clone = container.copy()
        assert clone.cs is not container.cs
        assert clone.cs.container is clone
        assert not clone.cs.require_mandatory
        clone.configure(require_mandatory=True)
        assert not container.cs.require_mandatory

    def test_copy_keeps_validator_types(self):
        container = ValidatorContainer(crs=CountingCRSValidator)
        assert isinstance(container.copy().crs, CountingCRSValidator)


class TestDispatch:
    def test_match_count(self, container):
        assert container.dispatch(None) == 0
        assert container.dispatch(object()) == 0
        assert container.dispatch(SimpleIdentifier("code")) == 1
        assert container.dispatch(SelfCitingIdentifier()) == 2

    def test_no_interface_gives_empty_report(self, container):
        report = validate(object(), container)
        assert report.passed
        assert report.visited_count == 1

    def test_failure_is_attributed(self, container):
        report = validate(SimpleIdentifier(None), container)
        assert len(report.failures) == 1
        failure = report.failures[0]
        assert failure.category == "metadata"
        assert failure.subject_type == "SimpleIdentifier"
        assert failure.describe() == "[metadata] SimpleIdentifier: Identifier: shall have a code."

    def test_dispatch_outside_walk_raises(self, container):
        with pytest.raises(ConformanceFailure, match="shall have a code"):
            container.dispatch(SimpleIdentifier(None))

    def test_fail_fast(self, container):
        with pytest.raises(ConformanceFailure):
            validate(SimpleIdentifier(None), container, fail_fast=True)

    def test_assert_valid(self, container):
        assert_valid(nested_metadata(), container)
        with pytest.raises(ConformanceError, match="1 conformance failure"):
            assert_valid(SimpleIdentifier(None), container)

    def test_lenient_mandatory_is_a_warning(self):
        container = ValidatorContainer.default(Settings(require_mandatory=False))
        report = validate(SimpleIdentifier(None), container)
        assert report.passed
        assert report.warnings_by_category() == {"metadata": ["Identifier: shall have a code."]}
        assert report.warnings[0].obligation == "mandatory"


class TestCycles:
    def test_authority_cycle_terminates(self, container):
        """citation -> identifier -> same citation is validated once."""
        citation = LoopCitation()
        report = validate(citation, container)
        assert report.passed, report.failure_messages()
        assert report.visited_count == 2

    def test_self_authority(self, container):
        assert validate(SelfCitingIdentifier(), container).passed

    def test_visited_state_is_per_call(self, container):
        crs = geographic_crs()
        envelope = SimpleEnvelope((0.0, 0.0), (1.0, 1.0), crs)
        counting = CountingCRSValidator(container)
        container.crs = counting
        validate(envelope, container)
        validate(envelope, container)
        assert counting.count == 2

    def test_depth_bound(self):
        container = ValidatorContainer.default(Settings(max_depth=3))
        report = validate(nested_metadata(), container)
        assert len(report.failures) == 1
        assert isinstance(report.failures[0], StructuralInconsistency)
        assert "deeper than 3" in report.failures[0].message

    def test_default_depth_is_enough(self, container):
        assert validate(nested_metadata(), container).passed
