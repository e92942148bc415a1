import math

import pytest

from geoconform.conformance import validate
from geoconform.errors import ConformanceFailure
from geoconform.simple import SimpleCitation, SimpleIdentification, SimpleMetadata
from geoconform.simple.extent import SimpleExtent
from geoconform.simple.metadata import identifier
from geoconform.simple.quality import (
    SimpleConformanceResult,
    SimpleDataQuality,
    SimpleElement,
    SimpleQuantitativeResult,
)


def conformance_result(passed=True):
    return SimpleConformanceResult(SimpleCitation("ISO 19111"), "All checks done.", passed)


class TestDataQuality:
    def test_complete_report(self, container):
        element = SimpleElement(
            results=(conformance_result(), SimpleQuantitativeResult((0.5, 0.7), value_unit="metre")),
            names_of_measure=("Positional accuracy",),
            measure_identification=identifier("DQ_1", "Quality registry"),
        )
        quality = SimpleDataQuality(SimpleExtent(description="Dataset"), reports=(element,), lineage="Survey")
        report = validate(quality, container)
        assert report.passed, report.failure_messages()

    def test_inside_metadata(self, container):
        """A failing element is reported under quality without stopping the metadata check."""
        quality = SimpleDataQuality(SimpleExtent(), reports=(SimpleElement(()),))
        metadata = SimpleMetadata(
            identification_info=(SimpleIdentification(SimpleCitation("Dataset"), "Abstract"),),
            data_quality_info=(quality,),
        )
        report = validate(metadata, container)
        assert report.failure_messages() == ["Element: shall have at least one result."]
        assert report.failures[0].category == "quality"
        assert report.failures[0].subject_type == "SimpleElement"

    def test_missing_scope(self, container):
        report = validate(SimpleDataQuality(None), container)
        assert report.failure_messages() == ["DataQuality: shall have a scope."]
        assert report.failures[0].category == "quality"

    def test_element_without_result(self, container):
        with pytest.raises(ConformanceFailure, match="at least one result"):
            container.quality.validate_element(SimpleElement(()))


class TestResults:
    def test_dispatch_count(self, container):
        assert container.quality.dispatch(conformance_result()) == 1
        assert container.quality.dispatch(SimpleQuantitativeResult(())) == 1

    def test_nan_measurement_passes(self, container):
        report = validate(SimpleQuantitativeResult((1.5, math.nan)), container)
        assert report.passed, report.failure_messages()

    def test_passed_shall_be_boolean(self, container):
        report = validate(conformance_result(passed="yes"), container)
        assert report.failures[0].message.startswith("ConformanceResult: passed shall be a boolean.")

    def test_missing_explanation(self, container):
        result = SimpleConformanceResult(SimpleCitation("ISO 19111"), None, False)
        assert validate(result, container).failure_messages() == ["Missing mandatory text."]

    def test_specification_shall_be_citation(self, container):
        result = SimpleConformanceResult("ISO 19111", "Explanation", True)
        with pytest.raises(ConformanceFailure, match="shall be a Citation"):
            container.quality.validate_conformance_result(result)
