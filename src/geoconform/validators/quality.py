"""Validators for the data quality model (ISO 19115 DQ_* types)."""

from typing import Optional

from ..api import Citation, ConformanceResult, DataQuality, Element, QuantitativeResult, Result
from ..assertions import assert_instance_of
from .metadata import MetadataValidator


class QualityValidator(MetadataValidator):
    """Validates DataQuality, its report elements and their results."""

    category = "quality"

    def validate_data_quality(self, obj: Optional[DataQuality]) -> None:
        if obj is None:
            return
        self.mandatory("DataQuality: shall have a scope.", obj.scope)
        self.container.dispatch(obj.scope)
        for report in self.elements(Element, obj.reports):
            self.container.dispatch(report)
        self.validate_optional(obj.lineage)

    def validate_element(self, obj: Optional[Element]) -> None:
        if obj is None:
            return
        results = obj.results
        self.mandatory("Element: shall have at least one result.", results)
        for result in self.elements(Result, results):
            self.container.dispatch(result)
        for name in self.elements(object, obj.names_of_measure):
            self.validate_optional(name)
        self.container.dispatch(obj.measure_identification)
        self.validate_optional(obj.evaluation_method_description)

    def dispatch(self, obj: Optional[Result]) -> int:
        """Invokes the validate method of every result kind obj is an instance of."""
        n = 0
        if obj is not None:
            if isinstance(obj, ConformanceResult):
                self.validate_conformance_result(obj)
                n += 1
            if isinstance(obj, QuantitativeResult):
                self.validate_quantitative_result(obj)
                n += 1
        return n

    def validate_conformance_result(self, obj: Optional[ConformanceResult]) -> None:
        if obj is None:
            return
        specification = obj.specification
        self.mandatory("ConformanceResult: shall have a specification.", specification)
        if specification is not None:
            assert_instance_of(Citation, specification, "ConformanceResult: specification shall be a Citation.")
            self.container.dispatch(specification)
        self.validate_mandatory(obj.explanation)
        self.mandatory("ConformanceResult: shall tell whether the result passed.", obj.passed)
        if obj.passed is not None:
            assert_instance_of(bool, obj.passed, "ConformanceResult: passed shall be a boolean.")

    def validate_quantitative_result(self, obj: Optional[QuantitativeResult]) -> None:
        if obj is None:
            return
        self.elements(object, obj.values)
        self.validate_optional(obj.value_unit)
        self.validate_optional(obj.error_statistic)
