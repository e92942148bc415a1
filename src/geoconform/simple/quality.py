"""Immutable implementations of the data quality interfaces."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..api import Citation, ConformanceResult, DataQuality, Element, Identifier, QuantitativeResult, Result
from ..api.metadata import Text


@dataclass(frozen=True)
class SimpleConformanceResult(ConformanceResult):
    specification: Citation
    explanation: Text
    passed: Optional[bool]


@dataclass(frozen=True)
class SimpleQuantitativeResult(QuantitativeResult):
    values: Tuple[Any, ...]
    value_unit: Optional[str] = None
    error_statistic: Optional[Text] = None


@dataclass(frozen=True)
class SimpleElement(Element):
    results: Tuple[Result, ...]
    names_of_measure: Tuple[Text, ...] = ()
    measure_identification: Optional[Identifier] = None
    evaluation_method_description: Optional[Text] = None


@dataclass(frozen=True)
class SimpleDataQuality(DataQuality):
    scope: Any
    reports: Tuple[Element, ...] = ()
    lineage: Optional[Text] = None
