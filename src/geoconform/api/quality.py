"""Data quality interfaces (ISO 19115 DQ_* types)."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Any, Optional, Sequence

if TYPE_CHECKING:
    from .metadata import Citation, Identifier, Text


class Result(ABC):
    """Value or set of values obtained from applying a quality measure."""


class ConformanceResult(Result):
    specification: Citation
    explanation: Text
    passed: Optional[bool]


class QuantitativeResult(Result):
    values: Sequence[Any]
    value_unit: Optional[str] = None
    error_statistic: Optional[Text] = None


class Element(ABC):
    """One aspect of quantitative quality information."""
    results: Sequence[Result]
    names_of_measure: Sequence[Text] = ()
    measure_identification: Optional[Identifier] = None
    evaluation_method_description: Optional[Text] = None


class DataQuality(ABC):
    scope: Any
    reports: Sequence[Element] = ()
    lineage: Optional[Text] = None
