"""Coordinate operation interfaces."""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Optional, Sequence

from .referencing import IdentifiedObject

if TYPE_CHECKING:
    from .crs import CoordinateReferenceSystem
    from .extent import Extent
    from .metadata import Citation, Text
    from .parameter import ParameterDescriptorGroup, ParameterValueGroup


class MathTransform(ABC):
    source_dimensions: int
    target_dimensions: int
    is_identity: bool = False


class Formula(ABC):
    formula: Optional[Text] = None
    citation: Optional[Citation] = None


class OperationMethod(IdentifiedObject):
    formula: Formula
    source_dimensions: Optional[int] = None
    target_dimensions: Optional[int] = None
    parameters: Optional[ParameterDescriptorGroup] = None


class CoordinateOperation(IdentifiedObject):
    source_crs: Optional[CoordinateReferenceSystem] = None
    target_crs: Optional[CoordinateReferenceSystem] = None
    operation_version: Optional[str] = None
    coordinate_operation_accuracy: Sequence[object] = ()
    domain_of_validity: Optional[Extent] = None
    scope: Optional[Text] = None
    math_transform: Optional[MathTransform] = None


class SingleOperation(CoordinateOperation):
    method: OperationMethod
    parameter_values: ParameterValueGroup


class Conversion(SingleOperation):
    pass


class Transformation(SingleOperation):
    pass


class PassThroughOperation(SingleOperation):
    operation: CoordinateOperation
    modified_coordinates: Sequence[int]


class ConcatenatedOperation(CoordinateOperation):
    operations: Sequence[CoordinateOperation]
