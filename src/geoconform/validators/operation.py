"""Validators for coordinate operations, operation methods and math transforms."""

from typing import Optional

from ..api import (
    Citation,
    ConcatenatedOperation,
    Conversion,
    CoordinateOperation,
    Formula,
    MathTransform,
    OperationMethod,
    PassThroughOperation,
    SingleOperation,
    Transformation,
)
from ..assertions import (
    assert_between,
    assert_equal,
    assert_instance_of,
    assert_not_none,
    assert_positive,
    assert_same,
    assert_true,
)
from ..errors import StructuralInconsistency
from .referencing import ReferencingValidator


def _dimension_of(crs) -> Optional[int]:
    if crs is None or crs.coordinate_system is None:
        return None
    return crs.coordinate_system.dimension


class OperationValidator(ReferencingValidator):
    """Validates coordinate operations and the objects they are made of."""

    category = "coordinate_operation"

    def dispatch(self, obj: Optional[CoordinateOperation]) -> int:
        """Validates obj as every operation kind it belongs to."""
        if obj is None:
            return 0
        n = 0
        self.validate_operation(obj)
        if isinstance(obj, (Conversion, Transformation)):
            self.validate_single_operation(obj)
            n += 1
        if isinstance(obj, Transformation):
            self.validate_transformation(obj)
            n += 1
        if isinstance(obj, PassThroughOperation):
            self.validate_pass_through(obj)
            n += 1
        if isinstance(obj, ConcatenatedOperation):
            self.validate_concatenated(obj)
            n += 1
        return n

    def validate_operation(self, obj: CoordinateOperation) -> None:
        """Checks common to all coordinate operations."""
        self.validate_identified_object(obj)
        self.validate_text(obj.scope)
        self.container.dispatch(obj.domain_of_validity)
        source = obj.source_crs
        target = obj.target_crs
        self.container.dispatch(source)
        self.container.dispatch(target)
        self.validate_collection(obj.coordinate_operation_accuracy)
        transform = obj.math_transform
        if transform is None:
            return
        self.container.dispatch(transform)
        source_dimension = _dimension_of(source)
        if source_dimension is not None and source_dimension != transform.source_dimensions:
            raise StructuralInconsistency(
                f"CoordinateOperation: math transform source dimensions ({transform.source_dimensions}) "
                f"shall match the source CRS dimension ({source_dimension}).")
        target_dimension = _dimension_of(target)
        if target_dimension is not None and target_dimension != transform.target_dimensions:
            raise StructuralInconsistency(
                f"CoordinateOperation: math transform target dimensions ({transform.target_dimensions}) "
                f"shall match the target CRS dimension ({target_dimension}).")

    def validate_single_operation(self, obj: SingleOperation) -> None:
        method = obj.method
        self.mandatory(f"{type(obj).__name__}: shall have a method.", method)
        if method is not None:
            assert_instance_of(OperationMethod, method, "SingleOperation: method shall be an OperationMethod.")
            self.container.dispatch(method)
        parameters = obj.parameter_values
        self.mandatory(f"{type(obj).__name__}: shall have parameter values.", parameters)
        self.container.dispatch(parameters)

    def validate_transformation(self, obj: Transformation) -> None:
        self.mandatory("Transformation: shall have a source CRS.", obj.source_crs)
        self.mandatory("Transformation: shall have a target CRS.", obj.target_crs)
        self.mandatory("Transformation: shall have an operation version.", obj.operation_version)

    def validate_pass_through(self, obj: PassThroughOperation) -> None:
        """The modified coordinates shall be distinct, ascending indices into the source coordinates."""
        operation = obj.operation
        self.mandatory("PassThroughOperation: shall have an operation.", operation)
        self.container.dispatch(operation)
        indices = obj.modified_coordinates
        self.mandatory("PassThroughOperation: shall have modified coordinates.", indices)
        if indices is None or len(indices) == 0:
            return
        source_dimension = _dimension_of(obj.source_crs)
        previous = -1
        for index in indices:
            assert_positive("PassThroughOperation: modified coordinate index can not be negative.", index)
            assert_true(index > previous, "PassThroughOperation: modified coordinates shall be strictly increasing.")
            if source_dimension is not None:
                assert_between("PassThroughOperation: modified coordinate index out of bounds.",
                               0, source_dimension - 1, index)
            previous = index

    def validate_concatenated(self, obj: ConcatenatedOperation) -> None:
        """Each step shall start from the very CRS instance where the previous step ended."""
        steps = obj.operations
        self.mandatory("ConcatenatedOperation: shall have operations.", steps)
        if steps is None:
            return
        steps = list(steps)
        self.validate_collection(steps)
        assert_true(len(steps) >= 2, "ConcatenatedOperation: shall have at least 2 operations.")
        for step in steps:
            assert_not_none(step, "ConcatenatedOperation: operations can not contain None element.")
            self.container.dispatch(step)
        for i in range(1, len(steps)):
            before, after = steps[i - 1].target_crs, steps[i].source_crs
            if before is not None and after is not None:
                assert_same(before, after,
                            f"ConcatenatedOperation: source CRS of step {i} shall be the target CRS of step {i - 1}.")
        if obj.source_crs is not None and steps[0].source_crs is not None:
            assert_same(obj.source_crs, steps[0].source_crs,
                        "ConcatenatedOperation: source CRS shall be the source CRS of the first step.")
        if obj.target_crs is not None and steps[-1].target_crs is not None:
            assert_same(obj.target_crs, steps[-1].target_crs,
                        "ConcatenatedOperation: target CRS shall be the target CRS of the last step.")

    def validate_method(self, obj: Optional[OperationMethod]) -> None:
        if obj is None:
            return
        self.validate_identified_object(obj)
        formula = obj.formula
        self.mandatory("OperationMethod: shall have a formula.", formula)
        self.container.dispatch(formula)
        if obj.source_dimensions is not None:
            assert_positive("OperationMethod: source dimensions can not be negative.", obj.source_dimensions)
        if obj.target_dimensions is not None:
            assert_positive("OperationMethod: target dimensions can not be negative.", obj.target_dimensions)
        self.container.dispatch(obj.parameters)

    def validate_formula(self, obj: Optional[Formula]) -> None:
        if obj is None:
            return
        citation = obj.citation
        if citation is None:
            self.mandatory("Formula: shall have a formula text or a citation.", obj.formula)
        self.validate_text(obj.formula)
        if citation is not None:
            assert_instance_of(Citation, citation, "Formula: citation shall be a Citation.")
            self.container.dispatch(citation)

    def validate_math_transform(self, obj: Optional[MathTransform]) -> None:
        if obj is None:
            return
        assert_positive("MathTransform: source dimensions can not be negative.", obj.source_dimensions)
        assert_positive("MathTransform: target dimensions can not be negative.", obj.target_dimensions)
        if obj.is_identity:
            assert_equal(obj.source_dimensions, obj.target_dimensions,
                         "MathTransform: an identity transform shall have the same source and target dimensions.")
