"""Validators for coordinate reference systems."""

from typing import Optional, Tuple

from ..api import (
    AffineCS,
    CartesianCS,
    CompoundCRS,
    CoordinateReferenceSystem,
    CoordinateSystem,
    Conversion,
    EllipsoidalCS,
    EngineeringCRS,
    EngineeringDatum,
    GeneralDerivedCRS,
    GeocentricCRS,
    GeodeticCRS,
    GeodeticDatum,
    GeographicCRS,
    ImageCRS,
    ImageDatum,
    ProjectedCRS,
    SingleCRS,
    SphericalCS,
    TemporalCRS,
    TemporalDatum,
    TimeCS,
    VerticalCRS,
    VerticalCS,
    VerticalDatum,
)
from ..assertions import assert_instance_of, assert_not_none, assert_same, assert_true
from ..errors import StructuralInconsistency
from .referencing import ReferencingValidator

# Expected coordinate system and datum types of each single CRS kind.
_FAMILIES: Tuple[Tuple[type, tuple, type], ...] = (
    (GeographicCRS, (EllipsoidalCS,), GeodeticDatum),
    (GeocentricCRS, (CartesianCS, SphericalCS), GeodeticDatum),
    (ProjectedCRS, (CartesianCS,), GeodeticDatum),
    (VerticalCRS, (VerticalCS,), VerticalDatum),
    (TemporalCRS, (TimeCS,), TemporalDatum),
    (EngineeringCRS, (CoordinateSystem,), EngineeringDatum),
    (ImageCRS, (CartesianCS, AffineCS), ImageDatum),
)


def _names(kinds: tuple) -> str:
    return " or ".join(kind.__name__ for kind in kinds)


class CRSValidator(ReferencingValidator):
    """Validates coordinate reference systems of every kind."""

    category = "crs"

    def dispatch(self, obj: Optional[CoordinateReferenceSystem]) -> int:
        """Validates obj as every CRS kind it belongs to."""
        if obj is None:
            return 0
        n = 0
        self.validate_reference_system(obj)
        cs = obj.coordinate_system
        self.mandatory(f"{type(obj).__name__}: shall have a coordinate system.", cs)
        self.container.dispatch(cs)
        if isinstance(obj, SingleCRS):
            self.validate_single_crs(obj)
            n += 1
        if isinstance(obj, GeneralDerivedCRS):
            self.validate_derived_crs(obj)
            n += 1
        if isinstance(obj, CompoundCRS):
            self.validate_compound_crs(obj)
            n += 1
        return n

    def validate_single_crs(self, obj: SingleCRS) -> None:
        datum = obj.datum
        self.mandatory(f"{type(obj).__name__}: shall have a datum.", datum)
        self.container.dispatch(datum)
        if isinstance(obj, GeodeticCRS) and datum is not None:
            assert_instance_of(GeodeticDatum, datum, "GeodeticCRS: datum shall be a GeodeticDatum.")
        cs = obj.coordinate_system
        for kind, cs_kinds, datum_kind in _FAMILIES:
            if not isinstance(obj, kind):
                continue
            if cs is not None:
                assert_instance_of(cs_kinds, cs,
                                   f"{kind.__name__}: coordinate system shall be a {_names(cs_kinds)}.")
            if datum is not None:
                assert_instance_of(datum_kind, datum, f"{kind.__name__}: datum shall be a {datum_kind.__name__}.")

    def validate_derived_crs(self, obj: GeneralDerivedCRS) -> None:
        """The conversion from the base CRS shall start from that very base CRS instance."""
        base = obj.base_crs
        self.mandatory(f"{type(obj).__name__}: shall have a base CRS.", base)
        self.container.dispatch(base)
        if isinstance(obj, ProjectedCRS) and base is not None:
            assert_instance_of(GeodeticCRS, base, "ProjectedCRS: base CRS shall be a GeodeticCRS.")
        conversion = obj.conversion_from_base
        self.mandatory(f"{type(obj).__name__}: shall have a conversion from the base CRS.", conversion)
        if conversion is None:
            return
        assert_instance_of(Conversion, conversion, "GeneralDerivedCRS: conversion shall be a Conversion.")
        self.container.dispatch(conversion)
        if base is not None and conversion.source_crs is not None:
            assert_same(base, conversion.source_crs,
                        "GeneralDerivedCRS: conversion source CRS shall be the base CRS.")
        if conversion.target_crs is not None:
            assert_same(obj, conversion.target_crs,
                        "GeneralDerivedCRS: conversion target CRS shall be the derived CRS.")

    def validate_compound_crs(self, obj: CompoundCRS) -> None:
        components = obj.components
        self.mandatory("CompoundCRS: shall have components.", components)
        if components is None:
            return
        self.validate_collection(components)
        assert_true(len(components) >= 2, "CompoundCRS: shall have at least 2 components.")
        dimension = 0
        for component in components:
            assert_not_none(component, "CompoundCRS: components can not contain None element.")
            self.container.dispatch(component)
            cs = component.coordinate_system
            if cs is not None:
                dimension += cs.dimension
        cs = obj.coordinate_system
        if cs is not None and cs.dimension != dimension:
            raise StructuralInconsistency(
                f"CompoundCRS: coordinate system dimension ({cs.dimension}) shall be the sum "
                f"of the component dimensions ({dimension}).", cs.dimension, dimension)
