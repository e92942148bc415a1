"""
The set of validators, one per category, and the dispatcher routing an object
of unknown type to every validator whose interface it implements.
"""

from __future__ import annotations

from dataclasses import replace as replace_settings
from typing import Any, Callable, Dict, Optional, Tuple

from .. import api
from ..config import Settings
from ..logging import get_logger
from ..report import ValidationReport, current_walk, open_walk
from .base import Validator
from .citation import CitationValidator
from .crs import CRSValidator
from .cs import CSValidator
from .datum import DatumValidator
from .extent import ExtentValidator
from .geometry import GeometryValidator
from .metadata import MetadataBaseValidator
from .naming import NameValidator
from .operation import OperationValidator
from .parameter import ParameterValidator
from .quality import QualityValidator

logger = get_logger(__name__)

ValidatorFactory = Callable[["ValidatorContainer"], Validator]

CATEGORIES: Tuple[str, ...] = (
    "naming",
    "metadata",
    "citation",
    "extent",
    "quality",
    "datum",
    "cs",
    "crs",
    "parameter",
    "coordinate_operation",
    "geometry",
)

_DEFAULT_FACTORIES: Dict[str, type] = {
    "naming": NameValidator,
    "metadata": MetadataBaseValidator,
    "citation": CitationValidator,
    "extent": ExtentValidator,
    "quality": QualityValidator,
    "datum": DatumValidator,
    "cs": CSValidator,
    "crs": CRSValidator,
    "parameter": ParameterValidator,
    "coordinate_operation": OperationValidator,
    "geometry": GeometryValidator,
}

# (interface, category, handler name). Every matching row is invoked, in this order.
DISPATCH_TABLE: Tuple[Tuple[type, str, str], ...] = (
    (api.Metadata,              "metadata",             "validate_metadata"),
    (api.Identification,        "metadata",             "validate_identification"),
    (api.Citation,              "citation",             "validate_citation"),
    (api.CitationDate,          "citation",             "validate_date"),
    (api.ResponsibleParty,      "citation",             "validate_responsible_party"),
    (api.Contact,               "citation",             "validate_contact"),
    (api.Telephone,             "citation",             "validate_telephone"),
    (api.Address,               "citation",             "validate_address"),
    (api.OnlineResource,        "citation",             "validate_online_resource"),
    (api.Extent,                "extent",               "validate_extent"),
    (api.GeographicExtent,      "extent",               "dispatch"),
    (api.VerticalExtent,        "extent",               "validate_vertical_extent"),
    (api.TemporalExtent,        "extent",               "validate_temporal_extent"),
    (api.DataQuality,           "quality",              "validate_data_quality"),
    (api.Element,               "quality",              "validate_element"),
    (api.Result,                "quality",              "dispatch"),
    (api.Identifier,            "metadata",             "validate_identifier"),
    (api.GenericName,           "naming",               "dispatch"),
    (api.NameSpace,             "naming",               "validate_namespace"),
    (api.GeneralParameterValue, "parameter",            "dispatch_value"),
    (api.Envelope,              "geometry",             "validate_envelope"),
    (api.DirectPosition,        "geometry",             "validate_position"),
    (api.InternationalString,   "naming",               "validate_international_string"),
    (api.MathTransform,         "coordinate_operation", "validate_math_transform"),
    (api.Formula,               "coordinate_operation", "validate_formula"),
)

# Kinds of IdentifiedObject. An identified object matching none of them gets
# the identity checks only.
REFERENCING_TABLE: Tuple[Tuple[type, str, str], ...] = (
    (api.CoordinateReferenceSystem,  "crs",                  "dispatch"),
    (api.CoordinateSystem,           "cs",                   "dispatch"),
    (api.CoordinateSystemAxis,       "cs",                   "validate_axis"),
    (api.Datum,                      "datum",                "dispatch"),
    (api.Ellipsoid,                  "datum",                "validate_ellipsoid"),
    (api.PrimeMeridian,              "datum",                "validate_prime_meridian"),
    (api.GeneralParameterDescriptor, "parameter",            "dispatch_descriptor"),
    (api.CoordinateOperation,        "coordinate_operation", "dispatch"),
    (api.OperationMethod,            "coordinate_operation", "validate_method"),
)


class _CategorySlot:
    """Attribute access to the validator of one category."""

    def __set_name__(self, owner, name):
        self.category = name

    def __get__(self, container, owner=None):
        if container is None:
            return self
        return container._validators[self.category]

    def __set__(self, container, validator):
        container.replace(self.category, validator)


class ValidatorContainer:
    """
    Exactly one validator per category.

    A category validator can be customized either at construction time, by
    passing a factory receiving the container, or later with replace():

        container = ValidatorContainer(crs=MyCRSValidator)
        container.replace("geometry", MyGeometryValidator(container))

    Validators refer back to their container for validating nested objects,
    so a replaced validator is used for every callback as well.
    """

    naming = _CategorySlot()
    metadata = _CategorySlot()
    citation = _CategorySlot()
    extent = _CategorySlot()
    quality = _CategorySlot()
    datum = _CategorySlot()
    cs = _CategorySlot()
    crs = _CategorySlot()
    parameter = _CategorySlot()
    coordinate_operation = _CategorySlot()
    geometry = _CategorySlot()

    def __init__(self, settings: Optional[Settings] = None, **factories: ValidatorFactory):
        unknown = set(factories) - set(CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown validator categories: {sorted(unknown)}")
        self.settings = settings if settings is not None else Settings()
        self._validators: Dict[str, Validator] = {}
        for category in CATEGORIES:
            factory = factories.get(category) or _DEFAULT_FACTORIES[category]
            self.replace(category, factory(self))
        self.configure(**self.settings.policy_flags())

    @classmethod
    def default(cls, settings: Optional[Settings] = None) -> "ValidatorContainer":
        """Container with the default validator of every category."""
        return cls(settings=settings)

    @property
    def all(self) -> Tuple[Validator, ...]:
        """Read-only view of the validators, in category order."""
        return tuple(self._validators[category] for category in CATEGORIES)

    def replace(self, category: str, validator: Validator) -> None:
        if category not in _DEFAULT_FACTORIES:
            raise ValueError(f"Unknown validator category: {category}")
        expected = _DEFAULT_FACTORIES[category]
        if not isinstance(validator, expected):
            raise TypeError(f"Validator for '{category}' shall be an instance of {expected.__name__}, "
                            f"got {type(validator).__name__}.")
        self._validators[category] = validator

    def configure(self, **flags: Any) -> None:
        """Applies policy flags to every validator that declares them."""
        applied = set()
        for validator in self.all:
            for name, value in flags.items():
                if hasattr(validator, name):
                    setattr(validator, name, value)
                    applied.add(name)
        unknown = set(flags) - applied
        if unknown:
            raise ValueError(f"No validator has the policy flags {sorted(unknown)}")

    def copy(self) -> "ValidatorContainer":
        """Independent container with new validators of the same types and flags."""
        clone = ValidatorContainer(
            settings=replace_settings(self.settings),
            **{category: type(validator) for category, validator in self._validators.items()},
        )
        for category, validator in self._validators.items():
            target = clone._validators[category]
            for name in self.settings.policy_flags():
                if hasattr(validator, name):
                    setattr(target, name, getattr(validator, name))
        return clone

    def dispatch(self, obj: Any) -> int:
        """
        Validates obj with every category it belongs to.

        Returns the number of matching categories. Objects already visited in
        the current validation call are skipped. Outside of a validation call
        a fail-fast walk is opened, so the first failure is raised.
        """
        if obj is None:
            return 0
        walk = current_walk()
        if walk is None:
            with open_walk(ValidationReport(), max_depth=self.settings.max_depth, fail_fast=True):
                return self.dispatch(obj)
        if not walk.enter(obj):
            return 0
        try:
            n = self._run_table(walk, DISPATCH_TABLE, obj)
            if isinstance(obj, api.IdentifiedObject):
                matched = self._run_table(walk, REFERENCING_TABLE, obj)
                if matched == 0:
                    walk.run("crs", self.crs.dispatch_object, obj)
                    matched = 1
                n += matched
            if n == 0:
                logger.debug(f"No validator for {type(obj).__name__}")
            return n
        finally:
            walk.leave()

    def _run_table(self, walk, table, obj: Any) -> int:
        n = 0
        for interface, category, handler_name in table:
            if isinstance(obj, interface):
                # Resolved on each call so that replaced validators take effect.
                handler = getattr(self._validators[category], handler_name)
                walk.run(category, handler, obj)
                n += 1
        return n
