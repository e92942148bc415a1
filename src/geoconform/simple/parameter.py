"""Immutable implementations of parameter descriptors and values."""

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..api import (
    GeneralParameterDescriptor,
    GeneralParameterValue,
    GenericName,
    Identifier,
    ParameterDescriptor,
    ParameterDescriptorGroup,
    ParameterNotFoundError,
    ParameterValue,
    ParameterValueGroup,
)
from ..api.metadata import Text


@dataclass(frozen=True)
class SimpleParameterDescriptor(ParameterDescriptor):
    name: Identifier
    value_class: type
    valid_values: Optional[Tuple[Any, ...]] = None
    default_value: Any = None
    minimum_value: Any = None
    maximum_value: Any = None
    unit: Optional[str] = None
    minimum_occurs: int = 1
    maximum_occurs: int = 1
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None


@dataclass(frozen=True)
class SimpleParameterDescriptorGroup(ParameterDescriptorGroup):
    name: Identifier
    descriptors: Tuple[GeneralParameterDescriptor, ...]
    minimum_occurs: int = 1
    maximum_occurs: int = 1
    alias: Tuple[GenericName, ...] = ()
    identifiers: Tuple[Identifier, ...] = ()
    remarks: Optional[Text] = None

    def descriptor(self, name: str) -> GeneralParameterDescriptor:
        for descriptor in self.descriptors:
            if descriptor.name.code == name:
                return descriptor
        raise ParameterNotFoundError(name)


@dataclass(frozen=True)
class SimpleParameterValue(ParameterValue):
    descriptor: ParameterDescriptor
    value: Any = None
    unit: Optional[str] = None


@dataclass(frozen=True)
class SimpleParameterValueGroup(ParameterValueGroup):
    descriptor: ParameterDescriptorGroup
    values: Tuple[GeneralParameterValue, ...]

    def parameter(self, name: str) -> ParameterValue:
        for value in self.values:
            if isinstance(value, ParameterValue) and value.descriptor.name.code == name:
                return value
        raise ParameterNotFoundError(name)
