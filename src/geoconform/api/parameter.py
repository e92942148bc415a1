"""Parameter descriptor and parameter value interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from .referencing import IdentifiedObject


class ParameterNotFoundError(LookupError):
    """Raised by a group lookup when no parameter has the given name."""

    def __init__(self, name: str):
        super().__init__(f"No parameter named '{name}'.")
        self.name = name


class GeneralParameterDescriptor(IdentifiedObject):
    minimum_occurs: int = 1
    maximum_occurs: int = 1


class ParameterDescriptor(GeneralParameterDescriptor):
    value_class: type
    valid_values: Optional[Sequence[Any]] = None
    default_value: Any = None
    minimum_value: Any = None
    maximum_value: Any = None
    unit: Optional[str] = None


class ParameterDescriptorGroup(GeneralParameterDescriptor):
    descriptors: Sequence[GeneralParameterDescriptor]

    @abstractmethod
    def descriptor(self, name: str) -> GeneralParameterDescriptor:
        """Returns the descriptor of the given name, or raises ParameterNotFoundError."""


class GeneralParameterValue(ABC):
    descriptor: GeneralParameterDescriptor


class ParameterValue(GeneralParameterValue):
    descriptor: ParameterDescriptor
    value: Any = None
    unit: Optional[str] = None


class ParameterValueGroup(GeneralParameterValue):
    descriptor: ParameterDescriptorGroup
    values: Sequence[GeneralParameterValue]

    @abstractmethod
    def parameter(self, name: str) -> ParameterValue:
        """Returns the value of the given name, or raises ParameterNotFoundError."""
