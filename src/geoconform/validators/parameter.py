"""Validators for parameter descriptors and parameter values."""

from typing import Optional

from ..api import (
    GeneralParameterDescriptor,
    GeneralParameterValue,
    ParameterDescriptor,
    ParameterDescriptorGroup,
    ParameterNotFoundError,
    ParameterValue,
    ParameterValueGroup,
)
from ..assertions import (
    assert_between,
    assert_contains,
    assert_equal,
    assert_instance_of,
    assert_not_none,
    assert_positive,
    assert_valid_range,
    fail,
)
from .referencing import ReferencingValidator


def _lookup(group, method: str, name: str):
    try:
        return getattr(group, method)(name)
    except ParameterNotFoundError:
        fail(f"{type(group).__name__}: {method}('{name}') shall find the parameter listed in the group.", name)


class ParameterValidator(ReferencingValidator):
    """Validates parameter descriptors, values and their groups."""

    category = "parameter"

    def dispatch_descriptor(self, obj: Optional[GeneralParameterDescriptor]) -> int:
        n = 0
        if obj is not None:
            if isinstance(obj, ParameterDescriptor):
                self.validate_descriptor(obj)
                n += 1
            if isinstance(obj, ParameterDescriptorGroup):
                self.validate_descriptor_group(obj)
                n += 1
            if n == 0:
                self.validate_identified_object(obj)
        return n

    def dispatch_value(self, obj: Optional[GeneralParameterValue]) -> int:
        n = 0
        if obj is not None:
            if isinstance(obj, ParameterValue):
                self.validate_value(obj)
                n += 1
            if isinstance(obj, ParameterValueGroup):
                self.validate_value_group(obj)
                n += 1
            if n == 0:
                self.dispatch_descriptor(obj.descriptor)
        return n

    def validate_descriptor(self, obj: Optional[ParameterDescriptor]) -> None:
        """
        Checks that every value given by the descriptor is an instance of the
        value class, that the default value is inside the [minimum ... maximum]
        range and that the parameter occurs at most once.
        """
        if obj is None:
            return
        self.validate_identified_object(obj)
        value_class = obj.value_class
        self.mandatory("ParameterDescriptor: value_class can not be None.", value_class)
        if value_class is None:
            value_class = object
        valid_values = obj.valid_values
        if valid_values is not None:
            self.validate_collection(valid_values)
            for value in valid_values:
                if value is not None:
                    assert_instance_of(value_class, value, "ParameterDescriptor: valid_values has unexpected element.")
        minimum = obj.minimum_value
        if minimum is not None:
            assert_instance_of(value_class, minimum, "ParameterDescriptor: minimum_value is of unexpected type.")
        maximum = obj.maximum_value
        if maximum is not None:
            assert_instance_of(value_class, maximum, "ParameterDescriptor: maximum_value is of unexpected type.")
        assert_valid_range("ParameterDescriptor: inconsistent minimum and maximum values.", minimum, maximum)
        default = obj.default_value
        if default is not None:
            assert_instance_of(value_class, default, "ParameterDescriptor: default_value is of unexpected type.")
            assert_between("ParameterDescriptor: default_value out of range.", minimum, maximum, default)
        assert_between("ParameterDescriptor: minimum_occurs shall be 0 or 1.", 0, 1, obj.minimum_occurs)
        assert_equal(1, obj.maximum_occurs, "ParameterDescriptor: maximum_occurs shall be exactly 1.")

    def validate_descriptor_group(self, obj: Optional[ParameterDescriptorGroup]) -> None:
        if obj is None:
            return
        self.validate_identified_object(obj)
        descriptors = obj.descriptors
        if self.require_mandatory:
            # Not mandatory(), empty groups are allowed.
            assert_not_none(descriptors, "ParameterDescriptorGroup: descriptors shall not be None.")
        if descriptors is not None:
            self.validate_collection(descriptors)
            for descriptor in descriptors:
                assert_not_none(descriptor, "ParameterDescriptorGroup: descriptors can not contain None element.")
                self.dispatch_descriptor(descriptor)
                by_name = _lookup(obj, "descriptor", descriptor.name.code)
                self.mandatory("ParameterDescriptorGroup: descriptor(name) shall return a value.", by_name)
                if by_name is not None:
                    assert_equal(descriptor, by_name,
                                 "ParameterDescriptorGroup: descriptor(name) inconsistent with descriptors.")
        minimum_occurs = obj.minimum_occurs
        assert_positive("ParameterDescriptorGroup: minimum_occurs can not be negative.", minimum_occurs)
        assert_valid_range("ParameterDescriptorGroup: maximum_occurs gives inconsistent range.",
                           minimum_occurs, obj.maximum_occurs)

    def validate_value(self, obj: Optional[ParameterValue]) -> None:
        if obj is None:
            return
        descriptor = obj.descriptor
        self.mandatory("ParameterValue: shall have a descriptor.", descriptor)
        self.validate_descriptor(descriptor)
        value = obj.value
        if value is not None and descriptor is not None:
            if descriptor.value_class is not None:
                assert_instance_of(descriptor.value_class, value, "ParameterValue: value is of unexpected type.")
            valid_values = descriptor.valid_values
            if valid_values is not None:
                self.validate_collection(valid_values)
                assert_contains("ParameterValue: value is not a member of valid_values.", valid_values, value)
            assert_between("ParameterValue: value is out of bounds.",
                           descriptor.minimum_value, descriptor.maximum_value, value)

    def validate_value_group(self, obj: Optional[ParameterValueGroup]) -> None:
        """
        Checks that every value of the group is valid and that the lookups by
        name of the group and of its descriptor agree with the values list.
        """
        if obj is None:
            return
        descriptors = obj.descriptor
        self.mandatory("ParameterValueGroup: shall have a descriptor.", descriptors)
        self.validate_descriptor_group(descriptors)
        values = obj.values
        if self.require_mandatory:
            assert_not_none(values, "ParameterValueGroup: values shall not be None.")
        if values is None:
            return
        self.validate_collection(values)
        for value in values:
            assert_not_none(value, "ParameterValueGroup: values can not contain None element.")
            self.dispatch_value(value)
            descriptor = value.descriptor
            self.mandatory("GeneralParameterValue: expected a descriptor.", descriptor)
            if descriptor is None:
                continue
            name = descriptor.name.code if descriptor.name is not None else None
            self.mandatory("GeneralParameterDescriptor: expected a name.", name)
            if name is None:
                continue
            if descriptors is not None:
                by_name = _lookup(descriptors, "descriptor", name)
                self.mandatory("ParameterDescriptorGroup: descriptor(name) shall return a value.", by_name)
                if by_name is not None:
                    assert_equal(descriptor, by_name,
                                 "ParameterValueGroup: descriptor(name) inconsistent with value descriptor.")
            if isinstance(value, ParameterValue):
                by_name = _lookup(obj, "parameter", name)
                self.mandatory("ParameterValueGroup: parameter(name) shall return a value.", by_name)
                if by_name is not None:
                    assert_equal(value, by_name, "ParameterValueGroup: parameter(name) inconsistent with values.")
