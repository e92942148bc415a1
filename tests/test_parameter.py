import pytest

from geoconform.api import ParameterNotFoundError
from geoconform.conformance import validate
from geoconform.errors import ConformanceFailure
from geoconform.simple.metadata import identifier
from geoconform.simple.parameter import (
    SimpleParameterDescriptor,
    SimpleParameterDescriptorGroup,
    SimpleParameterValue,
    SimpleParameterValueGroup,
)


def latitude(**kwargs):
    options = dict(default_value=0.0, minimum_value=-90.0, maximum_value=90.0, unit="degree")
    options.update(kwargs)
    return SimpleParameterDescriptor(identifier("Latitude of natural origin", "EPSG"), float, **options)


def longitude():
    return SimpleParameterDescriptor(identifier("Longitude of natural origin", "EPSG"), float,
                                     default_value=0.0, minimum_value=-180.0, maximum_value=180.0)


def mercator_values():
    lat, lon = latitude(), longitude()
    group = SimpleParameterDescriptorGroup(identifier("Mercator (variant A)", "EPSG"), (lat, lon))
    return SimpleParameterValueGroup(group, (SimpleParameterValue(lat, 0.0), SimpleParameterValue(lon, 3.0)))


class HiddenDescriptorGroup(SimpleParameterDescriptorGroup):
    def descriptor(self, name):
        raise ParameterNotFoundError(name)


class FirstValueGroup(SimpleParameterValueGroup):
    def parameter(self, name):
        return self.values[0]


class TestDescriptors:
    def test_valid_descriptor(self, container):
        report = validate(latitude(), container)
        assert report.passed, report.failure_messages()

    def test_dispatch_counts(self, container):
        assert container.parameter.dispatch_descriptor(latitude()) == 1
        assert container.parameter.dispatch_value(SimpleParameterValue(latitude(), 10.0)) == 1

    def test_default_out_of_range(self, container):
        report = validate(latitude(default_value=100.0), container)
        assert report.failures[0].message.startswith("ParameterDescriptor: default_value out of range.")
        assert report.failures[0].category == "parameter"

    def test_inverted_range(self, container):
        with pytest.raises(ConformanceFailure, match="inconsistent minimum and maximum"):
            container.parameter.validate_descriptor(latitude(minimum_value=90.0, maximum_value=-90.0,
                                                             default_value=None))

    def test_valid_values_of_wrong_type(self, container):
        descriptor = SimpleParameterDescriptor(identifier("Hemisphere"), str, valid_values=("north", 0))
        with pytest.raises(ConformanceFailure, match="valid_values has unexpected element"):
            container.parameter.validate_descriptor(descriptor)

    def test_maximum_occurs(self, container):
        with pytest.raises(ConformanceFailure, match="maximum_occurs shall be exactly 1"):
            container.parameter.validate_descriptor(latitude(maximum_occurs=2))

    def test_missing_value_class(self, container):
        descriptor = SimpleParameterDescriptor(identifier("Anything"), None)
        report = validate(descriptor, container)
        assert report.failure_messages() == ["ParameterDescriptor: value_class can not be None."]

    def test_group(self, container):
        group = mercator_values().descriptor
        assert validate(group, container).passed

    def test_group_lookup_fails(self, container):
        group = HiddenDescriptorGroup(identifier("Mercator"), (latitude(),))
        report = validate(group, container)
        assert report.failure_messages() == [
            "HiddenDescriptorGroup: descriptor('Latitude of natural origin') shall find "
            "the parameter listed in the group."
        ]


class TestValues:
    def test_valid_value(self, container):
        assert validate(SimpleParameterValue(latitude(), 45.0), container).passed

    def test_value_out_of_bounds(self, container):
        report = validate(SimpleParameterValue(latitude(), 95.0), container)
        assert report.failures[0].message.startswith("ParameterValue: value is out of bounds.")

    def test_value_of_wrong_type(self, container):
        with pytest.raises(ConformanceFailure, match="value is of unexpected type"):
            container.parameter.validate_value(SimpleParameterValue(latitude(), "45"))

    def test_value_not_in_valid_values(self, container):
        descriptor = SimpleParameterDescriptor(identifier("Hemisphere"), str, valid_values=("north", "south"))
        assert validate(SimpleParameterValue(descriptor, "north"), container).passed
        with pytest.raises(ConformanceFailure, match="not a member of valid_values"):
            container.parameter.validate_value(SimpleParameterValue(descriptor, "east"))

    def test_value_without_descriptor(self, container):
        report = validate(SimpleParameterValue(None, 1.0), container)
        assert report.failure_messages() == ["ParameterValue: shall have a descriptor."]

    def test_value_group(self, container):
        values = mercator_values()
        assert values.parameter("Longitude of natural origin").value == 3.0
        report = validate(values, container)
        assert report.passed, report.failure_messages()

    def test_value_group_lookup_inconsistent(self, container):
        values = mercator_values()
        broken = FirstValueGroup(values.descriptor, values.values)
        report = validate(broken, container)
        assert report.failures[0].message.startswith("ParameterValueGroup: parameter(name) inconsistent with values.")

    def test_unknown_parameter(self):
        with pytest.raises(ParameterNotFoundError):
            mercator_values().parameter("False easting")
