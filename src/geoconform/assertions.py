"""
Assertion primitives shared by all validators.

Every primitive raises ConformanceFailure with a human readable message and the
offending values. Floating point helpers follow IEEE semantics: range checks
tolerate NaN values, range validity checks do not.
"""

import math
import numbers
from typing import Any, Collection, Optional, Sequence

from .errors import ConformanceFailure

UNRESTRICTED = "##unrestricted"
"""Wildcard for string arguments whose value shall not be verified."""


def _prefix(message: Optional[str]) -> str:
    return message.strip() + " " if message else ""


def _concat(message: Optional[str], ext: str) -> str:
    if message is None or not message.strip():
        return ext
    return message.strip() + " " + ext


def _both_nan(a: Any, b: Any) -> bool:
    return (
        isinstance(a, numbers.Real) and isinstance(b, numbers.Real)
        and math.isnan(a) and math.isnan(b)
    )


def fail(message: str, *values: Any) -> None:
    raise ConformanceFailure(message, *values)


def assert_true(condition: bool, message: str) -> None:
    if not condition:
        fail(message)


def assert_false(condition: bool, message: str) -> None:
    if condition:
        fail(message)


def assert_none(value: Any, message: str) -> None:
    if value is not None:
        fail(_concat(message, f"Expected None but got {value!r}."), value)


def assert_not_none(value: Any, message: str) -> None:
    if value is None:
        fail(message)


def assert_equal(expected: Any, actual: Any, message: str) -> None:
    """Exact equality; two NaN values are considered equal."""
    if expected is actual or _both_nan(expected, actual):
        return
    if not expected == actual:
        fail(_concat(message, f"Expected {expected!r} but got {actual!r}."), expected, actual)


def assert_close(expected: float, actual: float, tolerance: float, message: str) -> None:
    if expected == actual or _both_nan(expected, actual):
        return
    if not abs(expected - actual) <= tolerance:
        fail(_concat(message, f"Expected {expected!r} but got {actual!r} (tolerance {tolerance!r})."),
             expected, actual)


def assert_same(expected: Any, actual: Any, message: str) -> None:
    if expected is not actual:
        fail(_concat(message, f"Expected the same instance as {expected!r} but got {actual!r}."),
             expected, actual)


def assert_not_same(unexpected: Any, actual: Any, message: str) -> None:
    if unexpected is actual:
        fail(message, actual)


def assert_instance_of(kind: type, value: Any, message: str) -> None:
    if not isinstance(value, kind):
        fail(_concat(message, f"Value {value!r} is not an instance of {getattr(kind, '__name__', kind)}."),
             value)


def assert_positive(message: str, value: int) -> None:
    """Asserts that the given integer is positive or zero."""
    if value < 0:
        fail(f"{_prefix(message)}Value is {value}.", value)


def assert_strictly_positive(message: str, value: int) -> None:
    if value <= 0:
        fail(f"{_prefix(message)}Value is {value}.", value)


def assert_valid_range(message: str, minimum: Any, maximum: Any) -> None:
    """
    Asserts that minimum is not greater than maximum.

    None bounds are unrestricted. For real numbers a NaN bound fails.
    """
    if minimum is None or maximum is None:
        return
    if isinstance(minimum, numbers.Real) and isinstance(maximum, numbers.Real):
        ok = minimum <= maximum                 # False for NaN
    else:
        ok = not (minimum > maximum)
    if not ok:
        fail(f"{_prefix(message)}Range found is [{minimum} ... {maximum}].", minimum, maximum)


def assert_between(message: str, minimum: Any, maximum: Any, value: Any) -> None:
    """
    Asserts that value is inside [minimum ... maximum].

    A NaN value passes silently, and so do None bounds. The validity of the
    range itself is not tested.
    """
    if minimum is not None and value < minimum:
        fail(f"{_prefix(message)}Value {value} is less than {minimum}.", value, minimum)
    if maximum is not None and value > maximum:
        fail(f"{_prefix(message)}Value {value} is greater than {maximum}.", value, maximum)


def assert_contains(message: str, collection: Optional[Collection], value: Any) -> None:
    """A None collection is unknown rather than empty, so the test passes."""
    if collection is not None and value not in collection:
        fail(f'{_prefix(message)}Looked for value "{value}" in a collection of {len(collection)} elements.',
             value)


def assert_any_title_equals(message: Optional[str], expected: Optional[str], citation: Any) -> None:
    """
    Asserts that the title or an alternate title of the citation equals the expected string.

    Authority abbreviations such as "EPSG" are often alternate titles rather
    than the main title, so both are searched.
    """
    if (citation is None) != (expected is None):
        fail(_concat(message, "Value is None." if citation is None else "Expected None."))
    if citation is None:
        return
    title = getattr(citation, "title", None)
    if title is not None and str(title) == expected:
        return
    for alternate in getattr(citation, "alternate_titles", None) or ():
        if alternate is not None and str(alternate) == expected:
            return
    fail(_concat(message, f'"{expected}" not found in title or alternate titles.'), expected)


def assert_identifier_equals(message: Optional[str], authority: Optional[str], code_space: Optional[str],
                             version: Optional[str], code: Optional[str], identifier: Any) -> None:
    """Compares identifier properties, skipping any argument equal to UNRESTRICTED."""
    if identifier is None:
        fail(_concat(message, "Identifier is None."))
    if authority != UNRESTRICTED:
        assert_any_title_equals(message, authority, identifier.authority)
    if code_space != UNRESTRICTED:
        assert_equal(code_space, identifier.code_space, _concat(message, "Wrong code space."))
    if version != UNRESTRICTED:
        assert_equal(version, identifier.version, _concat(message, "Wrong version."))
    if code != UNRESTRICTED:
        assert_equal(code, identifier.code, _concat(message, "Wrong code."))


def _identifier_characters(text: str, ignore_case: bool) -> str:
    """Keeps the identifier part of text, starting at the first identifier start."""
    kept = []
    started = False
    for c in text:
        if not started:
            if c.isidentifier():
                started = True
            else:
                continue
        if ("a" + c).isidentifier():
            kept.append(c.lower() if ignore_case else c)
    return "".join(kept)


def assert_unicode_identifier_equals(message: Optional[str], expected: Optional[str],
                                     actual: Optional[str], ignore_case: bool) -> None:
    """
    Compares two strings ignoring characters that are not valid in identifiers.

    "WGS 84" and "WGS84" are equal according this method.
    """
    if expected == UNRESTRICTED:
        return
    if (actual is None) != (expected is None):
        fail(_concat(message, "Value is None." if actual is None else "Expected None."))
    if actual is None:
        return
    if _identifier_characters(expected, ignore_case) != _identifier_characters(actual, ignore_case):
        fail(f'{_prefix(message)}Expected "{expected}" but got "{actual}".', expected, actual)


def assert_axis_directions_equal(message: Optional[str], cs: Any, expected: Sequence) -> None:
    """Asserts that the axes of the coordinate system point toward the expected directions, in order."""
    assert_equal(len(expected), cs.dimension, _concat(message, "Wrong coordinate system dimension."))
    message = _concat(message, "Wrong axis direction.")
    for i, direction in enumerate(expected):
        assert_equal(direction, cs.get_axis(i).direction, message)
