"""
Base class of all category validators.

Validators are configured through their public policy flags. Once configured
they hold no other state and may be shared between threads, provided the
flags are not modified while a validation is running.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Any, Iterable, Optional

import numpy as np

from ..assertions import _both_nan, assert_equal, assert_false, assert_none, assert_not_none, assert_true, fail
from ..errors import PolicyDowngrade
from ..logging import get_logger
from ..report import current_walk

if TYPE_CHECKING:
    from .container import ValidatorContainer


def is_empty_collection(value: Any) -> bool:
    """True for a sized, empty, non-string collection."""
    return (
        isinstance(value, Collection)
        and not isinstance(value, (str, bytes))
        and len(value) == 0
    )


def _equals(a: Any, b: Any) -> bool:
    # A NaN element is equal to itself. Distinct NaN objects stay unequal,
    # since their hashes may differ.
    if a is b and _both_nan(a, b):
        return True
    # Invoke the element's own __eq__ so that Python does not fall back on the
    # reflected operand, which would hide an asymmetric implementation.
    result = type(a).__eq__(a, b)
    if result is NotImplemented:
        return False
    return bool(result)


def _hash_of(element: Any) -> int:
    if type(element).__hash__ is None:
        fail(f"{type(element).__name__} instances are not hashable.", element)
    return hash(element)


class Validator:
    """
    Shared policy enforcement for every category.

    Attributes:
        require_mandatory: when False, a missing mandatory attribute is logged
            as a warning instead of failing.
        enforce_forbidden: when False, a present forbidden attribute is logged
            as a warning instead of failing.
    """

    category: str = "base"

    def __init__(self, container: ValidatorContainer, logger_name: Optional[str] = None):
        if container is None:
            raise ValueError("ValidatorContainer shall not be None.")
        self.container = container
        self.logger = get_logger(logger_name or f"geoconform.{self.category}")
        self.require_mandatory = True
        self.enforce_forbidden = True

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(require_mandatory={self.require_mandatory}, "
                f"enforce_forbidden={self.enforce_forbidden})")

    def _downgrade(self, message: str, obligation: str) -> None:
        warning = PolicyDowngrade(category=self.category, message=message, obligation=obligation)
        self.logger.warning(f"{self.category}: {message}")
        walk = current_walk()
        if walk is not None:
            walk.report.add_warning(warning)

    def mandatory(self, message: str, value: Any) -> None:
        """
        Checks that a mandatory attribute is present.

        A None value or an empty collection fails when require_mandatory is
        set, and is logged as a warning otherwise.
        """
        if self.require_mandatory:
            assert_not_none(value, message)
            assert_false(is_empty_collection(value), message)
        elif value is None or is_empty_collection(value):
            self._downgrade(message, "mandatory")

    def forbidden(self, message: str, value: Any) -> None:
        """Symmetric of mandatory(): a present value fails or is logged."""
        if self.enforce_forbidden:
            if isinstance(value, Collection) and not isinstance(value, (str, bytes)):
                assert_true(len(value) == 0, message)
            else:
                assert_none(value, message)
        elif value is not None and not is_empty_collection(value):
            self._downgrade(message, "forbidden")

    def conditional(self, message: str, value: Any, required: bool) -> None:
        if required:
            self.mandatory(message, value)
        else:
            self.forbidden(message, value)

    def validate_collection(self, collection: Optional[Iterable[Any]]) -> None:
        """
        Checks the equality contract over the elements of a collection.

        For every pair of non-None elements: a == a, a != None, a == b implies
        hash(a) == hash(b), every member of an equal set sees exactly the same
        equal set (symmetry and transitivity) and hash values do not change
        between two reads. Elements are not otherwise validated.
        """
        if collection is None:
            return
        elements = [element for element in collection if element is not None]
        count = len(elements)

        # Snapshot hash codes before any comparison to detect unexpected changes.
        hash_codes = [_hash_of(element) for element in elements]

        equal_masks = np.zeros((count, count), dtype=bool)
        for i, to_compare in enumerate(elements):
            for j, candidate in enumerate(elements):
                if _equals(to_compare, candidate):
                    assert_equal(hash_codes[i], _hash_of(candidate), "Inconsistent hash codes.")
                    equal_masks[i, j] = True
            assert_false(_equals(to_compare, None), "equals(None) shall be false.")

        for i in range(count):
            assert_true(equal_masks[i, i], "equals(self) shall be reflexive.")
            for j in np.flatnonzero(equal_masks[i]):
                assert_true(np.array_equal(equal_masks[i], equal_masks[j]),
                            "A == B shall be symmetric and transitive.")
            assert_equal(hash_codes[i], _hash_of(elements[i]), "The hash code value has changed.")
