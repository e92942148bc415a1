"""
Error taxonomy of the conformance engine.

Assertion primitives raise ConformanceFailure. The dispatcher catches it per
category handler and hands it to the active report, so one failure ends the
current check without aborting the rest of the object graph walk. Any other
exception raised by a subject accessor propagates unchanged.
"""

from dataclasses import dataclass
from typing import Any, Optional, Tuple


class ConformanceFailure(AssertionError):
    """An invariant of the validated object does not hold."""

    def __init__(self, message: str, *values: Any):
        super().__init__(message)
        self.message = message
        self.values: Tuple[Any, ...] = values
        # Filled in by the dispatcher when the failure is caught.
        self.category: Optional[str] = None
        self.subject_type: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """One-line description including the category and the subject type when known."""
        prefix = f"[{self.category}] " if self.category else ""
        subject = f"{self.subject_type}: " if self.subject_type else ""
        return f"{prefix}{subject}{self.message}"


class StructuralInconsistency(ConformanceFailure):
    """A violation found by combining several accessors, e.g. a dimension mismatch."""


class ConformanceError(Exception):
    """Raised by assert_valid() when a validation report contains failures."""

    def __init__(self, failures):
        self.failures = list(failures)
        lines = [f.describe() for f in self.failures]
        super().__init__(f"{len(lines)} conformance failure(s):\n" + "\n".join(lines))


@dataclass(frozen=True)
class PolicyDowngrade:
    """A mandatory/forbidden violation logged as a warning because the policy is relaxed."""
    category: str           # validator category that emitted the warning
    message: str
    obligation: str         # "mandatory" or "forbidden"
