"""
Failure and warning sink for one top-level validation call.

A Walk holds the per-call state of a graph traversal: the report receiving
failures and warnings, the identity-keyed map of objects already visited and
the current nesting depth. The active walk is kept in a context variable so
that validators themselves stay free of per-call state.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional

from .errors import ConformanceError, ConformanceFailure, PolicyDowngrade, StructuralInconsistency
from .logging import get_logger

logger = get_logger(__name__)


@dataclass
class ValidationReport:
    """Failures and policy warnings accumulated during one validation call."""
    failures: List[ConformanceFailure] = field(default_factory=list)
    warnings: List[PolicyDowngrade] = field(default_factory=list)
    visited_count: int = 0

    @property
    def passed(self) -> bool:
        return not self.failures

    def add_failure(self, failure: ConformanceFailure) -> None:
        self.failures.append(failure)
        logger.debug(f"Conformance failure: {failure.describe()}")

    def add_warning(self, warning: PolicyDowngrade) -> None:
        self.warnings.append(warning)

    def warnings_by_category(self) -> Dict[str, List[str]]:
        """Warning messages grouped by the category of the validator that emitted them."""
        grouped: Dict[str, List[str]] = {}
        for warning in self.warnings:
            grouped.setdefault(warning.category, []).append(warning.message)
        return grouped

    def failure_messages(self) -> List[str]:
        return [failure.message for failure in self.failures]

    def raise_for_failures(self) -> None:
        if self.failures:
            raise ConformanceError(self.failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "passed": self.passed,
            "visited": self.visited_count,
            "failures": [
                {
                    "category": f.category,
                    "subject": f.subject_type,
                    "message": f.message,
                    "structural": isinstance(f, StructuralInconsistency),
                }
                for f in self.failures
            ],
            "warnings": self.warnings_by_category(),
        }


class Walk:
    """Traversal state of one validation call."""

    def __init__(self, report: ValidationReport, max_depth: int, fail_fast: bool):
        self.report = report
        self.max_depth = max_depth
        self.fail_fast = fail_fast
        # Strong references keep the ids of temporary objects from being recycled.
        self._visited: Dict[int, Any] = {}
        self._depth = 0

    def enter(self, obj: Any) -> bool:
        """Marks obj as visited. Returns False if it shall not be validated again."""
        key = id(obj)
        if key in self._visited:
            logger.debug(f"Skipping already visited {type(obj).__name__}")
            return False
        if self._depth >= self.max_depth:
            self.report_failure(StructuralInconsistency(
                f"Object graph nested deeper than {self.max_depth} levels at "
                f"{type(obj).__name__}; possible reference cycle.", obj))
            return False
        self._visited[key] = obj
        self.report.visited_count += 1
        self._depth += 1
        return True

    def leave(self) -> None:
        self._depth -= 1

    def run(self, category: str, handler: Callable[[Any], Any], obj: Any) -> None:
        """Invokes one category handler, isolating its failure from sibling checks."""
        try:
            handler(obj)
        except ConformanceFailure as failure:
            if failure.category is None:
                failure.category = category
                failure.subject_type = type(obj).__name__
            if self.fail_fast:
                raise
            self.report.add_failure(failure)

    def report_failure(self, failure: ConformanceFailure) -> None:
        if self.fail_fast:
            raise failure
        self.report.add_failure(failure)


_current_walk: ContextVar[Optional[Walk]] = ContextVar("geoconform_walk", default=None)


def current_walk() -> Optional[Walk]:
    return _current_walk.get()


@contextmanager
def open_walk(report: ValidationReport, max_depth: int, fail_fast: bool) -> Iterator[Walk]:
    """Makes a new walk the active one for the duration of the block."""
    walk = Walk(report, max_depth=max_depth, fail_fast=fail_fast)
    token = _current_walk.set(walk)
    try:
        yield walk
    finally:
        _current_walk.reset(token)
