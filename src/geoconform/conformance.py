"""
Entry points validating a whole object graph.

    report = validate(obj)
    if not report.passed:
        for failure in report.failures:
            print(failure.describe())
"""

from typing import Any, Optional

from .config import Settings
from .logging import get_logger
from .report import ValidationReport, open_walk
from .validators.container import ValidatorContainer

logger = get_logger(__name__)


def validate(obj: Any, container: Optional[ValidatorContainer] = None,
             fail_fast: Optional[bool] = None) -> ValidationReport:
    """
    Validates obj and every object reachable from it.

    Args:
        obj: the root of the object graph. None gives an empty report.
        container: the validators to use. Defaults to a new container with
            default settings.
        fail_fast: when True the first failure is raised instead of recorded.
            Defaults to the container settings.

    Returns:
        The failures and policy warnings found during the walk.
    """
    if container is None:
        container = ValidatorContainer.default()
    if fail_fast is None:
        fail_fast = container.settings.fail_fast
    report = ValidationReport()
    with open_walk(report, max_depth=container.settings.max_depth, fail_fast=fail_fast):
        matched = container.dispatch(obj)
    if obj is not None and matched == 0:
        logger.warning(f"{type(obj).__name__} implements none of the supported interfaces")
    logger.debug(f"Validated {report.visited_count} objects: {len(report.failures)} failure(s), "
                 f"{len(report.warnings)} warning(s)")
    return report


def assert_valid(obj: Any, container: Optional[ValidatorContainer] = None) -> ValidationReport:
    """Like validate(), but raises ConformanceError if any failure was found."""
    report = validate(obj, container)
    report.raise_for_failures()
    return report


__all__ = ["Settings", "ValidationReport", "ValidatorContainer", "assert_valid", "validate"]
