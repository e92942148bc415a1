import importlib
import inspect
import json

import typer

from .config import Settings
from .conformance import validate
from .errors import ConformanceFailure
from .logging import get_logger
from .report import ValidationReport
from .validators.container import CATEGORIES, ValidatorContainer

app = typer.Typer(help="geoconform – structural conformance checks for geodetic and metadata objects",
                  no_args_is_help=True)


def safe_echo(message: str) -> None:
    """Echo message with an ASCII fallback for consoles that cannot encode it."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        fallback_message = (
            message.replace("‘", "'")
            .replace("’", "'")
            .replace("λ", "lambda")
            .replace("φ", "phi")
        )
        typer.echo(fallback_message.encode("ascii", "replace").decode("ascii"))


def load_target(target: str):
    """
    Imports the object named by "package.module:attribute".

    If the attribute is a function it is called without arguments and its
    return value is the object to validate.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise typer.BadParameter(f"expected MODULE:ATTRIBUTE, got '{target}'")
    module = importlib.import_module(module_name)
    obj = module
    for part in attribute.split("."):
        obj = getattr(obj, part)
    if inspect.isroutine(obj):
        obj = obj()
    return obj


def _print_report(report: ValidationReport) -> None:
    for failure in report.failures:
        safe_echo(f"FAIL  {failure.describe()}")
    for category, messages in report.warnings_by_category().items():
        for message in messages:
            safe_echo(f"WARN  [{category}] {message}")
    status = "passed" if report.passed else "failed"
    safe_echo(f"{report.visited_count} object(s) visited, {len(report.failures)} failure(s), "
              f"{len(report.warnings)} warning(s): {status}")


@app.command()
def check(
    target: str = typer.Argument(..., help="Object to validate, as MODULE:ATTRIBUTE"),
    lenient_mandatory: bool = typer.Option(False, "--lenient-mandatory",
                                           help="Report missing mandatory attributes as warnings"),
    lenient_forbidden: bool = typer.Option(False, "--lenient-forbidden",
                                           help="Report present forbidden attributes as warnings"),
    standard_names: bool = typer.Option(False, "--standard-names",
                                        help="Require ISO 19111 axis names"),
    tolerance: float = typer.Option(None, help="Relative tolerance of floating point comparisons"),
    fail_fast: bool = typer.Option(False, "--fail-fast", help="Stop at the first failure"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """
    Validate an object graph and print its failures and warnings.

    Settings not given on the command line are read from the GEOCONFORM_*
    environment variables. Exits with code 1 if any failure is found.
    """
    logger = get_logger(__name__)

    settings = Settings.from_env()
    if lenient_mandatory:
        settings.require_mandatory = False
    if lenient_forbidden:
        settings.enforce_forbidden = False
    if standard_names:
        settings.enforce_standard_names = True
    if tolerance is not None:
        settings.tolerance = tolerance

    try:
        obj = load_target(target)
    except (ImportError, AttributeError) as exc:
        logger.error(f"Cannot load {target}: {exc}")
        raise typer.Exit(code=2) from exc

    logger.info(f"Validating {type(obj).__name__} from {target}")
    container = ValidatorContainer.default(settings)
    try:
        report = validate(obj, container, fail_fast=fail_fast)
    except ConformanceFailure as exc:
        # Fail-fast mode raises the first failure.
        safe_echo(f"FAIL  {exc.describe()}")
        raise typer.Exit(code=1) from exc

    if as_json:
        safe_echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_report(report)
    if not report.passed:
        raise typer.Exit(code=1)


@app.command()
def categories() -> None:
    """List the validator categories and their policy flags."""
    container = ValidatorContainer.default()
    flags = Settings().policy_flags()
    for category, validator in zip(CATEGORIES, container.all):
        values = ", ".join(f"{name}={getattr(validator, name)}" for name in flags if hasattr(validator, name))
        safe_echo(f"{category:<22} {type(validator).__name__:<24} {values}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
