"""CLI entry point for gradforms."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from gradforms import __version__, logger
from gradforms.exceptions import FormStateError, PackageError
from gradforms.logging import configure_logging
from gradforms.settings import Settings, get_settings
from gradforms.typing.models import IntakeOption, ValidationResult
from gradforms.validator import STEP_COUNT, StepValidator

_INTAKE_OPTIONS_ADAPTER: TypeAdapter[tuple[IntakeOption, ...]] = TypeAdapter(tuple[IntakeOption, ...])


def _step_from_cli(value: str) -> int:
    """Convert `--step` CLI value into a step number.

    Args:
        value (str): CLI value.

    Raises:
        argparse.ArgumentTypeError: If value is not a known step.

    Returns:
        int: Step number.
    """
    if not value.isdigit() or not 1 <= int(value) <= STEP_COUNT:
        raise argparse.ArgumentTypeError(f"--step must be one of: 1..{STEP_COUNT}")  # noqa: TRY003
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="gradforms")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser("validate", help="Validate one step of a registration form")
    validate_parser.add_argument("--step", required=True, type=_step_from_cli)
    validate_parser.add_argument("--input", required=True, type=Path, dest="input_path")
    validate_parser.add_argument("--output", type=Path, default=None, dest="output_path")
    validate_parser.add_argument("--current-year", type=int, default=None, dest="current_year")
    validate_parser.add_argument("--all-errors", action="store_true", dest="all_errors")

    intake_parser = subparsers.add_parser("intake-years", help="List the selectable intake options")
    intake_parser.add_argument("--current-year", type=int, default=None, dest="current_year")

    return parser


def load_form_state(path: Path) -> dict[str, Any]:
    """Read a raw form state from a JSON file.

    Args:
        path (Path): JSON file holding an object keyed by form field names.

    Raises:
        FormStateError: If the file cannot be read or is not a JSON object.

    Returns:
        dict[str, Any]: Raw form state.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise FormStateError(message=f"Cannot read form state from '{path}'", exc=exc) from exc
    if not isinstance(payload, dict):
        raise FormStateError(message=f"Form state in '{path}' must be a JSON object")
    return payload


def _build_validator(args: argparse.Namespace, settings: Settings) -> StepValidator:
    """Build the validator from CLI arguments, falling back to settings.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        settings (Settings): Runtime settings.

    Returns:
        StepValidator: Configured validator.
    """
    current_year = args.current_year if args.current_year is not None else settings.current_year
    abort_early = settings.validation_abort_early and not getattr(args, "all_errors", False)
    return StepValidator(current_year, abort_early=abort_early)


def persist_result(result: ValidationResult, path: Path) -> None:
    """Persist a validation result as JSON.

    Args:
        result (ValidationResult): Result payload.
        path (Path): Output path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(result.model_dump_json(indent=2), encoding="utf-8")


def _run_validate(args: argparse.Namespace, settings: Settings) -> int:
    validator = _build_validator(args, settings)
    state = load_form_state(args.input_path)
    result = validator.validate(args.step, state)

    if args.output_path is None:
        sys.stdout.write(result.model_dump_json(indent=2) + "\n")
    else:
        persist_result(result, args.output_path)

    logger.info(
        "Validation completed",
        extra={"step": args.step, "valid": result.is_valid, "issues": len(result.issues)},
    )
    return 0 if result.is_valid else 1


def _run_intake_years(args: argparse.Namespace, settings: Settings) -> int:
    validator = _build_validator(args, settings)
    payload = _INTAKE_OPTIONS_ADAPTER.dump_json(validator.intake_options(), indent=2)
    sys.stdout.write(payload.decode("utf-8") + "\n")
    return 0


def main() -> int:
    """Run the CLI.

    Returns:
        int: Exit code (0 for success or a valid step, 1 for errors or an invalid step).
    """
    parser = build_parser()
    args = parser.parse_args()

    commands = {
        "validate": _run_validate,
        "intake-years": _run_intake_years,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        settings = get_settings()
        configure_logging(settings=settings)
        return command(args, settings)
    except PackageError:
        logger.exception("Command failed", extra={"command": args.command})
        return 1
    except KeyboardInterrupt:
        logger.info("Command aborted by user")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
