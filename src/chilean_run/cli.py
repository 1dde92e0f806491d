"""
Command-Line Interface for chilean_run.

This module provides the command-line interface for the RUN/RUT utilities.

Usage:
    chilean-run validate 12.345.678-5 11111111-1
    chilean-run validate --strict 12.345.678-5
    chilean-run format 123456785 --zero-pad
    chilean-run unformat 12.345.678-5
    chilean-run check-digit 12345678
    chilean-run generate -n 5 --min 10 --max 20 --seed 42
    chilean-run age 12.345.678-5 --today 2024-01-15 --json
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, List, Optional

from chilean_run import __version__
from chilean_run.config import Config, create_default_config
from chilean_run.core.check_digit import check_digit
from chilean_run.core.formatter import format_run
from chilean_run.core.normalizer import unformat
from chilean_run.core.validator import ensure_valid, validate
from chilean_run.estimators.age import estimate_age
from chilean_run.exceptions import RunError
from chilean_run.generators.run_generator import RunGenerator
from chilean_run.logging_config import LogContext, get_logger, setup_logging

logger = get_logger("cli")

# Options that map onto Config fields. They default to SUPPRESS so the
# namespace only holds what was typed, and typed values always beat the
# configuration file.
CONFIG_OPTIONS = (
    "verbose",
    "quiet",
    "log_level",
    "log_file",
    "zero_pad",
    "quantity",
    "min_prefix",
    "max_prefix",
    "seed",
)


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date (expected YYYY-MM-DD): {value}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chilean-run",
        description="Validate, format, generate and analyze Chilean RUN/RUT numbers.",
        epilog="For more information, see the project documentation.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Suppress normal output and warnings (exit code only)",
    )

    parser.add_argument(
        "--log-level",
        default=argparse.SUPPRESS,
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=argparse.SUPPRESS,
        help="Also write log records to this file",
        metavar="FILE",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    validate_parser = subparsers.add_parser("validate", help="Validate identifiers")
    validate_parser.add_argument("runs", nargs="+", metavar="RUN")
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop with an error at the first invalid identifier",
    )

    format_parser = subparsers.add_parser("format", help="Format identifiers for display")
    format_parser.add_argument("runs", nargs="+", metavar="RUN")
    format_parser.add_argument(
        "--zero-pad",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Left-pad the body with zeros to 10 digits",
    )

    unformat_parser = subparsers.add_parser("unformat", help="Strip identifier formatting")
    unformat_parser.add_argument("runs", nargs="+", metavar="RUN")
    unformat_parser.add_argument(
        "--zero-pad",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Left-pad with zeros to 11 characters",
    )

    dv_parser = subparsers.add_parser("check-digit", help="Compute check characters")
    dv_parser.add_argument("bodies", nargs="+", metavar="BODY")

    generate_parser = subparsers.add_parser("generate", help="Generate random valid identifiers")
    generate_parser.add_argument(
        "-n", "--quantity",
        type=int,
        default=argparse.SUPPRESS,
        help="Number of identifiers to generate (default: 1)",
        metavar="N",
    )
    generate_parser.add_argument(
        "--min",
        dest="min_prefix",
        type=int,
        default=argparse.SUPPRESS,
        help="Smallest leading segment (default: 1)",
        metavar="N",
    )
    generate_parser.add_argument(
        "--max",
        dest="max_prefix",
        type=int,
        default=argparse.SUPPRESS,
        help="Largest leading segment (default: 27)",
        metavar="N",
    )
    generate_parser.add_argument(
        "--seed",
        type=int,
        default=argparse.SUPPRESS,
        help="Random seed for deterministic output",
        metavar="N",
    )

    age_parser = subparsers.add_parser("age", help="Estimate birth year, month and age")
    age_parser.add_argument("runs", nargs="+", metavar="RUN")
    age_parser.add_argument(
        "--today",
        type=_parse_date,
        help="Reference date as YYYY-MM-DD (default: today)",
        metavar="DATE",
    )
    age_parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per identifier",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def args_to_config(args: argparse.Namespace) -> Config:
    """
    Convert parsed arguments to Config object.

    Options given on the command line override the configuration file;
    options left out keep the file's (or the default) value.

    Raises:
        ConfigError: If the configuration file cannot be used
    """
    if args.config:
        config = Config.load_from_file(args.config)
    else:
        config = create_default_config()

    given: dict[str, Any] = {
        name: getattr(args, name) for name in CONFIG_OPTIONS if hasattr(args, name)
    }
    return config.override(given)


def _emit(config: Config, line: str) -> None:
    if not config.quiet:
        print(line)


def run_validate(args: argparse.Namespace, config: Config) -> int:
    """
    Validate each identifier.

    Returns:
        Exit code (0 if all are valid, 1 otherwise)

    Raises:
        InvalidRunError: In strict mode, for the first invalid identifier
    """
    all_valid = True
    for run in args.runs:
        if args.strict:
            ensure_valid(run)
            is_valid = True
        else:
            is_valid = validate(run)
        all_valid = all_valid and is_valid
        _emit(config, f"{run}: {'valid' if is_valid else 'invalid'}")
    return 0 if all_valid else 1


def run_format(args: argparse.Namespace, config: Config) -> int:
    """Print the display form of each identifier."""
    for run in args.runs:
        _emit(config, format_run(run, zero_pad=config.zero_pad))
    return 0


def run_unformat(args: argparse.Namespace, config: Config) -> int:
    """Print the canonical form of each identifier."""
    for run in args.runs:
        _emit(config, unformat(run, zero_pad=config.zero_pad))
    return 0


def run_check_digit(args: argparse.Namespace, config: Config) -> int:
    """
    Print the check character of each body.

    Returns:
        Exit code (1 if any body is not numeric)
    """
    exit_code = 0
    for body in args.bodies:
        digit = check_digit(body)
        if not digit:
            logger.warning("Body is not numeric: %s", body)
            exit_code = 1
            continue
        _emit(config, f"{body}: {digit}")
    return exit_code


def run_generate(args: argparse.Namespace, config: Config) -> int:
    """Print freshly generated identifiers."""
    generator = RunGenerator(config=config.generator_config())
    for run in generator.generate(config.quantity):
        _emit(config, run)
    return 0


def run_age(args: argparse.Namespace, config: Config) -> int:
    """
    Print the age estimate of each identifier.

    Returns:
        Exit code (1 if any identifier has no estimate)
    """
    exit_code = 0
    for run in args.runs:
        estimate = estimate_age(run, today=args.today)
        if estimate is None:
            logger.warning("Cannot estimate age for %s", run)
            exit_code = 1
            continue
        if args.json:
            _emit(config, json.dumps({"run": run, **estimate.to_dict()}))
        else:
            _emit(
                config,
                f"{run}: age {estimate.age} (born {estimate.year}-{estimate.month:02d})",
            )
    return exit_code


COMMANDS: dict[str, Callable[[argparse.Namespace, Config], int]] = {
    "validate": run_validate,
    "format": run_format,
    "unformat": run_unformat,
    "check-digit": run_check_digit,
    "generate": run_generate,
    "age": run_age,
}


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    try:
        config = args_to_config(parsed)
    except RunError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # Validate configuration
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 1

    package_logger = setup_logging(
        level="DEBUG" if config.verbose else config.log_level,
        log_file=config.log_file,
        verbose=config.verbose,
    )

    # Quiet mode keeps errors but drops warnings about individual inputs
    level = logging.ERROR if config.quiet else package_logger.level
    with LogContext(package_logger, level):
        try:
            return COMMANDS[parsed.command](parsed, config)
        except RunError as e:
            if config.verbose:
                import traceback
                traceback.print_exc()
            else:
                print(f"Error: {e}", file=sys.stderr)
            return 1


if __name__ == "__main__":
    sys.exit(main())
