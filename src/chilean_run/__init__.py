"""
chilean_run - Validate, format and analyze Chilean RUN/RUT numbers.

A RUN/RUT is a numeric body followed by a modulo-11 check character
("0"-"9" or "k"). This package verifies the check character, converts
between the display form ("12.345.678-5") and the canonical form
("123456785"), generates random valid identifiers and estimates the
holder's birth year, month and age from the body.

Basic Usage:
    from chilean_run import (
        check_digit, estimate_age, format_run, generate, unformat, validate,
    )

    validate("12.345.678-5")          # True
    format_run("123456785")           # '12.345.678-5'
    unformat("12.345.678-5")          # '123456785'
    check_digit("12345678")           # '5'

    generate(3)                        # ['7.412.903-k', ...]
    estimate_age("12.345.678-5")       # AgeEstimate(age=..., year=1973, month=6)

Command-Line Usage:
    chilean-run validate 12.345.678-5
    chilean-run generate -n 5 --seed 42
    chilean-run age 12.345.678-5
"""

__version__ = "1.0.0"

from chilean_run.exceptions import (
    RunError,
    InvalidRunError,
    InvalidRangeError,
    ConfigError,
)

from chilean_run.core.check_digit import check_digit
from chilean_run.core.formatter import format_run
from chilean_run.core.normalizer import split_run, unformat
from chilean_run.core.validator import ensure_valid, validate
from chilean_run.estimators.age import AgeEstimate, estimate_age
from chilean_run.generators.run_generator import (
    RunGenerator,
    RunGeneratorConfig,
    generate,
)
from chilean_run.config import Config, create_default_config

__all__ = [
    # Version
    "__version__",
    # Identifier operations
    "validate",
    "ensure_valid",
    "check_digit",
    "format_run",
    "unformat",
    "split_run",
    "generate",
    "estimate_age",
    # Data Types
    "AgeEstimate",
    "RunGenerator",
    "RunGeneratorConfig",
    # Configuration
    "Config",
    "create_default_config",
    # Exceptions
    "RunError",
    "InvalidRunError",
    "InvalidRangeError",
    "ConfigError",
]
