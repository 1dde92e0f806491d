"""
Core identifier operations.

This package contains the string-level RUN/RUT logic:
- normalizer: Canonical (unformatted) form
- check_digit: Modulo-11 check character
- validator: Check-character verification
- formatter: Display (dotted/dashed) form
"""

from chilean_run.core.check_digit import check_digit
from chilean_run.core.formatter import format_run
from chilean_run.core.normalizer import split_run, unformat
from chilean_run.core.validator import ensure_valid, validate

__all__ = [
    "check_digit",
    "ensure_valid",
    "format_run",
    "split_run",
    "unformat",
    "validate",
]
