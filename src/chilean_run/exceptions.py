"""
Exception classes for chilean_run.

The identifier functions themselves are permissive and report bad input
through their return values. These exceptions cover the surrounding
layers: generator ranges, configuration and the command line.
"""

from typing import Optional


class RunError(Exception):
    """Base exception for all chilean_run errors."""

    pass


class InvalidRunError(RunError, ValueError):
    """An identifier failed validation where a valid one was required.

    Attributes:
        run: The offending identifier as given
        message: Description of the error
    """

    def __init__(self, run: str, message: Optional[str] = None):
        self.run = run
        self.message = message or "check digit does not match"
        super().__init__(f"Invalid RUN '{run}': {self.message}")


class InvalidRangeError(RunError, ValueError):
    """Prefix range for generation is empty or negative.

    Attributes:
        min_prefix: Lower bound of the leading segment
        max_prefix: Upper bound of the leading segment
    """

    def __init__(self, min_prefix: int, max_prefix: int):
        self.min_prefix = min_prefix
        self.max_prefix = max_prefix
        super().__init__(
            f"Invalid prefix range [{min_prefix}, {max_prefix}]: "
            "bounds must be non-negative and min must not exceed max"
        )


class ConfigError(RunError):
    """Configuration error.

    Raised when a configuration file cannot be loaded or holds
    values that cannot be used.
    """

    pass
