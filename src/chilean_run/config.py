"""
Configuration - Handles chilean_run command configuration.

This module handles:
- Configuration dataclass with all options
- JSON configuration file support
- Command-line overrides
- Configuration validation
"""

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

from chilean_run.exceptions import ConfigError
from chilean_run.generators.run_generator import (
    DEFAULT_MAX_PREFIX,
    DEFAULT_MIN_PREFIX,
    RunGeneratorConfig,
)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """
    Configuration for chilean_run commands.

    Attributes:
        quantity: Number of identifiers to generate
        min_prefix: Smallest leading segment for generated identifiers
        max_prefix: Largest leading segment for generated identifiers
        zero_pad: Zero-pad when formatting/unformatting
        seed: Random seed for deterministic generation
        log_level: Logging level
        log_file: Optional file to also write log records to
        verbose: Enable verbose output
        quiet: Suppress normal output
    """

    # Generation options
    quantity: int = 1
    min_prefix: int = DEFAULT_MIN_PREFIX
    max_prefix: int = DEFAULT_MAX_PREFIX
    seed: Optional[int] = None

    # Formatting options
    zero_pad: bool = False

    # Output options
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    verbose: bool = False
    quiet: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Path):
                data[key] = str(value)
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save configuration to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from JSON file.

        Raises:
            ConfigError: If the file cannot be read or is not a JSON object
        """
        try:
            data = json.loads(path.read_text())
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot load configuration from {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create config from dictionary.

        Unknown keys are ignored.

        Raises:
            ConfigError: If a known key holds a value of the wrong type
        """
        data = dict(data)
        if data.get("log_file"):
            if not isinstance(data["log_file"], (str, Path)):
                raise ConfigError(f"log_file must be a path, got {data['log_file']!r}")
            data["log_file"] = Path(data["log_file"])
        elif "log_file" in data:
            data["log_file"] = None

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        for key, value in filtered_data.items():
            expected = FIELD_TYPES.get(key)
            if expected is not None and not _has_type(value, expected):
                raise ConfigError(
                    f"{key} must be {_type_names(expected)}, got {value!r}"
                )

        return cls(**filtered_data)

    def override(self, values: dict[str, Any]) -> "Config":
        """
        Return a copy with the given values replacing the current ones.

        Args:
            values: Field values to apply; every key present wins

        Raises:
            ConfigError: If a value has the wrong type
        """
        return Config.from_dict({**self.to_dict(), **values})

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.quantity < 0:
            errors.append(f"Quantity must not be negative: {self.quantity}")

        if self.min_prefix < 0:
            errors.append(f"Minimum prefix must not be negative: {self.min_prefix}")

        if self.min_prefix > self.max_prefix:
            errors.append(
                f"Minimum prefix {self.min_prefix} exceeds maximum prefix {self.max_prefix}"
            )

        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")

        if self.log_file and self.log_file.exists() and not self.log_file.is_file():
            errors.append(f"Log file is not a file: {self.log_file}")

        return errors

    def generator_config(self) -> RunGeneratorConfig:
        """Build the generator configuration from these settings."""
        return RunGeneratorConfig(
            min_prefix=self.min_prefix,
            max_prefix=self.max_prefix,
            seed=self.seed,
        )


# Accepted JSON types per field; log_file is converted before checking
FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "quantity": (int,),
    "min_prefix": (int,),
    "max_prefix": (int,),
    "seed": (int, type(None)),
    "zero_pad": (bool,),
    "log_level": (str,),
    "log_file": (Path, type(None)),
    "verbose": (bool,),
    "quiet": (bool,),
}


def _has_type(value: Any, expected: tuple[type, ...]) -> bool:
    # bool is an int subclass but "true" is not a count
    if isinstance(value, bool) and bool not in expected:
        return False
    return isinstance(value, expected)


def _type_names(expected: tuple[type, ...]) -> str:
    names = ["null" if t is type(None) else t.__name__ for t in expected]
    return " or ".join(names)


def create_default_config() -> Config:
    """Create a configuration with default values."""
    return Config()
