"""
RUN Generator - Generates random, syntactically valid identifiers.

Each identifier is a random leading segment drawn from a prefix range,
followed by six random digits and the matching check character, returned
in display form. Key features:
- Configurable prefix range (default 1-27)
- Deterministic generation with optional seed
- Pluggable random source for tests
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

from chilean_run.core.check_digit import check_digit
from chilean_run.core.formatter import format_run
from chilean_run.exceptions import InvalidRangeError
from chilean_run.logging_config import get_logger

__all__ = [
    "DEFAULT_MAX_PREFIX",
    "DEFAULT_MIN_PREFIX",
    "RandomSource",
    "RunGenerator",
    "RunGeneratorConfig",
    "generate",
]

logger = get_logger("generator")

DEFAULT_MIN_PREFIX = 1
DEFAULT_MAX_PREFIX = 27
SUFFIX_DIGITS = 6


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in [a, b]."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass
class RunGeneratorConfig:
    """
    Configuration for identifier generation.

    Attributes:
        min_prefix: Smallest leading segment (inclusive)
        max_prefix: Largest leading segment (inclusive)
        seed: Random seed for deterministic generation
    """

    min_prefix: int = DEFAULT_MIN_PREFIX
    max_prefix: int = DEFAULT_MAX_PREFIX
    seed: Optional[int] = None


@dataclass
class RunGenerator:
    """
    Generates random valid RUN/RUT identifiers.

    Usage:
        generator = RunGenerator()
        runs = generator.generate(5)

        # Reproducible output:
        generator = RunGenerator(config=RunGeneratorConfig(seed=42))

        # Narrower prefix range:
        config = RunGeneratorConfig(min_prefix=10, max_prefix=20)
        generator = RunGenerator(config=config)
    """

    config: RunGeneratorConfig = field(default_factory=RunGeneratorConfig)
    rng: Optional[RandomSource] = None

    def __post_init__(self):
        if self.config.min_prefix < 0 or self.config.min_prefix > self.config.max_prefix:
            raise InvalidRangeError(self.config.min_prefix, self.config.max_prefix)

        if self.rng is None:
            self.rng = random.Random(self.config.seed)

    def generate_one(self) -> str:
        """Generate a single identifier in display form."""
        body = str(self.rng.randint(self.config.min_prefix, self.config.max_prefix))
        body += "".join(str(self.rng.randint(0, 9)) for _ in range(SUFFIX_DIGITS))
        return format_run(body + check_digit(body))

    def generate(self, quantity: int = 1) -> list[str]:
        """
        Generate several identifiers.

        Args:
            quantity: Number of identifiers; zero or less yields an empty list

        Returns:
            List of identifiers in display form, in generation order
        """
        runs = [self.generate_one() for _ in range(max(quantity, 0))]
        logger.debug(
            "Generated %d identifiers with prefix range [%d, %d]",
            len(runs),
            self.config.min_prefix,
            self.config.max_prefix,
        )
        return runs


def generate(
    quantity: int = 1,
    prefix_range: tuple[int, int] = (DEFAULT_MIN_PREFIX, DEFAULT_MAX_PREFIX),
    rng: Optional[RandomSource] = None,
) -> list[str]:
    """
    Generate random valid identifiers.

    This is a convenience function for one-off generation.
    For repeated or seeded generation, use the RunGenerator class.

    Args:
        quantity: Number of identifiers to generate
        prefix_range: Inclusive (min, max) bounds for the leading segment
        rng: Optional random source; the module-level generator is used if None

    Returns:
        List of identifiers in display form

    Raises:
        InvalidRangeError: If the range is empty or negative
    """
    min_prefix, max_prefix = prefix_range
    config = RunGeneratorConfig(min_prefix=min_prefix, max_prefix=max_prefix)
    generator = RunGenerator(config=config, rng=rng if rng is not None else random)
    return generator.generate(quantity)
