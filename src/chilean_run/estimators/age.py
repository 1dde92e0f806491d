"""
Age estimation from the RUN/RUT body.

RUN numbers were issued roughly in sequence, so the numeric body correlates
with the holder's birth date. A linear regression over historical issuance
data maps the body to a fractional birth year; the integer part is the
year and the fraction gives the month. The model cannot resolve the day of
birth and carries no accuracy guarantee.

Based on Fabian Villena's RUT-to-age model:
    https://github.com/fvillena/rut-a-edad
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from chilean_run.core.normalizer import is_numeric_body, split_run
from chilean_run.logging_config import get_logger

logger = get_logger("age")

SLOPE = 3.3363697569700348e-06
INTERCEPT = 1932.2573852507373

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class AgeEstimate:
    """Estimated birth year/month and the resulting age.

    Attributes:
        age: Age in whole years; may be negative for implausible bodies
        year: Estimated birth year
        month: Estimated birth month (1-12)
    """

    age: int
    year: int
    month: int

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary."""
        return {"age": self.age, "year": self.year, "month": self.month}


def estimate_birth(body_number: int) -> tuple[int, int]:
    """Map a numeric body to an estimated (year, month) of birth."""
    value = body_number * SLOPE + INTERCEPT
    year = math.floor(value)
    month = math.ceil((value - year) * MONTHS_PER_YEAR)
    if month == 0:
        month = MONTHS_PER_YEAR
        year -= 1
    return year, month


def estimate_age(run: str, today: Optional[date] = None) -> Optional[AgeEstimate]:
    """Estimate birth year, birth month and age from an identifier.

    The check character must be present (it is dropped) but is not
    verified. The birth month counts as not yet passed during the month
    itself, so the age is one lower through the end of that month.

    Args:
        run: Identifier in display or canonical form
        today: Reference date; defaults to date.today()

    Returns:
        AgeEstimate, or None if the body is not numeric
    """
    body, _ = split_run(run)
    if body and not is_numeric_body(body):
        logger.debug("Cannot estimate age for non-numeric body %r", body)
        return None

    year, month = estimate_birth(int(body or "0"))

    today = today or date.today()
    age = today.year - year
    if today.month <= month:
        age -= 1

    return AgeEstimate(age=age, year=year, month=month)
