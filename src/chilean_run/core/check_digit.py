"""
Check-digit calculator for RUN/RUT bodies.

Modulo-11 with weights 2..7 applied from the least significant digit
and repeating after 7.
"""

from itertools import cycle

from chilean_run.logging_config import get_logger

logger = get_logger("check_digit")

WEIGHTS = (2, 3, 4, 5, 6, 7)
MODULUS = 11

# Returned for bodies holding non-digits; never equals a real check character
UNDEFINED_CHECK_DIGIT = ""


def check_digit(body: str) -> str:
    """Compute the check character for a body.

    Args:
        body: The numeric body without its check character. Stray "."
            separators are ignored.

    Returns:
        "0"-"9" or "k". If the body contains anything other than digits
        the result is undefined and UNDEFINED_CHECK_DIGIT is returned.

    Example:
        >>> check_digit("12345678")
        '5'
        >>> check_digit("12.345.678")
        '5'
    """
    digits = body.replace(".", "")

    total = 0
    for digit, weight in zip(reversed(digits), cycle(WEIGHTS)):
        if not ("0" <= digit <= "9"):
            logger.debug("Non-digit %r in body %r", digit, body)
            return UNDEFINED_CHECK_DIGIT
        total += int(digit) * weight

    remainder = total % MODULUS
    if remainder == 1:
        return "k"
    if remainder == 0:
        return "0"
    return str(MODULUS - remainder)
