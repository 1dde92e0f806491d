"""
Validator - Checks an identifier against its check character.
"""

from chilean_run.core.check_digit import check_digit
from chilean_run.core.normalizer import split_run, unformat
from chilean_run.exceptions import InvalidRunError

# At least one body digit plus the check character
MIN_LENGTH = 2


def validate(run: str) -> bool:
    """Check whether an identifier's check character matches its body.

    Formatting is optional and a "K" check character is accepted in
    either case. Malformed input returns False rather than raising.

    Args:
        run: Identifier in display or canonical form

    Returns:
        True if the check character is correct
    """
    if len(unformat(run)) < MIN_LENGTH:
        return False

    body, claimed = split_run(run)
    return check_digit(body) == claimed


def ensure_valid(run: str) -> str:
    """Return the canonical identifier or raise if it does not validate.

    Raises:
        InvalidRunError: If the identifier is too short or its check
            character does not match
    """
    if len(unformat(run)) < MIN_LENGTH:
        raise InvalidRunError(run, "too short")
    if not validate(run):
        raise InvalidRunError(run)
    return unformat(run)
