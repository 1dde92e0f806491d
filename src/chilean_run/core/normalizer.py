"""
Normalizer - Converts identifiers to their canonical form.

The canonical form drops the "." thousands separators and the "-" before
the check character and is lower-case, so "12.345.678-K" becomes
"12345678k". Characters other than the separators are passed through
untouched; callers that need strict input must validate separately.
"""

# 10-digit body plus the check character
PADDED_LENGTH = 11
PADDED_BODY_LENGTH = PADDED_LENGTH - 1

SEPARATORS = (".", "-")


def unformat(run: str, zero_pad: bool = False) -> str:
    """Strip formatting from an identifier.

    Args:
        run: Identifier in display or canonical form
        zero_pad: If True, left-pad with zeros to 11 characters

    Returns:
        The canonical, lower-case identifier

    Example:
        >>> unformat("12.345.678-5")
        '123456785'
        >>> unformat("12.345.678-5", zero_pad=True)
        '00123456785'
    """
    for separator in SEPARATORS:
        run = run.replace(separator, "")
    if zero_pad:
        run = run.rjust(PADDED_LENGTH, "0")
    return run.lower()


def split_run(run: str) -> tuple[str, str]:
    """Split an identifier into body and check character.

    Args:
        run: Identifier in display or canonical form

    Returns:
        Tuple of (body, check_character); both are empty for empty input
    """
    canonical = unformat(run)
    return canonical[:-1], canonical[-1:]


def is_numeric_body(body: str) -> bool:
    """Check that a body holds only ASCII decimal digits."""
    return body.isascii() and body.isdigit()
