"""
Formatter - Renders identifiers in display form.

Display form groups the body in threes from the right with "." and puts
a "-" before the check character: "12345678k" -> "12.345.678-k".
"""

from chilean_run.core.normalizer import PADDED_BODY_LENGTH, split_run

GROUP_SIZE = 3
GROUP_SEPARATOR = "."
CHECK_SEPARATOR = "-"


def group_digits(body: str) -> str:
    """Insert a separator every three characters counted from the right."""
    groups = []
    while body:
        groups.append(body[-GROUP_SIZE:])
        body = body[:-GROUP_SIZE]
    return GROUP_SEPARATOR.join(reversed(groups))


def format_run(run: str, zero_pad: bool = False) -> str:
    """Format an identifier for display.

    Args:
        run: Identifier including its check character, formatted or not
        zero_pad: If True, left-pad the body with zeros to 10 digits

    Returns:
        The display form, lower-case

    Example:
        >>> format_run("123456785")
        '12.345.678-5'
        >>> format_run("11111111-1", zero_pad=True)
        '0.011.111.111-1'
    """
    body, check_char = split_run(run)
    if zero_pad:
        body = body.rjust(PADDED_BODY_LENGTH, "0")
    return f"{group_digits(body)}{CHECK_SEPARATOR}{check_char}".lower()
