"""Phone number normalization for the messaging gateway."""

import re

_NON_DIGITS = re.compile(r"\D")


def normalize_phone(number) -> str | None:
    """Strip every non-digit character. Returns None when nothing is left.

    >>> normalize_phone("+91 98765-43210")
    '919876543210'
    """
    if number is None:
        return None
    digits = _NON_DIGITS.sub("", str(number))
    return digits or None
