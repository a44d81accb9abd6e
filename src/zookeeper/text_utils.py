"""
Small string helpers shared by the name-pool loader and the arrival parser.
"""

from typing import List

_WHITESPACE = " \t\n\v\f\r"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def trim(value: str) -> str:
    """Remove leading and trailing whitespace."""
    return value.strip(_WHITESPACE)


def to_lower(value: str) -> str:
    """
    Lowercase ASCII letters only.

    Unlike str.lower(), non-ASCII characters are left untouched so the result
    does not depend on Unicode case tables.
    """
    return value.translate(_ASCII_LOWER)


def split(value: str, delimiter: str) -> List[str]:
    """
    Split on every occurrence of delimiter.

    Empty pieces between delimiters are kept, but a trailing empty remainder
    is not: split("a, b, ", ", ") == ["a", "b"] and split("", ", ") == [].
    """
    if not delimiter:
        raise ValueError("delimiter must be non-empty")

    tokens = value.split(delimiter)
    if tokens and not tokens[-1]:
        tokens.pop()
    return tokens
