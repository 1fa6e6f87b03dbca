"""Limit parsing shared by the sequence programs."""

from __future__ import annotations

import re
from typing import Sequence

from .digits import unbounded_digits

DECIMAL_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")


def parse_limit_text(text: str) -> int:
    """Parse one limit argument, falling back to zero.

    Only an optionally signed run of ASCII digits (surrounding whitespace
    allowed) is accepted, at any length. Anything else, partially numeric
    input included, yields 0 so the program prints nothing.

    Args:
        text: Raw argument text.

    Returns:
        Parsed integer, or 0 when the text is not a decimal integer.
    """
    if not DECIMAL_PATTERN.match(text):
        return 0
    with unbounded_digits():
        return int(text.strip(), 10)


def parse_limit(args: Sequence[str], default: int) -> int:
    """Resolve the sequence limit from a full argument vector.

    Args:
        args: Argument vector including the program name.
        default: Limit used when no argument follows the program name.

    Returns:
        The limit to iterate up to.
    """
    if len(args) < 2:
        return default
    return parse_limit_text(args[1])
