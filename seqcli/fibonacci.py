"""Fibonacci program: print the first N terms with their 1-based index."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .constants import (
    DEFAULT_FIBONACCI_LIMIT,
    FIBONACCI_LINE_FORMAT,
    FIBONACCI_SEED,
    HELP_FLAGS,
)
from .digits import unbounded_digits
from .limits import parse_limit
from .output import discard_stdout

PROGRAM_NAME = "fibonacci"


def generate_fibonacci(limit: int) -> Iterator[tuple[int, int]]:
    """Yield the first ``limit`` Fibonacci terms.

    Args:
        limit: Number of terms to produce. Non-positive yields nothing.

    Yields:
        ``(index, value)`` pairs with a 1-based index.
    """
    older, newer = FIBONACCI_SEED
    for position in range(limit):
        if position < len(FIBONACCI_SEED):
            yield position + 1, FIBONACCI_SEED[position]
            continue
        value = older + newer
        yield position + 1, value
        older, newer = newer, value


def format_term(index: int, value: int) -> str:
    """Render one term as an output line without the trailing newline."""
    with unbounded_digits():
        return FIBONACCI_LINE_FORMAT % (index, value)


def perform(limit: int, stream: TextIO | None = None) -> int:
    """Print ``limit`` terms.

    Args:
        limit: Number of terms.
        stream: Output stream, stdout when omitted.

    Returns:
        Exit status code.
    """
    out = stream if stream is not None else sys.stdout
    for index, value in generate_fibonacci(limit):
        out.write(format_term(index, value) + "\n")
    return 0


def _print_help() -> None:
    """Print command usage."""
    print("usage:")
    print(f"  {PROGRAM_NAME} [limit]")
    print("  python3 -m seqcli.fibonacci [limit]")
    print(f"limit defaults to {DEFAULT_FIBONACCI_LIMIT}")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint.

    Args:
        argv: Optional argv vector excluding the program name.

    Returns:
        Exit status code.
    """
    args = argv if argv is not None else sys.argv[1:]
    if args and args[0] in HELP_FLAGS:
        _print_help()
        return 0

    limit = parse_limit([PROGRAM_NAME, *args], DEFAULT_FIBONACCI_LIMIT)
    try:
        return perform(limit)
    except BrokenPipeError:
        discard_stdout()
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
