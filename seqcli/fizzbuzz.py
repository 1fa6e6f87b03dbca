"""FizzBuzz program: label each integer from 1 through N."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .constants import (
    BUZZ_DIVISOR,
    BUZZ_WORD,
    DEFAULT_FIZZBUZZ_LIMIT,
    FIZZ_DIVISOR,
    FIZZ_WORD,
    FIZZBUZZ_LINE_FORMAT,
    FIZZBUZZ_WORD,
    HELP_FLAGS,
)
from .errors import AllocationFailure, SeqcliError
from .digits import unbounded_digits
from .limits import parse_limit
from .output import discard_stdout

PROGRAM_NAME = "fizzbuzz"


def classify(n: int) -> str:
    """Return the FizzBuzz label for ``n``.

    The combined check runs first so multiples of 15 never fall through
    to a single word.

    Args:
        n: Integer to classify.

    Returns:
        "FizzBuzz", "Fizz", "Buzz", or the decimal string of ``n``.

    Raises:
        AllocationFailure: The decimal string could not be built.
    """
    if n % FIZZ_DIVISOR == 0 and n % BUZZ_DIVISOR == 0:
        return FIZZBUZZ_WORD
    if n % FIZZ_DIVISOR == 0:
        return FIZZ_WORD
    if n % BUZZ_DIVISOR == 0:
        return BUZZ_WORD
    with unbounded_digits():
        try:
            return str(n)
        except MemoryError as exc:
            raise AllocationFailure(f"fatal: cannot allocate label for {n}") from exc


def fizzbuzz_labels(limit: int) -> Iterator[tuple[int, str]]:
    """Yield ``(n, label)`` for each ``n`` from 1 through ``limit``."""
    for n in range(1, limit + 1):
        yield n, classify(n)


def format_label(n: int, label: str) -> str:
    with unbounded_digits():
        return FIZZBUZZ_LINE_FORMAT % (n, label)


def perform(limit: int, stream: TextIO | None = None) -> int:
    """Print one labelled line per integer.

    Args:
        limit: Inclusive upper bound. Below 1 prints nothing.
        stream: Output stream, stdout when omitted.

    Returns:
        Exit status code.
    """
    out = stream if stream is not None else sys.stdout
    for n, label in fizzbuzz_labels(limit):
        out.write(format_label(n, label) + "\n")
    return 0


def _print_help() -> None:
    """Print command usage."""
    print("usage:")
    print(f"  {PROGRAM_NAME} [limit]")
    print("  python3 -m seqcli.fizzbuzz [limit]")
    print(f"limit defaults to {DEFAULT_FIZZBUZZ_LIMIT}")


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

    limit = parse_limit([PROGRAM_NAME, *args], DEFAULT_FIZZBUZZ_LIMIT)
    try:
        return perform(limit)
    except BrokenPipeError:
        discard_stdout()
        return 0
    except SeqcliError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
