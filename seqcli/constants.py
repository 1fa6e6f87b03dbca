"""Constants used across seqcli modules."""

DEFAULT_FIBONACCI_LIMIT = 10
DEFAULT_FIZZBUZZ_LIMIT = 100

# printf-style line formats, one line per emitted element
FIBONACCI_LINE_FORMAT = "%5d  %d"
FIZZBUZZ_LINE_FORMAT = "%d: %s"

# first two terms are fixed; everything after is the sum of the previous two
FIBONACCI_SEED = (1, 1)

FIZZ_DIVISOR = 3
BUZZ_DIVISOR = 5
FIZZ_WORD = "Fizz"
BUZZ_WORD = "Buzz"
FIZZBUZZ_WORD = FIZZ_WORD + BUZZ_WORD

HELP_FLAGS = frozenset({"-h", "--help"})
