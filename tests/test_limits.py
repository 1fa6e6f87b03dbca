from __future__ import annotations

import pytest

from seqcli.constants import DEFAULT_FIBONACCI_LIMIT, DEFAULT_FIZZBUZZ_LIMIT
from seqcli.limits import parse_limit, parse_limit_text


def test_parse_limit_uses_default_without_argument():
    """Only the program name present means each program's own default."""
    assert parse_limit(["fibonacci"], DEFAULT_FIBONACCI_LIMIT) == 10
    assert parse_limit(["fizzbuzz"], DEFAULT_FIZZBUZZ_LIMIT) == 100


def test_parse_limit_uses_default_for_empty_vector():
    assert parse_limit([], 10) == 10


def test_parse_limit_reads_first_argument_only():
    """Extra arguments after the limit are ignored."""
    assert parse_limit(["fizzbuzz", "7", "99"], 100) == 7


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("7", 7),
        ("0", 0),
        ("-4", -4),
        ("+12", 12),
        (" 25 ", 25),
        ("007", 7),
    ],
)
def test_parse_limit_text_accepts_decimal_integers(text, expected):
    assert parse_limit_text(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "12abc", "1.5", "1_000", "0x10", "-", "١٢"])
def test_parse_limit_text_falls_back_to_zero(text):
    """Anything that is not a plain decimal integer parses as zero."""
    assert parse_limit_text(text) == 0


def test_parse_limit_non_numeric_argument_is_zero_not_default():
    """A present but unparseable argument does not fall back to the default."""
    assert parse_limit(["fibonacci", "ten"], 10) == 0


def test_parse_limit_text_accepts_arguments_past_interpreter_digit_cap():
    """Five thousand digits parse like any other decimal argument."""
    assert parse_limit_text("1" * 5000) == (10**5000 - 1) // 9
    assert parse_limit_text(" -" + "9" * 5000 + " ") == -(10**5000 - 1)


def test_parse_limit_huge_argument_is_not_zero():
    limit = parse_limit(["fizzbuzz", "1" + "0" * 4999], 100)
    assert limit == 10**4999
