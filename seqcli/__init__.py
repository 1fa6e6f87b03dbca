"""Fibonacci and FizzBuzz command-line programs."""

from .errors import AllocationFailure, SeqcliError
from .fibonacci import format_term, generate_fibonacci
from .fizzbuzz import classify, fizzbuzz_labels, format_label
from .limits import parse_limit, parse_limit_text

__all__ = [
    "AllocationFailure",
    "SeqcliError",
    "classify",
    "fizzbuzz_labels",
    "format_label",
    "format_term",
    "generate_fibonacci",
    "parse_limit",
    "parse_limit_text",
]
