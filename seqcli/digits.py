"""Integer/decimal-string conversion without the interpreter's digit cap."""

from __future__ import annotations

import sys


class unbounded_digits:
    """Context manager lifting ``sys.int_max_str_digits`` for its body.

    Interpreters without the cap (before 3.11) make this a no-op.
    """

    def __init__(self) -> None:
        self._saved: int | None = None

    def __enter__(self) -> None:
        if hasattr(sys, "set_int_max_str_digits"):
            self._saved = sys.get_int_max_str_digits()
            sys.set_int_max_str_digits(0)

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        if self._saved is not None:
            sys.set_int_max_str_digits(self._saved)
            self._saved = None
