"""Standard output helpers for the sequence programs."""

from __future__ import annotations

import os
import sys


def discard_stdout() -> None:
    """Point stdout's descriptor at the null device.

    Called once the reader of a pipe has gone away, so the interpreter's
    exit-time flush does not raise a second ``BrokenPipeError``.
    """
    try:
        fileno = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, fileno)
    finally:
        os.close(devnull)
