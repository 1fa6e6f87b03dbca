"""Error types raised by seqcli."""


class SeqcliError(RuntimeError):
    """Base error for seqcli failures reported by the CLI entrypoints."""


class AllocationFailure(SeqcliError):
    """Raised when an output string cannot be materialized."""
