"""DLMM SDK error classes.

Hard errors (DomainError, TransportError) propagate to the caller.
MalformedResponseError is soft: the quote resolver absorbs it into an
invalid quote.
"""


class DlmmError(Exception):
    """Base error for DLMM SDK operations."""

    pass


class DomainError(DlmmError, ValueError):
    """Invalid input to a pure math function (e.g. non-positive bin step)."""

    pass


class TransportError(DlmmError):
    """The ledger gateway could not be reached or the RPC call failed in transit."""

    pass


class MalformedResponseError(DlmmError):
    """The ledger gateway returned a result with an unexpected shape."""

    pass


__all__ = ["DlmmError", "DomainError", "TransportError", "MalformedResponseError"]
