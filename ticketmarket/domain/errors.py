"""
Marketplace error taxonomy.

Closed set of failure kinds. The kind is the whole user-visible signal;
no error carries free-form text that callers are expected to parse.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Failure kinds reported by marketplace operations."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NOT_AUTHORIZED = "not_authorized"
    INVALID_OPERATION = "invalid_operation"
    INSUFFICIENT_FUNDS = "insufficient_funds"  # settlement declined
    SOLD_OUT = "sold_out"
    LIMIT_EXCEEDED = "limit_exceeded"


class MarketplaceError(Exception):
    """Raised by services; converted to an output error at the component boundary."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __repr__(self) -> str:
        return f"MarketplaceError({self.kind.value!r})"
