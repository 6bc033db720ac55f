"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and report them to the
caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tienda.domain.service.invoice_calculator import StockShortage


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidRequestError(ValidationError):
    """The customer or cart in an incoming request is missing or malformed."""


class StockShortageError(DomainException):
    """At least one cart item asks for more units than are in stock."""

    def __init__(self, shortage: StockShortage) -> None:
        super().__init__(shortage.message)
        self.shortage = shortage


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
