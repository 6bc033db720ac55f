"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP edges and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerSpec:
    """Input: who the invoice is for."""

    name: str
    email: str


@dataclass(frozen=True)
class CartItemSpec:
    """Input: one cart line as the client sent it."""

    name: str
    quantity: int
    unit_price: str  # decimal text, e.g. "60" or "1.5"
    available_stock: int
    is_fragile: bool = False


@dataclass(frozen=True)
class InvoiceDTO:
    """Output: the rendered receipt plus a few headline figures."""

    message: str
    ticket: str
    customer_name: str
    total: str  # formatted, e.g. "137.94€"
