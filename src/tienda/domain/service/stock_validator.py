"""Domain service: stock check run before any invoice is priced."""

from __future__ import annotations

from collections.abc import Iterable

from tienda.domain.model.cart import CartItem


def has_enough_stock(items: Iterable[CartItem]) -> bool:
    """True if every item's quantity fits in its available stock.

    An empty cart trivially passes.
    """
    return all(item.is_in_stock for item in items)


def find_shortages(items: Iterable[CartItem]) -> list[CartItem]:
    """Items asking for more units than are available, in cart order."""
    return [item for item in items if not item.is_in_stock]
