"""Shopping cart line items.

A cart is an ordered tuple of CartItem. Order matters: it is the order
products are listed on the receipt and the order prices are summed in.
"""

from __future__ import annotations

from dataclasses import dataclass

from tienda.domain.exceptions import ValidationError
from tienda.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:
    """A product the customer wants, with the stock known at checkout time."""

    name: str
    quantity: Quantity
    unit_price: Money
    available_stock: int
    is_fragile: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.available_stock, bool) or not isinstance(
            self.available_stock, int
        ):
            raise ValidationError(
                f"Available stock must be an integer, got "
                f"{type(self.available_stock).__name__}"
            )
        if self.available_stock < 0:
            raise ValidationError(
                f"Available stock for {self.name} cannot be negative"
            )

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @property
    def is_in_stock(self) -> bool:
        return self.quantity.value <= self.available_stock


Cart = tuple[CartItem, ...]
