"""Decoding of invoice request payloads.

A request body looks like::

    {
      "customer": {"name": "ana", "email": "a@b.com"},
      "cart": [
        {"name": "Maceta", "quantity": 2, "unitPrice": 60,
         "availableStock": 10, "isFragile": true}
      ]
    }

The Spanish field names used by the first clients of the shop
(``cliente``/``carrito``, ``nombre``, ``cantidad``, ``precio``,
``stockDisponible``, ``esFragil``) are accepted as aliases.

Anything malformed is rejected here with InvalidRequestError, before the
invoice calculator ever sees it.
"""

from __future__ import annotations

from typing import Any

from tienda.application.dto import CartItemSpec, CustomerSpec
from tienda.domain.exceptions import InvalidRequestError

MISSING_DATA_MESSAGE = "Faltan datos del cliente o el carrito no es válido."

_MISSING = object()

_CUSTOMER_KEYS = ("customer", "cliente")
_CART_KEYS = ("cart", "carrito")
_NAME_KEYS = ("name", "nombre")
_EMAIL_KEYS = ("email",)
_QUANTITY_KEYS = ("quantity", "cantidad")
_PRICE_KEYS = ("unitPrice", "precio")
_STOCK_KEYS = ("availableStock", "stockDisponible")
_FRAGILE_KEYS = ("isFragile", "esFragil")


def parse_invoice_request(body: Any) -> tuple[CustomerSpec, list[CartItemSpec]]:
    """Split a decoded JSON body into customer and cart specs."""
    if not isinstance(body, dict):
        raise InvalidRequestError(MISSING_DATA_MESSAGE)

    customer = _lookup(body, _CUSTOMER_KEYS)
    cart = _lookup(body, _CART_KEYS)
    if not isinstance(customer, dict) or not isinstance(cart, list):
        raise InvalidRequestError(MISSING_DATA_MESSAGE)

    return _parse_customer(customer), [
        _parse_item(position, raw) for position, raw in enumerate(cart, start=1)
    ]


# --- Internal helpers ---------------------------------------------------------


def _lookup(data: dict[str, Any], keys: tuple[str, ...], default: Any = _MISSING) -> Any:
    for key in keys:
        if key in data and data[key] is not None:
            return data[key]
    return None if default is _MISSING else default


def _parse_customer(raw: dict[str, Any]) -> CustomerSpec:
    name = _lookup(raw, _NAME_KEYS)
    if not isinstance(name, str) or not name.strip():
        raise InvalidRequestError("Customer name is required")

    email = _lookup(raw, _EMAIL_KEYS, default="")
    if not isinstance(email, str):
        raise InvalidRequestError("Customer email must be text")

    return CustomerSpec(name=name, email=email)


def _parse_item(position: int, raw: Any) -> CartItemSpec:
    if not isinstance(raw, dict):
        raise InvalidRequestError(f"Cart item #{position} must be an object")

    name = _lookup(raw, _NAME_KEYS)
    if not isinstance(name, str) or not name.strip():
        raise InvalidRequestError(f"Cart item #{position} has no name")

    quantity = _require_int(raw, _QUANTITY_KEYS, f"Quantity of '{name}'")
    stock = _require_int(raw, _STOCK_KEYS, f"Available stock of '{name}'")

    price = _lookup(raw, _PRICE_KEYS)
    if isinstance(price, bool) or not isinstance(price, (int, float, str)):
        raise InvalidRequestError(f"Unit price of '{name}' must be a number")

    fragile = _lookup(raw, _FRAGILE_KEYS, default=False)
    if not isinstance(fragile, bool):
        raise InvalidRequestError(f"Fragile flag of '{name}' must be true or false")

    return CartItemSpec(
        name=name,
        quantity=quantity,
        unit_price=str(price),
        available_stock=stock,
        is_fragile=fragile,
    )


def _require_int(raw: dict[str, Any], keys: tuple[str, ...], label: str) -> int:
    value = _lookup(raw, keys)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRequestError(f"{label} must be an integer")
    return value
