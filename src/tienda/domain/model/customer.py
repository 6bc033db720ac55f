"""Customer the invoice is issued to."""

from __future__ import annotations

from dataclasses import dataclass

from tienda.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Customer:
    """Name and contact e-mail, taken verbatim from the request.

    Neither is normalised: the name is only checked for being non-blank
    and the e-mail is not validated. Both are printed as given.
    """

    name: str
    email: str

    @staticmethod
    def create(name: str, email: str) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(name=name, email=email)
