"""Application service: Show Saved Invoice use case (query).

Regenerates the invoice of a request stored under a name.
"""

from __future__ import annotations

from tienda.application.dto import InvoiceDTO
from tienda.application.generate_invoice import GenerateInvoiceHandler
from tienda.application.payload import parse_invoice_request
from tienda.domain.exceptions import EntityNotFoundError
from tienda.domain.repository.invoice_request_repository import (
    InvoiceRequestRepository,
)


class ShowSavedInvoiceHandler:

    def __init__(
        self,
        request_repo: InvoiceRequestRepository,
        generate_handler: GenerateInvoiceHandler,
    ) -> None:
        self._request_repo = request_repo
        self._generate_handler = generate_handler

    def handle(self, name: str) -> InvoiceDTO:
        payload = self._request_repo.get_by_name(name)
        if payload is None:
            raise EntityNotFoundError(f"Invoice request '{name}' not found")
        customer, items = parse_invoice_request(payload)
        return self._generate_handler.handle(customer, items)

    def list_names(self) -> list[str]:
        return self._request_repo.list_names()
