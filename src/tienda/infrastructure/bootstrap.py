"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from datetime import date

from tienda.application.generate_invoice import GenerateInvoiceHandler
from tienda.application.show_saved_invoice import ShowSavedInvoiceHandler
from tienda.domain.model.pricing_policy import DEFAULT_POLICY, PricingPolicy
from tienda.infrastructure.config import Settings
from tienda.infrastructure.persistence.json_invoice_request_repository import (
    JsonInvoiceRequestRepository,
)


def pricing_policy() -> PricingPolicy:
    return DEFAULT_POLICY


def invoice_request_repository(settings: Settings) -> JsonInvoiceRequestRepository:
    return JsonInvoiceRequestRepository(settings.data_dir)


def generate_invoice_handler() -> GenerateInvoiceHandler:
    return GenerateInvoiceHandler(policy=pricing_policy(), clock=date.today)


def show_saved_invoice_handler(settings: Settings) -> ShowSavedInvoiceHandler:
    return ShowSavedInvoiceHandler(
        request_repo=invoice_request_repository(settings),
        generate_handler=generate_invoice_handler(),
    )
