"""HTTP API for invoices (Starlette).

    POST /factura           body: {"customer": {...}, "cart": [...]}
    GET  /factura/{archivo} invoice of the request stored as <archivo>.json

Success:  200 {"mensaje": "...", "ticket": "<receipt text>"}
Failure:  400 {"error": "..."}   (404 when a stored request is unknown)
"""

from __future__ import annotations

import json
import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from tienda.application.dto import InvoiceDTO
from tienda.application.generate_invoice import GenerateInvoiceHandler
from tienda.application.payload import parse_invoice_request
from tienda.application.show_saved_invoice import ShowSavedInvoiceHandler
from tienda.domain.exceptions import DomainException, EntityNotFoundError

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "El cuerpo de la petición no es JSON válido."


def create_app(
    generate_handler: GenerateInvoiceHandler,
    saved_handler: ShowSavedInvoiceHandler,
) -> Starlette:

    async def create_invoice(request: Request) -> Response:
        logger.info("POST /factura received a new cart")
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return _error(INVALID_JSON_MESSAGE)

        try:
            customer, items = parse_invoice_request(body)
            logger.info("Generating invoice for %s", customer.name)
            dto = generate_handler.handle(customer, items)
        except DomainException as exc:
            logger.info("Invoice rejected: %s", exc)
            return _error(str(exc))

        return _success(dto)

    def show_invoice(request: Request) -> Response:
        # sync endpoint: Starlette runs it in its threadpool
        name = request.path_params["archivo"]
        logger.info("GET /factura/%s", name)
        try:
            dto = saved_handler.handle(name)
        except EntityNotFoundError as exc:
            return _error(str(exc), status_code=404)
        except DomainException as exc:
            logger.info("Invoice '%s' rejected: %s", name, exc)
            return _error(str(exc))

        return _success(dto)

    return Starlette(
        routes=[
            Route("/factura", create_invoice, methods=["POST"]),
            Route("/factura/{archivo}", show_invoice, methods=["GET"]),
        ]
    )


def _success(dto: InvoiceDTO) -> JSONResponse:
    return JSONResponse({"mensaje": dto.message, "ticket": dto.ticket})


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)
