"""CLI commands for invoices."""

from __future__ import annotations

import json
from typing import IO

import click

from tienda.application.dto import InvoiceDTO
from tienda.application.payload import parse_invoice_request
from tienda.domain.exceptions import DomainException
from tienda.infrastructure.bootstrap import (
    generate_invoice_handler,
    show_saved_invoice_handler,
)
from tienda.infrastructure.config import Settings


def _display_invoice(dto: InvoiceDTO) -> None:
    click.echo(dto.ticket)
    click.echo()
    click.echo(f"{dto.message} ({dto.customer_name}, {dto.total})")


@click.command("create")
@click.option(
    "--file",
    "payload_file",
    required=True,
    type=click.File("r", encoding="utf-8"),
    help="JSON request with 'customer' and 'cart' ('-' reads stdin).",
)
def invoice_create(payload_file: IO[str]) -> None:
    """Generate an invoice from a JSON request."""
    try:
        body = json.load(payload_file)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON: {exc.msg}")

    handler = generate_invoice_handler()

    try:
        customer, items = parse_invoice_request(body)
        dto = handler.handle(customer, items)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_invoice(dto)


@click.command("show")
@click.option("--name", required=True, help="Stored request name (file stem).")
def invoice_show(name: str) -> None:
    """Generate the invoice of a stored request."""
    handler = show_saved_invoice_handler(Settings.from_env())

    try:
        dto = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_invoice(dto)


@click.command("list")
def invoice_list() -> None:
    """List stored invoice requests."""
    handler = show_saved_invoice_handler(Settings.from_env())
    names = handler.list_names()

    if not names:
        click.echo("No stored invoice requests found.")
        return

    for name in names:
        click.echo(name)
