import logging

import click
import uvicorn

from tienda.infrastructure.bootstrap import (
    generate_invoice_handler,
    show_saved_invoice_handler,
)
from tienda.infrastructure.cli.invoice_commands import (
    invoice_create,
    invoice_list,
    invoice_show,
)
from tienda.infrastructure.config import Settings
from tienda.infrastructure.web.app import create_app

logger = logging.getLogger(__name__)


@click.group()
def cli() -> None:
    """Tienda Eco: invoice generator"""


@cli.group()
def invoice() -> None:
    """Generate invoices."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default: TIENDA_HOST).")
@click.option("--port", default=None, type=int, help="Port (default: TIENDA_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP invoice API."""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(
        generate_handler=generate_invoice_handler(),
        saved_handler=show_saved_invoice_handler(settings),
    )
    host = host or settings.host
    port = port or settings.port
    logger.info("Invoice API listening on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())


# Register subcommands
invoice.add_command(invoice_create)
invoice.add_command(invoice_list)
invoice.add_command(invoice_show)
