"""Receipt text for an Invoice.

The layout (line order, labels, banner characters) is consumed as-is by
existing clients, so it must stay byte-for-byte stable.
"""

from __future__ import annotations

from tienda.domain.model.invoice import Invoice

BANNER = "=" * 41
RULE = "-" * 41
ITEM_SEPARATOR = "\n  - "
DATE_FORMAT = "%d/%m/%Y"


def render_invoice(invoice: Invoice) -> str:
    products = ITEM_SEPARATOR.join(
        f"{item.quantity}x {item.name}" for item in invoice.items
    )
    fragile = "SÍ (Precaución: Frágil)" if invoice.needs_fragile_packaging else "No"
    shipping = "GRATIS" if invoice.has_free_shipping else f"+{invoice.shipping_cost}"
    tax_percent = f"{(invoice.tax_rate * 100).normalize():f}"

    lines = [
        BANNER,
        "🌱 TIENDA ECO - FACTURA OFICIAL 🌱",
        BANNER,
        f"👤 Cliente: {invoice.customer.name.upper()}",
        f"📧 Contacto: {invoice.customer.email}",
        "",
        "📦 Productos:",
        f"  - {products}",
        f"⚠️ Embalaje especial: {fragile}",
        "",
        "--- Desglose ---",
        f"Subtotal: {invoice.subtotal}",
        f"Descuento: -{invoice.discount}",
        f"Base Imponible: {invoice.taxed_base}",
        f"IVA ({tax_percent}%): +{invoice.tax_amount}",
        f"Envío: {shipping}",
        RULE,
        f"💶 TOTAL A PAGAR: {invoice.total}",
        BANNER,
        f"🚚 Entrega estimada: {invoice.estimated_delivery.strftime(DATE_FORMAT)}",
        BANNER,
    ]
    return "\n".join(lines)
