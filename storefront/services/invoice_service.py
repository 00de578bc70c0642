# storefront/services/invoice_service.py
from decimal import Decimal
from io import BytesIO

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from storefront.domain.cart import Cart, TAX_RATE
from storefront.domain.exceptions import EmptyCartError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INVOICE_FILENAME = "factura_compra.pdf"
HEADERS = ["ID", "Producto", "Precio", "Cant.", "Subtotal"]


def money(value: Decimal) -> str:
    return f"${value:.2f}"


def _styles():
    base = getSampleStyleSheet()
    title = ParagraphStyle(
        "InvoiceTitle",
        parent=base["Title"],
        fontName="Helvetica-Bold",
        fontSize=18,
        textColor=colors.blue,
        alignment=TA_CENTER,
    )
    totals = ParagraphStyle("InvoiceTotals", parent=base["Normal"], alignment=TA_RIGHT)
    grand_total = ParagraphStyle(
        "InvoiceGrandTotal",
        parent=totals,
        fontName="Helvetica-Bold",
        fontSize=14,
        leading=18,
    )
    return title, totals, grand_total


def render_invoice(cart: Cart | None) -> bytes:
    """
    Builds the purchase invoice for the cart as a PDF document.

    The cart is only read: one table row per line item followed by
    subtotal, IVA and total, all shown with two decimals.
    """
    if cart is None or cart.is_empty:
        raise EmptyCartError("No se puede generar una factura de un carro vacío")

    title_style, totals_style, total_style = _styles()

    rows = [HEADERS]
    for item in cart.items:
        rows.append(
            [
                str(item.product.id),
                item.product.name,
                money(item.product.price),
                str(item.quantity),
                money(item.subtotal),
            ]
        )

    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, title="Factura de Compra")

    widths = [doc.width * share for share in (0.10, 0.40, 0.17, 0.13, 0.20)]
    table = Table(rows, colWidths=widths, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )

    rate = int(TAX_RATE * 100)
    story = [
        Paragraph("Factura de Compra", title_style),
        Spacer(1, 12),
        table,
        Spacer(1, 20),
        Paragraph(f"Subtotal: {money(cart.subtotal)}", totals_style),
        Paragraph(f"IVA ({rate}%): {money(cart.tax)}", totals_style),
        Paragraph(f"Total a Pagar: {money(cart.total)}", total_style),
    ]

    doc.build(story)

    logger.info(f"Invoice rendered: {len(cart.items)} lines, total {money(cart.total)}")
    return buffer.getvalue()
