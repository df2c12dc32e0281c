"""
Receipt PDF rendering with reportlab platypus.

``build_receipt_story`` turns one record into the list of flowables of the
receipt (title, header lines, DESCRIÇÃO/VALOR table, totals);
``render_receipt_pdf`` lays that story out on an A4 page.
"""

from __future__ import annotations

import io
from datetime import date
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle
from reportlab.platypus.flowables import Flowable, HRFlowable

from recibos.config import Settings, get_settings
from recibos.ir import EmployeeRecord
from recibos.render.template import format_currency, format_date_pt, receipt_line_items

PAGE_MARGIN = 14 * mm
DEDUCTION_COLOR = colors.HexColor("#dc2626")
HEADER_FILL = colors.HexColor("#f0f0f0")
GRID_COLOR = colors.HexColor("#cccccc")


def _styles():
    base = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("ReceiptTitle", parent=base["Title"], fontSize=24, leading=30, alignment=0),
        "info": ParagraphStyle("ReceiptInfo", parent=base["Normal"], fontSize=10.5, leading=15),
        "cell": ParagraphStyle("ReceiptCell", parent=base["Normal"], fontSize=10.5, alignment=1),
        "cell_bold": ParagraphStyle("ReceiptCellBold", parent=base["Normal"], fontSize=10.5, alignment=1,
                                    fontName="Helvetica-Bold"),
        "footer": ParagraphStyle("ReceiptFooter", parent=base["Normal"], fontSize=10.5, leading=15),
        "footer_bold": ParagraphStyle("ReceiptFooterBold", parent=base["Normal"], fontSize=10.5, leading=15,
                                      fontName="Helvetica-Bold"),
    }


def _items_table(record: EmployeeRecord, symbol: str, styles) -> Table:
    data = [[Paragraph("<b>DESCRIÇÃO</b>", styles["cell"]), Paragraph("<b>VALOR</b>", styles["cell"])]]
    deduction_rows = []
    for label, value, is_deduction in receipt_line_items(record, symbol):
        if is_deduction:
            deduction_rows.append(len(data))
            label_style = ParagraphStyle("DeductionLabel", parent=styles["cell_bold"], textColor=DEDUCTION_COLOR)
            value_style = ParagraphStyle("DeductionValue", parent=styles["cell"], textColor=DEDUCTION_COLOR)
        else:
            label_style, value_style = styles["cell_bold"], styles["cell"]
        data.append([Paragraph(escape(label), label_style), Paragraph(escape(value), value_style)])

    width = A4[0] - 2 * PAGE_MARGIN
    table = Table(data, colWidths=[width / 2, width / 2], rowHeights=[16 * mm] * len(data))
    commands = [
        ("GRID", (0, 0), (-1, -1), 0.75, GRID_COLOR),
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_FILL),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    for row in deduction_rows:
        commands.append(("TEXTCOLOR", (0, row), (-1, row), DEDUCTION_COLOR))
    table.setStyle(TableStyle(commands))
    return table


def build_receipt_story(
    record: EmployeeRecord,
    receipt_number: int,
    issued_on: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> List[Flowable]:
    """Return the flowables of one receipt. No shared state is touched."""
    settings = settings or get_settings()
    symbol = settings.CURRENCY_SYMBOL
    styles = _styles()
    total = format_currency(record.total or 0, symbol)

    return [
        Paragraph("Recibo", styles["title"]),
        HRFlowable(width="100%", thickness=1, color=GRID_COLOR, spaceBefore=2, spaceAfter=14),
        Paragraph(f"<b>Recibo nº:</b> {receipt_number}", styles["info"]),
        Paragraph(f"<b>Data:</b> {format_date_pt(issued_on)}", styles["info"]),
        Paragraph(f"<b>Cliente:</b> {escape(record.name or 'N/A')}", styles["info"]),
        Spacer(1, 14),
        _items_table(record, symbol, styles),
        Spacer(1, 14),
        Paragraph(
            "Confirmamos o recebimento total dos produtos/serviços "
            f"<b>Valor Total: {escape(total)}</b> descritos nesse recibo.",
            styles["footer"],
        ),
        Spacer(1, 6),
        Paragraph(f"Valor Final: {escape(total)}", styles["footer_bold"]),
        Paragraph(f"Condições de pagamento: {escape(settings.PAYMENT_CONDITION)}", styles["footer_bold"]),
    ]


def render_receipt_pdf(
    record: EmployeeRecord,
    receipt_number: int,
    issued_on: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> bytes:
    """Render one receipt to A4 PDF bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=PAGE_MARGIN,
        bottomMargin=PAGE_MARGIN,
        title=f"Recibo {receipt_number}",
        author=record.name,
    )
    doc.build(build_receipt_story(record, receipt_number, issued_on, settings))
    return buf.getvalue()
