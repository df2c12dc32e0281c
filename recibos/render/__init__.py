"""
Receipt rendering: template helpers and PDF layout.
"""

from recibos.render.pdf import build_receipt_story, render_receipt_pdf
from recibos.render.template import (
    MONTHS_PT,
    format_currency,
    format_date_pt,
    receipt_filename,
    receipt_line_items,
)

__all__ = [
    "MONTHS_PT",
    "build_receipt_story",
    "format_currency",
    "format_date_pt",
    "receipt_filename",
    "receipt_line_items",
    "render_receipt_pdf",
]
