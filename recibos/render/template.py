"""
Receipt template helpers: currency and date formatting, line items and
file naming. Everything here is pure; the PDF layout lives in
:mod:`recibos.render.pdf`.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from recibos.config import get_settings
from recibos.ir import EmployeeRecord
from recibos.normalize import as_amount, coerce_number

MONTHS_PT = (
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)

# (label, value text, is_deduction)
LineItem = Tuple[str, str, bool]


def format_currency(value, symbol: Optional[str] = None) -> str:
    """``"$ 1234.50"``; missing or non-numeric amounts render as zero."""
    if symbol is None:
        symbol = get_settings().CURRENCY_SYMBOL
    return f"{symbol} {float(as_amount(value)):.2f}"


def format_date_pt(day: Optional[date] = None) -> str:
    """``"19 de outubro de 2026"`` (today when *day* is omitted)."""
    day = day or date.today()
    return f"{day.day} de {MONTHS_PT[day.month - 1]} de {day.year}"


def _is_nonzero(value) -> bool:
    if value is None:
        return False
    number = coerce_number(value)
    return number is None or number != 0


def receipt_line_items(record: EmployeeRecord, symbol: Optional[str] = None) -> List[LineItem]:
    """
    Ordered table rows for one receipt.

    Shift counts and the base salary appear whenever present; benefits,
    bonus and deductions only when present and non-zero.
    """
    items: List[LineItem] = []
    if record.dias_diurnos is not None:
        items.append(("Dias Diurnos", str(record.dias_diurnos), False))
    if record.dias_noturnos is not None:
        items.append(("Dias Noturnos", str(record.dias_noturnos), False))
    if record.base_salary is not None:
        items.append(("Salário Base", format_currency(record.base_salary, symbol), False))
    if _is_nonzero(record.beneficios):
        items.append(("Benefícios", format_currency(record.beneficios, symbol), False))
    if _is_nonzero(record.bonus5):
        items.append(("Bônus de 5%", format_currency(record.bonus5, symbol), False))
    if _is_nonzero(record.descontos):
        items.append(("Descontos", "-" + format_currency(record.descontos, symbol), True))
    return items


def safe_filename_part(text: str) -> str:
    """Path separators and control characters are not allowed in archive names."""
    cleaned = "".join("-" if ch in "/\\" else ch for ch in str(text) if ch.isprintable())
    return cleaned.strip() or "sem nome"


def receipt_filename(name: str, issued_on: Optional[date] = None) -> str:
    """``Recibo - <name> - <day> de <month> de <year>.pdf``."""
    return f"Recibo - {safe_filename_part(name)} - {format_date_pt(issued_on)}.pdf"
