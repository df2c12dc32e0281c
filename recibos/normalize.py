"""
Camada de normalização (Normalize Layer)
========================================

Conversão numérica tolerante e derivação do total, compartilhadas pelos
caminhos de planilha e de OCR.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, Union

Number = Union[int, float]

# Termos do total: (campo, sinal)
TOTAL_TERMS = (
    ("baseSalary", 1),
    ("beneficios", 1),
    ("bonus5", 1),
    ("descontos", -1),
)

_CURRENCY_NOISE_RE = re.compile(r"[R$\s]")
_LEADING_FLOAT_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _tidy(value: float) -> Number:
    """Devolve int quando o valor é inteiro, para exibir "22" e não "22.0"."""
    if value.is_integer():
        return int(value)
    return value


def coerce_number(value: Any) -> Optional[Number]:
    """
    Convert a cell value to a number, or ``None`` when it is not numeric.

    Accepts ints, floats and strings holding a complete number (surrounding
    whitespace allowed). Booleans, NaN and infinities are not numbers here.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return _tidy(float(value))
    text = str(value).strip()
    if not text:
        return None
    try:
        parsed = float(text)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return _tidy(parsed)


def as_amount(value: Any) -> Number:
    """Valor usado em contas: não numérico ou ausente vale zero."""
    number = coerce_number(value)
    return 0 if number is None else number


def parse_ocr_number(text: Any) -> Number:
    """
    Parse a number recognized by OCR.

    Currency symbols (``R``, ``$``) and whitespace are stripped, the first
    comma becomes the decimal point and the leading float is taken.
    Unparsable text yields zero.
    """
    if not text:
        return 0
    cleaned = _CURRENCY_NOISE_RE.sub("", str(text)).replace(",", ".", 1)
    match = _LEADING_FLOAT_RE.match(cleaned)
    if not match:
        return 0
    try:
        parsed = float(match.group(0))
    except ValueError:
        return 0
    if not math.isfinite(parsed):
        return 0
    return _tidy(parsed)


def derive_total(fields: Mapping[str, Any]) -> Number:
    """``baseSalary + beneficios + bonus5 - descontos``, termos ausentes = 0."""
    total: Number = 0
    for field, sign in TOTAL_TERMS:
        total += sign * as_amount(fields.get(field))
    return _tidy(float(total)) if isinstance(total, float) else total
