"""
DataCleaner: cell-level cleanup for the spreadsheet pipeline.

Responsibilities:
- Empty-cell and empty-row detection (None, NaN, NaT, blank text)
- Raw cell cleanup that keeps the cell type (``clean_cell``)
- Text rendering of header and name cells (``cell_to_str``)
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence

import pandas as pd

# str() of pandas/numpy empty markers
_EMPTY_MARKERS = frozenset({"nan", "none", "nat"})


class DataCleaner:
    """Stateless helper for raw spreadsheet cells."""

    @staticmethod
    def is_empty(value: Any) -> bool:
        if value is None or value is pd.NaT:
            return True
        if isinstance(value, float):
            return bool(pd.isna(value))
        return isinstance(value, str) and not value.strip()

    @classmethod
    def is_empty_row(cls, row: Sequence[Any]) -> bool:
        return not row or all(cls.is_empty(v) for v in row)

    @staticmethod
    def clean_cell(value: Any) -> Any:
        """
        Strip pandas artefacts from a raw cell while keeping its type.

        NaN/NaT become ``None``, numpy scalars become plain Python values and
        strings are stripped; everything else passes through.
        """
        if DataCleaner.is_empty(value):
            return None
        item = getattr(value, "item", None)
        if callable(item) and not isinstance(value, (str, pd.Timestamp)):
            try:
                value = item()
            except (TypeError, ValueError):
                pass
        if isinstance(value, str):
            return value.strip()
        return value

    @staticmethod
    def cell_to_str(value: Any) -> str:
        """
        Text of a header or name cell.

        Dates use the dd/mm/yyyy form shown by pt-BR spreadsheets, integral
        floats lose their ``.0`` and empty markers become ``""``.
        """
        if DataCleaner.is_empty(value):
            return ""
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, datetime):
            if value.hour or value.minute:
                return value.strftime("%d/%m/%Y %H:%M")
            return value.strftime("%d/%m/%Y")
        if isinstance(value, date):
            return value.strftime("%d/%m/%Y")
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        # openpyxl rich text exposes its plain text
        for attr in ("plain", "text"):
            inner = getattr(value, attr, None)
            if isinstance(inner, str):
                return inner.strip()
        text = str(value).strip()
        return "" if text.lower() in _EMPTY_MARKERS else text
