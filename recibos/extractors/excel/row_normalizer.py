"""
RowNormalizer: turn a positional spreadsheet row into a canonical record.

Rules:
- empty rows are skipped
- empty cells leave the field absent
- every field but ``name`` is stored as a number when it parses as one,
  otherwise verbatim
- ``total`` is derived only when absent and ``baseSalary`` is present
- rows without a name are dropped
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from recibos.extractors.excel.data_cleaner import DataCleaner
from recibos.ir import ColumnMapping, EmployeeRecord
from recibos.logger import get_logger
from recibos.normalize import coerce_number, derive_total

logger = get_logger(__name__)


class RowNormalizer:
    """Normalise rows against one header list and its column mapping."""

    def __init__(self, headers: Sequence[Any], mapping: ColumnMapping):
        clean_headers = [DataCleaner.cell_to_str(h) for h in headers]
        self._columns: Dict[str, int] = {}
        for field, header in mapping.items():
            if header is None:
                continue
            try:
                self._columns[field] = clean_headers.index(header)
            except ValueError:
                logger.debug("Mapped header %r for %s not found in header row", header, field)

    @property
    def columns(self) -> Dict[str, int]:
        """``{field: column index}`` for the mapped fields."""
        return dict(self._columns)

    def raw_fields(self, row: Sequence[Any]) -> Optional[Dict[str, Any]]:
        """
        Collect the mapped, non-empty values of *row* with numeric coercion
        and total derivation applied. Returns ``None`` for an empty row.
        """
        if DataCleaner.is_empty_row(row):
            return None
        fields: Dict[str, Any] = {}
        for field, idx in self._columns.items():
            if idx >= len(row):
                continue
            value = DataCleaner.clean_cell(row[idx])
            if value is None:
                continue
            if field == "name":
                fields[field] = DataCleaner.cell_to_str(value)
                continue
            number = coerce_number(value)
            fields[field] = number if number is not None else value
        if fields.get("total") is None and fields.get("baseSalary") is not None:
            fields["total"] = derive_total(fields)
        return fields

    def normalize(self, row: Sequence[Any]) -> Optional[EmployeeRecord]:
        """Return the canonical record for *row*, or ``None`` to skip it."""
        fields = self.raw_fields(row)
        if not fields or not fields.get("name"):
            return None
        return EmployeeRecord.model_validate(_stringify_odd_values(fields))

    def normalize_rows(self, rows: Sequence[Sequence[Any]]) -> List[EmployeeRecord]:
        records: List[EmployeeRecord] = []
        for row in rows:
            record = self.normalize(row)
            if record is not None:
                records.append(record)
        return records


def _stringify_odd_values(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Dates, booleans and other non-text cells are kept as their text."""
    out: Dict[str, Any] = {}
    for key, value in fields.items():
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            out[key] = DataCleaner.cell_to_str(value)
        else:
            out[key] = value
    return out
