"""
ColumnDetector: map spreadsheet headers to canonical record fields.

Matching is a plain walk over the ordered rule table in
:mod:`recibos.extractors.excel.config`; the first header (lowest index)
matching a field wins, later candidates for that field are ignored.
"""

from __future__ import annotations

from typing import Any, List, Pattern, Sequence, Tuple

from recibos.extractors.excel.config import COLUMN_RULES
from recibos.extractors.excel.data_cleaner import DataCleaner
from recibos.ir import ColumnMapping, empty_mapping


class ColumnDetector:
    """Stateless first-match-wins header classifier."""

    def __init__(self, rules: Sequence[Tuple[str, Pattern[str]]] = COLUMN_RULES):
        self._rules = tuple(rules)

    def detect(self, headers: Sequence[Any]) -> ColumnMapping:
        """
        Return ``{field: header or None}`` for every canonical field.

        The stored value is the header exactly as it appears in the sheet
        (trimmed), so callers can show it back to the user and look up its
        column.
        """
        mapping = empty_mapping()
        for field, _ in self._rules:
            mapping.setdefault(field, None)
        for header in headers:
            clean = DataCleaner.cell_to_str(header)
            if not clean:
                continue
            for field, pattern in self._rules:
                if mapping[field] is None and pattern.search(clean):
                    mapping[field] = clean
        return mapping

    @staticmethod
    def unmapped_fields(mapping: ColumnMapping) -> List[str]:
        return [field for field, header in mapping.items() if header is None]
