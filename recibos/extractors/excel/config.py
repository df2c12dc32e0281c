"""
Centralised configuration for the spreadsheet extraction pipeline.

The ordered column rule table and the file-type constants live here so the
rest of the code stays free of hard-coded patterns.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern, Tuple


# ---------------------------------------------------------------------------
# Column rules: (canonical field, case-insensitive synonym pattern)
# Order matters: it is the order fields are tested for each header.
# ---------------------------------------------------------------------------

COLUMN_RULES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("name", re.compile(r"(nome|name|funcionario|employee|colaborador)", re.IGNORECASE)),
    ("diasDiurnos", re.compile(r"(dias?\s*diurnos?|day\s*shifts?|diurno)", re.IGNORECASE)),
    ("diasNoturnos", re.compile(r"(dias?\s*noturnos?|night\s*shifts?|noturno)", re.IGNORECASE)),
    ("baseSalary", re.compile(r"(sal[aá]rio\s*base|base\s*salary)", re.IGNORECASE)),
    ("beneficios", re.compile(r"(benef[ií]cios?)", re.IGNORECASE)),
    ("bonus5", re.compile(r"(b[oô]nus\s*de?\s*5%?|bonus\s*5%?)", re.IGNORECASE)),
    ("descontos", re.compile(r"(descontos?|discounts?)", re.IGNORECASE)),
    ("total", re.compile(r"(total)", re.IGNORECASE)),
)


# ---------------------------------------------------------------------------
# Supported file types
# ---------------------------------------------------------------------------

XLSX_SUFFIXES = frozenset({".xlsx", ".xlsm"})
XLS_SUFFIXES = frozenset({".xls"})
CSV_SUFFIXES = frozenset({".csv"})
SPREADSHEET_SUFFIXES = XLSX_SUFFIXES | XLS_SUFFIXES | CSV_SUFFIXES


@dataclass(frozen=True)
class ExtractorConfig:
    """Immutable bag of tunables used by the spreadsheet reader."""

    # Rows echoed to the debug log after normalisation
    log_preview_rows: int = 3
    csv_encoding: str = "utf-8-sig"
    # Delimiters the CSV sniffer may pick; anything else falls back to ","
    csv_delimiters: str = ",;\t|"
    csv_sniff_chars: int = 64 * 1024


DEFAULT_CONFIG = ExtractorConfig()
