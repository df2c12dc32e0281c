"""
ExcelReader: low-level file I/O for the first sheet of a spreadsheet.

Encapsulates:
- pandas engine selection (openpyxl for .xlsx, xlrd for .xls, csv reader)
- openpyxl values fallback when pandas cannot parse a workbook
- splitting the sheet into a header row and data rows
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, List, Optional, Tuple

import pandas as pd
from openpyxl import load_workbook

from recibos.errors import EmptyInputError, UnsupportedFileError
from recibos.extractors.excel.config import (
    CSV_SUFFIXES,
    DEFAULT_CONFIG,
    XLS_SUFFIXES,
    XLSX_SUFFIXES,
    ExtractorConfig,
)
from recibos.extractors.excel.data_cleaner import DataCleaner
from recibos.logger import get_logger

logger = get_logger(__name__)

Row = List[Any]


class ExcelReader:
    """Load the first sheet of a spreadsheet as plain Python rows."""

    def __init__(self, cfg: ExtractorConfig = DEFAULT_CONFIG):
        self._cfg = cfg

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def read_rows(self, file_path: str, warnings: Optional[List[str]] = None) -> Tuple[List[Row], str]:
        """
        Read every row of the first sheet.

        Returns ``(rows, backend_label)``. Cells are cleaned (NaN → ``None``,
        numpy scalars → Python values) but otherwise keep their type.
        """
        suffix = Path(file_path).suffix.lower()
        if suffix in CSV_SUFFIXES:
            df = self._read_csv(file_path)
            backend = "pandas_csv"
        elif suffix in XLS_SUFFIXES:
            df = pd.read_excel(file_path, sheet_name=0, header=None, dtype=object, engine="xlrd")
            backend = "pandas_xlrd"
        elif suffix in XLSX_SUFFIXES:
            try:
                df = pd.read_excel(file_path, sheet_name=0, header=None, dtype=object, engine="openpyxl")
                backend = "pandas_openpyxl"
            except (ValueError, KeyError, TypeError) as e:
                logger.warning("pandas could not read %s (%s); falling back to openpyxl values", file_path, e)
                if warnings is not None:
                    warnings.append("excel_read_fallback_openpyxl_values")
                return self._read_openpyxl_values(file_path), "openpyxl_values"
        else:
            raise UnsupportedFileError(f"Unsupported spreadsheet type: {suffix or file_path}")

        rows = [
            [DataCleaner.clean_cell(v) for v in row]
            for row in df.itertuples(index=False, name=None)
        ]
        return rows, backend

    def read_table(self, file_path: str, warnings: Optional[List[str]] = None) -> Tuple[List[Any], List[Row]]:
        """
        Split the first sheet into ``(headers, data_rows)``.

        The first non-empty row is the header row. Raises
        :class:`EmptyInputError` when the sheet has no rows.
        """
        rows, backend = self.read_rows(file_path, warnings=warnings)
        start = 0
        while start < len(rows) and DataCleaner.is_empty_row(rows[start]):
            start += 1
        if start >= len(rows):
            raise EmptyInputError("Excel file is empty")
        headers = _trim_trailing_empty(rows[start])
        logger.debug("Read %d rows from %s via %s", len(rows) - start, file_path, backend)
        return headers, rows[start + 1:]

    # ------------------------------------------------------------------
    # Backends
    # ------------------------------------------------------------------

    def _read_csv(self, file_path: str) -> pd.DataFrame:
        options = dict(header=None, dtype=object, keep_default_na=False, encoding=self._cfg.csv_encoding)
        sep = self._sniff_delimiter(file_path)
        try:
            return pd.read_csv(file_path, sep=sep, **options)
        except pd.errors.EmptyDataError as e:
            raise EmptyInputError("Excel file is empty") from e

    def _sniff_delimiter(self, file_path: str) -> str:
        """
        Pick the CSV delimiter among the configured candidates.

        Single-column files and undecidable samples use a comma, so spaces
        inside cells never split a column.
        """
        with open(file_path, "r", encoding=self._cfg.csv_encoding, errors="replace", newline="") as fh:
            sample = fh.read(self._cfg.csv_sniff_chars)
        try:
            return csv.Sniffer().sniff(sample, delimiters=self._cfg.csv_delimiters).delimiter
        except csv.Error:
            logger.debug("Delimiter sniffing failed for %s; using comma", file_path)
            return ","

    def _read_openpyxl_values(self, file_path: str) -> List[Row]:
        wb = load_workbook(file_path, read_only=True, data_only=True)
        try:
            ws = wb.worksheets[0]
            return [[DataCleaner.clean_cell(v) for v in row] for row in ws.iter_rows(values_only=True)]
        finally:
            wb.close()


def _trim_trailing_empty(row: Row) -> Row:
    end = len(row)
    while end > 0 and DataCleaner.is_empty(row[end - 1]):
        end -= 1
    return list(row[:end])
