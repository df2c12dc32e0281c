"""
Spreadsheet extraction subpackage.

Public API:
  - ColumnDetector   (header → canonical field mapping)
  - RowNormalizer    (row → EmployeeRecord)
  - ExcelReader      (file I/O, first sheet)
  - DataCleaner      (cell normalisation)
  - ExtractorConfig  (tunable limits)
"""

from recibos.extractors.excel.column_detector import ColumnDetector
from recibos.extractors.excel.config import COLUMN_RULES, DEFAULT_CONFIG, ExtractorConfig
from recibos.extractors.excel.data_cleaner import DataCleaner
from recibos.extractors.excel.reader import ExcelReader
from recibos.extractors.excel.row_normalizer import RowNormalizer

__all__ = [
    "COLUMN_RULES",
    "ColumnDetector",
    "DEFAULT_CONFIG",
    "DataCleaner",
    "ExcelReader",
    "ExtractorConfig",
    "RowNormalizer",
]
