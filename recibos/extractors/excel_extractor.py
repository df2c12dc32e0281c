"""
Excel extractor module: spreadsheet → canonical employee records.
"""
from typing import List, Optional

from recibos.extractors.base import BaseExtractor
from recibos.extractors.excel.column_detector import ColumnDetector
from recibos.extractors.excel.config import DEFAULT_CONFIG, ExtractorConfig
from recibos.extractors.excel.data_cleaner import DataCleaner
from recibos.extractors.excel.reader import ExcelReader
from recibos.extractors.excel.row_normalizer import RowNormalizer
from recibos.ir import ParseResult
from recibos.logger import get_logger

logger = get_logger(__name__)


class ExcelExtractor(BaseExtractor):
    """
    Extractor for spreadsheet files (.xlsx, .xls, .csv).

    Reads the first sheet, takes its first row as headers, detects which
    header feeds which canonical field and normalises every data row.
    """

    source_type = "excel"

    def __init__(
        self,
        cfg: ExtractorConfig = DEFAULT_CONFIG,
        reader: Optional[ExcelReader] = None,
        detector: Optional[ColumnDetector] = None,
    ):
        self._cfg = cfg
        self._reader = reader or ExcelReader(cfg)
        self._detector = detector or ColumnDetector()

    def extract(self, file_path: str) -> ParseResult:
        """
        Extract records from a spreadsheet.

        Raises:
            EmptyInputError: the first sheet has no rows.
        """
        warnings: List[str] = []
        headers, rows = self._reader.read_table(file_path, warnings=warnings)
        mapping = self._detector.detect(headers)

        logger.info("Excel headers: %s", headers)
        logger.info("Column mapping: %s", mapping)
        logger.info("Total rows: %d", len(rows))

        for field in ColumnDetector.unmapped_fields(mapping):
            warnings.append(f"column_not_found:{field}")

        normalizer = RowNormalizer(headers, mapping)
        records = normalizer.normalize_rows(rows)
        for idx, record in enumerate(records[: self._cfg.log_preview_rows], start=1):
            logger.debug("Row %d: %s", idx, record.to_payload())

        skipped = sum(1 for row in rows if not DataCleaner.is_empty_row(row)) - len(records)
        if skipped > 0:
            warnings.append(f"rows_without_name_skipped:{skipped}")

        return ParseResult(
            source_type="excel",
            headers=[DataCleaner.cell_to_str(h) for h in headers],
            mapping=mapping,
            data=records,
            warnings=warnings,
        )


def extract_excel(path: str) -> ParseResult:
    """Convenience wrapper around ``ExcelExtractor().parse``."""
    return ExcelExtractor().parse(path)
