"""
Extractors: payroll input files → canonical employee records.

Provides:
- BaseExtractor: abstract interface
- ExcelExtractor: spreadsheets (.xlsx, .xls, .csv)
- ImageExtractor: photographed or scanned tables (OCR)
"""

from recibos.extractors.base import BaseExtractor
from recibos.extractors.excel_extractor import ExcelExtractor, extract_excel
from recibos.extractors.image_extractor import ImageExtractor, extract_image

__all__ = [
    "BaseExtractor",
    "ExcelExtractor",
    "ImageExtractor",
    "extract_excel",
    "extract_image",
]
