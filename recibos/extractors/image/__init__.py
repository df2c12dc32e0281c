"""
Image (OCR) extraction subpackage.

Public API:
  - parse_ocr_text  (recognised text → EmployeeRecord list)
  - ocr_mapping     (fixed mapping description)
"""

from recibos.extractors.image.ocr_parser import OCR_HEADERS, classify_line, ocr_mapping, parse_ocr_text

__all__ = ["OCR_HEADERS", "classify_line", "ocr_mapping", "parse_ocr_text"]
