"""
Image extractor module: photographed or scanned payroll table → records.
"""
from typing import Optional

import pytesseract
from PIL import Image

from recibos.config import Settings, get_settings
from recibos.errors import RecognitionError
from recibos.extractors.base import BaseExtractor
from recibos.extractors.image.ocr_parser import OCR_HEADERS, ocr_mapping, parse_ocr_text
from recibos.ir import ParseResult
from recibos.logger import get_logger

logger = get_logger(__name__)

RECOGNITION_FAILED_MESSAGE = (
    "Failed to process image. Please ensure the image contains clear, readable text."
)


class ImageExtractor(BaseExtractor):
    """
    Extractor for image files (.png, .jpg, .jpeg, ...).

    Runs Tesseract over the image and hands the text to
    :func:`parse_ocr_text`. Any failure of the recognition step aborts the
    whole extraction with :class:`RecognitionError`.
    """

    source_type = "image"

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def recognize(self, file_path: str) -> str:
        """Return the raw OCR text of *file_path*."""
        if self._settings.TESSERACT_CMD:
            pytesseract.pytesseract.tesseract_cmd = self._settings.TESSERACT_CMD
        logger.info("Starting OCR processing for: %s", file_path)
        try:
            with Image.open(file_path) as img:
                text = pytesseract.image_to_string(img, lang=self._settings.OCR_LANGUAGE)
        except Exception as e:
            logger.error("OCR failed for %s: %s", file_path, e, exc_info=True)
            raise RecognitionError(RECOGNITION_FAILED_MESSAGE) from e
        logger.debug("OCR extracted %d characters from %s", len(text or ""), file_path)
        return text or ""

    def extract(self, file_path: str) -> ParseResult:
        text = self.recognize(file_path)
        records = parse_ocr_text(text)
        warnings = []
        if not records:
            warnings.append("no_employee_lines_recognized")
        return ParseResult(
            source_type="image",
            headers=list(OCR_HEADERS),
            mapping=ocr_mapping(),
            data=records,
            warnings=warnings,
        )


def extract_image(path: str) -> ParseResult:
    """Convenience wrapper around ``ImageExtractor().parse``."""
    return ImageExtractor().parse(path)
