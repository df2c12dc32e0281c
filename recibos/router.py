"""
Roteamento de arquivos (File Router Module)
===========================================

Escolhe o extrator pelo tipo do arquivo: imagem → OCR, planilha → Excel.
"""

from pathlib import Path
from typing import Optional

from recibos.errors import UnsupportedFileError
from recibos.extractors.base import BaseExtractor
from recibos.extractors.excel_extractor import ExcelExtractor
from recibos.extractors.image_extractor import ImageExtractor
from recibos.extractors.excel.config import SPREADSHEET_SUFFIXES
from recibos.ir import ParseResult, SourceType

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".webp", ".tif", ".tiff"}
EXCEL_EXTENSIONS = set(SPREADSHEET_SUFFIXES)

# Tipos MIME de planilha enviados pelos navegadores mais comuns
_SPREADSHEET_CONTENT_TYPES = {
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
    "text/csv",
}


def detect_source_type(filename: str, content_type: Optional[str] = None) -> SourceType:
    """
    Determina o SourceType de um arquivo.

    O content type "image/*" tem prioridade; depois vale a extensão.
    Tipos desconhecidos levantam UnsupportedFileError.
    """
    ctype = (content_type or "").split(";")[0].strip().lower()
    if ctype.startswith("image/"):
        return "image"
    ext = Path(filename or "").suffix.lower()
    if ext in IMAGE_EXTENSIONS:
        return "image"
    if ext in EXCEL_EXTENSIONS:
        return "excel"
    if ctype in _SPREADSHEET_CONTENT_TYPES and ext:
        return "excel"
    raise UnsupportedFileError(
        f"Unsupported file type: {Path(filename or '').name or filename!r}. "
        "Upload a spreadsheet (.xlsx, .xls, .csv) or an image (.jpg, .png)."
    )


def get_extractor(source_type: SourceType) -> BaseExtractor:
    if source_type == "image":
        return ImageExtractor()
    return ExcelExtractor()


def parse_file(file_path: str, content_type: Optional[str] = None) -> ParseResult:
    """Roteia o arquivo e devolve o ParseResult do extrator correspondente."""
    source_type = detect_source_type(file_path, content_type)
    return get_extractor(source_type).parse(file_path)
