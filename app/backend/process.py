"""
Processamento de backend (Backend Process Module)
=================================================

Funções usadas pela API, pela CLI e pela UI: análise de um upload (arquivo
temporário apagado logo após a leitura), geração do ZIP e saída JSON.
"""

import json
import os
import tempfile
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

from recibos.ir import EmployeeRecord, ParseResult
from recibos.logger import get_logger
from recibos.packager import generate_receipts
from recibos.router import detect_source_type, parse_file

logger = get_logger(__name__)


def ensure_output_dir(output_dir: str) -> Path:
    """Garante que o diretório de saída existe."""
    output_path = Path(output_dir).resolve()
    output_path.mkdir(parents=True, exist_ok=True)
    return output_path


def process_upload(filename: str, content: bytes, content_type: Optional[str] = None) -> ParseResult:
    """
    Analisa um arquivo enviado.

    O tipo é validado antes de gravar qualquer coisa; o conteúdo vai para um
    arquivo temporário com a mesma extensão, removido no finally.
    """
    detect_source_type(filename, content_type)
    suffix = Path(filename or "").suffix.lower()
    fd, tmp_path = tempfile.mkstemp(prefix="upload_", suffix=suffix)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
        return parse_file(tmp_path, content_type)
    finally:
        try:
            os.remove(tmp_path)
        except OSError as e:
            logger.warning("Could not remove temporary upload %s: %s", tmp_path, e)


def build_archive_for_records(
    records: Iterable[Union[EmployeeRecord, Mapping[str, Any]]],
    start_receipt_number: int = 1,
    issued_on: Optional[date] = None,
) -> bytes:
    """Gera o ZIP de recibos (delegado ao empacotador)."""
    return generate_receipts(records, start_receipt_number, issued_on=issued_on)


def write_json_output(result: ParseResult, output_path: str) -> str:
    """Grava o ParseResult como JSON (UTF-8, sem escapar acentos)."""
    path = Path(output_path)
    ensure_output_dir(str(path.parent))
    path.write_text(json.dumps(result.to_payload(), ensure_ascii=False, indent=2), encoding="utf-8")
    return str(path)
