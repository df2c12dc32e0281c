"""
Empacotador de lotes (Batch Packager Module)
============================================

Renderiza um recibo por funcionário, com numeração consecutiva, e reúne os
PDFs num único ZIP.

Fluxo:
    registros → render_batch (pausa fixa → PDF em diretório temporário)
              → build_archive (ZIP) → bytes

O diretório temporário é sempre removido, com sucesso ou falha. Qualquer
erro de renderização aborta o lote inteiro; não há ZIP parcial.
"""

from __future__ import annotations

import io
import shutil
import tempfile
import time
import zipfile
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Set, Union

from recibos.config import Settings, get_settings
from recibos.errors import NoValidRecordsError
from recibos.ir import EmployeeRecord
from recibos.logger import get_logger
from recibos.render.pdf import render_receipt_pdf
from recibos.render.template import receipt_filename

logger = get_logger(__name__)

RecordLike = Union[EmployeeRecord, Mapping[str, Any]]


@dataclass(frozen=True)
class RenderedReceipt:
    """Um recibo renderizado: número, nome no ZIP e arquivo no diretório de trabalho."""

    receipt_number: int
    filename: str
    path: Path
    employee_name: str


def coerce_record(item: RecordLike) -> Optional[EmployeeRecord]:
    """
    Converte um item de entrada em EmployeeRecord.

    Retorna None quando não há nome; esses itens são pulados sem consumir
    número de recibo.
    """
    if isinstance(item, EmployeeRecord):
        return item
    if not isinstance(item, Mapping):
        return None
    name = str(item.get("name") or "").strip()
    if not name:
        return None
    return EmployeeRecord.model_validate({**item, "name": name})


def _unique_filename(filename: str, taken: Set[str]) -> str:
    if filename not in taken:
        return filename
    stem, suffix = filename[: -len(".pdf")], ".pdf"
    n = 2
    while f"{stem} ({n}){suffix}" in taken:
        n += 1
    return f"{stem} ({n}){suffix}"


def render_batch(
    records: Iterable[RecordLike],
    start_receipt_number: int,
    work_dir: Path,
    issued_on: Optional[date] = None,
    settle_seconds: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> List[RenderedReceipt]:
    """
    Renderiza os registros em ordem dentro de *work_dir*.

    Cada registro com nome recebe o próximo número a partir de
    *start_receipt_number*; registros sem nome não consomem número.
    """
    settings = settings or get_settings()
    if settle_seconds is None:
        settle_seconds = settings.RENDER_SETTLE_SECONDS
    issued_on = issued_on or date.today()
    current = int(start_receipt_number)
    rendered: List[RenderedReceipt] = []
    taken: Set[str] = set()

    for item in records:
        record = coerce_record(item)
        if record is None:
            logger.warning("Skipping employee without name: %s", item)
            continue

        if settle_seconds > 0:
            time.sleep(settle_seconds)
        content = render_receipt_pdf(record, current, issued_on, settings)

        filename = _unique_filename(receipt_filename(record.name, issued_on), taken)
        taken.add(filename)
        path = work_dir / f"{current}.pdf"
        path.write_bytes(content)
        rendered.append(RenderedReceipt(current, filename, path, record.name))
        logger.info("Rendered receipt %d for %s (%d bytes)", current, record.name, len(content))
        current += 1

    return rendered


def build_archive(rendered: Iterable[RenderedReceipt]) -> bytes:
    """Reúne os PDFs renderizados num ZIP em memória."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for receipt in rendered:
            zf.write(receipt.path, arcname=receipt.filename)
    return buf.getvalue()


def generate_receipts(
    records: Optional[Iterable[RecordLike]],
    start_receipt_number: int = 1,
    issued_on: Optional[date] = None,
    settle_seconds: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> bytes:
    """
    Gera o ZIP com um PDF por registro válido.

    Levanta NoValidRecordsError quando a lista está vazia ou quando nenhum
    registro tinha nome.
    """
    items = list(records or [])
    if not items:
        raise NoValidRecordsError("No employee data provided")

    logger.info("Starting PDF generation: %d record(s), first receipt nº %s", len(items), start_receipt_number)
    work_dir = Path(tempfile.mkdtemp(prefix="recibos_"))
    try:
        rendered = render_batch(
            items,
            start_receipt_number,
            work_dir,
            issued_on=issued_on,
            settle_seconds=settle_seconds,
            settings=settings,
        )
        logger.info("Summary: generated %d PDF(s)", len(rendered))
        if not rendered:
            raise NoValidRecordsError(
                "No PDFs were generated. Please check if employee data has valid names."
            )
        archive = build_archive(rendered)
        logger.info("ZIP created: %d bytes", len(archive))
        return archive
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)
        logger.debug("Cleaned up work dir %s", work_dir)
