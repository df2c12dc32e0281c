"""
Módulo da API (API Module)
==========================

Backend FastAPI:
  GET  /api/health    estado do serviço
  POST /api/upload    planilha ou imagem → cabeçalhos, mapeamento e registros
  POST /api/generate  registros + número inicial → recibos.zip
"""

from typing import Dict, Optional

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import ValidationError

from app.backend.process import build_archive_for_records, process_upload
from recibos.config import get_settings
from recibos.errors import NoValidRecordsError, ReceiptError, RecognitionError
from recibos.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Receipt Generator API")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok", "message": "Receipt Generator API is running"}


@app.post("/api/upload")
async def upload(file: Optional[UploadFile] = File(default=None)):
    """
    Recebe um arquivo multipart e devolve o resultado da extração.
    O arquivo temporário é apagado logo após a leitura.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    settings = get_settings()
    content = await file.read()
    if len(content) > settings.MAX_UPLOAD_MB * 1024 * 1024:
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.MAX_UPLOAD_MB}MB")

    try:
        result = process_upload(file.filename, content, file.content_type)
    except RecognitionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except ReceiptError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        logger.error("Upload error for %s: %s", file.filename, e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to process upload") from e

    payload = result.to_payload()
    return {
        "message": "File processed successfully",
        "filename": file.filename,
        **payload,
    }


@app.post("/api/generate")
async def generate(request: Request) -> Response:
    """
    Gera os PDFs e devolve o ZIP como anexo.
    Corpo JSON: {"data": [...registros...], "startReceiptNumber": 1}
    """
    try:
        body = await request.json()
    except Exception as e:
        raise HTTPException(status_code=400, detail="Invalid JSON body") from e

    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, list):
        raise HTTPException(status_code=400, detail="Invalid data provided")

    settings = get_settings()
    raw_start = body.get("startReceiptNumber") or settings.DEFAULT_START_RECEIPT_NUMBER
    try:
        start = int(raw_start)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail="startReceiptNumber must be an integer") from e

    try:
        archive = build_archive_for_records(data, start)
    except NoValidRecordsError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid employee data: {e.errors()}") from e
    except Exception as e:
        logger.error("Generation error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to generate receipts") from e

    return Response(
        content=archive,
        media_type="application/zip",
        headers={"Content-Disposition": f'attachment; filename="{settings.ARCHIVE_FILENAME}"'},
    )
