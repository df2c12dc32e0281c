from dotenv import load_dotenv
load_dotenv()

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd
import streamlit as st

# Ensure repo root is on sys.path for "recibos" imports
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from app.backend.process import build_archive_for_records, process_upload
from recibos.config import get_settings
from recibos.errors import ReceiptError
from recibos.logger import get_logger

logger = get_logger(__name__)

# ============================================================================
# Constants
# ============================================================================
ALLOWED_EXTENSIONS = ["xlsx", "xls", "csv", "jpg", "jpeg", "png"]
NOT_FOUND_LABEL = "Não encontrado"


# ============================================================================
# Helper Functions
# ============================================================================

def validate_file_size(uploaded_file) -> bool:
    """
    Reject uploads above MAX_UPLOAD_MB.

    Returns:
        True if file size is valid, False otherwise.
    """
    max_bytes = get_settings().MAX_UPLOAD_MB * 1024 * 1024
    if uploaded_file.size > max_bytes:
        size_mb = uploaded_file.size / (1024 * 1024)
        st.error(f"❌ Arquivo '{uploaded_file.name}' muito grande ({size_mb:.1f}MB). Máximo: {get_settings().MAX_UPLOAD_MB}MB.")
        logger.warning("File %s rejected: size %d bytes exceeds limit %d",
                       uploaded_file.name, uploaded_file.size, max_bytes)
        return False
    return True


def display_mapping(mapping: Dict[str, Optional[str]]) -> None:
    """Show which source column feeds each canonical field."""
    st.subheader("Colunas Detectadas")
    rows = [
        {"campo": field, "coluna": header or NOT_FOUND_LABEL}
        for field, header in mapping.items()
    ]
    st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)


def display_records(records: List[Dict[str, Any]]) -> None:
    if not records:
        st.info("Nenhum funcionário encontrado.")
        return
    st.dataframe(pd.DataFrame(records), use_container_width=True, hide_index=True)


def init_session_state() -> None:
    defaults = {
        "parse_result": None,
        "archive": None,
        "source_name": None,
    }
    for key, default_value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default_value


# ============================================================================
# Page
# ============================================================================

st.set_page_config(page_title="Gerador de Recibos", page_icon="🧾")
init_session_state()

st.title("Gerador de Recibos")
st.caption("Envie a planilha (Excel/CSV) ou uma foto (JPG/PNG) para gerar os recibos em PDF.")

st.header("1. Upload Planilha")
uploaded_file = st.file_uploader("Arquivo", type=ALLOWED_EXTENSIONS, key="file_uploader")

if st.button("Processar Arquivo", type="primary", disabled=uploaded_file is None):
    if validate_file_size(uploaded_file):
        with st.spinner("Processando..."):
            try:
                result = process_upload(uploaded_file.name, uploaded_file.getvalue(), uploaded_file.type)
                st.session_state.parse_result = result.to_payload()
                st.session_state.source_name = uploaded_file.name
                st.session_state.archive = None
            except ReceiptError as e:
                st.session_state.parse_result = None
                st.error(f"Falha ao processar o arquivo. {e}")
            except Exception as e:
                logger.error("Failed to parse %s: %s", uploaded_file.name, e, exc_info=True)
                st.session_state.parse_result = None
                st.error(f"Falha ao processar o arquivo. {e}")

parsed = st.session_state.parse_result
if parsed:
    st.header("2. Configuração")
    st.write(f"**{len(parsed['data'])} funcionários encontrados** em `{st.session_state.source_name}`")
    start_number = st.number_input(
        "Número do Primeiro Recibo",
        min_value=0,
        value=get_settings().DEFAULT_START_RECEIPT_NUMBER,
        step=1,
    )
    display_mapping(parsed["mapping"])
    with st.expander("Registros", expanded=False):
        display_records(parsed["data"])

    st.header("3. Gerar Recibos")
    if st.button("Gerar Recibos", type="primary"):
        with st.spinner("Gerando PDFs..."):
            try:
                st.session_state.archive = build_archive_for_records(parsed["data"], int(start_number))
            except ReceiptError as e:
                st.session_state.archive = None
                st.error(f"Falha ao gerar os recibos. {e}")

    if st.session_state.archive:
        st.download_button(
            label="Baixar Recibos",
            data=st.session_state.archive,
            file_name=get_settings().ARCHIVE_FILENAME,
            mime="application/zip",
        )
