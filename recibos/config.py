"""
Módulo de configuração (Configuration Module)
=============================================

Carrega a configuração da aplicação a partir de variáveis de ambiente e do
arquivo .env: idioma do OCR, formato monetário, atraso de renderização etc.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """
    Configuração da aplicação (pydantic BaseSettings, lida do ambiente).

    Atributos:
        OCR_LANGUAGE: pacote de idioma do Tesseract usado no reconhecimento
        TESSERACT_CMD: caminho do executável tesseract, quando fora do PATH
        RENDER_SETTLE_SECONDS: pausa fixa antes de renderizar cada recibo
        CURRENCY_SYMBOL: símbolo usado em todos os valores monetários
        PAYMENT_CONDITION: texto de "Condições de pagamento" no recibo
        ARCHIVE_FILENAME: nome do ZIP entregue ao usuário
        MAX_UPLOAD_MB: limite de tamanho de upload (API e UI)
        DEFAULT_START_RECEIPT_NUMBER: número do primeiro recibo quando omitido
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    OCR_LANGUAGE: str = "por"
    TESSERACT_CMD: Optional[str] = None
    RENDER_SETTLE_SECONDS: float = 0.1
    CURRENCY_SYMBOL: str = "$"
    PAYMENT_CONDITION: str = "Binance"
    ARCHIVE_FILENAME: str = "recibos.zip"
    MAX_UPLOAD_MB: int = 20
    DEFAULT_START_RECEIPT_NUMBER: int = 1

    @field_validator("RENDER_SETTLE_SECONDS")
    @classmethod
    def validate_settle_seconds(cls, v: float) -> float:
        """A pausa de renderização não pode ser negativa."""
        if v < 0:
            raise ValueError("RENDER_SETTLE_SECONDS must be >= 0")
        return v

    @field_validator("OCR_LANGUAGE")
    @classmethod
    def validate_ocr_language(cls, v: str) -> str:
        if v is None or v.strip() == "":
            raise ValueError("OCR_LANGUAGE is empty. Use a Tesseract language code such as 'por'.")
        return v.strip()


# Singleton global, evita recarregar a configuração
_settings_instance: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Retorna a configuração singleton.

    A primeira chamada cria a instância; as seguintes devolvem a mesma.
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Descarta o singleton (usado nos testes após alterar o ambiente)."""
    global _settings_instance
    _settings_instance = None
