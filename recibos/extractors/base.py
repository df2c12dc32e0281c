"""
Classe base dos extratores (Base Extractor Module)
==================================================

Interface comum para os extratores de planilha e de imagem.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from recibos.ir import ParseResult, SourceType
from recibos.logger import get_logger

logger = get_logger(__name__)


class BaseExtractor(ABC):
    """
    Classe abstrata de todos os extratores.

    - extract(): abstrato, implementado pelas subclasses
    - parse(): valida o caminho, chama extract() e registra o resumo

    Falhas não são engolidas: ReceiptError e suas subclasses chegam ao
    chamador com uma mensagem única para o usuário.
    """

    source_type: SourceType

    @abstractmethod
    def extract(self, file_path: str) -> ParseResult:
        """
        Extrai os registros canônicos do arquivo.

        Parâmetros:
            file_path: caminho do arquivo

        Retorna:
            ParseResult com cabeçalhos, mapeamento e registros
        """

    def parse(self, file_path: str) -> ParseResult:
        """Executa extract() com checagem de existência e log do resultado."""
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Input file not found: {file_path}")
        result = self.extract(str(path))
        logger.info(
            "Extracted %d record(s) from %s (%s)",
            len(result.data), path.name, result.source_type,
        )
        for warning in result.warnings:
            logger.debug("%s: %s", path.name, warning)
        return result
