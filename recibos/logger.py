"""
Módulo de logging (Logging Module)
==================================

Todos os módulos do pacote registram sob o logger "recibos", configurado uma
única vez com saída no console.

Uso:
    from recibos.logger import get_logger

    logger = get_logger(__name__)
    logger.info("Rendered receipt %d for %s", number, name)

Nível inicial: variável de ambiente LOG_LEVEL (nome ou número), senão INFO.
"""

import logging
import os
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PROJECT_LOGGER = "recibos"

Level = Union[int, str]

_configured = False


def _resolve_level(level: Optional[Level]) -> int:
    """Aceita logging.DEBUG, 10 ou "debug"; inválido ou vazio vira INFO."""
    if level is None or level == "":
        return logging.INFO
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _setup() -> None:
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    project_logger = logging.getLogger(PROJECT_LOGGER)
    project_logger.setLevel(_resolve_level(os.getenv("LOG_LEVEL")))
    project_logger.addHandler(handler)
    project_logger.propagate = False

    _configured = True


def get_logger(name: str, level: Optional[Level] = None) -> logging.Logger:
    """
    Retorna o logger *name* (normalmente o __name__ do módulo).

    Nomes fora do pacote "recibos" (app.api, app.cli) compartilham o
    mesmo handler de console e o nível do pacote.
    """
    _setup()
    logger = logging.getLogger(name)
    if not name.startswith(PROJECT_LOGGER) and not logger.handlers:
        project_logger = logging.getLogger(PROJECT_LOGGER)
        logger.handlers = list(project_logger.handlers)
        logger.setLevel(project_logger.level)
        logger.propagate = False
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger


def set_level(level: Level, logger_name: Optional[str] = None) -> None:
    """
    Ajusta o nível do pacote inteiro ou de um único logger.

    Exemplo:
        set_level("DEBUG")                      # todo o pacote recibos
        set_level(logging.DEBUG, "recibos.packager")
    """
    logging.getLogger(logger_name or PROJECT_LOGGER).setLevel(_resolve_level(level))
