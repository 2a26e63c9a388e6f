"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app.bootstrap)
    configure_logging(level="INFO", service_name="workflow_board")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("Ordem calculada", extra={"state_count": 5})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
- component
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, component_from_logger
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "component_from_logger",
    "create_json_formatter",
    "get_logger",
]
