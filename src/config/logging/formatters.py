"""Formatter JSON dos logs do quadro.

Cada linha em stderr é um objeto JSON; stdout fica livre para o relatório.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log, na ordem de saída
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "component",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter JSON usado por configure_logging.

    Campos extras (`extra=`) dos logs de sequenciamento e bootstrap, como
    `detail`, `root` ou `errors`, saem como chaves adicionais:

        {
            "asctime": "2026-10-17 10:30:00,123",
            "level": "WARNING",
            "logger": "workflow.sequencing.sequencer",
            "message": "Divergência entre estados declarados e transições",
            "correlation_id": "0b6f...",
            "service": "workflow_board",
            "component": "workflow",
            "detail": "Estado C não é alcançável a partir de A ..."
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
