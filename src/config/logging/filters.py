"""Filters de logging para injeção de contexto.

Campos injetados:
- correlation_id: ID da execução (um por chamada da CLI)
- service: Nome do serviço (ex: workflow_board)
- component: Pacote que emitiu o log (workflow, config, app)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


def component_from_logger(name: str) -> str:
    """Retorna o pacote de topo de um logger (ex: workflow.sequencing → workflow)."""
    return name.split(".", 1)[0] if name else "root"


class CorrelationIdFilter(logging.Filter):
    """Injeta o contexto da execução do quadro em cada record.

    Um correlation_id por chamada da CLI liga os avisos de cobertura do
    sequenciador ao erro final (ex: board_failed) da mesma execução.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual
            (string vazia se não fornecida).
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Completa o record; valores passados via `extra` têm precedência.

        Nunca descarta records.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        if not getattr(record, "component", None):
            record.component = component_from_logger(record.name)
        return True
