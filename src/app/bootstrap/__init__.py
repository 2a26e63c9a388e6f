"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings
e monta o quadro a partir do workflow configurado.

Uso:
    from app.bootstrap import initialize_app, load_board

    initialize_app()
    board = load_board()
    print(board.render())
"""

from __future__ import annotations

import logging
from pathlib import Path

from app.observability import get_correlation_id
from app.services.board import WorkflowBoard
from config.logging import configure_logging
from config.settings import get_base_settings, get_board_settings
from config.workflow import (
    WorkflowDefinition,
    load_default_workflow,
    load_workflow_definition,
)

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app(log_level: str | None = None) -> None:
    """Inicializa a aplicação.

    Configura logging JSON estruturado com correlation_id.

    Args:
        log_level: Sobrescreve o nível vindo de LOG_LEVEL/DEBUG
    """
    settings = get_base_settings()
    configure_logging(
        level=log_level or settings.effective_log_level,
        service_name=settings.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir execução inválida.
    Em `development` mantém alerta sem bloquear.
    """
    base = get_base_settings()
    errors = [f"base: {error}" for error in base.validate()]
    errors.extend(f"board: {error}" for error in get_board_settings().validate())

    if not errors:
        logger.debug(
            "settings_validated",
            extra={"component": "bootstrap", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def board_from_definition(definition: WorkflowDefinition) -> WorkflowBoard:
    """Monta o quadro a partir de uma definição validada."""
    return WorkflowBoard(
        definition.to_graph(),
        definition.to_issues(),
        declared_states=definition.state_names(),
        labels=definition.labels(),
    )


def load_board(workflow_file: str | Path | None = None) -> WorkflowBoard:
    """Carrega o quadro do arquivo informado ou das settings.

    Sem arquivo (argumento nem WORKFLOW_FILE), usa o workflow de referência.

    Raises:
        WorkflowDefinitionError: Se o arquivo for inválido
    """
    if workflow_file:
        definition = load_workflow_definition(workflow_file)
    else:
        settings = get_board_settings()
        definition = (
            load_default_workflow()
            if settings.uses_default_workflow
            else load_workflow_definition(settings.workflow_file)
        )
    return board_from_definition(definition)
