"""Loader de definições de workflow em YAML.

Carrega estados, transições e issues de um arquivo YAML e valida
a estrutura com Pydantic antes de entregar ao núcleo de ordenação.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from config.workflow.models import WorkflowDefinition

logger = logging.getLogger(__name__)

# Workflow de referência empacotado junto ao módulo
DEFAULT_WORKFLOW_PATH = Path(__file__).resolve().parent / "default_workflow.yaml"


class WorkflowDefinitionError(Exception):
    """Erro ao carregar definição de workflow."""


def parse_workflow_definition(raw: str, source: str = "<string>") -> WorkflowDefinition:
    """Valida o conteúdo YAML de uma definição de workflow.

    Args:
        raw: Conteúdo YAML
        source: Origem do conteúdo (para mensagens de erro)

    Returns:
        WorkflowDefinition validada

    Raises:
        WorkflowDefinitionError: Se YAML inválido ou estrutura fora do schema
    """
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        logger.error("Erro ao parsear YAML de workflow", extra={"source": source})
        raise WorkflowDefinitionError(f"YAML inválido em {source}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise WorkflowDefinitionError(f"YAML deve ser um dicionário: {source}")

    try:
        return WorkflowDefinition.model_validate(data)
    except ValidationError as e:
        logger.error(
            "Definição de workflow inválida",
            extra={"source": source, "error_count": e.error_count()},
        )
        raise WorkflowDefinitionError(f"Definição inválida em {source}: {e}") from e


def load_workflow_definition(path: str | Path) -> WorkflowDefinition:
    """Carrega definição de workflow de um arquivo YAML.

    Raises:
        WorkflowDefinitionError: Se arquivo não existir ou conteúdo inválido
    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.error("Arquivo de workflow não encontrado", extra={"path": str(file_path)})
        raise WorkflowDefinitionError(f"Arquivo de workflow não encontrado: {file_path}")

    with file_path.open("r", encoding="utf-8") as f:
        definition = parse_workflow_definition(f.read(), source=str(file_path))

    logger.debug(
        "Workflow carregado",
        extra={
            "path": str(file_path),
            "state_count": len(definition.states),
            "issue_count": len(definition.issues),
        },
    )
    return definition


@lru_cache(maxsize=1)
def load_default_workflow() -> WorkflowDefinition:
    """Carrega o workflow de referência empacotado (cached)."""
    return load_workflow_definition(DEFAULT_WORKFLOW_PATH)


def clear_cache() -> None:
    """Limpa cache do workflow de referência.

    Útil para testes.
    """
    load_default_workflow.cache_clear()
