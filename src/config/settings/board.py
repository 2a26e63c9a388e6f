"""Settings do quadro de issues.

Arquivo de workflow e opções de exibição do relatório.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class BoardSettings:
    """Configurações do quadro.

    Attributes:
        workflow_file: Arquivo YAML do workflow (vazio = workflow de referência)
        show_header: Exibe cabeçalho com as premissas do workflow
        include_empty_states: Exibe estados sem issues
    """

    workflow_file: str = ""
    show_header: bool = True
    include_empty_states: bool = True

    @property
    def uses_default_workflow(self) -> bool:
        """True quando nenhum arquivo foi configurado."""
        return not self.workflow_file

    def validate(self) -> list[str]:
        """Valida configurações do quadro.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.workflow_file and not Path(self.workflow_file).is_file():
            errors.append(f"WORKFLOW_FILE não encontrado: {self.workflow_file}")
        return errors


def _load_board_from_env() -> BoardSettings:
    """Carrega BoardSettings de variáveis de ambiente."""
    return BoardSettings(
        workflow_file=os.getenv("WORKFLOW_FILE", ""),
        show_header=_env_flag("BOARD_SHOW_HEADER", True),
        include_empty_states=_env_flag("BOARD_INCLUDE_EMPTY_STATES", True),
    )


@lru_cache(maxsize=1)
def get_board_settings() -> BoardSettings:
    """Retorna instância cacheada de BoardSettings."""
    return _load_board_from_env()
