"""
Tipos e estruturas de dados do quadro de issues.

Issue é o item de trabalho com seu estado atual; StateGroup é o
agrupamento das issues de um estado, já na ordem calculada.
"""

from dataclasses import dataclass
from typing import Any

from workflow.states.workflow import State


@dataclass(frozen=True, slots=True)
class Issue:
    """
    Item de trabalho do workflow.

    Attributes:
        title: Título exibido no quadro
        state: Estado atual da issue
    """

    title: str
    state: State

    def __post_init__(self) -> None:
        """Valida invariantes do objeto após inicialização."""
        if not self.title or not self.title.strip():
            raise ValueError("title não pode ser vazio")


@dataclass(frozen=True, slots=True)
class StateGroup:
    """
    Issues de um estado, na ordem original da lista de issues.

    Attributes:
        state: Estado agrupado
        label: Rótulo de exibição do estado
        issues: Issues cujo estado atual é `state`
    """

    state: State
    label: str
    issues: tuple[Issue, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Verifica se o estado não possui issues."""
        return not self.issues

    def to_log_dict(self) -> dict[str, Any]:
        """Representação resumida para logs (sem títulos)."""
        return {
            "state": str(self.state),
            "label": self.label,
            "issue_count": len(self.issues),
        }
