"""
Estados canônicos do workflow de referência (quadro de issues).

Este módulo define os estados que uma issue pode assumir no workflow
padrão. O núcleo de ordenação aceita qualquer identificador hashable;
este enum é apenas o vocabulário fechado usado pelo quadro padrão.

Rótulos de exibição ("TO DO", "ON HOLD") ficam separados do valor
persistido para manter identificadores estáveis.
"""

from collections.abc import Hashable
from enum import StrEnum

# Qualquer valor hashable com igualdade por valor serve como estado
State = Hashable


class WorkflowState(StrEnum):
    """
    Estados do workflow de referência.

    Estados não-terminais:
        - TO_DO: Issue aguardando início
        - ON_HOLD: Issue pausada
        - DOING: Issue em andamento

    Estados terminais:
        - DONE: Issue concluída
        - FAILED: Issue encerrada sem sucesso
    """

    TO_DO = "TO_DO"
    ON_HOLD = "ON_HOLD"
    DOING = "DOING"
    DONE = "DONE"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Rótulo de exibição do estado."""
        return STATE_LABELS[self]


# Rótulos exibidos no relatório do quadro
STATE_LABELS: dict[WorkflowState, str] = {
    WorkflowState.TO_DO: "TO DO",
    WorkflowState.ON_HOLD: "ON HOLD",
    WorkflowState.DOING: "DOING",
    WorkflowState.DONE: "DONE",
    WorkflowState.FAILED: "FAILED",
}

# Estados sem transição de saída no workflow de referência
TERMINAL_STATES: frozenset[WorkflowState] = frozenset({
    WorkflowState.DONE,
    WorkflowState.FAILED,
})

# Ordem de declaração dos estados no workflow de referência
DECLARED_STATES: tuple[WorkflowState, ...] = (
    WorkflowState.TO_DO,
    WorkflowState.ON_HOLD,
    WorkflowState.DOING,
    WorkflowState.DONE,
    WorkflowState.FAILED,
)


def is_terminal(state: State) -> bool:
    """
    Verifica se o estado é terminal no workflow de referência.

    Args:
        state: Estado a ser verificado

    Returns:
        True se o estado é terminal, False caso contrário
    """
    return state in TERMINAL_STATES


def state_label(state: State, labels: dict | None = None) -> str:
    """
    Retorna o rótulo de exibição de um estado.

    Usa o mapa informado (ex: rótulos vindos do YAML) e, na ausência,
    os rótulos do workflow de referência. Estados sem rótulo usam str().

    Args:
        state: Estado a rotular
        labels: Mapa opcional estado → rótulo

    Returns:
        Rótulo legível do estado
    """
    if labels and state in labels:
        return labels[state]
    if isinstance(state, WorkflowState):
        return STATE_LABELS[state]
    return str(state)
