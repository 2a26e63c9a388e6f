"""
Grafo de transições entre estados do workflow.

Este módulo define o TransitionGraph: mapa imutável de estado de origem
para a sequência ordenada de estados de destino. A ordem de declaração
das chaves e dos destinos é semântica, pois desempata a ordenação.

Ausência de entrada para um estado significa estado terminal (sem saída),
nunca erro.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from workflow.states.workflow import State, WorkflowState

# Tipagem explícita do mapa de transições declarado
TransitionMap = Mapping[State, Iterable[State]]


class TransitionGraph:
    """
    Grafo dirigido e imutável de transições entre estados.

    Attributes:
        from_states: Estados de origem, na ordem de declaração
        states: Todos os estados citados, na ordem da primeira aparição
    """

    __slots__ = ("_incoming", "_outgoing", "_states")

    def __init__(self, transitions: TransitionMap | None = None) -> None:
        """
        Constrói o grafo a partir do mapa declarado.

        Destinos repetidos na mesma lista são colapsados, mantendo a
        primeira ocorrência.

        Args:
            transitions: Mapa estado de origem → destinos ordenados
        """
        outgoing: dict[State, tuple[State, ...]] = {}
        incoming: dict[State, set[State]] = {}
        states: dict[State, None] = {}

        for from_state, targets in (transitions or {}).items():
            states.setdefault(from_state, None)
            ordered = tuple(dict.fromkeys(targets))
            outgoing[from_state] = ordered
            for target in ordered:
                states.setdefault(target, None)
                incoming.setdefault(target, set()).add(from_state)

        self._outgoing = MappingProxyType(outgoing)
        self._incoming = MappingProxyType(
            {target: frozenset(sources) for target, sources in incoming.items()}
        )
        self._states = tuple(states)

    def __contains__(self, state: object) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __repr__(self) -> str:
        return f"TransitionGraph({self.to_dict()!r})"

    @property
    def from_states(self) -> tuple[State, ...]:
        """Estados de origem declarados, na ordem de declaração."""
        return tuple(self._outgoing)

    @property
    def states(self) -> tuple[State, ...]:
        """Todos os estados citados no grafo."""
        return self._states

    def outgoing(self, state: State) -> tuple[State, ...]:
        """
        Retorna os destinos declarados para um estado.

        Args:
            state: Estado de origem

        Returns:
            Destinos na ordem declarada (vazio se terminal ou desconhecido)
        """
        return self._outgoing.get(state, ())

    def has_incoming(self, state: State) -> bool:
        """
        Verifica se algum outro estado transita para o estado informado.

        Auto-transições (A → A) não contam como entrada.

        Args:
            state: Estado a verificar

        Returns:
            True se existe transição de outro estado para `state`
        """
        return any(source != state for source in self.sources_of(state))

    def sources_of(self, state: State) -> frozenset[State]:
        """Estados que declaram transição para `state` (inclui auto-transição)."""
        return self._incoming.get(state, frozenset())

    def edges(self) -> Iterator[tuple[State, State]]:
        """Itera as arestas (origem, destino) na ordem de declaração."""
        for from_state, targets in self._outgoing.items():
            for target in targets:
                yield from_state, target

    def reachable_from(self, root: State) -> tuple[State, ...]:
        """
        Retorna os estados alcançáveis a partir de `root` (inclusive).

        A ordem é a de descoberta em profundidade seguindo a ordem
        declarada dos destinos.
        """
        seen: dict[State, None] = {}
        stack = [root]
        while stack:
            state = stack.pop()
            if state in seen:
                continue
            seen[state] = None
            stack.extend(reversed(self.outgoing(state)))
        return tuple(seen)

    def to_dict(self) -> dict[State, list[State]]:
        """Representação serializável do mapa de transições."""
        return {source: list(targets) for source, targets in self._outgoing.items()}


# Transições do workflow de referência, na ordem de declaração
DEFAULT_TRANSITIONS: dict[WorkflowState, tuple[WorkflowState, ...]] = {
    # ON_HOLD: retoma o trabalho
    WorkflowState.ON_HOLD: (WorkflowState.DOING,),
    # TO_DO: pode ser pausada ou iniciada
    WorkflowState.TO_DO: (WorkflowState.ON_HOLD, WorkflowState.DOING),
    # DOING: conclui, falha ou volta para espera
    WorkflowState.DOING: (
        WorkflowState.DONE,
        WorkflowState.FAILED,
        WorkflowState.ON_HOLD,
    ),
}


def build_default_graph() -> TransitionGraph:
    """Retorna o grafo do workflow de referência."""
    return TransitionGraph(DEFAULT_TRANSITIONS)


def validate_transition_graph(
    graph: TransitionGraph,
    declared_states: Iterable[State],
    root: State | None = None,
) -> list[str]:
    """
    Valida a cobertura entre o grafo e a lista de estados declarados.

    A lista declarada é a fonte de verdade. Verifica:
    - Estados de origem ausentes da lista declarada
    - Estados de destino ausentes da lista declarada
    - Estados declarados que não são alcançáveis a partir da raiz

    Não levanta exceção: divergências são avisos, não erros.

    Args:
        graph: Grafo de transições
        declared_states: Estados declarados, na ordem de declaração
        root: Raiz já conhecida (sem raiz, a verificação de alcance é pulada)

    Returns:
        Lista de avisos encontrados (vazia se consistente)
    """
    declared = tuple(dict.fromkeys(declared_states))
    declared_set = set(declared)
    warnings: list[str] = []

    for from_state in graph.from_states:
        if from_state not in declared_set:
            warnings.append(f"Estado de origem {from_state} não declarado")

    reported: set[State] = set()
    for from_state, target in graph.edges():
        if target not in declared_set and target not in reported:
            reported.add(target)
            warnings.append(
                f"Transição {from_state} → {target}: destino não declarado"
            )

    if root is not None:
        reachable = set(graph.reachable_from(root))
        for state in declared:
            if state not in reachable:
                warnings.append(
                    f"Estado {state} não é alcançável a partir de {root} "
                    "e será omitido da ordenação"
                )

    return warnings
