"""
Sequenciador de estados (StateSequencer).

Combina o grafo de transições com a lista de estados declarados,
encontra a raiz e calcula a ordem uma única vez. O resultado é
imutável e reutilizado pelo agrupamento do quadro.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from types import MappingProxyType
from typing import Any

from workflow.sequencing.order import StateOrder, build_order, find_root
from workflow.states.workflow import State
from workflow.transitions.graph import TransitionGraph, validate_transition_graph

logger = logging.getLogger(__name__)


class StateSequencer:
    """
    Calcula e guarda a ordem linear dos estados de um workflow.

    Attributes:
        graph: Grafo de transições
        declared_states: Estados declarados (fonte de verdade de cobertura)
        order: Sequência ordenada (calculada na primeira leitura)
    """

    __slots__ = ("_declared_states", "_graph", "_order", "_positions", "_root")

    def __init__(
        self,
        graph: TransitionGraph,
        declared_states: Iterable[State] | None = None,
    ) -> None:
        """
        Inicializa o sequenciador.

        Args:
            graph: Grafo de transições
            declared_states: Estados declarados na ordem de declaração
                (usa graph.from_states se None)
        """
        self._graph = graph
        self._declared_states: tuple[State, ...] | None = (
            tuple(dict.fromkeys(declared_states))
            if declared_states is not None
            else None
        )
        self._root: State | None = None
        self._order: StateOrder | None = None
        self._positions: MappingProxyType | None = None

    @property
    def graph(self) -> TransitionGraph:
        """Grafo de transições."""
        return self._graph

    @property
    def declared_states(self) -> tuple[State, ...]:
        """Estados declarados (ou estados de origem do grafo)."""
        if self._declared_states is None:
            return self._graph.from_states
        return self._declared_states

    def find_root(self) -> State:
        """Retorna a raiz do workflow (cacheada após a primeira chamada)."""
        if self._root is None:
            self._root = find_root(self._graph, self.declared_states)
        return self._root

    def build_order(self, root: State | None = None) -> StateOrder:
        """
        Calcula a ordem dos estados.

        Args:
            root: Raiz explícita (usa find_root() se None)

        Returns:
            Tupla imutável com a ordem dos estados

        Raises:
            NoRootFoundError: Se nenhum estado declarado pode ser raiz
            CyclicWorkflowError: Se alguma transição volta para a raiz
        """
        start = self.find_root() if root is None else root

        for warning in validate_transition_graph(
            self._graph, self.declared_states, root=start
        ):
            logger.warning(
                "Divergência entre estados declarados e transições",
                extra={"detail": warning},
            )

        return build_order(self._graph, start)

    @property
    def order(self) -> StateOrder:
        """Ordem dos estados (calculada uma única vez)."""
        if self._order is None:
            self._order = self.build_order()
        return self._order

    @property
    def positions(self) -> MappingProxyType:
        """Mapa estado → posição na ordem."""
        if self._positions is None:
            self._positions = MappingProxyType(
                {state: index for index, state in enumerate(self.order)}
            )
        return self._positions

    def position(self, state: State) -> int | None:
        """Posição do estado na ordem (None se omitido)."""
        return self.positions.get(state)

    def get_order_summary(self) -> dict[str, Any]:
        """
        Retorna resumo da ordenação para observability.

        Returns:
            Dict seguro para logs
        """
        order = self.order
        omitted = [state for state in self.declared_states if state not in self.positions]
        return {
            "root": str(order[0]),
            "order": [str(state) for state in order],
            "state_count": len(order),
            "omitted_states": [str(state) for state in omitted],
        }


def create_sequencer(
    transitions: TransitionGraph | dict,
    declared_states: Iterable[State] | None = None,
) -> StateSequencer:
    """
    Factory function para criar um StateSequencer.

    Args:
        transitions: Grafo pronto ou mapa estado → destinos
        declared_states: Estados declarados (opcional)

    Returns:
        StateSequencer configurado
    """
    graph = (
        transitions
        if isinstance(transitions, TransitionGraph)
        else TransitionGraph(transitions)
    )
    return StateSequencer(graph, declared_states)
