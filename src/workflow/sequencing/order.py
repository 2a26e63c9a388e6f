"""
Ordenação linear dos estados a partir do grafo de transições.

Este módulo encontra o estado raiz (sem transição de entrada) e produz
uma sequência determinística com todos os estados alcançáveis:

1. Expansão em profundidade a partir da raiz, seguindo a ordem declarada
   dos destinos. Transições que voltam para um estado do caminho atual
   (ex: DOING → ON_HOLD) são transições de retorno e não influenciam
   a posição dos estados.
2. Cada transição restante A → B coloca B depois de A. Entre estados
   livres, vale a ordem declarada: irmãos mantêm a ordem da lista de
   destinos do pai e cada ramo é disposto em profundidade.

Estados declarados e não alcançáveis a partir da raiz são omitidos
silenciosamente. Funções puras: sem IO e sem estado global.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from utils.errors import CyclicWorkflowError, NoRootFoundError
from workflow.states.workflow import State
from workflow.transitions.graph import TransitionGraph

logger = logging.getLogger(__name__)

# Sequência ordenada e imutável de estados distintos
StateOrder = tuple[State, ...]


def find_root(
    graph: TransitionGraph,
    declared_states: Iterable[State] | None = None,
) -> State:
    """
    Encontra o estado inicial do workflow.

    Candidatos são os estados de origem do grafo (graph.from_states),
    percorridos na ordem da lista declarada; estados de origem fora da
    lista vêm depois, na ordem do grafo. Estados declarados sem nenhuma
    transição só são candidatos quando o grafo não tem transições
    (workflow de um único estado).

    Args:
        graph: Grafo de transições
        declared_states: Estados declarados (define a ordem dos candidatos)

    Returns:
        Primeiro estado de origem sem transição de entrada

    Raises:
        NoRootFoundError: Se todos os candidatos possuem entrada
    """
    ordered = root_candidates(graph, declared_states)

    for candidate in ordered:
        if not graph.has_incoming(candidate):
            logger.debug("Raiz do workflow encontrada", extra={"root": str(candidate)})
            return candidate

    logger.error(
        "Workflow sem ponto de partida",
        extra={"candidates": [str(state) for state in ordered]},
    )
    raise NoRootFoundError(ordered)


def root_candidates(
    graph: TransitionGraph,
    declared_states: Iterable[State] | None = None,
) -> tuple[State, ...]:
    """
    Lista os estados que podem ser raiz, na ordem de verificação.

    Args:
        graph: Grafo de transições
        declared_states: Estados declarados (opcional)

    Returns:
        Estados de origem ordenados pela declaração, ou os estados
        declarados quando o grafo não tem transições
    """
    declared = tuple(dict.fromkeys(declared_states or ()))
    sources = graph.from_states
    if not sources:
        return declared

    source_set = set(sources)
    return tuple(dict.fromkeys(
        [state for state in declared if state in source_set] + list(sources)
    ))


def find_return_edges(
    graph: TransitionGraph,
    root: State,
) -> frozenset[tuple[State, State]]:
    """
    Identifica transições que retornam a um estado do caminho atual.

    A expansão segue a ordem declarada; uma transição para um estado
    ainda em expansão fecha um ciclo e é marcada como retorno.

    Args:
        graph: Grafo de transições
        root: Estado inicial

    Returns:
        Conjunto de arestas (origem, destino) de retorno

    Raises:
        CyclicWorkflowError: Se alguma transição volta para a raiz
    """
    return_edges: set[tuple[State, State]] = set()
    expanding: set[State] = set()
    expanded: set[State] = set()

    def expand(parent: State) -> None:
        expanding.add(parent)
        for child in graph.outgoing(parent):
            if child == root:
                logger.error(
                    "Transição retorna ao estado inicial",
                    extra={"root": str(root), "source": str(parent)},
                )
                raise CyclicWorkflowError(root, parent)
            if child in expanding:
                return_edges.add((parent, child))
            elif child not in expanded:
                expand(child)
        expanding.discard(parent)
        expanded.add(parent)

    expand(root)
    return frozenset(return_edges)


def build_order(graph: TransitionGraph, root: State) -> StateOrder:
    """
    Produz a sequência ordenada de estados alcançáveis a partir da raiz.

    Garantias:
    - A raiz é o primeiro elemento
    - Cada estado alcançável aparece exatamente uma vez
    - Para toda transição que não é de retorno, A vem antes de B
    - Mesma entrada produz sempre a mesma sequência

    Args:
        graph: Grafo de transições
        root: Estado inicial (normalmente obtido via find_root)

    Returns:
        Tupla imutável com a ordem dos estados

    Raises:
        CyclicWorkflowError: Se alguma transição volta para a raiz
    """
    return_edges = find_return_edges(graph, root)
    for source, target in sorted(return_edges, key=str):
        logger.debug(
            "Transição de retorno ignorada na ordenação",
            extra={"from_state": str(source), "to_state": str(target)},
        )

    # Percorre os destinos em ordem inversa e acumula por término;
    # invertido ao final, o último ramo declarado fica mais ao fim.
    finished: list[State] = []
    visited: set[State] = set()

    def place(parent: State) -> None:
        visited.add(parent)
        for child in reversed(graph.outgoing(parent)):
            if child in visited or (parent, child) in return_edges:
                continue
            place(child)
        finished.append(parent)

    place(root)
    order = tuple(reversed(finished))

    logger.debug(
        "Ordem de estados calculada",
        extra={"order": [str(state) for state in order]},
    )
    return order
