"""
Módulo workflow: ordenação de estados de um workflow de issues.

Este módulo transforma um grafo de transições declarado em uma
sequência linear e determinística de estados, usada para agrupar
issues por estado.

Estrutura:
    - states/: Estados do workflow de referência (WorkflowState enum)
    - transitions/: Grafo de transições (TransitionGraph)
    - sequencing/: Raiz e ordenação (find_root, build_order, StateSequencer)
    - types/: Tipos de dados (Issue, StateGroup)
"""

# Sequenciamento
from workflow.sequencing import (
    StateOrder,
    StateSequencer,
    build_order,
    create_sequencer,
    find_return_edges,
    find_root,
    root_candidates,
)

# Estados
from workflow.states import (
    DECLARED_STATES,
    STATE_LABELS,
    TERMINAL_STATES,
    State,
    WorkflowState,
    is_terminal,
    state_label,
)

# Transições
from workflow.transitions import (
    DEFAULT_TRANSITIONS,
    TransitionGraph,
    TransitionMap,
    build_default_graph,
    validate_transition_graph,
)

# Types
from workflow.types import Issue, StateGroup

__all__ = [
    "DECLARED_STATES",
    "DEFAULT_TRANSITIONS",
    "STATE_LABELS",
    "TERMINAL_STATES",
    # Types
    "Issue",
    # Estados
    "State",
    "StateGroup",
    # Sequenciamento
    "StateOrder",
    "StateSequencer",
    # Transições
    "TransitionGraph",
    "TransitionMap",
    "WorkflowState",
    "build_default_graph",
    "build_order",
    "create_sequencer",
    "find_return_edges",
    "find_root",
    "is_terminal",
    "root_candidates",
    "state_label",
    "validate_transition_graph",
]
