"""
Exports públicos do módulo workflow/transitions.

Grafo de transições entre estados do workflow.
"""

from workflow.transitions.graph import (
    DEFAULT_TRANSITIONS,
    TransitionGraph,
    TransitionMap,
    build_default_graph,
    validate_transition_graph,
)

__all__ = [
    "DEFAULT_TRANSITIONS",
    "TransitionGraph",
    "TransitionMap",
    "build_default_graph",
    "validate_transition_graph",
]
