"""
Exports públicos do módulo workflow/sequencing.

Ordenação linear dos estados (find_root, build_order, StateSequencer).
"""

from workflow.sequencing.order import (
    StateOrder,
    build_order,
    find_return_edges,
    find_root,
    root_candidates,
)
from workflow.sequencing.sequencer import StateSequencer, create_sequencer

__all__ = [
    "StateOrder",
    "StateSequencer",
    "build_order",
    "create_sequencer",
    "find_return_edges",
    "find_root",
    "root_candidates",
]
