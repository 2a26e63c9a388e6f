"""
Exports públicos do módulo workflow/states.

Estados canônicos do workflow de referência.
"""

from workflow.states.workflow import (
    DECLARED_STATES,
    STATE_LABELS,
    TERMINAL_STATES,
    State,
    WorkflowState,
    is_terminal,
    state_label,
)

__all__ = [
    "DECLARED_STATES",
    "STATE_LABELS",
    "TERMINAL_STATES",
    "State",
    "WorkflowState",
    "is_terminal",
    "state_label",
]
