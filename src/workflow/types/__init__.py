"""
Exports públicos do módulo workflow/types.

Tipos de dados do quadro (Issue, StateGroup).
"""

from workflow.types.issue import Issue, StateGroup

__all__ = [
    "Issue",
    "StateGroup",
]
