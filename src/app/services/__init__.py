"""Serviços de aplicação.

Agrupamento e renderização do quadro (sem IO direto).
"""

from app.services.board import (
    WorkflowBoard,
    build_default_board,
    group_issues_by_state,
    render_board,
    render_header,
)

__all__ = [
    "WorkflowBoard",
    "build_default_board",
    "group_issues_by_state",
    "render_board",
    "render_header",
]
