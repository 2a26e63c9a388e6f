"""Gerenciamento de correlation_id por execução.

Cada execução do quadro recebe um correlation_id, injetado em todos
os logs pelo CorrelationIdFilter. Usa ContextVar.

Uso:
    from app.observability import set_correlation_id, reset_correlation_id

    token = set_correlation_id()
    try:
        ...  # montar e imprimir o quadro
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id da execução atual (vazio se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id da execução atual.

    Args:
        correlation_id: ID a definir. Se None, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4 em hex)."""
    return uuid.uuid4().hex
