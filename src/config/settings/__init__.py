"""Agregador de settings do workflow-board.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.board import (
    BoardSettings,
    get_board_settings,
)

__all__ = [
    "BaseSettings",
    "BoardSettings",
    "Environment",
    "get_base_settings",
    "get_board_settings",
]
