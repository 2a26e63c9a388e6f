"""Configuração do pytest para o projeto workflow-board."""

import logging
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Remove handlers instalados por configure_logging e restaura o nível do root."""
    from config.logging import CorrelationIdFilter

    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if any(isinstance(f, CorrelationIdFilter) for f in handler.filters):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings e workflow padrão são cacheados; limpa entre testes."""
    from config.settings import get_base_settings, get_board_settings
    from config.workflow import clear_cache

    yield
    get_base_settings.cache_clear()
    get_board_settings.cache_clear()
    clear_cache()
