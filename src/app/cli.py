"""CLI do quadro de issues.

Uso:
    workflow-board
    workflow-board --file meu_workflow.yaml --hide-empty
    workflow-board --order-only

Imprime o relatório em stdout; logs estruturados vão para stderr.
Workflow mal formado encerra com código 1, sem relatório vazio.
"""

from __future__ import annotations

import argparse
import logging
import sys

from app.bootstrap import initialize_app, load_board, validate_runtime_settings
from app.observability import reset_correlation_id, set_correlation_id
from config.settings import get_board_settings
from config.workflow import WorkflowDefinitionError
from utils.errors import WorkflowError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="workflow-board",
        description="Agrupa issues por estado, na ordem do workflow.",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Arquivo YAML do workflow. Se omitido, usa WORKFLOW_FILE ou o workflow padrão.",
    )
    parser.add_argument(
        "--no-header",
        action="store_true",
        help="Não exibe o cabeçalho com as premissas.",
    )
    parser.add_argument(
        "--hide-empty",
        action="store_true",
        help="Oculta estados sem issues.",
    )
    parser.add_argument(
        "--order-only",
        action="store_true",
        help="Imprime apenas a ordem dos estados.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace) -> int:
    """Executa a CLI com argumentos já parseados.

    Returns:
        Código de saída do processo
    """
    settings = get_board_settings()
    try:
        board = load_board(args.file)
        if args.order_only:
            output = "\n".join(group.label for group in board.groups())
        else:
            output = board.render(
                include_header=settings.show_header and not args.no_header,
                include_empty=settings.include_empty_states and not args.hide_empty,
            )
    except (WorkflowDefinitionError, WorkflowError) as e:
        logger.error("board_failed", extra={"error_type": type(e).__name__})
        print(f"INITIALIZATION ERROR: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    initialize_app(args.log_level)
    validate_runtime_settings()

    token = set_correlation_id()
    try:
        return run(args)
    finally:
        reset_correlation_id(token)


if __name__ == "__main__":
    sys.exit(main())
