"""Exceções de domínio para falhas na ordenação do workflow."""

from __future__ import annotations

from collections.abc import Hashable, Iterable


class WorkflowError(ValueError):
    """Base para workflows mal formados."""


class NoRootFoundError(WorkflowError):
    """Nenhum estado declarado está livre de transições de entrada.

    Ocorre com grafo totalmente cíclico ou configuração vazia.

    Attributes:
        candidates: Estados avaliados como raiz, na ordem de declaração.
    """

    def __init__(self, candidates: Iterable[Hashable] = ()) -> None:
        self.candidates = tuple(candidates)
        if self.candidates:
            detail = ", ".join(str(state) for state in self.candidates)
            message = (
                "Workflow sem ponto de partida: todos os estados possuem "
                f"transição de entrada ({detail})"
            )
        else:
            message = "Workflow sem ponto de partida: nenhum estado declarado"
        super().__init__(message)


class CyclicWorkflowError(WorkflowError):
    """Uma transição retorna ao estado inicial do workflow.

    Attributes:
        root: Estado inicial.
        source: Estado que transita de volta para a raiz.
    """

    def __init__(self, root: Hashable, source: Hashable) -> None:
        self.root = root
        self.source = source
        super().__init__(
            f"Workflow cíclico: transição {source} → {root} retorna ao estado inicial"
        )
