"""Quadro de issues agrupadas e ordenadas por estado.

Agrupa a lista de issues pela ordem calculada dos estados e
renderiza o relatório em texto de dois níveis:

    TO DO
     - Fill water tank
     - Make more coffee
    ON HOLD
     - Make coffee

Sem IO direto: a impressão fica a cargo da CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence

from workflow.sequencing.sequencer import StateSequencer
from workflow.states.workflow import DECLARED_STATES, State, WorkflowState, state_label
from workflow.transitions.graph import TransitionGraph, build_default_graph
from workflow.types.issue import Issue, StateGroup

logger = logging.getLogger(__name__)

HEADER_TITLE = "WELCOME - here are the issues grouped and sorted by state:"

# Premissas documentadas do workflow, exibidas no cabeçalho
ASSUMPTIONS: tuple[str, ...] = (
    "The workflow may not have a state that goes back to the first state.",
    "The order of states that are equal (eg. ON HOLD and DOING) and the order "
    "of the issues depend on their order in the initialization.",
)

SEPARATOR = "=" * 106

ISSUE_PREFIX = " - "


def group_issues_by_state(
    order: Sequence[State],
    issues: Iterable[Issue],
    labels: Mapping[State, str] | None = None,
) -> list[StateGroup]:
    """Agrupa issues por estado, seguindo a ordem dos estados.

    Dentro de cada estado a ordem original das issues é preservada.
    Estados sem issues geram grupos vazios; issues cujo estado não
    está na ordem ficam de fora.

    Args:
        order: Ordem calculada dos estados
        issues: Issues na ordem original
        labels: Mapa opcional estado → rótulo

    Returns:
        Um StateGroup por estado, na ordem informada
    """
    buckets: dict[State, list[Issue]] = {state: [] for state in order}
    left_out = 0
    for issue in issues:
        bucket = buckets.get(issue.state)
        if bucket is None:
            left_out += 1
            continue
        bucket.append(issue)

    if left_out:
        logger.debug(
            "Issues fora da ordem de estados",
            extra={"left_out_count": left_out},
        )

    label_map = dict(labels) if labels else None
    return [
        StateGroup(
            state=state,
            label=state_label(state, label_map),
            issues=tuple(buckets[state]),
        )
        for state in order
    ]


def render_header() -> str:
    """Cabeçalho do relatório com as premissas do workflow."""
    lines = [HEADER_TITLE, "Assumptions:"]
    lines.extend(f"- {assumption}" for assumption in ASSUMPTIONS)
    lines.append(SEPARATOR)
    return "\n".join(lines)


def render_board(groups: Iterable[StateGroup], *, include_empty: bool = True) -> str:
    """Renderiza os grupos em texto de dois níveis.

    Args:
        groups: Grupos na ordem de exibição
        include_empty: Exibe estados sem issues

    Returns:
        Relatório em texto (sem quebra de linha final)
    """
    lines: list[str] = []
    for group in groups:
        if group.is_empty and not include_empty:
            continue
        lines.append(group.label)
        lines.extend(f"{ISSUE_PREFIX}{issue.title}" for issue in group.issues)
    return "\n".join(lines)


class WorkflowBoard:
    """Quadro com grafo, ordem de estados e issues.

    A ordem é calculada uma única vez pelo StateSequencer.
    """

    __slots__ = ("_issues", "_labels", "_sequencer")

    def __init__(
        self,
        graph: TransitionGraph,
        issues: Iterable[Issue] = (),
        declared_states: Iterable[State] | None = None,
        labels: Mapping[State, str] | None = None,
    ) -> None:
        self._sequencer = StateSequencer(graph, declared_states)
        self._issues = tuple(issues)
        self._labels = dict(labels or {})

    @property
    def sequencer(self) -> StateSequencer:
        return self._sequencer

    @property
    def issues(self) -> tuple[Issue, ...]:
        return self._issues

    @property
    def order(self) -> tuple[State, ...]:
        """Ordem dos estados (levanta erro de workflow se mal formado)."""
        return self._sequencer.order

    def groups(self) -> list[StateGroup]:
        """Issues agrupadas na ordem dos estados."""
        groups = group_issues_by_state(self.order, self._issues, self._labels)
        logger.debug(
            "Quadro agrupado",
            extra={"groups": [group.to_log_dict() for group in groups]},
        )
        return groups

    def render(self, *, include_header: bool = False, include_empty: bool = True) -> str:
        """Relatório completo do quadro."""
        body = render_board(self.groups(), include_empty=include_empty)
        if include_header:
            return f"{render_header()}\n{body}"
        return body


# Issues do quadro de referência, na ordem original
DEFAULT_ISSUES: tuple[tuple[str, str], ...] = (
    ("Get new coffee machine", "DONE"),
    ("(Re)fill beans", "DOING"),
    ("Fill water tank", "TO_DO"),
    ("Make coffee", "ON_HOLD"),
    ("Make more coffee", "TO_DO"),
    ("Turn old coffee machine off and on again", "FAILED"),
    ("Repair old coffee machine", "FAILED"),
)


def build_default_board() -> WorkflowBoard:
    """Quadro de referência com o workflow e issues padrão."""
    issues = [Issue(title=title, state=WorkflowState(state)) for title, state in DEFAULT_ISSUES]
    return WorkflowBoard(build_default_graph(), issues, DECLARED_STATES)
