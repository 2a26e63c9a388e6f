"""Testes para app.services.board (agrupamento e relatório)."""

from __future__ import annotations

import pytest

from app.services.board import (
    ASSUMPTIONS,
    HEADER_TITLE,
    WorkflowBoard,
    build_default_board,
    group_issues_by_state,
    render_board,
    render_header,
)
from utils.errors import NoRootFoundError
from workflow import Issue, StateGroup, TransitionGraph, WorkflowState

EXPECTED_DEFAULT_BOARD = """\
TO DO
 - Fill water tank
 - Make more coffee
ON HOLD
 - Make coffee
DOING
 - (Re)fill beans
DONE
 - Get new coffee machine
FAILED
 - Turn old coffee machine off and on again
 - Repair old coffee machine"""


class TestGroupIssuesByState:
    """Agrupamento segue a ordem dos estados e a ordem original das issues."""

    def test_groups_follow_state_order_and_keep_issue_order(self) -> None:
        issues = [Issue("x", "DOING"), Issue("y", "TO_DO"), Issue("z", "DOING")]

        groups = group_issues_by_state(["TO_DO", "DOING"], issues)

        assert [g.state for g in groups] == ["TO_DO", "DOING"]
        assert [i.title for i in groups[0].issues] == ["y"]
        assert [i.title for i in groups[1].issues] == ["x", "z"]

    def test_states_without_issues_produce_empty_groups(self) -> None:
        groups = group_issues_by_state(["A", "B"], [Issue("only", "B")])
        assert groups[0] == StateGroup(state="A", label="A", issues=())

    def test_issues_outside_order_are_left_out(self) -> None:
        groups = group_issues_by_state(["A"], [Issue("fora", "C"), Issue("dentro", "A")])
        assert [i.title for g in groups for i in g.issues] == ["dentro"]

    def test_labels_are_applied(self) -> None:
        groups = group_issues_by_state(
            [WorkflowState.TO_DO, "CUSTOM"],
            [],
            labels={"CUSTOM": "Personalizado"},
        )
        assert [g.label for g in groups] == ["TO DO", "Personalizado"]


class TestRender:
    """Relatório em texto de dois níveis."""

    def test_render_board_two_levels(self) -> None:
        groups = [
            StateGroup("TO_DO", "TO DO", (Issue("y", "TO_DO"),)),
            StateGroup("DOING", "DOING", (Issue("x", "DOING"),)),
        ]
        assert render_board(groups) == "TO DO\n - y\nDOING\n - x"

    def test_render_board_hides_empty_states(self) -> None:
        groups = [StateGroup("A", "A"), StateGroup("B", "B", (Issue("b", "B"),))]
        assert render_board(groups) == "A\nB\n - b"
        assert render_board(groups, include_empty=False) == "B\n - b"

    def test_render_header_lists_assumptions(self) -> None:
        header = render_header()
        lines = header.splitlines()
        assert lines[0] == HEADER_TITLE
        assert lines[1] == "Assumptions:"
        for assumption in ASSUMPTIONS:
            assert f"- {assumption}" in lines
        assert set(lines[-1]) == {"="}


class TestWorkflowBoard:
    """Quadro completo."""

    def test_default_board_report(self) -> None:
        board = build_default_board()
        assert board.order == (
            WorkflowState.TO_DO,
            WorkflowState.ON_HOLD,
            WorkflowState.DOING,
            WorkflowState.DONE,
            WorkflowState.FAILED,
        )
        assert board.render() == EXPECTED_DEFAULT_BOARD

    def test_render_with_header(self) -> None:
        report = build_default_board().render(include_header=True)
        assert report.startswith(HEADER_TITLE)
        assert report.endswith(EXPECTED_DEFAULT_BOARD)

    def test_unreachable_state_issues_are_not_reported(self) -> None:
        """Lacuna conhecida: issues de estado isolado não aparecem no quadro."""
        board = WorkflowBoard(
            TransitionGraph({"A": ["B"]}),
            [Issue("a", "A"), Issue("c", "C")],
            declared_states=["A", "B", "C"],
        )
        assert board.render() == "A\n - a\nB"

    def test_malformed_workflow_raises_instead_of_empty_report(self) -> None:
        board = WorkflowBoard(TransitionGraph({"A": ["B"], "B": ["A"]}), [Issue("a", "A")])
        with pytest.raises(NoRootFoundError):
            board.render()
