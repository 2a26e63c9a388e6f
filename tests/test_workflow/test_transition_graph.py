"""
Testes para workflow.transitions (TransitionGraph e validação de cobertura).

Foco em contrato público: consultas puras, ordem de declaração
e estados terminais como condição normal.
"""

import pytest

from workflow import (
    DEFAULT_TRANSITIONS,
    TransitionGraph,
    WorkflowState,
    build_default_graph,
    validate_transition_graph,
)


class TestTransitionGraphQueries:
    """outgoing, has_incoming e metadados do grafo."""

    def test_outgoing_preserves_declared_order(self) -> None:
        graph = TransitionGraph({"DOING": ["DONE", "FAILED", "ON_HOLD"]})
        assert graph.outgoing("DOING") == ("DONE", "FAILED", "ON_HOLD")

    def test_outgoing_of_terminal_or_unknown_state_is_empty(self) -> None:
        """Ausência de saída é condição normal, não erro."""
        graph = TransitionGraph({"A": ["B"]})
        assert graph.outgoing("B") == ()
        assert graph.outgoing("nao-existe") == ()

    def test_duplicate_targets_are_collapsed_keeping_first(self) -> None:
        graph = TransitionGraph({"A": ["B", "C", "B"]})
        assert graph.outgoing("A") == ("B", "C")

    def test_has_incoming(self) -> None:
        graph = TransitionGraph({"A": ["B"], "B": ["C"]})
        assert graph.has_incoming("A") is False
        assert graph.has_incoming("B") is True
        assert graph.has_incoming("C") is True
        assert graph.has_incoming("Z") is False

    def test_self_loop_does_not_count_as_incoming(self) -> None:
        graph = TransitionGraph({"A": ["A", "B"]})
        assert graph.has_incoming("A") is False
        assert graph.sources_of("A") == frozenset({"A"})

    def test_from_states_and_states_follow_declaration_order(self) -> None:
        graph = TransitionGraph({"ON_HOLD": ["DOING"], "TO_DO": ["ON_HOLD", "DOING"]})
        assert graph.from_states == ("ON_HOLD", "TO_DO")
        assert graph.states == ("ON_HOLD", "DOING", "TO_DO")
        assert len(graph) == 3
        assert "DOING" in graph
        assert list(graph) == ["ON_HOLD", "DOING", "TO_DO"]

    def test_edges_in_declaration_order(self) -> None:
        graph = TransitionGraph({"A": ["B", "C"], "B": ["C"]})
        assert list(graph.edges()) == [("A", "B"), ("A", "C"), ("B", "C")]

    def test_reachable_from_uses_depth_first_declared_order(self) -> None:
        graph = TransitionGraph({"A": ["B", "C"], "B": ["D"], "X": ["A"]})
        assert graph.reachable_from("A") == ("A", "B", "D", "C")

    def test_graph_is_immutable_after_construction(self) -> None:
        source = {"A": ["B"]}
        graph = TransitionGraph(source)
        source["A"].append("C")
        assert graph.outgoing("A") == ("B",)
        assert graph.to_dict() == {"A": ["B"]}
        with pytest.raises(AttributeError):
            graph.novo_atributo = 1  # type: ignore[attr-defined]

    def test_empty_graph(self) -> None:
        graph = TransitionGraph()
        assert len(graph) == 0
        assert graph.from_states == ()
        assert list(graph.edges()) == []


class TestDefaultGraph:
    """Workflow de referência."""

    def test_default_transitions_match_reference_workflow(self) -> None:
        graph = build_default_graph()
        assert graph.from_states == (
            WorkflowState.ON_HOLD,
            WorkflowState.TO_DO,
            WorkflowState.DOING,
        )
        assert graph.outgoing(WorkflowState.TO_DO) == (
            WorkflowState.ON_HOLD,
            WorkflowState.DOING,
        )
        assert graph.outgoing(WorkflowState.DONE) == ()
        assert graph.to_dict() == {k: list(v) for k, v in DEFAULT_TRANSITIONS.items()}

    def test_only_to_do_has_no_incoming(self) -> None:
        graph = build_default_graph()
        without_incoming = [s for s in WorkflowState if not graph.has_incoming(s)]
        assert without_incoming == [WorkflowState.TO_DO]


class TestValidateTransitionGraph:
    """Cobertura entre estados declarados e transições."""

    def test_consistent_workflow_has_no_warnings(self) -> None:
        graph = build_default_graph()
        assert validate_transition_graph(graph, list(WorkflowState), WorkflowState.TO_DO) == []

    def test_undeclared_source_and_target_are_reported(self) -> None:
        graph = TransitionGraph({"A": ["B", "X"], "Y": ["A"]})
        warnings = validate_transition_graph(graph, ["A", "B"])
        assert any("Y" in w and "origem" in w for w in warnings)
        assert any("X" in w and "destino" in w for w in warnings)
        assert len(warnings) == 2

    def test_unreachable_declared_state_is_reported(self) -> None:
        graph = TransitionGraph({"A": ["B"]})
        warnings = validate_transition_graph(graph, ["A", "B", "C"], root="A")
        assert warnings == [
            "Estado C não é alcançável a partir de A e será omitido da ordenação"
        ]

    def test_reachability_skipped_without_root(self) -> None:
        graph = TransitionGraph({"A": ["B"]})
        assert validate_transition_graph(graph, ["A", "B", "C"]) == []
