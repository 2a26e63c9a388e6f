"""Modelos de definição de workflow carregados de YAML.

Contratos validados com Pydantic antes de chegar ao núcleo de
ordenação. A lista de estados declarados é a fonte de verdade.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from workflow.transitions.graph import TransitionGraph
from workflow.types.issue import Issue


class StateDefinition(BaseModel):
    """Estado declarado com rótulo opcional de exibição."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Identificador do estado.")
    label: str = Field(default="", description="Rótulo exibido no quadro.")

    @property
    def display_label(self) -> str:
        return self.label or self.name


class IssueDefinition(BaseModel):
    """Issue declarada no arquivo de workflow."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = Field(..., min_length=1, description="Título da issue.")
    state: str = Field(..., min_length=1, description="Estado atual da issue.")


class WorkflowDefinition(BaseModel):
    """Definição completa: estados, transições e issues."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    states: list[StateDefinition] = Field(
        default_factory=list,
        description="Estados na ordem de declaração.",
    )
    transitions: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Estado de origem → destinos na ordem declarada.",
    )
    issues: list[IssueDefinition] = Field(
        default_factory=list,
        description="Issues na ordem original.",
    )

    @field_validator("states", mode="before")
    @classmethod
    def coerce_plain_names(cls, value: Any) -> Any:
        # Aceita "- TO_DO" como atalho para "- name: TO_DO"
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value

    @field_validator("transitions", mode="before")
    @classmethod
    def coerce_empty_targets(cls, value: Any) -> Any:
        # "DONE:" sem destinos chega como None no YAML
        if isinstance(value, dict):
            return {key: [] if targets is None else targets for key, targets in value.items()}
        return value

    @model_validator(mode="after")
    def check_declared_states(self) -> WorkflowDefinition:
        names = [state.name for state in self.states]
        duplicated = sorted({name for name in names if names.count(name) > 1})
        if duplicated:
            raise ValueError(f"Estados duplicados: {', '.join(duplicated)}")

        declared = set(names)
        unknown = [issue.state for issue in self.issues if issue.state not in declared]
        if unknown:
            raise ValueError(
                f"Issues com estado não declarado: {', '.join(dict.fromkeys(unknown))}"
            )
        return self

    def state_names(self) -> tuple[str, ...]:
        """Nomes dos estados na ordem de declaração."""
        return tuple(state.name for state in self.states)

    def labels(self) -> dict[str, str]:
        """Mapa estado → rótulo de exibição."""
        return {state.name: state.display_label for state in self.states}

    def to_graph(self) -> TransitionGraph:
        """Constrói o grafo de transições imutável."""
        return TransitionGraph(self.transitions)

    def to_issues(self) -> tuple[Issue, ...]:
        """Converte as issues declaradas para o tipo do domínio."""
        return tuple(Issue(title=issue.title, state=issue.state) for issue in self.issues)


__all__ = ["IssueDefinition", "StateDefinition", "WorkflowDefinition"]
