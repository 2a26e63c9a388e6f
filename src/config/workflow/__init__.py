"""Definições de workflow em YAML.

Uso:
    from config.workflow import load_workflow_definition

    definition = load_workflow_definition("meu_workflow.yaml")
    graph = definition.to_graph()
"""

from config.workflow.loader import (
    DEFAULT_WORKFLOW_PATH,
    WorkflowDefinitionError,
    clear_cache,
    load_default_workflow,
    load_workflow_definition,
    parse_workflow_definition,
)
from config.workflow.models import (
    IssueDefinition,
    StateDefinition,
    WorkflowDefinition,
)

__all__ = [
    "DEFAULT_WORKFLOW_PATH",
    "IssueDefinition",
    "StateDefinition",
    "WorkflowDefinition",
    "WorkflowDefinitionError",
    "clear_cache",
    "load_default_workflow",
    "load_workflow_definition",
    "parse_workflow_definition",
]
