"""Exceções compartilhadas do workflow."""

from .exceptions import (
    CyclicWorkflowError,
    NoRootFoundError,
    WorkflowError,
)

__all__ = [
    "CyclicWorkflowError",
    "NoRootFoundError",
    "WorkflowError",
]
