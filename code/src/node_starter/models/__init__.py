"""Data models for node-starter."""

from node_starter.models.request import ProjectRequest
from node_starter.models.results import (
    ProvisionOutcome,
    RunState,
    StepResult,
    StepStatus,
)

__all__ = [
    "ProjectRequest",
    "ProvisionOutcome",
    "RunState",
    "StepResult",
    "StepStatus",
]
