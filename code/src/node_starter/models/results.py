"""Step and run outcomes of the provisioning pipeline."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StepStatus(str, Enum):
    """Outcome of a single pipeline step."""

    SUCCESS = "success"
    FAILURE = "failure"
    SKIPPED = "skipped"


@dataclass
class StepResult:
    """Result of one pipeline step."""

    step: str
    status: StepStatus
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != StepStatus.FAILURE

    @classmethod
    def success(cls, step: str) -> "StepResult":
        return cls(step=step, status=StepStatus.SUCCESS)

    @classmethod
    def failure(cls, step: str, reason: str) -> "StepResult":
        return cls(step=step, status=StepStatus.FAILURE, reason=reason)

    @classmethod
    def skipped(cls, step: str, reason: Optional[str] = None) -> "StepResult":
        return cls(step=step, status=StepStatus.SKIPPED, reason=reason)


class RunState(str, Enum):
    """Terminal state of a provisioning run."""

    COMPLETED = "completed"
    ABORTED = "aborted"


@dataclass
class ProvisionOutcome:
    """Result of a whole provisioning run.

    Attributes:
        state: COMPLETED if the final instructions were reached, else ABORTED
        steps: Results of the steps that ran, in order
        failed_step: Name of the step that aborted the run
        error: Message of the fatal error
    """

    state: RunState
    steps: List[StepResult] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[str] = None

    @property
    def exit_code(self) -> int:
        return 0 if self.state == RunState.COMPLETED else 1

    @property
    def warnings(self) -> List[StepResult]:
        """Optional steps that failed without aborting the run."""
        return [s for s in self.steps if s.status == StepStatus.FAILURE]
