"""Exception hierarchy for node-starter."""

from typing import Optional, Sequence


class StarterError(Exception):
    """Base class for errors that abort project creation."""

    step = "provision"


class ProjectValidationError(StarterError):
    """Raised when the requested project cannot be created as asked."""

    step = "validate"


class TargetExistsError(ProjectValidationError):
    """Raised when the target directory already exists."""

    def __init__(self, name: str, path: object):
        self.name = name
        self.path = path
        super().__init__(f'The directory "{name}" already exists in the current path.')


class ExternalToolError(StarterError):
    """Raised when a required external command exits non-zero.

    Attributes:
        step: Pipeline step that ran the command
        command: Argument vector that was executed
        returncode: Exit status reported for the command
    """

    step = "external"

    def __init__(
        self,
        message: str,
        args: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
    ):
        super().__init__(message)
        self.command = list(args) if args else []
        self.returncode = returncode


class CloneFailedError(ExternalToolError):
    """Raised when cloning the template repository fails."""

    step = "clone"


class InstallFailedError(ExternalToolError):
    """Raised when installing dependencies fails."""

    step = "install"


class OptionalStepError(StarterError):
    """Raised inside optional steps; converted into a warning by the provisioner."""

    pass
