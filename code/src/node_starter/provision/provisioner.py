"""Project provisioner.

Turns a project name into a ready-to-use local directory:
- validate the name and check ./<name> does not exist
- shallow-clone the template repository into it
- install dependencies with the package manager
- optionally replace the template's git history with a fresh repository
- optionally open the project in an editor or the file manager
- print the command that starts the project

Clone and install failures abort the run. The two optional steps only warn.
Nothing is rolled back: an aborted run leaves whatever was created on disk.
"""

import logging
from pathlib import Path
from typing import List, Optional

from node_starter.config.models import StepPolicy, TemplatePreset, ToolCommands
from node_starter.errors import (
    CloneFailedError,
    InstallFailedError,
    OptionalStepError,
    ProjectValidationError,
    StarterError,
    TargetExistsError,
)
from node_starter.models import (
    ProjectRequest,
    ProvisionOutcome,
    RunState,
    StepResult,
)
from node_starter.provision.commands import CommandRunner
from node_starter.provision.opener import FolderOpener
from node_starter.provision.prompts import ClickPrompter
from node_starter.provision.reporter import StatusReporter

logger = logging.getLogger(__name__)

NAME_PROMPT = "Enter the project name"
REINIT_PROMPT = "Would you like to initialize a new Git repository?"
OPEN_PROMPT = "Would you like to open the project folder now?"


class Provisioner:
    """Runs the provisioning steps in order for one project.

    Attributes:
        preset: Template and optional-step settings
        tools: External executables
        runner: Executes external commands
        prompter: Asks the user questions
        reporter: Prints step status
        opener: Folder opener used when the editor is not available
        cwd: Directory the project is created in
    """

    def __init__(
        self,
        preset: TemplatePreset,
        tools: Optional[ToolCommands] = None,
        runner: Optional[CommandRunner] = None,
        prompter: Optional[ClickPrompter] = None,
        reporter: Optional[StatusReporter] = None,
        opener: Optional[FolderOpener] = None,
        cwd: Optional[Path] = None,
    ):
        self.preset = preset
        self.tools = tools or ToolCommands()
        self.runner = runner or CommandRunner()
        self.prompter = prompter or ClickPrompter()
        self.reporter = reporter or StatusReporter()
        self.opener = opener or FolderOpener.for_platform()
        self.cwd = (cwd or Path.cwd()).resolve()

    def resolve_project_name(self, argument: Optional[str] = None) -> str:
        """Return the project name from the argument, prompting if it is missing.

        Blank answers are rejected and the question is asked again.
        """
        if argument is not None and argument.strip():
            return argument.strip()

        while True:
            answer = self.prompter.ask_text(NAME_PROMPT).strip()
            if answer:
                return answer
            self.reporter.warn("Project name cannot be empty")

    def validate_target_free(self, name: str) -> Path:
        """Return cwd/name, refusing a path that already exists.

        Raises:
            ProjectValidationError: If the name is blank, absolute, or contains ..
            TargetExistsError: If the path exists
        """
        if not name or not name.strip():
            raise ProjectValidationError("Project name cannot be empty")

        relative = Path(name.strip())
        if relative.anchor or ".." in relative.parts:
            raise ProjectValidationError(
                f'Project name "{name}" must be a path inside the current directory'
            )

        target = self.cwd / relative
        if target.exists():
            raise TargetExistsError(name, target)
        return target

    def clone_template(self, request: ProjectRequest) -> StepResult:
        """Shallow-clone the template repository into the project directory.

        Raises:
            CloneFailedError: If git exits non-zero
        """
        cmd = [
            self.tools.git,
            "clone",
            "--depth",
            str(self.preset.clone_depth),
            self.preset.template_url,
            str(request.target_path),
        ]

        self.reporter.start("Cloning the project template... This may take a moment!")
        result = self.runner.run(cmd, cwd=self.cwd)
        if not result.ok:
            self.reporter.fail("Failed to clone the repository.")
            raise CloneFailedError(
                f"Failed to clone {self.preset.template_url} "
                f"(git exited with status {result.returncode})",
                args=cmd,
                returncode=result.returncode,
            )

        self.reporter.succeed("Project files have arrived from the template")
        return StepResult.success("clone")

    def install_dependencies(self, request: ProjectRequest) -> StepResult:
        """Run the package manager's install command inside the project.

        Raises:
            InstallFailedError: If the package manager exits non-zero
        """
        cmd = [self.tools.package_manager, *self.preset.install_args]

        self.reporter.start("Installing dependencies...")
        result = self.runner.run(cmd, cwd=request.target_path)
        if not result.ok:
            self.reporter.fail(
                f"Failed to install dependencies. Something might be wrong with "
                f"{self.tools.package_manager}."
            )
            raise InstallFailedError(
                f"'{' '.join(cmd)}' exited with status {result.returncode}",
                args=cmd,
                returncode=result.returncode,
            )

        self.reporter.succeed("All dependencies installed")
        return StepResult.success("install")

    def _decide(self, policy: StepPolicy, default: bool, question: str) -> bool:
        if policy == StepPolicy.ALWAYS:
            return True
        if policy == StepPolicy.NEVER:
            return False
        return self.prompter.confirm(question, default=default)

    def maybe_reinit_version_control(self, request: ProjectRequest) -> StepResult:
        """Replace the template's git history with an empty repository.

        Failures are reported and returned, never raised.
        """
        wanted = self._decide(
            self.preset.reinit_git, self.preset.reinit_git_default, REINIT_PROMPT
        )
        if not wanted:
            return StepResult.skipped("reinit_git")

        self.reporter.start("Initializing a new Git repository...")
        try:
            self.runner.remove_tree(request.target_path / ".git")
            result = self.runner.run([self.tools.git, "init"], cwd=request.target_path)
            if not result.ok:
                raise OptionalStepError(f"git init exited with status {result.returncode}")
        except (OptionalStepError, OSError) as e:
            logger.warning(f"Failed to initialize git repository in {request.target_path}: {e}")
            self.reporter.fail("Failed to initialize Git repository.")
            return StepResult.failure("reinit_git", str(e))

        self.reporter.succeed("Git repository successfully initialized.")
        return StepResult.success("reinit_git")

    def maybe_open_editor(self, request: ProjectRequest) -> StepResult:
        """Open the project in the editor, or in the file manager without one.

        Failures are reported and returned, never raised.
        """
        wanted = self._decide(
            self.preset.open_project, self.preset.open_project_default, OPEN_PROMPT
        )
        if not wanted:
            return StepResult.skipped("open_project")

        editor = self.tools.editor
        self.reporter.start(f"Checking for {editor}...")
        probe = self.runner.run([editor, "--version"])
        if probe.ok:
            logger.info(f"{editor} detected, opening {request.target_path} with it")
            cmd = [editor, str(request.target_path)]
            opened_with = editor
        else:
            logger.info(f"{editor} not detected, using {self.opener.value}")
            cmd = self.opener.command(request.target_path)
            opened_with = "the file manager"

        result = self.runner.run(cmd)
        if not result.ok:
            logger.warning(f"Could not open {request.target_path}: exit status {result.returncode}")
            self.reporter.fail("Could not open the project folder. Please open it manually.")
            return StepResult.failure(
                "open_project", f"'{' '.join(cmd)}' exited with status {result.returncode}"
            )

        self.reporter.succeed(f"Project opened in {opened_with}")
        return StepResult.success("open_project")

    def print_instructions(self, request: ProjectRequest) -> str:
        """Print the command that starts the new project and return it."""
        follow_up = self.preset.follow_up.format(name=request.name)
        self.reporter.info("")
        self.reporter.info("Your project is ready!", fg="green")
        self.reporter.info("")
        self.reporter.info("To start your project, run the following commands:", fg="cyan")
        self.reporter.info(follow_up, fg="yellow")
        return follow_up

    def run(self, argument: Optional[str] = None) -> ProvisionOutcome:
        """Run all steps; fatal errors end the run with an ABORTED outcome."""
        steps: List[StepResult] = []
        try:
            name = self.resolve_project_name(argument)
            target = self.validate_target_free(name)
            request = ProjectRequest(name=name, target_path=target)

            self.reporter.header("Node Starter")
            self.reporter.info(f"Creating a new Node.js project in {request.target_path}...")
            self.reporter.info("")

            steps.append(self.clone_template(request))
            steps.append(self.install_dependencies(request))
        except StarterError as e:
            logger.error(f"Provisioning aborted during {e.step}: {e}")
            if isinstance(e, ProjectValidationError):
                self.reporter.fail(f"Error: {e}")
            return ProvisionOutcome(
                state=RunState.ABORTED,
                steps=steps,
                failed_step=e.step,
                error=str(e),
            )

        steps.append(self.maybe_reinit_version_control(request))
        steps.append(self.maybe_open_editor(request))
        self.print_instructions(request)

        outcome = ProvisionOutcome(state=RunState.COMPLETED, steps=steps)
        for warning in outcome.warnings:
            logger.warning(f"Optional step {warning.step} failed: {warning.reason}")
        return outcome
