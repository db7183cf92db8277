"""Running external commands.

All collaborators (git, npm, the editor, the OS folder opener) are invoked
through a runner so tests can substitute a recording spy. Success is decided
by exit status alone.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

# Exit status reported when the executable cannot be started at all
COMMAND_NOT_FOUND = 127


@dataclass
class CommandResult:
    """Outcome of one external command."""

    args: List[str]
    returncode: int
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner:
    """Runs commands with subprocess, blocking until they exit."""

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        """Run ``args`` (no shell) in ``cwd`` and return its exit status.

        The executable is looked up with ``shutil.which``; one that is not
        found reports COMMAND_NOT_FOUND without starting anything.

        Output is captured and only logged, so the console shows step status
        rather than tool chatter.
        """
        cmd = [str(a) for a in args]
        logger.info(f"Running: {' '.join(cmd)}" + (f" (in {cwd})" if cwd else ""))

        # Resolve through PATH and PATHEXT so npm.cmd and code.cmd start on Windows
        executable = shutil.which(cmd[0])
        if executable is None:
            logger.warning(f"Could not find {cmd[0]} on PATH")
            return CommandResult(
                args=cmd, returncode=COMMAND_NOT_FOUND, stderr=f"{cmd[0]}: command not found"
            )

        try:
            result = subprocess.run(
                [executable, *cmd[1:]],
                cwd=str(cwd) if cwd else None,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            logger.warning(f"Could not start {cmd[0]}: {e}")
            return CommandResult(args=cmd, returncode=COMMAND_NOT_FOUND, stderr=str(e))

        if result.stdout:
            logger.debug(result.stdout.rstrip())
        if result.returncode != 0:
            logger.debug(f"{cmd[0]} exited with {result.returncode}: {result.stderr.strip()}")

        return CommandResult(args=cmd, returncode=result.returncode, stderr=result.stderr or "")

    def remove_tree(self, path: Path) -> None:
        """Remove a directory tree if it exists."""
        if path.exists():
            logger.info(f"Removing {path}")
            shutil.rmtree(path)


@dataclass
class DryRunRunner(CommandRunner):
    """Records commands instead of running them; every command succeeds."""

    commands: List[List[str]] = field(default_factory=list)

    def run(self, args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
        cmd = [str(a) for a in args]
        logger.info(f"[DRY RUN] Would run: {' '.join(cmd)}" + (f" (in {cwd})" if cwd else ""))
        self.commands.append(cmd)
        return CommandResult(args=cmd, returncode=0)

    def remove_tree(self, path: Path) -> None:
        logger.info(f"[DRY RUN] Would remove {path}")
