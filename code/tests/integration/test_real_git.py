"""Integration tests that run the real git client.

These tests require git to be installed. The package manager is replaced by
``git --version`` so npm is not needed.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from node_starter.config import StepPolicy, TemplatePreset, ToolCommands
from node_starter.models import RunState
from node_starter.provision import CommandRunner, FolderOpener, Provisioner, StatusReporter

pytestmark = pytest.mark.skipif(
    shutil.which("git") is None,
    reason="git not installed",
)


def _git(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", "-c", "user.name=Test", "-c", "user.email=test@example.com", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )


@pytest.fixture
def template_repo(tmp_path: Path) -> Path:
    """A local repository with two commits, standing in for the template."""
    repo = tmp_path / "template"
    repo.mkdir()
    _git("init", cwd=repo)
    (repo / "package.json").write_text('{"name": "node-starter", "version": "1.0.0"}\n')
    _git("add", "package.json", cwd=repo)
    _git("commit", "-m", "Initial template", cwd=repo)
    (repo / "README.md").write_text("# node-starter\n")
    _git("add", "README.md", cwd=repo)
    _git("commit", "-m", "Add README", cwd=repo)
    return repo


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


def _provisioner(template_repo: Path, workdir: Path, reinit: StepPolicy) -> Provisioner:
    preset = TemplatePreset(
        template_url=template_repo.as_uri(),
        install_args=["--version"],
        reinit_git=reinit,
        open_project=StepPolicy.NEVER,
    )
    return Provisioner(
        preset=preset,
        tools=ToolCommands(package_manager="git"),
        runner=CommandRunner(),
        reporter=StatusReporter(color=False),
        opener=FolderOpener.POSIX,
        cwd=workdir,
    )


@pytest.mark.integration
@pytest.mark.ai_generated
class TestRealGit:
    """Clone and reinitialize with a real git client."""

    def test_shallow_clone(self, template_repo: Path, workdir: Path) -> None:
        outcome = _provisioner(template_repo, workdir, StepPolicy.NEVER).run("demo")

        assert outcome.state == RunState.COMPLETED
        project = workdir / "demo"
        assert (project / "package.json").exists()
        assert (project / "README.md").exists()

        log = _git("rev-list", "--count", "HEAD", cwd=project)
        assert log.stdout.strip() == "1"

    def test_reinit_discards_template_history(self, template_repo: Path, workdir: Path) -> None:
        outcome = _provisioner(template_repo, workdir, StepPolicy.ALWAYS).run("demo")

        assert outcome.state == RunState.COMPLETED
        assert outcome.warnings == []
        project = workdir / "demo"
        assert (project / ".git").is_dir()

        head = subprocess.run(
            ["git", "rev-parse", "--verify", "HEAD"],
            cwd=project,
            capture_output=True,
            text=True,
        )
        assert head.returncode != 0

    def test_missing_template(self, tmp_path: Path, workdir: Path) -> None:
        outcome = _provisioner(tmp_path / "does-not-exist", workdir, StepPolicy.NEVER).run("demo")

        assert outcome.state == RunState.ABORTED
        assert outcome.failed_step == "clone"

    def test_second_run_refuses_existing_directory(
        self, template_repo: Path, workdir: Path
    ) -> None:
        _provisioner(template_repo, workdir, StepPolicy.NEVER).run("demo")

        outcome = _provisioner(template_repo, workdir, StepPolicy.NEVER).run("demo")

        assert outcome.state == RunState.ABORTED
        assert outcome.failed_step == "validate"
