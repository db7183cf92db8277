"""Main CLI entry point for create-node-starter."""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from node_starter import __version__
from node_starter.config import (
    ConfigLoadError,
    StepPolicy,
    TemplatePreset,
    create_example_config,
    load_config,
)
from node_starter.models import RunState
from node_starter.provision import (
    CommandRunner,
    DryRunRunner,
    Provisioner,
    StatusReporter,
)

logger = logging.getLogger(__name__)


def configure_logging(log_level: str, log_file: Optional[str] = None) -> None:
    """Configure console logging at ``log_level`` and an optional DEBUG log file.

    Handlers installed by a previous call are replaced, not duplicated.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything

    for handler in list(root_logger.handlers):
        if getattr(handler, "_node_starter", False):
            root_logger.removeHandler(handler)
            handler.close()

    # Console handler - user-facing messages only
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler._node_starter = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler._node_starter = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)


def _policy(flag: Optional[bool]) -> Optional[StepPolicy]:
    if flag is None:
        return None
    return StepPolicy.ALWAYS if flag else StepPolicy.NEVER


@click.command()
@click.version_option(version=__version__, prog_name="create-node-starter")
@click.argument("project_name", required=False)
@click.option(
    "--preset",
    default=None,
    help="Configuration preset (built-in: interactive, unattended) [default: from config]",
)
@click.option("--template-url", default=None, help="Clone this repository instead of the preset's")
@click.option(
    "--git-init/--no-git-init",
    default=None,
    help="Reinitialize git without asking (default: ask, or the preset's policy)",
)
@click.option(
    "--open/--no-open",
    "open_project",
    default=None,
    help="Open the project without asking (default: ask, or the preset's policy)",
)
@click.option("--dry-run", is_flag=True, help="Show the commands that would run without running them")
@click.option(
    "--config",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file path [default: per-user config if present]",
)
@click.option(
    "--write-example-config",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write an example configuration file to this path and exit",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Console logging level",
    show_default=True,
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write a DEBUG-level log to this file",
)
@click.option("--no-color", is_flag=True, help="Disable colored status output")
@click.pass_context
def cli(
    ctx: click.Context,
    project_name: Optional[str],
    preset: Optional[str],
    template_url: Optional[str],
    git_init: Optional[bool],
    open_project: Optional[bool],
    dry_run: bool,
    config: Optional[str],
    write_example_config: Optional[str],
    log_level: str,
    log_file: Optional[str],
    no_color: bool,
) -> None:
    """Create a new Node.js project from the starter template.

    Clones the template into ./PROJECT_NAME, installs its dependencies, and
    optionally reinitializes git and opens the project. Asks for the name
    when PROJECT_NAME is omitted.

    \b
    Examples:
        create-node-starter my-api
        create-node-starter my-api --preset unattended
        create-node-starter my-api --no-git-init --open
        create-node-starter --dry-run my-api
    """
    try:
        configure_logging(log_level, log_file)
    except OSError as e:
        raise click.ClickException(f"Cannot open log file {log_file}: {e}") from e

    if write_example_config:
        try:
            written = create_example_config(write_example_config)
        except ConfigLoadError as e:
            raise click.ClickException(str(e)) from e
        click.echo(f"✓ Wrote example configuration to {written}")
        return

    try:
        starter_config = load_config(config)
    except ConfigLoadError as e:
        raise click.ClickException(str(e)) from e

    preset_name = preset or starter_config.default_preset
    try:
        selected = starter_config.get_preset(preset_name)
    except KeyError as e:
        raise click.BadParameter(e.args[0], param_hint="'--preset'") from e

    overrides = {
        "template_url": template_url,
        "reinit_git": _policy(git_init),
        "open_project": _policy(open_project),
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            selected = TemplatePreset.model_validate({**selected.model_dump(), **overrides})
        except ValidationError as e:
            raise click.BadParameter(str(e), param_hint="'--template-url'") from e

    runner = DryRunRunner() if dry_run else CommandRunner()
    provisioner = Provisioner(
        preset=selected,
        tools=starter_config.tools,
        runner=runner,
        reporter=StatusReporter(color=not no_color),
    )
    logger.debug(f"Using preset {preset_name}: {selected.template_url}")

    try:
        outcome = provisioner.run(project_name)
    except click.exceptions.Abort:
        raise
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        click.echo(click.style("An unexpected error occurred: ", fg="red") + str(e), err=True)
        ctx.exit(1)

    if dry_run and isinstance(runner, DryRunRunner):
        click.echo("\n[DRY RUN] Commands that would run:")
        for cmd in runner.commands:
            click.echo(f"  {' '.join(cmd)}")

    if outcome.state == RunState.ABORTED:
        ctx.exit(outcome.exit_code)


if __name__ == "__main__":
    cli()
