"""Console status reporting for pipeline steps."""

import logging

import click

logger = logging.getLogger(__name__)


class StatusReporter:
    """Prints one status line per step transition.

    Steps call ``start`` when they begin and ``succeed`` or ``fail`` when they
    end; ``warn`` and ``info`` print free-standing lines.
    """

    def __init__(self, color: bool = True):
        self.color = color

    def _echo(self, text: str, fg: str = "", err: bool = False, bold: bool = False) -> None:
        if self.color and (fg or bold):
            text = click.style(text, fg=fg or None, bold=bold or None)
        click.echo(text, err=err)

    def header(self, text: str) -> None:
        self._echo(text, fg="blue", bold=True)

    def start(self, label: str) -> None:
        logger.debug(f"start: {label}")
        self._echo(f"… {label}", fg="cyan")

    def succeed(self, label: str) -> None:
        logger.debug(f"succeed: {label}")
        self._echo(f"✓ {label}", fg="green")

    def fail(self, label: str) -> None:
        logger.debug(f"fail: {label}")
        self._echo(f"✗ {label}", fg="red", err=True)

    def warn(self, label: str) -> None:
        self._echo(f"! {label}", fg="yellow", err=True)

    def info(self, text: str, fg: str = "") -> None:
        self._echo(text, fg=fg)
