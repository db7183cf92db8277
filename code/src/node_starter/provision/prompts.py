"""Interactive prompts."""

import click


class ClickPrompter:
    """Asks the user questions on the terminal."""

    def ask_text(self, message: str) -> str:
        return click.prompt(message, default="", show_default=False)

    def confirm(self, message: str, default: bool) -> bool:
        return click.confirm(message, default=default)
