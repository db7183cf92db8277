"""Configuration loading utilities."""

import logging
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from node_starter.config.models import StarterConfig

logger = logging.getLogger(__name__)

APP_NAME = "node-starter"


class ConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or validated."""

    pass


def default_config_path() -> Path:
    """Per-user configuration file location (e.g. ~/.config/node-starter/config.yaml)."""
    return Path(click.get_app_dir(APP_NAME)) / "config.yaml"


def load_config(config_path: Optional[str] = None) -> StarterConfig:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to configuration file. If None, the per-user default
                    is used when it exists, otherwise built-in defaults.

    Returns:
        Validated StarterConfig instance

    Raises:
        ConfigLoadError: If an explicit file is missing, the YAML is invalid
                         or empty, or validation fails
    """
    if config_path is None:
        config_file = default_config_path()
        if not config_file.exists():
            logger.debug(f"No config at {config_file}, using built-in defaults")
            return StarterConfig()
        config_path = str(config_file)

    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigLoadError(
            f"Configuration file not found: {config_path}\n"
            f"Expected location: {default_config_path()}\n"
            f"Run with --write-example-config PATH to create one."
        )

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigLoadError(f"Failed to read {config_path}: {e}") from e

    if config_data is None:
        raise ConfigLoadError(f"Configuration file is empty: {config_path}")

    if not isinstance(config_data, dict):
        raise ConfigLoadError(f"Configuration must be a mapping: {config_path}")

    try:
        config = StarterConfig(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Configuration validation failed:\n{e}") from e

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def create_example_config(output_path: Optional[str] = None) -> Path:
    """Create an example configuration file.

    Args:
        output_path: Where to write the example config (default: per-user location)

    Returns:
        Path of the written file

    Raises:
        ConfigLoadError: If file cannot be written
    """
    example_config = {
        "default_preset": "interactive",
        "tools": {
            "git": "git",
            "package_manager": "npm",
            "editor": "code",
        },
        "presets": {
            "interactive": {
                "template_url": "https://github.com/MunavvarSinan/node-starter",
                "clone_depth": 1,
                "install_args": ["install"],
                "reinit_git": "prompt",
                "reinit_git_default": True,
                "open_project": "prompt",
                "open_project_default": False,
                "follow_up": "cd {name} && docker compose up",
            },
            "unattended": {
                "template_url": "https://github.com/MunavvarSinan/node-starter",
                "reinit_git": "never",
                "open_project": "never",
            },
        },
    }

    output_file = Path(output_path) if output_path else default_config_path()
    output_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write("# node-starter configuration\n\n")
            yaml.dump(example_config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigLoadError(f"Failed to write example config to {output_file}: {e}") from e

    return output_file
