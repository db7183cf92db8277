"""Configuration module for node-starter."""

from node_starter.config.loader import (
    ConfigLoadError,
    create_example_config,
    default_config_path,
    load_config,
)
from node_starter.config.models import (
    DEFAULT_TEMPLATE_URL,
    INTERACTIVE_PRESET,
    UNATTENDED_PRESET,
    StarterConfig,
    StepPolicy,
    TemplatePreset,
    ToolCommands,
)

__all__ = [
    "DEFAULT_TEMPLATE_URL",
    "INTERACTIVE_PRESET",
    "UNATTENDED_PRESET",
    "StarterConfig",
    "StepPolicy",
    "TemplatePreset",
    "ToolCommands",
    "load_config",
    "create_example_config",
    "default_config_path",
    "ConfigLoadError",
]
