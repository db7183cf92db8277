"""Configuration models for node-starter."""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_TEMPLATE_URL = "https://github.com/MunavvarSinan/node-starter"

INTERACTIVE_PRESET = "interactive"
UNATTENDED_PRESET = "unattended"


class StepPolicy(str, Enum):
    """How an optional pipeline step is decided."""

    PROMPT = "prompt"
    ALWAYS = "always"
    NEVER = "never"


class ToolCommands(BaseModel):
    """Executables invoked by the provisioner.

    Attributes:
        git: Version-control client
        package_manager: Package manager used for the install step
        editor: Editor CLI probed with ``--version`` and used to open the project
    """

    git: str = "git"
    package_manager: str = "npm"
    editor: str = "code"


class TemplatePreset(BaseModel):
    """One way of provisioning a project.

    Attributes:
        template_url: Repository cloned as the project's initial contents
        clone_depth: History depth for the shallow clone
        install_args: Arguments passed to the package manager
        reinit_git: Policy for removing .git and running ``git init``
        reinit_git_default: Default answer when ``reinit_git`` is ``prompt``
        open_project: Policy for opening the project folder
        open_project_default: Default answer when ``open_project`` is ``prompt``
        follow_up: Command shown when done; ``{name}`` is the project name
    """

    template_url: str = DEFAULT_TEMPLATE_URL
    clone_depth: int = Field(default=1, ge=1)
    install_args: List[str] = Field(default_factory=lambda: ["install"])
    reinit_git: StepPolicy = StepPolicy.PROMPT
    reinit_git_default: bool = True
    open_project: StepPolicy = StepPolicy.PROMPT
    open_project_default: bool = False
    follow_up: str = "cd {name} && docker compose up"

    @field_validator("template_url")
    @classmethod
    def url_not_blank(cls, v: str) -> str:
        """Reject blank template URLs."""
        if not v.strip():
            raise ValueError("template_url cannot be empty")
        return v.strip()

    @field_validator("follow_up")
    @classmethod
    def follow_up_only_uses_name(cls, v: str) -> str:
        """Reject placeholders other than {name}; literal braces must be doubled."""
        try:
            v.format(name="project")
        except (AttributeError, KeyError, IndexError, ValueError) as e:
            raise ValueError(
                f"follow_up may only use the {{name}} placeholder (write {{{{ and }}}} "
                f"for literal braces): {v!r}"
            ) from e
        return v

    @field_validator("install_args")
    @classmethod
    def install_args_not_empty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("install_args must contain at least one argument")
        return v


def builtin_presets() -> Dict[str, TemplatePreset]:
    """Return the presets shipped with node-starter.

    ``interactive`` asks whether to reinitialize git and whether to open the
    project; ``unattended`` does neither and never prompts.
    """
    return {
        INTERACTIVE_PRESET: TemplatePreset(),
        UNATTENDED_PRESET: TemplatePreset(
            reinit_git=StepPolicy.NEVER,
            open_project=StepPolicy.NEVER,
        ),
    }


class StarterConfig(BaseModel):
    """Root configuration model for node-starter.

    Attributes:
        default_preset: Preset used when none is given on the command line
        presets: Available presets by name (merged over the built-in ones)
        tools: External executables
    """

    default_preset: str = INTERACTIVE_PRESET
    presets: Dict[str, TemplatePreset] = Field(default_factory=builtin_presets)
    tools: ToolCommands = Field(default_factory=ToolCommands)

    @field_validator("presets", mode="after")
    @classmethod
    def merge_builtin_presets(cls, v: Dict[str, TemplatePreset]) -> Dict[str, TemplatePreset]:
        """Keep built-in presets available unless overridden by name."""
        merged = builtin_presets()
        merged.update(v)
        return merged

    @model_validator(mode="after")
    def default_preset_exists(self) -> "StarterConfig":
        if self.default_preset not in self.presets:
            raise ValueError(
                f"default_preset '{self.default_preset}' is not one of: "
                f"{', '.join(sorted(self.presets))}"
            )
        return self

    def get_preset(self, name: str) -> TemplatePreset:
        """Look up a preset by name.

        Raises:
            KeyError: If no preset with that name is configured
        """
        try:
            return self.presets[name]
        except KeyError:
            raise KeyError(
                f"Unknown preset '{name}' (available: {', '.join(sorted(self.presets))})"
            ) from None
