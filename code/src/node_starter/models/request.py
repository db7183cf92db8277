"""Project request model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class ProjectRequest(BaseModel):
    """The project the user asked for.

    Attributes:
        name: Project (and directory) name, stripped of surrounding whitespace
        target_path: Absolute directory the template is cloned into
    """

    model_config = ConfigDict(frozen=True)

    name: str
    target_path: Path

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        """Strip whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty")
        return v

    @field_validator("target_path")
    @classmethod
    def path_is_absolute(cls, v: Path) -> Path:
        if not v.is_absolute():
            raise ValueError(f"target_path must be absolute: {v}")
        return v
