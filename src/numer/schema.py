"""Data models shared by the prompt flow and the scaffolder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import is_valid_package_name


class PackageManager(str, Enum):
    """Package managers that can install a generated project's dependencies."""

    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"
    DENO = "deno"


class FlowOutcome(str, Enum):
    """Terminal states of the prompt flow."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNAVAILABLE = "unavailable"


class Template(BaseModel):
    """Entry of the template registry."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1, description="Directory name of the template files.")
    display_name: str = Field(..., description="Label shown in the template menu.")
    description: str = Field("", description="Short note rendered next to the label.")
    available: bool = Field(True, description="Whether the template can be generated yet.")
    hint: str = Field("", description="Optional extra hint shown for the highlighted entry.")


class ScaffoldRequest(BaseModel):
    """Everything needed to generate a project, collected by the prompt flow."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_name: str = Field(..., description="Project name exactly as the user typed it.")
    target_dir: str = Field(..., min_length=1, description="Sanitized target directory.")
    package_name: str = Field(..., description="Name written into the generated manifest.")
    template_id: str = Field(..., min_length=1, description="Identifier of the chosen template.")
    install: bool = Field(False, description="Run the package manager after generating.")
    package_manager: PackageManager = Field(
        PackageManager.NPM, description="Package manager used for installation and next steps."
    )
    overwrite: bool = Field(
        False, description="The user agreed to clear a non-empty target directory."
    )

    @field_validator("package_name")
    @classmethod
    def _check_package_name(cls, value: str) -> str:
        if not is_valid_package_name(value):
            raise ValueError(f"invalid package name '{value}'")
        return value


class NextStep(BaseModel):
    """Command suggested to the user once the project has been generated."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: str
    description: str


__all__ = [
    "FlowOutcome",
    "NextStep",
    "PackageManager",
    "ScaffoldRequest",
    "Template",
]
