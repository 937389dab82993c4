"""Configuration helpers shared by the prompt flow, scaffolder and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .package_manager import USER_AGENT_VARIABLE, detect_package_manager
from .registry import TEMPLATES_DIR
from .schema import PackageManager

DEFAULT_PROJECT_NAME = "project-name"


@dataclass(slots=True)
class ScaffolderConfig:
    """Settings for a single scaffolding run.

    Attributes
    ----------
    cwd:
        Directory the target directory is resolved against. Next step hints
        omit the ``cd`` command when the project is generated right here.
    templates_dir:
        Directory containing one sub-directory of files per template id.
        Defaults to the templates shipped with the package.
    user_agent:
        Raw ``npm_config_user_agent`` value set by the package manager that
        launched the scaffolder, if any.
    default_project_name:
        Value offered when the user just presses enter at the first prompt.
    """

    cwd: Path
    templates_dir: Path = TEMPLATES_DIR
    user_agent: str | None = None
    default_project_name: str = DEFAULT_PROJECT_NAME

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        cwd: str | Path | None = None,
        templates_dir: str | Path | None = None,
    ) -> "ScaffolderConfig":
        """Build a :class:`ScaffolderConfig` from environment variables.

        Explicit ``cwd`` and ``templates_dir`` arguments take precedence over
        the process working directory and the packaged templates.
        """

        source = os.environ if environ is None else environ
        base = Path(cwd) if cwd is not None else Path.cwd()
        return cls(
            cwd=base.expanduser().resolve(),
            templates_dir=Path(templates_dir).expanduser().resolve()
            if templates_dir is not None
            else TEMPLATES_DIR,
            user_agent=source.get(USER_AGENT_VARIABLE),
        )

    @property
    def package_manager(self) -> PackageManager:
        return detect_package_manager(self.user_agent)
