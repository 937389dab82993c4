"""Project generation from a completed :class:`ScaffoldRequest`."""

from __future__ import annotations

import json
import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any, Callable, Sequence

from rich.markup import escape

from .config import ScaffolderConfig
from .errors import FilesystemError, InstallFailedError, InstallLaunchError
from .io import FileSystem
from .io.adapters import LocalFileSystem
from .merge import clear_directory, copy_tree
from .package_manager import install_command
from .registry import MANIFEST_NAME, TemplateRegistry
from .schema import NextStep, ScaffoldRequest
from .terminal import Terminal

__all__ = ["ProjectScaffolder", "render_manifest", "render_summary"]

LOGGER = logging.getLogger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]


def render_manifest(text: str, package_name: str) -> str:
    """Return the manifest ``text`` with its ``name`` replaced by ``package_name``.

    The document is written back with two space indentation and a trailing
    newline. Key order is preserved.
    """

    manifest = json.loads(text)
    if not isinstance(manifest, dict):
        raise ValueError(f"{MANIFEST_NAME} must contain a JSON object")
    manifest["name"] = package_name
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


def render_summary(steps: Sequence[NextStep]) -> str:
    lines = ["Project created [bright_green]successfully[/bright_green]!", "[blue]Next steps:[/blue]"]
    for step in steps:
        lines.append(f"  [blue]{escape(step.command)}[/blue]")
        lines.append(f"\t[dim]{escape(step.description)}[/dim]")
    return "\n".join(lines)


class ProjectScaffolder:
    """Create a project directory from a template."""

    def __init__(
        self,
        config: ScaffolderConfig,
        *,
        fs: FileSystem | None = None,
        registry: TemplateRegistry | None = None,
        terminal: Terminal | None = None,
        runner: Runner = subprocess.run,
        which: Callable[[str], str | None] | None = None,
    ) -> None:
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.registry = registry or TemplateRegistry()
        self.terminal = terminal
        self.runner = runner
        self.which = which or shutil.which

    def root_for(self, request: ScaffoldRequest) -> Path:
        return self.config.cwd / request.target_dir

    def create(self, request: ScaffoldRequest) -> Path:
        """Generate the project described by ``request`` and return its directory.

        Filesystem failures propagate as :class:`FilesystemError`; whatever
        was written before the failure stays on disk.
        """

        root = self.root_for(request)
        template_dir = self.registry.locate(self.fs, self.config.templates_dir, request.template_id)

        self.fs.make_dirs(root)
        if request.overwrite:
            LOGGER.info("clearing %s", root)
            clear_directory(self.fs, root)

        self._step(f"Scaffolding [cyan]{escape(request.target_dir)}[/cyan] in [cyan]{escape(str(root))}[/cyan]")

        for name in self.fs.list_dir(template_dir):
            if name == MANIFEST_NAME:
                continue
            copy_tree(self.fs, template_dir / name, root / name)

        source = template_dir / MANIFEST_NAME
        try:
            rendered = render_manifest(self.fs.read_text(source), request.package_name)
        except ValueError as exc:
            raise FilesystemError("parse", source, str(exc)) from exc
        self.fs.write_text(root / MANIFEST_NAME, rendered)
        LOGGER.info("wrote %s with name %s", root / MANIFEST_NAME, request.package_name)

        if request.install:
            self.install(request, root)

        return root

    def install(self, request: ScaffoldRequest, root: Path) -> None:
        """Run the package manager's install command inside ``root``."""

        command = install_command(request.package_manager)
        self._step(f"Installing dependencies with [cyan]{request.package_manager.value}[/cyan]...")
        LOGGER.info("running %s in %s", " ".join(command), root)
        executable = self.which(command[0])
        if executable is None:
            LOGGER.error("could not find %s on PATH", command[0])
            raise InstallLaunchError(command, f"{command[0]} was not found on PATH")
        try:
            completed = self.runner([executable, *command[1:]], cwd=root, check=False)
        except OSError as exc:
            LOGGER.error("could not start %s: %s", " ".join(command), exc)
            raise InstallLaunchError(command, str(exc)) from exc

        if completed.returncode != 0:
            LOGGER.error("%s exited with status %s", " ".join(command), completed.returncode)
            raise InstallFailedError(command, completed.returncode)

    def next_steps(self, request: ScaffoldRequest, root: Path | None = None) -> list[NextStep]:
        root = root if root is not None else self.root_for(request)
        manager = request.package_manager.value
        candidates = [
            (
                NextStep(command=f"cd {request.target_dir}", description="Go to project directory"),
                Path(root).resolve() != self.config.cwd.resolve(),
            ),
            (
                NextStep(command=f"{manager} install", description="Install dependencies"),
                not request.install,
            ),
            (NextStep(command=f"{manager} dev", description="Run development server"), True),
            (NextStep(command=f"{manager} test", description="Run tests"), True),
        ]
        return [step for step, show in candidates if show]

    def _step(self, message: str) -> None:
        if self.terminal is not None:
            self.terminal.step(message)
