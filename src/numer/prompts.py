"""Interactive question flow collecting a :class:`ScaffoldRequest`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable

from rich.markup import escape

from .config import ScaffolderConfig
from .errors import TemplateUnavailable, UserCancellation, ValidationError
from .io import FileSystem
from .io.adapters import LocalFileSystem
from .merge import is_empty
from .naming import is_valid_package_name, sanitize_directory_name, suggest_package_name
from .registry import TemplateRegistry
from .schema import FlowOutcome, PackageManager, ScaffoldRequest, Template
from .terminal import Choice, Terminal

__all__ = [
    "FlowResult",
    "FlowState",
    "PromptFlow",
    "RequestDraft",
    "validate_package_name",
    "validate_project_name",
]

LOGGER = logging.getLogger(__name__)


class FlowState(str, Enum):
    """States of the prompt flow, in the order they are visited."""

    ASK_PROJECT_NAME = "ask_project_name"
    ASK_OVERWRITE = "ask_overwrite"
    ASK_PACKAGE_NAME = "ask_package_name"
    ASK_TEMPLATE = "ask_template"
    ASK_INSTALL_MODE = "ask_install_mode"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    UNAVAILABLE = "unavailable"


_OUTCOMES = {
    FlowState.COMPLETED: FlowOutcome.COMPLETED,
    FlowState.CANCELLED: FlowOutcome.CANCELLED,
    FlowState.UNAVAILABLE: FlowOutcome.UNAVAILABLE,
}


def validate_project_name(value: str) -> str:
    """Return the sanitized directory for ``value`` or raise :class:`ValidationError`."""

    target = sanitize_directory_name(value)
    if not target:
        raise ValidationError("Provide a valid project name")
    return target


def validate_package_name(value: str) -> str:
    if not is_valid_package_name(value):
        raise ValidationError("Invalid package name")
    return value


@dataclass(slots=True)
class RequestDraft:
    """A :class:`ScaffoldRequest` under construction, one answer at a time."""

    project_name: str | None = None
    target_dir: str | None = None
    package_name: str | None = None
    template_id: str | None = None
    install: bool | None = None
    overwrite: bool = False

    def build(self, package_manager: PackageManager) -> ScaffoldRequest:
        missing = [
            name
            for name in ("project_name", "target_dir", "package_name", "template_id", "install")
            if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(f"incomplete request, missing: {', '.join(missing)}")

        return ScaffoldRequest(
            project_name=self.project_name,
            target_dir=self.target_dir,
            package_name=self.package_name,
            template_id=self.template_id,
            install=self.install,
            package_manager=package_manager,
            overwrite=self.overwrite,
        )


@dataclass(frozen=True, slots=True)
class FlowResult:
    """How the flow ended and, when it completed, the collected request."""

    outcome: FlowOutcome
    request: ScaffoldRequest | None = None
    template: Template | None = None


class PromptFlow:
    """Ask the scaffolding questions one after another.

    The flow never writes to disk. Confirming an overwrite only records the
    decision on the request; clearing happens when the project is generated.
    """

    def __init__(
        self,
        terminal: Terminal,
        config: ScaffolderConfig,
        *,
        fs: FileSystem | None = None,
        registry: TemplateRegistry | None = None,
    ) -> None:
        self.terminal = terminal
        self.config = config
        self.fs = fs or LocalFileSystem()
        self.registry = registry or TemplateRegistry()
        self._draft = RequestDraft()
        self._candidate = ""
        self._template: Template | None = None
        self._handlers: dict[FlowState, Callable[[], FlowState]] = {
            FlowState.ASK_PROJECT_NAME: self._ask_project_name,
            FlowState.ASK_OVERWRITE: self._ask_overwrite,
            FlowState.ASK_PACKAGE_NAME: self._ask_package_name,
            FlowState.ASK_TEMPLATE: self._ask_template,
            FlowState.ASK_INSTALL_MODE: self._ask_install_mode,
        }

    def run(self) -> FlowResult:
        state = FlowState.ASK_PROJECT_NAME
        while state not in _OUTCOMES:
            handler = self._handlers[state]
            try:
                next_state = handler()
            except UserCancellation:
                next_state = FlowState.CANCELLED
            except TemplateUnavailable as exc:
                LOGGER.info("%s", exc)
                self.terminal.message("[yellow]🚧 Template is not available yet 🚧[/yellow]")
                next_state = FlowState.UNAVAILABLE
            LOGGER.info("prompt flow %s -> %s", state.value, next_state.value)
            state = next_state

        outcome = _OUTCOMES[state]
        if outcome is not FlowOutcome.COMPLETED:
            return FlowResult(outcome)

        request = self._draft.build(self.config.package_manager)
        return FlowResult(outcome, request=request, template=self._template)

    def _root(self, target_dir: str) -> Path:
        return self.config.cwd / target_dir

    def _ask_project_name(self) -> FlowState:
        while True:
            raw = self.terminal.text(
                "Provide a name for your project",
                default=self.config.default_project_name,
            )
            try:
                target_dir = validate_project_name(raw)
            except ValidationError as exc:
                self.terminal.error(str(exc))
                continue

            root = self._root(target_dir)
            if self.fs.exists(root) and not self.fs.is_dir(root):
                self.terminal.error(f"{target_dir} exists and is not a directory")
                continue
            break

        self._draft.project_name = raw
        self._draft.target_dir = target_dir
        self._candidate = Path(root).resolve().name

        if self.fs.exists(root) and not is_empty(self.fs, root):
            return FlowState.ASK_OVERWRITE
        return FlowState.ASK_PACKAGE_NAME

    def _ask_overwrite(self) -> FlowState:
        confirmed = self.terminal.select(
            f"Target directory [cyan]{escape(self._draft.target_dir)}[/cyan] is not empty. Override?",
            [Choice("Yes", True), Choice("No", False)],
        )
        if not confirmed:
            return FlowState.CANCELLED
        self._draft.overwrite = True
        return FlowState.ASK_PACKAGE_NAME

    def _ask_package_name(self) -> FlowState:
        suggestion = suggest_package_name(self._candidate)
        if is_valid_package_name(self._candidate) and is_valid_package_name(suggestion):
            self._draft.package_name = suggestion
            return FlowState.ASK_TEMPLATE

        while True:
            answer = self.terminal.text("Provide a name for your package", default=suggestion)
            try:
                self._draft.package_name = validate_package_name(answer or suggestion)
            except ValidationError as exc:
                self.terminal.error(str(exc))
                continue
            return FlowState.ASK_TEMPLATE

    def _ask_template(self) -> FlowState:
        choices = [
            Choice(f"{template.display_name} [dim]{template.description}[/dim]", template.id, template.hint)
            for template in self.registry
        ]
        template = self.registry.get(self.terminal.select("Choose a template", choices))
        if not template.available:
            raise TemplateUnavailable(template.id)
        self._draft.template_id = template.id
        self._template = template
        return FlowState.ASK_INSTALL_MODE

    def _ask_install_mode(self) -> FlowState:
        self._draft.install = self.terminal.select(
            "Generate project and install dependencies?",
            [Choice("Generate only", False), Choice("Generate and install", True)],
        )
        return FlowState.COMPLETED
