"""Registry of the templates numer can generate."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from .errors import TemplateRegistryError
from .io import FileSystem
from .schema import Template

__all__ = [
    "DEFAULT_TEMPLATES",
    "MANIFEST_NAME",
    "TEMPLATES_DIR",
    "TemplateRegistry",
]


MANIFEST_NAME = "package.json"
TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

DEFAULT_TEMPLATES: tuple[Template, ...] = (
    Template(
        id="react-ts-swc",
        display_name="React",
        description="(TypeScript + SWC)",
    ),
    Template(
        id="lib-ts",
        display_name="Lib",
        description="(TypeScript)",
        available=False,
        hint="coming soon",
    ),
)


class TemplateRegistry:
    """Ordered, read-only collection of :class:`Template` entries."""

    def __init__(self, templates: Iterable[Template] = DEFAULT_TEMPLATES) -> None:
        entries = tuple(templates)
        seen: set[str] = set()
        for template in entries:
            if template.id in seen:
                raise TemplateRegistryError(f"duplicate template id '{template.id}'")
            seen.add(template.id)
        if not entries:
            raise TemplateRegistryError("the template registry is empty")
        self._templates = entries

    def __iter__(self) -> Iterator[Template]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def get(self, template_id: str) -> Template:
        for template in self._templates:
            if template.id == template_id:
                return template
        raise TemplateRegistryError(f"unknown template '{template_id}'")

    def locate(self, fs: FileSystem, templates_dir: Path, template_id: str) -> Path:
        """Return the directory holding the files of ``template_id``.

        The directory must exist and contain a manifest.
        """

        template = self.get(template_id)
        directory = Path(templates_dir) / template.id
        if not fs.is_dir(directory):
            raise TemplateRegistryError(f"template directory '{directory}' does not exist")
        if MANIFEST_NAME not in fs.list_dir(directory):
            raise TemplateRegistryError(f"template '{template.id}' has no {MANIFEST_NAME}")
        return directory
