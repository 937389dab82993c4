from __future__ import annotations

from pathlib import Path

import pytest

from numer.errors import TemplateRegistryError
from numer.io.adapters import LocalFileSystem
from numer.registry import DEFAULT_TEMPLATES, MANIFEST_NAME, TEMPLATES_DIR, TemplateRegistry
from numer.schema import Template


def test_default_registry_order_and_availability():
    registry = TemplateRegistry()
    assert [template.id for template in registry] == ["react-ts-swc", "lib-ts"]
    assert registry.get("react-ts-swc").available
    assert not registry.get("lib-ts").available
    assert len(registry) == len(DEFAULT_TEMPLATES)


def test_duplicate_ids_are_rejected():
    with pytest.raises(TemplateRegistryError):
        TemplateRegistry([Template(id="a", display_name="A"), Template(id="a", display_name="B")])


def test_empty_registry_is_rejected():
    with pytest.raises(TemplateRegistryError):
        TemplateRegistry([])


def test_unknown_template():
    with pytest.raises(TemplateRegistryError):
        TemplateRegistry().get("vue")


def test_every_available_template_ships_a_manifest():
    fs = LocalFileSystem()
    for template in TemplateRegistry():
        if template.available:
            directory = TemplateRegistry().locate(fs, TEMPLATES_DIR, template.id)
            assert (directory / MANIFEST_NAME).is_file()


def test_locate_requires_manifest(tmp_path: Path):
    (tmp_path / "bare").mkdir()
    registry = TemplateRegistry([Template(id="bare", display_name="Bare")])
    with pytest.raises(TemplateRegistryError, match=MANIFEST_NAME):
        registry.locate(LocalFileSystem(), tmp_path, "bare")
