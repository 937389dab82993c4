"""Interactive scaffolder for new projects.

The package turns a project name typed by the user into a safe directory and
an npm style package name, asks which template to use, copies the template
files and rewrites the ``package.json`` manifest. The pieces are usable on
their own and through the ``numer`` command line interface.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ScaffolderConfig
from .merge import clear_directory, copy_tree, is_empty
from .naming import is_valid_package_name, sanitize_directory_name, suggest_package_name
from .package_manager import detect_package_manager
from .prompts import FlowResult, PromptFlow
from .scaffold import ProjectScaffolder
from .schema import FlowOutcome, PackageManager, ScaffoldRequest, Template

__all__ = [
    "FlowOutcome",
    "FlowResult",
    "PackageManager",
    "ProjectScaffolder",
    "PromptFlow",
    "ScaffoldRequest",
    "ScaffolderConfig",
    "Template",
    "__version__",
    "clear_directory",
    "copy_tree",
    "detect_package_manager",
    "is_empty",
    "is_valid_package_name",
    "sanitize_directory_name",
    "suggest_package_name",
]
