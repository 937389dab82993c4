"""Detect which package manager launched the scaffolder."""

from __future__ import annotations

import os
from typing import Mapping

from .schema import PackageManager

__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "USER_AGENT_VARIABLE",
    "detect_package_manager",
    "install_command",
    "package_manager_from_environ",
]


DEFAULT_PACKAGE_MANAGER = PackageManager.NPM
USER_AGENT_VARIABLE = "npm_config_user_agent"


def detect_package_manager(user_agent: str | None) -> PackageManager:
    """Return the package manager named by a ``npm_config_user_agent`` string.

    The variable looks like ``"pnpm/9.1.0 npm/? node/v20.11.0 linux x64"``;
    only the name of the first product token matters. Missing, blank or
    unknown values fall back to :data:`DEFAULT_PACKAGE_MANAGER`.
    """

    if not user_agent or not user_agent.strip():
        return DEFAULT_PACKAGE_MANAGER

    product = user_agent.split()[0]
    name = product.split("/", 1)[0]
    try:
        return PackageManager(name)
    except ValueError:
        return DEFAULT_PACKAGE_MANAGER


def package_manager_from_environ(environ: Mapping[str, str] | None = None) -> PackageManager:
    """Detect the package manager from ``environ`` (defaults to :data:`os.environ`)."""

    source = os.environ if environ is None else environ
    return detect_package_manager(source.get(USER_AGENT_VARIABLE))


def install_command(manager: PackageManager) -> list[str]:
    return [manager.value, "install"]
