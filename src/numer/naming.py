"""String normalisation utilities for project directories and package names."""

from __future__ import annotations

import re

__all__ = [
    "FORBIDDEN_DIRECTORY_CHARACTERS",
    "is_valid_package_name",
    "sanitize_directory_name",
    "suggest_package_name",
]


FORBIDDEN_DIRECTORY_CHARACTERS = '<>:"\\|?*'

_FORBIDDEN = re.compile(r'[<>:"\\|?*]')
_TRAILING_SLASHES = re.compile(r"/+$")
_WHITESPACE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_INVALID_PACKAGE_CHARACTERS = re.compile(r"[^a-z0-9\-~]+")
_PACKAGE_NAME = re.compile(
    r"^(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*$"
)


def _sanitize_once(value: str) -> str:
    text = value.strip()
    text = _FORBIDDEN.sub("", text)
    return _TRAILING_SLASHES.sub("", text)


def sanitize_directory_name(value: str) -> str:
    """Return ``value`` cleaned up so it can be used as a directory name.

    Surrounding whitespace, characters that are forbidden on at least one
    supported platform (``< > : " \\ | ? *``) and trailing ``/`` separators
    are removed. Internal spaces and letter case are kept as typed.

    Removing a character can expose whitespace or a separator that the
    previous step already handled (``"a *"`` becomes ``"a "``), so the rules
    are applied until the text stops changing. An empty result means the
    input was unusable and must be rejected by the caller.
    """

    text = str(value)
    while True:
        cleaned = _sanitize_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def suggest_package_name(value: str) -> str:
    """Derive an npm style package name from ``value``.

    ``"My App!!"`` becomes ``"my-app"``. The result only contains characters
    from ``[a-z0-9-~]`` and never starts or ends with a hyphen, so feeding
    it back in returns it unchanged.
    """

    text = str(value).strip().lower()
    text = _WHITESPACE.sub("-", text)
    text = _LEADING_DOT_OR_UNDERSCORE.sub("", text)
    text = _INVALID_PACKAGE_CHARACTERS.sub("-", text)
    return text.strip("-")


def is_valid_package_name(name: object) -> bool:
    """Return ``True`` when ``name`` is an acceptable (optionally scoped) package name."""

    if not isinstance(name, str):
        return False
    return _PACKAGE_NAME.fullmatch(name) is not None
