"""Exception types raised while collecting answers and scaffolding a project."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "FilesystemError",
    "InstallFailedError",
    "InstallLaunchError",
    "PackageManagerError",
    "ScaffoldError",
    "TemplateRegistryError",
    "TemplateUnavailable",
    "UserCancellation",
    "ValidationError",
]


class ScaffoldError(RuntimeError):
    """Base class for every error raised by numer."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ValidationError(ScaffoldError):
    """Raised when a project or package name is rejected."""


class UserCancellation(ScaffoldError):
    """Raised when the user aborts a prompt."""

    exit_code = 0

    def __init__(self, message: str = "Cancelled") -> None:
        super().__init__(message)


class TemplateUnavailable(ScaffoldError):
    """Raised when the chosen template cannot be generated yet."""

    exit_code = 0

    def __init__(self, template_id: str) -> None:
        super().__init__(f"template '{template_id}' is not available yet")
        self.template_id = template_id


class TemplateRegistryError(ScaffoldError):
    """Raised when the template registry or a template directory is malformed."""


class FilesystemError(ScaffoldError):
    """Raised when a filesystem operation fails."""

    def __init__(self, operation: str, path: object, reason: str | None = None) -> None:
        message = f"cannot {operation} '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.operation = operation
        self.path = path
        self.reason = reason


class PackageManagerError(ScaffoldError):
    """Raised when the dependency installation step fails."""

    def __init__(self, message: str, command: Sequence[str]) -> None:
        super().__init__(message)
        self.command = tuple(command)


class InstallLaunchError(PackageManagerError):
    """The install command could not be started at all."""

    def __init__(self, command: Sequence[str], reason: str) -> None:
        super().__init__(f"{' '.join(command)} error! {reason}", command)
        self.reason = reason


class InstallFailedError(PackageManagerError):
    """The install command ran but exited with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        super().__init__(
            f"{' '.join(command)} exited with status {returncode}", command
        )
        self.returncode = returncode
        self.exit_code = returncode if returncode > 0 else 1
