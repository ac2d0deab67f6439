"""Error taxonomy: every fatal condition is an NvmGlobalError subclass.

Steps raise; the CLI prints one marked line (plus an optional hint) and exits 1.
"""

from __future__ import annotations


class NvmGlobalError(Exception):
    """Base exception for this project."""

    def __init__(self, message: str, *, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint


class ConfigError(NvmGlobalError):
    """Raised when a config file or environment override is invalid."""

    def __init__(self, message: str, *, path: str | None = None, hint: str | None = None):
        super().__init__(f"{path}: {message}" if path else message, hint=hint)
        self.path = path


class PrivilegeError(NvmGlobalError):
    """Not running as root and no elevation helper to fix that."""


class PreconditionError(NvmGlobalError):
    """Shared nvm installation or its profile snippet is missing."""


class ManagerLoadError(NvmGlobalError):
    """The nvm function is unavailable after sourcing the profile snippet."""


class ResolutionError(NvmGlobalError):
    """A version specifier could not be turned into an installed runtime."""


class ManagerCommandError(NvmGlobalError):
    """An nvm invocation exited nonzero."""

    def __init__(self, args: list[str], returncode: int, stderr: str = ""):
        detail = stderr.strip().splitlines()[-1] if stderr.strip() else f"exit code {returncode}"
        super().__init__(f"`{' '.join(args)}` failed: {detail}")
        self.command = args
        self.returncode = returncode
        self.stderr = stderr


class PublishError(NvmGlobalError):
    """A stable or global link could not be replaced."""
