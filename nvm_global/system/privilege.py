"""Re-exec under sudo when not already root."""

from __future__ import annotations

import os
import shutil
import sys

from rich.console import Console

from nvm_global.errors import PrivilegeError
from nvm_global.logging import get_logger

log = get_logger(__name__)
err_console = Console(stderr=True)


def is_root() -> bool:
    return os.geteuid() == 0


def reexec_argv(helper: str) -> list[str]:
    """Command line that repeats this invocation under *helper*, env preserved."""
    # orig_argv keeps `-m nvm_global` intact; argv[0] alone would lose it.
    original = list(getattr(sys, "orig_argv", None) or [sys.executable, *sys.argv])
    return [helper, "-E", "--", sys.executable, *original[1:]]


def require_root(helper: str = "sudo") -> None:
    """Return if root; otherwise replace this process with an elevated copy.

    Raises PrivilegeError when *helper* is not on PATH.
    """
    if is_root():
        return
    if shutil.which(helper) is None:
        raise PrivilegeError(
            f"This command requires root privileges, and '{helper}' was not found.",
            hint="Please run it as root.",
        )
    argv = reexec_argv(helper)
    log.debug("elevating", extra={"ctx": {"argv": argv}})
    err_console.print(f"🔐 Elevating privileges with {helper}...")
    os.execvp(helper, argv)
