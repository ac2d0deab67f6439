"""Thin client for a shared nvm installation.

nvm is a shell function, not an executable, so every call runs a fresh bash
that sources the profile snippet first and then dispatches the arguments:

    bash -c '. "$1" >/dev/null; shift; "$@"' nvm-global <snippet> nvm install 24

Arguments travel as argv, never through shell quoting.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from nvm_global.errors import ManagerCommandError, ManagerLoadError
from nvm_global.logging import get_logger

log = get_logger(__name__)

_LOADER = '. "$1" >/dev/null 2>&1; shift; "$@"'


@dataclass
class NvmManager:
    profile_snippet: Path
    shell: str = "/bin/bash"
    not_found: str = "N/A"

    def _argv(self, *args: str) -> list[str]:
        return [self.shell, "-c", _LOADER, "nvm-global", str(self.profile_snippet), *args]

    def run(
        self, *args: str, check: bool = True, show_stderr: bool = False
    ) -> subprocess.CompletedProcess[str]:
        """Run one nvm-context command; *show_stderr* leaves stderr on the terminal."""
        proc = subprocess.run(
            self._argv(*args),
            stdout=subprocess.PIPE,
            stderr=None if show_stderr else subprocess.PIPE,
            text=True,
        )
        log.debug(
            "manager call",
            extra={"ctx": {"args": list(args), "returncode": proc.returncode}},
        )
        if check and proc.returncode != 0:
            raise ManagerCommandError(list(args), proc.returncode, proc.stderr or "")
        return proc

    # -- loader -------------------------------------------------------------

    def is_available(self) -> bool:
        return self.run("command", "-v", "nvm", check=False).returncode == 0

    def load(self) -> None:
        if not self.is_available():
            raise ManagerLoadError(
                f"nvm not available after sourcing {self.profile_snippet}",
                hint="The shared installation looks broken or incomplete.",
            )

    # -- collaborator contract ----------------------------------------------

    def install(self, spec: str) -> None:
        """Idempotent: nvm skips versions that are already installed.

        Download progress (stderr) stays visible; a fresh install can take minutes.
        """
        self.run("nvm", "install", spec, show_stderr=True)

    def version(self, spec: str) -> str | None:
        """Canonical `vX.Y.Z` for *spec*, or None for the not-found sentinel."""
        proc = self.run("nvm", "version", spec, check=False)
        out = proc.stdout.strip().splitlines()
        resolved = out[-1].strip() if out else self.not_found
        return None if resolved == self.not_found else resolved

    def alias_default(self, version: str) -> None:
        self.run("nvm", "alias", "default", version)

    def use_default(self) -> None:
        self.run("nvm", "use", "--silent", "default")

    def exec_default(self, *command: str) -> None:
        self.run("nvm", "exec", "--silent", "default", *command)
