"""Post-publish confirmation: run the freshly linked binaries."""

from __future__ import annotations

import subprocess

from nvm_global.config import Settings
from nvm_global.types import VerifyReport


def _version_of(binary: str) -> str:
    proc = subprocess.run([binary, "-v"], capture_output=True, text=True, check=True)
    return proc.stdout.strip()


def verify(settings: Settings) -> VerifyReport:
    """Errors from the binaries propagate; there is nothing to recover here."""
    node = settings.bin_dir / "node"
    npm = settings.bin_dir / "npm"
    return VerifyReport(
        node_version=_version_of(str(node)),
        npm_version=_version_of(str(npm)) if "npm" in settings.binaries else None,
        node_path=node.resolve(),
    )
