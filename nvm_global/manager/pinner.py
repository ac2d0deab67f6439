"""Pin the resolved version as nvm's default."""

from __future__ import annotations

from rich.console import Console

from nvm_global.errors import ManagerCommandError
from nvm_global.logging import get_logger
from nvm_global.manager.nvm import NvmManager
from nvm_global.types import ResolvedRuntime

console = Console()
log = get_logger(__name__)


def enable_shims(manager: NvmManager) -> bool:
    """Best-effort `corepack enable` (yarn/pnpm shims); never raises.

    Absent and failing corepack are deliberately indistinguishable to the user.
    """
    try:
        manager.exec_default("corepack", "enable")
    except (ManagerCommandError, OSError):
        log.debug("corepack enable skipped", exc_info=True)
        return False
    return True


def pin_default(manager: NvmManager, runtime: ResolvedRuntime, *, corepack: bool = True) -> bool:
    """Alias `default` to *runtime* and activate it. Returns whether shims were enabled."""
    console.print(f"🔧 Setting default Node to {runtime.version} ...")
    manager.alias_default(runtime.version)
    manager.use_default()
    return enable_shims(manager) if corepack else False
