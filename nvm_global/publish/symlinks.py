"""Republish the stable `current` link and the global binary links.

Each link is swapped with a temp-link + os.replace, so readers see either the
old or the new target, never a missing path. No cross-process locking is
done; concurrent runs are unsupported.
"""

from __future__ import annotations

import os
import uuid
from pathlib import Path

from rich.console import Console

from nvm_global.config import Settings
from nvm_global.errors import PublishError
from nvm_global.logging import get_logger
from nvm_global.types import LinkUpdate, ResolvedRuntime

console = Console()
log = get_logger(__name__)


def _current_target(link: Path) -> Path | None:
    try:
        return Path(os.readlink(link))
    except OSError:
        return None


def replace_symlink(target: Path, link: Path) -> LinkUpdate:
    """Point *link* at *target* in place (like `ln -sfn`, but atomic)."""
    link.parent.mkdir(parents=True, exist_ok=True)
    previous = _current_target(link)
    if link.is_dir() and not link.is_symlink():
        raise PublishError(
            f"Refusing to replace real directory: {link}",
            hint="Move it out of the way, then re-run.",
        )

    tmp = link.with_name(f".{link.name}.{uuid.uuid4().hex[:8]}.tmp")
    try:
        os.symlink(target, tmp)
        os.replace(tmp, link)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise PublishError(f"Could not point {link} at {target}: {e.strerror or e}") from e
    log.debug("link replaced", extra={"ctx": {"link": str(link), "target": str(target)}})
    return LinkUpdate(link=link, target=target, previous=previous)


def publish_links(settings: Settings, runtime: ResolvedRuntime) -> list[LinkUpdate]:
    # The global links resolve through the stable link, so it must move first.
    console.print(
        f"🔗 Updating stable symlink {settings.stable_link} -> {runtime.target_dir} ..."
    )
    updates = [replace_symlink(runtime.target_dir, settings.stable_link)]

    console.print(f"🔗 Refreshing {settings.bin_dir} symlinks to stable 'current' ...")
    for link, target in settings.global_links():
        updates.append(replace_symlink(target, link))
    return updates
