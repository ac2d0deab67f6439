"""Pipeline: elevate → check → load nvm → resolve → pin → publish → verify.

Strictly linear; the first failing step raises and nothing after it runs.
Completed steps are not rolled back; re-running is the recovery path.
"""

from __future__ import annotations

from dataclasses import dataclass

from nvm_global.config import Settings
from nvm_global.manager.nvm import NvmManager
from nvm_global.manager.pinner import pin_default
from nvm_global.manager.resolver import read_spec, resolve_version
from nvm_global.publish.symlinks import publish_links
from nvm_global.publish.verify import verify
from nvm_global.system.preconditions import check_prereqs
from nvm_global.system.privilege import require_root
from nvm_global.types import RunResult


@dataclass
class RunContext:
    settings: Settings
    spec: str | None = None


def make_manager(settings: Settings) -> NvmManager:
    return NvmManager(
        profile_snippet=settings.profile_snippet,
        shell=settings.shell,
        not_found=settings.not_found,
    )


def configure_global_node(ctx: RunContext) -> RunResult:
    settings = ctx.settings
    require_root(settings.elevation_helper)

    check_prereqs(settings)
    manager = make_manager(settings)
    manager.load()

    spec = read_spec(ctx.spec)
    runtime = resolve_version(manager, settings, spec)
    shims = pin_default(manager, runtime, corepack=settings.enable_corepack)
    links = publish_links(settings, runtime)

    return RunResult(runtime=runtime, links=links, shims_enabled=shims, report=verify(settings))
