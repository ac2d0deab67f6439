"""Turn a user-supplied specifier into an installed, canonical runtime."""

from __future__ import annotations

import os

from rich.console import Console
from rich.prompt import Prompt

from nvm_global.config import Settings
from nvm_global.errors import ManagerCommandError, ResolutionError
from nvm_global.manager.nvm import NvmManager
from nvm_global.types import ResolvedRuntime

console = Console()

PROMPT = "Enter Node version to use (e.g. 24 or 24.3.0)"


def normalize_spec(spec: str) -> str:
    """Drop one leading ``v`` (``v24`` -> ``24``); nothing else changes."""
    return spec[1:] if spec.startswith("v") else spec


def read_spec(arg: str | None) -> str:
    """Use *arg* when given, otherwise block on an interactive prompt.

    The prompt answer is trimmed like `read` would; closed stdin counts as no answer.
    """
    if arg:
        raw = arg
    else:
        try:
            raw = Prompt.ask(PROMPT, default="", show_default=False, console=console).strip()
        except EOFError:
            raw = ""
    spec = normalize_spec(raw)
    if not spec:
        raise ResolutionError("No version provided.")
    return spec


def resolve_version(manager: NvmManager, settings: Settings, spec: str) -> ResolvedRuntime:
    console.print(f"🔎 Ensuring Node {spec} is installed in shared nvm ...")
    try:
        manager.install(spec)
    except ManagerCommandError as e:
        raise ResolutionError(f"Could not install version '{spec}': {e.message}") from e

    version = manager.version(spec)
    if version is None:
        raise ResolutionError(f"Could not resolve version '{spec}'.")

    runtime = ResolvedRuntime(spec=spec, version=version, target_dir=settings.target_dir(version))
    node = runtime.node_binary
    if not (node.is_file() and os.access(node, os.X_OK)):
        raise ResolutionError(f"Node binary not found at {node}")
    console.print(f"✅ Using {runtime.version} at {runtime.target_dir}")
    return runtime
