"""Fail fast when the shared nvm installation is not in place."""

from __future__ import annotations

from nvm_global.config import Settings
from nvm_global.errors import PreconditionError


def snippet_remedy(settings: Settings) -> str:
    body = (
        f'export NVM_DIR=\\"{settings.nvm_dir}\\"\\n'
        '[ -s \\"$NVM_DIR/nvm.sh\\" ] && . \\"$NVM_DIR/nvm.sh\\"'
    )
    return f'echo -e "{body}" | sudo tee {settings.profile_snippet}'


def check_prereqs(settings: Settings) -> None:
    if not settings.nvm_dir.is_dir():
        raise PreconditionError(
            f"{settings.nvm_dir} not found.",
            hint=f"Install shared nvm to {settings.nvm_dir} first.",
        )
    if not settings.profile_snippet.is_file():
        raise PreconditionError(
            f"{settings.profile_snippet} not found.",
            hint=f"Create it so all shells load nvm:\n    {snippet_remedy(settings)}",
        )
