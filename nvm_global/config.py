"""Settings for the shared nvm installation and the links we publish.

Precedence (lowest first): defaults, JSON config file, NVM_GLOBAL_* env vars,
CLI flags applied by the caller via ``model_copy(update=...)``.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from nvm_global.errors import ConfigError
from nvm_global.validator import validate_config

DEFAULT_CONFIG_FILE = Path("/etc/nvm-global.json")
CONFIG_ENV = "NVM_GLOBAL_CONFIG"
ENV_PREFIX = "NVM_GLOBAL_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Settings(BaseModel):
    nvm_dir: Path = Path("/opt/nvm")
    profile_snippet: Path = Path("/etc/profile.d/nvm.sh")
    stable_link: Path = Path("/opt/nvm/current")
    bin_dir: Path = Path("/usr/bin")
    binaries: list[str] = Field(default_factory=lambda: ["node", "npm", "npx"])
    shell: str = "/bin/bash"
    not_found: str = "N/A"
    elevation_helper: str = "sudo"
    enable_corepack: bool = True

    @field_validator("binaries")
    @classmethod
    def _binaries_are_names(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one binary is required")
        for name in v:
            if not name or "/" in name:
                raise ValueError(f"not a bare binary name: {name!r}")
        return v

    def versions_dir(self) -> Path:
        return self.nvm_dir / "versions" / "node"

    def target_dir(self, version: str) -> Path:
        return self.versions_dir() / version

    def global_links(self) -> list[tuple[Path, Path]]:
        """(link, target) pairs for the global binaries, all via the stable link."""
        return [(self.bin_dir / b, self.stable_link / "bin" / b) for b in self.binaries]


def _read_config_file(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigError("config file not found", path=str(path)) from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON ({e.msg} at line {e.lineno})", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise ConfigError("not valid UTF-8", path=str(path)) from e
    except OSError as e:
        raise ConfigError(f"cannot read config file ({e.strerror or e})", path=str(path)) from e
    if not isinstance(data, dict):
        raise ConfigError("top-level value must be an object", path=str(path))
    validate_config(data, path=str(path))
    return data


def _env_overrides(env: Mapping[str, str]) -> dict:
    out: dict = {}
    for name in Settings.model_fields:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw is None or raw == "":
            continue
        if name == "binaries":
            out[name] = [b.strip() for b in raw.split(",") if b.strip()]
        elif name == "enable_corepack":
            low = raw.strip().lower()
            if low in _TRUE:
                out[name] = True
            elif low in _FALSE:
                out[name] = False
            else:
                raise ConfigError(f"{ENV_PREFIX}{name.upper()}: expected a boolean, got {raw!r}")
        else:
            out[name] = raw
    return out


def _pick_config_file(explicit: Path | None, env: Mapping[str, str]) -> Path | None:
    if explicit is not None:
        return explicit
    if env.get(CONFIG_ENV):
        return Path(env[CONFIG_ENV])
    if DEFAULT_CONFIG_FILE.is_file():
        return DEFAULT_CONFIG_FILE
    return None


def load_settings(
    config_file: Path | None = None, env: Mapping[str, str] | None = None
) -> Settings:
    env = os.environ if env is None else env
    data: dict = {}
    path = _pick_config_file(config_file, env)
    if path is not None:
        data.update(_read_config_file(path))
    data.update(_env_overrides(env))
    try:
        return Settings(**data)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"])
        raise ConfigError(f"{where}: {first['msg']}") from e
