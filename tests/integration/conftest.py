from __future__ import annotations

import shutil
import stat
from dataclasses import dataclass
from pathlib import Path

import pytest

from nvm_global.config import Settings
from nvm_global.system import privilege

# A stand-in for nvm.sh: a bash function honouring the install/version/alias/use/exec
# contract, logging every call. `version` knows 24 -> v24.3.0 and 22 -> v22.1.0
# (the latter has no binary on disk); anything else is N/A. Installing 13 fails.
FAKE_NVM = r"""
NVM_DIR="__ROOT__"
nvm() {
  echo "$*" >> "$NVM_DIR/calls.log"
  case "$1" in
    install)
      [ "$2" = "13" ] && { echo "Version '13' not found" >&2; return 3; }
      return 0 ;;
    version)
      case "$2" in
        24|24.3|24.3.0) echo "v24.3.0" ;;
        22) echo "v22.1.0" ;;
        *) echo "N/A"; return 3 ;;
      esac ;;
    alias) mkdir -p "$NVM_DIR/alias" && echo "$3" > "$NVM_DIR/alias/$2" ;;
    use) return 0 ;;
    exec) return 127 ;;
    *) return 1 ;;
  esac
}
"""


def _write_exe(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body + "\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@dataclass
class SharedNvm:
    root: Path
    snippet: Path
    settings: Settings
    config_file: Path

    @property
    def calls(self) -> list[str]:
        log = self.root / "calls.log"
        return log.read_text(encoding="utf-8").splitlines() if log.exists() else []


@pytest.fixture
def shared_nvm(tmp_path: Path, monkeypatch) -> SharedNvm:
    bash = shutil.which("bash")
    if bash is None:
        pytest.skip("bash is required to source the nvm profile snippet")

    # never re-exec under sudo from the test suite
    monkeypatch.setattr(privilege, "is_root", lambda: True)

    root = tmp_path / "opt" / "nvm"
    bin_ = root / "versions" / "node" / "v24.3.0" / "bin"
    _write_exe(bin_ / "node", "echo v24.3.0")
    _write_exe(bin_ / "npm", "echo 10.9.2")
    _write_exe(bin_ / "npx", "echo 10.9.2")

    snippet = tmp_path / "etc" / "profile.d" / "nvm.sh"
    snippet.parent.mkdir(parents=True)
    snippet.write_text(FAKE_NVM.replace("__ROOT__", str(root)), encoding="utf-8")

    settings = Settings(
        nvm_dir=root,
        profile_snippet=snippet,
        stable_link=root / "current",
        bin_dir=tmp_path / "usr" / "bin",
        shell=bash,
    )
    config_file = tmp_path / "nvm-global.json"
    config_file.write_text(settings.model_dump_json(), encoding="utf-8")
    return SharedNvm(root=root, snippet=snippet, settings=settings, config_file=config_file)
