from __future__ import annotations

import os
from pathlib import Path

import pytest

from nvm_global.config import Settings
from nvm_global.errors import PublishError
from nvm_global.publish.symlinks import publish_links, replace_symlink
from nvm_global.types import ResolvedRuntime


def test_replace_symlink_creates_and_repoints(tmp_path: Path) -> None:
    a = tmp_path / "a"
    b = tmp_path / "b"
    a.mkdir()
    b.mkdir()
    link = tmp_path / "links" / "current"

    first = replace_symlink(a, link)
    assert first.previous is None and first.changed
    assert Path(os.readlink(link)) == a

    second = replace_symlink(b, link)
    assert second.previous == a
    assert Path(os.readlink(link)) == b
    # a directory symlink is replaced, not descended into (ln -n semantics)
    assert not (b / "current").exists()
    assert [p.name for p in link.parent.iterdir()] == ["current"]


def test_replace_symlink_over_regular_file(tmp_path: Path) -> None:
    link = tmp_path / "node"
    link.write_text("old binary", encoding="utf-8")
    replace_symlink(tmp_path / "elsewhere", link)
    assert link.is_symlink()


def test_replace_symlink_refuses_real_directory(tmp_path: Path) -> None:
    real = tmp_path / "real"
    real.mkdir()
    with pytest.raises(PublishError, match="Refusing to replace real directory"):
        replace_symlink(tmp_path / "x", real)
    assert real.is_dir() and not real.is_symlink()


def test_publish_links_order_and_targets(tmp_path: Path) -> None:
    s = Settings(nvm_dir=tmp_path / "nvm", stable_link=tmp_path / "nvm" / "current",
                 bin_dir=tmp_path / "bin")
    target = s.target_dir("v24.3.0")
    (target / "bin").mkdir(parents=True)
    runtime = ResolvedRuntime(spec="24", version="v24.3.0", target_dir=target)

    updates = publish_links(s, runtime)

    assert [u.link for u in updates] == [s.stable_link] + [s.bin_dir / b for b in s.binaries]
    assert Path(os.readlink(s.stable_link)) == target
    for b in s.binaries:
        assert Path(os.readlink(s.bin_dir / b)) == s.stable_link / "bin" / b


def test_os_errors_become_publish_errors(tmp_path: Path, monkeypatch) -> None:
    def _denied(src, dst):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(os, "replace", _denied)
    link = tmp_path / "node"
    with pytest.raises(PublishError, match="Permission denied"):
        replace_symlink(tmp_path / "target", link)
    # the temporary link is cleaned up
    assert list(tmp_path.iterdir()) == []
