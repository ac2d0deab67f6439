"""Shared Pydantic models passed between pipeline steps."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ResolvedRuntime(BaseModel):
    spec: str
    version: str
    target_dir: Path

    @property
    def node_binary(self) -> Path:
        return self.target_dir / "bin" / "node"


class LinkUpdate(BaseModel):
    link: Path
    target: Path
    previous: Path | None = None

    @property
    def changed(self) -> bool:
        return self.previous != self.target


class VerifyReport(BaseModel):
    node_version: str
    npm_version: str | None = None
    node_path: Path


class RunResult(BaseModel):
    runtime: ResolvedRuntime
    links: list[LinkUpdate] = Field(default_factory=list)
    shims_enabled: bool = False
    report: VerifyReport | None = None
