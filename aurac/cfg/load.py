"""Reads the toolchain configuration in a project's ``configs/`` folder."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from aurac.errors import CompileError


@dataclass
class LlmProvider:
    """An LLM provider declared in ``configs/llm.aura``."""

    name: str
    model: str = ""
    endpoint: str | None = None
    auth_env: str | None = None


@dataclass
class StoreDecl:
    """A store backend declared in ``configs/stores.aura``."""

    alias: str
    uri: str = ""
    kind: str = ""
    auth: str | None = None


@dataclass
class Config:
    """Parsed contents of the ``configs/`` folder."""

    llm: list[LlmProvider] = field(default_factory=list)
    stores: list[StoreDecl] = field(default_factory=list)

    def primary_store(self) -> StoreDecl | None:
        return next((s for s in self.stores if s.alias == "primary"), None)

    def local_store(self) -> StoreDecl | None:
        return next((s for s in self.stores if s.alias == "local"), None)


class ConfigLoader:
    """Loads the configuration of the project at ``root``."""

    def __init__(self, root: str | os.PathLike) -> None:
        self.root = Path(root)

    def load(self) -> Config:
        """Read ``configs/``; missing files are skipped."""
        cfg = Config()
        configs = self.root / "configs"
        llm_text = _read_optional(configs / "llm.aura", "configs/llm.aura")
        if llm_text is not None:
            cfg.llm = parse_llm(llm_text)
        stores_text = _read_optional(configs / "stores.aura", "configs/stores.aura")
        if stores_text is not None:
            cfg.stores = parse_stores(stores_text)
        return cfg


def _read_optional(path: Path, label: str) -> str | None:
    if not path.exists():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CompileError.msg(f"cannot read {label}: {exc}") from exc


def _blocks(text: str):
    """Yield ``(name, fields)`` for each ``name::`` block in the text."""
    current: dict[str, str] | None = None
    name = ""
    for line in text.splitlines():
        trimmed = line.strip()
        if trimmed.endswith("::"):
            if current is not None:
                yield name, current
            while trimmed.endswith("::"):
                trimmed = trimmed[:-2]
            name = trimmed
            current = {}
            continue
        if current is not None:
            kv = _parse_kv(trimmed)
            if kv is not None:
                current[kv[0]] = kv[1]
    if current is not None:
        yield name, current


def parse_llm(text: str) -> list[LlmProvider]:
    """Parse the provider blocks of an ``llm.aura`` file."""
    return [
        LlmProvider(
            name=name,
            model=fields.get("model", ""),
            endpoint=fields.get("endpoint"),
            auth_env=fields.get("env"),
        )
        for name, fields in _blocks(text)
        if name != "llm"
    ]


def parse_stores(text: str) -> list[StoreDecl]:
    """Parse the store blocks of a ``stores.aura`` file."""
    return [
        StoreDecl(
            alias=alias,
            uri=fields.get("uri", ""),
            kind=fields.get("kind", ""),
            auth=fields.get("auth"),
        )
        for alias, fields in _blocks(text)
        if alias != "stores"
    ]


def _parse_kv(line: str) -> tuple[str, str] | None:
    key, sep, val = line.partition("->")
    if not sep:
        return None
    key = key.strip()
    if not key:
        return None
    return key, val.strip().strip('"')