"""Reads ``configs/ignore.aura`` and decides which paths are excluded."""

from __future__ import annotations

import os
from pathlib import Path

from aurac.errors import CompileError

BUILTIN: tuple[str, ...] = (
    "configs",
    ".history",
    "artwork",
    "motion",
    "trailers",
    "stems",
    "dist",
)


class IgnoreList:
    """The effective exclusion list for a project."""

    def __init__(self, patterns: list[str] | None = None) -> None:
        self.patterns: list[str] = list(patterns or [])

    @classmethod
    def builtin(cls) -> "IgnoreList":
        """An ignore list holding only the built-in exclusions."""
        return cls(list(BUILTIN))

    @classmethod
    def load(cls, project_root: str | os.PathLike) -> "IgnoreList":
        """Load ``configs/ignore.aura`` merged with the built-in list."""
        path = Path(project_root) / "configs" / "ignore.aura"
        result = cls.builtin()
        if path.exists():
            try:
                text = path.read_text(encoding="utf-8")
            except OSError as exc:
                raise CompileError.msg(f"cannot read configs/ignore.aura: {exc}") from exc
            result._parse_ignore(text)
        return result

    def is_excluded(self, path: str | os.PathLike) -> bool:
        """True if ``path`` (relative to the project root) is excluded."""
        path_str = os.fspath(path)
        return any(path_str.startswith(pattern) for pattern in self.patterns)

    def _parse_ignore(self, text: str) -> None:
        for line in text.splitlines():
            trimmed = line.strip()
            if (
                not trimmed
                or trimmed.startswith("##")
                or trimmed.startswith("--")
                or trimmed.endswith("::")
            ):
                continue
            if trimmed.startswith("- "):
                entry = trimmed[2:].strip().strip('"')
                if entry and entry not in self.patterns:
                    self.patterns.append(entry)