"""The append-only ``.history/`` object store.

Layout::

    .history/
      objects/<take-id>.toml   immutable take objects
      marks/<name>             take ID the mark points to
      streams/<name>           head take ID of the stream
      HEAD                     active stream name
"""

from __future__ import annotations

import os
from pathlib import Path

from aurac.errors import CompileError
from aurac.hist.delta import MarkEntry, TakeObject
from aurac.hist.serial import dumps_take, loads_take


class HistoryStore:
    """Reads and writes the ``.history/`` store rooted at ``root``."""

    def __init__(self, root: str | os.PathLike) -> None:
        self.root = Path(root)

    @classmethod
    def open(cls, project_root: str | os.PathLike) -> "HistoryStore":
        """Open the store of a project, creating it if it does not exist."""
        root = Path(project_root) / ".history"
        if not root.exists():
            try:
                for sub in ("objects", "marks", "streams"):
                    (root / sub).mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise CompileError.msg(f"cannot create .history/: {exc}") from exc
            try:
                (root / "HEAD").write_text("main", encoding="utf-8")
            except OSError as exc:
                raise CompileError.msg(f"cannot write HEAD: {exc}") from exc
        return cls(root)

    # HEAD / streams

    def active_stream(self) -> str:
        return self._read_text(self.root / "HEAD")

    def set_stream(self, stream: str) -> None:
        self._write_text(self.root / "HEAD", stream)

    def stream_head(self, stream: str) -> str | None:
        path = self.root / "streams" / stream
        return self._read_text(path) if path.exists() else None

    def set_stream_head(self, stream: str, take_id: str) -> None:
        self._write_text(self.root / "streams" / stream, take_id)

    def list_streams(self) -> list[str]:
        return self._list_dir_names(self.root / "streams")

    # Marks

    def set_mark(self, name: str, take_id: str) -> None:
        self._write_text(self.root / "marks" / name, take_id)

    def mark(self, name: str) -> str | None:
        path = self.root / "marks" / name
        return self._read_text(path) if path.exists() else None

    def list_marks(self) -> list[MarkEntry]:
        marks_dir = self.root / "marks"
        return [
            MarkEntry(name, self._read_text(marks_dir / name))
            for name in self._list_dir_names(marks_dir)
        ]

    # Take objects

    def _take_path(self, take_id: str) -> Path:
        return self.root / "objects" / f"{take_id}.toml"

    def write_take(self, take: TakeObject) -> None:
        """Write ``take`` to ``objects/<id>.toml``."""
        try:
            text = dumps_take(take)
        except (TypeError, ValueError) as exc:
            raise CompileError.msg(f"cannot serialize take {take.id}: {exc}") from exc
        self._write_text(self._take_path(take.id), text)

    def read_take(self, take_id: str) -> TakeObject:
        """Read the take with ``take_id``; raises CompileError if absent or corrupt."""
        path = self._take_path(take_id)
        if not path.exists():
            raise CompileError.msg(f"take `{take_id}` not found in .history/objects/")
        text = self._read_text(path)
        try:
            return loads_take(text)
        except ValueError as exc:
            raise CompileError.msg(f"cannot parse take {take_id}: {exc}") from exc

    def has_take(self, take_id: str) -> bool:
        return self._take_path(take_id).exists()

    def list_takes(self) -> list[str]:
        return [
            name.removesuffix(".toml")
            for name in self._list_dir_names(self.root / "objects")
            if name.endswith(".toml")
        ]

    # Helpers

    @staticmethod
    def _read_text(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise CompileError.msg(f"cannot read `{path}`: {exc}") from exc

    @staticmethod
    def _write_text(path: Path, text: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CompileError.msg(f"cannot create directory: {exc}") from exc
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise CompileError.msg(f"cannot write `{path}`: {exc}") from exc

    @staticmethod
    def _list_dir_names(directory: Path) -> list[str]:
        if not directory.exists():
            return []
        try:
            return sorted(entry.name for entry in directory.iterdir())
        except OSError as exc:
            raise CompileError.msg(
                f"cannot read directory `{directory}`: {exc}"
            ) from exc