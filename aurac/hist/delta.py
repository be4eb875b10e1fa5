"""Node-level deltas between two document states.

A document state maps slash-identifier paths (e.g. ``verse/one/line/two``)
to the canonical AURA text of that node. Only semantic changes (new,
changed or removed nodes) produce deltas, so cosmetic edits leave the
history untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True)
class Upsert:
    """Insert or replace the node at ``path`` with ``aura`` text."""

    path: str
    aura: str


@dataclass(frozen=True)
class Drop:
    """Remove the node at ``path``."""

    path: str


SourceDelta: TypeAlias = Upsert | Drop


@dataclass
class TakeObject:
    """An immutable snapshot: the deltas recorded against its parent take."""

    id: str
    parent: str | None = None
    stream: str = "main"
    message: str | None = None
    timestamp: int = 0
    deltas: list[SourceDelta] = field(default_factory=list)


@dataclass(frozen=True)
class MarkEntry:
    """A human-readable name attached to a take."""

    name: str
    take: str


def _sort_key(delta: SourceDelta) -> tuple[int, str]:
    return (0 if isinstance(delta, Upsert) else 1, delta.path)


def diff(base: Mapping[str, str], head: Mapping[str, str]) -> list[SourceDelta]:
    """The deltas that turn ``base`` into ``head``.

    Upserts come before drops; within each kind deltas are ordered by path.
    """
    deltas: list[SourceDelta] = [
        Upsert(path, aura)
        for path, aura in head.items()
        if base.get(path) != aura
    ]
    deltas.extend(Drop(path) for path in base if path not in head)
    deltas.sort(key=_sort_key)
    return deltas


def apply(base: Mapping[str, str], deltas: Iterable[SourceDelta]) -> dict[str, str]:
    """Apply ``deltas`` in order to a copy of ``base`` and return the result."""
    state = dict(base)
    for delta in deltas:
        if isinstance(delta, Upsert):
            state[delta.path] = delta.aura
        else:
            state.pop(delta.path, None)
    return state