"""Loads ``meta/metaboolean.aura``: custom literals mapped to 0 or 1.

Each inner block names a literal. Its ``true-maps-to`` value is stored
under the literal itself; its ``false-maps-to`` value is stored under the
literal prefixed with ``!``.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

_BITS = {
    "live": 1,
    "true": 1,
    "1": 1,
    "dark": 0,
    "false": 0,
    "0": 0,
}


@dataclass
class BooleanMap:
    """Custom domain literals and their binary values."""

    values: dict[str, int] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "BooleanMap":
        """A map with no custom literals (only built-in ``live``/``dark`` apply)."""
        return cls()

    def resolve(self, literal: str) -> int | None:
        """The binary value of ``literal``, if declared."""
        return self.values.get(literal)

    def contains(self, literal: str) -> bool:
        """True if ``literal`` is declared."""
        return literal in self.values

    def keys(self) -> Iterator[str]:
        """Iterate over all declared literal names."""
        return iter(self.values)


class _Block:
    """Accumulates one keyword block while parsing."""

    def __init__(self, key: str | None = None) -> None:
        self.key = key
        self.true_val: int | None = None
        self.false_val: int | None = None

    def commit(self, values: dict[str, int]) -> None:
        if self.key is None:
            return
        if self.true_val is not None:
            values[self.key] = self.true_val
        if self.false_val is not None:
            values[f"!{self.key}"] = self.false_val


def parse(text: str) -> BooleanMap:
    """Parse the contents of a ``metaboolean.aura`` file."""
    values: dict[str, int] = {}
    block = _Block()

    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("##") or trimmed.startswith("--"):
            continue
        if trimmed == "booleans::":
            block.commit(values)
            block = _Block()
            continue
        if trimmed.endswith("::"):
            keyword = trimmed[:-2].strip()
            if keyword == "booleans":
                continue
            block.commit(values)
            block = _Block(keyword)
            continue
        key, sep, val = trimmed.partition("->")
        if not sep:
            continue
        bit = _BITS.get(val.strip().strip('"'))
        if bit is None or block.key is None:
            continue
        key = key.strip()
        if key == "true-maps-to":
            block.true_val = bit
        elif key == "false-maps-to":
            block.false_val = bit

    block.commit(values)
    return BooleanMap(values)


def load(project: str | os.PathLike) -> BooleanMap:
    """Load ``meta/metaboolean.aura``; an absent or unreadable file gives an empty map."""
    path = Path(project) / "meta" / "metaboolean.aura"
    if not path.exists():
        return BooleanMap.empty()
    try:
        return parse(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        return BooleanMap.empty()