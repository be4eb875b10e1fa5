"""Writes ``.atlas`` files: DTW warp paths aligning a canonical stream to a variant.

Layout (little-endian)::

    "ATLS"            4 bytes magic
    version           u16
    source id         8 bytes
    target id         8 bytes
    point count       u32
    points            count x (source_t: f32, target_t: f32)
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

MAGIC = b"ATLS"
VERSION = 1
HEADER_SIZE = 26
ID_SIZE = 8

_HEADER = struct.Struct("<4sH8s8sI")
_POINT = struct.Struct("<ff")


@dataclass(frozen=True)
class WarpPoint:
    """One point of a warp path: a source time and its aligned target time."""

    source_t: float
    target_t: float


@dataclass
class AlignSpec:
    """An alignment between a canonical source and a variant target."""

    source_id: bytes
    target_id: bytes
    warp: list[WarpPoint] = field(default_factory=list)

    def __post_init__(self) -> None:
        for name in ("source_id", "target_id"):
            value = getattr(self, name)
            if len(value) != ID_SIZE:
                raise ValueError(f"{name} must be exactly {ID_SIZE} bytes")


class AtlasEmitter:
    """Serializes alignment specs to ``.atlas`` bytes."""

    def emit(self, spec: AlignSpec) -> bytes:
        """The complete ``.atlas`` file for ``spec``."""
        header = _HEADER.pack(
            MAGIC, VERSION, bytes(spec.source_id), bytes(spec.target_id), len(spec.warp)
        )
        points = b"".join(_POINT.pack(p.source_t, p.target_t) for p in spec.warp)
        return header + points