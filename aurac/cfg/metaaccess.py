"""Loads ``meta/metaaccess.aura`` and assigns access-tier weights.

The file declares a directed acyclic graph of access tiers. A topological
sort (Kahn's algorithm) orders the tiers, and each tier gets its explicit
weight or, failing that, one more than the largest weight of its parents.
"""

from __future__ import annotations

import os
import re
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

_U16_MAX = 0xFFFF
_WEIGHT_RE = re.compile(r"\+?[0-9]+")


class AccessDagError(ValueError):
    """Raised when an ``access-dag::`` block cannot be turned into weights."""


@dataclass
class AccessWeights:
    """Maps an access tier name to its integer weight."""

    weights: dict[str, int] = field(default_factory=dict)

    @classmethod
    def builtin(cls) -> "AccessWeights":
        """The six fixed tiers used when no ``metaaccess.aura`` exists."""
        return cls(
            {
                "open": 1,
                "archived": 2,
                "restricted": 3,
                "gated": 4,
                "embargoed": 5,
                "locked": 6,
            }
        )

    def get(self, tier: str) -> int | None:
        """The weight of ``tier``, or None if it is not declared."""
        return self.weights.get(tier)

    def resolve(self, tier: str) -> int:
        """The weight of ``tier``, or 0 (unrestricted) if it is not declared."""
        return self.weights.get(tier, 0)

    @staticmethod
    def pack(class_byte: int, access_weight: int) -> int:
        """Pack a weight (bits 31-16) and a class byte (bits 15-0) into one word."""
        return ((access_weight & _U16_MAX) << 16) | (class_byte & _U16_MAX)

    @staticmethod
    def unpack_class(packed: int) -> int:
        """The class byte of a packed ``node_class`` value."""
        return packed & _U16_MAX

    @staticmethod
    def unpack_weight(packed: int) -> int:
        """The access weight of a packed ``node_class`` value."""
        return (packed >> 16) & _U16_MAX


@dataclass
class _DagNode:
    explicit_weight: int | None = None
    extends: list[str] = field(default_factory=list)


def _parse_weight(val: str) -> int | None:
    if not _WEIGHT_RE.fullmatch(val):
        return None
    weight = int(val)
    return weight if weight <= _U16_MAX else None


def _parse_dag(text: str) -> dict[str, _DagNode]:
    nodes: dict[str, _DagNode] = {}
    current: str | None = None
    in_dag = False

    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("##") or trimmed.startswith("--"):
            continue
        if trimmed == "access-dag::":
            in_dag = True
            current = None
            continue
        if not in_dag:
            continue
        if trimmed.endswith("::"):
            name = trimmed[:-2].strip()
            nodes.setdefault(name, _DagNode())
            current = name
            continue
        key, sep, val = trimmed.partition("->")
        if not sep or current is None:
            continue
        key = key.strip()
        val = val.strip().strip('"')
        node = nodes.setdefault(current, _DagNode())
        if key == "weight":
            weight = _parse_weight(val)
            if weight is not None:
                node.explicit_weight = weight
        elif key == "extends":
            node.extends.append(val)
    return nodes


def parse_and_sort(text: str) -> AccessWeights:
    """Parse an ``access-dag::`` block and compute every tier's weight.

    Raises AccessDagError if the block is empty or cannot be sorted.
    """
    nodes = _parse_dag(text)
    if not nodes:
        raise AccessDagError("access-dag is empty")

    children: dict[str, list[str]] = {}
    in_degree: dict[str, int] = {name: 0 for name in nodes}
    for name, node in nodes.items():
        for parent in node.extends:
            children.setdefault(parent, []).append(name)
            in_degree[name] = in_degree.get(name, 0) + 1

    queue = deque(sorted(name for name, deg in in_degree.items() if deg == 0))
    order: list[str] = []
    while queue:
        name = queue.popleft()
        order.append(name)
        for child in sorted(children.get(name, ())):
            in_degree[child] = max(in_degree.get(child, 0) - 1, 0)
            if in_degree[child] == 0:
                queue.append(child)

    if len(order) != len(nodes):
        raise AccessDagError("access-dag contains a cycle — cannot topologically sort")

    weights: dict[str, int] = {}
    for name in order:
        node = nodes[name]
        if node.explicit_weight is not None:
            weights[name] = node.explicit_weight
        else:
            parent_weights = [weights[p] for p in node.extends if p in weights]
            weights[name] = max(parent_weights, default=0) + 1
    return AccessWeights(weights)


def load(project: str | os.PathLike) -> AccessWeights:
    """Load ``meta/metaaccess.aura``; fall back to the built-in tiers on any problem."""
    path = Path(project) / "meta" / "metaaccess.aura"
    if not path.exists():
        return AccessWeights.builtin()
    try:
        text = path.read_text(encoding="utf-8")
        return parse_and_sort(text)
    except (OSError, UnicodeDecodeError, AccessDagError):
        return AccessWeights.builtin()