"""TOML form of take objects in the history store.

On disk a take looks like::

    id = "tx3ab7k"
    parent = "tx3ab3c"      # absent for origin takes
    stream = "main"
    timestamp = 1713276000
    message = "first complete draft"

    [[deltas]]
    op = "upsert"
    path = "verse/one/line/one"
    aura = "..."

    [[deltas]]
    op = "drop"
    path = "bridge/two"
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from typing import Any

import tomli_w

from aurac.hist.delta import Drop, SourceDelta, TakeObject, Upsert


def _delta_to_dict(delta: SourceDelta) -> dict[str, str]:
    if isinstance(delta, Upsert):
        return {"op": "upsert", "path": delta.path, "aura": delta.aura}
    return {"op": "drop", "path": delta.path}


def take_to_dict(take: TakeObject) -> dict[str, Any]:
    """The TOML-ready mapping of a take; absent optional fields are omitted."""
    data: dict[str, Any] = {"id": take.id}
    if take.parent is not None:
        data["parent"] = take.parent
    data["stream"] = take.stream
    data["timestamp"] = take.timestamp
    if take.message is not None:
        data["message"] = take.message
    data["deltas"] = [_delta_to_dict(d) for d in take.deltas]
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    if key not in data:
        return None
    return _require_str(data, key)


def _delta_from_dict(data: Any) -> SourceDelta:
    if not isinstance(data, Mapping):
        raise ValueError("delta must be a table")
    op = _require_str(data, "op")
    if op == "upsert":
        return Upsert(_require_str(data, "path"), _require_str(data, "aura"))
    if op == "drop":
        return Drop(_require_str(data, "path"))
    raise ValueError(f"unknown delta op `{op}`")


def take_from_dict(data: Mapping[str, Any]) -> TakeObject:
    """Build a take from its TOML mapping; raises ValueError if malformed."""
    timestamp = data.get("timestamp")
    if "timestamp" not in data:
        raise ValueError("missing field `timestamp`")
    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp < 0:
        raise ValueError("field `timestamp` must be a non-negative integer")
    raw_deltas = data.get("deltas", [])
    if not isinstance(raw_deltas, list):
        raise ValueError("field `deltas` must be an array")
    return TakeObject(
        id=_require_str(data, "id"),
        parent=_optional_str(data, "parent"),
        stream=_require_str(data, "stream"),
        message=_optional_str(data, "message"),
        timestamp=timestamp,
        deltas=[_delta_from_dict(d) for d in raw_deltas],
    )


def dumps_take(take: TakeObject) -> str:
    """Serialize a take to TOML text."""
    return tomli_w.dumps(take_to_dict(take))


def loads_take(text: str) -> TakeObject:
    """Parse a take from TOML text; raises ValueError if malformed."""
    return take_from_dict(tomllib.loads(text))