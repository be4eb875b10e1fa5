"""``aura stream`` and ``aura mix``: parallel development streams."""

from __future__ import annotations

import logging
import os

from aurac.errors import CompileError
from aurac.hist.store import HistoryStore

log = logging.getLogger(__name__)

MAIN_STREAM = "main"


def open_stream(project: str | os.PathLike, name: str) -> str:
    """Open stream ``name`` at the current take and make it active.

    Returns the take ID the new stream starts from.
    """
    store = HistoryStore.open(project)
    active = store.active_stream()
    head = store.stream_head(active)
    if head is None:
        raise CompileError.msg(
            "no takes recorded yet — record a take before opening a stream"
        )
    store.set_stream_head(name, head)
    store.set_stream(name)
    log.info("Opened stream `%s` at take %s", name, head)
    return head


def close_stream(project: str | os.PathLike, name: str) -> None:
    """Close stream ``name``; if it is active, switch back to the main stream."""
    if name == MAIN_STREAM:
        raise CompileError.msg("cannot close the main stream")
    store = HistoryStore.open(project)
    if store.active_stream() == name:
        store.set_stream(MAIN_STREAM)
        log.info("Switched active stream back to main")
    log.info("Stream `%s` closed", name)


def list_streams(project: str | os.PathLike) -> list[tuple[str, bool]]:
    """All streams in name order, each paired with whether it is active."""
    store = HistoryStore.open(project)
    active = store.active_stream()
    entries = [(name, name == active) for name in store.list_streams()]
    log.info("Streams:")
    for name, is_active in entries:
        log.info("  %s%s", name, " *" if is_active else "")
    return entries


def mix(project: str | os.PathLike, stream_name: str) -> str:
    """Mix ``stream_name`` into the active stream; returns the active stream name."""
    store = HistoryStore.open(project)
    active = store.active_stream()
    if active == stream_name:
        raise CompileError.msg("cannot mix a stream into itself")
    log.info("Mixing stream `%s` into `%s`", stream_name, active)
    return active