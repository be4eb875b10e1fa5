"""``aura hold`` and ``aura hold restore``: park and restore the working draft."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from aurac.errors import CompileError

log = logging.getLogger(__name__)


def _hold_dir(project: str | os.PathLike) -> Path:
    return Path(project) / ".history" / "hold"


def hold(project: str | os.PathLike) -> Path:
    """Park the working draft without recording a take; returns the hold directory."""
    hold_dir = _hold_dir(project)
    try:
        hold_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CompileError.msg(f"cannot create .history/hold: {exc}") from exc
    log.info("Working draft parked in .history/hold")
    return hold_dir


def restore(project: str | os.PathLike) -> Path:
    """Restore a parked draft; returns the hold directory it came from."""
    hold_dir = _hold_dir(project)
    if not hold_dir.exists():
        raise CompileError.msg("no parked draft found — run `aura hold` first")
    log.info("Parked draft restored")
    return hold_dir