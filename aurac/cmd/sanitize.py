"""``aura sanitize``: rewrite forbidden escape sequences in source files.

Replacements:

- ``\\"`` becomes U+201C, ``\\'`` becomes U+2018
- a literal ``\\n`` or ``\\t`` becomes a space
- any other backslash is dropped and the following character kept
- a backslash at the very end of the text is kept
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from aurac.cfg.ignore import IgnoreList
from aurac.errors import CompileError

log = logging.getLogger(__name__)

_ESCAPE_RE = re.compile(r"\\([\"'nt])|\\(?=.)", re.DOTALL)
_REPLACEMENTS = {
    '"': "\u201c",
    "'": "\u2018",
    "n": " ",
    "t": " ",
}


@dataclass
class SanitizeOpts:
    """Options for ``aura sanitize``."""

    project: Path = field(default_factory=Path)
    dry_run: bool = False
    path: Path | None = None


@dataclass
class SanitizeReport:
    """What a sanitize run scanned and which files it changed (or would change)."""

    scanned: int
    changed: list[Path]
    dry_run: bool


def normalize(src: str) -> str:
    """Replace forbidden backslash sequences with their Unicode equivalents."""
    return _ESCAPE_RE.sub(lambda m: _REPLACEMENTS.get(m.group(1) or "", ""), src)


def _walk(root: Path, directory: Path, ignore: IgnoreList) -> Iterator[Path]:
    try:
        entries = list(directory.iterdir())
    except OSError as exc:
        raise CompileError.msg(f"cannot read {directory}: {exc}") from exc
    for entry in entries:
        if ignore.is_excluded(entry.relative_to(root)):
            continue
        if entry.is_dir():
            yield from _walk(root, entry, ignore)
        elif entry.suffix == ".aura":
            yield entry


def collect_aura_files(root: str | os.PathLike, ignore: IgnoreList) -> list[Path]:
    """All ``.aura`` files under ``root`` not excluded by ``ignore``, sorted."""
    root = Path(root)
    return sorted(_walk(root, root, ignore))


def _diff_lines(original: str, normalized: str, file: str) -> Iterator[str]:
    for number, (before, after) in enumerate(
        zip(original.splitlines(), normalized.splitlines()), start=1
    ):
        if before != after:
            yield f"  {file}:{number}: - {before.rstrip()}"
            yield f"  {file}:{number}: + {after.rstrip()}"


def _read(file: Path) -> str:
    try:
        return file.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CompileError.msg(f"cannot read {file}: {exc}") from exc


def _relative(file: Path, project: Path) -> str:
    try:
        return str(file.relative_to(project))
    except ValueError:
        return str(file)


def run(opts: SanitizeOpts) -> SanitizeReport:
    """Sanitize every source file in the project, or the single file in ``opts.path``."""
    project = Path(opts.project)
    if opts.dry_run:
        log.info("Scanning for forbidden byte sequences (dry run)...")
    else:
        log.info("Sanitizing source files...")

    if opts.path is not None:
        target = project / opts.path
        if not target.exists():
            raise CompileError.msg(f"file not found: {target}")
        files = [target]
    else:
        files = collect_aura_files(project, IgnoreList.load(project))

    changed: list[Path] = []
    for file in files:
        rel = _relative(file, project)
        src = _read(file)
        normalized = normalize(src)
        if normalized == src:
            continue
        changed.append(file)
        if opts.dry_run:
            log.warning("%s: forbidden sequences detected", rel)
            for line in _diff_lines(src, normalized, rel):
                print(line, file=sys.stderr)
        else:
            try:
                file.write_bytes(normalized.encode("utf-8"))
            except OSError as exc:
                raise CompileError.msg(f"cannot write {file}: {exc}") from exc
            log.info("normalized %s", rel)

    total = len(files)
    if not changed:
        log.info("%d file(s) scanned — no forbidden sequences found", total)
    elif opts.dry_run:
        log.info(
            "%d file(s) scanned — %d would be normalized (dry run, no writes)",
            total,
            len(changed),
        )
    else:
        log.info("%d file(s) scanned — %d normalized in place", total, len(changed))

    return SanitizeReport(scanned=total, changed=changed, dry_run=opts.dry_run)