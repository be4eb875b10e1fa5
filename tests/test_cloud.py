import logging

import pytest

from aurac.cmd.cloud import dub, sync
from aurac.errors import CompileError


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "album"
    (root / "tracks").mkdir(parents=True)
    (root / ".history" / "streams").mkdir(parents=True)
    (root / "name.aura").write_text("name::\n  id -> c8xab3d\n", encoding="utf-8")
    (root / "tracks" / "t7xab3c.aura").write_text("manifest::\n", encoding="utf-8")
    (root / ".history" / "streams" / "main").write_text("tx1abcd", encoding="utf-8")
    return root


def test_dub_copies_everything_including_history(project, tmp_path):
    dest = tmp_path / "copy"
    result = dub(project, dest)
    assert result == dest
    for rel in ("name.aura", "tracks/t7xab3c.aura", ".history/streams/main"):
        assert (dest / rel).read_text(encoding="utf-8") == (project / rel).read_text(
            encoding="utf-8"
        )


def test_dub_copy_is_independent(project, tmp_path):
    dest = tmp_path / "copy"
    dub(project, dest)
    (dest / "name.aura").write_text("changed", encoding="utf-8")
    assert (project / "name.aura").read_text(encoding="utf-8").startswith("name::")


def test_dub_existing_destination_fails(project, tmp_path):
    dest = tmp_path / "taken"
    dest.mkdir()
    with pytest.raises(CompileError) as info:
        dub(project, dest)
    assert "already exists" in str(info.value)
    assert list(dest.iterdir()) == []


def test_dub_missing_source_fails(tmp_path):
    with pytest.raises(CompileError):
        dub(tmp_path / "missing", tmp_path / "copy")


def test_sync_reports_success(project, caplog):
    with caplog.at_level(logging.INFO, logger="aurac.cmd.cloud"):
        sync(project)
    assert "Synced from primary store" in caplog.text