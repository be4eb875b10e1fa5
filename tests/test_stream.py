import logging

import pytest

from aurac.cmd.stream import close_stream, list_streams, mix, open_stream
from aurac.errors import CompileError
from aurac.hist.store import HistoryStore


@pytest.fixture
def project(tmp_path):
    store = HistoryStore.open(tmp_path)
    store.set_stream_head("main", "tx1abcd")
    return tmp_path


def test_open_without_takes_fails(tmp_path):
    with pytest.raises(CompileError) as info:
        open_stream(tmp_path, "feature")
    assert "no takes recorded yet" in str(info.value)


def test_open_starts_at_current_head_and_activates(project):
    head = open_stream(project, "feature")
    assert head == "tx1abcd"
    store = HistoryStore.open(project)
    assert store.stream_head("feature") == "tx1abcd"
    assert store.active_stream() == "feature"


def test_close_main_is_rejected(project):
    with pytest.raises(CompileError) as info:
        close_stream(project, "main")
    assert "cannot close the main stream" in str(info.value)


def test_close_active_stream_switches_to_main(project):
    open_stream(project, "feature")
    close_stream(project, "feature")
    assert HistoryStore.open(project).active_stream() == "main"


def test_close_inactive_stream_keeps_active(project):
    open_stream(project, "feature")
    HistoryStore.open(project).set_stream("main")
    open_stream(project, "other")
    close_stream(project, "feature")
    assert HistoryStore.open(project).active_stream() == "other"


def test_list_streams_sorted_with_active_flag(project):
    open_stream(project, "zeta")
    HistoryStore.open(project).set_stream("main")
    open_stream(project, "alpha")
    assert list_streams(project) == [
        ("alpha", True),
        ("main", False),
        ("zeta", False),
    ]


def test_list_streams_empty_store(tmp_path):
    assert list_streams(tmp_path) == []


def test_mix_into_itself_fails(project):
    with pytest.raises(CompileError) as info:
        mix(project, "main")
    assert "cannot mix a stream into itself" in str(info.value)


def test_mix_reports_active_stream(project, caplog):
    open_stream(project, "feature")
    with caplog.at_level(logging.INFO, logger="aurac.cmd.stream"):
        active = mix(project, "main")
    assert active == "feature"
    assert "Mixing stream `main` into `feature`" in caplog.text