import pytest

from aurac.cfg.ignore import IgnoreList
from aurac.cmd.sanitize import SanitizeOpts, collect_aura_files, normalize, run
from aurac.errors import CompileError


def test_escaped_double_quote():
    assert normalize('say \\"hi') == "say \u201chi"


def test_escaped_single_quote():
    assert normalize("it\\'s") == "it\u2018s"


def test_literal_newline_and_tab_become_spaces():
    assert normalize("a\\nb\\tc") == "a b c"


def test_other_escape_strips_backslash():
    assert normalize("\\x\\y") == "xy"


def test_trailing_backslash_is_kept():
    assert normalize("end\\") == "end\\"


def test_double_backslash_before_quote():
    assert normalize('\\\\"') == "\u201c"


def test_clean_text_unchanged():
    text = 'manifest::\n  name -> "Signal Loss"\n  ünï -> cödé\n'
    assert normalize(text) == text


@pytest.mark.parametrize(
    "text",
    ['a\\\\b', '\\\\\\"', "x\\\ny", "\\n\\t\\'", "plain", "\\\\\\"],
)
def test_no_backslash_left_before_end(text):
    result = normalize(text)
    assert "\\" not in result[:-1]
    assert normalize(result) == result


def _project(tmp_path):
    (tmp_path / "tracks").mkdir()
    (tmp_path / "dist").mkdir()
    (tmp_path / "tracks" / "a.aura").write_text('name -> \\"x\\"\n', encoding="utf-8")
    (tmp_path / "tracks" / "b.aura").write_text("name -> clean\n", encoding="utf-8")
    (tmp_path / "dist" / "c.aura").write_text("bad \\n\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("bad \\n\n", encoding="utf-8")
    return tmp_path


def test_collect_aura_files(tmp_path):
    root = _project(tmp_path)
    files = collect_aura_files(root, IgnoreList.builtin())
    assert files == [root / "tracks" / "a.aura", root / "tracks" / "b.aura"]
    assert files == sorted(files)


def test_run_rewrites_files(tmp_path):
    root = _project(tmp_path)
    report = run(SanitizeOpts(project=root))
    assert report.scanned == 2
    assert report.changed == [root / "tracks" / "a.aura"]
    a = (root / "tracks" / "a.aura").read_text(encoding="utf-8")
    assert a == normalize('name -> \\"x\\"\n')
    assert (root / "dist" / "c.aura").read_text(encoding="utf-8") == "bad \\n\n"


def test_run_dry_run_does_not_write(tmp_path, capsys):
    root = _project(tmp_path)
    original = (root / "tracks" / "a.aura").read_text(encoding="utf-8")
    report = run(SanitizeOpts(project=root, dry_run=True))
    assert report.dry_run
    assert report.changed == [root / "tracks" / "a.aura"]
    assert (root / "tracks" / "a.aura").read_text(encoding="utf-8") == original
    err = capsys.readouterr().err
    assert "- name -> \\\"x\\\"" in err


def test_run_single_path(tmp_path):
    root = _project(tmp_path)
    report = run(SanitizeOpts(project=root, path="dist/c.aura"))
    assert report.scanned == 1
    assert (root / "dist" / "c.aura").read_text(encoding="utf-8") == "bad  \n"


def test_run_missing_path(tmp_path):
    with pytest.raises(CompileError) as info:
        run(SanitizeOpts(project=tmp_path, path="nope.aura"))
    assert "file not found" in str(info.value)


def test_run_second_pass_changes_nothing(tmp_path):
    root = _project(tmp_path)
    run(SanitizeOpts(project=root))
    report = run(SanitizeOpts(project=root))
    assert report.changed == []