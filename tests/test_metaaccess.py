import pytest

from aurac.cfg.metaaccess import AccessDagError, AccessWeights, load, parse_and_sort

DOC_EXAMPLE = """\
## FILE: meta/metaaccess.aura

access-dag::

  open::
    weight -> 1

  archived::
    weight  -> 2
    extends -> open

  restricted::
    weight  -> 3
    extends -> archived

  press-only::
    weight  -> 3
    extends -> archived

  gated::
    weight  -> 4
    extends -> restricted

  premium-only::
    weight  -> 4
    extends -> gated

  embargoed::
    weight  -> 5
    extends -> gated

  locked::
    weight  -> 6
    extends -> embargoed
"""


def test_builtin_weights():
    w = AccessWeights.builtin()
    assert w.get("open") == 1
    assert w.get("archived") == 2
    assert w.get("locked") == 6


def test_unknown_tier():
    w = AccessWeights.builtin()
    assert w.get("nonexistent") is None
    assert w.resolve("nonexistent") == 0
    assert w.resolve("gated") == w.get("gated")


def test_pack_round_trip():
    packed = AccessWeights.pack(0x12, 5)
    assert AccessWeights.unpack_class(packed) == 0x12
    assert AccessWeights.unpack_weight(packed) == 5


def test_pack_masks_class_to_low_half():
    packed = AccessWeights.pack(0x1FFFF, 7)
    assert AccessWeights.unpack_class(packed) == 0xFFFF
    assert AccessWeights.unpack_weight(packed) == 7


def test_parse_doc_example():
    w = parse_and_sort(DOC_EXAMPLE)
    assert w.get("open") == 1
    assert w.get("press-only") == 3
    assert w.get("premium-only") == 4
    assert w.get("locked") == 6
    assert set(w.weights) == {
        "open",
        "archived",
        "restricted",
        "press-only",
        "gated",
        "premium-only",
        "embargoed",
        "locked",
    }


def test_computed_weight_exceeds_parents():
    text = """access-dag::
  base::
    weight -> 4
  other::
    weight -> 9
  child::
    extends -> base
    extends -> other
"""
    w = parse_and_sort(text)
    assert w.get("child") == w.get("other") + 1
    assert w.get("child") > w.get("base")


def test_computed_chain_is_strictly_increasing():
    text = """access-dag::
  a::
  b::
    extends -> a
  c::
    extends -> b
"""
    w = parse_and_sort(text)
    assert w.get("a") < w.get("b") < w.get("c")
    assert w.get("c") - w.get("a") == 2


def test_invalid_weight_is_ignored():
    text = """access-dag::
  a::
    weight -> lots
  b::
    weight -> 3
"""
    w = parse_and_sort(text)
    assert w.get("a") == parse_and_sort("access-dag::\n  a::\n").get("a")
    assert w.get("b") == 3


def test_cycle_raises():
    text = """access-dag::
  a::
    extends -> b
  b::
    extends -> a
"""
    with pytest.raises(AccessDagError):
        parse_and_sort(text)


def test_undeclared_parent_raises():
    with pytest.raises(AccessDagError):
        parse_and_sort("access-dag::\n  a::\n    extends -> missing\n")


def test_empty_raises():
    with pytest.raises(AccessDagError):
        parse_and_sort("access-dag::\n")


def test_tiers_outside_block_are_ignored():
    with pytest.raises(AccessDagError):
        parse_and_sort("open::\n  weight -> 1\n")


def test_load_missing_falls_back(tmp_path):
    assert load(tmp_path) == AccessWeights.builtin()


def test_load_malformed_falls_back(tmp_path):
    meta = tmp_path / "meta"
    meta.mkdir()
    (meta / "metaaccess.aura").write_text(
        "access-dag::\n  a::\n    extends -> b\n  b::\n    extends -> a\n", encoding="utf-8"
    )
    assert load(tmp_path) == AccessWeights.builtin()


def test_load_custom_file(tmp_path):
    meta = tmp_path / "meta"
    meta.mkdir()
    (meta / "metaaccess.aura").write_text(DOC_EXAMPLE, encoding="utf-8")
    w = load(tmp_path)
    assert w == parse_and_sort(DOC_EXAMPLE)
    assert w.get("press-only") == 3