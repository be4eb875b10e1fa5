# aurac

Building blocks of a toolchain for AURA documents — the indentation-based
text format used to describe albums, podcasts, films and other media,
together with their credits, time-coded annotations and access rules.

It is a library: everything is used from Python, and nothing is installed
as a command.

## What is in it

- **Diagnostics** — `aurac.errors` provides `Level` (`NOTE`, `WARNING`,
  `ERROR`), `Span`, `Diagnostic` (built with `Diagnostic.error`, `warning`,
  `note` and refined with `with_file`, `with_span`, `with_hint`) and the
  `CompileError` exception raised by every stage. `CompileError.is_fatal()`
  tells whether any diagnostic is an error; `merge()` joins two errors.
- **File directives** — `aurac.directives.Kind` names the media kinds
  (`Kind.parse("audio::album")` accepts the aliases `audio::album` and
  `audio::ep`); `FileDirectives` holds the `schema::`/`directives::` fields
  and `validate()` raises when `root` or `lang` is missing.
- **Lexing** — `aurac.lex.scan.Scanner` turns source text into
  `aurac.lex.token.Token` values of kind `aurac.lex.token.TokenKind`.
  `next_token()` returns one token, `collect_all()` or iteration yields all
  of them up to `EOF`. `looks_like_time()` decides whether a bare word is a
  time literal (`22s`, `1m10s`, `00:04:32`).
- **Project configuration**:
  - `aurac.cfg.load.ConfigLoader(root).load()` reads `configs/llm.aura` and
    `configs/stores.aura` into a `Config` of `LlmProvider` and `StoreDecl`
    values; `primary_store()` and `local_store()` pick stores by alias.
    `parse_llm()` and `parse_stores()` work on text directly.
  - `aurac.cfg.ignore.IgnoreList.load(root)` merges `configs/ignore.aura`
    with the built-in exclusions (`configs`, `.history`, `artwork`,
    `motion`, `trailers`, `stems`, `dist`); `is_excluded(path)` matches by
    prefix.
  - `aurac.cfg.metaaccess` reads `meta/metaaccess.aura`, orders its
    `access-dag::` tiers topologically and assigns `AccessWeights`
    (explicit weight, or one more than the heaviest parent). `load()` falls
    back to `AccessWeights.builtin()` when the file is absent or invalid;
    `parse_and_sort()` raises `AccessDagError` on an empty or cyclic graph.
  - `aurac.cfg.metaboolean` reads `meta/metaboolean.aura` into a
    `BooleanMap` of custom literals mapped to 0 or 1; the false side of a
    literal is stored under `!literal`.
- **Source sanitizing** — `aurac.cmd.sanitize.normalize()` replaces `\"`
  with U+201C, `\'` with U+2018, literal `\n`/`\t` with a space and drops
  any other backslash. `run(SanitizeOpts(...))` rewrites every `.aura` file
  of a project (or the single file in `path`), returns a `SanitizeReport`,
  and with `dry_run=True` writes nothing and prints the changed lines to
  standard error.
- **History** — `aurac.hist.store.HistoryStore.open(project)` opens or
  creates `.history/` with take objects (TOML), marks and streams.
  `aurac.hist.delta` defines `Upsert`, `Drop`, `TakeObject`, `MarkEntry`
  and the node-level `diff()` / `apply()`. `aurac.hist.serial` converts
  takes to and from TOML. `aurac.hist.replay.DeltaReplayer` rebuilds the
  node map at a take (`reconstruct`), lists a stream's takes (`ledger`) and
  diffs two takes (`diff_takes`).
- **Alignment output** — `aurac.emit.atlas.AtlasEmitter().emit(spec)`
  writes an `.atlas` file from an `AlignSpec` of 8-byte source and target
  IDs and a list of `WarpPoint`s.
- **Project helpers**:
  - `aurac.cmd.stream`: `open_stream`, `close_stream`, `list_streams`,
    `mix`.
  - `aurac.cmd.hold`: `hold`, `restore`.
  - `aurac.cmd.cloud`: `sync`, `dub` (a full copy of the project, history
    included).

Progress messages go through the standard `logging` module.

## Installation

```sh
pip install .
```

Python 3.11 or later is required.

## Examples

### Tokenizing a document

```python
from aurac.lex.scan import Scanner

src = 'manifest::\n  name -> "Signal Loss"\n'
for token in Scanner(src).collect_all():
    print(token.line, token.kind, token.value)
```

### Sanitizing source text

```python
from aurac.cmd.sanitize import normalize

print(normalize(r'text -> "She said \"hi\""'))
```

### Access weights

```python
from aurac.cfg.metaaccess import AccessWeights

weights = AccessWeights.builtin()
packed = AccessWeights.pack(1, weights.resolve("gated"))
assert AccessWeights.unpack_weight(packed) == 4
assert AccessWeights.unpack_class(packed) == 1
```

### Recording history

```python
from aurac.hist.delta import TakeObject, Upsert
from aurac.hist.replay import DeltaReplayer
from aurac.hist.store import HistoryStore

store = HistoryStore.open("my-album")
take = TakeObject(
    id="tx3ab7k",
    parent=None,
    stream="main",
    message="first draft",
    timestamp=1713276000,
    deltas=[Upsert(path="verse/one/line/one", aura='text -> "The signal fades"')],
)
store.write_take(take)
store.set_stream_head("main", take.id)

state = DeltaReplayer(store).reconstruct("tx3ab7k")
print(state)
```

### Writing an alignment file

```python
from aurac.emit.atlas import AlignSpec, AtlasEmitter, WarpPoint

spec = AlignSpec(
    source_id=b"t7xab3c\0",
    target_id=b"v3qr7st\0",
    warp=[WarpPoint(0.0, 0.0), WarpPoint(1.0, 1.25)],
)
data = AtlasEmitter().emit(spec)
assert data[:4] == b"ATLS"
```

## Errors

Every stage raises `aurac.errors.CompileError`, which carries a list of
`Diagnostic` values with a level, message and optional file, span and hint.

## What it does not do

- There is no parser, no linter and no `.hami` or `.atom` writer, so the
  package does not compile a project; the scanner stops at tokens.
- There is no command-line program; the helpers in `aurac.cmd` are called
  from Python.
- Takes are not created from the working files: `HistoryStore` stores and
  replays takes you build yourself.
- `hold` and `restore` only create or check `.history/hold`; no draft files
  are saved or restored. `mix` only checks that the stream differs from the
  active one. `close_stream` does not archive the stream. `sync` reads the
  primary store from `configs/stores.aura` but transfers nothing.

## Running the tests

```sh
pip install ".[test]"
pytest
```