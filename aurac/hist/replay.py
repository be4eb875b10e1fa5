"""Reconstructs the document state at any take by replaying its delta chain."""

from __future__ import annotations

from aurac.errors import CompileError
from aurac.hist.delta import SourceDelta, TakeObject, apply, diff
from aurac.hist.store import HistoryStore


class DeltaReplayer:
    """Replays take chains from a history store."""

    def __init__(self, store: HistoryStore) -> None:
        self.store = store

    def reconstruct(self, target_id: str) -> dict[str, str]:
        """The full node map (path to AURA text) at ``target_id``."""
        state: dict[str, str] = {}
        for take in self._build_chain(target_id):
            state = apply(state, take.deltas)
        return state

    def _build_chain(self, target_id: str) -> list[TakeObject]:
        chain: list[TakeObject] = []
        seen: set[str] = set()
        current: str | None = target_id
        while current is not None:
            if current in seen:
                raise CompileError.msg(f"take chain contains a cycle at `{current}`")
            seen.add(current)
            take = self.store.read_take(current)
            chain.append(take)
            current = take.parent
        chain.reverse()
        return chain

    def ledger(self, stream: str) -> list[TakeObject]:
        """All takes from origin to the head of ``stream``, oldest first."""
        head = self.store.stream_head(stream)
        if head is None:
            raise CompileError.msg(f"stream `{stream}` not found")
        return self._build_chain(head)

    def diff_takes(self, take_a: str, take_b: str) -> list[SourceDelta]:
        """The deltas that turn the state at ``take_a`` into that at ``take_b``."""
        return diff(self.reconstruct(take_a), self.reconstruct(take_b))