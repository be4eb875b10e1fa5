"""The ``schema::`` and ``directives::`` block model for AURA documents."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from aurac.errors import CompileError


class Kind(enum.Enum):
    """Media kind declared in ``schema::kind``."""

    AUDIO_MUSIC = "audio::music"
    AUDIO_PODCAST = "audio::podcast"
    AUDIO_BOOK = "audio::audiobook"
    AUDIO_LIVE = "audio::live"
    VIDEO_MOVIE = "video::movie"
    VIDEO_SERIES = "video::series"
    VIDEO_PODCAST = "video::podcast"
    VIDEO_DOC = "video::documentary"
    VIDEO_MUSIC = "video::music"
    VIDEO_LIVE = "video::live"
    VIDEO_SHORT = "video::short"
    MIXED_ALBUM = "mixed::album"
    MIXED_INTERACTIVE = "mixed::interactive"
    METADATA = "metadata"

    @classmethod
    def parse(cls, s: str) -> "Kind | None":
        """Return the kind named by ``s`` (aliases included), or None."""
        alias = _ALIASES.get(s)
        if alias is not None:
            return alias
        try:
            return cls(s)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


_ALIASES = {
    "audio::album": Kind.AUDIO_MUSIC,
    "audio::ep": Kind.AUDIO_MUSIC,
}


@dataclass
class FileDirectives:
    """Parsed contents of the ``schema::`` and ``directives::`` blocks."""

    root: str = ""
    kind: Kind = Kind.AUDIO_MUSIC
    lang: str = ""
    annotator: str | None = None
    annotators: list[str] = field(default_factory=list)
    strict: bool = False
    mood_vocab: str | None = None
    store: str | None = None
    variation_default: str | None = None

    def has_multiple_annotators(self) -> bool:
        """True if ``schema::annotators`` lists annotators."""
        return bool(self.annotators)

    def all_annotators(self) -> list[str]:
        """The effective annotator list, single or multiple."""
        if self.annotators:
            return list(self.annotators)
        return [self.annotator] if self.annotator is not None else []

    def validate(self) -> None:
        """Raise CompileError if a mandatory schema field is missing."""
        if not self.root:
            raise CompileError.msg("schema::root is required")
        if not self.lang:
            raise CompileError.msg("schema::lang is required")