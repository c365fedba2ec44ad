"""
Record types produced by the parser and the verse assembler.
"""
from __future__ import annotations

from dataclasses import dataclass, field


COLOPHON_SUBSCRIPTION = "subscription"


@dataclass(frozen=True)
class ParsedWord:
    """One token of running text, already transliterated to Greek."""

    position: int
    text: str
    lemma: tuple[str, ...] | None = None
    strongs: str | None = None
    morph: str | None = None
    colophon: bool = False
    colophon_type: str | None = None

    @property
    def metadata(self) -> dict:
        """Annotation flags as an open key/value map."""
        if not self.colophon:
            return {}
        return {"colophon": True, "colophon_type": self.colophon_type}


@dataclass(frozen=True)
class ParsedVerse:
    chapter: int
    verse: int
    words: tuple[ParsedWord, ...]


@dataclass(frozen=True)
class ColophonInfo:
    """Inclusive 1-based word range of a scribal subscription."""

    start: int
    end: int
    type: str = COLOPHON_SUBSCRIPTION

    @property
    def word_range(self) -> tuple[int, int]:
        return (self.start, self.end)


@dataclass(frozen=True)
class WordRecord:
    word: ParsedWord
    gematria: dict[str, int]

    def to_dict(self) -> dict:
        w = self.word
        entry = {
            "position": w.position,
            "text": w.text,
            "lemma": list(w.lemma) if w.lemma else None,
            "morph": w.morph,
        }
        if w.strongs:
            entry["strongs"] = w.strongs
        entry["metadata"] = w.metadata
        entry["gematria"] = dict(self.gematria)
        return entry


@dataclass(frozen=True)
class VerseRecord:
    """A fully assembled verse, ready to be written out."""

    book: str
    chapter: int
    verse: int
    text: str
    words: tuple[WordRecord, ...]
    gematria: dict[str, int] = field(default_factory=dict)
    colophon: ColophonInfo | None = None

    def to_dict(self) -> dict:
        data = {
            "text": self.text,
            "words": [w.to_dict() for w in self.words],
            "gematria": dict(self.gematria),
        }
        if self.colophon is not None:
            data["metadata"] = {
                "has_colophon": True,
                "colophon_word_range": list(self.colophon.word_range),
                "colophon_type": self.colophon.type,
            }
        return data
