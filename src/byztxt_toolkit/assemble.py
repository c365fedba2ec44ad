"""
Verse assembly: colophon split, gematria and display text.
"""
from __future__ import annotations

import re

from .colophon import detect_and_flag_colophon
from .gematria import compute_greek, sum_gematria
from .models import ParsedVerse, VerseRecord, WordRecord
from .tokenizer import parse_utr_text


_SPACE_BEFORE_PUNCT_RE = re.compile(r"\s+([,.;:!?])")


def join_words(texts) -> str:
    """Join word texts with spaces, gluing punctuation to the left."""
    return _SPACE_BEFORE_PUNCT_RE.sub(r"\1", " ".join(texts))


def assemble_verse(book: str, parsed: ParsedVerse) -> VerseRecord:
    """Build the output record of one verse.

    Verse gematria only counts words outside the colophon.
    """
    words, colophon = detect_and_flag_colophon(parsed.words)
    records = tuple(WordRecord(w, compute_greek(w.text)) for w in words)
    totals = sum_gematria(r.gematria for r in records if not r.word.colophon)

    return VerseRecord(
        book=book,
        chapter=parsed.chapter,
        verse=parsed.verse,
        text=join_words(w.text for w in words),
        words=records,
        gematria=totals,
        colophon=colophon,
    )


def assemble_book(book: str, content: str, lemma_prefix: str = "G",
                  morph_scheme: str = "robinson") -> list[VerseRecord]:
    """Parse and assemble every verse of one book."""
    verses = parse_utr_text(content, lemma_prefix=lemma_prefix,
                            morph_scheme=morph_scheme)
    return [assemble_verse(book, v) for v in verses]
