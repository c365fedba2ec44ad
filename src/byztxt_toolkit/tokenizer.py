"""
Parser for byztxt .UTR files.

A UTR file is a whitespace-separated token stream:

    1:1 biblov 976 {N-NSF} genesewv 1078 {N-GSF} ihsou 2424 {N-GSM} ...

  - `<chapter>:<verse>` starts a new verse
  - any other non-numeric token is a word (Latin-encoded Greek)
  - a word may be followed by its Strong's number, an optional second
    number (parsing number, ignored) and a Robinson tag in braces

Some files carry a Strong's number with no word before it, e.g.
1 Corinthians 2:13:

    pneumatikoiv 4152 {A-DPN} 4152 {A-DPM} pneumatika 4152 {A-APN}

Such bare numbers (and the tag right after them) are dropped.
"""
from __future__ import annotations

import re

from .models import ParsedVerse, ParsedWord
from .transliterate import transliterate_to_greek


VERSE_RE = re.compile(r"^(\d+):(\d+)$", re.ASCII)
NUMBER_RE = re.compile(r"^\d+$", re.ASCII)

BOM = "\ufeff"

TAG_OPEN = "{"
TAG_CLOSE = "}"


def tokenize(content: str) -> list[str]:
    """Split on runs of whitespace, dropping empty tokens.

    A byte-order mark counts as whitespace.
    """
    return content.replace(BOM, " ").split()


def _is_number(token: str) -> bool:
    return NUMBER_RE.match(token) is not None


def _is_tag(token: str) -> bool:
    return token.startswith(TAG_OPEN)


def _strip_tag(token: str) -> str:
    return token.replace(TAG_OPEN, "").replace(TAG_CLOSE, "")


def parse_utr_text(content: str, lemma_prefix: str = "G",
                   morph_scheme: str = "robinson") -> list[ParsedVerse]:
    """Parse the text of one book into verses.

    Verses without words are dropped, as are words seen before the
    first verse marker. Chapter/verse numbers are taken as they come,
    with no range or ordering checks.
    """
    tokens = tokenize(content)
    verses = []

    chapter = None
    verse = None
    words = []
    pos = 1

    def flush():
        if chapter is not None and verse is not None and words:
            verses.append(ParsedVerse(chapter, verse, tuple(words)))

    i = 0
    n = len(tokens)
    while i < n:
        tok = tokens[i]

        m = VERSE_RE.match(tok)
        if m:
            flush()
            chapter = int(m.group(1))
            verse = int(m.group(2))
            words = []
            pos = 1
            i += 1
            continue

        # Bare Strong's number: skip it and its tag, if any
        if _is_number(tok):
            if i + 1 < n and _is_tag(tokens[i + 1]):
                i += 2
            else:
                i += 1
            continue

        raw = tok
        i += 1

        strongs = None
        if i < n and _is_number(tokens[i]):
            strongs = f"{lemma_prefix}{tokens[i]}"
            i += 1
            # parsing number
            if i < n and _is_number(tokens[i]):
                i += 1

        morph = None
        if i < n and _is_tag(tokens[i]):
            morph = f"{morph_scheme}:{_strip_tag(tokens[i])}"
            i += 1

        if chapter is None:
            continue

        words.append(ParsedWord(
            position=pos,
            text=transliterate_to_greek(raw),
            lemma=(strongs,) if strongs else None,
            strongs=strongs,
            morph=morph,
        ))
        pos += 1

    flush()
    return verses
