"""
Colophon detection.

Some books end with a scribal subscription appended after the last
verse, written as a pipe followed by a bracketed span:

    ... amhn | [proV ... egrafh apo ...]

Words inside the brackets are flagged as colophon words so that verse
totals can leave them out. Pipes are removed and bracket characters
stripped from word text. A pipe without a complete bracketed span
after it only loses the pipe.
"""
from __future__ import annotations

import dataclasses
from typing import Sequence

from .models import COLOPHON_SUBSCRIPTION, ColophonInfo, ParsedWord


DELIMITER = "|"
BRACKET_OPEN = "["
BRACKET_CLOSE = "]"


def _find(words, start, predicate):
    for i in range(start, len(words)):
        if predicate(words[i].text):
            return i
    return -1


def _strip_brackets(text: str) -> str:
    return text.replace(BRACKET_OPEN, "").replace(BRACKET_CLOSE, "")


def _renumber(words):
    return tuple(dataclasses.replace(w, position=idx)
                 for idx, w in enumerate(words, start=1))


def detect_and_flag_colophon(
    words: Sequence[ParsedWord],
) -> tuple[tuple[ParsedWord, ...], ColophonInfo | None]:
    """Split a verse's words into text and trailing subscription.

    Returns the rewritten words (positions 1..N) and the colophon's
    output word range, or None when no bracketed span follows a pipe.
    """
    words = tuple(words)
    if not words:
        return (), None

    pipe_index = _find(words, 0, lambda t: t == DELIMITER)
    if pipe_index == -1:
        return words, None

    bracket_start = _find(words, pipe_index + 1,
                          lambda t: t.startswith(BRACKET_OPEN))
    bracket_end = -1
    if bracket_start != -1:
        bracket_end = _find(words, bracket_start,
                            lambda t: BRACKET_CLOSE in t)

    if bracket_end == -1:
        return _renumber(w for w in words if w.text != DELIMITER), None

    result = []
    colophon_start = None
    colophon_end = None

    for i, word in enumerate(words):
        if word.text == DELIMITER:
            continue

        changes = {"text": _strip_brackets(word.text)}
        if bracket_start <= i <= bracket_end:
            changes["colophon"] = True
            changes["colophon_type"] = COLOPHON_SUBSCRIPTION
            if colophon_start is None:
                colophon_start = len(result) + 1

        result.append(dataclasses.replace(word, **changes))

        if i == bracket_end:
            colophon_end = len(result)

    return _renumber(result), ColophonInfo(colophon_start, colophon_end)
