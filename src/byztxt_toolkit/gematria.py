"""
Greek gematria (isopsephy): standard, ordinal and reduced values.

  - standard: classical letter value (α=1 ... ω=800)
  - ordinal:  position of the letter in the 24-letter alphabet
  - reduced:  digital root of the standard value, per letter

Final sigma ς is its own table entry with the same values as σ.
"""
from __future__ import annotations

from typing import Iterable


GEMATRIA_METHODS = ("standard", "ordinal", "reduced")

# char -> (standard, ordinal)
GREEK_VALUES: dict[str, tuple[int, int]] = {
    'α': (1, 1),
    'β': (2, 2),
    'γ': (3, 3),
    'δ': (4, 4),
    'ε': (5, 5),
    'ζ': (7, 6),
    'η': (8, 7),
    'θ': (9, 8),
    'ι': (10, 9),
    'κ': (20, 10),
    'λ': (30, 11),
    'μ': (40, 12),
    'ν': (50, 13),
    'ξ': (60, 14),
    'ο': (70, 15),
    'π': (80, 16),
    'ρ': (100, 17),
    'σ': (200, 18),
    'ς': (200, 18),
    'τ': (300, 19),
    'υ': (400, 20),
    'φ': (500, 21),
    'χ': (600, 22),
    'ψ': (700, 23),
    'ω': (800, 24),
}


def digital_root(n: int) -> int:
    """Sum decimal digits repeatedly until a single digit remains."""
    while n > 9:
        n = sum(int(d) for d in str(n))
    return n


def compute_greek(text: str) -> dict[str, int]:
    """Compute the three gematria metrics of a Greek string.

    Case-insensitive; punctuation, whitespace and non-Greek characters
    contribute nothing.
    """
    standard = ordinal = reduced = 0
    for ch in text.casefold():
        values = GREEK_VALUES.get(ch)
        if values is None:
            continue
        value, position = values
        standard += value
        ordinal += position
        reduced += digital_root(value)
    return {"standard": standard, "ordinal": ordinal, "reduced": reduced}


def sum_gematria(values: Iterable[dict[str, int]]) -> dict[str, int]:
    """Add up per-word gematria maps, method by method."""
    totals = {method: 0 for method in GEMATRIA_METHODS}
    for v in values:
        for method in GEMATRIA_METHODS:
            totals[method] += v.get(method, 0)
    return totals
