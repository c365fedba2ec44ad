"""
Latin → Greek transliteration for the byztxt encoding.

The byztxt files write Greek with one Latin letter per Greek letter.
Lookup is context-free except for the sigma: `v` is always the
word-final form ς, `s` the general form σ.
"""

LATIN_TO_GREEK = {
    'a': 'α', 'b': 'β', 'g': 'γ', 'd': 'δ', 'e': 'ε', 'z': 'ζ',
    'h': 'η', 'q': 'θ', 'i': 'ι', 'k': 'κ', 'l': 'λ', 'm': 'μ',
    'n': 'ν', 'j': 'ξ', 'o': 'ο', 'p': 'π', 'r': 'ρ', 's': 'σ',
    't': 'τ', 'u': 'υ', 'f': 'φ', 'c': 'χ', 'y': 'ψ', 'w': 'ω',
    'v': 'ς',   # final sigma
    'A': 'Α', 'B': 'Β', 'G': 'Γ', 'D': 'Δ', 'E': 'Ε', 'Z': 'Ζ',
    'H': 'Η', 'Q': 'Θ', 'I': 'Ι', 'K': 'Κ', 'L': 'Λ', 'M': 'Μ',
    'N': 'Ν', 'J': 'Ξ', 'O': 'Ο', 'P': 'Π', 'R': 'Ρ', 'S': 'Σ',
    'T': 'Τ', 'U': 'Υ', 'F': 'Φ', 'C': 'Χ', 'Y': 'Ψ', 'W': 'Ω',
    'V': 'Σ',   # final sigma, upper case has a single glyph
}


def transliterate_to_greek(text: str) -> str:
    """Map each Latin letter to Greek; anything unmapped passes through."""
    return "".join(LATIN_TO_GREEK.get(ch, ch) for ch in text)
