#!/usr/bin/env python3
import unittest

from byztxt_toolkit.gematria import (
    GREEK_VALUES,
    compute_greek,
    digital_root,
    sum_gematria,
)


class OrdinalTests(unittest.TestCase):
    def test_uses_alphabet_position_not_index_in_word(self):
        # λ=11, ο=15, γ=3, ο=15, ς=18
        self.assertEqual(compute_greek("λογος")["ordinal"], 62)

    def test_single_letters(self):
        self.assertEqual(compute_greek("α")["ordinal"], 1)
        self.assertEqual(compute_greek("β")["ordinal"], 2)
        self.assertEqual(compute_greek("ω")["ordinal"], 24)

    def test_theos(self):
        self.assertEqual(compute_greek("θεος")["ordinal"], 46)

    def test_ordinals_cover_the_alphabet(self):
        ordinals = {ordinal for _, ordinal in GREEK_VALUES.values()}
        self.assertEqual(ordinals, set(range(1, 25)))


class FinalSigmaTests(unittest.TestCase):
    def test_final_sigma_equals_sigma(self):
        self.assertEqual(GREEK_VALUES["σ"], GREEK_VALUES["ς"])
        self.assertEqual(compute_greek("σ"), compute_greek("ς"))
        self.assertEqual(compute_greek("ς")["ordinal"], 18)
        self.assertEqual(compute_greek("ς")["standard"], 200)


class StandardAndReducedTests(unittest.TestCase):
    def test_standard_logos(self):
        # 30 + 70 + 3 + 70 + 200
        self.assertEqual(compute_greek("λογος")["standard"], 373)

    def test_reduced_logos(self):
        # 3 + 7 + 3 + 7 + 2
        self.assertEqual(compute_greek("λογος")["reduced"], 22)

    def test_reduced_is_per_letter(self):
        # ι=10 → 1, ω=800 → 8
        self.assertEqual(compute_greek("ιω")["reduced"], 9)

    def test_digital_root(self):
        self.assertEqual(digital_root(0), 0)
        self.assertEqual(digital_root(7), 7)
        self.assertEqual(digital_root(10), 1)
        self.assertEqual(digital_root(99), 9)
        self.assertEqual(digital_root(373), 4)
        self.assertEqual(digital_root(800), 8)


class NormalisationTests(unittest.TestCase):
    def test_case_insensitive(self):
        self.assertEqual(compute_greek("λογος"), compute_greek("ΛΟΓΟΣ"))
        self.assertEqual(compute_greek("Ιησους"), compute_greek("ιησους"))

    def test_punctuation_and_whitespace_ignored(self):
        plain = compute_greek("λογος")
        self.assertEqual(compute_greek("λογος,"), plain)
        self.assertEqual(compute_greek(" λο γος. "), plain)
        self.assertEqual(compute_greek("[λογος]"), plain)

    def test_unknown_characters_contribute_zero(self):
        self.assertEqual(compute_greek("abc 123 |"),
                         {"standard": 0, "ordinal": 0, "reduced": 0})
        self.assertEqual(compute_greek(""),
                         {"standard": 0, "ordinal": 0, "reduced": 0})


class SumTests(unittest.TestCase):
    def test_sum_gematria(self):
        totals = sum_gematria([compute_greek("εν"), compute_greek("αρχη")])
        self.assertEqual(totals, compute_greek("εναρχη"))

    def test_sum_of_nothing_is_zero(self):
        self.assertEqual(sum_gematria([]),
                         {"standard": 0, "ordinal": 0, "reduced": 0})


if __name__ == "__main__":
    unittest.main()
