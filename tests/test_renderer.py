import os
import sys
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from obadhlib.phonetic import segment_word
from obadhlib.renderer import render, render_unit
from obadhlib.tokens import PhoneticUnit, UnitKind

YA = "\u09af\u09bc"


def word(text):
    return render(segment_word(text))


class TestRenderUnit(unittest.TestCase):
    def test_consonant_sets_flag(self):
        self.assertEqual(render_unit(PhoneticUnit("k", UnitKind.CONSONANT, 0), False), ("ক", True))

    def test_vowel_forms(self):
        unit = PhoneticUnit("i", UnitKind.VOWEL, 1)
        self.assertEqual(render_unit(unit, True), ("ি", False))
        self.assertEqual(render_unit(unit, False), ("ই", False))

    def test_inherent_vowel(self):
        unit = PhoneticUnit("o", UnitKind.TERMINATING_VOWEL, 1)
        self.assertEqual(render_unit(unit, True), ("", False))
        self.assertEqual(render_unit(unit, False), ("অ", False))

    def test_fola(self):
        unit = PhoneticUnit("y", UnitKind.UNKNOWN, 1)
        self.assertEqual(render_unit(unit, True), ("্য", True))
        self.assertEqual(render_unit(unit, False), ("y", False))

    def test_hasant_at_word_start_passes_through(self):
        unit = PhoneticUnit(",,", UnitKind.CONSONANT_WITH_HASANT, 0)
        self.assertEqual(render_unit(unit, False), (",,", False))
        unit = PhoneticUnit(",,", UnitKind.CONSONANT_WITH_HASANT, 1)
        self.assertEqual(render_unit(unit, True), ("্", False))

    def test_malformed_conjuncts_pass_through(self):
        self.assertEqual(render_unit(PhoneticUnit("k", UnitKind.CONJUNCT, 0), False), ("k", False))
        self.assertEqual(render_unit(PhoneticUnit("q,,k", UnitKind.CONJUNCT, 0), False),
                         ("q,,k", False))

    def test_special_form(self):
        self.assertEqual(render_unit(PhoneticUnit("kkh", UnitKind.SPECIAL_FORM, 0), False),
                         ("ক্ষ", True))
        self.assertEqual(render_unit(PhoneticUnit("ng", UnitKind.SPECIAL_FORM, 2), True),
                         ("ং", False))

    def test_numeral_and_symbol(self):
        self.assertEqual(render_unit(PhoneticUnit("42", UnitKind.NUMERAL, 0), False), ("৪২", False))
        self.assertEqual(render_unit(PhoneticUnit(".", UnitKind.SYMBOL, 0), False), ("।", False))


class TestRender(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(render([]), "")

    def test_consonants_and_vowels(self):
        self.assertEqual(word("k"), "ক")
        self.assertEqual(word("o"), "অ")
        self.assertEqual(word("rri"), "ঋ")
        self.assertEqual(word("ami"), "আমি")
        self.assertEqual(word("bhalO"), "ভালো")
        self.assertEqual(word("bhalo"), "ভাল")

    def test_conjuncts(self):
        expected = {
            "kt": "ক্ত",
            "pr": "প্র",
            "st": "স্ত",
            "dm": "দ্ম",
            "nd": "ন্দ",
            "lp": "ল্প",
            "ksh": "ক্ষ",
            "kk": "ক্ক",
            "n,,d,,r": "ন্দ্র",
            "n,,d,,rA": "ন্দ্রা",
        }
        for roman, bengali in expected.items():
            self.assertEqual(word(roman), bengali, roman)

    def test_terminator(self):
        self.assertEqual(word("kok"), "কক")
        self.assertEqual(word("kOk"), "কোক")
        self.assertEqual(word("kOnnO"), "কোন্নো")

    def test_reph(self):
        self.assertEqual(word("rm"), "র্ম")
        self.assertEqual(word("rrk"), "র্ক")
        self.assertEqual(word("rrka"), "র্কা")
        self.assertEqual(word("korrmo"), "কর্ম")
        self.assertEqual(word("sUrrjo"), "সূর্জ")
        self.assertEqual(word("rrkk"), "র্ক্ক")
        self.assertEqual(word("rrkka"), "র্ক্কা")

    def test_vocalic_r(self):
        self.assertEqual(word("krri"), "কৃ")

    def test_folas(self):
        self.assertEqual(word("by"), "ব্য")
        self.assertEqual(word("bya"), "ব্যা")
        self.assertEqual(word("d,,w"), "দ্ব")
        self.assertEqual(word("dwip"), "দ্বিপ")
        self.assertEqual(word("bishwo"), "বিশ্ব")

    def test_antastha_ya(self):
        self.assertEqual(word("biddaloy"), "বিদ্দাল" + YA)

    def test_diacritics(self):
        self.assertEqual(word("bangla"), "বাংলা")
        self.assertEqual(word("du:kh"), "দুঃখ")
        self.assertEqual(word("cha^d"), "ছাঁদ")
        self.assertEqual(word("a^"), "আঁ")
        self.assertEqual(word("ka^"), "কাঁ")
        self.assertEqual(word("shikkha"), "শিক্ষা")

    def test_khanda_ta(self):
        self.assertEqual(word("t``"), "ৎ")
        self.assertEqual(word("T``"), "ৎ")
        self.assertEqual(word("tat``"), "তাৎ")

    def test_hasant(self):
        self.assertEqual(word("k,,"), "ক্")
        self.assertEqual(word(",,k"), ",,ক")

    def test_unknown_passes_through(self):
        self.assertEqual(word("kxk"), "কxক")
        self.assertEqual(word("ami☺tumi"), "আমি☺তুমি")
        # Letters outside every key keep their case
        self.assertEqual(word("X"), "X")
        self.assertEqual(word("Kk"), "Kক")


if __name__ == '__main__':
    unittest.main()
