"""Tests for tone parsing, tone mark placement and tone colors."""

from __future__ import annotations

import unittest

from tonecolor.tones import (
    TONE_MARKS,
    add_tone_mark,
    color_for,
    parse_romanization,
    render_syllable,
    to_numeric,
)
from tonecolor.types import DiacriticResult, ParsedSyllable, ToneColorConfig


class TestParseRomanization(unittest.TestCase):
    """Tests for splitting numeric pinyin into base and tone."""

    def test_toned(self) -> None:
        self.assertEqual(parse_romanization("ni3"), ParsedSyllable("ni", 3))
        self.assertEqual(parse_romanization("zhong1"), ParsedSyllable("zhong", 1))
        self.assertEqual(parse_romanization("lü4"), ParsedSyllable("lü", 4))
        self.assertEqual(parse_romanization("NV3"), ParsedSyllable("NV", 3))

    def test_no_digit_is_neutral(self) -> None:
        self.assertEqual(parse_romanization("de"), ParsedSyllable("de", 0))

    def test_digit_outside_range_is_neutral(self) -> None:
        """Test 0 and 5-9 keep the base but drop to neutral."""
        self.assertEqual(parse_romanization("ma0"), ParsedSyllable("ma", 0))
        self.assertEqual(parse_romanization("ma5"), ParsedSyllable("ma", 0))

    def test_unparseable_kept_verbatim(self) -> None:
        """Test anything not shaped like letters+digit comes back whole."""
        for s in ["zhong12", "ni 3", "3ni", "", "中", "ma٣", "ná"]:
            self.assertEqual(parse_romanization(s), ParsedSyllable(s, 0), s)


class TestAddToneMark(unittest.TestCase):
    """Tests for placing the diacritic on the right vowel."""

    def test_a_before_o(self) -> None:
        self.assertEqual(add_tone_mark("hao", 3), "hǎo")

    def test_rightmost_of_i_u(self) -> None:
        """Test iu / ui mark the second vowel."""
        self.assertEqual(add_tone_mark("liu", 2), "liú")
        self.assertEqual(add_tone_mark("gui", 4), "guì")

    def test_e_and_o(self) -> None:
        self.assertEqual(add_tone_mark("mei", 2), "méi")
        self.assertEqual(add_tone_mark("dou", 4), "dòu")
        self.assertEqual(add_tone_mark("xiong", 1), "xiōng")
        self.assertEqual(add_tone_mark("lüe", 4), "lüè")

    def test_o_before_e(self) -> None:
        """Test priority order is a, A, o, O, e, E regardless of position."""
        self.assertEqual(add_tone_mark("eo", 1), "eō")

    def test_umlaut(self) -> None:
        self.assertEqual(add_tone_mark("lü", 3), "lǚ")
        self.assertEqual(add_tone_mark("NÜ", 3), "NǙ")

    def test_uppercase(self) -> None:
        self.assertEqual(add_tone_mark("HAO", 3), "HǍO")
        self.assertEqual(add_tone_mark("Ai", 4), "Ài")
        self.assertEqual(add_tone_mark("LIU", 2), "LIÚ")

    def test_all_four_tones(self) -> None:
        self.assertEqual([add_tone_mark("ma", t) for t in (1, 2, 3, 4)], ["mā", "má", "mǎ", "mà"])

    def test_neutral_or_out_of_range_is_noop(self) -> None:
        for tone in (0, 5, -1, 9):
            self.assertEqual(add_tone_mark("hao", tone), "hao")

    def test_no_vowel(self) -> None:
        self.assertEqual(add_tone_mark("ng", 2), "ng")
        self.assertEqual(add_tone_mark("hm", 4), "hm")
        self.assertEqual(add_tone_mark("", 1), "")

    def test_single_substitution(self) -> None:
        """Test exactly one letter changes, and it is a table vowel."""
        for base in ["hao", "liu", "gui", "zhuang", "xue", "lüe", "er", "yi", "wu", "nü"]:
            for tone in (1, 2, 3, 4):
                out = add_tone_mark(base, tone)
                self.assertEqual(len(out), len(base))
                diffs = [i for i, (a, b) in enumerate(zip(base, out)) if a != b]
                self.assertEqual(len(diffs), 1, f"{base}{tone}")
                i = diffs[0]
                self.assertEqual(out[i], TONE_MARKS[base[i]][tone - 1])


class TestColorFor(unittest.TestCase):
    """Tests for tone -> color lookup."""

    def setUp(self) -> None:
        self.config = ToneColorConfig(tone1="c1", tone2="c2", tone3="c3", tone4="c4", tone0="c0")

    def test_tones(self) -> None:
        self.assertEqual([color_for(t, self.config) for t in (1, 2, 3, 4)], ["c1", "c2", "c3", "c4"])

    def test_neutral_and_out_of_range(self) -> None:
        for tone in (0, 5, -1, 100):
            self.assertEqual(color_for(tone, self.config), "c0")

    def test_defaults(self) -> None:
        cfg = ToneColorConfig()
        self.assertEqual(
            [color_for(t, cfg) for t in (1, 2, 3, 4, 0)],
            ["blue", "green", "black", "red", "gray"],
        )


class TestRenderSyllable(unittest.TestCase):
    """Tests for the parse + mark combination."""

    def test_ma_colors(self) -> None:
        cfg = ToneColorConfig()
        colors = [color_for(render_syllable(f"ma{t}").color_tone, cfg) for t in (1, 2, 3, 4)]
        self.assertEqual(colors, [cfg.tone1, cfg.tone2, cfg.tone3, cfg.tone4])
        self.assertEqual(color_for(render_syllable("ma").color_tone, cfg), cfg.tone0)
        self.assertEqual(color_for(render_syllable("ma0").color_tone, cfg), cfg.tone0)

    def test_accented(self) -> None:
        self.assertEqual(render_syllable("wen2"), DiacriticResult("wén", 2))
        self.assertEqual(render_syllable("ma0"), DiacriticResult("ma", 0))

    def test_fallbacks(self) -> None:
        self.assertEqual(render_syllable(""), DiacriticResult("", 0))
        self.assertEqual(render_syllable("zhong12"), DiacriticResult("zhong12", 0))
        self.assertEqual(render_syllable("ng2"), DiacriticResult("ng", 2))


class TestToNumeric(unittest.TestCase):
    """Tests for turning tone-marked pinyin back into numeric form."""

    def test_marked(self) -> None:
        self.assertEqual(to_numeric("zhōng"), "zhong1")
        self.assertEqual(to_numeric("wén"), "wen2")
        self.assertEqual(to_numeric("nǚ"), "nü3")
        self.assertEqual(to_numeric("lǜ"), "lü4")

    def test_neutral(self) -> None:
        self.assertEqual(to_numeric("de"), "de")

    def test_decomposed_marks(self) -> None:
        """Test combining diacritics are composed first."""
        self.assertEqual(to_numeric("zho\u0304ng"), "zhong1")

    def test_syllabic_nasals(self) -> None:
        """Test ń / ň / ǹ / ḿ keep their tone."""
        self.assertEqual(to_numeric("ń"), "n2")
        self.assertEqual(to_numeric("ň"), "n3")
        self.assertEqual(to_numeric("ǹ"), "n4")
        self.assertEqual(to_numeric("ḿ"), "m2")
        self.assertEqual(to_numeric("ńg"), "ng2")
        self.assertEqual(to_numeric("hḿ"), "hm2")

    def test_umlaut_survives(self) -> None:
        """Test removing the tone mark leaves ü intact."""
        self.assertEqual(to_numeric("ǚ"), "ü3")
        self.assertEqual(to_numeric("LǛ"), "LÜ4")

    def test_v_normalized(self) -> None:
        self.assertEqual(to_numeric("lv"), "lü")


if __name__ == "__main__":
    unittest.main()
