from __future__ import annotations

import re
import unicodedata

from .types import DiacriticResult, ParsedSyllable, ToneColorConfig
from .util import normalize_pinyin


# tone 1..4 = macron, acute, caron, grave
TONE_MARKS: dict[str, str] = {
    "a": "āáǎà",
    "e": "ēéěè",
    "i": "īíǐì",
    "o": "ōóǒò",
    "u": "ūúǔù",
    "ü": "ǖǘǚǜ",
    "A": "ĀÁǍÀ",
    "E": "ĒÉĚÈ",
    "I": "ĪÍǏÌ",
    "O": "ŌÓǑÒ",
    "U": "ŪÚǓÙ",
    "Ü": "ǕǗǙǛ",
}

# combining macron, acute, caron, grave
_COMBINING_TONES: dict[str, int] = {"\u0304": 1, "\u0301": 2, "\u030c": 3, "\u0300": 4}

_PRIMARY_VOWELS = ("a", "A", "o", "O", "e", "E")
_SECONDARY_VOWELS = frozenset("iIuUüÜ")

_ROMANIZATION_RE = re.compile(r"([a-zA-ZüÜ]+)([0-9])?")


def parse_romanization(romanization: str) -> ParsedSyllable:
    m = _ROMANIZATION_RE.fullmatch(romanization)
    if not m:
        return ParsedSyllable(base=romanization, tone=0)
    base, digit = m.group(1), m.group(2)
    tone = int(digit) if digit else 0
    if not 1 <= tone <= 4:
        tone = 0
    return ParsedSyllable(base=base, tone=tone)


def _mark_index(syllable: str) -> int:
    for v in _PRIMARY_VOWELS:
        idx = syllable.find(v)
        if idx != -1:
            return idx
    # iu / ui: the second vowel carries the mark.
    for idx in range(len(syllable) - 1, -1, -1):
        if syllable[idx] in _SECONDARY_VOWELS:
            return idx
    return -1


def add_tone_mark(syllable: str, tone: int) -> str:
    if not 1 <= tone <= 4:
        return syllable
    idx = _mark_index(syllable)
    if idx == -1:
        return syllable
    marked = TONE_MARKS[syllable[idx]][tone - 1]
    return syllable[:idx] + marked + syllable[idx + 1 :]


def render_syllable(romanization: str) -> DiacriticResult:
    parsed = parse_romanization(romanization)
    return DiacriticResult(
        accented=add_tone_mark(parsed.base, parsed.tone),
        color_tone=parsed.tone,
    )


def color_for(tone: int, config: ToneColorConfig) -> str:
    if tone == 1:
        return config.tone1
    if tone == 2:
        return config.tone2
    if tone == 3:
        return config.tone3
    if tone == 4:
        return config.tone4
    return config.tone0


def to_numeric(pinyin: str) -> str:
    """Convert a tone-marked syllable ("zhōng") to numeric form ("zhong1").

    Marks are read off the decomposed form, so syllabic nasals ("ń", "ḿ")
    work like vowels. Syllables without a mark are returned bare, which
    parses as neutral.
    """
    out: list[str] = []
    tone = 0
    for ch in unicodedata.normalize("NFD", normalize_pinyin(pinyin)):
        t = _COMBINING_TONES.get(ch)
        if t is None:
            out.append(ch)
            continue
        if not tone:
            tone = t
    # Recompose what is left, e.g. u + diaeresis -> ü.
    base = unicodedata.normalize("NFC", "".join(out))
    return f"{base}{tone}" if tone else base
