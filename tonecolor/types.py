from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from .util import utf16_units


ToneKey = Literal["tone1", "tone2", "tone3", "tone4", "tone0"]

# romanize(char) -> numeric pinyin such as "ni3", or "" when unknown.
Romanizer = Callable[[str], str]


@dataclass(frozen=True)
class ToneColorConfig:
    tone1: str = "blue"
    tone2: str = "green"
    tone3: str = "black"
    tone4: str = "red"
    tone0: str = "gray"

    def as_dict(self) -> dict[str, str]:
        return {
            "tone1": self.tone1,
            "tone2": self.tone2,
            "tone3": self.tone3,
            "tone4": self.tone4,
            "tone0": self.tone0,
        }


@dataclass(frozen=True)
class ParsedSyllable:
    base: str
    tone: int


@dataclass(frozen=True)
class DiacriticResult:
    accented: str
    color_tone: int


@dataclass(frozen=True)
class Annotation:
    start: int
    end: int
    color: str
    tooltip: str


@dataclass(frozen=True)
class TextRange:
    """A half-open window over a buffer of UTF-16 code units.

    ``content`` holds one string element per code unit, so characters above
    U+FFFF appear as a surrogate pair and count twice, like offsets in a
    browser-based editor. Use :meth:`of` to build one from ordinary text.
    """

    content: str
    start: int
    end: int

    @staticmethod
    def of(text: str, start: int = 0, end: int | None = None) -> "TextRange":
        units = utf16_units(text)
        return TextRange(content=units, start=start, end=len(units) if end is None else end)
