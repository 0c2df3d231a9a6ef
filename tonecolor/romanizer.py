from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pypinyin import Style, lazy_pinyin

from .tones import to_numeric
from .util import is_han, normalize_pinyin


@dataclass(frozen=True)
class PypinyinRomanizer:
    """Numeric-toned pinyin for one character via pypinyin ("中" -> "zhong1")."""

    def __call__(self, char: str) -> str:
        syllables = lazy_pinyin(char, style=Style.TONE3, v_to_u=True, errors="ignore")
        return syllables[0] if syllables else ""


def _load_char_table(path: Path) -> dict[str, str]:
    out: dict[str, str] = {}
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            s = line.strip()
            if not s or s == "[" or s == "]":
                continue
            if s.endswith(","):
                s = s[:-1]
            obj = json.loads(s)
            if not isinstance(obj, dict):
                continue
            ch = obj.get("char")
            pinyin = obj.get("pinyin")
            if isinstance(pinyin, str):
                pinyin = [pinyin]
            if not isinstance(ch, str) or not is_han(ch):
                continue
            if not isinstance(pinyin, list) or not pinyin or not isinstance(pinyin[0], str):
                continue
            # First listed reading is the default one.
            out.setdefault(ch, to_numeric(normalize_pinyin(pinyin[0])))
    return out


@dataclass(frozen=True)
class CharTableRomanizer:
    table: dict[str, str]

    @staticmethod
    def load(path: str | Path) -> "CharTableRomanizer":
        return CharTableRomanizer(table=_load_char_table(Path(path)))

    def __call__(self, char: str) -> str:
        return self.table.get(char, "")


def default_romanizer() -> PypinyinRomanizer:
    return PypinyinRomanizer()
