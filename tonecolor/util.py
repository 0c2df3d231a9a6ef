from __future__ import annotations


def is_chinese_char(ch: str) -> bool:
    if len(ch) != 1:
        return False
    # CJK Unified Ideographs only; extensions and compatibility blocks are left unannotated.
    return 0x4E00 <= ord(ch) <= 0x9FFF


def is_han(ch: str) -> bool:
    if len(ch) != 1:
        return False
    cp = ord(ch)
    # CJK Unified Ideographs + extensions + compatibility ideographs.
    return (
        (0x3400 <= cp <= 0x4DBF)
        or (0x4E00 <= cp <= 0x9FFF)
        or (0xF900 <= cp <= 0xFAFF)
        or (0x20000 <= cp <= 0x2A6DF)
        or (0x2A700 <= cp <= 0x2B73F)
        or (0x2B740 <= cp <= 0x2B81F)
        or (0x2B820 <= cp <= 0x2CEAF)
        or (0x2CEB0 <= cp <= 0x2EBEF)
    )


def is_high_surrogate(ch: str) -> bool:
    return 0xD800 <= ord(ch) <= 0xDBFF


def is_low_surrogate(ch: str) -> bool:
    return 0xDC00 <= ord(ch) <= 0xDFFF


def join_surrogates(high: str, low: str) -> str:
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def utf16_units(text: str) -> str:
    """Spell ``text`` as one element per UTF-16 code unit."""
    out: list[str] = []
    for ch in text:
        cp = ord(ch)
        if cp > 0xFFFF:
            cp -= 0x10000
            out.append(chr(0xD800 + (cp >> 10)))
            out.append(chr(0xDC00 + (cp & 0x3FF)))
        else:
            out.append(ch)
    return "".join(out)


def from_utf16_units(units: str) -> str:
    # Lone surrogates (a pair cut at a window edge) come back as U+FFFD.
    return units.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def normalize_pinyin(pinyin: str) -> str:
    # IPA "ɡ" (U+0261) -> "g", and "v" spellings of ü -> ü.
    return pinyin.strip().replace("ɡ", "g").replace("v", "ü").replace("V", "Ü")
