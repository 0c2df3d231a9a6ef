from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .types import TextRange
from .util import is_high_surrogate, is_low_surrogate, join_surrogates


ScannedChar = tuple[int, str, int]


@dataclass(frozen=True)
class CodepointScan:
    """Iterable of ``(position, char, width)`` over ``content[start:end]``.

    ``content`` is in UTF-16 code units. A surrogate pair fully inside the
    window decodes to one character of width 2. Nothing at or past ``end``
    is read, so a pair cut by the window edge yields its high half as a
    width-1 unit. Each ``iter()`` starts a fresh pass.
    """

    content: str
    start: int
    end: int

    def __iter__(self) -> Iterator[ScannedChar]:
        content = self.content
        pos = max(0, self.start)
        end = min(self.end, len(content))
        while pos < end:
            ch = content[pos]
            if is_high_surrogate(ch) and pos + 1 < end and is_low_surrogate(content[pos + 1]):
                yield pos, join_surrogates(ch, content[pos + 1]), 2
                pos += 2
                continue
            yield pos, ch, 1
            pos += 1


def scan(content: str, start: int, end: int) -> CodepointScan:
    return CodepointScan(content=content, start=start, end=end)


def scan_range(text_range: TextRange) -> CodepointScan:
    return scan(text_range.content, text_range.start, text_range.end)
