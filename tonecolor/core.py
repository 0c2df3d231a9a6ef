from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any

from .romanizer import default_romanizer
from .scanner import scan_range
from .tones import color_for, render_syllable
from .types import Annotation, Romanizer, TextRange, ToneColorConfig
from .util import from_utf16_units, is_chinese_char


@dataclass(frozen=True)
class AnnotateOptions:
    colors: ToneColorConfig = ToneColorConfig()
    # None means pypinyin.
    romanizer: Romanizer | None = None
    debug: bool = False


def _debug_step(step_name: str, data: Any) -> None:
    print(f"\n{'='*60}", file=sys.stderr)
    print(f"[DEBUG] {step_name}", file=sys.stderr)
    print(f"{'='*60}", file=sys.stderr)
    if isinstance(data, (list, dict)):
        print(json.dumps(data, ensure_ascii=False, indent=2), file=sys.stderr)
    else:
        print(data, file=sys.stderr)


def _romanize(romanizer: Romanizer, ch: str) -> tuple[str, str | None]:
    """Returns (romanization, error). Unknown characters come back as ""."""
    try:
        value = romanizer(ch)
    except Exception as e:  # noqa: BLE001
        return "", f"romanizer_exception:{e}"
    if not isinstance(value, str):
        return "", f"romanizer_non_string:{type(value).__name__}"
    return value, None


def build_annotations(text_range: TextRange, options: AnnotateOptions) -> list[Annotation]:
    romanizer = options.romanizer or default_romanizer()
    colors = options.colors

    annotations: list[Annotation] = []
    debug_chars: list[dict[str, Any]] = []

    for pos, ch, width in scan_range(text_range):
        if not is_chinese_char(ch):
            continue
        romanization, error = _romanize(romanizer, ch)
        rendered = render_syllable(romanization)
        annotations.append(
            Annotation(
                start=pos,
                end=pos + width,
                color=color_for(rendered.color_tone, colors),
                tooltip=rendered.accented,
            )
        )
        if options.debug:
            debug_chars.append(
                {
                    "pos": pos,
                    "char": ch,
                    "width": width,
                    "romanization": romanization,
                    "tone": rendered.color_tone,
                    "accented": rendered.accented,
                    "error": error,
                }
            )

    if options.debug:
        _debug_step("Step 1: Scan window", {
            "start": text_range.start,
            "end": text_range.end,
            "text": from_utf16_units(text_range.content[text_range.start : text_range.end]),
        })
        _debug_step("Step 2: Romanize + tone marks", debug_chars)
        _debug_step("Step 3: Annotations", [
            {"start": a.start, "end": a.end, "color": a.color, "tooltip": a.tooltip}
            for a in annotations
        ])

    return annotations


def compute_annotations(
    text_range: TextRange,
    colors: ToneColorConfig,
    romanizer: Romanizer | None = None,
) -> list[Annotation]:
    return build_annotations(text_range, AnnotateOptions(colors=colors, romanizer=romanizer))
