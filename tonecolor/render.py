from __future__ import annotations

import html
from typing import Any, Iterable

from .types import Annotation
from .util import from_utf16_units


def render_html(content: str, annotations: Iterable[Annotation]) -> str:
    """Mark up ``content`` (UTF-16 units) with one colored span per annotation.

    Annotations must be sorted and non-overlapping, as the builder emits them.
    """
    out_parts: list[str] = []
    cursor = 0
    for a in annotations:
        if a.start > cursor:
            out_parts.append(html.escape(from_utf16_units(content[cursor : a.start])))
        text = html.escape(from_utf16_units(content[a.start : a.end]))
        style = html.escape(f"color:{a.color};", quote=True)
        title = html.escape(a.tooltip, quote=True)
        out_parts.append(f'<span style="{style}" title="{title}">{text}</span>')
        cursor = a.end
    if cursor < len(content):
        out_parts.append(html.escape(from_utf16_units(content[cursor:])))
    return "".join(out_parts)


def annotations_to_json(content: str, annotations: Iterable[Annotation]) -> list[dict[str, Any]]:
    return [
        {
            "start": a.start,
            "end": a.end,
            "text": from_utf16_units(content[a.start : a.end]),
            "color": a.color,
            "tooltip": a.tooltip,
        }
        for a in annotations
    ]


def render_lines(content: str, annotations: Iterable[Annotation]) -> str:
    lines = [
        f"{a.start}\t{a.end}\t{from_utf16_units(content[a.start : a.end])}\t{a.tooltip}\t{a.color}"
        for a in annotations
    ]
    return "\n".join(lines)
