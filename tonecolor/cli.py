from __future__ import annotations

import argparse
import json
import re
import sys
from dataclasses import replace
from pathlib import Path

from .config import (
    SettingsError,
    load_tone_colors,
    merge_tone_colors,
    parse_color_assignment,
    save_tone_colors,
)
from .core import AnnotateOptions
from .render import annotations_to_json, render_html, render_lines
from .romanizer import CharTableRomanizer, PypinyinRomanizer
from .types import ToneColorConfig
from .view import AnnotatedView


_VIEWPORT_RE = re.compile(r"^(\d+):(\d+)$")

_COLOR_PROMPTS = (
    ("tone1", "Tone 1 Color", "Color for first tone"),
    ("tone2", "Tone 2 Color", "Color for second tone"),
    ("tone3", "Tone 3 Color", "Color for third tone"),
    ("tone4", "Tone 4 Color", "Color for fourth tone"),
    ("tone0", "Neutral Tone Color", "Color for neutral/no tone"),
)


def _parse_viewport(s: str) -> tuple[int, int]:
    m = _VIEWPORT_RE.match(s.strip())
    if not m:
        raise argparse.ArgumentTypeError(f"expected FROM:TO, got {s!r}")
    start, end = int(m.group(1)), int(m.group(2))
    if end < start:
        raise argparse.ArgumentTypeError(f"viewport end before start: {s!r}")
    return start, end


def _prompt_colors(config: ToneColorConfig) -> ToneColorConfig:
    current = config.as_dict()
    picked: dict[str, str] = {}
    for key, name, desc in _COLOR_PROMPTS:
        s = input(f"{name} ({desc}) [{current[key]}]: ").strip()
        if s:
            picked[key] = s
    return merge_tone_colors(config, picked)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tonecolor")
    parser.add_argument("text", nargs="?", help="Input text. If omitted, read from stdin.")
    parser.add_argument("--settings", default="data.json", help="Tone color settings JSON (created with defaults if missing).")
    parser.add_argument("--format", choices=["text", "json", "html"], default="text", help="Output format.")
    parser.add_argument("--viewport", type=_parse_viewport, default=None, help="Only annotate FROM:TO (UTF-16 offsets).")
    parser.add_argument("--romanizer", choices=["pypinyin", "table"], default="pypinyin", help="Pinyin source.")
    parser.add_argument("--char-table", default=None, help="Char table JSON for --romanizer table.")
    parser.add_argument("--set", dest="assignments", action="append", default=[], metavar="toneN=COLOR", help="Override one tone color (repeatable).")
    parser.add_argument("--edit-colors", action="store_true", help="Prompt for each tone color and save the settings.")
    parser.add_argument("--report", default=None, help="Write report JSON to this path.")
    parser.add_argument("--debug", action="store_true", help="Print intermediate processing steps.")
    args = parser.parse_args(argv)

    if args.romanizer == "table" and not args.char_table:
        parser.error("--romanizer table requires --char-table")

    settings_path = Path(args.settings)
    try:
        colors = load_tone_colors(settings_path)
        for assignment in args.assignments:
            key, value = parse_color_assignment(assignment)
            colors = replace(colors, **{key: value})
    except SettingsError as e:
        print(f"tonecolor: {e}", file=sys.stderr)
        return 2

    if args.edit_colors:
        colors = _prompt_colors(colors)
        try:
            save_tone_colors(settings_path, colors)
        except SettingsError as e:
            print(f"tonecolor: {e}", file=sys.stderr)
            return 2
        print(f"wrote settings: {settings_path}")
        if args.text is None:
            return 0

    if args.romanizer == "table":
        romanizer = CharTableRomanizer.load(args.char_table)
    else:
        romanizer = PypinyinRomanizer()

    text = args.text
    if text is None:
        text = sys.stdin.read()

    opts = AnnotateOptions(colors=colors, romanizer=romanizer, debug=args.debug)
    view = AnnotatedView(text, args.viewport, opts)

    if args.format == "html":
        out = render_html(view.content, view.annotations)
    elif args.format == "json":
        out = json.dumps(annotations_to_json(view.content, view.annotations), ensure_ascii=False, indent=2)
    else:
        out = render_lines(view.content, view.annotations)

    sys.stdout.write(out)
    if not out.endswith("\n"):
        sys.stdout.write("\n")

    if args.report:
        start, end = view.viewport
        report = {
            "schema_version": 1,
            "text": text,
            "viewport": {"start": start, "end": end},
            "settings": colors.as_dict(),
            "annotations": annotations_to_json(view.content, view.annotations),
        }
        Path(args.report).write_text(
            json.dumps(report, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
