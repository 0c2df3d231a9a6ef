from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

from .types import ToneColorConfig


DEFAULT_TONE_COLORS = ToneColorConfig()

TONE_KEYS = ("tone1", "tone2", "tone3", "tone4", "tone0")


class SettingsError(ValueError):
    pass


def merge_tone_colors(base: ToneColorConfig, raw: dict[str, Any]) -> ToneColorConfig:
    """Overlay the string-valued tone keys of ``raw`` on ``base``.

    Unknown keys and non-string values are dropped. Color strings are not
    validated; whatever the user typed goes to the renderer as-is.
    """
    picked = {k: v for k, v in raw.items() if k in TONE_KEYS and isinstance(v, str)}
    return replace(base, **picked)


def _write_settings(path: Path, config: ToneColorConfig) -> None:
    try:
        path.write_text(
            json.dumps(config.as_dict(), ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise SettingsError(f"unwritable_settings:{path}:{e}") from e


def load_tone_colors(path: str | Path) -> ToneColorConfig:
    p = Path(path)
    if not p.exists():
        _write_settings(p, DEFAULT_TONE_COLORS)
        return DEFAULT_TONE_COLORS
    try:
        text = p.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise SettingsError(f"unreadable_settings:{p}:{e}") from e
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SettingsError(f"invalid_settings_json:{p}:{e}") from e
    if not isinstance(raw, dict):
        raise SettingsError(f"settings_not_object:{p}")
    return merge_tone_colors(DEFAULT_TONE_COLORS, raw)


def save_tone_colors(path: str | Path, config: ToneColorConfig) -> None:
    _write_settings(Path(path), config)


def parse_color_assignment(s: str) -> tuple[str, str]:
    """Parse ``tone3=#333`` into ``("tone3", "#333")``."""
    key, sep, value = s.partition("=")
    key = key.strip()
    if not sep or key not in TONE_KEYS:
        raise SettingsError(f"bad_color_assignment:{s}")
    return key, value.strip()
