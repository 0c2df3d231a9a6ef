from __future__ import annotations

from dataclasses import dataclass

from .core import AnnotateOptions, build_annotations
from .types import Annotation, TextRange
from .util import utf16_units


Viewport = tuple[int, int]


@dataclass(frozen=True)
class ViewUpdate:
    """What changed in the editor since the last pass.

    ``text`` is ordinary Python text; ``viewport`` is in UTF-16 units.
    Leave a field as None when that part did not change.
    """

    text: str | None = None
    viewport: Viewport | None = None

    @property
    def doc_changed(self) -> bool:
        return self.text is not None

    @property
    def viewport_changed(self) -> bool:
        return self.viewport is not None


class AnnotatedView:
    """Keeps the annotations of the visible part of a document current.

    Each pass is a fresh call into the stateless builder; the view only
    remembers the document, the viewport and the last result.
    """

    def __init__(self, text: str, viewport: Viewport | None, options: AnnotateOptions) -> None:
        self.options = options
        self._units = utf16_units(text)
        self._viewport = self._clamp(viewport)
        self.annotations: list[Annotation] = self._compute()

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    @property
    def content(self) -> str:
        return self._units

    def _clamp(self, viewport: Viewport | None) -> Viewport:
        n = len(self._units)
        if viewport is None:
            return 0, n
        start, end = viewport
        start = min(max(0, start), n)
        end = min(max(start, end), n)
        return start, end

    def _compute(self) -> list[Annotation]:
        start, end = self._viewport
        return build_annotations(TextRange(self._units, start, end), self.options)

    def update(self, update: ViewUpdate) -> bool:
        """Apply ``update``; returns True when the annotations were recomputed."""
        if not (update.doc_changed or update.viewport_changed):
            return False
        if update.text is not None:
            self._units = utf16_units(update.text)
        self._viewport = self._clamp(update.viewport if update.viewport is not None else self._viewport)
        self.annotations = self._compute()
        return True
