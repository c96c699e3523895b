from __future__ import annotations

import logging
from collections.abc import Iterable

from rich.segment import Segment
from rich.style import Style

from hilite.errors import LineMatchError
from hilite.highlight.palette import DEFAULT_PALETTE, Palette, paint
from hilite.highlight.pattern_set import MatchSpan, PatternSet

log = logging.getLogger("hilite.highlighter")


def _sort_key(span: MatchSpan) -> tuple[int, int, int]:
    # Earliest start first, then the longest match, then the first-registered pattern.
    return (span.start, -span.end, span.pattern_index)


class LineHighlighter:
    """Colorize lines using a shared, read-only :class:`PatternSet`.

    In span mode every kept match is wrapped in its pattern's color. In
    whole-line mode the entire line takes the color of the lowest-indexed
    pattern that matched anywhere in it. Lines without matches are
    returned untouched.
    """

    def __init__(
        self,
        pattern_set: PatternSet,
        whole_line: bool = False,
        background: bool = False,
        palette: Palette = DEFAULT_PALETTE,
    ) -> None:
        self.pattern_set = pattern_set
        self.whole_line = whole_line
        self.background = background
        self.palette = palette

    # ------------------------------------------------------------------
    # Match resolution
    # ------------------------------------------------------------------

    @staticmethod
    def resolve_spans(spans: Iterable[MatchSpan]) -> list[MatchSpan]:
        """Drop every span that overlaps a higher-priority one.

        The result is sorted by start and contains no overlaps. Spans are
        never split; a partially covered span is discarded whole.
        """
        kept: list[MatchSpan] = []
        for span in sorted(spans, key=_sort_key):
            # Kept spans are disjoint and sorted, so only the last one can overlap.
            if kept and span.overlaps(kept[-1]):
                continue
            kept.append(span)
        return kept

    def line_style(self, spans: Iterable[MatchSpan]) -> Style | None:
        """Style for whole-line mode, or ``None`` when nothing matched."""
        indices = [span.pattern_index for span in spans]
        if not indices:
            return None
        return self.palette.style_for(min(indices), self.background)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def segments(self, line: str) -> list[Segment]:
        """Split *line* into plain and styled segments."""
        return self._build_segments(line, self._find_matches(line))

    def render(self, line: str) -> str:
        spans = self._find_matches(line)
        if not spans:
            return line
        return "".join(
            paint(seg.text, seg.style) if seg.style else seg.text
            for seg in self._build_segments(line, spans)
        )

    def _find_matches(self, line: str) -> list[MatchSpan]:
        try:
            return self.pattern_set.find_matches(line)
        except LineMatchError as exc:
            log.debug("Passing line through unmodified: %s", exc)
            return []

    def _build_segments(self, line: str, spans: list[MatchSpan]) -> list[Segment]:
        if not spans:
            return [Segment(line)] if line else []

        if self.whole_line:
            return [Segment(line, self.line_style(spans))]

        segments: list[Segment] = []
        pos = 0
        for span in self.resolve_spans(spans):
            if span.start > pos:
                segments.append(Segment(line[pos : span.start]))
            style = self.palette.style_for(span.pattern_index, self.background)
            segments.append(Segment(line[span.start : span.end], style))
            pos = span.end
        if pos < len(line):
            segments.append(Segment(line[pos:]))
        return segments
