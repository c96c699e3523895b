from __future__ import annotations

from .palette import DEFAULT_PALETTE, Palette
from .pattern_set import MatchSpan, Pattern, PatternSet
from .line_highlighter import LineHighlighter

__all__ = [
    "DEFAULT_PALETTE",
    "LineHighlighter",
    "MatchSpan",
    "Palette",
    "Pattern",
    "PatternSet",
]
