from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from hilite.errors import InvalidPatternError, LineMatchError

log = logging.getLogger("hilite.patterns")


@dataclass(frozen=True, slots=True)
class Pattern:
    index: int
    source: str
    matcher: re.Pattern[str]


@dataclass(frozen=True, slots=True)
class MatchSpan:
    start: int
    end: int
    pattern_index: int

    def overlaps(self, other: MatchSpan) -> bool:
        return self.start < other.end and other.start < self.end


class PatternSet:
    """Ordered, compiled patterns.

    A pattern's position in the list is both its color index and its
    priority when matches tie.
    """

    def __init__(self, sources: Sequence[str], case_sensitive: bool = False) -> None:
        if not sources:
            raise ValueError("At least one pattern is required")
        flags = 0 if case_sensitive else re.IGNORECASE
        # Compile everything before publishing so a bad pattern leaves nothing behind.
        compiled: list[Pattern] = []
        for i, source in enumerate(sources):
            try:
                matcher = re.compile(source, flags)
            # Huge repeat counts and deep nesting fail outside re.error.
            except (re.error, OverflowError, RecursionError) as exc:
                raise InvalidPatternError(source, i, str(exc)) from exc
            compiled.append(Pattern(index=i, source=source, matcher=matcher))
        self._patterns: tuple[Pattern, ...] = tuple(compiled)
        self.case_sensitive = case_sensitive
        log.debug(
            "Compiled %d pattern(s), case_sensitive=%s",
            len(self._patterns),
            case_sensitive,
        )

    @property
    def patterns(self) -> tuple[Pattern, ...]:
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[Pattern]:
        return iter(self._patterns)

    def find_matches(self, line: str) -> list[MatchSpan]:
        """Return every non-empty match of every pattern in *line*.

        Each pattern is run on its own, so spans from different patterns
        may overlap. The combined order is unspecified.
        """
        if not line:
            return []
        spans: list[MatchSpan] = []
        for pattern in self._patterns:
            try:
                for m in pattern.matcher.finditer(line):
                    start, end = m.span()
                    if start == end:
                        continue
                    spans.append(MatchSpan(start, end, pattern.index))
            except (RecursionError, re.error) as exc:
                raise LineMatchError(line, exc) from exc
        return spans
