"""Pattern index to terminal color mapping."""

from __future__ import annotations

from dataclasses import dataclass

from rich.color import ColorSystem
from rich.style import Style

# Standard ANSI colors first, then 256-color entries.
DEFAULT_COLORS: tuple[str, ...] = (
    "red",
    "yellow",
    "blue",
    "green",
    "magenta",
    "cyan",
    "color(49)",  # light cyan
    "color(220)",  # light yellow
    "color(51)",  # light blue
    "color(106)",  # yellow green
    "color(207)",  # pink
    "color(165)",  # purple
)

COLOR_SYSTEM = ColorSystem.EIGHT_BIT


@dataclass(frozen=True, slots=True)
class Palette:
    colors: tuple[str, ...] = DEFAULT_COLORS

    def __post_init__(self) -> None:
        if not self.colors:
            raise ValueError("Palette needs at least one color")
        # Fail early on names rich cannot parse.
        for name in self.colors:
            Style(color=name)

    def __len__(self) -> int:
        return len(self.colors)

    def color_for(self, pattern_index: int) -> str:
        return self.colors[pattern_index % len(self.colors)]

    def style_for(self, pattern_index: int, background: bool = False) -> Style:
        """Return the rich style for *pattern_index*.

        With *background* set the color goes to the cell background and
        the foreground is left at the terminal default.
        """
        color = self.color_for(pattern_index)
        if background:
            return Style(bgcolor=color)
        return Style(color=color)


def paint(text: str, style: Style) -> str:
    """Wrap *text* in the SGR codes for *style* followed by a reset."""
    return style.render(text, color_system=COLOR_SYSTEM)


DEFAULT_PALETTE = Palette()
