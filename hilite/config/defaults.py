from __future__ import annotations

import logging

from hilite.highlight.palette import DEFAULT_COLORS, Palette

log = logging.getLogger(__name__)


def get_palette() -> Palette:
    """Build the palette from ``DEFAULT_CONFIG``.

    An empty ``colors`` list falls back to the built-in colors.
    """
    colors = DEFAULT_CONFIG["palette"].get("colors", [])
    if not colors:
        log.warning("Empty palette in defaults, using built-in colors")
        return Palette()
    return Palette(colors=tuple(colors))


DEFAULT_CONFIG: dict = {
    "general": {
        "log_file": "",
        "log_level": "WARNING",
        "encoding": "utf-8",
    },
    "highlight": {
        "whole_line": False,
        "background": False,
        "case_sensitive": False,
    },
    "palette": {
        "colors": list(DEFAULT_COLORS),
    },
}
