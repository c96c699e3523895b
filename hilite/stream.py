from __future__ import annotations

import logging
from typing import BinaryIO

from hilite.highlight.line_highlighter import LineHighlighter

log = logging.getLogger("hilite.stream")


def split_terminator(raw: bytes) -> tuple[bytes, bytes]:
    """Split *raw* into its body and its line terminator (possibly empty)."""
    if raw.endswith(b"\r\n"):
        return raw[:-2], b"\r\n"
    if raw.endswith(b"\n"):
        return raw[:-1], b"\n"
    return raw, b""


def highlight_stream(
    reader: BinaryIO,
    writer: BinaryIO,
    highlighter: LineHighlighter,
    encoding: str = "utf-8",
) -> int:
    """Highlight every line of *reader* onto *writer*.

    Lines are read lazily and flushed one at a time, so a live stream
    (``tail -f``) shows up as it arrives. Each line keeps its original
    terminator. A line that does not decode is written back byte for
    byte. Returns the number of lines processed.
    """
    count = 0
    for raw in reader:
        body, terminator = split_terminator(raw)
        try:
            text = body.decode(encoding)
        except UnicodeDecodeError as exc:
            log.debug("Line %d is not valid %s, passing through: %s", count + 1, encoding, exc)
            out = body
        else:
            out = highlighter.render(text).encode(encoding)
        writer.write(out + terminator)
        writer.flush()
        count += 1
    return count
