"""Streaming removal of ``<|channel>...<channel|>`` blocks from assistant text."""

from __future__ import annotations

from dataclasses import dataclass

OPEN = "<|channel>"
CLOSE = "<channel|>"


def _potential_marker_start(buf: str, marker: str) -> int:
    """Start of the longest suffix of ``buf`` that is a strict prefix of ``marker``."""
    n = len(buf)
    for k in range(min(len(marker) - 1, n), 0, -1):
        if marker.startswith(buf[n - k :]):
            return n - k
    return n


def _consume(buf: str, inside: bool) -> tuple[str, str, bool]:
    """Return the text to emit, the tail to keep, and whether a block is open."""
    out: list[str] = []
    while True:
        if inside:
            pos = buf.find(CLOSE)
            if pos < 0:
                return "".join(out), buf, True
            buf = buf[pos + len(CLOSE) :]
            inside = False
        else:
            pos = buf.find(OPEN)
            if pos < 0:
                cut = _potential_marker_start(buf, OPEN)
                out.append(buf[:cut])
                return "".join(out), buf[cut:], False
            out.append(buf[:pos])
            buf = buf[pos + len(OPEN) :]
            inside = True


@dataclass(frozen=True)
class ChannelFilter:
    """Filter state for one assistant turn.

    Markers may be split across tokens, so an unclassified tail is kept in
    ``buffer`` until the next token arrives.
    """

    buffer: str = ""
    inside_marker: bool = False

    def feed(self, token: str) -> tuple[ChannelFilter, str]:
        """Feed one token; return the next filter state and the text to show."""
        output, remaining, inside = _consume(self.buffer + token, self.inside_marker)
        return ChannelFilter(remaining, inside), output

    def is_clean(self) -> bool:
        """True if nothing is buffered and no block is open."""
        return not self.buffer and not self.inside_marker