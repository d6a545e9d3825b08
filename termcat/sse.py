"""Server-Sent Events parsing of a streaming chat-completions body."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional, Union

from termcat.cancel import CancelObserver
from termcat.chunk import ChatCompletionChunk
from termcat.errors import SseDecodeError, SseError, WireDecodeError
from termcat.events import ChatEvent

_DONE = "[DONE]"
_DATA_PREFIX = "data:"


class LineKind(enum.Enum):
    """Classification of one SSE line."""

    DONE = "done"
    DATA = "data"
    SKIP = "skip"
    EOF = "eof"


@dataclass(frozen=True)
class SseLine:
    """A classified line; ``chunk`` is set only for :attr:`LineKind.DATA`."""

    kind: LineKind
    chunk: Optional[ChatCompletionChunk] = None


_SKIP = SseLine(LineKind.SKIP)
_DONE_LINE = SseLine(LineKind.DONE)
_EOF = SseLine(LineKind.EOF)


def classify(line: str) -> SseLine:
    """Classify one raw SSE line, trailing newline included or not.

    Blank lines, comments and fields other than ``data:`` are skipped;
    ``data: [DONE]`` ends the stream; any other ``data:`` payload must decode
    as a completion chunk or :class:`SseDecodeError` is raised.
    """
    trimmed = line.rstrip("\r\n")
    if not trimmed or not trimmed.startswith(_DATA_PREFIX):
        return _SKIP
    payload = trimmed[len(_DATA_PREFIX) :].lstrip()
    if payload == _DONE:
        return _DONE_LINE
    try:
        chunk = ChatCompletionChunk.from_json(payload)
    except WireDecodeError as exc:
        raise SseDecodeError(exc.cause) from exc
    return SseLine(LineKind.DATA, chunk)


def _read(lines: Iterator[Union[str, bytes]]) -> SseLine:
    try:
        raw = next(lines)
    except StopIteration:
        return _EOF
    except OSError as exc:
        raise SseError(f"io: {exc}") from exc
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SseError(f"io: {exc}") from exc
    return classify(raw)


def parse(
    lines: Iterable[Union[str, bytes]], cancel: Optional[CancelObserver] = None
) -> Iterator[ChatEvent]:
    """Yield the chat events carried by an SSE body, line by line.

    The cancel observer is consulted before every line read; events already
    decoded from a chunk are still delivered. The stream ends at end of input
    or at ``data: [DONE]``.
    """
    source = iter(lines)
    while True:
        if cancel is not None and cancel.is_cancelled():
            return
        line = _read(source)
        if line.kind in (LineKind.EOF, LineKind.DONE):
            return
        if line.kind is LineKind.DATA and line.chunk is not None:
            yield from line.chunk.events()