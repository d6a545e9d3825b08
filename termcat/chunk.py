"""One ``data:`` payload of a streaming chat-completions response."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from termcat.errors import UnknownFinishReasonError, WireDecodeError
from termcat.events import (
    ChatEvent,
    Finished,
    FinishReason,
    Token,
    ToolCallArgs,
    ToolCallStart,
)

_MAX_INDEX = 2**32 - 1


def _decode_error(message: str) -> WireDecodeError:
    return WireDecodeError(ValueError(message))


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise _decode_error(f"{what}: expected an object, got {type(value).__name__}")
    return value


def _sequence(value: Any, what: str) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise _decode_error(f"{what}: expected an array, got {type(value).__name__}")
    return list(value)


def _optional_string(value: Any, what: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise _decode_error(f"{what}: expected a string, got {type(value).__name__}")


def parse_finish_reason(value: str) -> FinishReason:
    """Decode a ``finish_reason`` string."""
    try:
        return FinishReason(value)
    except ValueError:
        raise UnknownFinishReasonError(value) from None


@dataclass(frozen=True)
class _ChunkToolCall:
    index: int
    call_id: Optional[str]
    name: Optional[str]
    arguments: Optional[str]

    @classmethod
    def from_dict(cls, data: Any) -> _ChunkToolCall:
        data = _mapping(data, "tool call delta")
        if "index" not in data:
            raise _decode_error("tool call delta: missing field `index`")
        index = data["index"]
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index <= _MAX_INDEX:
            raise _decode_error(f"tool call delta: invalid index {index!r}")
        kind = _optional_string(data.get("type"), "tool call type")
        if kind is not None and kind != "function":
            raise _decode_error(f"unknown tool call type: {kind}")
        function = data.get("function")
        if function is None:
            name = arguments = None
        else:
            function = _mapping(function, "tool call function")
            name = _optional_string(function.get("name"), "function name")
            arguments = _optional_string(function.get("arguments"), "function arguments")
        return cls(
            index=index,
            call_id=_optional_string(data.get("id"), "tool call id"),
            name=name,
            arguments=arguments,
        )

    def events(self) -> list[ChatEvent]:
        out: list[ChatEvent] = []
        if self.call_id is not None and self.name is not None:
            out.append(ToolCallStart(self.index, self.call_id, self.name))
        if self.arguments:
            out.append(ToolCallArgs(self.index, self.arguments))
        return out


@dataclass(frozen=True)
class _ChunkChoice:
    content: Optional[str]
    tool_calls: tuple[_ChunkToolCall, ...]
    finish_reason: Optional[str]

    @classmethod
    def from_dict(cls, data: Any) -> _ChunkChoice:
        data = _mapping(data, "chunk choice")
        delta = _mapping(data.get("delta", {}), "delta")
        raw_calls = delta.get("tool_calls")
        calls = (
            ()
            if raw_calls is None
            else tuple(_ChunkToolCall.from_dict(c) for c in _sequence(raw_calls, "tool_calls"))
        )
        return cls(
            content=_optional_string(delta.get("content"), "content"),
            tool_calls=calls,
            finish_reason=_optional_string(data.get("finish_reason"), "finish_reason"),
        )

    def events(self) -> list[ChatEvent]:
        out: list[ChatEvent] = [event for call in self.tool_calls for event in call.events()]
        if self.content is not None:
            out.append(Token(self.content))
        if self.finish_reason is not None:
            out.append(Finished(parse_finish_reason(self.finish_reason)))
        return out


@dataclass(frozen=True)
class ChatCompletionChunk:
    """A decoded streaming chunk; :meth:`events` lowers it to chat events."""

    choices: tuple[_ChunkChoice, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionChunk:
        data = _mapping(data, "chunk")
        choices = _sequence(data.get("choices", []), "choices")
        return cls(choices=tuple(_ChunkChoice.from_dict(choice) for choice in choices))

    @classmethod
    def from_json(cls, text: str) -> ChatCompletionChunk:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise WireDecodeError(exc) from exc
        return cls.from_dict(data)

    def events(self) -> list[ChatEvent]:
        """Per choice: tool-call deltas, then content, then the finish reason."""
        return [event for choice in self.choices for event in choice.events()]