"""Wire-format shapes of the chat-completions API: messages, requests, responses."""

from __future__ import annotations

import enum
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from termcat.errors import UnknownRoleError, WireDecodeError, WireError

_FUNCTION = "function"


def _decode_error(message: str) -> WireDecodeError:
    return WireDecodeError(ValueError(message))


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise _decode_error(f"{what}: expected an object, got {type(value).__name__}")
    return value


def _required(data: Mapping[str, Any], key: str, what: str) -> Any:
    if key not in data:
        raise _decode_error(f"{what}: missing field `{key}`")
    return data[key]


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise _decode_error(f"{what}: expected a string, got {type(value).__name__}")
    return value


def _optional_string(value: Any, what: str) -> Optional[str]:
    return None if value is None else _string(value, what)


def _sequence(value: Any, what: str) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise _decode_error(f"{what}: expected an array, got {type(value).__name__}")
    return list(value)


def _optional_tool_calls(value: Any) -> Optional[tuple[ToolCall, ...]]:
    if value is None:
        return None
    return tuple(ToolCall.from_dict(item) for item in _sequence(value, "tool_calls"))


class Role(enum.Enum):
    """Speaker of a chat message."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"

    @classmethod
    def parse(cls, value: Any) -> Role:
        """Decode a wire ``role`` value."""
        role = _string(value, "role")
        try:
            return cls(role)
        except ValueError:
            raise UnknownRoleError(role) from None


@dataclass(frozen=True)
class ToolCall:
    """One function-type tool call requested by the assistant."""

    call_id: str
    name: str
    arguments: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.call_id,
            "type": _FUNCTION,
            "function": {"name": self.name, "arguments": self.arguments},
        }

    @classmethod
    def from_dict(cls, data: Any) -> ToolCall:
        data = _mapping(data, "tool call")
        kind = _string(_required(data, "type", "tool call"), "tool call type")
        if kind != _FUNCTION:
            raise _decode_error(f"unknown tool call type: {kind}")
        function = _mapping(_required(data, "function", "tool call"), "tool call function")
        return cls(
            call_id=_string(_required(data, "id", "tool call"), "tool call id"),
            name=_string(_required(function, "name", "tool call function"), "function name"),
            arguments=_string(
                _required(function, "arguments", "tool call function"), "function arguments"
            ),
        )


@dataclass(frozen=True)
class Message:
    """One chat message as it travels on the wire."""

    role: Role
    content: Optional[str] = None
    tool_call_id: Optional[str] = None
    tool_calls: Optional[tuple[ToolCall, ...]] = None

    @classmethod
    def system(cls, body: str) -> Message:
        return cls(Role.SYSTEM, content=body)

    @classmethod
    def user(cls, body: str) -> Message:
        return cls(Role.USER, content=body)

    @classmethod
    def assistant(cls, body: str) -> Message:
        return cls(Role.ASSISTANT, content=body)

    @classmethod
    def assistant_tool_calls(cls, calls: Iterable[ToolCall]) -> Message:
        return cls(Role.ASSISTANT, tool_calls=tuple(calls))

    @classmethod
    def assistant_text_and_tool_calls(cls, body: str, calls: Iterable[ToolCall]) -> Message:
        return cls(Role.ASSISTANT, content=body, tool_calls=tuple(calls))

    @classmethod
    def tool(cls, call_id: str, body: str) -> Message:
        return cls(Role.TOOL, content=body, tool_call_id=call_id)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"role": self.role.value}
        if self.content is not None:
            out["content"] = self.content
        if self.tool_call_id is not None:
            out["tool_call_id"] = self.tool_call_id
        if self.tool_calls is not None:
            out["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Message:
        data = _mapping(data, "message")
        return cls(
            role=Role.parse(_required(data, "role", "message")),
            content=_optional_string(data.get("content"), "content"),
            tool_call_id=_optional_string(data.get("tool_call_id"), "tool_call_id"),
            tool_calls=_optional_tool_calls(data.get("tool_calls")),
        )


@dataclass(frozen=True)
class ChatCompletionRequest:
    """Body of a chat-completions request; unset options are left out."""

    model: str
    messages: tuple[Message, ...]
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    tools: Optional[tuple[Any, ...]] = None
    stream: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))
        if self.tools is not None:
            object.__setattr__(self, "tools", tuple(self.tools))

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }
        if self.temperature is not None:
            out["temperature"] = self.temperature
        if self.max_tokens is not None:
            out["max_tokens"] = self.max_tokens
        if self.tools is not None:
            out["tools"] = list(self.tools)
        out["stream"] = self.stream
        return out

    def to_json(self) -> str:
        """Compact JSON encoding of the request body."""
        try:
            return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise WireError(f"encode: {exc}") from exc


@dataclass(frozen=True)
class ResponseMessage:
    """The ``message`` object of a response choice."""

    content: Optional[str] = None
    tool_calls: Optional[tuple[ToolCall, ...]] = None

    @classmethod
    def from_dict(cls, data: Any) -> ResponseMessage:
        data = _mapping(data, "response message")
        return cls(
            content=_optional_string(data.get("content"), "content"),
            tool_calls=_optional_tool_calls(data.get("tool_calls")),
        )


@dataclass(frozen=True)
class ResponseChoice:
    """One element of a response's ``choices``."""

    message: ResponseMessage
    finish_reason: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> ResponseChoice:
        data = _mapping(data, "choice")
        return cls(
            message=ResponseMessage.from_dict(_required(data, "message", "choice")),
            finish_reason=_optional_string(data.get("finish_reason"), "finish_reason"),
        )


@dataclass(frozen=True)
class ChatCompletionResponse:
    """Body of a non-streaming chat-completions response."""

    choices: tuple[ResponseChoice, ...]

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionResponse:
        data = _mapping(data, "response")
        choices = _sequence(_required(data, "choices", "response"), "choices")
        return cls(choices=tuple(ResponseChoice.from_dict(choice) for choice in choices))

    @classmethod
    def from_json(cls, text: str) -> ChatCompletionResponse:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise WireDecodeError(exc) from exc
        return cls.from_dict(data)

    def first_content(self) -> Optional[str]:
        """Text of the first choice's message, if any."""
        return self.choices[0].message.content if self.choices else None

    def first_tool_calls(self) -> Optional[tuple[ToolCall, ...]]:
        """Tool calls of the first choice's message, if any."""
        return self.choices[0].message.tool_calls if self.choices else None