"""Events passed from the SSE stream to the agent loop and on to the UI."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Union


class FinishReason(enum.Enum):
    """Why a streaming response ended."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"


# Chat events: progress from the provider stream.


@dataclass(frozen=True)
class Token:
    """A fragment of assistant text."""

    body: str


@dataclass(frozen=True)
class ToolCallStart:
    """The server opened a new tool-call slot at ``index``."""

    index: int
    call_id: str
    name: str


@dataclass(frozen=True)
class ToolCallArgs:
    """An argument fragment for the tool call at ``index``."""

    index: int
    fragment: str


@dataclass(frozen=True)
class Finished:
    """The streaming response has ended."""

    reason: FinishReason


ChatEvent = Union[Token, ToolCallStart, ToolCallArgs, Finished]


# Agent events: progress observable by the UI.


@dataclass(frozen=True)
class AssistantToken:
    """A visible fragment of assistant text."""

    body: str


@dataclass(frozen=True)
class ToolInvoked:
    """A tool was invoked with the given arguments."""

    name: str
    args: Any


@dataclass(frozen=True)
class ToolReturned:
    """A tool returned the given result."""

    name: str
    result: Any


@dataclass(frozen=True)
class TurnDone:
    """The whole turn, tool follow-ups included, is finished."""


@dataclass(frozen=True)
class Failure:
    """A non-fatal error during the turn, carried as display text."""

    message: str


AgentEvent = Union[AssistantToken, ToolInvoked, ToolReturned, TurnDone, Failure]