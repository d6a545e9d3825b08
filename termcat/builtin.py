"""Tools shipped with the application: ``echo`` and ``now``."""

from __future__ import annotations

import copy
import time
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ToolDefinition:
    """Name, description and JSON-schema parameters of a tool."""

    name: str
    description: str
    parameters: dict[str, Any]


@dataclass(frozen=True)
class EchoTool:
    """Returns its arguments unchanged; handy as a smoke test."""

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="echo",
            description=(
                "Echo the JSON arguments back to the caller unchanged.  Useful as a smoke test."
            ),
            parameters={
                "type": "object",
                "properties": {
                    "message": {"type": "string", "description": "the message to echo"}
                },
                "required": ["message"],
            },
        )

    def call(self, args: Any) -> Any:
        """Return an independent copy of ``args`` with the same value."""
        echoed = copy.deepcopy(args)
        return echoed


@dataclass(frozen=True)
class NowTool:
    """Returns the current time as ``{"unix_timestamp": seconds}``."""

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name="now",
            description=(
                "Return the current time as a Unix timestamp (seconds since 1970-01-01 UTC)."
            ),
            parameters={"type": "object", "properties": {}, "additionalProperties": False},
        )

    def call(self, args: Any) -> dict[str, int]:
        return {"unix_timestamp": max(0, int(time.time()))}


BuiltinTool = Union[EchoTool, NowTool]


def builtin_tools() -> list[BuiltinTool]:
    """The default tool set, in registration order."""
    return [EchoTool(), NowTool()]