"""Reassembly of streamed tool-call deltas into complete calls."""

from __future__ import annotations

from dataclasses import dataclass, replace

from termcat.messages import ToolCall


@dataclass(frozen=True)
class PendingCall:
    """One assembled tool call; ``args_buf`` holds the raw JSON arguments text."""

    call_id: str
    name: str
    args_buf: str = ""

    def to_wire(self) -> ToolCall:
        """The wire-format tool call recorded in the assistant history message."""
        return ToolCall(call_id=self.call_id, name=self.name, arguments=self.args_buf)


@dataclass(frozen=True)
class ToolCallAccumulator:
    """In-flight tool calls of one assistant turn, keyed by stream index.

    Every update returns a new accumulator; the original is left untouched.
    """

    pending: tuple[tuple[int, PendingCall], ...] = ()

    def add_start(self, index: int, call_id: str, name: str) -> ToolCallAccumulator:
        """Open a new call at ``index`` with an empty arguments buffer."""
        entry = (index, PendingCall(call_id, name))
        return ToolCallAccumulator(self.pending + (entry,))

    def add_args(self, index: int, fragment: str) -> ToolCallAccumulator:
        """Append ``fragment`` to the call at ``index``; dropped if there is none."""
        return ToolCallAccumulator(
            tuple(
                (i, replace(call, args_buf=call.args_buf + fragment) if i == index else call)
                for i, call in self.pending
            )
        )

    def finalize(self) -> list[PendingCall]:
        """The assembled calls, in stream order."""
        return [call for _, call in self.pending]

    def is_empty(self) -> bool:
        """True if no tool-call delta has been seen yet."""
        return not self.pending