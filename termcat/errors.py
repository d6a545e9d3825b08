"""Exception hierarchy, one branch per subsystem."""

from __future__ import annotations

from typing import ClassVar


class TermCatError(Exception):
    """Base class for every error the package raises."""

    subsystem: ClassVar[str] = "term-cat"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.subsystem}: {self.detail}"


class SseError(TermCatError):
    """Server-Sent Events parsing or transport failure."""

    subsystem = "sse"


class SseDecodeError(SseError):
    """A ``data:`` line did not decode as a completion chunk."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"decode: {cause}")
        self.cause = cause
        self.__cause__ = cause


class UnexpectedSseLineError(SseError):
    """A line that is structurally unexpected in an SSE body."""

    def __init__(self, line: str) -> None:
        super().__init__(f"unexpected SSE line: {line}")
        self.line = line


class WireError(TermCatError):
    """Wire-format encoding or decoding failure."""

    subsystem = "wire"


class WireDecodeError(WireError):
    """A JSON response did not decode into the expected shape."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"decode: {cause}")
        self.cause = cause
        self.__cause__ = cause


class UnknownRoleError(WireError):
    """A ``role`` field carried an unrecognised value."""

    def __init__(self, role: str) -> None:
        super().__init__(f"unknown role: {role}")
        self.role = role


class UnknownFinishReasonError(WireError):
    """A ``finish_reason`` field carried an unrecognised value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown finish_reason: {value}")
        self.value = value


class TuiError(TermCatError):
    """Terminal setup, draw or input failure."""

    subsystem = "tui"


class BridgeError(TermCatError):
    """Failure in the plumbing between the producer and the UI."""

    subsystem = "bridge"


class ProviderError(TermCatError):
    """HTTP transport or decoding failure talking to the chat server."""

    subsystem = "provider"


class ProviderStatusError(ProviderError):
    """The chat server answered with a non-2xx status."""

    def __init__(self, code: int, body: str) -> None:
        super().__init__(f"status {code}: {body}")
        self.code = code
        self.body = body