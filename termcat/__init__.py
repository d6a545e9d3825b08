"""Wire format, SSE parsing, tool-call and line-editing parts for a chat client of OpenAI-compatible servers."""

__version__ = "0.0.1"

__all__ = [
    "accumulator",
    "builtin",
    "cancel",
    "channel_filter",
    "chunk",
    "errors",
    "events",
    "input_buffer",
    "keys",
    "messages",
    "sse",
]