# termcat

Pure-Python building blocks for a terminal chat client that talks to a local
chat-completions server with an OpenAI-compatible API, such as LM Studio or
Ollama. The package has no runtime dependencies.

## What is in it

- **`termcat.messages`**: the wire format. It has `Role`, `ToolCall`,
  `Message` (constructors `system`, `user`, `assistant`,
  `assistant_tool_calls`, `assistant_text_and_tool_calls` and `tool`),
  `ChatCompletionRequest` and the non-streaming `ChatCompletionResponse`,
  `ResponseChoice` and `ResponseMessage`.
  - `ChatCompletionRequest.to_dict()` and `to_json()` leave out the
    `temperature`, `max_tokens` and `tools` fields when they are unset.
  - `ChatCompletionResponse.from_json()` raises `WireDecodeError` on bad
    JSON. An unknown `role` in `Message.from_dict()` raises
    `UnknownRoleError`.
- **`termcat.chunk`**: handles one streaming payload.
  - `ChatCompletionChunk.from_json(text)` decodes the payload.
  - `.events()` lowers it to chat events. Within each choice the order is
    tool-call deltas, then the content token, then the finish reason.
  - `parse_finish_reason(value)` raises `UnknownFinishReasonError` for
    values it does not recognise.
- **`termcat.sse`**: parses Server-Sent Events.
  - `classify(line)` returns an `SseLine` whose `kind` is a `LineKind`:
    `DONE`, `DATA` (with the decoded `chunk`) or `SKIP`. Blank lines,
    comments and fields other than `data:` are skipped. A `data:` payload
    that is not a valid chunk raises `SseDecodeError`.
  - `parse(lines, cancel=None)` yields chat events from an iterable of `str`
    or UTF-8 `bytes` lines. It stops at `data: [DONE]`, at end of input, or
    when the cancel observer reports cancellation, which it checks before
    each line is read.
- **`termcat.events`**: the event types.
  - `Token`, `ToolCallStart`, `ToolCallArgs` and `Finished` (with a
    `FinishReason`) come out of the stream.
  - `AssistantToken`, `ToolInvoked`, `ToolReturned`, `TurnDone` and
    `Failure` are for a UI to consume.
- **`termcat.accumulator`**: `ToolCallAccumulator` joins streamed tool-call
  fragments back into `PendingCall`s, keyed by stream index. It is immutable,
  so every `add_start` and `add_args` returns a new accumulator. A fragment
  for an index that was never started is dropped. `PendingCall.to_wire()`
  gives a `ToolCall`.
- **`termcat.builtin`**: the `EchoTool` and `NowTool` tools.
  - Each tool has a `definition()` that returns a `ToolDefinition`, and a
    `call(args)` method.
  - `NowTool` returns `{"unix_timestamp": seconds}`.
  - `builtin_tools()` returns both tools.
- **`termcat.channel_filter`**: `ChannelFilter` removes
  `<|channel>...<channel|>` blocks from streamed tokens, including markers
  that are split across tokens.
- **`termcat.cancel`**: `cancel_channel()` returns a connected `Canceller`
  and `CancelObserver`.
  - `CancelObserver.is_cancelled()` is true when a signal is pending (it
    consumes that signal) or when every canceller has been garbage-collected.
  - Make more cancellers with `copy.copy`.
- **`termcat.input_buffer`**: `InputBuffer` is an immutable multi-line edit
  buffer. It has `insert_char`, `insert_newline`, `backspace`,
  `delete_word`, `cursor`, `is_empty` and `take`.
- **`termcat.keys`**: `lift(event)` maps a `KeyEvent` (`KeyCode` plus
  `Modifiers`) to a `KeyAction` or to a `CharAction`. Anything it does not
  recognise maps to `KeyAction.NO_OP`.
- **`termcat.errors`**: `TermCatError` and one subclass per subsystem:
  `SseError`, `WireError`, `TuiError`, `BridgeError` and `ProviderError`,
  with their more specific subclasses.

## What it does not do

termcat is a library of parts and nothing more:

- It installs no command.
- It has no HTTP client for talking to a server.
- It has no agent loop that sends tool calls to tools and sends the results
  back.
- It draws no terminal screen and reads no keys from a terminal.

All of these are left to the program that uses these modules.

## Install

```
pip install .
```

## Examples

Filter streamed tokens. `feed` returns the next filter state and the text to
show:

```python
from termcat.channel_filter import ChannelFilter

f = ChannelFilter()
f, out = f.feed("<|chan")
print(repr(out))                # ''  (a possible marker start is held back)
f, out = f.feed("nel>thought\n<channel|>Hello!")
print(repr(out))                # 'Hello!'
print(f.is_clean())             # True
```

Parse an SSE body:

```python
from termcat.cancel import cancel_channel
from termcat.sse import parse

body = [
    'data: {"choices":[{"delta":{"content":"hi"},"finish_reason":null}]}\n',
    "\n",
    'data: {"choices":[{"delta":{},"finish_reason":"stop"}]}\n',
    "data: [DONE]\n",
]
canceller, observer = cancel_channel()
for event in parse(body, observer):
    print(event)
# Token(body='hi')
# Finished(reason=<FinishReason.STOP: 'stop'>)
```

Reassemble a streamed tool call:

```python
from termcat.accumulator import ToolCallAccumulator

acc = (
    ToolCallAccumulator()
    .add_start(0, "call_0", "echo")
    .add_args(0, '{"message":')
    .add_args(0, '"hi"}')
)
print(acc.finalize()[0].to_wire().to_dict())
# {'id': 'call_0', 'type': 'function', 'function': {'name': 'echo', 'arguments': '{"message":"hi"}'}}
```

Map a key press:

```python
from termcat.keys import KeyCode, KeyEvent, Modifiers, lift

print(lift(KeyEvent(KeyCode.ENTER)))                        # KeyAction.SEND
print(lift(KeyEvent(KeyCode.CHAR, Modifiers.CONTROL, "w"))) # KeyAction.DELETE_WORD
```

## Tests

```
pip install .[test]
pytest
```