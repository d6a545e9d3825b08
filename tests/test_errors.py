import pytest

from termcat.errors import (
    BridgeError,
    ProviderError,
    ProviderStatusError,
    SseDecodeError,
    SseError,
    TermCatError,
    TuiError,
    UnexpectedSseLineError,
    UnknownFinishReasonError,
    UnknownRoleError,
    WireDecodeError,
    WireError,
)


def test_unknown_finish_reason_message():
    err = UnknownFinishReasonError("mystery")
    assert str(err) == "wire: unknown finish_reason: mystery"
    assert err.value == "mystery"


def test_provider_status_message_and_fields():
    err = ProviderStatusError(500, "boom")
    assert str(err) == "provider: status 500: boom"
    assert err.code == 500
    assert err.body == "boom"


def test_unexpected_line_message():
    err = UnexpectedSseLineError("garbage")
    assert str(err) == "sse: unexpected SSE line: garbage"
    assert err.line == "garbage"


def test_sse_decode_error_keeps_cause():
    cause = ValueError("bad json")
    with pytest.raises(SseError) as info:
        raise SseDecodeError(cause)
    assert info.value.cause is cause
    assert info.value.__cause__ is cause
    assert str(info.value).startswith("sse: decode: ")
    assert "bad json" in str(info.value)


def test_wire_decode_error_keeps_cause():
    cause = KeyError("choices")
    err = WireDecodeError(cause)
    assert err.__cause__ is cause
    assert str(err).startswith("wire: decode: ")


def test_unknown_role_is_wire_error():
    err = UnknownRoleError("narrator")
    assert err.role == "narrator"
    assert str(err) == "wire: unknown role: narrator"
    assert isinstance(err, WireError)


@pytest.mark.parametrize(
    "exc, prefix",
    [
        (SseError("io: closed"), "sse: "),
        (WireError("encode: nope"), "wire: "),
        (TuiError("io: gone"), "tui: "),
        (BridgeError("channel receiver disconnected"), "bridge: "),
        (ProviderError("http: refused"), "provider: "),
    ],
)
def test_subsystem_prefix(exc, prefix):
    assert str(exc).startswith(prefix)
    assert str(exc).endswith(exc.detail)


@pytest.mark.parametrize(
    "exc",
    [
        SseDecodeError(ValueError("x")),
        UnknownFinishReasonError("x"),
        ProviderStatusError(404, "x"),
        TuiError("x"),
        BridgeError("x"),
    ],
)
def test_all_errors_share_base(exc):
    with pytest.raises(TermCatError) as info:
        raise exc
    assert info.value is exc


def test_status_error_is_provider_not_wire():
    err = ProviderStatusError(404, "missing")
    assert str(err) == "provider: status 404: missing"
    assert str(err).startswith("provider: ")
    assert not str(err).startswith("wire: ")
    assert isinstance(err, ProviderError)
    assert not isinstance(err, WireError)