from unittest.mock import patch

from termcat.builtin import EchoTool, NowTool, ToolDefinition, builtin_tools


def test_echo_tool_returns_args_unchanged():
    args = {"message": "hello world"}
    assert EchoTool().call(args) == args


def test_echo_tool_definition_has_expected_name():
    assert EchoTool().definition().name == "echo"


def test_echo_tool_definition_requires_message():
    definition = EchoTool().definition()
    assert isinstance(definition, ToolDefinition)
    assert definition.parameters["required"] == ["message"]
    assert definition.parameters["properties"]["message"]["type"] == "string"


def test_now_tool_returns_object_with_unix_timestamp():
    result = NowTool().call(None)
    timestamp = result["unix_timestamp"]
    assert isinstance(timestamp, int)
    assert timestamp > 1_577_836_800


def test_now_tool_uses_whole_seconds():
    with patch("time.time", return_value=1_700_000_000.75):
        assert NowTool().call({}) == {"unix_timestamp": 1_700_000_000}


def test_now_tool_before_epoch_is_zero():
    with patch("time.time", return_value=-5.0):
        assert NowTool().call(None) == {"unix_timestamp": 0}


def test_now_tool_definition_has_expected_name():
    definition = NowTool().definition()
    assert definition.name == "now"
    assert definition.parameters["additionalProperties"] is False


def test_builtin_echo_dispatch():
    echo = builtin_tools()[0]
    args = {"message": "hi"}
    assert echo.call(args) == args
    assert echo.definition().name == "echo"


def test_builtin_now_dispatch():
    now = builtin_tools()[1]
    assert "unix_timestamp" in now.call(None)
    assert now.definition().name == "now"


def test_builtin_tools_order():
    assert [tool.definition().name for tool in builtin_tools()] == ["echo", "now"]