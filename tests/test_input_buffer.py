import pytest

from termcat.input_buffer import InputBuffer


def typed(text, start=None):
    buf = InputBuffer() if start is None else start
    for ch in text:
        buf = buf.insert_newline() if ch == "\n" else buf.insert_char(ch)
    return buf


def test_empty_buffer():
    buf = InputBuffer()
    assert buf.is_empty() is True
    assert buf.cursor() == (0, 0)
    assert buf.take()[0] == ""


def test_typing_then_take_returns_text_and_fresh_buffer():
    text = "hello world"
    body, rest = typed(text).take()
    assert body == text
    assert rest.is_empty() is True
    assert rest.cursor() == (0, 0)


def test_cursor_follows_typed_characters():
    text = "hello"
    buf = typed(text)
    assert buf.cursor() == (0, len(text))
    assert buf.is_empty() is False


def test_multiline_take_joins_with_newline():
    body, _ = typed("ab\ncd").take()
    assert body == "ab\ncd"


def test_newline_only_buffer_is_empty():
    buf = InputBuffer().insert_newline()
    assert buf.is_empty() is True
    assert buf.cursor() == (1, 0)


def test_insert_newline_splits_at_cursor():
    buf = InputBuffer(("abcd",), 0, 2).insert_newline()
    assert buf.lines == ("ab", "cd")
    assert buf.cursor() == (1, 0)


def test_insert_char_mid_line():
    buf = InputBuffer(("ac",), 0, 1).insert_char("b")
    assert buf.lines == ("abc",)
    assert buf.cursor() == (0, 2)


def test_insert_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        InputBuffer().insert_char("ab")


def test_backspace_at_origin_is_unchanged():
    buf = InputBuffer()
    assert buf.backspace() == buf


def test_backspace_undoes_insert_char():
    base = typed("hello")
    assert base.insert_char("x").backspace() == base


def test_backspace_at_line_start_joins_lines():
    buf = InputBuffer(("ab", "cd"), 1, 0).backspace()
    assert buf.lines == ("ab" + "cd",)
    assert buf.cursor() == (0, len("ab"))


def test_backspace_undoes_newline():
    base = typed("ab")
    assert base.insert_newline().backspace() == base


def test_delete_word_removes_last_word():
    assert typed("bar", typed("foo ")).delete_word() == typed("foo ")


def test_delete_word_consumes_trailing_whitespace():
    assert typed("bar  ", typed("foo ")).delete_word() == typed("foo ")


def test_delete_word_on_single_word_empties_line():
    buf = typed("word").delete_word()
    assert buf.is_empty() is True
    assert buf.cursor() == (0, 0)


def test_delete_word_at_column_zero_acts_as_backspace():
    buf = InputBuffer(("ab", "cd"), 1, 0)
    assert buf.delete_word() == buf.backspace()


def test_edits_leave_original_untouched():
    base = typed("abc")
    base.insert_char("d")
    base.backspace()
    base.delete_word()
    assert base.take()[0] == "abc"
    assert base.cursor() == (0, 3)


def test_non_ascii_characters_count_as_one_column():
    text = "héllo ✓"
    buf = typed(text)
    assert buf.cursor() == (0, len(text))
    assert buf.backspace().take()[0] == text[:-1]