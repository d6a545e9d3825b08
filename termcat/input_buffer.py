"""Multi-line input buffer; every edit returns a new buffer."""

from __future__ import annotations

from dataclasses import dataclass


def _replace_at(lines: tuple[str, ...], index: int, new: str) -> tuple[str, ...]:
    return tuple(new if i == index else line for i, line in enumerate(lines))


def _word_boundary_left(text: str, col: int) -> int:
    """Walk left from ``col`` over whitespace, then over non-whitespace."""
    pos = col
    while pos > 0 and text[pos - 1].isspace():
        pos -= 1
    while pos > 0 and not text[pos - 1].isspace():
        pos -= 1
    return pos


@dataclass(frozen=True)
class InputBuffer:
    """Lines of text plus a ``(line, col)`` cursor counted in characters."""

    lines: tuple[str, ...] = ("",)
    line: int = 0
    col: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    def _current(self) -> str:
        return self.lines[self.line] if 0 <= self.line < len(self.lines) else ""

    def take(self) -> tuple[str, InputBuffer]:
        """The contents joined with newlines, and a fresh empty buffer."""
        return "\n".join(self.lines), InputBuffer()

    def cursor(self) -> tuple[int, int]:
        """Cursor position as ``(line, column)``."""
        return self.line, self.col

    def is_empty(self) -> bool:
        """True if no line holds any character."""
        return all(not line for line in self.lines)

    def insert_char(self, char: str) -> InputBuffer:
        """Insert one character at the cursor."""
        if len(char) != 1:
            raise ValueError("insert_char takes exactly one character")
        current = self._current()
        text = current[: self.col] + char + current[self.col :]
        return InputBuffer(_replace_at(self.lines, self.line, text), self.line, self.col + 1)

    def insert_newline(self) -> InputBuffer:
        """Split the current line at the cursor."""
        current = self._current()
        head, tail = current[: self.col], current[self.col :]
        new_lines: list[str] = []
        for i, line in enumerate(self.lines):
            new_lines.extend((head, tail) if i == self.line else (line,))
        return InputBuffer(tuple(new_lines), self.line + 1, 0)

    def backspace(self) -> InputBuffer:
        """Delete the character before the cursor, joining lines at column 0."""
        if self.col == 0 and self.line == 0:
            return self
        if self.col == 0:
            prev = self.lines[self.line - 1] if self.line - 1 < len(self.lines) else ""
            merged = prev + self._current()
            new_lines = tuple(
                merged if i == self.line - 1 else line
                for i, line in enumerate(self.lines)
                if i != self.line
            )
            return InputBuffer(new_lines, self.line - 1, len(prev))
        current = self._current()
        text = current[: self.col - 1] + current[self.col :]
        return InputBuffer(_replace_at(self.lines, self.line, text), self.line, self.col - 1)

    def delete_word(self) -> InputBuffer:
        """Delete the previous word and the whitespace after it (Ctrl+W)."""
        if self.col == 0:
            return self.backspace()
        current = self._current()
        new_col = _word_boundary_left(current, self.col)
        text = current[:new_col] + current[self.col :]
        return InputBuffer(_replace_at(self.lines, self.line, text), self.line, new_col)