"""Mapping of terminal key events onto application actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class KeyCode(enum.Enum):
    """Keys the terminal can report."""

    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    TAB = "tab"
    BACK_TAB = "back_tab"
    DELETE = "delete"
    INSERT = "insert"
    F = "f"
    NULL = "null"
    CAPS_LOCK = "caps_lock"
    SCROLL_LOCK = "scroll_lock"
    NUM_LOCK = "num_lock"
    PRINT_SCREEN = "print_screen"
    PAUSE = "pause"
    MENU = "menu"
    KEYPAD_BEGIN = "keypad_begin"
    MEDIA = "media"
    MODIFIER = "modifier"


class Modifiers(enum.Flag):
    """Modifier keys held while a key was pressed."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """One key press; ``char`` is set only for :attr:`KeyCode.CHAR`."""

    code: KeyCode
    modifiers: Modifiers = Modifiers.NONE
    char: str = ""

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and len(self.char) != 1:
            raise ValueError("a CHAR key event needs exactly one character")


class KeyAction(enum.Enum):
    """Actions the application reacts to."""

    SEND = "send"
    NEW_LINE = "new_line"
    BACKSPACE = "backspace"
    DELETE_WORD = "delete_word"
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    CANCEL = "cancel"
    QUIT = "quit"
    NO_OP = "no_op"


@dataclass(frozen=True)
class CharAction:
    """Insert a literal character into the input."""

    char: str


Action = Union[KeyAction, CharAction]

_UNMODIFIED = {
    KeyCode.ENTER: KeyAction.SEND,
    KeyCode.BACKSPACE: KeyAction.BACKSPACE,
    KeyCode.ESC: KeyAction.CANCEL,
    KeyCode.UP: KeyAction.UP,
    KeyCode.DOWN: KeyAction.DOWN,
    KeyCode.PAGE_UP: KeyAction.PAGE_UP,
    KeyCode.PAGE_DOWN: KeyAction.PAGE_DOWN,
}

_CONTROL_CHARS = {
    "c": KeyAction.QUIT,
    "d": KeyAction.QUIT,
    "w": KeyAction.DELETE_WORD,
}


def lift(event: object) -> Action:
    """Map a terminal event to an action; anything unrecognised is NO_OP."""
    if not isinstance(event, KeyEvent):
        return KeyAction.NO_OP
    code, mods = event.code, event.modifiers
    if code is KeyCode.CHAR:
        if mods in (Modifiers.NONE, Modifiers.SHIFT):
            return CharAction(event.char)
        if mods == Modifiers.CONTROL:
            return _CONTROL_CHARS.get(event.char, KeyAction.NO_OP)
        return KeyAction.NO_OP
    if code is KeyCode.ENTER and mods == Modifiers.SHIFT:
        return KeyAction.NEW_LINE
    if mods == Modifiers.NONE:
        return _UNMODIFIED.get(code, KeyAction.NO_OP)
    return KeyAction.NO_OP