"""Keyboard input for send-keys style commands."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Union


class Key(str, Enum):
    """Special keys as the private-use codepoints the WebDriver protocol defines."""

    NULL = "\ue000"
    CANCEL = "\ue001"
    HELP = "\ue002"
    BACKSPACE = "\ue003"
    TAB = "\ue004"
    CLEAR = "\ue005"
    RETURN = "\ue006"
    ENTER = "\ue007"
    SHIFT = "\ue008"
    CONTROL = "\ue009"
    ALT = "\ue00a"
    PAUSE = "\ue00b"
    ESCAPE = "\ue00c"
    SPACE = "\ue00d"
    PAGE_UP = "\ue00e"
    PAGE_DOWN = "\ue00f"
    END = "\ue010"
    HOME = "\ue011"
    LEFT = "\ue012"
    UP = "\ue013"
    RIGHT = "\ue014"
    DOWN = "\ue015"
    INSERT = "\ue016"
    DELETE = "\ue017"
    SEMICOLON = "\ue018"
    EQUALS = "\ue019"
    NUMPAD0 = "\ue01a"
    NUMPAD1 = "\ue01b"
    NUMPAD2 = "\ue01c"
    NUMPAD3 = "\ue01d"
    NUMPAD4 = "\ue01e"
    NUMPAD5 = "\ue01f"
    NUMPAD6 = "\ue020"
    NUMPAD7 = "\ue021"
    NUMPAD8 = "\ue022"
    NUMPAD9 = "\ue023"
    MULTIPLY = "\ue024"
    ADD = "\ue025"
    SEPARATOR = "\ue026"
    SUBTRACT = "\ue027"
    DECIMAL = "\ue028"
    DIVIDE = "\ue029"
    F1 = "\ue031"
    F2 = "\ue032"
    F3 = "\ue033"
    F4 = "\ue034"
    F5 = "\ue035"
    F6 = "\ue036"
    F7 = "\ue037"
    F8 = "\ue038"
    F9 = "\ue039"
    F10 = "\ue03a"
    F11 = "\ue03b"
    F12 = "\ue03c"
    META = "\ue03d"
    COMMAND = "\ue03d"
    ZENKAKU_HANKAKU = "\ue040"


TypingInput = Union[str, Key, "TypingData", Iterable[Union[str, Key, "TypingData"]]]


class TypingData:
    """Text and special keys to type, exposed as both wire views.

    ``text`` is the concatenated string and ``value`` is the same input broken
    into single characters. Send-keys requests carry both.
    """

    __slots__ = ("_chars",)

    def __init__(self, *parts: TypingInput) -> None:
        chars: list[str] = []
        for part in parts:
            if isinstance(part, TypingData):
                chars.extend(part._chars)
            elif isinstance(part, Key):
                chars.append(part.value)
            elif isinstance(part, str):
                chars.extend(part)
            else:
                for item in part:
                    chars.extend(TypingData(item)._chars)
        self._chars = chars

    @classmethod
    def of(cls, data: TypingInput) -> TypingData:
        if isinstance(data, TypingData):
            return data
        return cls(data)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def value(self) -> list[str]:
        return list(self._chars)

    def __add__(self, other: TypingInput) -> TypingData:
        return TypingData(self, other)

    def __radd__(self, other: TypingInput) -> TypingData:
        return TypingData(other, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypingData):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(tuple(self._chars))

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TypingData({self.text!r})"
