"""Key codes, key-combination parsing, keymaps and escape-sequence decoding."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable, Optional, Union

ESCAPE = 0x1B
ENTER = ord("\r")
TAB = ord("\t")


class Key(IntEnum):
    """Codes for keys that do not map to a single printable character."""

    BACKSPACE = 127
    ARROW_UP = 1000
    ARROW_DOWN = 1001
    ARROW_LEFT = 1002
    ARROW_RIGHT = 1003
    PAGE_UP = 1004
    PAGE_DOWN = 1005
    HOME = 1006
    END = 1007
    DELETE = 1008


class KeymapError(ValueError):
    """Raised when a keymap or a key combination cannot be parsed."""


@dataclass(frozen=True)
class KeyCombo:
    """A key together with its modifier flags."""

    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    key: int = 0


_NAMED_KEYS = {
    "up": Key.ARROW_UP,
    "down": Key.ARROW_DOWN,
    "left": Key.ARROW_LEFT,
    "right": Key.ARROW_RIGHT,
    "pageup": Key.PAGE_UP,
    "pagedown": Key.PAGE_DOWN,
    "home": Key.HOME,
    "end": Key.END,
    "backspace": Key.BACKSPACE,
    "delete": Key.DELETE,
}

_TILDE_KEYS = {
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("3"): Key.DELETE,
}

_ARROW_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
}

_CSI_KEYS = {**_ARROW_KEYS, ord("H"): Key.HOME, ord("F"): Key.END}

_LATIN_LEAD = 0xC3
_LATIN_LETTERS = {
    165: ord("å"),
    164: ord("ä"),
    182: ord("ö"),
    133: ord("Å"),
    132: ord("Ä"),
    150: ord("Ö"),
}


def ctrl_key(char: Union[str, int]) -> int:
    """Return the code the terminal sends for ctrl plus the given key."""
    code = ord(char) if isinstance(char, str) else int(char)
    return code & 0x1F


def parse_key_combo(text: str) -> KeyCombo:
    """Parse a description such as ``ctrl+q`` or ``shift+up``."""
    ctrl = alt = shift = False
    key = 0
    for part in text.lower().split("+"):
        if part == "ctrl":
            ctrl = True
        elif part == "alt":
            alt = True
        elif part == "shift":
            shift = True
        elif part in _NAMED_KEYS:
            key = int(_NAMED_KEYS[part])
        elif len(part.encode("utf-8")) == 1:
            key = ord(part)
        else:
            raise KeymapError(f"unknown key part: {part}")
    return KeyCombo(ctrl=ctrl, alt=alt, shift=shift, key=key)


def key_combo_to_int(combo: KeyCombo) -> int:
    """Return the key code that the terminal delivers for a combination."""
    if combo.ctrl and ord("a") <= combo.key <= ord("z"):
        return ctrl_key(combo.key)
    return combo.key


def load_keymap(path: Union[str, Path]) -> dict[int, str]:
    """Read a JSON keymap file mapping key descriptions to command names."""
    raw = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise KeymapError(f"invalid keymap: {exc}") from exc
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise KeymapError("keymap must be a JSON object of strings")

    keymap: dict[int, str] = {}
    for key_text, command in data.items():
        try:
            combo = parse_key_combo(key_text)
        except KeymapError as exc:
            raise KeymapError(f"error parsing key {key_text}: {exc}") from exc
        keymap[key_combo_to_int(combo)] = command
    return keymap


class KeyReader:
    """Decode raw input bytes into key codes.

    ``read_byte`` returns the next byte as an int, or ``None`` when no input
    is currently available.
    """

    def __init__(self, read_byte: Callable[[], Optional[int]]) -> None:
        self._read_byte = read_byte

    def read_key(self) -> int:
        """Wait for and return the next key; unknown sequences are skipped."""
        while True:
            byte = self._read_byte()
            if byte is None:
                continue
            if byte == ESCAPE:
                key = self._escape_sequence()
            elif byte == _LATIN_LEAD:
                key = self._latin_letter()
            else:
                return byte
            if key is not None:
                return int(key)

    def _escape_sequence(self) -> Optional[int]:
        first = self._read_byte()
        if first is None:
            return ESCAPE
        second = self._read_byte()
        if second is None:
            return ESCAPE
        if first != ord("["):
            return None
        if not ord("0") <= second <= ord("9"):
            return _CSI_KEYS.get(second)

        third = self._read_byte()
        if third is None:
            return ESCAPE
        if third == ord("~"):
            return _TILDE_KEYS.get(second)
        if third == ord(";"):
            modifier = self._read_byte()
            final = self._read_byte()
            if modifier is None or final is None:
                return ESCAPE
            if modifier == ord("2"):
                return _ARROW_KEYS.get(final)
        return None

    def _latin_letter(self) -> Optional[int]:
        follow = self._read_byte()
        if follow is None:
            return ESCAPE
        return _LATIN_LETTERS.get(follow)