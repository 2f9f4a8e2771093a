"""The text being edited: lines, cursor and editing operations."""

from __future__ import annotations

import re
from dataclasses import dataclass

from termedit.keys import Key


@dataclass(frozen=True)
class Point:
    """A column (``x``) and row (``y``) position in the text."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Line:
    """A line of text and the characters drawn on screen for it."""

    chars: str
    render: str


class NoMatchError(LookupError):
    """Raised when no matching parenthesis can be found."""


def expand_tabs(chars: str, tab_stop: int) -> str:
    """Replace every tab with ``tab_stop`` spaces."""
    return chars.replace("\t", " " * tab_stop)


def compute_rx(chars: str, x: int, tab_stop: int) -> int:
    """Return the rendered column of character index ``x``."""
    return sum(tab_stop if ch == "\t" else 1 for ch in chars[:x])


def search_points(row: int, text: str, query: str) -> list[Point]:
    """Return the start of every non-overlapping occurrence of ``query``."""
    if not query:
        return []
    return [Point(x=m.start(), y=row) for m in re.finditer(re.escape(query), text)]


class TextBuffer:
    """Lines of text with a cursor and a modified flag."""

    def __init__(self, tab_stop: int = 4) -> None:
        self.tab_stop = tab_stop
        self.lines: list[Line] = []
        self.cursor = Point()
        self.dirty = False

    def _make_line(self, chars: str) -> Line:
        return Line(chars=chars, render=expand_tabs(chars, self.tab_stop))

    def load_text(self, text: str) -> None:
        """Replace the contents with ``text``, split into lines."""
        rows = text.split("\n")
        if rows and rows[-1] == "":
            rows.pop()
        self.lines = [self._make_line(r[:-1] if r.endswith("\r") else r) for r in rows]
        self.cursor = Point()
        self.dirty = False

    def insert_row(self, row: int, text: str) -> None:
        """Insert a line before index ``row``; out-of-range rows are ignored."""
        if not 0 <= row <= len(self.lines):
            return
        self.lines.insert(row, self._make_line(text))
        self.dirty = True

    def delete_row(self, row: int) -> None:
        """Remove line ``row``; out-of-range rows are ignored."""
        if not 0 <= row < len(self.lines):
            return
        del self.lines[row]
        self.dirty = True

    def insert_char(self, char: str) -> None:
        """Insert ``char`` at the cursor and move the cursor past it."""
        x, y = self.cursor.x, self.cursor.y
        if y == len(self.lines):
            self.insert_row(len(self.lines), "")
        chars = self.lines[y].chars
        if 0 <= x <= len(chars):
            self.lines[y] = self._make_line(chars[:x] + char + chars[x:])
        self.cursor = Point(x=x + 1, y=y)
        self.dirty = True

    def insert_newline(self) -> None:
        """Split the current line at the cursor."""
        x, y = self.cursor.x, self.cursor.y
        if x == 0:
            self.insert_row(y, "")
        else:
            chars = self.lines[y].chars
            self.lines[y] = self._make_line(chars[:x])
            self.insert_row(y + 1, chars[x:])
        self.cursor = Point(x=0, y=y + 1)

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at column 0."""
        x, y = self.cursor.x, self.cursor.y
        if y >= len(self.lines) or (x == 0 and y == 0):
            return
        if x > 0:
            chars = self.lines[y].chars
            self.lines[y] = self._make_line(chars[: x - 1] + chars[x:])
            self.cursor = Point(x=x - 1, y=y)
        else:
            previous = self.lines[y - 1].chars
            self.lines[y - 1] = self._make_line(previous + self.lines[y].chars)
            self.delete_row(y)
            self.cursor = Point(x=len(previous), y=y - 1)
        self.dirty = True

    def move_cursor(self, key: int) -> None:
        """Move the cursor for an arrow key, then snap it to the line end."""
        x, y = self.cursor.x, self.cursor.y
        count = len(self.lines)
        if key == Key.ARROW_LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = len(self.lines[y].chars)
        elif key == Key.ARROW_RIGHT:
            if y < count:
                length = len(self.lines[y].chars)
                if x < length:
                    x += 1
                elif x == length:
                    y += 1
                    x = 0
        elif key == Key.ARROW_DOWN:
            if y < count:
                y += 1
        elif key == Key.ARROW_UP:
            if y > 0:
                y -= 1

        row_length = len(self.lines[y].chars) if y < count else 0
        self.cursor = Point(x=min(x, row_length), y=y)

    def set_cursor(self, point: Point) -> None:
        """Place the cursor at ``point``."""
        self.cursor = Point(x=point.x, y=point.y)

    def cursor_rx(self) -> int:
        """Return the rendered column of the cursor."""
        if self.cursor.y < len(self.lines):
            return compute_rx(self.lines[self.cursor.y].chars, self.cursor.x, self.tab_stop)
        return 0

    def find_all(self, query: str) -> list[Point]:
        """Return every occurrence of ``query`` in reading order."""
        return [
            point
            for row, line in enumerate(self.lines)
            for point in search_points(row, line.chars, query)
        ]

    def matching_paren(self, left: str, right: str) -> Point:
        """Search backwards from the cursor for the bracket balancing ``right``."""
        depth = 0
        first = True
        for y in range(self.cursor.y, -1, -1):
            chars = self.lines[y].chars if y < len(self.lines) else ""
            start = self.cursor.x - 1 if first else len(chars) - 1
            first = False
            for i, ch in reversed(list(enumerate(chars[: start + 1]))):
                if ch == right:
                    depth += 1
                elif ch == left:
                    depth -= 1
                if depth == 0:
                    return Point(x=i, y=y)
        raise NoMatchError("no matching parenthesis found")

    def to_text(self) -> str:
        """Return the contents with every line ended by a newline."""
        return "".join(line.chars + "\n" for line in self.lines)