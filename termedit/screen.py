"""Drawing the editor screen: viewport scrolling, rows, status bar and messages."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from termedit.buffer import TextBuffer

VERSION = "1.0.0"
WELCOME = f"Simple editor. Version {VERSION}"

HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
CURSOR_HOME = "\x1b[H"
CLEAR_LINE = "\x1b[K"
INVERT = "\x1b[7m"
NORMAL = "\x1b[m"
NEWLINE = "\r\n"


@dataclass
class Viewport:
    """The part of the text visible on screen."""

    rows: int
    cols: int
    file_y: int = 0
    file_x: int = 0
    rx: int = 0

    def scroll(self, buffer: TextBuffer) -> None:
        """Move the visible window so that the cursor lies inside it."""
        self.rx = buffer.cursor_rx()
        y = buffer.cursor.y
        if y < self.file_y:
            self.file_y = y
        if y >= self.file_y + self.rows:
            self.file_y = y - self.rows + 1
        if self.rx < self.file_x:
            self.file_x = self.rx
        if self.rx >= self.file_x + self.cols:
            self.file_x = self.rx - self.cols + 1


@dataclass
class StatusMessage:
    """A message shown below the status bar until it times out."""

    timeout: float = 3.0
    clock: Callable[[], float] = time.monotonic
    text: str = ""
    _set_at: Optional[float] = field(default=None, init=False, repr=False)

    def set(self, text: str) -> None:
        """Show ``text`` starting now."""
        self.text = text
        self._set_at = self.clock()

    def current(self) -> str:
        """Return the message if it has not yet timed out, else an empty string."""
        if self._set_at is None or self.clock() - self._set_at >= self.timeout:
            return ""
        return self.text


def _welcome(cols: int) -> str:
    message = WELCOME[: max(cols, 0)]
    padding = (cols - len(message)) // 2
    prefix = ""
    if padding > 0:
        prefix = "~"
        padding -= 1
    return prefix + " " * padding + message


def draw_rows(buffer: TextBuffer, viewport: Viewport) -> str:
    """Return the text rows of the screen."""
    out = []
    for y in range(viewport.rows):
        file_line = y + viewport.file_y
        if file_line < len(buffer.lines):
            render = buffer.lines[file_line].render
            out.append(render[viewport.file_x : viewport.file_x + max(viewport.cols, 0)])
        elif not buffer.lines and y == viewport.rows // 3:
            out.append(_welcome(viewport.cols))
        else:
            out.append("~")
        out.append(CLEAR_LINE + NEWLINE)
    return "".join(out)


def draw_status_bar(buffer: TextBuffer, viewport: Viewport, file_name: str, dirty: bool) -> str:
    """Return the inverted status bar with file name, line count and cursor position."""
    name = file_name or "No Name"
    marker = "*" if dirty else ""
    left = f"[{marker}{name[:20]}] - {len(buffer.lines)} lines"
    right = f"L{buffer.cursor.y + 1},C{buffer.cursor.x + 1}"
    spaces = viewport.cols - len(left) - len(right)
    if spaces >= 0:
        body = left + " " * spaces + right
    else:
        body = (left + right)[: max(viewport.cols, 0)]
    return INVERT + body + NORMAL + NEWLINE


def draw_status_message(status: StatusMessage, viewport: Viewport) -> str:
    """Return the message line, truncated to the screen width."""
    text = status.current()
    if len(text) >= viewport.cols:
        text = text[: max(viewport.cols, 0)]
    return CLEAR_LINE + text


def render_frame(
    buffer: TextBuffer,
    viewport: Viewport,
    file_name: str,
    dirty: bool,
    status: StatusMessage,
) -> str:
    """Scroll the viewport and return the escape sequences for a full redraw."""
    viewport.scroll(buffer)
    cursor = (
        f"\x1b[{buffer.cursor.y - viewport.file_y + 1};"
        f"{viewport.rx - viewport.file_x + 1}H"
    )
    return "".join(
        (
            HIDE_CURSOR,
            CURSOR_HOME,
            draw_rows(buffer, viewport),
            draw_status_bar(buffer, viewport, file_name, dirty),
            draw_status_message(status, viewport),
            cursor,
            SHOW_CURSOR,
        )
    )


def clear_screen(rows: int) -> str:
    """Return the escape sequences that blank the screen and home the cursor."""
    lines = (CLEAR_LINE + NEWLINE) * (rows + 2)
    return HIDE_CURSOR + CURSOR_HOME + lines + CURSOR_HOME + SHOW_CURSOR