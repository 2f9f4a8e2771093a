import pytest

from termedit.buffer import (
    Line,
    NoMatchError,
    Point,
    TextBuffer,
    compute_rx,
    expand_tabs,
    search_points,
)
from termedit.keys import Key


def buffer_with(text: str) -> TextBuffer:
    buf = TextBuffer(tab_stop=4)
    buf.load_text(text)
    return buf


def texts(buf: TextBuffer) -> list[str]:
    return [line.chars for line in buf.lines]


def test_expand_tabs():
    assert expand_tabs("a\tb", 4) == "a" + " " * 4 + "b"
    assert expand_tabs("plain", 8) == "plain"


@pytest.mark.parametrize("chars", ["", "abc", "\t", "a\tb\tc", "\t\tx"])
@pytest.mark.parametrize("tab_stop", [1, 4, 8])
def test_compute_rx_matches_rendered_length(chars, tab_stop):
    assert compute_rx(chars, len(chars), tab_stop) == len(expand_tabs(chars, tab_stop))


def test_search_points_positions_and_row():
    text = "abcabc xbc"
    points = search_points(3, text, "bc")
    assert len(points) == text.count("bc")
    assert all(p.y == 3 and text[p.x : p.x + 2] == "bc" for p in points)
    assert [p.x for p in points] == sorted(p.x for p in points)


def test_search_points_non_overlapping():
    assert len(search_points(0, "aaaa", "aa")) == "aaaa".count("aa")


def test_search_points_empty_query():
    assert search_points(0, "abc", "") == []


def test_search_points_special_characters():
    assert search_points(0, "a.b", ".") == [Point(x=1, y=0)]


def test_load_text_lines():
    buf = buffer_with("one\ntwo\r\nthree")
    assert texts(buf) == ["one", "two", "three"]
    assert buf.dirty is False


def test_load_empty_text():
    buf = buffer_with("")
    assert buf.lines == []


def test_render_expands_tabs():
    buf = buffer_with("\tx\n")
    assert buf.lines[0] == Line(chars="\tx", render=expand_tabs("\tx", 4))


@pytest.mark.parametrize("text", ["", "a\n", "one\n\ntwo\n", "\tindented\nend\n"])
def test_to_text_round_trip(text):
    assert buffer_with(text).to_text() == text


def test_insert_char_at_end_of_file_creates_line():
    buf = TextBuffer()
    buf.insert_char("x")
    assert texts(buf) == ["x"]
    assert buf.cursor == Point(x=1, y=0)
    assert buf.dirty is True


def test_insert_char_in_middle():
    buf = buffer_with("ac\n")
    buf.set_cursor(Point(x=1, y=0))
    buf.insert_char("b")
    assert texts(buf) == ["abc"]
    assert buf.cursor == Point(x=2, y=0)


def test_insert_newline_splits_line():
    buf = buffer_with("hello\n")
    buf.set_cursor(Point(x=2, y=0))
    buf.insert_newline()
    assert texts(buf) == ["he", "llo"]
    assert buf.cursor == Point(x=0, y=1)


def test_insert_newline_at_line_start():
    buf = buffer_with("hello\n")
    buf.insert_newline()
    assert texts(buf) == ["", "hello"]
    assert buf.cursor == Point(x=0, y=1)


def test_delete_char_undoes_newline():
    buf = buffer_with("hello\nworld\n")
    buf.set_cursor(Point(x=3, y=1))
    buf.insert_newline()
    buf.delete_char()
    assert buf.to_text() == "hello\nworld\n"
    assert buf.cursor == Point(x=3, y=1)


def test_delete_char_undoes_insert():
    buf = buffer_with("abc\n")
    buf.set_cursor(Point(x=2, y=0))
    buf.insert_char("z")
    buf.delete_char()
    assert texts(buf) == ["abc"]
    assert buf.cursor == Point(x=2, y=0)


def test_delete_char_at_origin_does_nothing():
    buf = buffer_with("abc\n")
    buf.delete_char()
    assert texts(buf) == ["abc"]
    assert buf.dirty is False


def test_delete_char_past_last_line_does_nothing():
    buf = buffer_with("abc\n")
    buf.set_cursor(Point(x=0, y=1))
    buf.delete_char()
    assert texts(buf) == ["abc"]


def test_insert_and_delete_row_out_of_range_ignored():
    buf = buffer_with("a\n")
    buf.insert_row(5, "x")
    buf.delete_row(-1)
    buf.delete_row(1)
    assert texts(buf) == ["a"]
    assert buf.dirty is False


def test_insert_and_delete_row():
    buf = buffer_with("a\nc\n")
    buf.insert_row(1, "b")
    assert texts(buf) == ["a", "b", "c"]
    buf.delete_row(0)
    assert texts(buf) == ["b", "c"]
    assert buf.dirty is True


def test_move_left_wraps_to_previous_line_end():
    buf = buffer_with("abc\nde\n")
    buf.set_cursor(Point(x=0, y=1))
    buf.move_cursor(Key.ARROW_LEFT)
    assert buf.cursor == Point(x=len("abc"), y=0)


def test_move_right_wraps_to_next_line():
    buf = buffer_with("abc\nde\n")
    buf.set_cursor(Point(x=3, y=0))
    buf.move_cursor(Key.ARROW_RIGHT)
    assert buf.cursor == Point(x=0, y=1)


def test_move_down_snaps_to_line_end_and_stops_past_last_line():
    buf = buffer_with("abcdef\nab\n")
    buf.set_cursor(Point(x=5, y=0))
    buf.move_cursor(Key.ARROW_DOWN)
    assert buf.cursor == Point(x=len("ab"), y=1)
    buf.move_cursor(Key.ARROW_DOWN)
    assert buf.cursor == Point(x=0, y=2)
    buf.move_cursor(Key.ARROW_DOWN)
    assert buf.cursor.y == len(buf.lines)


def test_move_up_at_top_stays():
    buf = buffer_with("abc\n")
    buf.move_cursor(Key.ARROW_UP)
    assert buf.cursor == Point(x=0, y=0)


def test_cursor_rx_counts_tabs():
    buf = buffer_with("\tab\n")
    buf.set_cursor(Point(x=2, y=0))
    assert buf.cursor_rx() == compute_rx("\tab", 2, 4)
    buf.set_cursor(Point(x=0, y=1))
    assert buf.cursor_rx() == 0


def test_find_all_across_lines():
    buf = buffer_with("foo bar\nbar foo foo\n")
    points = buf.find_all("foo")
    assert len(points) == buf.to_text().count("foo")
    assert all(buf.lines[p.y].chars[p.x : p.x + 3] == "foo" for p in points)
    assert [p.y for p in points] == sorted(p.y for p in points)


def test_matching_paren_simple():
    buf = buffer_with("(a)\n")
    buf.set_cursor(Point(x=3, y=0))
    assert buf.matching_paren("(", ")") == Point(x=0, y=0)


def test_matching_paren_nested():
    buf = buffer_with("(())\n")
    buf.set_cursor(Point(x=4, y=0))
    outer = buf.matching_paren("(", ")")
    buf.set_cursor(Point(x=3, y=0))
    inner = buf.matching_paren("(", ")")
    assert outer == Point(x=0, y=0)
    assert inner.x > outer.x
    assert buf.lines[0].chars[inner.x] == "("


def test_matching_paren_across_lines_and_empty_line():
    buf = buffer_with("{\n\n  x}\n")
    buf.set_cursor(Point(x=4, y=2))
    assert buf.matching_paren("{", "}") == Point(x=0, y=0)


def test_matching_paren_unbalanced():
    buf = buffer_with("a)\n")
    buf.set_cursor(Point(x=2, y=0))
    with pytest.raises(NoMatchError):
        buf.matching_paren("(", ")")