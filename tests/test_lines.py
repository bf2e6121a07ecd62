import io

import pytest

from minishparse.lines import LineReader, read_lines


@pytest.mark.parametrize("size", [1, 2, 5, 100])
def test_terminated_lines_then_empty_end(size):
    reader = LineReader(io.StringIO("a\nb\n"), size)
    assert reader.next_line() == ("a", True)
    assert reader.next_line() == ("b", True)
    assert reader.next_line() == ("", False)


@pytest.mark.parametrize("size", [1, 3, 64])
def test_unterminated_last_line(size):
    reader = LineReader(io.StringIO("first\nlast"), size)
    assert reader.next_line() == ("first", True)
    assert reader.next_line() == ("last", False)


def test_exhausted_reader_keeps_reporting_end():
    reader = LineReader(io.StringIO("x"), 4)
    assert reader.next_line() == ("x", False)
    assert reader.next_line() == ("", False)


def test_empty_lines_are_kept():
    reader = LineReader(io.StringIO("\n\nz"), 1)
    assert reader.next_line() == ("", True)
    assert reader.next_line() == ("", True)
    assert reader.next_line() == ("z", False)


def test_binary_stream_with_multibyte_text():
    data = "héllo\nwörld".encode("utf-8")
    reader = LineReader(io.BytesIO(data), 1)
    assert reader.next_line() == ("héllo", True)
    assert reader.next_line() == ("wörld", False)


@pytest.mark.parametrize("size", [0, -1])
def test_bad_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)


@pytest.mark.parametrize(
    "text", ["one\ntwo\nthree", "single", "a\n\nb", "tab\there\nend"]
)
@pytest.mark.parametrize("size", [1, 4, 32])
def test_read_lines_round_trip(text, size):
    assert "\n".join(read_lines(io.StringIO(text), size)) == text


def test_read_lines_drops_empty_tail():
    assert list(read_lines(io.StringIO("a\nb\n"), 2)) == ["a", "b"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""), 8)) == []