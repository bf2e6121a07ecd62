import pytest

from minishparse.strings import (
    char_index,
    split,
    strchr,
    strcmp,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_skips_repeated_separators():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_single_word():
    assert split("abc", ",") == ["abc"]


@pytest.mark.parametrize("text", ["", "   "])
def test_split_nothing_but_separators(text):
    assert split(text, " ") == []


@pytest.mark.parametrize(
    "text", ["a,b,,c", ",,lead", "trail,,", "x", "one,two,three", ",,,"]
)
def test_split_invariants(text):
    parts = split(text, ",")
    assert all(parts)
    assert all("," not in part for part in parts)
    assert "".join(parts) == text.replace(",", "")


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strchr_missing_and_nul():
    assert strchr("hello", "z") is None
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("hello", "\0") == len("hello")


def test_char_index():
    text = "abcabc"
    index = char_index(text, "c")
    assert text[index] == "c"
    assert "c" not in text[:index]
    assert char_index(text, "z") == -1
    assert char_index(text, "\0") == -1
    assert char_index(None, "a") == -1


def test_strcmp_equal_and_order():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0


def test_strcmp_prefix_uses_code_difference():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


@pytest.mark.parametrize("pair", [("a", "b"), ("zz", "z"), ("", "x"), ("same", "same")])
def test_strcmp_antisymmetric(pair):
    first, second = pair
    assert strcmp(first, second) == -strcmp(second, first)


def test_strncmp_limits_comparison():
    assert strncmp("abcx", "abcy", 3) == 0
    assert strncmp("abcx", "abcy", 4) < 0
    assert strncmp("different", "words", 0) == 0


def test_strncmp_rejects_negative():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_bound():
    haystack = "lorem ipsum"
    index = strnstr(haystack, "ipsum", len(haystack))
    assert haystack[index:index + len("ipsum")] == "ipsum"


def test_strnstr_needle_crossing_bound():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None


def test_strnstr_empty_and_missing():
    assert strnstr("abc", "", 3) == 0
    assert strnstr("abc", "zz", 3) is None


def test_strtrim_both_ends():
    assert strtrim("  xhix  ", " x") == "hi"


def test_strtrim_everything_trimmed():
    assert strtrim("aaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_single_character_is_emptied():
    assert strtrim("q", "a") == ""


def test_strtrim_untouched_when_nothing_matches():
    assert strtrim("keep", "xyz") == "keep"


@pytest.mark.parametrize("start,length", [(0, 3), (1, 2), (2, 10), (4, 1)])
def test_substr_invariants(start, length):
    text = "hello"
    result = substr(text, start, length)
    assert text.startswith(result, start)
    assert len(result) == min(length, len(text) - start)


def test_substr_start_past_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 99, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 0, -2)


def test_strjoin():
    result = strjoin("foo", "bar")
    assert result.startswith("foo")
    assert result.endswith("bar")
    assert len(result) == len("foo") + len("bar")


def test_strjoin_none_raises():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strmapi_passes_char_and_index():
    assert strmapi("abc", lambda i, c: c.upper()) == "ABC"
    assert strmapi("aaa", lambda i, c: str(i)) == "012"


def test_strlcpy_truncates():
    copied, length = strlcpy("hello", 3)
    assert copied == "he"
    assert length == len("hello")


def test_strlcpy_fits_and_zero():
    assert strlcpy("hello", 100) == ("hello", len("hello"))
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_fits():
    result, wanted = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert wanted == len("ab") + len("cd")


def test_strlcat_truncated_append():
    result, wanted = strlcat("ab", "cdef", 4)
    assert result.startswith("ab")
    assert len(result) == 4 - 1
    assert wanted == len("ab") + len("cdef")


def test_strlcat_size_below_destination():
    result, wanted = strlcat("abc", "de", 1)
    assert result == "abc"
    assert wanted == 1 + len("de")


def test_strlcat_rejects_negative():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)