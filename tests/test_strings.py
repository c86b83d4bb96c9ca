import pytest

from fdfview.strings import (
    count_words,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

SENTENCE = "hello cruel cruel world"


def test_split_sentence():
    assert split(SENTENCE, " ") == ["hello", "cruel", "cruel", "world"]


def test_count_words_matches_split_for_spaces():
    assert count_words(SENTENCE, " ") == len(split(SENTENCE, " "))


def test_split_keeps_trailing_newline_of_last_word():
    assert split("0 1 -2\n", " ") == ["0", "1", "-2\n"]


def test_split_skips_repeated_and_leading_delimiters():
    assert split("   a   b  ", " ") == ["a", "b"]


def test_split_empty_text():
    assert split("", " ") == []
    assert count_words("", " ") == 0


def test_split_other_delimiter_terminates():
    assert split("a,b,,c", ",") == ["a", "b", "c"]


def test_split_rejects_bad_delimiter():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(" ".join(words), " ") == words


def test_strchr_first_occurrence():
    text = "banana"
    index = strchr(text, "n")
    assert index == text.index("n")
    assert strchr(text, "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_last_occurrence():
    text = "banana"
    assert strrchr(text, "a") == len(text) - 1
    assert strrchr(text, "q") is None
    assert strrchr(text, "\0") == len(text)


def test_strnstr_finds_needle_within_bound():
    haystack = "file.fdf"
    assert strnstr(haystack, ".fdf", len(haystack)) == haystack.index(".fdf")


def test_strnstr_needle_past_bound():
    haystack = "file.fdf"
    assert strnstr(haystack, ".fdf", len(haystack) - 1) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcx", "abcy", 3) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")


def test_strlcpy_truncates_and_reports_source_length():
    src = "hello"
    copied, length = strlcpy(src, 3)
    assert copied == src[:2]
    assert length == len(src)


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_appends_within_size():
    result, total = strlcat("ab", "cdef", 5)
    assert result == "abcd"
    assert total == len("ab") + len("cdef")


def test_strlcat_size_too_small():
    assert strlcat("abc", "de", 2) == ("abc", 2 + len("de"))
    assert strlcat("abc", "de", 0) == ("abc", len("de"))


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"


def test_strtrim():
    assert strtrim("  xhix  ", " x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("", "x") == ""
    assert strtrim("keep", "") == "keep"


def test_substr():
    text = "hello world"
    assert substr(text, 6, 5) == "world"
    assert substr(text, 6, 100) == "world"
    assert substr(text, len(text) + 1, 3) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbC"


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i == 1 else None)
    assert chars == ["a", "B", "c", "d"]


def test_striteri_sees_every_index():
    seen = []
    chars = list("xyz")
    striteri(chars, lambda i, ch: seen.append((i, ch)))
    assert seen == list(enumerate("xyz"))
    assert chars == list("xyz")