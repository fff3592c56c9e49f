import pytest

from cubmap.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("s", ["", "a", "hello world", "map.cub"])
def test_strlen_matches_length(s):
    assert strlen(s) == len(s)


def test_strlen_empty_is_zero():
    assert strlen("") == 0


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "c"), ("x", "x")])
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_and_empty():
    assert strchr("hello", "z") is None
    assert strchr("", "a") is None


def test_strchr_terminator_points_past_end():
    assert strchr("hello", 0) == len("hello")
    assert strchr("", "\0") == 0


def test_strchr_accepts_integer_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a"), ("x", "x")])
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_terminator():
    assert strrchr("hello", "q") is None
    assert strrchr("", "a") is None
    assert strrchr("hello", 0) == len("hello")


def test_strncmp_equal_strings():
    assert strncmp("NO ./north.xpm", "NO ./north.xpm", 100) == 0


def test_strncmp_only_compares_n():
    assert strncmp("NO ./a", "NOPE", 2) == 0
    assert strncmp("map.cub", "map.txt", 4) == 0


def test_strncmp_shorter_prefix_is_lower():
    assert strncmp("ab", "abc", 10) == -1
    assert strncmp("abc", "ab", 10) == 1


@pytest.mark.parametrize("a,b", [("abc", "abd"), ("z", "a"), ("", "x"), ("same", "same")])
def test_strncmp_antisymmetric(a, b):
    assert strncmp(a, b, 10) == -strncmp(b, a, 10)


def test_strncmp_zero_n_is_equal():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_negative_n_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_zero_length():
    assert strnstr("abc", "a", 0) is None


def test_strnstr_found_within_length():
    haystack, needle = "lorem ipsum dolor", "ipsum"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle
    assert strnstr(haystack, needle, index + len(needle)) == index


def test_strnstr_needle_crossing_limit():
    haystack, needle = "lorem ipsum dolor", "ipsum"
    index = strnstr(haystack, needle, len(haystack))
    assert strnstr(haystack, needle, index + len(needle) - 1) is None


def test_strnstr_missing():
    assert strnstr("abc", "abcd", 10) is None


def test_strdup_equal_copy():
    original = "SO ./south.xpm"
    assert strdup(original) == original


def test_strdup_rejects_non_string():
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_is_slice_prefix():
    s = "hello world"
    part = substr(s, 3, 4)
    assert s[3:].startswith(part)
    assert len(part) == 4


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_length_clipped_to_end():
    s = "abcdef"
    assert substr(s, 2, 100) == s[2:]


def test_substr_none_and_negative():
    assert substr(None, 0, 1) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 1)


def test_strjoin_concatenates():
    s1, s2 = "F ", "220,100,0"
    joined = strjoin(s1, s2)
    assert joined.startswith(s1)
    assert joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_strjoin_none():
    assert strjoin(None, "a") is None
    assert strjoin("a", None) is None


def test_strtrim_removes_set_from_ends():
    charset = " \n"
    result = strtrim("  ./path/to tex \n", charset)
    assert result
    assert result[0] not in charset
    assert result[-1] not in charset
    assert "./path/to tex" == result


def test_strtrim_all_removed_and_empty_set():
    assert strtrim("xxxx", "x") == ""
    assert strtrim(" a ", "") == " a "
    assert strtrim(None, "x") is None


@pytest.mark.parametrize("s", ["a b c", "  lead and trail  ", "one", "", "    "])
def test_split_has_no_empty_or_separator(s):
    parts = split(s, " ")
    assert all(parts)
    assert all(" " not in part for part in parts)
    assert " ".join(parts) == " ".join(s.split())


def test_split_round_trip_without_repeats():
    s = "220,100,0"
    assert ",".join(split(s, ",")) == s


def test_split_only_separators_and_none():
    assert split(",,,", ",") == []
    assert split(None, ",") is None


def test_strmapi_identity_and_index():
    s = "abc"
    assert strmapi(s, lambda i, ch: ch) == s
    seen = []
    strmapi(s, lambda i, ch: seen.append(i) or ch)
    assert seen == list(range(len(s)))


def test_strmapi_upper():
    s = "north"
    assert strmapi(s, lambda i, ch: ch.upper()) == s.upper()


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_none_is_ignored():
    striteri(None, lambda i, ch: ch)
    chars = list("xy")
    striteri(chars, lambda i, ch: None)
    assert chars == ["x", "y"]


def test_strlcpy_full_copy():
    src = "hello"
    copied, total = strlcpy(src, len(src) + 1)
    assert copied == src
    assert total == len(src)


def test_strlcpy_truncates():
    src = "hello world"
    copied, total = strlcpy(src, 4)
    assert len(copied) == 3
    assert src.startswith(copied)
    assert total == len(src)


def test_strlcpy_zero_size():
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcat_fits():
    dest, src = "abc", "def"
    result, total = strlcat(dest, src, 20)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_strlcat_truncates_to_size():
    dest, src = "abc", "defghij"
    size = 6
    result, total = strlcat(dest, src, size)
    assert len(result) == size - 1
    assert (dest + src).startswith(result)
    assert total == len(dest) + len(src)


def test_strlcat_dest_longer_than_size():
    dest, src = "abcdef", "xyz"
    result, total = strlcat(dest, src, 3)
    assert result == dest
    assert total == 3 + len(src)


def test_strlcat_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)