import pytest

from mxlib.strings import (
    count_substr,
    count_words,
    del_extra_spaces,
    find_char,
    find_substr,
    replace_substr,
    str_reverse,
    strcmp,
    strjoin,
    strncmp,
    strsplit,
    strstr,
    strtrim,
)


def test_strcmp_equal():
    assert strcmp("hello", "hello") == 0
    assert strcmp("", "") == 0


@pytest.mark.parametrize("a, b", [("abc", "abd"), ("ab", "abc"), ("", "a"), ("A", "a")])
def test_strcmp_ordering_and_antisymmetry(a, b):
    assert strcmp(a, b) < 0
    assert strcmp(b, a) == -strcmp(a, b)


def test_strcmp_difference_at_end():
    assert strcmp("a", "") == ord("a")


def test_strncmp_limited():
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abcX", "abcY", 4) < 0
    assert strncmp("abc", "abcdef", 3) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == strcmp("ab", "abc")


@pytest.mark.parametrize("size", [0, -3])
def test_strncmp_non_positive_compares_all(size):
    assert strncmp("abcX", "abcY", size) == strcmp("abcX", "abcY")


def test_strstr_found():
    assert strstr("hello world", "wor") == "world"


def test_strstr_absent():
    assert strstr("hello world", "xyz") is None


def test_strstr_empty_needle():
    assert strstr("hello", "") == "hello"


def test_find_char():
    text = "hello"
    index = find_char(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_find_char_absent():
    assert find_char("hello", "z") == -1


def test_find_char_bad_char():
    with pytest.raises(ValueError):
        find_char("hello", "ll")


@pytest.mark.parametrize("text, sub", [("hello world", "world"), ("abcabc", "ca"), ("aaa", "a")])
def test_find_substr_found(text, sub):
    index = find_substr(text, sub)
    assert text[index:].startswith(sub)
    assert sub not in text[: index + len(sub) - 1]


@pytest.mark.parametrize("text, sub", [("hello", "xyz"), ("hello", ""), ("", "a")])
def test_find_substr_absent(text, sub):
    assert find_substr(text, sub) == -1


@pytest.mark.parametrize(
    "text, sub", [("yo, yo, yo Neo", "yo"), ("aaaa", "aa"), ("abc", "d"), ("", "a")]
)
def test_count_substr_matches_non_overlapping_count(text, sub):
    assert count_substr(text, sub) == text.count(sub)


def test_count_substr_empty_sub():
    assert count_substr("hello", "") == 0


def test_count_words():
    assert count_words("  follow  *   the  white rabbit ", "*") == 2


@pytest.mark.parametrize(
    "text", ["**hello*world**", "", "****", "one", "*a*b*c*"]
)
def test_count_words_matches_split(text):
    assert count_words(text, "*") == len(strsplit(text, "*"))


def test_strtrim():
    assert strtrim("\t\n\v\f\r hello \v\f\r") == "hello"


def test_strtrim_all_space():
    assert strtrim(" \t\n ") == ""


def test_strtrim_keeps_inner_space():
    assert strtrim("  a b  ") == "a b"


def test_del_extra_spaces():
    assert del_extra_spaces("\f My name...   is  \r Neo \t\n ") == "My name... is Neo"


def test_del_extra_spaces_idempotent():
    once = del_extra_spaces("  a \t\t b\n\nc  ")
    assert del_extra_spaces(once) == once
    assert "  " not in once


def test_strsplit():
    assert strsplit("**Good bye,**Mr.*Anderson.****", "*") == ["Good bye,", "Mr.", "Anderson."]
    assert strsplit("  Knock, knock, Neo.   ", " ") == ["Knock,", "knock,", "Neo."]


def test_strsplit_empty():
    assert strsplit("****", "*") == []


def test_strsplit_bad_delim():
    with pytest.raises(ValueError):
        strsplit("a,b", ",,")


def test_strjoin():
    assert strjoin("this", "dodge ") == "thisdodge "
    assert strjoin("abc", None) == "abc"
    assert strjoin(None, "abc") == "abc"
    assert strjoin(None, None) is None


def test_replace_substr():
    assert replace_substr("McDonalds", "alds", "uts") == "McDonuts"
    assert replace_substr("Ururu turu", "ru", "ta") == "Utata tuta"


def test_replace_substr_empty_sub():
    assert replace_substr("hello", "", "x") == "hello"


def test_replace_substr_absent():
    assert replace_substr("hello", "zz", "x") == "hello"


@pytest.mark.parametrize("text", ["", "a", "abc", "racecar", "hello world"])
def test_str_reverse_round_trip(text):
    assert str_reverse(str_reverse(text)) == text
    assert len(str_reverse(text)) == len(text)


def test_str_reverse_value():
    assert str_reverse("abc") == "cba"