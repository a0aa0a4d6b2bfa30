from collections import Counter

import pytest

from algobox.text_search import (
    are_rotations,
    lps_length,
    min_chars_for_palindrome,
    pattern_search,
    rabin_karp_search,
    smallest_distinct_window,
    smallest_window,
)


def occurrences(text, pattern):
    return [i for i in range(len(text)) if text.startswith(pattern, i)]


@pytest.mark.parametrize(
    "text,pattern",
    [
        ("ABAAAABAACD", "ABA"),
        ("aaaaa", "aa"),
        ("geeksforgeeks", "geek"),
        ("abc", "d"),
        ("ab", "abc"),
    ],
)
def test_pattern_search_matches_startswith(text, pattern):
    assert pattern_search(text, pattern) == occurrences(text, pattern)


def test_pattern_search_empty_pattern():
    with pytest.raises(ValueError):
        pattern_search("abc", "")


def test_lps_length_source_example():
    assert lps_length("aabcdaabc") == 4


@pytest.mark.parametrize("s", ["aabcdaabc", "abab", "aaaa", "abc", "a"])
def test_lps_length_is_border(s):
    k = lps_length(s)
    assert k < len(s)
    assert s[:k] == s[len(s) - k:]


def test_lps_length_empty():
    assert lps_length("") == 0


@pytest.mark.parametrize("s", ["aacecaaaa", "abc", "aaab", "racecar", "x"])
def test_min_chars_for_palindrome_makes_palindrome(s):
    added = min_chars_for_palindrome(s)
    result = s[len(s) - added:][::-1] + s
    assert result == result[::-1]
    assert 0 <= added < len(s)


def test_min_chars_for_palindrome_already_palindrome():
    assert min_chars_for_palindrome("abba") == 0


def test_rabin_karp_source_example():
    assert rabin_karp_search("geek", "geeksforgeeks") == [0, 8]


@pytest.mark.parametrize(
    "pat,txt",
    [("aa", "aaaa"), ("ab", "abab"), ("xyz", "abcxyzxy"), ("q", "abc")],
)
def test_rabin_karp_matches_startswith(pat, txt):
    assert rabin_karp_search(pat, txt) == occurrences(txt, pat)


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp_search("abcd", "abc") == []


def test_rabin_karp_empty_pattern():
    with pytest.raises(ValueError):
        rabin_karp_search("", "abc")


def test_are_rotations_true():
    assert are_rotations("abcd", "cdab") is True


def test_are_rotations_false():
    assert are_rotations("abcd", "acbd") is False


def test_are_rotations_length_mismatch():
    assert are_rotations("ab", "abab") is False


def test_smallest_window_source_example():
    assert smallest_window("timetopractice", "toc") == "toprac"


def test_smallest_window_covers_pattern():
    s, p = "adobecodebanc", "abc"
    window = smallest_window(s, p)
    assert window in s
    assert not Counter(p) - Counter(window)


def test_smallest_window_whole_string():
    assert smallest_window("abc", "cba") == "abc"


def test_smallest_window_none():
    assert smallest_window("abc", "abd") == ""


def test_smallest_distinct_window_source_example():
    assert smallest_distinct_window("aabcbcdbca") == 4


def test_smallest_distinct_window_single_char():
    assert smallest_distinct_window("aaaa") == 1


def test_smallest_distinct_window_all_distinct():
    s = "abcdef"
    assert smallest_distinct_window(s) == len(s)


def test_smallest_distinct_window_empty():
    assert smallest_distinct_window("") == 0