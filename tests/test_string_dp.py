import pytest

from algobox.string_dp import (
    count_palindromic_subsequences,
    edit_distance,
    is_interleave,
    longest_common_subsequence,
    longest_palindrome,
    longest_repeating_subsequence,
    wildcard_match,
    word_break,
    word_wrap,
)


def test_edit_distance_example():
    assert edit_distance("abcd", "bcfe") == 3


@pytest.mark.parametrize("s", ["", "abc", "geeks"])
def test_edit_distance_identity_and_empty(s):
    assert edit_distance(s, s) == 0
    assert edit_distance(s, "") == len(s)
    assert edit_distance("", s) == len(s)


def test_edit_distance_symmetric():
    assert edit_distance("kitten", "sitting") == edit_distance("sitting", "kitten")


def test_lcs_example():
    assert longest_common_subsequence("ABCDGH", "AEDFHR") == 3


@pytest.mark.parametrize("a,b", [("ABCDGH", "AEDFHR"), ("abc", ""), ("abab", "baba")])
def test_lcs_invariants(a, b):
    value = longest_common_subsequence(a, b)
    assert value == longest_common_subsequence(b, a)
    assert value <= min(len(a), len(b))
    assert longest_common_subsequence(a, a) == len(a)


@pytest.mark.parametrize("w", ["a", "abc", "xyzw"])
def test_lrs_of_doubled_string(w):
    assert longest_repeating_subsequence(w + w) == len(w)


def test_lrs_distinct_characters():
    assert longest_repeating_subsequence("abcdef") == 0


@pytest.mark.parametrize("n", [1, 2, 5])
def test_count_palindromic_same_char(n):
    assert count_palindromic_subsequences("a" * n) == 2**n - 1


def test_count_palindromic_distinct_and_empty():
    assert count_palindromic_subsequences("abcde") == len("abcde")
    assert count_palindromic_subsequences("") == 0


def test_is_interleave_example():
    assert is_interleave("aab", "abc", "aaabbc") is True


def test_is_interleave_invariants():
    assert is_interleave("abc", "xyz", "abcxyz") is True
    assert is_interleave("abc", "xyz", "abcxy") is False
    assert is_interleave("aab", "abc", "aaabbc") == is_interleave("abc", "aab", "aaabbc")
    assert is_interleave("ab", "cd", "dcba") is False


def test_wildcard_example():
    assert wildcard_match("ge?ks*", "geeksforgeeks") is True


def test_wildcard_invariants():
    assert wildcard_match("*", "anything") is True
    assert wildcard_match("geeks", "geeks") is True
    assert wildcard_match("?", "ab") is False
    assert wildcard_match("g*k", "geeksforgeeks") is False


def test_word_break_example():
    assert word_break("ilikegfg", ["i", "like", "man", "india", "gfg"]) is True


def test_word_break_invariants():
    words = ["like", "gfg", "man"]
    assert word_break("".join(words), words) is True
    assert word_break("ilike", []) is False
    assert word_break("", []) is True
    assert word_break("ilik", ["i", "like"]) is False


def test_longest_palindrome_example():
    assert longest_palindrome("forgeeksskeegfor") == "geeksskeeg"


@pytest.mark.parametrize("s", ["abacdfgdcaba", "banana", "x", "abcd"])
def test_longest_palindrome_invariants(s):
    result = longest_palindrome(s)
    assert result == result[::-1]
    assert result in s
    assert len(result) >= 1


def test_longest_palindrome_of_palindrome():
    assert longest_palindrome("racecar") == "racecar"


def test_word_wrap_single_line_is_free():
    assert word_wrap([1, 2, 1], 6) == 0


def test_word_wrap_invariants():
    value = word_wrap([3, 2, 2, 5], 6)
    assert value >= 0
    assert word_wrap([], 6) == 0


def test_word_wrap_word_too_long():
    with pytest.raises(ValueError):
        word_wrap([3, 7], 6)