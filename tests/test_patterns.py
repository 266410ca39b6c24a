import re
import string
from itertools import product

import pytest

from algobox.patterns import (
    check_inclusion,
    find_the_longest_substring,
    is_match,
    length_of_longest_substring,
    longest_prefix,
    repeated_substring_pattern,
    shortest_palindrome,
    str_str,
)


def _words(alphabet, max_len):
    for length in range(max_len + 1):
        for chars in product(alphabet, repeat=length):
            yield "".join(chars)


def _well_formed(pattern):
    return not pattern.startswith("*") and "**" not in pattern


def test_is_match_basic_cases():
    assert not is_match("aa", "a")
    assert is_match("aa", "a*")
    assert is_match("ab", ".*")
    assert is_match("aab", "c*a*b")
    assert not is_match("mississippi", "mis*is*p*.")


def test_is_match_agrees_with_full_regex_match():
    subjects = list(_words("ab", 4))
    patterns = [p for p in _words("ab.*", 4) if _well_formed(p)]
    mismatches = [
        (s, p)
        for s in subjects
        for p in patterns
        if is_match(s, p) != bool(re.fullmatch(p, s))
    ]
    assert mismatches == []


def test_str_str_finds_first_occurrence():
    haystack = "sadbutsad"
    needle = "sad"
    index = str_str(haystack, needle)
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


def test_str_str_missing_needle():
    assert str_str("leetcode", "leeto") == -1


def test_str_str_empty_needle_is_at_start():
    assert str_str("abc", "") == 0


def test_shortest_palindrome_example():
    assert shortest_palindrome("aacecaaa") == "aaacecaaa"


@pytest.mark.parametrize("s", ["abcd", "a", "ab", "aab", "abcba", "banana"])
def test_shortest_palindrome_is_palindrome_ending_in_input(s):
    result = shortest_palindrome(s)
    assert result == result[::-1]
    assert result.endswith(s)
    assert len(result) <= 2 * len(s)


@pytest.mark.parametrize("s", ["", "racecar", "abba", "x"])
def test_shortest_palindrome_leaves_palindromes_alone(s):
    assert shortest_palindrome(s) == s


@pytest.mark.parametrize("unit", ["a", "ab", "abc", "xyzzy"])
@pytest.mark.parametrize("times", [2, 3, 5])
def test_repeated_pattern_detects_repetition(unit, times):
    assert repeated_substring_pattern(unit * times)


@pytest.mark.parametrize("s", ["a", "aba", "abcab", "ababa"])
def test_repeated_pattern_rejects_non_repetition(s):
    assert not repeated_substring_pattern(s)


def test_repeated_pattern_rejects_empty_string():
    with pytest.raises(ValueError):
        repeated_substring_pattern("")


def test_longest_prefix_example():
    assert longest_prefix("ababab") == "abab"


@pytest.mark.parametrize("s", ["level", "aaaa", "abcab", "abc", "a"])
def test_longest_prefix_is_a_proper_border(s):
    result = longest_prefix(s)
    assert s.startswith(result)
    assert s.endswith(result)
    assert len(result) < len(s)


def test_longest_prefix_of_empty_string():
    assert longest_prefix("") == ""


def test_check_inclusion_examples():
    assert check_inclusion("ab", "eidbaooo")
    assert not check_inclusion("ab", "eidboaoo")


@pytest.mark.parametrize("s1", ["abc", "aab", "xyz"])
def test_check_inclusion_finds_embedded_permutation(s1):
    s2 = "qq" + s1[::-1] + "ww"
    assert check_inclusion(s1, s2)


def test_check_inclusion_longer_pattern_never_fits():
    assert not check_inclusion("abcd", "abc")


def test_longest_substring_of_distinct_letters_is_whole_string():
    s = string.ascii_lowercase
    assert length_of_longest_substring(s) == len(s)
    assert length_of_longest_substring(s + s) == len(s)


@pytest.mark.parametrize("s", ["abcabcbb", "bbbbb", "pwwkew", "", "dvdf"])
def test_longest_substring_bounds(s):
    result = length_of_longest_substring(s)
    assert result <= len(set(s))
    assert result <= len(s)
    assert (result == 0) == (s == "")


@pytest.mark.parametrize("s", ["bcdfg", "aabbee", "xyzaaee", "uuoo"])
def test_vowel_substring_even_vowels_uses_whole_string(s):
    assert find_the_longest_substring(s) == len(s)


@pytest.mark.parametrize("s", ["eleetminicoworoep", "leetcodeisgreat", "a", "aeiou"])
def test_vowel_substring_has_even_vowel_counts(s):
    result = find_the_longest_substring(s)
    windows = [s[start:start + result] for start in range(len(s) - result + 1)]
    assert any(all(w.count(v) % 2 == 0 for v in "aeiou") for w in windows)
    assert result <= len(s)