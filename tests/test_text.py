import pytest

from algokit.text import (
    append_characters,
    gcd_of_strings,
    is_subsequence,
    max_vowels,
    maximum_odd_binary_number,
    merge_alternately,
    reverse_prefix,
    reverse_vowels,
    reverse_words,
    score_of_string,
)


def test_gcd_of_strings_whole_divisor():
    assert gcd_of_strings("ABCABC", "ABC") == "ABC"


@pytest.mark.parametrize("a,b", [("ABABAB", "ABAB"), ("xyxyxyxy", "xyxy")])
def test_gcd_of_strings_builds_both(a, b):
    result = gcd_of_strings(a, b)
    assert result
    assert result * (len(a) // len(result)) == a
    assert result * (len(b) // len(result)) == b


def test_gcd_of_strings_mismatch_is_empty():
    assert gcd_of_strings("LEET", "CODE") == ""


def test_is_subsequence():
    assert is_subsequence("abc", "ahbgdc") is True
    assert is_subsequence("axc", "ahbgdc") is False
    assert is_subsequence("", "anything") is True


def test_max_vowels_whole_string_counts_all_vowels():
    s = "leetcode"
    assert max_vowels(s, len(s)) == sum(c in "aeiou" for c in s)


def test_max_vowels_bounded_by_window():
    assert max_vowels("aeiouaeiou", 3) == 3
    assert max_vowels("rhythms", 2) == 0


def test_max_vowels_rejects_bad_window():
    with pytest.raises(ValueError):
        max_vowels("abc", 0)


def test_reverse_vowels_example():
    assert reverse_vowels("hello") == "holle"


@pytest.mark.parametrize("s", ["leetcode", "programming", "xyz", "", "aei"])
def test_reverse_vowels_is_involution(s):
    assert reverse_vowels(reverse_vowels(s)) == s


def test_reverse_vowels_keeps_consonant_positions():
    s = "algorithms"
    result = reverse_vowels(s)
    assert len(result) == len(s)
    for original, changed in zip(s, result):
        if original not in "aeiou":
            assert changed == original


def test_reverse_vowels_ignores_uppercase():
    assert reverse_vowels("AbE") == "AbE"


def test_merge_alternately_equal_lengths():
    result = merge_alternately("abc", "pqr")
    assert result[0::2] == "abc"
    assert result[1::2] == "pqr"


def test_merge_alternately_longer_tail():
    result = merge_alternately("ab", "pqrs")
    assert len(result) == 6
    assert result.endswith("rs")
    assert result[:4:2] == "ab"


def test_reverse_words_collapses_spaces():
    assert reverse_words("  hello world  ") == "world hello"


@pytest.mark.parametrize("s", ["the sky is blue", "a good   example", "single"])
def test_reverse_words_twice_normalizes(s):
    assert reverse_words(reverse_words(s)) == " ".join(s.split())


def test_append_characters_example():
    assert append_characters("coaching", "coding") == 4


def test_append_characters_invariants():
    assert append_characters("abcde", "ace") == 0
    assert append_characters("", "xyz") == 3


@pytest.mark.parametrize("s", ["010", "0101", "1", "1100110"])
def test_maximum_odd_binary_number_properties(s):
    result = maximum_odd_binary_number(s)
    assert len(result) == len(s)
    assert result.count("1") == s.count("1")
    assert result.endswith("1")
    assert result[:-1] == "".join(sorted(result[:-1], reverse=True))


def test_maximum_odd_binary_number_needs_a_one():
    with pytest.raises(ValueError):
        maximum_odd_binary_number("000")


def test_reverse_prefix_reverses_through_char():
    word = "abcdefd"
    result = reverse_prefix(word, "d")
    cut = word.index("d") + 1
    assert result[:cut] == word[:cut][::-1]
    assert result[cut:] == word[cut:]


def test_reverse_prefix_absent_char():
    assert reverse_prefix("abcd", "z") == "abcd"


@pytest.mark.parametrize("s", ["hello", "zaz", "abcxyz"])
def test_score_of_string_symmetric(s):
    assert score_of_string(s) == score_of_string(s[::-1])


def test_score_of_string_repeats_add_nothing():
    assert score_of_string("a") == 0
    assert score_of_string("hello") == score_of_string("helloo")