"""String algorithms: subsequences, sliding windows and rearrangements."""

from __future__ import annotations

from itertools import pairwise, zip_longest
from math import gcd

_VOWELS = frozenset("aeiou")


def gcd_of_strings(str1: str, str2: str) -> str:
    """Largest string that, repeated, builds both ``str1`` and ``str2``; empty if none."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: gcd(len(str1), len(str2))]


def is_subsequence(sub: str, text: str) -> bool:
    """Whether ``sub`` can be obtained from ``text`` by deleting characters."""
    matched = 0
    for character in text:
        if matched < len(sub) and character == sub[matched]:
            matched += 1
    return matched == len(sub)


def max_vowels(s: str, k: int) -> int:
    """Most lowercase vowels in any window of length ``k``."""
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    in_window = 0
    best = 0
    for idx, character in enumerate(s):
        if idx >= k and s[idx - k] in _VOWELS:
            in_window -= 1
        if character in _VOWELS:
            in_window += 1
        best = max(best, in_window)
    return best


def reverse_vowels(s: str) -> str:
    """Reverse the order of the lowercase vowels, leaving every other character in place."""
    vowels = [character for character in s if character in _VOWELS]
    return "".join(
        vowels.pop() if character in _VOWELS else character for character in s
    )


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of both words, appending the longer word's tail."""
    return "".join(
        a + b for a, b in zip_longest(word1, word2, fillvalue="")
    )


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, separated by single spaces."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def append_characters(s: str, t: str) -> int:
    """Characters that must be appended to ``s`` so that ``t`` is a subsequence of it."""
    matched = 0
    for character in s:
        if matched == len(t):
            break
        if character == t[matched]:
            matched += 1
    return len(t) - matched


def maximum_odd_binary_number(s: str) -> str:
    """Rearrange the bits of ``s`` into the largest odd binary number."""
    ones = s.count("1")
    if ones == 0:
        raise ValueError("an odd binary number needs at least one '1'")
    return "1" * (ones - 1) + "0" * (len(s) - ones) + "1"


def reverse_prefix(word: str, ch: str) -> str:
    """Reverse ``word`` up to and including the first ``ch``; unchanged if absent."""
    position = word.find(ch)
    if position == -1:
        return word
    return word[position::-1] + word[position + 1:]


def score_of_string(s: str) -> int:
    """Sum of absolute code-point differences between adjacent characters."""
    return sum(abs(ord(b) - ord(a)) for a, b in pairwise(s))