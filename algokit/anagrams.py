"""Character-frequency algorithms: anagrams, common and unique characters."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def close_strings(word1: str, word2: str) -> bool:
    """Whether one word becomes the other by swapping positions and swapping letter roles."""
    if len(word1) != len(word2):
        return False
    first, second = Counter(word1), Counter(word2)
    return set(first) == set(second) and sorted(first.values()) == sorted(
        second.values()
    )


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words made of the same letters, groups ordered by first appearance."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def min_steps(s: str, t: str) -> int:
    """Characters of ``t`` that must be replaced to make it an anagram of ``s``."""
    return sum((Counter(s) - Counter(t)).values())


def is_anagram(s: str, t: str) -> bool:
    """Whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def common_chars(words: Sequence[str]) -> list[str]:
    """Characters, with multiplicity, present in every word, in order of the first word."""
    if not words:
        raise ValueError("at least one word is required")
    remaining = [Counter(word) for word in words[1:]]
    result: list[str] = []
    for character in words[0]:
        if all(counts[character] > 0 for counts in remaining):
            for counts in remaining:
                counts[character] -= 1
            result.append(character)
    return result


def first_uniq_char(s: str) -> int:
    """Index of the alphabetically smallest character occurring exactly once, or -1."""
    counts = Counter(s)
    unique = [character for character, count in counts.items() if count == 1]
    if not unique:
        return -1
    return s.index(min(unique))


def max_length_between_equal_characters(s: str) -> int:
    """Longest stretch strictly between two equal characters, or -1 if none repeat."""
    first_seen: dict[str, int] = {}
    best = -1
    for idx, character in enumerate(s):
        if character in first_seen:
            best = max(best, idx - first_seen[character] - 1)
        else:
            first_seen[character] = idx
    return best