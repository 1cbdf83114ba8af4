"""Levenshtein edit distance."""

from __future__ import annotations


def levenshtein(s1: str, s2: str) -> int:
    """
    Number of single-character edits (insert, delete, substitute) between two strings.

    Comparison is case-insensitive. Uses one rolling cost row sized to the
    shorter string plus a carried diagonal value, so memory stays
    O(min(len(s1), len(s2))).

        levenshtein("google.com", "gogle.com")    -> 1
        levenshtein("amazon.com", "amaz0n.com")   -> 1
        levenshtein("google.com", "facebook.com") -> 8
    """
    s1 = (s1 or "").lower()
    s2 = (s2 or "").lower()
    if len(s2) > len(s1):
        s1, s2 = s2, s1

    costs = list(range(len(s2) + 1))
    for i in range(1, len(s1) + 1):
        # costs[j] holds row i-1 until overwritten; last_value is row i, column j-1
        last_value = i
        for j in range(1, len(s2) + 1):
            new_value = costs[j - 1]
            if s1[i - 1] != s2[j - 1]:
                new_value = min(new_value, last_value, costs[j]) + 1
            costs[j - 1] = last_value
            last_value = new_value
        costs[len(s2)] = last_value
    return costs[len(s2)]
