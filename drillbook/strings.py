"""String exercises: reversal, concatenation, replacement and LCS."""

from __future__ import annotations

__all__ = [
    "reverse_sentence",
    "concatenate",
    "string_length",
    "truncated_concat",
    "reverse_string",
    "replace_characters",
    "substring",
    "longest_common_subsequence",
]


def reverse_sentence(text: str) -> str:
    """Reverse the first line of ``text``; anything after a newline is ignored."""
    line = text.split("\n", 1)[0]
    return line[::-1]


def concatenate(first: str, second: str) -> str:
    """Join two strings."""
    return first + second


def string_length(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def truncated_concat(text: str, other: str) -> str:
    """Append at most ``len(text) - 1`` characters of ``other`` to ``text``.

    An empty ``text`` puts no limit on the appended part.
    """
    if not text:
        return other
    return text + other[: len(text) - 1]


def reverse_string(text: str) -> str:
    """Characters of ``text`` in reverse order."""
    return text[::-1]


def replace_characters(text: str, old: str, new: str) -> str:
    """Replace each character of ``old`` by the one at the same place in ``new``.

    Replacements are applied one pair after another, so a later pair also
    acts on characters produced by an earlier one.
    """
    if len(old) != len(new):
        raise ValueError("the new word must have the same length as the replaced word")
    for before, after in zip(old, new):
        text = text.replace(before, after)
    return text


def substring(text: str, position: int, length: int) -> str:
    """``length`` characters of ``text`` starting at 1-based ``position``."""
    if position < 1:
        raise ValueError("position counts from 1")
    if length < 0:
        raise ValueError("length must not be negative")
    start = position - 1
    return text[start : start + length]


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest common subsequence of two strings."""
    table = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i, left in enumerate(first, start=1):
        for j, right in enumerate(second, start=1):
            if left == right:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    picked: list[str] = []
    i, j = len(first), len(second)
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))