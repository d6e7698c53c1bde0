"""String puzzles: counting, splitting, reordering and decoding text."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_VOWELS = frozenset("aeiouAEIOU")

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def number_of_beams(bank: Sequence[str]) -> int:
    """Count laser beams between consecutive non-empty rows of a bank floor plan."""
    counts = [row.count("1") for row in bank]
    devices = [count for count in counts if count > 0]
    return sum(upper * lower for upper, lower in zip(devices, devices[1:]))


def partition_labels(s: str) -> list[int]:
    """Split ``s`` into as many parts as possible with each letter in one part only.

    Returns the lengths of the parts in order.
    """
    last_index = {char: index for index, char in enumerate(s)}
    lengths: list[int] = []
    start = end = 0
    for index, char in enumerate(s):
        end = max(end, last_index[char])
        if index == end:
            lengths.append(end - start + 1)
            start = end + 1
    return lengths


def large_group_positions(s: str) -> list[list[int]]:
    """Inclusive ``[start, end]`` intervals of runs of three or more equal characters."""
    groups: list[list[int]] = []
    start = 0
    for index in range(1, len(s) + 1):
        if index == len(s) or s[index] != s[start]:
            if index - start >= 3:
                groups.append([start, index - 1])
            start = index
    return groups


def _all_equal(frequencies: Counter[str]) -> bool:
    return len({count for count in frequencies.values() if count}) <= 1


def equal_frequency(word: str) -> bool:
    """True if removing exactly one letter leaves every remaining letter equally frequent."""
    frequencies = Counter(word)
    for letter in sorted(frequencies):
        frequencies[letter] -= 1
        if _all_equal(frequencies):
            return True
        frequencies[letter] += 1
    return False


def repeated_string_match(a: str, b: str) -> int:
    """Fewest copies of ``a`` laid end to end that contain ``b``, or -1 if none do."""
    if not b:
        return 1
    size = len(a)
    for start, char in enumerate(a):
        if char != b[0]:
            continue
        if all(b[offset] == a[(start + offset) % size] for offset in range(len(b))):
            return (start + len(b) - 1) // size + 1
    return -1


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving every other character in place."""
    vowels = [char for char in s if char in _VOWELS]
    return "".join(vowels.pop() if char in _VOWELS else char for char in s)


def reverse_words(s: str) -> str:
    """Words of ``s`` in reverse order, joined by single spaces."""
    if not s:
        return s
    return " ".join(reversed([word for word in s.split(" ") if word]))


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals count as zero."""
    values = [_ROMAN_VALUES.get(char, 0) for char in s]
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += current if current >= following else -current
    return total


def slowest_key(release_times: Sequence[int], keys_pressed: str) -> str:
    """Key held longest; ties go to the lexicographically largest key."""
    if not release_times or not keys_pressed:
        raise ValueError("at least one key press is required")
    best_time = release_times[0]
    best_key = keys_pressed[0]
    for previous, current, key in zip(release_times, release_times[1:], keys_pressed[1:]):
        duration = current - previous
        if duration > best_time:
            best_time, best_key = duration, key
        elif duration == best_time:
            best_key = max(best_key, key)
    return best_key


def seconds_to_remove_occurrences(s: str) -> int:
    """Seconds until no "01" remains when every "01" turns into "10" each second."""
    zeros = seconds = 0
    for char in s:
        if char == "0":
            zeros += 1
        elif char == "1" and zeros:
            seconds = max(seconds + 1, zeros)
    return seconds