from itertools import accumulate

import pytest

from algosolve.text import (
    equal_frequency,
    large_group_positions,
    number_of_beams,
    partition_labels,
    repeated_string_match,
    reverse_vowels,
    reverse_words,
    roman_to_int,
    seconds_to_remove_occurrences,
    slowest_key,
)


# number_of_beams

def test_beams_single_row_has_none():
    assert number_of_beams(["1011"]) == 0


def test_beams_empty_rows_are_ignored():
    bank = ["011001", "000000", "010100", "001000"]
    without_empty = [row for row in bank if "1" in row]
    assert number_of_beams(bank) == number_of_beams(without_empty)


def test_beams_symmetric_under_row_reversal():
    bank = ["011001", "000000", "010100", "001000"]
    assert number_of_beams(bank) == number_of_beams(bank[::-1])


def test_beams_no_devices():
    assert number_of_beams(["000", "000"]) == 0


# partition_labels

def test_partition_labels_known_example():
    assert partition_labels("ababcbacadefegdehijhklij") == [9, 7, 8]


@pytest.mark.parametrize("s", ["eccbbbbdec", "abc", "aaaa", "abac", "z"])
def test_partition_labels_invariants(s):
    lengths = partition_labels(s)
    assert sum(lengths) == len(s)
    ends = list(accumulate(lengths))
    starts = [0] + ends[:-1]
    parts = [s[start:end] for start, end in zip(starts, ends)]
    assert "".join(parts) == s
    assert sum(len(set(part)) for part in parts) == len(set(s))


def test_partition_labels_distinct_letters_each_alone():
    assert partition_labels("abc") == [1, 1, 1]


# large_group_positions

def test_large_group_positions_example():
    assert large_group_positions("abbxxxxzzy") == [[3, 6]]


@pytest.mark.parametrize("s", ["abcdddeeeeaabbbcd", "aaa", "aabbcc", "zzzzzzz"])
def test_large_groups_are_long_runs(s):
    for start, end in large_group_positions(s):
        assert end - start + 1 >= 3
        assert len(set(s[start : end + 1])) == 1
        assert start == 0 or s[start - 1] != s[start]
        assert end == len(s) - 1 or s[end + 1] != s[end]


def test_large_groups_whole_string():
    s = "aaa"
    assert large_group_positions(s) == [[0, len(s) - 1]]


def test_large_groups_none():
    assert large_group_positions("aabbcc") == []


# equal_frequency

def test_equal_frequency_removing_extra_letter():
    assert equal_frequency("abcc") is True


def test_equal_frequency_impossible():
    assert equal_frequency("aazz") is False


def test_equal_frequency_single_letter():
    assert equal_frequency("a") is True


def test_equal_frequency_remove_whole_letter():
    assert equal_frequency("aaab") is True


# repeated_string_match

def test_repeated_match_empty_b():
    assert repeated_string_match("abc", "") == 1


def test_repeated_match_known_example():
    assert repeated_string_match("abcd", "cdabcdab") == 3


def test_repeated_match_impossible():
    assert repeated_string_match("abc", "wxyz") == -1


@pytest.mark.parametrize(
    "a, b",
    [("abcd", "cdabcdab"), ("a", "aa"), ("abc", "cabcab"), ("ab", "b"), ("abc", "abc")],
)
def test_repeated_match_is_minimal(a, b):
    count = repeated_string_match(a, b)
    assert count >= 1
    assert b in a * count
    assert b not in a * (count - 1)


# reverse_vowels

@pytest.mark.parametrize("s", ["hello", "leetcode", "Aa", "rhythm", ""])
def test_reverse_vowels_invariants(s):
    result = reverse_vowels(s)
    assert len(result) == len(s)
    vowels = "aeiouAEIOU"
    for original, changed in zip(s, result):
        if original not in vowels:
            assert changed == original
    assert [c for c in result if c in vowels] == [c for c in s if c in vowels][::-1]
    assert reverse_vowels(result) == s


def test_reverse_vowels_swaps_pair():
    assert reverse_vowels("hello") == "holle"


# reverse_words

def test_reverse_words_collapses_spaces():
    assert reverse_words("  hello   world  ") == "world hello"


def test_reverse_words_empty():
    assert reverse_words("") == ""


@pytest.mark.parametrize("s", ["the sky is blue", "  a good   example ", "single"])
def test_reverse_words_round_trip(s):
    once = reverse_words(s)
    assert reverse_words(once) == " ".join(s.split())
    assert once.split(" ") == s.split()[::-1]


# roman_to_int

@pytest.mark.parametrize(
    "symbol, value",
    [("I", 1), ("V", 5), ("X", 10), ("L", 50), ("C", 100), ("D", 500), ("M", 1000)],
)
def test_roman_single_symbols(symbol, value):
    assert roman_to_int(symbol) == value


def test_roman_additive_pairs():
    assert roman_to_int("XV") == roman_to_int("X") + roman_to_int("V")
    assert roman_to_int("MD") == roman_to_int("M") + roman_to_int("D")


def test_roman_subtractive_pairs():
    assert roman_to_int("IX") == roman_to_int("X") - roman_to_int("I")
    assert roman_to_int("CM") == roman_to_int("M") - roman_to_int("C")


def test_roman_concatenation_of_descending_parts():
    assert roman_to_int("MCMXCIV") == (
        roman_to_int("M") + roman_to_int("CM") + roman_to_int("XC") + roman_to_int("IV")
    )


def test_roman_empty():
    assert roman_to_int("") == 0


# slowest_key

def test_slowest_key_tie_prefers_larger_key():
    assert slowest_key([9, 29, 49, 50], "cbcd") == "c"
    assert slowest_key([5, 10], "ab") == "b"


def test_slowest_key_first_press_counts_from_zero():
    assert slowest_key([50, 51, 52], "zab") == "z"


def test_slowest_key_requires_input():
    with pytest.raises(ValueError):
        slowest_key([], "")


# seconds_to_remove_occurrences

def test_seconds_documented_example():
    assert seconds_to_remove_occurrences("0110100001") == 6


@pytest.mark.parametrize("s", ["", "1111", "0000", "111000"])
def test_seconds_nothing_to_move(s):
    assert seconds_to_remove_occurrences(s) == 0


@pytest.mark.parametrize("s", ["0110101", "0001", "01", "001011"])
def test_seconds_matches_simulation(s):
    steps = 0
    current = s
    while "01" in current:
        current = current.replace("01", "10")
        steps += 1
    assert seconds_to_remove_occurrences(s) == steps