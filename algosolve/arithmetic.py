"""Number puzzles: digit tricks, divisibility, bit twiddling and counting."""

from __future__ import annotations

import math

_UINT32_MASK = 0xFFFFFFFF


def minimum_sum(num: int) -> int:
    """Split a four-digit number's digits into two numbers with the least sum.

    The two smallest digits go to the tens places and the two largest to the
    units places.
    """
    digits = []
    while num > 0:
        num, digit = divmod(num, 10)
        digits.append(digit)
    if len(digits) != 4:
        raise ValueError("expected a positive four-digit number")
    low_a, low_b, high_a, high_b = sorted(digits)
    return (low_a * 10 + high_a) + (low_b * 10 + high_b)


def tribonacci(n: int) -> int:
    """Return the n-th Tribonacci number, with T0 = 0 and T1 = T2 = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def find_complement(num: int) -> int:
    """Flip every bit of ``num`` up to its highest set bit."""
    width = num.bit_length() if num > 0 else 0
    return (1 << width) - 1 - num


def is_palindrome_number(x: int) -> bool:
    """True if the decimal form of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def check_perfect_number(num: int) -> bool:
    """True if ``num`` equals the sum of its proper divisors."""
    if num == 1:
        return False
    total = 1
    i = 2
    while i * i <= num:
        if num % i == 0:
            partner = num // i
            total += i if partner == i else i + partner
        i += 1
    return total == num


def is_power_of_three(n: int) -> bool:
    """True if ``n`` is an integral power of three."""
    if n <= 0:
        return False
    exponent = math.log(n) / math.log(3)
    return abs(exponent - round(exponent)) < 1e-10


def is_prime(num: int) -> bool:
    """True if ``num`` is an odd prime; even numbers, 2 included, are rejected."""
    if num <= 1 or num % 2 == 0:
        return False
    i = 2
    while i * i <= num:
        if num % i == 0:
            return False
        i += 1
    return True


def prime_palindrome(n: int) -> int:
    """Return the smallest prime palindrome not less than ``n``.

    Palindromes with an even number of digits are divisible by 11, so those
    ranges (apart from 11 itself) are skipped.
    """
    if n <= 2:
        return 2
    p = n if n % 2 else n + 1
    while True:
        if is_prime(p) and is_palindrome_number(p):
            return p
        p += 2
        if 11 < p < 100:
            p = 101
        if 1_000 < p < 10_000:
            p = 10_001
        if 100_000 < p < 1_000_000:
            p = 1_000_001
        if 10_000_000 < p < 100_000_000:
            p = 100_000_001


def compute_area(
    ax1: int, ay1: int, ax2: int, ay2: int, bx1: int, by1: int, bx2: int, by2: int
) -> int:
    """Total area covered by two axis-aligned rectangles."""
    area_a = (ax2 - ax1) * (ay2 - ay1)
    area_b = (bx2 - bx1) * (by2 - by1)
    overlap_h = max(min(ay2, by2) - max(ay1, by1), 0)
    overlap_w = max(min(ax2, bx2) - max(ax1, bx1), 0)
    return area_a + area_b - overlap_h * overlap_w


def reverse_bits(n: int) -> int:
    """Reverse the bits of ``n`` taken as an unsigned 32-bit integer."""
    return int(format(n & _UINT32_MASK, "032b")[::-1], 2)


def is_ugly(n: int) -> bool:
    """True if ``n`` is positive and has no prime factors other than 2, 3 and 5."""
    if n <= 0:
        return False
    for factor in (2, 5, 3):
        while n % factor == 0:
            n //= factor
    return n == 1


def num_trees(n: int) -> int:
    """Count the structurally unique binary search trees holding 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    trees = [1] * (n + 1)
    for size in range(2, n + 1):
        trees[size] = sum(trees[left] * trees[size - left - 1] for left in range(size))
    return trees[n]


def unique_paths(m: int, n: int) -> int:
    """Count right/down paths from the top-left to the bottom-right of an m x n grid."""
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")
    row = [1] * n
    for _ in range(1, m):
        for col in range(1, n):
            row[col] += row[col - 1]
    return row[-1]