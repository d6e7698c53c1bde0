"""Searching sorted data, hash lookups, prefix suggestions and frequency ranking."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Sequence
from operator import itemgetter

_SUGGESTION_LIMIT = 3


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """True if ``target`` is in a matrix whose rows, read one after another, are sorted."""
    if not matrix or not matrix[0]:
        return False
    row_index = bisect_right([row[0] for row in matrix], target) - 1
    if row_index < 0:
        return False
    row = matrix[row_index]
    position = bisect_left(row, target)
    return position < len(row) and row[position] == target


def search_rotated(nums: Sequence[int], target: int) -> bool:
    """True if ``target`` is in a rotated sorted sequence that may hold duplicates."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return True
        if nums[lo] == nums[mid] == nums[hi]:
            lo += 1
            hi -= 1
        elif nums[lo] <= nums[mid]:
            if nums[lo] <= target < nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] < target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return bisect_left(nums, target)


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` with ``i < j`` of two numbers adding up to ``target``; empty if none."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        other = seen.get(target - value)
        if other is not None:
            return [other, index]
        seen[value] = index
    return []


def suggested_products(products: Sequence[str], search_word: str) -> list[list[str]]:
    """For each typed prefix of ``search_word``, up to three matching products in order."""
    catalogue = sorted(set(products))
    suggestions: list[list[str]] = []
    for length in range(1, len(search_word) + 1):
        prefix = search_word[:length]
        start = bisect_left(catalogue, prefix)
        matches = [
            product
            for product in catalogue[start : start + _SUGGESTION_LIMIT]
            if product.startswith(prefix)
        ]
        suggestions.append(matches)
    return suggestions


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values, least frequent of them first."""
    if k < 0:
        raise ValueError("k must not be negative")
    chosen = heapq.nlargest(k, Counter(nums).items(), key=itemgetter(1))
    return [value for value, _ in reversed(chosen)]