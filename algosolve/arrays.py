"""Array puzzles: in-place edits, counting runs and pairs, and walking grids."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import groupby


def most_visited(n: int, rounds: Sequence[int]) -> list[int]:
    """Sectors of a circular track of ``n`` sectors visited most often, in ascending order.

    The marathon starts at ``rounds[0]`` and round ``i`` ends at ``rounds[i]``.
    Whole laps add the same count to every sector, so only the stretch from the
    first start to the last finish decides the answer.
    """
    if not rounds:
        raise ValueError("at least one sector is required")
    start, finish = rounds[0], rounds[-1]
    if not (1 <= start <= n and 1 <= finish <= n):
        raise ValueError(f"sectors must lie in 1..{n}")
    if start <= finish:
        return list(range(start, finish + 1))
    return list(range(1, finish + 1)) + list(range(start, n + 1))


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next permutation in lexicographic order.

    The last permutation wraps around to the first, which is ascending order.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]),
        None,
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(r for r in range(len(nums) - 1, pivot, -1) if nums[r] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = sorted(nums[pivot + 1 :])


def zero_filled_subarrays(nums: Sequence[int]) -> int:
    """Count contiguous subarrays made of zeros only."""
    total = 0
    for is_zero, run in groupby(nums, key=lambda value: value == 0):
        if is_zero:
            length = sum(1 for _ in run)
            total += length * (length + 1) // 2
    return total


def num_pairs_divisible_by_60(time: Sequence[int]) -> int:
    """Count pairs ``i < j`` whose durations add up to a multiple of 60."""
    remainders = [0] * 60
    for duration in time:
        remainders[duration % 60] += 1
    pairs = sum(remainders[r] * remainders[60 - r] for r in range(1, 30))
    for self_complement in (0, 30):
        count = remainders[self_complement]
        pairs += count * (count - 1) // 2
    return pairs


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits``, most significant first."""
    if not digits:
        raise ValueError("at least one digit is required")
    result = list(digits)
    for index in range(len(result) - 1, -1, -1):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1] + result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact sorted ``nums`` in place so its first k items are its distinct values; return k."""
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front of ``nums`` in place; return their count.

    Each match is swapped with the last unchecked item, so the kept items may
    change order.
    """
    index, end = 0, len(nums) - 1
    while index <= end:
        if nums[index] == val:
            nums[index], nums[end] = nums[end], nums[index]
            end -= 1
        else:
            index += 1
    return end + 1


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Largest total held by one customer across all of their accounts."""
    if not accounts:
        raise ValueError("at least one customer is required")
    return max(sum(customer) for customer in accounts)


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Elements of ``matrix`` read clockwise in a spiral from the top-left corner."""
    rows = [list(row) for row in matrix if row]
    result: list[int] = []
    while rows:
        result.extend(rows.pop(0))
        rows = [list(column) for column in zip(*rows)][::-1]
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``; subset k holds the items whose bit is set in k."""
    return [
        [value for bit, value in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]