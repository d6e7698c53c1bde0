"""Ordering puzzles: queue reconstruction, task scheduling and custom sorts."""

from __future__ import annotations

import heapq
from collections.abc import MutableSequence, Sequence


def reconstruct_queue(people: Sequence[Sequence[int]]) -> list[list[int]]:
    """Rebuild a queue from ``[height, taller_in_front]`` pairs.

    Taller people are placed first. Each shorter person is then inserted at the
    position given by their count, because shorter people never affect that count.
    """
    queue: list[list[int]] = []
    for height, ahead in sorted(people, key=lambda person: (-person[0], person[1])):
        queue.insert(ahead, [height, ahead])
    return queue


def get_order(tasks: Sequence[Sequence[int]]) -> list[int]:
    """Order in which a single-threaded CPU runs ``[enqueue_time, processing_time]`` tasks.

    When idle, the CPU picks the available task with the shortest processing time,
    breaking ties by the smaller original index. With nothing available it waits
    for the next task to arrive.
    """
    arrivals = sorted(range(len(tasks)), key=lambda index: tasks[index][0])
    available: list[tuple[int, int]] = []
    order: list[int] = []
    clock = 1
    position = 0
    while available or position < len(arrivals):
        if not available and clock < tasks[arrivals[position]][0]:
            clock = tasks[arrivals[position]][0]
        while position < len(arrivals) and tasks[arrivals[position]][0] <= clock:
            index = arrivals[position]
            heapq.heappush(available, (tasks[index][1], index))
            position += 1
        duration, index = heapq.heappop(available)
        clock += duration
        order.append(index)
    return order


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in one pass.

    Any value other than 0 or 1 is moved to the back along with the 2s.
    """
    low, current, high = 0, 0, len(nums) - 1
    while current <= high:
        value = nums[current]
        if value == 0:
            nums[low], nums[current] = nums[current], nums[low]
            low += 1
            current += 1
        elif value == 1:
            current += 1
        else:
            nums[current], nums[high] = nums[high], nums[current]
            high -= 1


def _set_bits(value: int) -> int:
    return bin(value).count("1")


def sort_by_bits(arr: Sequence[int]) -> list[int]:
    """Values sorted by their number of set bits, then by value."""
    return sorted(arr, key=lambda value: (_set_bits(value), value))


def sort_people(names: Sequence[str], heights: Sequence[int]) -> list[str]:
    """Names ordered from the tallest person to the shortest.

    Heights must be distinct and there must be one per name.
    """
    if len(names) != len(heights):
        raise ValueError("every name needs exactly one height")
    if len(set(heights)) != len(heights):
        raise ValueError("heights must be distinct")
    ranked = sorted(zip(heights, names), key=lambda pair: pair[0], reverse=True)
    return [name for _, name in ranked]