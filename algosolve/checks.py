"""Validity checks: bracket balance, sudoku boards and alien word order."""

from __future__ import annotations

from collections.abc import Sequence

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())
_DIGITS = frozenset("0123456789")
_EMPTY_CELL = "."
_BOARD_SIZE = 9


def is_valid_parentheses(s: str) -> bool:
    """True if every bracket in ``s`` is closed by the matching kind in the right order.

    Any character that is not an opening bracket must close the most recent one.
    """
    if len(s) % 2:
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif not stack or _CLOSERS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """True if no digit repeats in any row, column or 3x3 box of a 9x9 board.

    Empty cells are written as ``"."``.
    """
    if len(board) != _BOARD_SIZE or any(len(row) != _BOARD_SIZE for row in board):
        raise ValueError("a sudoku board must be 9 by 9")
    seen: set[tuple] = set()
    for r, row in enumerate(board):
        for c, cell in enumerate(row):
            if cell == _EMPTY_CELL:
                continue
            if cell not in _DIGITS:
                raise ValueError(f"invalid sudoku cell {cell!r} at ({r}, {c})")
            keys = (("row", r, cell), ("col", c, cell), ("box", r // 3, c // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def is_alien_sorted(words: Sequence[str], order: str) -> bool:
    """True if ``words`` are sorted under the alphabet given by ``order``.

    A word comes before any longer word it is a prefix of. Characters missing
    from ``order`` rank with its first letter.
    """
    rank = {char: index for index, char in enumerate(order)}
    for first, second in zip(words, words[1:]):
        differing = next(((a, b) for a, b in zip(first, second) if a != b), None)
        if differing is None:
            if len(first) > len(second):
                return False
        elif rank.get(differing[0], 0) > rank.get(differing[1], 0):
            return False
    return True