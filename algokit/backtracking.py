"""Search problems solved by depth-first backtracking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from itertools import combinations

EMPTY = "."
"""Marker for an unfilled sudoku cell."""

_DIGITS = tuple(str(d) for d in range(1, 10))
_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def solve_sudoku(board: MutableSequence[MutableSequence[str]]) -> bool:
    """Fill the empty cells of a 9x9 sudoku board in place.

    Returns whether a solution was found; on failure the board is left as it
    was given.
    """
    if len(board) != 9 or any(len(row) != 9 for row in board):
        raise ValueError("board must be 9x9")

    empties = [(r, c) for r in range(9) for c in range(9) if board[r][c] == EMPTY]

    def allowed(r: int, c: int, digit: str) -> bool:
        if digit in board[r]:
            return False
        if any(row[c] == digit for row in board):
            return False
        top, left = r // 3 * 3, c // 3 * 3
        return all(
            board[i][j] != digit
            for i in range(top, top + 3)
            for j in range(left, left + 3)
        )

    def fill(position: int) -> bool:
        if position == len(empties):
            return True
        r, c = empties[position]
        for digit in _DIGITS:
            if allowed(r, c, digit):
                board[r][c] = digit
                if fill(position + 1):
                    return True
                board[r][c] = EMPTY
        return False

    return fill(0)


def exist(board: Sequence[Sequence[str]], word: str) -> bool:
    """Whether ``word`` can be traced through adjacent cells of ``board``.

    Cells connect horizontally and vertically and each is used at most once.
    """
    if not word or not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    used: set[tuple[int, int]] = set()

    def search(r: int, c: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= r < rows and 0 <= c < cols) or (r, c) in used:
            return False
        if board[r][c] != word[index]:
            return False
        used.add((r, c))
        found = any(search(r + dr, c + dc, index + 1) for dr, dc in _DIRECTIONS)
        used.discard((r, c))
        return found

    return any(
        board[r][c] == word[0] and search(r, c, 0)
        for r in range(rows)
        for c in range(cols)
    )


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Whether ``s`` splits into a sequence of words from ``word_dict``."""
    words = set(word_dict)
    reachable = [True] + [False] * len(s)
    for end in range(1, len(s) + 1):
        reachable[end] = any(
            reachable[start] and s[start:end] in words for start in range(end)
        )
    return reachable[-1]


def add_operators(num: str, target: int) -> list[str]:
    """Every way to put ``+``, ``-`` and ``*`` between the digits of ``num``
    so that the expression evaluates to ``target``.

    Operands never carry a leading zero.
    """
    if num and not num.isdigit():
        raise ValueError("num must consist of decimal digits")

    def search(index: int, value: int, prev: int, expr: str) -> Iterator[str]:
        if index == len(num):
            if value == target:
                yield expr
            return
        for end in range(index + 1, len(num) + 1):
            if end > index + 1 and num[index] == "0":
                break
            part = num[index:end]
            current = int(part)
            if index == 0:
                yield from search(end, current, current, part)
                continue
            yield from search(end, value + current, current, f"{expr}+{part}")
            yield from search(end, value - current, -current, f"{expr}-{part}")
            product = prev * current
            yield from search(end, value - prev + product, product, f"{expr}*{part}")

    return list(search(0, 0, 0, ""))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of ``k`` distinct digits 1-9 that add up to ``n``, in
    lexicographic order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]