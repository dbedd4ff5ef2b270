"""Assorted small algorithms on numbers, arrays, strings and trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate, combinations
from typing import Any


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def complement(n: int) -> int:
    """Flip every bit of ``n`` below its highest set bit."""
    mask = 0
    while mask < n:
        mask = (mask << 1) | 1
    return ~n & mask


def subsets_with_dup(nums: Iterable[int]) -> list[list[int]]:
    """Return every distinct subset, each sorted, in lexicographic order."""
    items = sorted(nums)
    unique = {
        combo
        for size in range(len(items) + 1)
        for combo in combinations(items, size)
    }
    return [list(combo) for combo in sorted(unique)]


def trapped_water(heights: Sequence[int]) -> int:
    """Return how much rain water the elevation map ``heights`` traps."""
    if len(heights) <= 2:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(left, right) - height
        for left, right, height in zip(left_max, right_max, heights)
    )


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> list:
    """Return the values of a binary tree in preorder (node, left, right)."""
    values = []
    pending = [root]
    while pending:
        node = pending.pop()
        if node is None:
            continue
        values.append(node.val)
        pending.append(node.right)
        pending.append(node.left)
    return values


def swap_first_letters(first: str, second: str) -> tuple[str, str]:
    """Return both strings with their first characters exchanged."""
    if not first or not second:
        raise ValueError("both strings must be non-empty")
    return second[0] + first[1:], first[0] + second[1:]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return indices of two numbers adding to ``target``, smaller value first."""
    pairs = sorted((value, index) for index, value in enumerate(nums))
    low, high = 0, len(pairs) - 1
    while low < high:
        total = pairs[low][0] + pairs[high][0]
        if total == target:
            return [pairs[low][1], pairs[high][1]]
        if total < target:
            low += 1
        else:
            high -= 1
    raise ValueError(f"no two numbers add up to {target}")