"""Ranking and sorting on the two stacks."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from pushswap.stacks import Stacks

_BITS = 31


def is_sorted(values: Sequence[int]) -> bool:
    """True when the values never decrease."""
    return all(x <= y for x, y in pairwise(values))


def find_max(values: Sequence[int]) -> int:
    """The largest value, but never below zero."""
    return max((0, *values))


def find_min(values: Sequence[int]) -> int:
    """The smallest value; raises ValueError when there is none."""
    return min(values)


def rank(values: Sequence[int]) -> list[int]:
    """Replace each value by its position in sorted order."""
    positions: dict[int, int] = {}
    for position, value in enumerate(sorted(values)):
        positions.setdefault(value, position)
    return [positions[value] for value in values]


def _do(stacks: Stacks, operations: list[str], name: str) -> None:
    stacks.apply(name)
    operations.append(name)


def sort_three(stacks: Stacks) -> list[str]:
    """Sort a stack of two or three elements on ``a``; return the operations."""
    a = stacks.a
    if len(a) < 2:
        raise ValueError("stack a needs at least two elements")
    operations: list[str] = []
    if a[0] > a[1]:
        _do(stacks, operations, "sa")
    if not is_sorted(a):
        if a[0] > a[2]:
            _do(stacks, operations, "rra")
        else:
            _do(stacks, operations, "sa")
            _do(stacks, operations, "ra")
    return operations


def _push_max(stacks: Stacks, operations: list[str]) -> None:
    target = find_max(stacks.a)
    if target not in stacks.a:
        raise ValueError("stack a has no element equal to its maximum")
    while stacks.a[0] != target:
        _do(stacks, operations, "ra")
    _do(stacks, operations, "pb")


def sort_five(stacks: Stacks) -> list[str]:
    """Sort four or five non-negative elements on ``a``; return the operations."""
    operations: list[str] = []
    _push_max(stacks, operations)
    _push_max(stacks, operations)
    operations.extend(sort_three(stacks))
    for name in ("pa", "ra", "pa", "ra"):
        _do(stacks, operations, name)
    return operations


def radix_pass(stacks: Stacks, bit: int) -> list[str]:
    """Split ``a`` on one bit, pushing zeros to ``b``, then bring ``b`` back.

    The split stops early once ``a`` is sorted.
    """
    operations: list[str] = []
    for _ in range(len(stacks.a) + 1):
        if is_sorted(stacks.a):
            break
        if (stacks.a[0] >> bit) & 1 == 0:
            _do(stacks, operations, "pb")
        else:
            _do(stacks, operations, "ra")
    while stacks.b:
        _do(stacks, operations, "pa")
    return operations


def sort_stacks(stacks: Stacks) -> list[str]:
    """Radix-sort ``a`` bit by bit until it is sorted; return the operations."""
    operations: list[str] = []
    if is_sorted(stacks.a):
        return operations
    for bit in range(_BITS):
        operations.extend(radix_pass(stacks, bit))
        if is_sorted(stacks.a):
            break
    return operations