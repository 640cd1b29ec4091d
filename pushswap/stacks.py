"""The two stacks and the operations allowed on them."""

from __future__ import annotations

from dataclasses import dataclass, field

OPERATIONS = frozenset(
    {"sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr"}
)


def _swap(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.append(stack.pop(0))


def _reverse_rotate(stack: list[int]) -> None:
    if len(stack) >= 2:
        stack.insert(0, stack.pop())


def _push(source: list[int], target: list[int]) -> None:
    if source:
        target.insert(0, source.pop(0))


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``; index 0 of each list is the top."""

    a: list[int] = field(default_factory=list)
    b: list[int] = field(default_factory=list)

    def sa(self) -> None:
        """Swap the two top elements of a."""
        _swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of b."""
        _swap(self.b)

    def ss(self) -> None:
        """Do sa and sb."""
        self.sa()
        self.sb()

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.b, self.a)

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.a, self.b)

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)

    def rr(self) -> None:
        """Do ra and rb."""
        self.ra()
        self.rb()

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)

    def rrr(self) -> None:
        """Do rra and rrb."""
        self.rra()
        self.rrb()

    def apply(self, operation: str) -> None:
        """Perform the operation with the given name."""
        if operation not in OPERATIONS:
            raise ValueError(f"unknown operation: {operation!r}")
        getattr(self, operation)()