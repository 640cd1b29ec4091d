"""Command line: read numbers, sort them, print the operations and stacks."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.sorting import rank, sort_stacks
from pushswap.stacks import Stacks
from pushswap.validation import InputError, parse_numbers


def format_stacks(stacks: Stacks) -> str:
    """Both stacks, top first, one value per line."""
    lines = ["Stack_a:", *map(str, stacks.a), "Stack_b:", *map(str, stacks.b)]
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on the given arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("No Input")
        return 1
    try:
        numbers = parse_numbers(args)
    except InputError as err:
        print(f"Error, {err}")
        return 1
    stacks = Stacks(rank(numbers))
    for operation in sort_stacks(stacks):
        print(operation)
    print(format_stacks(stacks), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())