# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and only
these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | push the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up by one (top goes to bottom) |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down by one (bottom goes to top) |

An operation on a stack that is too short for it (for example `sa` with fewer
than two elements, or `pa` with `b` empty) does nothing.

The command replaces every value with its rank, so the smallest value becomes
0, then sorts the ranks with a binary radix sort, bit by bit, stopping as soon
as `a` is sorted. It prints each operation it performs, one per line, and at
the end prints the final contents of both stacks (as ranks, top first) under
the headings `Stack_a:` and `Stack_b:`.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 -1 2 0
```

The same entry point can be run as `python -m pushswap.cli`.

Each argument is one integer: optional leading spaces or tabs, an optional
`+` or `-` sign, then decimal digits only. A sign with no digits after it is
read as 0. Values outside the 32-bit signed range wrap around to it.

Errors, each with exit status 1:

- no arguments at all: prints `No Input`;
- an argument that is empty, blank, or not of the form above: prints
  `Error, Wrong Input`;
- the same value given twice (after conversion, so `5` and `+5` clash):
  prints `Error, Dopples In Input`.

On success the exit status is 0.

## Library use

```python
from pushswap.validation import parse_numbers, DuplicateInputError
from pushswap.stacks import Stacks
from pushswap.sorting import rank, sort_stacks, is_sorted
from pushswap.cli import format_stacks

numbers = parse_numbers(["42", "-7", "13"])   # [42, -7, 13]
ranks = rank(numbers)                          # [2, 0, 1]

stacks = Stacks(ranks)
operations = sort_stacks(stacks)               # list of operation names
assert is_sorted(stacks.a)
print(format_stacks(stacks), end="")
```

### `pushswap.validation`

- `validate_token(text)` checks one argument and returns its integer value.
- `parse_numbers(tokens)` validates all tokens in order and returns their
  values.
- Both raise `WrongInputError` or `DuplicateInputError`; both derive from
  `InputError`, which derives from `ValueError`.

### `pushswap.stacks`

`Stacks(a, b)` is a dataclass holding two lists; index 0 is the top. Each
operation is a method (`stacks.pb()`, `stacks.rra()`, ...), and
`stacks.apply(name)` runs one by name, raising `ValueError` for an unknown
name.

### `pushswap.sorting`

- `is_sorted(values)`: true when the values never decrease.
- `find_max(values)`: the largest value, but never below 0.
- `find_min(values)`: the smallest value; `ValueError` if empty.
- `rank(values)`: each value replaced by its position in sorted order.
- `radix_pass(stacks, bit)`: push elements of `a` whose given bit is 0 onto
  `b`, rotate the others, stopping early once `a` is sorted; then push all of
  `b` back.
- `sort_stacks(stacks)`: run radix passes over bits 0 to 30 until `a` is
  sorted.
- `sort_three(stacks)`: a fixed routine for two or three elements on `a`.
- `sort_five(stacks)`: a fixed routine for four or five non-negative elements
  on `a`.

Every sorting function applies its operations to `stacks` and returns the list
of operation names it used. The command uses only `sort_stacks`.

## What it does not do

There is no checker: the package does not read a list of operations from
input and verify that it sorts a given stack. It also does not try to find the
shortest sequence of operations; the command always uses the radix sort.

## Running the tests

```
pip install ".[test]"
pytest
```