"""Checking and converting the numbers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")
_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class InputError(ValueError):
    """Raised when the command-line input cannot be used."""

    message = "Invalid Input"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class WrongInputError(InputError):
    """A token is not a signed decimal integer."""

    message = "Wrong Input"


class DuplicateInputError(InputError):
    """The same number occurs more than once."""

    message = "Dopples In Input"


def _to_int32(number: int) -> int:
    """Clamp to the range of a 64-bit long, then keep the low 32 bits as signed."""
    number = max(min(number, _LONG_MAX), _LONG_MIN)
    number &= 0xFFFFFFFF
    return number - 2**32 if number >= 2**31 else number


def validate_token(text: str) -> int:
    """Check one token and return the integer it denotes.

    Leading spaces and tabs are allowed, then an optional sign, then digits
    only. A lone sign is accepted and counts as zero.
    """
    body = text.lstrip(" \t")
    if not body:
        raise WrongInputError()
    sign = 1
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if any(char not in _DIGITS for char in body):
        raise WrongInputError()
    return _to_int32(sign * int(body)) if body else 0


def parse_numbers(tokens: Iterable[str]) -> list[int]:
    """Validate the tokens in order and return their values.

    Each token is checked for its form, then against the numbers read so far.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for token in tokens:
        value = validate_token(token)
        if value in seen:
            raise DuplicateInputError()
        seen.add(value)
        numbers.append(value)
    return numbers