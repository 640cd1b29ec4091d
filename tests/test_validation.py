import pytest

from pushswap.validation import (
    DuplicateInputError,
    InputError,
    WrongInputError,
    parse_numbers,
    validate_token,
)


@pytest.mark.parametrize(
    ("token", "expected"),
    [("42", 42), ("  -7", -7), ("+5", 5), ("\t13", 13), ("-0", 0)],
)
def test_validate_token_accepts_signed_integers(token, expected):
    assert validate_token(token) == expected


def test_lone_sign_counts_as_zero():
    assert validate_token("-") == 0
    assert validate_token("+") == 0


def test_int32_boundaries_are_kept():
    assert validate_token("2147483647") == 2147483647
    assert validate_token("-2147483648") == -2147483648


def test_value_past_int32_wraps():
    assert validate_token("2147483648") == -2147483648


@pytest.mark.parametrize("token", ["", "   ", "12a", "1 2", "--1", "3.5", "1 ", "x"])
def test_validate_token_rejects_malformed(token):
    with pytest.raises(WrongInputError):
        validate_token(token)


def test_error_messages():
    assert str(WrongInputError()) == "Wrong Input"
    assert str(DuplicateInputError()) == "Dopples In Input"
    assert issubclass(WrongInputError, InputError)
    assert issubclass(DuplicateInputError, ValueError)


def test_parse_numbers_keeps_order():
    assert parse_numbers(["3", "1", "2"]) == [3, 1, 2]


def test_parse_numbers_empty():
    assert parse_numbers([]) == []


def test_parse_numbers_rejects_duplicates():
    with pytest.raises(DuplicateInputError):
        parse_numbers(["4", "2", "4"])


def test_duplicates_compare_values_not_text():
    with pytest.raises(DuplicateInputError):
        parse_numbers(["1", "+1"])


def test_errors_reported_in_token_order():
    with pytest.raises(DuplicateInputError):
        parse_numbers(["1", "1", "x"])
    with pytest.raises(WrongInputError):
        parse_numbers(["x", "1", "1"])