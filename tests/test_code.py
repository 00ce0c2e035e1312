"""
Testing the Code value: validity, equality, defensive copies.
"""

import pytest

from codebreaker.code import Code


@pytest.mark.parametrize("text", ["0123", "8765", "4081", "3210"])
def test_valid_codes(text):
    assert Code(text).is_valid() is True


@pytest.mark.parametrize(
    "text",
    [
        "0012",   # duplicate
        "0129",   # '9' is outside the alphabet
        "012",    # too short
        "01234",  # too long
        "",
        "01a3",
        "01 3",
    ],
)
def test_malformed_codes(text):
    assert Code(text).is_valid() is False


def test_non_character_symbols_are_invalid():
    # ints are not symbols, even 0..3
    assert Code([0, 1, 2, 3]).is_valid() is False
    assert Code(["01", "2", "3", "4"]).is_valid() is False


def test_construct_from_explicit_symbols():
    code = Code.of("4", "5", "6", "7")
    assert code == Code("4567")
    assert code.is_valid()


def test_equality_is_positional():
    assert Code("0123") == Code(["0", "1", "2", "3"])
    # same symbols, different order
    assert Code("0123") != Code("3210")
    # different length
    assert Code("012") != Code("0123")
    assert Code("0123") != "0123"


def test_symbols_returns_a_copy():
    code = Code("0123")
    symbols = code.symbols
    symbols[0] = "8"
    symbols.append("7")

    assert code.symbols == ["0", "1", "2", "3"]
    assert str(code) == "0123"


def test_construction_copies_the_input_list():
    pieces = ["0", "1", "2", "3"]
    code = Code(pieces)
    pieces[0] = "8"
    assert str(code) == "0123"


def test_codes_are_hashable():
    assert len({Code("0123"), Code("0123"), Code("1234")}) == 2
