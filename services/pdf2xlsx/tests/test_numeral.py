from decimal import Decimal

import pytest

from pdf2xlsx.numeral import find_numeric_tokens, parse_number_token, try_parse_number_token


def test_parse_number_token_comma_thousands_period_decimal():
    assert parse_number_token("20,956.00") == Decimal("20956.00")
    assert parse_number_token("1,234,567.89") == Decimal("1234567.89")


def test_parse_number_token_period_decimal():
    assert parse_number_token("15.00") == Decimal("15.00")
    assert parse_number_token("0.5") == Decimal("0.5")


def test_parse_number_token_dot_groups_of_three_are_thousands():
    assert parse_number_token("1.234") == Decimal("1234")
    assert parse_number_token("1.234.567") == Decimal("1234567")
    assert parse_number_token("1.2345") == Decimal("1.2345")


def test_parse_number_token_comma_only_is_decimal():
    assert parse_number_token("15,5") == Decimal("15.5")
    assert parse_number_token("1,234") == Decimal("1.234")


def test_parse_number_token_period_always_decimal_when_mixed():
    # Comma plus period always reads the period as the decimal mark.
    assert parse_number_token("20.956,00") == Decimal("20.956")


def test_parse_number_token_negative_and_plain():
    assert parse_number_token("-3") == Decimal("-3")
    assert parse_number_token("42") == Decimal("42")


def test_parse_number_token_rejects_empty_and_garbage():
    with pytest.raises(ValueError):
        parse_number_token("")
    with pytest.raises(ValueError):
        parse_number_token("1.234.567,89")
    assert try_parse_number_token("abc") is None
    assert try_parse_number_token(None) is None


def test_find_numeric_tokens_in_order():
    assert find_numeric_tokens("2 Nuez Pecan PARTIDA x 1Kg 20,956.00 15.00") == [
        "2",
        "1",
        "20,956.00",
        "15.00",
    ]
    assert find_numeric_tokens("Nuez Pecan") == []
    assert find_numeric_tokens("") == []


def test_find_numeric_tokens_ignores_non_ascii_digits():
    assert find_numeric_tokens("2 Nuez １２ ３４") == ["2"]
