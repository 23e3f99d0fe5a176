import pytest

from app.utils.loan_parsing import (
    parse_leading_number,
    parse_all_numbers,
    format_loan_amount,
    format_interest_rate,
    format_processing_time,
)


@pytest.mark.parametrize("text,expected", [
    ("8.5-12%", 8.5),
    ("10% p.a.", 10.0),
    ("Up to 3.54%", 3.54),
    ("0%", 0.0),
    ("Nil", None),
    ("", None),
    (None, None),
])
def test_parse_leading_number(text, expected):
    assert parse_leading_number(text) == expected


def test_parse_all_numbers():
    assert parse_all_numbers("2-3.75%") == [2.0, 3.75]
    assert parse_all_numbers("free") == []
    assert parse_all_numbers(None) == []


def test_format_loan_amount_uses_indian_units():
    assert format_loan_amount(50000) == "₹50.0K"
    assert format_loan_amount(250000) == "₹2.5L"
    assert format_loan_amount(20000000) == "₹2.0Cr"
    assert format_loan_amount(999) == "₹999"
    assert format_loan_amount(5000000, currency="$") == "$50.0L"


def test_format_interest_rate():
    assert format_interest_rate("8.50-12.0% p.a.") == "8.5-12%"
    assert format_interest_rate("7%") == "7%"
    assert format_interest_rate("Variable") == "Variable"


def test_format_processing_time():
    assert format_processing_time("72 hours") == "72 hrs"
    assert format_processing_time("10-15 days") == "10-15 days"
    assert format_processing_time("2-3 weeks") == "2-3 weeks"
    assert format_processing_time("Instant") == "Instant"
