"""
Helpers for the free-text numeric fields of a loan (interest rate, processing
fee, processing time) and for rendering amounts the way the catalog displays
them. Every engine that needs a number out of one of those strings goes
through parse_leading_number so the edge cases live in one place.
"""

import re
from typing import List, Optional

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")


def parse_leading_number(value: Optional[str]) -> Optional[float]:
    """Return the first numeric token in ``value`` or None when there is none.

    "8.5-12%" -> 8.5, "10% p.a." -> 10.0, "Nil" -> None.
    """
    if not isinstance(value, str):
        return None
    match = _NUMBER_PATTERN.search(value)
    if not match:
        return None
    return float(match.group(0))


def parse_all_numbers(value: Optional[str]) -> List[float]:
    if not isinstance(value, str):
        return []
    return [float(token) for token in _NUMBER_PATTERN.findall(value)]


def format_loan_amount(amount: int, currency: str = "₹") -> str:
    # Indian numbering: crore = 1e7, lakh = 1e5
    if amount >= 10_000_000:
        return f"{currency}{amount / 10_000_000:.1f}Cr"
    if amount >= 100_000:
        return f"{currency}{amount / 100_000:.1f}L"
    if amount >= 1_000:
        return f"{currency}{amount / 1_000:.1f}K"
    return f"{currency}{amount:,}"


def _format_token(token: float) -> str:
    return f"{token:g}"


def format_interest_rate(rate: str) -> str:
    numbers = parse_all_numbers(rate)
    if not numbers:
        return rate
    if len(numbers) == 1:
        return f"{_format_token(numbers[0])}%"
    return f"{_format_token(numbers[0])}-{_format_token(numbers[1])}%"


_TIME_UNITS = [
    ("hour", re.compile(r"hours?", re.IGNORECASE), "hrs"),
    ("day", re.compile(r"days?", re.IGNORECASE), "days"),
    ("week", re.compile(r"weeks?", re.IGNORECASE), "weeks"),
    ("month", re.compile(r"months?", re.IGNORECASE), "months"),
]


def format_processing_time(time_text: str) -> str:
    lowered = time_text.lower()
    for keyword, pattern, replacement in _TIME_UNITS:
        if keyword in lowered:
            return pattern.sub(replacement, time_text)
    return time_text
