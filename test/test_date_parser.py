from datetime import date

import pytest

from utils.date_parser import format_long_date, parse_date


@pytest.mark.parametrize(
    "value",
    ["2025-09-16", "2025/09/16", "16/09/2025", "16.09.2025", " 2025-09-16 ", "2025-09-16T10:30:00"],
)
def test_parse_common_formats(value):
    assert parse_date(value) == date(2025, 9, 16)


def test_parse_portuguese_natural_language():
    assert parse_date("16 de setembro de 2025") == date(2025, 9, 16)


@pytest.mark.parametrize("value", ["", "   ", None, "2025-13-45"])
def test_parse_rejects_empty_or_invalid(value):
    assert parse_date(value) is None


def test_long_date_portuguese():
    assert format_long_date(date(2025, 9, 16), "pt-BR") == "terça-feira, 16 de setembro de 2025"


def test_long_date_english():
    assert format_long_date(date(2025, 9, 23), "en-US") == "Tuesday, September 23, 2025"


def test_long_date_unknown_locale_falls_back_to_english():
    assert format_long_date(date(2025, 9, 16), "xx") == "Tuesday, September 16, 2025"


def test_long_date_without_value():
    assert format_long_date(None) == "Select a date"
