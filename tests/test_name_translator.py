"""Tests for holiday name translation."""

import pytest

from holiday_check.services import translate_holiday_name


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("sommerferien", "Sommerferien"),
        ("SOMMERFERIEN", "Sommerferien"),
        ("winterferien", "Winterferien"),
        ("osterferien", "Osterferien"),
        ("pfingstferien", "Pfingstferien"),
        ("herbstferien", "Herbstferien"),
        ("Weihnachtsferien", "Weihnachtsferien"),
    ],
)
def test_known_names(raw, expected):
    assert translate_holiday_name(raw) == expected


def test_unknown_name_is_capitalized():
    assert translate_holiday_name("foo") == "Foo"


def test_unknown_name_keeps_rest_of_spelling():
    assert translate_holiday_name("christi Himmelfahrt") == "Christi Himmelfahrt"


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_missing_name_falls_back(raw):
    assert translate_holiday_name(raw) == "Ferien"
