"""Tests for tolerant extraction of upstream holiday fields."""

from datetime import date

from holiday_check.repositories.field_extractors import (
    extract_end,
    extract_entries,
    extract_name,
    extract_start,
    has_entry_list,
)


class TestEntries:
    def test_plain_list(self):
        assert extract_entries([{"a": 1}, "junk", {"b": 2}]) == [{"a": 1}, {"b": 2}]

    def test_wrapped_payloads(self):
        assert extract_entries({"items": [{"a": 1}]}) == [{"a": 1}]
        assert extract_entries({"data": [{"a": 1}]}) == [{"a": 1}]
        assert extract_entries({"holidays": [{"a": 1}]}) == [{"a": 1}]

    def test_unusable_payloads(self):
        assert extract_entries(None) == []
        assert extract_entries("text") == []
        assert extract_entries({"error": "nope"}) == []

    def test_has_entry_list(self):
        assert has_entry_list([])
        assert has_entry_list({"items": []})
        assert not has_entry_list({"error": "rate limited"})
        assert not has_entry_list({"items": None})
        assert not has_entry_list("text")


class TestName:
    def test_localized_prefers_language(self):
        entry = {
            "name": [
                {"language": "EN", "text": "Summer holidays"},
                {"language": "DE", "text": "Sommerferien"},
            ]
        }
        assert extract_name(entry, "DE") == "Sommerferien"

    def test_localized_falls_back_to_first(self):
        entry = {"name": [{"language": "EN", "text": "Summer holidays"}]}
        assert extract_name(entry, "DE") == "Summer holidays"

    def test_plain_string(self):
        assert extract_name({"name": "sommerferien"}) == "sommerferien"

    def test_alternative_keys_in_order(self):
        assert extract_name({"title": "Herbst"}) == "Herbst"
        assert extract_name({"title": [{"language": "DE", "text": "Ostern"}]}) == "Ostern"
        assert extract_name({"holidayName": "Pfingsten", "description": "x"}) == "Pfingsten"
        assert extract_name({"description": "Winter"}) == "Winter"

    def test_empty_values_are_skipped(self):
        assert extract_name({"name": "", "title": "Herbst"}) == "Herbst"
        assert extract_name({"name": [{"language": "DE", "text": ""}], "holidayName": "X"}) == "X"

    def test_no_name(self):
        assert extract_name({"startDate": "2025-07-01"}) is None


class TestDates:
    def test_openholidays_shape(self):
        entry = {"startDate": "2025-07-31", "endDate": "2025-09-13"}
        assert extract_start(entry) == date(2025, 7, 31)
        assert extract_end(entry) == date(2025, 9, 13)

    def test_ferien_api_shape(self):
        entry = {"start": "2025-07-31T00:00Z", "end": "2025-09-14T00:00Z"}
        assert extract_start(entry) == date(2025, 7, 31)
        assert extract_end(entry) == date(2025, 9, 14)

    def test_from_to_keys(self):
        entry = {"from": "31.07.2025", "to": "13.09.2025"}
        assert extract_start(entry) == date(2025, 7, 31)
        assert extract_end(entry) == date(2025, 9, 13)

    def test_nested_objects(self):
        entry = {"period": None, "start": {"dateFrom": "2025-07-31"}, "end": {"endDate": "2025-09-13"}}
        assert extract_start(entry) == date(2025, 7, 31)
        assert extract_end(entry) == date(2025, 9, 13)

    def test_date_object(self):
        entry = {"date": {"from": "2025-10-27", "to": "2025-10-31"}}
        assert extract_start(entry) == date(2025, 10, 27)
        assert extract_end(entry) == date(2025, 10, 31)

    def test_unparseable_candidate_falls_through(self):
        entry = {"start": "soon", "startDate": "2025-07-31"}
        assert extract_start(entry) == date(2025, 7, 31)

    def test_missing_dates(self):
        assert extract_start({"name": "x"}) is None
        assert extract_end({"name": "x", "end": "later"}) is None
