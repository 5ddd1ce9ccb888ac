"""Tolerant field extraction for upstream holiday JSON.

Upstream entries vary in shape: names may be plain strings or localized
arrays ([{"language": "DE", "text": "Sommerferien"}]), dates may live
under several key names or inside nested objects. Each field has an
ordered list of extractor functions; the first one returning a non-None
value wins.
"""

from collections.abc import Callable, Iterable
from datetime import date
from typing import Any

from holiday_check.utils import parse_source_date

Extractor = Callable[[dict[str, Any]], Any]

START_KEYS = ("start", "startDate", "from", "dateFrom", "begin")
END_KEYS = ("end", "endDate", "to", "dateTo", "finish")
NESTED_START_KEYS = ("from", "start", "dateFrom", "startDate")
NESTED_END_KEYS = ("to", "end", "dateTo", "endDate")
PAYLOAD_KEYS = ("items", "data", "holidays")


def first_result(extractors: Iterable[Extractor], entry: dict[str, Any]) -> Any:
    """Run extractors in order and return the first non-None result."""
    for extractor in extractors:
        value = extractor(entry)
        if value is not None:
            return value
    return None


# --- payload -------------------------------------------------------------


def has_entry_list(payload: Any) -> bool:
    """Whether the payload carries a holiday list at all, possibly empty."""
    if isinstance(payload, list):
        return True
    return isinstance(payload, dict) and any(isinstance(payload.get(key), list) for key in PAYLOAD_KEYS)


def extract_entries(payload: Any) -> list[dict[str, Any]]:
    """Get the list of holiday objects from a response payload.

    The payload is normally a JSON array; wrapped variants under
    "items", "data" or "holidays" are accepted too. Non-object items
    are skipped.
    """
    items: Any = None
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        items = next(
            (payload[key] for key in PAYLOAD_KEYS if isinstance(payload.get(key), list)),
            None,
        )

    if not items:
        return []
    return [item for item in items if isinstance(item, dict)]


# --- names ---------------------------------------------------------------


def _localized_text(value: Any, language: str) -> str | None:
    if not isinstance(value, list):
        return None

    texts = [
        item for item in value
        if isinstance(item, dict) and isinstance(item.get("text"), str) and item["text"].strip()
    ]
    for item in texts:
        if str(item.get("language", "")).upper() == language.upper():
            return item["text"]
    if texts:
        return texts[0]["text"]
    return None


def _plain_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def name_extractors(language: str = "DE") -> list[Extractor]:
    """Ordered name extractors, preferring the given language."""
    return [
        lambda entry: _localized_text(entry.get("name"), language),
        lambda entry: _plain_text(entry.get("name")),
        lambda entry: _plain_text(entry.get("title")),
        lambda entry: _localized_text(entry.get("title"), language),
        lambda entry: _plain_text(entry.get("holidayName")),
        lambda entry: _plain_text(entry.get("description")),
    ]


# --- dates ---------------------------------------------------------------


def _direct_date(key: str) -> Extractor:
    def extract(entry: dict[str, Any]) -> date | None:
        value = entry.get(key)
        if isinstance(value, dict):
            return None
        return parse_source_date(value)

    return extract


def _nested_date(key: str, nested_keys: tuple[str, ...]) -> Extractor:
    def extract(entry: dict[str, Any]) -> date | None:
        value = entry.get(key)
        if not isinstance(value, dict):
            return None
        return first_result((_direct_date(nested) for nested in nested_keys), value)

    return extract


def _date_extractors(keys: tuple[str, ...], nested_keys: tuple[str, ...]) -> list[Extractor]:
    extractors = [_direct_date(key) for key in keys]
    extractors += [_nested_date(key, nested_keys) for key in keys]
    extractors.append(_nested_date("date", nested_keys[:2]))
    return extractors


START_DATE_EXTRACTORS: list[Extractor] = _date_extractors(START_KEYS, NESTED_START_KEYS)
END_DATE_EXTRACTORS: list[Extractor] = _date_extractors(END_KEYS, NESTED_END_KEYS)


def extract_name(entry: dict[str, Any], language: str = "DE") -> str | None:
    return first_result(name_extractors(language), entry)


def extract_start(entry: dict[str, Any]) -> date | None:
    return first_result(START_DATE_EXTRACTORS, entry)


def extract_end(entry: dict[str, Any]) -> date | None:
    return first_result(END_DATE_EXTRACTORS, entry)
