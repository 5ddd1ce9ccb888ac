"""Display names for school holiday types."""

DEFAULT_HOLIDAY_NAME = "Ferien"

HOLIDAY_NAMES = {
    "winterferien": "Winterferien",
    "osterferien": "Osterferien",
    "pfingstferien": "Pfingstferien",
    "sommerferien": "Sommerferien",
    "herbstferien": "Herbstferien",
    "weihnachtsferien": "Weihnachtsferien",
}


def translate_holiday_name(raw_name: str | None) -> str:
    """Map a raw holiday identifier to its display name.

    Known holiday types are looked up case-insensitively. Anything else
    keeps its spelling with the first letter upper-cased; a missing name
    becomes the generic "Ferien" label.

    Examples:
        >>> translate_holiday_name("sommerferien")
        'Sommerferien'
        >>> translate_holiday_name("foo")
        'Foo'
        >>> translate_holiday_name(None)
        'Ferien'
    """
    if not raw_name or not raw_name.strip():
        return DEFAULT_HOLIDAY_NAME

    name = raw_name.strip()
    known = HOLIDAY_NAMES.get(name.lower())
    if known is not None:
        return known
    return name[0].upper() + name[1:]
