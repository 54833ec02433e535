"""Calendar-day keys.

Days are compared on the literal `YYYY-MM-DD` prefix of the stored value,
never through a timezone conversion, so a ticket valid for the 18th stays
valid for the 18th wherever the server runs.
"""

from datetime import date, datetime


def to_date_key(value: date | datetime | str | None) -> str | None:
    """Return the `YYYY-MM-DD` day of a timestamp-bearing value, or None."""
    if value is None:
        return None
    if isinstance(value, date):
        text = value.isoformat()
    else:
        text = str(value).strip()
    if not text:
        return None
    return text.split("T", 1)[0].split(" ", 1)[0]


def to_display_date(value: date | datetime | str | None) -> date | None:
    """Return the calendar day of `value` as a `date`, or None if it has none."""
    key = to_date_key(value)
    if key is None:
        return None
    try:
        year, month, day = (int(part) for part in key.split("-"))
        return date(year, month, day)
    except ValueError:
        return None
