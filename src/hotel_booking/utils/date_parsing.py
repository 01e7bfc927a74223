from datetime import date, datetime


def from_iso_date(value: str | date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Date must be an ISO-8601 string")
    return date.fromisoformat(value)


def optional_iso_date(value) -> date | None:
    if value is None or value == "":
        return None
    return from_iso_date(value)
