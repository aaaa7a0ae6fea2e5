"""Publication date codec for the ``Y1``/``Y2`` family of tags.

Dates are written ``YYYY/MM/DD/other``; everything after the year is
optional, e.g. ``1998``, ``1998///``, ``1998/03//`` or
``1995/12/01/Spring``.
"""

import re

from risio.errors import DateFormatError
from risio.models import PublicationDate

__all__ = ["DATE_PATTERN", "parse_date", "format_date"]

DATE_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})"
    r"(?:/(?P<month>[0-9]{2})?"
    r"(?:/(?P<day>[0-9]{2})?"
    r"(?:/(?P<other>.+)?)?)?)?",
    re.DOTALL,
)


def parse_date(text: str) -> PublicationDate:
    """Parse a RIS date value.

    Parameters
    ----------
    text : str
        Value of a date tag.

    Returns
    -------
    PublicationDate
        Parsed date; components that are missing or empty are ``None``.

    Raises
    ------
    DateFormatError
        If the whole value does not match ``YYYY(/MM?(/DD?(/OTHER?)?)?)?``.
    """
    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        raise DateFormatError(f"Invalid date: {text!r}")

    month = match.group("month")
    day = match.group("day")

    return PublicationDate(
        year=int(match.group("year")),
        month=int(month) if month is not None else None,
        day=int(day) if day is not None else None,
        other_info=match.group("other"),
    )


def format_date(date: PublicationDate) -> str:
    """Format a date in canonical RIS form.

    All three separators are always written, so a year-only date becomes
    ``YYYY///``.

    Parameters
    ----------
    date : PublicationDate
        Date to format.

    Returns
    -------
    str
        Canonical ``YYYY/MM/DD/other`` text.

    Raises
    ------
    DateFormatError
        If the year does not fit in four digits or the month or day in two.
    """
    if not 0 <= date.year <= 9999:
        raise DateFormatError(f"Year out of range: {date.year}")
    for name in ("month", "day"):
        value = getattr(date, name)
        if value is not None and not 0 <= value <= 99:
            raise DateFormatError(f"{name.capitalize()} out of range: {value}")

    month = f"{date.month:02d}" if date.month is not None else ""
    day = f"{date.day:02d}" if date.day is not None else ""
    other = date.other_info if date.other_info is not None else ""
    return f"{date.year:04d}/{month}/{day}/{other}"
