from __future__ import annotations

from datetime import date, datetime
from numbers import Real
from pathlib import Path
from typing import Any, Callable, Final, Optional

from xml_sitemap.errors import InvalidTypeError, InvalidValueError
from xml_sitemap.paths import modified_time

OptionHandler = Callable[[Any], Any]

CHANGEFREQ_VALUES: Final[tuple[str, ...]] = (
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
)

NOW: Final[str] = "now"


def w3_date(value: date) -> str:
    """Format a date (or datetime, in its own local fields) as ``YYYY-MM-DD``.

    >>> w3_date(date(2012, 12, 21))
    '2012-12-21'
    """
    if not isinstance(value, date):
        raise InvalidTypeError(f"w3_date expects a date, found {type(value).__name__}.")
    return f"{value.year}-{value.month:02d}-{value.day:02d}"


def today() -> str:
    return w3_date(datetime.now())


def handle_lastmod(value: Optional[Any] = None) -> str:
    """Derive a lastmod value.

    ``None`` and ``"now"`` give today's date, a date is formatted with
    :func:`w3_date` and any other string is kept as-is without checking
    its format.
    """
    if value is None or value == NOW:
        return today()
    if isinstance(value, date):
        return w3_date(value)
    if not isinstance(value, str):
        raise InvalidTypeError(f"Expected lastmod value to be a date or string, found {type(value).__name__}.")
    return value


def handle_changefreq(value: Any) -> str:
    if value not in CHANGEFREQ_VALUES:
        raise InvalidValueError(f"Unrecognized changefreq value {value!r}. Expected one of {', '.join(CHANGEFREQ_VALUES)}.")
    return value


def handle_priority(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValueError(f"Priority must be a number between 0 and 1, found {value!r}")
    if not (0 <= value <= 1):
        raise InvalidValueError(f"Priority must be a number between 0 and 1, found {value!r}")
    number = float(value)
    # 1 and 1.0 both serialize as "1"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def lastmod_from_file(path: Path | str) -> str:
    return w3_date(modified_time(path))
