"""
Date parsing for qif-ingest.

The QIF format is vague about dates. Exports seen in the wild include:
- "1 March 2017", "1 March 17", "1 March '7"
- "03/01/2017", "3/ 1/17", "6/ 1/94", "03/01/'7"

Whether "03/01" means 3 January or 1 March depends on the locale of the
exporting application, so the caller chooses with ``day_first``.

Normalization before matching:
1. Drop a leading zero from every component ("03/01" -> "3/1").
2. Purely numeric dates ("3/ 1/2017") lose all spaces.
3. A trailing apostrophe year ("'7") is expanded to two digits using
   the decade of *today*.

Formats are then tried in order and the first match wins.

Only ASCII digits are accepted. The text forms go through ``strptime``,
so a run of whitespace between day, month and year counts as one space and
the month name is matched case-insensitively ("1  march 2017"). Month
names follow the ``LC_TIME`` locale of the process, which is English
unless the application changes it.
"""

from __future__ import annotations

import datetime
import logging
import re

from qif_ingest.exceptions import DateParseError

logger = logging.getLogger(__name__)

# A zero at the start of the text or right after a non-digit
_LEADING_ZERO = re.compile(r"(^|[^\d])0", re.ASCII)
_NUMERIC_DATE = re.compile(r"[\d/ ]+", re.ASCII)
_APOSTROPHE_YEAR = re.compile(r"'(\d)$", re.ASCII)

_TEXT_FORMATS = ["%d %B %Y", "%d %B %y"]
_MONTH_FIRST_FORMATS = ["%m/%d/%Y", "%m/%d/%y"]
_DAY_FIRST_FORMATS = ["%d/%m/%Y", "%d/%m/%y"]


def _normalize(text: str, today: datetime.date) -> str:
    normalized = _LEADING_ZERO.sub(r"\1", text)

    if _NUMERIC_DATE.fullmatch(normalized):
        normalized = normalized.replace(" ", "")

    decade = (today.year - 2000) // 10
    normalized = _APOSTROPHE_YEAR.sub(rf"{decade}\1", normalized)
    return normalized


def parse_date(
    text: str,
    day_first: bool = False,
    today: datetime.date | None = None,
) -> datetime.date:
    """Parse a QIF date string into a calendar date.

    Args:
        text: Raw date value (the ``D`` field without its tag).
        day_first: Interpret numeric dates as dd/mm instead of mm/dd.
        today: Reference date for expanding single-digit ``'Y`` years.
            Defaults to ``datetime.date.today()``.

    Returns:
        The parsed date.

    Raises:
        DateParseError: If no supported format matches.
    """
    if today is None:
        today = datetime.date.today()

    if any(ch.isdigit() and not ch.isascii() for ch in text):
        raise DateParseError(f'failed to parse date "{text}"', text)

    normalized = _normalize(text, today)
    numeric_formats = _DAY_FIRST_FORMATS if day_first else _MONTH_FIRST_FORMATS

    for fmt in _TEXT_FORMATS + numeric_formats:
        try:
            return datetime.datetime.strptime(normalized, fmt).date()
        except ValueError:
            continue

    logger.debug("No date format matched %r (normalized %r)", text, normalized)
    raise DateParseError(f'failed to parse date "{text}"', text)
