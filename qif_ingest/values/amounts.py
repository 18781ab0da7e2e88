"""
Amount and decimal parsing for qif-ingest.

QIF amounts are written as plain decimal strings, optionally with comma
thousand separators (e.g. "-1,000.00", "75.00", "-12.9"). They are
converted to an exact integer number of minor currency units; no float
is involved at any stage.

Share counts, prices and commissions in investment records may carry
any number of fraction digits, so they are parsed as ``decimal.Decimal``
instead.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from qif_ingest.exceptions import AmountParseError, DecimalParseError

# Optional sign, whole part, point, one or two fraction digits (ASCII only)
_AMOUNT_PATTERN = re.compile(r"[-+]?\d+\.\d{1,2}", re.ASCII)


def strip_thousands(text: str) -> str:
    """Remove comma thousand separators ("1,234.00" -> "1234.00")."""
    return text.replace(",", "")


def parse_amount(text: str) -> int:
    """Convert an amount string into minor currency units.

    The input must already be stripped of thousand separators. A single
    fraction digit is padded, so ``"-12.9"`` and ``"-12.90"`` both give
    ``-1290``.

    Raises:
        AmountParseError: If *text* is not ``[+-]digits.d`` or ``[+-]digits.dd``.
    """
    if not _AMOUNT_PATTERN.fullmatch(text):
        raise AmountParseError(f'bad amount string "{text}"', text)

    if text.index(".") == len(text) - 2:
        text += "0"

    return int(text.replace(".", "", 1))


def parse_decimal(text: str) -> Decimal:
    """Parse a share count, price or commission as an exact decimal.

    Thousand separators and surrounding whitespace are ignored.

    Raises:
        DecimalParseError: If *text* is empty, not numeric, not finite,
            or written with non-ASCII digits.
    """
    cleaned = strip_thousands(text).strip()
    if not cleaned.isascii():
        raise DecimalParseError(f'bad decimal string "{text}"', text)
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise DecimalParseError(f'bad decimal string "{text}"', text) from exc

    if not value.is_finite():
        raise DecimalParseError(f'bad decimal string "{text}"', text)
    return value
