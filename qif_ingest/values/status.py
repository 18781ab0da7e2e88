"""Cleared-status code parsing (the ``C`` field)."""

from __future__ import annotations

from qif_ingest.exceptions import ClearedStatusError
from qif_ingest.models import ClearedStatus

_STATUS_CODES: dict[str, ClearedStatus] = {
    "*": ClearedStatus.CLEARED,
    "c": ClearedStatus.CLEARED,
    "X": ClearedStatus.RECONCILED,
    "R": ClearedStatus.RECONCILED,
    "": ClearedStatus.NOT_CLEARED,
}


def parse_cleared_status(code: str) -> ClearedStatus:
    """Map a one-character cleared-status code to ClearedStatus.

    Raises:
        ClearedStatusError: For any code outside ``*``, ``c``, ``X``, ``R`` or "".
    """
    try:
        return _STATUS_CODES[code]
    except KeyError:
        raise ClearedStatusError(f'bad cleared status: "{code}"', code) from None
