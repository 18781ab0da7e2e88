"""
Base field parser and common field handling for qif-ingest.

Every transaction family is parsed by a FieldParser subclass. The
contract is:
1. ``parse_field(line)`` consumes one field line of the current record.
2. ``build()`` freezes the fields seen so far into a transaction.
3. ``reset()`` discards the in-progress record and starts a new one.

Fallback chain:
  ``parse_field`` first tries ``parse_common_field`` (D, T/U, M, C). Only
  when that raises UnsupportedFieldError does the subclass get to look
  at the line. Any other error (a bad amount, an unparseable date)
  propagates straight away. If the subclass does not recognize the tag
  either, it raises UnsupportedFieldError again, which is fatal.

Why an ABC:
- Enforces a consistent interface across the banking and investment
  parsers, so the Reader never needs to know which one it drives.
"""

from __future__ import annotations

import datetime
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, ClassVar

from qif_ingest.config import ReaderConfig
from qif_ingest.exceptions import EmptyLineError, FieldValueError, UnsupportedFieldError
from qif_ingest.models import ClearedStatus, Transaction, TransactionFamily
from qif_ingest.values.amounts import parse_amount, strip_thousands
from qif_ingest.values.dates import parse_date
from qif_ingest.values.status import parse_cleared_status

# Field names reported in FieldValueError for the common tags
COMMON_FIELD_NAMES: dict[str, str] = {
    "D": "date",
    "T": "amount",
    "U": "amount",
    "C": "cleared status",
}


@dataclass
class CommonDraft:
    """Mutable common fields of the record currently being parsed."""

    date: datetime.date | None = None
    amount: int = 0
    amount_decimal: Decimal = Decimal(0)
    memo: str = ""
    status: ClearedStatus = ClearedStatus.UNKNOWN


def parse_common_field(draft: CommonDraft, line: str, config: ReaderConfig) -> None:
    """Apply a field shared by all transaction families to *draft*.

    Raises:
        EmptyLineError: If *line* is empty.
        UnsupportedFieldError: If the tag is not D, T, U, M or C.
        FieldValueError: If the value of a recognized field is malformed.
    """
    if not line:
        raise EmptyLineError("line is empty")

    tag, value = line[0], line[1:]

    try:
        if tag == "D":
            draft.date = parse_date(value, config.day_first)
        elif tag in ("T", "U"):  # U is a synonym for T
            amount = strip_thousands(value)
            draft.amount = parse_amount(amount)
            draft.amount_decimal = Decimal(amount)
        elif tag == "M":
            draft.memo = value
        elif tag == "C":
            draft.status = parse_cleared_status(value)
        else:
            raise UnsupportedFieldError(line)
    except FieldValueError as exc:
        exc.field = COMMON_FIELD_NAMES[tag]
        raise


class FieldParser(ABC):
    """Abstract builder for one transaction family.

    Owns exactly one in-progress record at a time. Subclasses implement
    ``_reset_fields``, ``_parse_specific_field`` and ``build``.
    """

    family: ClassVar[TransactionFamily]
    # Field names reported in FieldValueError for family-specific tags
    field_names: ClassVar[dict[str, str]] = {}

    def __init__(self, config: ReaderConfig | None = None) -> None:
        self.config = config or ReaderConfig()
        self.reset()

    def reset(self) -> None:
        """Discard the in-progress record and start an empty one."""
        self._common = CommonDraft()
        self._reset_fields()

    def parse_field(self, line: str) -> None:
        """Consume one field line of the current record.

        Raises:
            EmptyLineError: If *line* is empty.
            UnsupportedFieldError: If neither the common fields nor this
                family recognize the tag.
            FieldValueError: If the field value is malformed.
        """
        try:
            parse_common_field(self._common, line, self.config)
            return
        except UnsupportedFieldError:
            pass

        tag = line[0]
        try:
            self._parse_specific_field(tag, line[1:], line)
        except FieldValueError as exc:
            exc.field = self.field_names.get(tag)
            raise

    def _common_fields(self) -> dict[str, Any]:
        return asdict(self._common)

    @abstractmethod
    def _reset_fields(self) -> None:
        """Reset the family-specific draft fields."""

    @abstractmethod
    def _parse_specific_field(self, tag: str, value: str, line: str) -> None:
        """Handle a tag the common parser rejected.

        Raises:
            UnsupportedFieldError: If the tag is unknown to this family too.
        """

    @abstractmethod
    def build(self) -> Transaction:
        """Freeze the fields parsed so far into a transaction."""
