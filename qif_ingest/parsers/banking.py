"""
Banking field parser for qif-ingest.

Handles Cash, Bank and CCard records. On top of the common fields:

  N  check or reference number (may also read "Deposit", "ATM", "EFT", ...)
  P  payee
  A  address line; up to five lines, a sixth is the address message
  L  category (or [transfer account])
  S  split category, always starts a new split
  E  split memo
  $  split amount

See ``qif_ingest.parsers.splits`` for how S/E/$ lines are grouped.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from qif_ingest.exceptions import UnsupportedFieldError
from qif_ingest.models import BankingTransaction, Split, TransactionFamily
from qif_ingest.parsers.base import FieldParser
from qif_ingest.parsers.splits import SplitField, accumulate_split
from qif_ingest.values.amounts import parse_amount, strip_thousands

logger = logging.getLogger(__name__)

MAX_ADDRESS_LINES = 5


class BankingFieldParser(FieldParser):
    """Field parser for non-investment transactions."""

    family: ClassVar[TransactionFamily] = TransactionFamily.BANKING
    field_names: ClassVar[dict[str, str]] = {"$": "split amount"}

    def _reset_fields(self) -> None:
        self._num = ""
        self._payee = ""
        self._address: list[str] = []
        self._address_message = ""
        self._category = ""
        self._splits: tuple[Split, ...] = ()

    def _parse_specific_field(self, tag: str, value: str, line: str) -> None:
        if tag == "N":
            self._num = value
        elif tag == "P":
            self._payee = value
        elif tag == "A":
            if len(self._address) >= MAX_ADDRESS_LINES:
                if self._address_message:
                    logger.debug(
                        "Replacing address message %r with %r",
                        self._address_message, value,
                    )
                self._address_message = value
            else:
                self._address.append(value)
        elif tag == "L":
            self._category = value
        elif tag == "S":
            self._splits = accumulate_split(self._splits, SplitField.CATEGORY, value)
        elif tag == "E":
            self._splits = accumulate_split(self._splits, SplitField.MEMO, value)
        elif tag == "$":
            amount = parse_amount(strip_thousands(value))
            self._splits = accumulate_split(self._splits, SplitField.AMOUNT, amount)
        else:
            raise UnsupportedFieldError(line)

    def build(self) -> BankingTransaction:
        return BankingTransaction(
            **self._common_fields(),
            num=self._num,
            payee=self._payee,
            address=tuple(self._address),
            address_message=self._address_message,
            category=self._category,
            splits=self._splits,
        )
