"""
Investment field parser for qif-ingest.

Handles Invst records. On top of the common fields:

  N  action code (Buy, Sell, ReInvDiv, StkSplit, ...)
  Y  security name
  Q  quantity of shares (or split ratio for StkSplit)
  I  price
  O  commission

Unknown action codes are not an error: the action becomes
InvestmentAction.UNDEFINED and the raw code stays in ``action_text``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from qif_ingest.exceptions import UnsupportedFieldError
from qif_ingest.models import InvestmentAction, InvestmentTransaction, TransactionFamily
from qif_ingest.parsers.base import FieldParser
from qif_ingest.values.amounts import parse_decimal


class InvestmentFieldParser(FieldParser):
    """Field parser for investment account transactions."""

    family: ClassVar[TransactionFamily] = TransactionFamily.INVESTMENT
    field_names: ClassVar[dict[str, str]] = {
        "Q": "shares",
        "I": "price",
        "O": "commission",
    }

    def _reset_fields(self) -> None:
        self._action = InvestmentAction.UNDEFINED
        self._action_text = ""
        self._security = ""
        self._shares = Decimal(0)
        self._price = Decimal(0)
        self._commission = Decimal(0)

    def _parse_specific_field(self, tag: str, value: str, line: str) -> None:
        if tag == "N":
            self._action_text = value
            self._action = InvestmentAction.from_code(value)
        elif tag == "Y":
            self._security = value
        elif tag == "Q":
            self._shares = parse_decimal(value)
        elif tag == "I":
            self._price = parse_decimal(value)
        elif tag == "O":
            self._commission = parse_decimal(value)
        else:
            raise UnsupportedFieldError(line)

    def build(self) -> InvestmentTransaction:
        return InvestmentTransaction(
            **self._common_fields(),
            action=self._action,
            action_text=self._action_text,
            security=self._security,
            shares=self._shares,
            price=self._price,
            commission=self._commission,
        )
