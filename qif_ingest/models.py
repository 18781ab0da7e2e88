"""
Data model for parsed QIF records.

Finalized records are frozen dataclasses, so a transaction handed to a
caller can never be mutated. Field parsers build them from a mutable
draft (see ``qif_ingest.parsers``) and only freeze the result at the
``^`` terminator, or when the input is truncated.

Transaction variants form a closed set:
- BankingTransaction: Cash, Bank and CCard accounts.
- InvestmentTransaction: Invst accounts.

Both share the common fields defined on ``TransactionBase``. Use the
``Transaction`` alias in annotations and ``Reader.family`` (or
``isinstance``) to narrow a returned value.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, IntEnum
from typing import ClassVar, Union, final


class ClearedStatus(IntEnum):
    """Cleared status of a transaction.

    UNKNOWN means the record carried no ``C`` line at all; NOT_CLEARED
    means it carried an empty one.
    """

    UNKNOWN = 0
    CLEARED = 1
    RECONCILED = 2
    NOT_CLEARED = 3


class TransactionFamily(Enum):
    BANKING = "banking"
    INVESTMENT = "investment"


class AccountType(Enum):
    """Account types selectable by the file header."""

    CASH = "Cash"
    BANK = "Bank"
    CREDIT_CARD = "CCard"
    INVESTMENT = "Invst"

    @property
    def family(self) -> TransactionFamily:
        if self is AccountType.INVESTMENT:
            return TransactionFamily.INVESTMENT
        return TransactionFamily.BANKING


class InvestmentAction(str, Enum):
    """Investment action codes (the ``N`` field of an Invst record).

    The enum value is the code as written in the file.
    """

    UNDEFINED = ""
    BUY = "Buy"
    BUY_X = "BuyX"
    SELL = "Sell"
    SELL_X = "SellX"
    CG_LONG = "CGLong"
    CG_LONG_X = "CGLongX"
    CG_MID = "CGMid"
    CG_MID_X = "CGMidX"
    CG_SHORT = "CGShort"
    CG_SHORT_X = "CGShortX"
    DIV = "Div"
    DIV_X = "DivX"
    INT_INC = "IntInc"
    INT_INC_X = "IntIncX"
    REINV_DIV = "ReInvDiv"
    REINV_INT = "ReInvInt"
    REINV_LG = "ReInvLg"
    REINV_MD = "ReInvMd"
    REINV_SH = "ReInvSh"
    REPRICE = "Reprice"
    X_IN = "XIn"
    X_OUT = "XOut"
    MISC_EXP = "MiscExp"
    MISC_EXP_X = "MiscExpX"
    MISC_INC = "MiscInc"
    MISC_INC_X = "MiscIncX"
    MARGIN_INT = "MargInt"
    MARGIN_INT_X = "MargIntX"
    RETURN_CAP = "RtrnCap"
    RETURN_CAP_X = "RtrnCapX"
    STOCK_SPLIT = "StkSplit"
    SHARES_OUT = "ShrsOut"
    SHARES_IN = "ShrsIn"

    @classmethod
    def from_code(cls, code: str) -> InvestmentAction:
        """Look up an action code, returning UNDEFINED for unknown codes."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNDEFINED


@dataclass(frozen=True)
class Split:
    """One fragment of a banking transaction.

    Any of the three fields may be absent; ``amount`` is in minor
    currency units (e.g. cents).
    """

    category: str | None = None
    memo: str | None = None
    amount: int | None = None


@dataclass(frozen=True)
class TransactionBase:
    """Fields common to every transaction variant.

    Attributes:
        date: Calendar date from the ``D`` field, or ``None`` if absent.
        amount: Value in minor currency units; $12.99 is ``1299``.
        amount_decimal: The same value as an exact decimal (``12.99``).
        memo: Free-text description from the ``M`` field.
        status: Cleared status from the ``C`` field.
    """

    family: ClassVar[TransactionFamily]

    date: datetime.date | None = None
    amount: int = 0
    amount_decimal: Decimal = Decimal(0)
    memo: str = ""
    status: ClearedStatus = ClearedStatus.UNKNOWN


@final
@dataclass(frozen=True)
class BankingTransaction(TransactionBase):
    """A Cash, Bank or CCard transaction.

    ``address`` holds at most five lines; a sixth ``A`` line is kept in
    ``address_message`` instead.
    """

    family: ClassVar[TransactionFamily] = TransactionFamily.BANKING

    num: str = ""
    payee: str = ""
    address: tuple[str, ...] = ()
    address_message: str = ""
    category: str = ""
    splits: tuple[Split, ...] = field(default_factory=tuple)


@final
@dataclass(frozen=True)
class InvestmentTransaction(TransactionBase):
    """An Invst transaction.

    ``shares`` holds the split ratio when ``action`` is STOCK_SPLIT.
    """

    family: ClassVar[TransactionFamily] = TransactionFamily.INVESTMENT

    action: InvestmentAction = InvestmentAction.UNDEFINED
    action_text: str = ""
    security: str = ""
    shares: Decimal = Decimal(0)
    price: Decimal = Decimal(0)
    commission: Decimal = Decimal(0)


Transaction = Union[BankingTransaction, InvestmentTransaction]
