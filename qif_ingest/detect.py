"""
Header classification for QIF input.

The first line of a QIF file names the account type, e.g. ``!Type:Bank``.
It is compared verbatim against the recognized headers; the match selects
the transaction family and the field parser class for the whole session.

Design: Strategy Pattern
- detect_header() returns a HeaderInfo holding the parser class.
- The Reader instantiates the parser class once per session.

Recognized headers:
  !Type:Cash, !Type:Bank, !Type:CCard  -> BankingFieldParser
  !Type:Invst                          -> InvestmentFieldParser

Other QIF headers (!Type:Oth A, !Type:Oth L, !Type:Invoice, !Account,
...) are not supported and raise UnsupportedHeaderError.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from qif_ingest.exceptions import MissingHeaderError, UnsupportedHeaderError
from qif_ingest.models import AccountType, TransactionFamily
from qif_ingest.parsers.banking import BankingFieldParser
from qif_ingest.parsers.base import FieldParser
from qif_ingest.parsers.investment import InvestmentFieldParser

logger = logging.getLogger(__name__)

_HEADERS: dict[str, AccountType] = {
    "!Type:Cash": AccountType.CASH,
    "!Type:Bank": AccountType.BANK,
    "!Type:CCard": AccountType.CREDIT_CARD,
    "!Type:Invst": AccountType.INVESTMENT,
}

_PARSER_MAP: dict[TransactionFamily, type[FieldParser]] = {
    TransactionFamily.BANKING: BankingFieldParser,
    TransactionFamily.INVESTMENT: InvestmentFieldParser,
}


@dataclass(frozen=True)
class HeaderInfo:
    """Result of header classification."""

    header: str
    account_type: AccountType
    family: TransactionFamily
    parser_cls: type[FieldParser]


def classify_header(header: str) -> HeaderInfo:
    """Classify a header line.

    Raises:
        UnsupportedHeaderError: If *header* is not a recognized ``!Type:`` line.
    """
    account_type = _HEADERS.get(header)
    if account_type is None:
        raise UnsupportedHeaderError(header)

    family = account_type.family
    return HeaderInfo(
        header=header,
        account_type=account_type,
        family=family,
        parser_cls=_PARSER_MAP[family],
    )


def detect_header(lines: Iterator[str]) -> HeaderInfo:
    """Consume exactly one line from *lines* and classify it as a header.

    Calling this twice on the same iterator would consume a data line as
    if it were a header; the Reader guards against that.

    Raises:
        MissingHeaderError: If *lines* is exhausted.
        UnsupportedHeaderError: If the line is not a recognized header.
    """
    try:
        header = next(lines)
    except StopIteration:
        raise MissingHeaderError("file header not found") from None

    info = classify_header(header)
    logger.info(
        "Detected header '%s' (%s account, %s parser)",
        header, info.account_type.value, info.parser_cls.__name__,
    )
    return info
