"""
Tabular view of parsed transactions.

Builds pandas DataFrames from parsed records for analysis:
- transactions_to_frame(): one row per transaction.
- splits_to_frame(): one row per split, linked by ``transaction_index``.

Columns:
  Common      family, date, amount, amount_decimal, memo, status
  Banking     num, payee, address, address_message, category, split_count
  Investment  action, action_text, security, shares, price, commission

Family-specific columns appear only when at least one transaction of
that family is present. Amounts stay exact: ``amount`` is an integer in
minor units and the decimal columns hold ``decimal.Decimal`` objects.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import pandas as pd

from qif_ingest.models import BankingTransaction, Transaction, TransactionFamily

logger = logging.getLogger(__name__)

COMMON_COLUMNS = ["family", "date", "amount", "amount_decimal", "memo", "status"]
BANKING_COLUMNS = ["num", "payee", "address", "address_message", "category", "split_count"]
INVESTMENT_COLUMNS = ["action", "action_text", "security", "shares", "price", "commission"]
SPLIT_COLUMNS = ["transaction_index", "split_index", "category", "memo", "amount"]

_FAMILY_COLUMNS = {
    TransactionFamily.BANKING: BANKING_COLUMNS,
    TransactionFamily.INVESTMENT: INVESTMENT_COLUMNS,
}


def _transaction_row(txn: Transaction) -> dict[str, Any]:
    row: dict[str, Any] = {
        "family": txn.family.value,
        "date": txn.date,
        "amount": txn.amount,
        "amount_decimal": txn.amount_decimal,
        "memo": txn.memo,
        "status": txn.status.name,
    }
    if isinstance(txn, BankingTransaction):
        row.update(
            num=txn.num,
            payee=txn.payee,
            address=txn.address,
            address_message=txn.address_message,
            category=txn.category,
            split_count=len(txn.splits),
        )
    else:
        row.update(
            action=txn.action.name,
            action_text=txn.action_text,
            security=txn.security,
            shares=txn.shares,
            price=txn.price,
            commission=txn.commission,
        )
    return row


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per transaction.

    Args:
        transactions: Parsed transactions, e.g. from ``Reader.read_all()``.

    Returns:
        DataFrame with the common columns plus the columns of every
        family present. ``date`` is converted to ``datetime64`` (missing
        dates become ``NaT``).
    """
    rows: list[dict[str, Any]] = []
    families: set[TransactionFamily] = set()
    for txn in transactions:
        rows.append(_transaction_row(txn))
        families.add(txn.family)

    columns = list(COMMON_COLUMNS)
    for family, family_columns in _FAMILY_COLUMNS.items():
        if family in families:
            columns.extend(family_columns)

    df = pd.DataFrame(rows, columns=columns)
    df["date"] = pd.to_datetime(df["date"])
    logger.debug("Built transaction frame: %d rows x %d cols", len(df), len(df.columns))
    return df


def splits_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build a DataFrame with one row per split of every banking transaction.

    ``transaction_index`` is the position of the parent transaction in
    *transactions*; ``split_index`` is the position of the split within
    it. Missing split fields are ``None`` (``<NA>`` for ``amount``).
    """
    rows: list[dict[str, Any]] = []
    for txn_index, txn in enumerate(transactions):
        if not isinstance(txn, BankingTransaction):
            continue
        for split_index, split in enumerate(txn.splits):
            rows.append({
                "transaction_index": txn_index,
                "split_index": split_index,
                "category": split.category,
                "memo": split.memo,
                "amount": split.amount,
            })

    df = pd.DataFrame(rows, columns=SPLIT_COLUMNS)
    df["amount"] = df["amount"].astype("Int64")
    return df
