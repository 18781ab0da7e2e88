"""
qif-ingest: Python library for reading QIF (Quicken Interchange Format) exports.

Public API surface:

- ``load(path, config=None)`` -- **recommended entry point**. Reads a QIF
  file from disk and returns its transactions as a list.

- ``Reader(source, config=None)`` -- pull-based reader over any line
  source, for callers that want one transaction at a time or already
  hold the text in memory.

- ``ReaderConfig`` / ``load_config`` / ``save_config`` -- reader settings
  (date order, file encoding, truncation tolerance), optionally kept in
  a YAML file.

- ``transactions_to_frame`` / ``splits_to_frame`` -- pandas views of
  parsed transactions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from qif_ingest.config import ReaderConfig, load_config, save_config
from qif_ingest.exceptions import QifIngestError, RecordEndError
from qif_ingest.frame import splits_to_frame, transactions_to_frame
from qif_ingest.models import (
    AccountType,
    BankingTransaction,
    ClearedStatus,
    InvestmentAction,
    InvestmentTransaction,
    Split,
    Transaction,
    TransactionFamily,
)
from qif_ingest.reader import Reader

__all__ = [
    "load",
    "Reader",
    "ReaderConfig",
    "load_config",
    "save_config",
    "transactions_to_frame",
    "splits_to_frame",
    "AccountType",
    "BankingTransaction",
    "ClearedStatus",
    "InvestmentAction",
    "InvestmentTransaction",
    "Split",
    "Transaction",
    "TransactionFamily",
    "QifIngestError",
    "RecordEndError",
]

logger = logging.getLogger(__name__)


def load(
    path: str | Path,
    config: ReaderConfig | str | Path | None = None,
) -> list[Transaction]:
    """Read every transaction from a QIF file.

    Args:
        path: Path to the QIF file.
        config: A ``ReaderConfig``, a path to a reader config YAML file,
            or ``None`` for the defaults.

    Returns:
        Transactions in file order.

    Raises:
        FileNotFoundError: If *path* (or a config path) does not exist.
        HeaderError: If the header is missing or unsupported.
        RecordEndError: If the last record is unterminated and
            ``config.tolerate_truncation`` is False.
        QifIngestError: For any malformed field.

    Examples::

        txns = qif_ingest.load("exports/checking.qif")

        # European export: 03/01/2017 is 3 January
        txns = qif_ingest.load(
            "exports/girokonto.qif",
            config=qif_ingest.ReaderConfig(day_first=True),
        )
    """
    if config is None:
        config = ReaderConfig()
    elif not isinstance(config, ReaderConfig):
        config = load_config(config)

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"QIF file not found: {path}")

    logger.info("load() -- path=%s, day_first=%s", path, config.day_first)

    transactions: list[Transaction] = []
    with open(path, "r", encoding=config.encoding) as f:
        reader = Reader(f, config)
        try:
            for transaction in reader:
                transactions.append(transaction)
        except RecordEndError as exc:
            if not config.tolerate_truncation:
                raise
            logger.warning(
                "%s: last record is not terminated by '^'; keeping it", path
            )
            transactions.append(exc.incomplete)

    logger.info("Loaded %d transactions from %s", len(transactions), path)
    return transactions
