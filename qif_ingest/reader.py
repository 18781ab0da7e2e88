"""
Record reading for qif-ingest.

The Reader pulls lines from any line source (a list of strings, an open
text file, ``io.StringIO``, a string holding the whole file) and turns
them into transactions one record at a time.

Session states:
- Header pending: the first ``read()`` consumes the header line and picks
  the field parser for the session (see ``detect.py``). This happens once.
- Per record: lines are fed to the field parser until a ``^`` line,
  which finalizes the transaction.

Outcomes of ``read()``:
- ``^`` seen: the completed transaction is returned.
- A field fails to parse: the error propagates with ``line_number`` and
  ``line`` set, and the partial record is discarded.
- Input exhausted before any line of a new record: ``None`` (no more
  transactions).
- Input exhausted in the middle of a record: RecordEndError carrying the
  partial transaction as ``incomplete``.

A Reader is single-threaded and not seekable: consumed lines cannot be
replayed. Use one Reader per input stream.
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator

from qif_ingest.config import ReaderConfig
from qif_ingest.detect import HeaderInfo, detect_header
from qif_ingest.exceptions import QifIngestError, RecordEndError
from qif_ingest.models import AccountType, Transaction, TransactionFamily
from qif_ingest.parsers.base import FieldParser

logger = logging.getLogger(__name__)

RECORD_END = "^"


class Reader:
    """Pull-based reader of QIF transactions.

    Args:
        source: Lines of QIF text. A ``str`` is treated as the full file
            content and split on newlines. Trailing ``\\r``/``\\n`` are
            removed from every line; nothing else is stripped.
        config: Reader configuration. Defaults to ``ReaderConfig()``
            (month-first dates).

    Examples::

        with open("export.qif", encoding="utf-8") as f:
            reader = Reader(f)
            for txn in reader:
                print(txn.date, txn.amount)
    """

    def __init__(
        self,
        source: Iterable[str] | str,
        config: ReaderConfig | None = None,
    ) -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        self.config = config or ReaderConfig()
        self.line_number = 0
        self._lines = self._iter_lines(source)
        self._header: HeaderInfo | None = None
        self._parser: FieldParser | None = None

    # ------------------------------------------------------------------
    # Session state
    # ------------------------------------------------------------------

    @property
    def header_parsed(self) -> bool:
        return self._header is not None

    @property
    def family(self) -> TransactionFamily | None:
        """Transaction family of this session, or None before the header is read."""
        return self._header.family if self._header else None

    @property
    def account_type(self) -> AccountType | None:
        return self._header.account_type if self._header else None

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read(self) -> Transaction | None:
        """Read the next transaction.

        Returns:
            The next transaction, or ``None`` when the input is exhausted
            at a record boundary.

        Raises:
            HeaderError: If the header is missing or unsupported.
            RecordEndError: If the input ends inside a record.
            QifIngestError: Any other field error; the record is discarded.
        """
        if self._header is None:
            self._parse_header()

        parser = self._parser
        parser.reset()
        consumed = 0

        for line in self._lines:
            consumed += 1
            if line == RECORD_END:
                transaction = parser.build()
                parser.reset()
                logger.debug(
                    "Read %s transaction ending at line %d",
                    transaction.family.value, self.line_number,
                )
                return transaction

            try:
                parser.parse_field(line)
            except QifIngestError as exc:
                exc.line_number = self.line_number
                exc.line = line
                parser.reset()
                logger.debug("Discarding record: line %d: %s", self.line_number, exc)
                raise

        if consumed == 0:
            return None

        incomplete = parser.build()
        parser.reset()
        raise RecordEndError(incomplete)

    def read_all(self) -> list[Transaction]:
        """Read every remaining transaction.

        Either all transactions are returned or an exception propagates;
        a partial list is never returned alongside an error.
        """
        transactions = list(self)
        logger.info("Read %d transactions", len(transactions))
        return transactions

    def __iter__(self) -> Iterator[Transaction]:
        while True:
            transaction = self.read()
            if transaction is None:
                return
            yield transaction

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _iter_lines(self, source: Iterable[str]) -> Iterator[str]:
        for raw in source:
            self.line_number += 1
            yield raw.rstrip("\r\n")

    def _parse_header(self) -> None:
        try:
            header = detect_header(self._lines)
        except QifIngestError as exc:
            exc.line_number = self.line_number or None
            raise
        self._header = header
        self._parser = header.parser_cls(self.config)
