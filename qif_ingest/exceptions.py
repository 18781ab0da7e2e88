"""
Custom exception hierarchy for qif-ingest.

Why a custom hierarchy:
- Callers can catch specific exceptions (e.g., UnsupportedHeaderError vs
  AmountParseError) without relying on generic ValueError/RuntimeError.
- Error messages name the offending line or value, making malformed
  exports easy to diagnose without the original application.

Taxonomy:
- Structural: HeaderError subclasses, EmptyLineError.
- Field-value: FieldValueError subclasses. Fatal to the current record.
- UnsupportedFieldError: recoverable inside the common parser (it triggers
  the specialized parser), fatal once the specialized parser rejects it.
- RecordEndError: end of input in the middle of a record. Carries the
  partial transaction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qif_ingest.models import Transaction


class QifIngestError(Exception):
    """Base exception for all qif-ingest errors.

    ``line_number`` is the 1-based position of the offending line in the
    input stream and ``line`` its text, both filled in by the Reader when
    known.
    """

    line_number: int | None = None
    line: str | None = None


class HeaderError(QifIngestError):
    """Raised when the first line of the input is not a usable header."""


class MissingHeaderError(HeaderError):
    """Raised when the input is empty and no header line can be read."""


class UnsupportedHeaderError(HeaderError):
    """Raised when the header line is not one of the recognized ``!Type:`` tags."""

    def __init__(self, header: str) -> None:
        super().__init__(f"unsupported header type '{header}'")
        self.header = header


class EmptyLineError(QifIngestError):
    """Raised when a field line is empty.

    An empty line carries no field tag, so it is treated as a data error
    rather than as an unsupported field.
    """


class UnsupportedFieldError(QifIngestError):
    """Raised when no parser in the fallback chain claims a field tag."""

    def __init__(self, line: str) -> None:
        super().__init__(f"cannot process line '{line}'")
        self.line = line


class FieldValueError(QifIngestError):
    """Raised when a field's raw value cannot be converted.

    ``field`` names the field being parsed (e.g. "date", "split amount").
    It is set by the field parsers, which see the tag; the value parsers
    only see the value.
    """

    def __init__(self, message: str, value: str) -> None:
        super().__init__(message)
        self.value = value
        self.field: str | None = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.field:
            return f"failed to parse {self.field}: {message}"
        return message


class AmountParseError(FieldValueError):
    """Raised for amount strings outside the ``[+-]digits.d{1,2}`` grammar."""


class DecimalParseError(FieldValueError):
    """Raised for share, price or commission values that are not finite decimals."""


class DateParseError(FieldValueError):
    """Raised when no supported date format matches the input."""


class ClearedStatusError(FieldValueError):
    """Raised for cleared-status codes outside ``*``, ``c``, ``X``, ``R`` and empty."""


class RecordEndError(QifIngestError):
    """Raised when the input ends without a terminating ``^`` line.

    All records should be terminated, but an application may wish to be
    forgiving about the last one. The unterminated transaction is
    available as ``incomplete``.
    """

    def __init__(self, incomplete: Transaction) -> None:
        super().__init__("unexpected end of input")
        self.incomplete = incomplete


class ConfigValidationError(QifIngestError):
    """Raised when a reader config YAML file is empty or unusable."""
