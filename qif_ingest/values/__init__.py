"""
Value parsers sub-package for qif-ingest.

Micro-parsers that turn the raw text of a single field into a typed value:
  - amounts.py: Minor-unit amounts ("-12.99" -> -1299) and exact decimals.
  - dates.py: Locale-ambiguous dates, honoring the day/month order flag.
  - status.py: Cleared-status codes.

Each parser is a plain function that raises a FieldValueError subclass on
bad input, so field parsers can let the error propagate unchanged.
"""
