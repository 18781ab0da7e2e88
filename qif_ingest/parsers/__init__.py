"""
Parsers sub-package for qif-ingest.

Contains the per-family field parsers that turn the field lines of one
record into a transaction.

Design: Strategy Pattern
- base.py defines the FieldParser ABC and the common fields (D, T/U, M, C).
- banking.py implements BankingFieldParser for Cash, Bank and CCard records.
- investment.py implements InvestmentFieldParser for Invst records.
- splits.py holds the split accumulator used by the banking parser.

The header classifier (detect.py) selects the parser class at runtime.
"""
