"""
Shared test fixtures and path constants for qif-ingest tests.

All input file paths are defined here as module-level constants for
easy discovery and modification. If input files move or new ones are
added, update this file.
"""

from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Input file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
INPUT_DIR = Path(__file__).resolve().parent / "inputs"

# The worked example from the QIF format description (three Bank records)
EXAMPLE_BANK_QIF = INPUT_DIR / "example_bank.qif"
EXAMPLE_INVESTMENT_QIF = INPUT_DIR / "example_investment.qif"
# CCard file whose second record has no closing '^'
TRUNCATED_CCARD_QIF = INPUT_DIR / "truncated_ccard.qif"

BANK_HEADER = "!Type:Bank"
CASH_HEADER = "!Type:Cash"
CARD_HEADER = "!Type:CCard"
INVESTMENT_HEADER = "!Type:Invst"
RECORD_END = "^"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against sample input files)",
    )
