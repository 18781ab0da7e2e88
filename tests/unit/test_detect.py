"""
Unit tests for header classification (qif_ingest.detect).

Tests the recognized ``!Type:`` headers, their family/parser routing,
and the missing/unsupported header errors.
"""

import pytest

from qif_ingest.detect import classify_header, detect_header
from qif_ingest.exceptions import HeaderError, MissingHeaderError, UnsupportedHeaderError
from qif_ingest.models import AccountType, TransactionFamily
from qif_ingest.parsers.banking import BankingFieldParser
from qif_ingest.parsers.investment import InvestmentFieldParser


class TestClassifyHeader:

    @pytest.mark.parametrize(
        "header, account_type",
        [
            ("!Type:Cash", AccountType.CASH),
            ("!Type:Bank", AccountType.BANK),
            ("!Type:CCard", AccountType.CREDIT_CARD),
        ],
    )
    def test_bank_family_headers(self, header, account_type):
        info = classify_header(header)
        assert info.header == header
        assert info.account_type is account_type
        assert info.family is TransactionFamily.BANKING
        assert info.parser_cls is BankingFieldParser

    def test_investment_header(self):
        info = classify_header("!Type:Invst")
        assert info.account_type is AccountType.INVESTMENT
        assert info.family is TransactionFamily.INVESTMENT
        assert info.parser_cls is InvestmentFieldParser

    @pytest.mark.parametrize(
        "header",
        ["!Type:Bonk", "!type:bank", "!Type:Bank ", " !Type:Bank", "!Type:Oth A", "!Account", ""],
    )
    def test_unsupported_headers(self, header):
        with pytest.raises(UnsupportedHeaderError) as exc_info:
            classify_header(header)
        assert exc_info.value.header == header
        assert isinstance(exc_info.value, HeaderError)

    def test_error_names_header(self):
        with pytest.raises(UnsupportedHeaderError, match="'!Type:Bonk'"):
            classify_header("!Type:Bonk")


class TestDetectHeader:

    def test_consumes_exactly_one_line(self):
        lines = iter(["!Type:Bank", "Mmemo", "^"])
        info = detect_header(lines)
        assert info.account_type is AccountType.BANK
        assert next(lines) == "Mmemo"

    def test_empty_source(self):
        with pytest.raises(MissingHeaderError, match="header not found"):
            detect_header(iter([]))
