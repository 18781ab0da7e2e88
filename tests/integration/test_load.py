"""
Integration tests for qif_ingest.load().

Covers the investment sample file, truncation handling (strict and
tolerant), config passed as a YAML path, and file-level errors.
"""

from __future__ import annotations

import datetime
import logging
from decimal import Decimal

import pytest

import qif_ingest
from qif_ingest.exceptions import RecordEndError, UnsupportedHeaderError
from tests.conftest import EXAMPLE_INVESTMENT_QIF, TRUNCATED_CCARD_QIF

pytestmark = pytest.mark.integration


class TestInvestmentFile:

    def test_all_records(self):
        transactions = qif_ingest.load(EXAMPLE_INVESTMENT_QIF)
        assert len(transactions) == 3
        assert all(isinstance(t, qif_ingest.InvestmentTransaction) for t in transactions)

    def test_buy_record(self):
        buy = qif_ingest.load(EXAMPLE_INVESTMENT_QIF)[0]
        assert buy.date == datetime.date(2020, 12, 28)
        assert buy.action is qif_ingest.InvestmentAction.BUY
        assert buy.security == "Vanguard Total Stock Market"
        assert buy.price == Decimal("200.25")
        assert buy.shares == Decimal("10.5")
        assert buy.amount == 210263
        assert buy.commission == Decimal("0")
        assert buy.status is qif_ingest.ClearedStatus.CLEARED

    def test_dividend_and_split(self):
        _, div, split = qif_ingest.load(EXAMPLE_INVESTMENT_QIF)
        assert div.action is qif_ingest.InvestmentAction.DIV
        assert div.memo == "Quarterly dividend"
        assert split.action is qif_ingest.InvestmentAction.STOCK_SPLIT
        assert split.shares == Decimal("2")


class TestTruncation:

    def test_strict_by_default(self):
        with pytest.raises(RecordEndError) as exc_info:
            qif_ingest.load(TRUNCATED_CCARD_QIF)
        assert exc_info.value.incomplete.payee == "Coffee"

    def test_tolerant_keeps_last_record(self, caplog):
        config = qif_ingest.ReaderConfig(tolerate_truncation=True)
        with caplog.at_level(logging.WARNING, logger="qif_ingest"):
            transactions = qif_ingest.load(TRUNCATED_CCARD_QIF, config=config)

        assert [t.payee for t in transactions] == ["Corner Grocery", "Coffee"]
        assert transactions[0].status is qif_ingest.ClearedStatus.RECONCILED
        assert transactions[1].amount == -1200
        assert "not terminated" in caplog.text

    def test_config_from_yaml_path(self, tmp_path):
        config_path = tmp_path / "reader.yaml"
        qif_ingest.save_config(qif_ingest.ReaderConfig(tolerate_truncation=True), config_path)
        transactions = qif_ingest.load(TRUNCATED_CCARD_QIF, config=config_path)
        assert len(transactions) == 2


class TestFileErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            qif_ingest.load(tmp_path / "missing.qif")

    def test_unsupported_header(self, tmp_path):
        path = tmp_path / "other.qif"
        path.write_text("!Type:Oth A\nT1.00\n^\n", encoding="utf-8")
        with pytest.raises(UnsupportedHeaderError):
            qif_ingest.load(path)

    def test_bom_is_ignored(self, tmp_path):
        path = tmp_path / "bom.qif"
        path.write_text("\ufeff!Type:Bank\nT1.00\n^\n", encoding="utf-8")
        assert [t.amount for t in qif_ingest.load(path)] == [100]

    def test_day_first_file(self, tmp_path):
        path = tmp_path / "eu.qif"
        path.write_text("!Type:Bank\nD25/12/2021\nT-5.00\n^\n", encoding="utf-8")
        txn = qif_ingest.load(path, config=qif_ingest.ReaderConfig(day_first=True))[0]
        assert txn.date == datetime.date(2021, 12, 25)
