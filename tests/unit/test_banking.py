"""
Unit tests for BankingFieldParser (qif_ingest.parsers.banking).

Feeds field lines directly into a parser and inspects the built
BankingTransaction: check number, payee, category, the five-line address
limit, split grouping, fallback to common fields, and errors.
"""

from __future__ import annotations

import dataclasses

import pytest

from qif_ingest.exceptions import AmountParseError, EmptyLineError, UnsupportedFieldError
from qif_ingest.models import BankingTransaction, Split, TransactionFamily
from qif_ingest.parsers.banking import BankingFieldParser


def _parse(*lines: str) -> BankingTransaction:
    parser = BankingFieldParser()
    for line in lines:
        parser.parse_field(line)
    return parser.build()


class TestSimpleFields:

    def test_check_number(self):
        assert _parse("Nnum123").num == "num123"

    def test_payee(self):
        assert _parse("Pfred").payee == "fred"

    def test_category(self):
        assert _parse("Lcat").category == "cat"

    def test_transfer_category(self):
        assert _parse("L[Savings]").category == "[Savings]"

    def test_common_field_falls_through(self):
        txn = _parse("Mmemo", "T-99.50")
        assert txn.memo == "memo"
        assert txn.amount == -9950

    def test_family_tag(self):
        assert BankingFieldParser.family is TransactionFamily.BANKING
        assert _parse().family is TransactionFamily.BANKING


class TestAddress:

    def test_five_line_address(self):
        address = ["a1", "a2", "a3", "a4", "a5"]
        txn = _parse(*(f"A{a}" for a in address))
        assert txn.address == tuple(address)
        assert txn.address_message == ""

    def test_six_line_address(self):
        address = ["a1", "a2", "a3", "a4", "a5", "msg"]
        txn = _parse(*(f"A{a}" for a in address))
        assert txn.address == tuple(address[:5])
        assert txn.address_message == "msg"

    def test_sixth_line_content_irrelevant(self):
        """Even an empty sixth line goes to the message, not the address."""
        txn = _parse("A1", "A2", "A3", "A4", "A5", "A")
        assert len(txn.address) == 5
        assert txn.address_message == ""

    def test_empty_address_lines_kept(self):
        txn = _parse("AP.O. Box 27027", "A", "A85726")
        assert txn.address == ("P.O. Box 27027", "", "85726")


class TestSplits:

    def test_split_sequence(self):
        txn = _parse(
            # split 1
            "Scat1",
            "Ememo1",
            "$12.99",
            # split 2
            "$3.99",
            # split 3
            "Ememo3",
        )
        assert txn.splits == (
            Split(category="cat1", memo="memo1", amount=1299),
            Split(amount=399),
            Split(memo="memo3"),
        )

    def test_split_amount_with_thousands(self):
        txn = _parse("SMort Int", "$-1,746.36")
        assert txn.splits == (Split(category="Mort Int", amount=-174636),)

    def test_bad_split_amount(self):
        parser = BankingFieldParser()
        with pytest.raises(AmountParseError, match="failed to parse split amount") as exc_info:
            parser.parse_field("$12")
        assert exc_info.value.field == "split amount"
        assert exc_info.value.value == "12"

    def test_no_splits_by_default(self):
        assert _parse("T1.00").splits == ()


class TestBuilder:

    def test_built_transaction_is_frozen(self):
        txn = _parse("Pfred")
        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.payee = "bob"

    def test_build_is_a_snapshot(self):
        parser = BankingFieldParser()
        parser.parse_field("A1")
        first = parser.build()
        parser.parse_field("A2")
        assert first.address == ("1",)
        assert parser.build().address == ("1", "2")

    def test_reset_discards_record(self):
        parser = BankingFieldParser()
        parser.parse_field("Pfred")
        parser.parse_field("Scat")
        parser.parse_field("T1.00")
        parser.reset()
        assert parser.build() == BankingTransaction()


class TestErrors:

    def test_empty_line(self):
        with pytest.raises(EmptyLineError):
            BankingFieldParser().parse_field("")

    @pytest.mark.parametrize("line", ["Ysecurity", "Q10", "Xunknown", "!Type:Bank"])
    def test_unsupported_field_is_fatal(self, line):
        with pytest.raises(UnsupportedFieldError, match="cannot process line"):
            BankingFieldParser().parse_field(line)
