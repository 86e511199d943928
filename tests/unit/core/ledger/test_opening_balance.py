"""
core/ledger/opening_balance.py 테스트
"""

from datetime import date
from decimal import Decimal

import pytest

from core.errors import ValidationError
from core.ledger import LedgerStore, add_opening_balance, build_opening_balance_entry
from core.types import EntryType


class TestBuildOpeningBalanceEntry:
    def test_defaults(self) -> None:
        draft = build_opening_balance_entry("25000", date(2024, 1, 15))

        assert draft.description == "Opening Balance"
        assert draft.entry_type == EntryType.CREDIT
        assert draft.notes == "Purana hisaab (Opening Balance)"
        assert draft.is_opening_balance is True
        assert draft.amount == Decimal("25000")

    def test_debit_opening_balance(self) -> None:
        draft = build_opening_balance_entry("500", date(2024, 1, 15), EntryType.DEBIT)

        assert draft.entry_type == EntryType.DEBIT

    def test_non_positive_amount(self) -> None:
        with pytest.raises(ValidationError):
            build_opening_balance_entry("0", date(2024, 1, 15))


class TestAddOpeningBalance:
    def test_first_entry(self, ledger: LedgerStore) -> None:
        entry_id = add_opening_balance(
            ledger, "prop-1", build_opening_balance_entry("100", date(2024, 1, 1))
        )

        entry = ledger.get("prop-1", entry_id)
        assert entry.is_opening_balance is True

    def test_refused_on_non_empty_ledger(self, ledger: LedgerStore, make_draft) -> None:
        """기초 잔액은 첫 항목이어야 함"""
        ledger.add("prop-1", make_draft())

        with pytest.raises(ValidationError):
            add_opening_balance(
                ledger, "prop-1", build_opening_balance_entry("100", date(2024, 1, 1))
            )

    def test_refuses_regular_draft(self, ledger: LedgerStore, make_draft) -> None:
        with pytest.raises(ValidationError):
            add_opening_balance(ledger, "prop-1", make_draft())
