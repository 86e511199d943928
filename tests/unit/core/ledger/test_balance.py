"""
core/ledger/balance.py 테스트
"""

import random
from datetime import date
from decimal import Decimal

import pytest

from core.errors import ValidationError
from core.ledger import LedgerEntry, compute_totals
from core.types import EntryType


def _entry(entry_id: str, entry_type: EntryType, amount: str) -> LedgerEntry:
    return LedgerEntry(
        entry_id=entry_id,
        entry_date=date(2024, 1, 1),
        description="x",
        entry_type=entry_type,
        amount=Decimal(amount),
    )


class TestComputeTotals:
    """compute_totals 테스트"""

    def test_debit_and_credit(self) -> None:
        """Debit 200, Credit 500 → 잔액 300 (Credit)"""
        totals = compute_totals([
            _entry("1", EntryType.DEBIT, "200"),
            _entry("2", EntryType.CREDIT, "500"),
        ])

        assert totals.total_debit == Decimal("200")
        assert totals.total_credit == Decimal("500")
        assert totals.balance == Decimal("300")
        assert totals.format_balance() == "300 (Credit)"

    def test_negative_balance_displays_as_debit(self) -> None:
        """음수 잔액은 절댓값 + (Debit)"""
        totals = compute_totals([
            _entry("1", EntryType.DEBIT, "1200"),
            _entry("2", EntryType.CREDIT, "200"),
        ])

        assert totals.balance == Decimal("-1000")
        assert totals.display_side == "Debit"
        assert totals.format_balance("PKR") == "PKR 1,000 (Debit)"

    def test_empty(self) -> None:
        totals = compute_totals([])

        assert totals.balance == Decimal("0")
        assert totals.display_side == "Credit"

    def test_reorder_invariance(self) -> None:
        """순서를 바꿔도 결과 동일"""
        entries = [
            _entry(str(i), EntryType.DEBIT if i % 3 else EntryType.CREDIT, f"{i * 10}.25")
            for i in range(1, 20)
        ]
        expected = compute_totals(entries)

        shuffled = entries[:]
        random.Random(7).shuffle(shuffled)
        totals = compute_totals(shuffled)

        assert totals == expected
        assert totals.balance == totals.total_credit - totals.total_debit

    def test_decimal_exactness(self) -> None:
        """0.1 + 0.2 누적 오차 없음"""
        totals = compute_totals([
            _entry("1", EntryType.CREDIT, "0.1"),
            _entry("2", EntryType.CREDIT, "0.2"),
        ])

        assert totals.total_credit == Decimal("0.3")

    def test_non_positive_amount_fails_loudly(self) -> None:
        """계약 위반 항목은 예외"""
        with pytest.raises(ValidationError):
            compute_totals([_entry("1", EntryType.DEBIT, "-5")])
