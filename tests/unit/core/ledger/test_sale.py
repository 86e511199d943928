"""
core/ledger/sale.py 테스트
"""

from datetime import date
from decimal import Decimal

import pytest

from core.errors import ValidationError
from core.ledger import (
    LedgerEntry,
    build_sale_entry,
    recent_sale_entries,
    sale_entries,
    summarize_sales,
)
from core.types import EntryType, SaleStage


def _entry(entry_id: str, category: str, amount: str, day: int = 1,
           entry_type: EntryType = EntryType.CREDIT) -> LedgerEntry:
    return LedgerEntry(
        entry_id=entry_id,
        entry_date=date(2024, 5, day),
        description="x",
        entry_type=entry_type,
        amount=Decimal(amount),
        category=category,
    )


class TestSaleEntries:
    """매각 항목 필터 / 집계 테스트"""

    def test_filters_credit_sale_categories(self) -> None:
        entries = [
            _entry("1", "Advance", "100"),
            _entry("2", "Rent", "50"),
            _entry("3", "Final Settlement", "900"),
            _entry("4", "Advance", "30", entry_type=EntryType.DEBIT),
            _entry("5", "Sale", "10"),
        ]

        assert [e.entry_id for e in sale_entries(entries)] == ["1", "3", "5"]

    def test_summary_per_category(self) -> None:
        summary = summarize_sales([
            _entry("1", "Advance", "100"),
            _entry("2", "Advance", "50"),
            _entry("3", "Partial Payment", "300"),
        ])

        assert summary.total == Decimal("450")
        assert summary.category_total("Advance") == Decimal("150")
        assert summary.category_total("Partial Payment") == Decimal("300")
        assert summary.category_total("Final Settlement") == Decimal("0")

    def test_recent_newest_first_limited(self) -> None:
        entries = [_entry(str(day), "Advance", "10", day=day) for day in range(1, 9)]

        recent = recent_sale_entries(entries)

        assert [e.entry_id for e in recent] == ["8", "7", "6", "5", "4"]


class TestBuildSaleEntry:
    """build_sale_entry 테스트"""

    @pytest.mark.parametrize(
        "stage,description",
        [
            (SaleStage.ADVANCE, "Buyer Advance Payment"),
            (SaleStage.PARTIAL_PAYMENT, "Partial Payment from Buyer"),
            (SaleStage.FINAL_SETTLEMENT, "Final Settlement - Property Sale"),
        ],
    )
    def test_stage_maps_to_fixed_description(self, stage: SaleStage, description: str) -> None:
        draft = build_sale_entry(stage, "5000", date(2024, 5, 1), received_from="Buyer")

        assert draft.description == description
        assert draft.category == stage.value
        assert draft.entry_type == EntryType.CREDIT
        assert draft.counterparty == "Buyer"

    def test_stage_as_string(self) -> None:
        draft = build_sale_entry("Partial Payment", "10", date(2024, 5, 1))

        assert draft.category == "Partial Payment"

    def test_unknown_stage(self) -> None:
        with pytest.raises(ValidationError):
            build_sale_entry("Deposit", "10", date(2024, 5, 1))

    def test_non_positive_amount(self) -> None:
        with pytest.raises(ValidationError):
            build_sale_entry(SaleStage.ADVANCE, "0", date(2024, 5, 1))
