"""
매각 회계 하위 장부

Credit 항목 중 매각 관련 카테고리만 모아 단계별 합계를 보여주고,
선택한 단계에 맞는 고정 설명으로 Credit 항목을 만든다.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable

from core.constants import Defaults
from core.errors import ValidationError
from core.ledger.entry import LedgerEntry, LedgerEntryDraft
from core.types import EntryCategory, EntryType, PaymentMethod, SaleStage
from core.utils.money import ZERO, to_positive_decimal

# 매각 대금으로 집계하는 카테고리 ("Sale"은 집계만, 입력 단계는 아님)
SALE_CATEGORIES: tuple[str, ...] = (
    EntryCategory.SALE.value,
    EntryCategory.ADVANCE.value,
    EntryCategory.PARTIAL_PAYMENT.value,
    EntryCategory.FINAL_SETTLEMENT.value,
)

SALE_STAGE_DESCRIPTIONS: dict[SaleStage, str] = {
    SaleStage.ADVANCE: "Buyer Advance Payment",
    SaleStage.PARTIAL_PAYMENT: "Partial Payment from Buyer",
    SaleStage.FINAL_SETTLEMENT: "Final Settlement - Property Sale",
}


@dataclass(frozen=True)
class SaleSummary:
    """매각 대금 요약"""

    total: Decimal
    by_category: dict[str, Decimal] = field(default_factory=dict)

    def category_total(self, category: str) -> Decimal:
        return self.by_category.get(category, ZERO)


def is_sale_entry(entry: LedgerEntry) -> bool:
    return entry.entry_type == EntryType.CREDIT and entry.category in SALE_CATEGORIES


def sale_entries(entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    """매각 관련 Credit 항목 (입력 순서)"""
    return [e for e in entries if is_sale_entry(e)]


def recent_sale_entries(
    entries: Iterable[LedgerEntry],
    limit: int = Defaults.RECENT_SALE_ENTRIES,
) -> list[LedgerEntry]:
    """최근 매각 항목 (날짜 내림차순)"""
    ordered = sorted(sale_entries(entries), key=lambda e: e.entry_date, reverse=True)
    return ordered[:limit]


def summarize_sales(entries: Iterable[LedgerEntry]) -> SaleSummary:
    """카테고리별 매각 대금 합계"""
    by_category: dict[str, Decimal] = {category: ZERO for category in SALE_CATEGORIES}
    total = ZERO
    for entry in sale_entries(entries):
        by_category[entry.category] += entry.amount
        total += entry.amount
    return SaleSummary(total=total, by_category=by_category)


def build_sale_entry(
    stage: SaleStage | str,
    amount: Decimal | int | str,
    entry_date: date,
    payment_method: PaymentMethod | None = None,
    received_from: str | None = None,
    notes: str | None = None,
) -> LedgerEntryDraft:
    """매각 단계별 Credit 항목 생성

    Raises:
        ValidationError: 알 수 없는 단계 또는 금액 0 이하
    """
    try:
        stage = SaleStage(stage)
    except ValueError as e:
        valid = [s.value for s in SaleStage]
        raise ValidationError(f"Unknown sale stage {stage!r}. Valid: {valid}") from e

    return LedgerEntryDraft(
        entry_date=entry_date,
        description=SALE_STAGE_DESCRIPTIONS[stage],
        entry_type=EntryType.CREDIT,
        amount=to_positive_decimal(amount),
        category=stage.value,
        payment_method=payment_method,
        counterparty=received_from or None,
        notes=notes or None,
    )
