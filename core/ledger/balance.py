"""
잔액 계산기

장부 항목 목록에서 합계를 파생. 누적 캐시 없이 항상 항목에서 재계산하므로
수정/삭제 후에도 합계가 어긋나지 않는다.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from core.errors import ValidationError
from core.ledger.entry import LedgerEntry
from core.types import EntryType
from core.utils.money import ZERO, format_amount


@dataclass(frozen=True)
class LedgerTotals:
    """장부 합계

    balance = total_credit - total_debit (저장 부호).
    표시용 부호는 display_side 참고.
    """

    total_debit: Decimal
    total_credit: Decimal
    balance: Decimal

    @property
    def display_side(self) -> str:
        """표시용 방향: 0 이상이면 Credit, 음수면 Debit"""
        return EntryType.CREDIT.value if self.balance >= ZERO else EntryType.DEBIT.value

    def format_balance(self, currency: str | None = None) -> str:
        """표시용 잔액 문자열

        Example:
            >>> totals.format_balance()        # balance = -300
            '300 (Debit)'
            >>> totals.format_balance("PKR")   # balance = 1500
            'PKR 1,500 (Credit)'
        """
        magnitude = abs(self.balance)
        text = format_amount(magnitude, currency) if currency else f"{magnitude}"
        return f"{text} ({self.display_side})"


def compute_totals(entries: Iterable[LedgerEntry]) -> LedgerTotals:
    """장부 합계 계산 (순수 함수)

    Args:
        entries: 장부 항목 (순서 무관)

    Returns:
        LedgerTotals

    Raises:
        ValidationError: 0 이하 금액 항목이 섞인 경우 (계약 위반)
    """
    total_debit = ZERO
    total_credit = ZERO

    for entry in entries:
        if entry.amount <= ZERO:
            raise ValidationError(
                f"Entry {entry.entry_id} has non-positive amount {entry.amount}"
            )
        if entry.entry_type == EntryType.DEBIT:
            total_debit += entry.amount
        elif entry.entry_type == EntryType.CREDIT:
            total_credit += entry.amount
        else:
            raise ValidationError(
                f"Entry {entry.entry_id} has unknown type {entry.entry_type!r}"
            )

    return LedgerTotals(
        total_debit=total_debit,
        total_credit=total_credit,
        balance=total_credit - total_debit,
    )
