"""
일일 현금/은행 로그 모델

DailyLog 하나 = 달력 날짜 하나의 기초 잔액, 지출, 마감 잔액.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal

from core.errors import ValidationError
from core.types import DailyLogStatus, ExpensePaymentMethod
from core.utils.money import ZERO, to_decimal, to_positive_decimal


@dataclass(frozen=True)
class Balances:
    """현금 + 은행별 잔액 (은행 이름 → 금액)"""

    cash: Decimal = ZERO
    banks: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        cash: Decimal | int | str = ZERO,
        banks: dict[str, Decimal | int | str] | None = None,
    ) -> Balances:
        """검증된 Balances 생성 (음수 허용, 유한수만)"""
        return cls(
            cash=to_decimal(cash, "cash"),
            banks={
                name: to_decimal(amount, f"banks[{name}]")
                for name, amount in (banks or {}).items()
            },
        )

    @property
    def total(self) -> Decimal:
        """현금 + 전체 은행 합계"""
        return self.cash + sum(self.banks.values(), ZERO)

    def with_cash(self, amount: Decimal) -> Balances:
        return Balances(cash=amount, banks=dict(self.banks))

    def with_bank(self, bank_name: str, amount: Decimal) -> Balances:
        banks = dict(self.banks)
        banks[bank_name] = amount
        return Balances(cash=self.cash, banks=banks)


@dataclass(frozen=True)
class DailyExpenseDraft:
    """저장 전 일일 지출"""

    description: str
    amount: Decimal
    payment_method: ExpensePaymentMethod
    property_id: str | None = None
    bank_name: str | None = None  # Bank/Split이면 필수
    cash_amount: Decimal | None = None  # Split이면 필수
    bank_amount: Decimal | None = None  # Split이면 필수
    is_pending: bool = False


@dataclass(frozen=True)
class DailyExpense:
    """일일 지출

    is_pending=True 인 지출은 기록만 되고 잔액을 움직이지 않는다.
    """

    expense_id: str
    description: str
    amount: Decimal
    payment_method: ExpensePaymentMethod
    property_id: str | None = None
    bank_name: str | None = None
    cash_amount: Decimal | None = None
    bank_amount: Decimal | None = None
    is_pending: bool = False

    @classmethod
    def from_draft(cls, expense_id: str, draft: DailyExpenseDraft) -> DailyExpense:
        return cls(
            expense_id=expense_id,
            description=draft.description,
            amount=draft.amount,
            payment_method=draft.payment_method,
            property_id=draft.property_id,
            bank_name=draft.bank_name,
            cash_amount=draft.cash_amount,
            bank_amount=draft.bank_amount,
            is_pending=draft.is_pending,
        )


@dataclass(frozen=True)
class ReopenRecord:
    """정산 해제 기록"""

    reopened_at: datetime
    reason: str


@dataclass(frozen=True)
class DailyLog:
    """일일 로그

    상태: OPEN → CONSOLIDATED(is_locked). 정산 후에는 불변.
    closing_balances / total_daily_expenses / bank_usage 는 정산 시 계산된다.
    """

    log_id: str
    log_date: date
    opening_balances: Balances
    expenses: tuple[DailyExpense, ...] = ()
    closing_balances: Balances = field(default_factory=Balances)
    total_daily_expenses: Decimal = ZERO
    bank_usage: dict[str, Decimal] = field(default_factory=dict)
    is_locked: bool = False
    reopen_history: tuple[ReopenRecord, ...] = ()
    version: int = 1

    @classmethod
    def new(cls, log_id: str, log_date: date, opening_balances: Balances) -> DailyLog:
        """새 로그 (마감 잔액 = 기초 잔액 복사본)"""
        return cls(
            log_id=log_id,
            log_date=log_date,
            opening_balances=opening_balances,
            closing_balances=replace(opening_balances, banks=dict(opening_balances.banks)),
        )

    @property
    def status(self) -> DailyLogStatus:
        return DailyLogStatus.CONSOLIDATED if self.is_locked else DailyLogStatus.OPEN

    @property
    def paid_expenses(self) -> list[DailyExpense]:
        return [e for e in self.expenses if not e.is_pending]

    @property
    def pending_expenses(self) -> list[DailyExpense]:
        return [e for e in self.expenses if e.is_pending]


def normalize_expense(draft: DailyExpenseDraft) -> DailyExpenseDraft:
    """지출 검증 및 정규화

    - 설명 필수, 금액 > 0
    - Bank: 은행 이름 필수
    - Split: 은행 이름, 현금/은행 분할 금액(각 > 0) 필수, 합계 = 금액
    - 결제 수단과 무관한 필드는 비운다

    Raises:
        ValidationError: 위 조건 위반
    """
    if not isinstance(draft.description, str) or not draft.description.strip():
        raise ValidationError("description is required")

    amount = to_positive_decimal(draft.amount)

    try:
        method = ExpensePaymentMethod(draft.payment_method)
    except ValueError as e:
        raise ValidationError(
            f"payment_method must be Cash, Bank or Split, got {draft.payment_method!r}"
        ) from e

    bank_name = draft.bank_name.strip() if draft.bank_name else None
    cash_amount: Decimal | None = None
    bank_amount: Decimal | None = None

    if method == ExpensePaymentMethod.CASH:
        bank_name = None
    elif method == ExpensePaymentMethod.BANK:
        if not bank_name:
            raise ValidationError("bank_name is required for Bank payments")
    else:
        if not bank_name:
            raise ValidationError("bank_name is required for Split payments")
        if draft.cash_amount is None or draft.bank_amount is None:
            raise ValidationError("cash_amount and bank_amount are required for Split payments")
        cash_amount = to_positive_decimal(draft.cash_amount, "cash_amount")
        bank_amount = to_positive_decimal(draft.bank_amount, "bank_amount")
        if cash_amount + bank_amount != amount:
            raise ValidationError(
                f"Split parts must add up to amount: {cash_amount} + {bank_amount} != {amount}"
            )

    return DailyExpenseDraft(
        description=draft.description.strip(),
        amount=amount,
        payment_method=method,
        property_id=draft.property_id or None,
        bank_name=bank_name,
        cash_amount=cash_amount,
        bank_amount=bank_amount,
        is_pending=bool(draft.is_pending),
    )
