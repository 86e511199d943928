"""
일일 정산 (End-of-Day Consolidation)

순수 함수. 입력 로그를 변경하지 않고 새 DailyLog를 반환한다.

규칙:
- total_daily_expenses: 보류(pending) 포함 전체 지출 합계
- bank_usage: 보류가 아닌 Bank 지출(amount) + Split 지출(bank_amount)
- cash_spent: 보류가 아닌 Cash 지출(amount) + Split 지출(cash_amount)
- 마감 현금 = 기초 현금 - cash_spent
- 마감 은행 = 기초 은행 - 사용액 (사용되지 않은 은행은 기초 잔액 유지)
- 마감 잔액은 음수가 될 수 있다
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from decimal import Decimal

from core.daily.models import Balances, DailyLog
from core.errors import MissingBankBalanceError
from core.types import ExpensePaymentMethod
from core.utils.money import ZERO

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DaySummary:
    """정산 계산 결과"""

    total_daily_expenses: Decimal
    cash_spent: Decimal
    bank_usage: dict[str, Decimal] = field(default_factory=dict)
    closing_balances: Balances = field(default_factory=Balances)

    @property
    def bank_spent(self) -> Decimal:
        return sum(self.bank_usage.values(), ZERO)


def summarize_day(log: DailyLog) -> DaySummary:
    """로그의 정산 수치 계산 (잠금 여부 무관)

    Raises:
        MissingBankBalanceError: 사용된 은행이 기초 잔액에 없음
    """
    total = ZERO
    cash_spent = ZERO
    bank_usage: dict[str, Decimal] = {}

    for expense in log.expenses:
        total += expense.amount
        if expense.is_pending:
            continue

        if expense.payment_method == ExpensePaymentMethod.CASH:
            cash_spent += expense.amount
        elif expense.payment_method == ExpensePaymentMethod.BANK:
            bank_usage[expense.bank_name] = bank_usage.get(expense.bank_name, ZERO) + expense.amount
        elif expense.payment_method == ExpensePaymentMethod.SPLIT:
            cash_spent += expense.cash_amount or ZERO
            bank_usage[expense.bank_name] = (
                bank_usage.get(expense.bank_name, ZERO) + (expense.bank_amount or ZERO)
            )

    closing_banks = dict(log.opening_balances.banks)
    for bank_name, used in bank_usage.items():
        if bank_name not in log.opening_balances.banks:
            raise MissingBankBalanceError(bank_name)
        closing_banks[bank_name] = log.opening_balances.banks[bank_name] - used

    return DaySummary(
        total_daily_expenses=total,
        cash_spent=cash_spent,
        bank_usage=bank_usage,
        closing_balances=Balances(
            cash=log.opening_balances.cash - cash_spent,
            banks=closing_banks,
        ),
    )


def consolidate_day(log: DailyLog) -> DailyLog:
    """정산된(잠긴) 새 로그 반환

    같은 로그에 반복 호출해도 결과가 같다. 잠금 검사는 DailyLogStore가 한다.

    Raises:
        MissingBankBalanceError: 사용된 은행이 기초 잔액에 없음
    """
    summary = summarize_day(log)

    logger.debug(
        f"Consolidated {log.log_date.isoformat()}: total={summary.total_daily_expenses}, "
        f"cash_spent={summary.cash_spent}, banks={len(summary.bank_usage)}"
    )

    return replace(
        log,
        closing_balances=summary.closing_balances,
        total_daily_expenses=summary.total_daily_expenses,
        bank_usage=summary.bank_usage,
        is_locked=True,
    )
