"""
일일 보고서

로그 하나를 기초 잔액 / 지출 / 마감 잔액 요약으로 정리한다.
정산 전 로그는 미리보기 수치로, 정산된 로그는 저장된 수치로 만든다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from core.constants import Defaults
from core.daily.consolidation import summarize_day
from core.daily.models import Balances, DailyExpense, DailyLog
from core.types import DailyLogStatus, ExpensePaymentMethod
from core.utils.money import ZERO, format_amount


@dataclass(frozen=True)
class DailyReport:
    log_date: date
    status: DailyLogStatus
    opening_balances: Balances
    closing_balances: Balances
    paid_expenses: tuple[DailyExpense, ...]
    pending_expenses: tuple[DailyExpense, ...]
    total_daily_expenses: Decimal
    cash_spent: Decimal
    bank_usage: dict[str, Decimal] = field(default_factory=dict)

    @property
    def pending_total(self) -> Decimal:
        return sum((e.amount for e in self.pending_expenses), ZERO)

    @property
    def net_change(self) -> Decimal:
        return self.closing_balances.total - self.opening_balances.total


def build_daily_report(log: DailyLog) -> DailyReport:
    """보고서 생성

    Raises:
        MissingBankBalanceError: 정산 전 로그에서 은행 기초 잔액 누락
    """
    if log.is_locked:
        total = log.total_daily_expenses
        bank_usage = dict(log.bank_usage)
        closing = log.closing_balances
        cash_spent = log.opening_balances.cash - log.closing_balances.cash
    else:
        summary = summarize_day(log)
        total = summary.total_daily_expenses
        bank_usage = summary.bank_usage
        closing = summary.closing_balances
        cash_spent = summary.cash_spent

    return DailyReport(
        log_date=log.log_date,
        status=log.status,
        opening_balances=log.opening_balances,
        closing_balances=closing,
        paid_expenses=tuple(log.paid_expenses),
        pending_expenses=tuple(log.pending_expenses),
        total_daily_expenses=total,
        cash_spent=cash_spent,
        bank_usage=bank_usage,
    )


def _expense_line(expense: DailyExpense, currency: str) -> str:
    line = f"  - {expense.description}: {format_amount(expense.amount, currency)} [{expense.payment_method.value}"
    if expense.payment_method == ExpensePaymentMethod.BANK:
        line += f" / {expense.bank_name}"
    elif expense.payment_method == ExpensePaymentMethod.SPLIT:
        line += (
            f" / cash {format_amount(expense.cash_amount, currency)}"
            f" + {expense.bank_name} {format_amount(expense.bank_amount, currency)}"
        )
    return line + "]"


def render_daily_report(report: DailyReport, currency: str = Defaults.CURRENCY) -> str:
    """텍스트 보고서 (CLI 출력용)"""
    lines = [
        f"Daily Report - {report.log_date.isoformat()} ({report.status.value})",
        "",
        "Opening balances:",
        f"  Cash: {format_amount(report.opening_balances.cash, currency)}",
    ]
    for name, amount in sorted(report.opening_balances.banks.items()):
        lines.append(f"  {name}: {format_amount(amount, currency)}")

    lines += ["", f"Expenses ({len(report.paid_expenses)} paid):"]
    lines += [_expense_line(e, currency) for e in report.paid_expenses] or ["  (none)"]

    if report.pending_expenses:
        lines += ["", f"Pending ({len(report.pending_expenses)}):"]
        lines += [_expense_line(e, currency) for e in report.pending_expenses]

    lines += [
        "",
        f"Total daily expenses: {format_amount(report.total_daily_expenses, currency)}",
        f"Cash spent: {format_amount(report.cash_spent, currency)}",
    ]
    for name, used in sorted(report.bank_usage.items()):
        lines.append(f"Bank used - {name}: {format_amount(used, currency)}")

    lines += [
        "",
        "Closing balances:",
        f"  Cash: {format_amount(report.closing_balances.cash, currency)}",
    ]
    for name, amount in sorted(report.closing_balances.banks.items()):
        lines.append(f"  {name}: {format_amount(amount, currency)}")

    return "\n".join(lines)
