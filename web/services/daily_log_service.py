"""
DailyLog 서비스

일일 로그 생성/지출/정산과 응답 변환.
"""

import logging
from datetime import date

from core.daily import (
    Balances,
    DailyExpense,
    DailyExpenseDraft,
    DailyLog,
    DailyLogStore,
    DaySummary,
    build_daily_report,
    render_daily_report,
)
from core.errors import NotFoundError
from core.workspace import Workspace
from web.models.requests import (
    DailyExpenseRequest,
    DailyLogCreateRequest,
    DailyOpeningBalanceRequest,
)
from web.models.responses import (
    BalancesResponse,
    DailyExpenseResponse,
    DailyLogResponse,
    DailyReportResponse,
    DaySummaryResponse,
    ReopenRecordResponse,
)

logger = logging.getLogger(__name__)


def _amounts(values: dict[str, object]) -> dict[str, str]:
    return {name: str(amount) for name, amount in values.items()}


def balances_to_response(balances: Balances) -> BalancesResponse:
    return BalancesResponse(
        cash=str(balances.cash),
        banks=_amounts(balances.banks),
        total=str(balances.total),
    )


def expense_to_response(expense: DailyExpense) -> DailyExpenseResponse:
    return DailyExpenseResponse(
        expense_id=expense.expense_id,
        description=expense.description,
        amount=str(expense.amount),
        payment_method=expense.payment_method.value,
        property_id=expense.property_id,
        bank_name=expense.bank_name,
        cash_amount=str(expense.cash_amount) if expense.cash_amount is not None else None,
        bank_amount=str(expense.bank_amount) if expense.bank_amount is not None else None,
        is_pending=expense.is_pending,
    )


def log_to_response(log: DailyLog) -> DailyLogResponse:
    return DailyLogResponse(
        log_id=log.log_id,
        log_date=log.log_date,
        status=log.status.value,
        is_locked=log.is_locked,
        opening_balances=balances_to_response(log.opening_balances),
        expenses=[expense_to_response(e) for e in log.expenses],
        closing_balances=balances_to_response(log.closing_balances),
        total_daily_expenses=str(log.total_daily_expenses),
        bank_usage=_amounts(log.bank_usage),
        reopen_history=[
            ReopenRecordResponse(reopened_at=r.reopened_at, reason=r.reason)
            for r in log.reopen_history
        ],
        version=log.version,
    )


def summary_to_response(summary: DaySummary) -> DaySummaryResponse:
    return DaySummaryResponse(
        total_daily_expenses=str(summary.total_daily_expenses),
        cash_spent=str(summary.cash_spent),
        bank_usage=_amounts(summary.bank_usage),
        closing_balances=balances_to_response(summary.closing_balances),
    )


class DailyLogService:
    """DailyLog 서비스

    Args:
        workspace: 작업 공간
    """

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    @property
    def logs(self) -> DailyLogStore:
        return self.workspace.daily_logs

    def list_logs(self) -> list[DailyLogResponse]:
        return [log_to_response(log) for log in self.logs.list_logs()]

    def get_log(self, log_id: str) -> DailyLogResponse:
        return log_to_response(self.logs.get(log_id))

    def get_by_date(self, log_date: date) -> DailyLogResponse:
        log = self.logs.get_by_date(log_date)
        if log is None:
            raise NotFoundError(f"No daily log for {log_date.isoformat()}")
        return log_to_response(log)

    def create_log(self, request: DailyLogCreateRequest) -> DailyLogResponse:
        opening = None
        if request.opening_balances is not None:
            opening = Balances.create(
                cash=request.opening_balances.cash,
                banks=request.opening_balances.banks,
            )
        return log_to_response(self.logs.create_log(request.log_date, opening))

    def get_or_create(self, log_date: date) -> DailyLogResponse:
        return log_to_response(self.logs.get_or_create(log_date))

    def set_opening_balance(
        self, log_id: str, request: DailyOpeningBalanceRequest
    ) -> DailyLogResponse:
        log = self.logs.set_opening_balance(log_id, request.amount, request.bank_name)
        return log_to_response(log)

    def add_expense(self, log_id: str, request: DailyExpenseRequest) -> DailyExpenseResponse:
        if request.property_id is not None:
            self.workspace.properties.get(request.property_id)
        expense = self.logs.add_expense(log_id, DailyExpenseDraft(**request.model_dump()))
        return expense_to_response(expense)

    def delete_expense(self, log_id: str, expense_id: str) -> None:
        self.logs.delete_expense(log_id, expense_id)

    def mark_expense_paid(self, log_id: str, expense_id: str) -> DailyExpenseResponse:
        return expense_to_response(self.logs.mark_expense_paid(log_id, expense_id))

    def preview(self, log_id: str) -> DaySummaryResponse:
        return summary_to_response(self.logs.preview(log_id))

    def consolidate(self, log_id: str) -> DailyLogResponse:
        return log_to_response(self.logs.consolidate(log_id))

    def reopen(self, log_id: str, reason: str) -> DailyLogResponse:
        return log_to_response(self.logs.reopen(log_id, reason))

    def report(self, log_id: str) -> DailyReportResponse:
        report = build_daily_report(self.logs.get(log_id))
        return DailyReportResponse(
            log_date=report.log_date,
            status=report.status.value,
            opening_balances=balances_to_response(report.opening_balances),
            closing_balances=balances_to_response(report.closing_balances),
            paid_expenses=[expense_to_response(e) for e in report.paid_expenses],
            pending_expenses=[expense_to_response(e) for e in report.pending_expenses],
            total_daily_expenses=str(report.total_daily_expenses),
            pending_total=str(report.pending_total),
            cash_spent=str(report.cash_spent),
            bank_usage=_amounts(report.bank_usage),
            net_change=str(report.net_change),
            text=render_daily_report(report, self.workspace.config.currency),
        )
