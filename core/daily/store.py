"""
DailyLog 저장소

날짜당 하나의 일일 로그 (메모리, 단일 writer).
정산(consolidate) 이후의 로그는 reopen 전까지 변경할 수 없다.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable
from uuid import uuid4

from core.daily.consolidation import DaySummary, consolidate_day, summarize_day
from core.daily.models import (
    Balances,
    DailyExpense,
    DailyExpenseDraft,
    DailyLog,
    ReopenRecord,
    normalize_expense,
)
from core.errors import (
    DailyLogLockedError,
    DuplicateError,
    NotFoundError,
    ValidationError,
)
from core.utils.money import ZERO, to_decimal
from core.utils.timezone import now_utc, parse_iso_date

if TYPE_CHECKING:
    from core.banks import BankRegistry

logger = logging.getLogger(__name__)


class DailyLogStore:
    """DailyLog 저장소

    bank_registry가 주어지면 지출/기초 잔액의 은행 이름을 등록된 은행으로 제한한다.

    사용 예시:
    ```python
    logs = DailyLogStore()
    log = logs.get_or_create(date(2024, 3, 1))
    logs.set_opening_balance(log.log_id, Decimal("1000"))
    logs.add_expense(log.log_id, DailyExpenseDraft("Plumber", Decimal("200"), "Cash"))
    closed = logs.consolidate(log.log_id)
    ```
    """

    def __init__(self, bank_registry: BankRegistry | None = None) -> None:
        self._bank_registry = bank_registry
        self._logs: dict[str, DailyLog] = {}
        self._by_date: dict[date, str] = {}

    # -------------------------------------------------------------------------
    # 내부
    # -------------------------------------------------------------------------

    def _log(self, log_id: str) -> DailyLog:
        log = self._logs.get(log_id)
        if log is None:
            raise NotFoundError(f"Daily log not found: {log_id}")
        return log

    def _open_log(self, log_id: str) -> DailyLog:
        """수정 가능한(잠기지 않은) 로그"""
        log = self._log(log_id)
        if log.is_locked:
            logger.warning(f"Rejected change to locked daily log {log.log_date.isoformat()}")
            raise DailyLogLockedError(log.log_id, log.log_date.isoformat())
        return log

    def _save(self, log: DailyLog) -> DailyLog:
        self._logs[log.log_id] = log
        self._by_date[log.log_date] = log.log_id
        return log

    def _resolve_bank(self, bank_name: str) -> str:
        """레지스트리에 등록된 은행 이름으로 정규화 (대소문자 무시)"""
        if self._bank_registry is None:
            return bank_name
        bank = self._bank_registry.find_by_name(bank_name)
        if bank is None:
            raise NotFoundError(f"Bank not found: {bank_name}")
        return bank.name

    @staticmethod
    def _expense_index(log: DailyLog, expense_id: str) -> int:
        for i, expense in enumerate(log.expenses):
            if expense.expense_id == expense_id:
                return i
        raise NotFoundError(f"Expense not found: {expense_id} (log {log.log_id})")

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def get(self, log_id: str) -> DailyLog:
        """로그 조회

        Raises:
            NotFoundError: 로그가 없는 경우
        """
        return self._log(log_id)

    def get_by_date(self, log_date: date | str) -> DailyLog | None:
        log_id = self._by_date.get(parse_iso_date(log_date))
        return self._logs[log_id] if log_id else None

    def list_logs(self) -> list[DailyLog]:
        """날짜 오름차순"""
        return sorted(self._logs.values(), key=lambda log: log.log_date)

    def bank_in_use(self, bank_name: str) -> bool:
        """어느 로그의 지출이라도 해당 은행을 참조하면 True (대소문자 무시)"""
        key = bank_name.strip().lower()
        return any(
            expense.bank_name is not None and expense.bank_name.lower() == key
            for log in self._logs.values()
            for expense in log.expenses
        )

    # -------------------------------------------------------------------------
    # 생성
    # -------------------------------------------------------------------------

    def create_log(self, log_date: date | str, opening_balances: Balances | None = None) -> DailyLog:
        """새 일일 로그

        Raises:
            DuplicateError: 같은 날짜의 로그가 이미 있는 경우
            ValidationError: 날짜 형식 오류
        """
        try:
            day = parse_iso_date(log_date)
        except ValueError as e:
            raise ValidationError(str(e)) from e

        if day in self._by_date:
            raise DuplicateError(f"Daily log already exists for {day.isoformat()}")

        opening = opening_balances or Balances()
        opening = Balances(
            cash=opening.cash,
            banks={self._resolve_bank(name): amount for name, amount in opening.banks.items()},
        )

        log = self._save(DailyLog.new(str(uuid4()), day, opening))
        logger.info(f"Daily log created: {day.isoformat()} ({log.log_id})")
        return log

    def get_or_create(self, log_date: date | str) -> DailyLog:
        """해당 날짜 로그 반환, 없으면 0 잔액으로 생성"""
        existing = self.get_by_date(log_date)
        if existing is not None:
            return existing
        return self.create_log(log_date)

    # -------------------------------------------------------------------------
    # 변경 (잠기지 않은 로그만)
    # -------------------------------------------------------------------------

    def set_opening_balance(
        self,
        log_id: str,
        amount: Decimal | int | str,
        bank_name: str | None = None,
    ) -> DailyLog:
        """기초 잔액 설정 (bank_name이 없으면 현금)

        Raises:
            DailyLogLockedError: 정산 완료된 로그
            NotFoundError: 로그 또는 은행이 없는 경우
            ValidationError: 금액 오류
        """
        log = self._open_log(log_id)
        value = to_decimal(amount)

        if bank_name:
            bank_name = self._resolve_bank(bank_name)
            opening = log.opening_balances.with_bank(bank_name, value)
        else:
            opening = log.opening_balances.with_cash(value)

        # 정산 전 마감 잔액은 기초 잔액을 따라간다
        updated = replace(
            log,
            opening_balances=opening,
            closing_balances=Balances(cash=opening.cash, banks=dict(opening.banks)),
            version=log.version + 1,
        )
        logger.info(
            f"Opening balance set: {log.log_date.isoformat()} "
            f"{bank_name or 'cash'}={value}"
        )
        return self._save(updated)

    def add_expense(self, log_id: str, draft: DailyExpenseDraft) -> DailyExpense:
        """지출 추가

        Raises:
            DailyLogLockedError: 정산 완료된 로그
            NotFoundError: 로그 또는 은행이 없는 경우
            ValidationError: 설명/금액/결제 수단 오류
        """
        log = self._open_log(log_id)
        normalized = normalize_expense(draft)
        if normalized.bank_name:
            normalized = replace(normalized, bank_name=self._resolve_bank(normalized.bank_name))

        expense = DailyExpense.from_draft(str(uuid4()), normalized)
        self._save(replace(log, expenses=log.expenses + (expense,), version=log.version + 1))

        logger.info(
            f"Daily expense added: {log.log_date.isoformat()} "
            f"{expense.payment_method.value} {expense.amount}"
            f"{' (pending)' if expense.is_pending else ''}"
        )
        return expense

    def delete_expense(self, log_id: str, expense_id: str) -> None:
        """지출 삭제

        Raises:
            DailyLogLockedError: 정산 완료된 로그
            NotFoundError: 로그 또는 지출이 없는 경우
        """
        log = self._open_log(log_id)
        index = self._expense_index(log, expense_id)
        expenses = log.expenses[:index] + log.expenses[index + 1:]
        self._save(replace(log, expenses=expenses, version=log.version + 1))
        logger.info(f"Daily expense deleted: {expense_id} ({log.log_date.isoformat()})")

    def mark_expense_paid(self, log_id: str, expense_id: str) -> DailyExpense:
        """보류 지출을 지급 완료로 전환 (이미 지급이면 그대로 반환)

        Raises:
            DailyLogLockedError: 정산 완료된 로그
            NotFoundError: 로그 또는 지출이 없는 경우
        """
        log = self._open_log(log_id)
        index = self._expense_index(log, expense_id)
        expense = log.expenses[index]
        if not expense.is_pending:
            return expense

        paid = replace(expense, is_pending=False)
        expenses = log.expenses[:index] + (paid,) + log.expenses[index + 1:]
        self._save(replace(log, expenses=expenses, version=log.version + 1))
        logger.info(f"Daily expense marked paid: {expense_id}")
        return paid

    # -------------------------------------------------------------------------
    # 정산
    # -------------------------------------------------------------------------

    def preview(self, log_id: str) -> DaySummary:
        """정산 결과 미리보기 (로그 변경 없음)"""
        return summarize_day(self._log(log_id))

    def consolidate(self, log_id: str) -> DailyLog:
        """일일 정산 후 잠금

        Raises:
            DailyLogLockedError: 이미 정산된 로그
            MissingBankBalanceError: 사용된 은행의 기초 잔액 없음
        """
        log = self._open_log(log_id)
        closed = consolidate_day(log)
        closed = replace(closed, version=log.version + 1)
        self._save(closed)

        logger.info(
            f"Daily log consolidated: {log.log_date.isoformat()} "
            f"total={closed.total_daily_expenses}, closing_cash={closed.closing_balances.cash}"
        )
        return closed

    def reopen(self, log_id: str, reason: str) -> DailyLog:
        """정산 해제 (사유 필수, 이력 보존)

        계산된 마감 수치는 비우고 기초 잔액 기준으로 되돌린다.

        Raises:
            ValidationError: 사유 없음 또는 잠기지 않은 로그
            NotFoundError: 로그가 없는 경우
        """
        log = self._log(log_id)
        if not reason or not reason.strip():
            raise ValidationError("reason is required to reopen a consolidated day")
        if not log.is_locked:
            raise ValidationError(f"Daily log for {log.log_date.isoformat()} is not consolidated")

        reopened = replace(
            log,
            is_locked=False,
            closing_balances=Balances(
                cash=log.opening_balances.cash,
                banks=dict(log.opening_balances.banks),
            ),
            total_daily_expenses=ZERO,
            bank_usage={},
            reopen_history=log.reopen_history + (ReopenRecord(now_utc(), reason.strip()),),
            version=log.version + 1,
        )
        logger.warning(
            f"Daily log reopened: {log.log_date.isoformat()} (reason: {reason.strip()})"
        )
        return self._save(reopened)

    # -------------------------------------------------------------------------
    # 영속화 복원
    # -------------------------------------------------------------------------

    def restore(self, logs: Iterable[DailyLog]) -> None:
        """저장된 로그로 교체 (검증/로그 없이)"""
        self._logs.clear()
        self._by_date.clear()
        for log in logs:
            self._save(log)
