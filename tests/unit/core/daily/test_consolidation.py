"""
core/daily/consolidation.py 테스트

End-of-Day 정산 규칙, 멱등성, 보류 지출 제외, 왕복 항등식
"""

from datetime import date
from decimal import Decimal

import pytest

from core.daily import Balances, DailyExpense, DailyLog, consolidate_day, summarize_day
from core.errors import MissingBankBalanceError
from core.types import ExpensePaymentMethod


def _log(cash: str = "0", banks: dict[str, str] | None = None, expenses=()) -> DailyLog:
    opening = Balances.create(cash, banks or {})
    return DailyLog(
        log_id="log-1",
        log_date=date(2024, 3, 1),
        opening_balances=opening,
        expenses=tuple(expenses),
        closing_balances=opening,
    )


def _cash(amount: str, pending: bool = False, expense_id: str = "c") -> DailyExpense:
    return DailyExpense(expense_id, "cash", Decimal(amount), ExpensePaymentMethod.CASH, is_pending=pending)


def _bank(amount: str, bank: str, pending: bool = False, expense_id: str = "b") -> DailyExpense:
    return DailyExpense(
        expense_id, "bank", Decimal(amount), ExpensePaymentMethod.BANK, bank_name=bank, is_pending=pending
    )


def _split(amount: str, cash: str, bank_part: str, bank: str, pending: bool = False) -> DailyExpense:
    return DailyExpense(
        "s",
        "split",
        Decimal(amount),
        ExpensePaymentMethod.SPLIT,
        bank_name=bank,
        cash_amount=Decimal(cash),
        bank_amount=Decimal(bank_part),
        is_pending=pending,
    )


class TestConsolidateDay:
    """consolidate_day 테스트"""

    def test_cash_expense(self) -> None:
        """기초 현금 10000, 현금 지출 1500 → 마감 8500"""
        closed = consolidate_day(_log("10000", expenses=[_cash("1500")]))

        assert closed.closing_balances.cash == Decimal("8500")
        assert closed.total_daily_expenses == Decimal("1500")
        assert closed.is_locked is True

    def test_split_expense(self) -> None:
        """Split 1000 (현금 400 + Bank A 600)"""
        closed = consolidate_day(
            _log("2000", {"Bank A": "5000"}, [_split("1000", "400", "600", "Bank A")])
        )

        assert closed.closing_balances.cash == Decimal("1600")
        assert closed.closing_balances.banks["Bank A"] == Decimal("4400")
        assert closed.bank_usage == {"Bank A": Decimal("600")}

    def test_untouched_banks_keep_opening(self) -> None:
        closed = consolidate_day(
            _log("0", {"Bank A": "5000", "Bank B": "700"}, [_bank("200", "Bank A")])
        )

        assert closed.closing_balances.banks == {
            "Bank A": Decimal("4800"),
            "Bank B": Decimal("700"),
        }

    def test_pending_excluded_from_usage_and_cash(self) -> None:
        """보류 지출은 총액에만 포함"""
        closed = consolidate_day(
            _log(
                "1000",
                {"Bank A": "1000"},
                [
                    _cash("100", pending=True, expense_id="c1"),
                    _bank("300", "Bank A", pending=True, expense_id="b1"),
                    _cash("50", expense_id="c2"),
                ],
            )
        )

        assert closed.total_daily_expenses == Decimal("450")
        assert closed.bank_usage == {}
        assert closed.closing_balances.cash == Decimal("950")
        assert closed.closing_balances.banks["Bank A"] == Decimal("1000")

    def test_negative_closing_allowed(self) -> None:
        """초과 지출은 음수 잔액"""
        closed = consolidate_day(_log("100", expenses=[_cash("250")]))

        assert closed.closing_balances.cash == Decimal("-150")

    def test_idempotent_and_pure(self) -> None:
        """같은 입력 → 같은 결과, 입력 불변"""
        log = _log("5000", {"Bank A": "5000"}, [_cash("10"), _split("100", "40", "60", "Bank A")])
        snapshot = (log.expenses, log.opening_balances, log.is_locked)

        first = consolidate_day(log)
        second = consolidate_day(log)

        assert first == second
        assert (log.expenses, log.opening_balances, log.is_locked) == snapshot
        assert log.is_locked is False

    def test_reconsolidating_result_is_stable(self) -> None:
        closed = consolidate_day(_log("100", expenses=[_cash("10")]))

        assert consolidate_day(closed) == closed

    def test_round_trip_identities(self) -> None:
        """마감 + 사용액 == 기초"""
        log = _log(
            "9000",
            {"Bank A": "5000", "Bank B": "3000"},
            [
                _cash("120", expense_id="c1"),
                _bank("800", "Bank B", expense_id="b1"),
                _split("1000", "250", "750", "Bank A"),
                _cash("999", pending=True, expense_id="c2"),
            ],
        )
        summary = summarize_day(log)

        assert summary.closing_balances.cash + summary.cash_spent == log.opening_balances.cash
        for bank, used in summary.bank_usage.items():
            assert summary.closing_balances.banks[bank] + used == log.opening_balances.banks[bank]

    def test_missing_bank_balance_is_named_error(self) -> None:
        """기초 잔액에 없는 은행 사용"""
        with pytest.raises(MissingBankBalanceError) as exc_info:
            consolidate_day(_log("0", {}, [_bank("100", "Bank Z")]))

        assert exc_info.value.bank_name == "Bank Z"

    def test_pending_on_missing_bank_is_fine(self) -> None:
        closed = consolidate_day(_log("0", {}, [_bank("100", "Bank Z", pending=True)]))

        assert closed.bank_usage == {}
