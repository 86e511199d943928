"""
Daily 패키지

일일 현금/은행 지출 로그와 End-of-Day 정산.
"""

from core.daily.consolidation import DaySummary, consolidate_day, summarize_day
from core.daily.models import (
    Balances,
    DailyExpense,
    DailyExpenseDraft,
    DailyLog,
    ReopenRecord,
    normalize_expense,
)
from core.daily.report import DailyReport, build_daily_report, render_daily_report
from core.daily.store import DailyLogStore

__all__ = [
    "Balances",
    "DailyExpense",
    "DailyExpenseDraft",
    "DailyLog",
    "ReopenRecord",
    "normalize_expense",
    "DaySummary",
    "consolidate_day",
    "summarize_day",
    "DailyReport",
    "build_daily_report",
    "render_daily_report",
    "DailyLogStore",
]
