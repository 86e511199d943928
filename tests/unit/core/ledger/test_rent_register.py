"""
core/ledger/rent_register.py 테스트

월별 임대료 일정 생성, 수령 처리, 말일 보정
"""

from datetime import date
from decimal import Decimal

import pytest

from core.errors import AlreadyRecordedError, NotFoundError, ValidationError
from core.ledger import (
    LedgerEntry,
    LedgerStore,
    build_rental_expense,
    generate_rent_schedule,
    mark_rent_received,
    property_rent_schedule,
    summarize_rent_schedule,
)
from core.ledger.rent_register import add_months, due_date_for
from core.property import Property, RentalDetails
from core.types import EntryType, PaymentMethod, PropertyType


def _rent_credit(entry_id: str, entry_date: date, amount: str = "50000") -> LedgerEntry:
    return LedgerEntry(
        entry_id=entry_id,
        entry_date=entry_date,
        description="Monthly Rent",
        entry_type=EntryType.CREDIT,
        amount=Decimal(amount),
        category="Rent",
    )


class TestDueDates:
    """납부일 계산 테스트"""

    def test_clamps_to_end_of_february(self) -> None:
        """31일 납부 → 2월 말일"""
        assert due_date_for(2024, 2, 31) == date(2024, 2, 29)
        assert due_date_for(2023, 2, 31) == date(2023, 2, 28)
        assert due_date_for(2024, 4, 31) == date(2024, 4, 30)

    def test_add_months_crosses_year(self) -> None:
        assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)


class TestGenerateRentSchedule:
    """generate_rent_schedule 테스트"""

    def test_marks_received_month(self) -> None:
        """2월 Rent Credit → 2월만 수령, 1월 미수"""
        details = RentalDetails("Tenant", Decimal("50000"), 5)
        records = generate_rent_schedule(
            details,
            date(2024, 1, 5),
            [_rent_credit("e1", date(2024, 2, 5))],
            as_of=date(2024, 3, 1),
        )

        by_month = {(r.year, r.month): r for r in records}
        assert by_month[(2024, 1)].is_received is False
        assert by_month[(2024, 2)].is_received is True
        assert by_month[(2024, 2)].received_date == date(2024, 2, 5)
        assert by_month[(2024, 2)].source_entry_id == "e1"

    def test_window_ends_lookahead_months_after_as_of(self) -> None:
        """매입월 ~ 기준일 + 3개월 (6월 5일 > 6월 1일이므로 5월까지)"""
        details = RentalDetails("Tenant", Decimal("1000"), 5)
        records = generate_rent_schedule(details, date(2024, 1, 5), [], as_of=date(2024, 3, 1))

        assert [(r.year, r.month) for r in records] == [
            (2024, 1), (2024, 2), (2024, 3), (2024, 4), (2024, 5),
        ]
        assert all(r.amount == Decimal("1000") for r in records)

    def test_due_day_after_window_end_is_excluded(self) -> None:
        """마지막 달 납부일이 기준일+3개월보다 뒤면 제외"""
        details = RentalDetails("Tenant", Decimal("1000"), 20)
        records = generate_rent_schedule(details, date(2024, 1, 1), [], as_of=date(2024, 3, 10))

        assert (records[-1].year, records[-1].month) == (2024, 5)

    def test_due_day_31_clamped_each_month(self) -> None:
        """31일 납부는 매달 말일로 보정되고 이후 달에 번지지 않음"""
        details = RentalDetails("Tenant", Decimal("1000"), 31)
        records = generate_rent_schedule(details, date(2024, 1, 31), [], as_of=date(2024, 2, 1))

        assert [r.due_date for r in records] == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
            date(2024, 4, 30),
        ]

    def test_deterministic(self) -> None:
        """같은 입력 → 같은 결과"""
        details = RentalDetails("Tenant", Decimal("1000"), 5)
        entries = [_rent_credit("e1", date(2024, 2, 9))]

        first = generate_rent_schedule(details, date(2024, 1, 5), entries, as_of=date(2024, 4, 1))
        second = generate_rent_schedule(details, date(2024, 1, 5), entries, as_of=date(2024, 4, 1))

        assert first == second

    def test_ignores_non_rent_entries(self) -> None:
        """Rent 카테고리가 아니거나 Debit이면 무시"""
        details = RentalDetails("Tenant", Decimal("1000"), 5)
        entries = [
            LedgerEntry("a", date(2024, 1, 6), "x", EntryType.CREDIT, Decimal("1000"), category="Sale"),
            LedgerEntry("b", date(2024, 1, 6), "x", EntryType.DEBIT, Decimal("1000"), category="Rent"),
        ]

        records = generate_rent_schedule(details, date(2024, 1, 5), entries, as_of=date(2024, 1, 10))

        assert not any(r.is_received for r in records)

    @pytest.mark.parametrize("due_day", [0, 32, -1])
    def test_invalid_due_day_fails_fast(self, due_day: int) -> None:
        details = RentalDetails("Tenant", Decimal("1000"), due_day)

        with pytest.raises(ValidationError):
            generate_rent_schedule(details, date(2024, 1, 1), [], as_of=date(2024, 2, 1))

    def test_non_positive_rent_fails_fast(self) -> None:
        details = RentalDetails("Tenant", Decimal("0"), 5)

        with pytest.raises(ValidationError):
            generate_rent_schedule(details, date(2024, 1, 1), [], as_of=date(2024, 2, 1))

    def test_month_label(self) -> None:
        details = RentalDetails("Tenant", Decimal("1000"), 5)
        records = generate_rent_schedule(details, date(2024, 1, 1), [], as_of=date(2024, 1, 1))

        assert records[0].month_label == "January 2024"


class TestSummarize:
    def test_counts_and_pending_total(self) -> None:
        details = RentalDetails("Tenant", Decimal("1000"), 5)
        records = generate_rent_schedule(
            details,
            date(2024, 1, 1),
            [_rent_credit("e1", date(2024, 1, 5), "1000")],
            as_of=date(2024, 1, 10),
        )

        summary = summarize_rent_schedule(records)

        assert summary.received_count == 1
        assert summary.pending_count == len(records) - 1
        assert summary.total_pending == Decimal("1000") * summary.pending_count


class TestMarkRentReceived:
    """mark_rent_received 테스트"""

    def test_adds_single_credit_dated_on_receipt_day(
        self, ledger: LedgerStore, rent_property: Property
    ) -> None:
        """대상 월 안에 수령하면 수령일로 Credit/Rent 항목 하나 추가"""
        receipt = mark_rent_received(ledger, rent_property, 2024, 3, today=date(2024, 3, 10))

        entries = ledger.list_by_property("prop-1")
        assert len(entries) == 1
        entry = entries[0]
        assert entry.entry_id == receipt.entry_id
        assert entry.entry_type == EntryType.CREDIT
        assert entry.category == "Rent"
        assert entry.entry_date == date(2024, 3, 10)
        assert entry.amount == Decimal("10000")
        assert entry.counterparty == "Ali Raza"
        assert entry.description == "Monthly Rent - March 2024"
        assert entry.notes == "Rent for March 2024"

    def test_past_month_dated_on_its_due_date(
        self, ledger: LedgerStore, rent_property: Property
    ) -> None:
        """지난 달 수령 처리는 그 달 납부일로 기록 (실제 수령일은 메모)"""
        receipt = mark_rent_received(ledger, rent_property, 2024, 2, today=date(2024, 3, 10))

        entry = ledger.get("prop-1", receipt.entry_id)
        assert entry.entry_date == date(2024, 2, 5)
        assert entry.description == "Monthly Rent - February 2024"
        assert entry.notes == "Rent for February 2024 (received 2024-03-10)"
        assert receipt.record.received_date == date(2024, 2, 5)
        assert receipt.record.source_entry_id == receipt.entry_id

    def test_past_month_twice_marks_only_that_month(
        self, ledger: LedgerStore, rent_property: Property
    ) -> None:
        """3월에 2월분을 두 번 처리: 항목 하나, 2월만 수령"""
        today = date(2024, 3, 10)

        first = mark_rent_received(ledger, rent_property, 2024, 2, today=today)
        second = mark_rent_received(ledger, rent_property, 2024, 2, today=today)

        assert first.record.is_received is True
        assert second.already_recorded is True
        assert second.notice.entry_id == first.entry_id
        assert len(ledger.list_by_property("prop-1")) == 1

        received = {
            (r.year, r.month): r.is_received
            for r in property_rent_schedule(ledger, rent_property, as_of=today)
        }
        assert received[(2024, 2)] is True
        assert received[(2024, 3)] is False
        assert received[(2024, 1)] is False

    def test_changes_only_that_month(
        self, ledger: LedgerStore, rent_property: Property
    ) -> None:
        """다른 달 기록은 변하지 않음"""
        today = date(2024, 3, 10)
        before = property_rent_schedule(ledger, rent_property, as_of=today)

        mark_rent_received(ledger, rent_property, 2024, 3, today=today)
        after = property_rent_schedule(ledger, rent_property, as_of=today)

        changed = [
            (a.year, a.month) for a, b in zip(after, before) if a != b
        ]
        assert changed == [(2024, 3)]
        march = next(r for r in after if (r.year, r.month) == (2024, 3))
        assert march.is_received is True
        assert march.received_date == today

    def test_already_received_is_noop(
        self, ledger: LedgerStore, rent_property: Property
    ) -> None:
        """이미 수령된 달은 항목 추가 없이 notice 반환"""
        today = date(2024, 3, 10)
        first = mark_rent_received(ledger, rent_property, 2024, 3, today=today)
        second = mark_rent_received(ledger, rent_property, 2024, 3, today=today)

        assert first.already_recorded is False
        assert second.already_recorded is True
        assert second.entry_id is None
        assert isinstance(second.notice, AlreadyRecordedError)
        assert second.notice.entry_id == first.entry_id
        assert len(ledger.list_by_property("prop-1")) == 1

    def test_month_outside_schedule(
        self, ledger: LedgerStore, rent_property: Property
    ) -> None:
        with pytest.raises(NotFoundError):
            mark_rent_received(ledger, rent_property, 2023, 12, today=date(2024, 3, 10))

    def test_property_without_rental_details(
        self, ledger: LedgerStore, sale_property: Property
    ) -> None:
        ledger.open_ledger("prop-2")

        with pytest.raises(ValidationError):
            mark_rent_received(ledger, sale_property, 2024, 1, today=date(2024, 3, 10))


class TestRentalExpense:
    def test_debit_maintenance(self) -> None:
        draft = build_rental_expense(
            date(2024, 3, 2), "Paint job", "3500", PaymentMethod.CASH, paid_to="Painter"
        )

        assert draft.entry_type == EntryType.DEBIT
        assert draft.category == "Maintenance"
        assert draft.amount == Decimal("3500")
        assert draft.counterparty == "Painter"

    def test_requires_description(self) -> None:
        with pytest.raises(ValidationError):
            build_rental_expense(date(2024, 3, 2), "", "100")
