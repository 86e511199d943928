"""
월세 등록부 (Monthly Rent Register)

임대 조건(월세, 납부일)과 매입일로 월별 임대료 일정을 만들고,
기존 Credit/"Rent" 항목과 대조해 수령 여부를 표시한다.
일정은 저장하지 않는다. 조회할 때마다 재생성하는 대조 뷰.
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from core.constants import Defaults
from core.errors import AlreadyRecordedError, NotFoundError, ValidationError
from core.ledger.entry import LedgerEntry, LedgerEntryDraft
from core.ledger.store import LedgerStore
from core.property import Property, RentalDetails
from core.types import EntryCategory, EntryType, PaymentMethod
from core.utils.money import ZERO, to_positive_decimal
from core.utils.timezone import today_local

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RentRecord:
    """월별 임대료 기록 (파생값)"""

    year: int
    month: int  # 1~12
    due_date: date
    amount: Decimal
    is_received: bool
    received_date: date | None = None
    source_entry_id: str | None = None

    @property
    def month_label(self) -> str:
        """표시용 월 이름 (예: "January 2024")"""
        return month_label(self.year, self.month)


@dataclass(frozen=True)
class RentRegisterSummary:
    """등록부 요약"""

    total_pending: Decimal
    pending_count: int
    received_count: int


@dataclass(frozen=True)
class RentReceipt:
    """수령 처리 결과

    이미 수령된 달이면 entry_id 없이 notice에 AlreadyRecordedError를 담는다
    (예외로 던지지 않는 no-op 결과).
    """

    record: RentRecord
    entry_id: str | None
    notice: AlreadyRecordedError | None = None

    @property
    def already_recorded(self) -> bool:
        return self.notice is not None


def month_label(year: int, month: int) -> str:
    return f"{calendar.month_name[month]} {year}"


def due_date_for(year: int, month: int, rent_due_date: int) -> date:
    """해당 월의 납부일

    납부일이 그 달의 일수를 넘으면 말일로 맞춘다 (예: 31일 → 2월 28/29일).
    """
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(rent_due_date, last_day))


def add_months(day: date, months: int) -> date:
    """월 단위 이동 (말일 초과 시 말일로 맞춤)"""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    last_day = calendar.monthrange(year, month + 1)[1]
    return date(year, month + 1, min(day.day, last_day))


def _is_rent_credit(entry: LedgerEntry) -> bool:
    return entry.entry_type == EntryType.CREDIT and entry.category == EntryCategory.RENT.value


def generate_rent_schedule(
    rental_details: RentalDetails,
    purchase_date: date,
    existing_entries: Iterable[LedgerEntry],
    as_of: date | None = None,
    lookahead_months: int = Defaults.RENT_LOOKAHEAD_MONTHS,
) -> list[RentRecord]:
    """월별 임대료 일정 생성

    매입월부터 (as_of + lookahead_months)까지 한 달에 하나씩 기록을 만든다.
    같은 (연, 월)에 Credit/"Rent" 항목이 있으면 수령으로 표시.

    Args:
        rental_details: 임대 조건
        purchase_date: 매입일 (일정 시작월)
        existing_entries: 장부 항목 (Rent Credit 외 항목은 무시)
        as_of: 기준일 (None이면 오늘)
        lookahead_months: 기준일 이후 생성할 개월 수

    Returns:
        월 순서의 RentRecord 목록

    Raises:
        ValidationError: 납부일이 1~31 밖이거나 월세가 0 이하인 경우
    """
    rental_details.validate()
    if as_of is None:
        as_of = today_local()

    rent_amount = to_positive_decimal(rental_details.monthly_rent_amount, "monthly_rent_amount")
    window_end = add_months(as_of, lookahead_months)

    # (연, 월) → 첫 번째 수령 항목
    received: dict[tuple[int, int], LedgerEntry] = {}
    for entry in existing_entries:
        if _is_rent_credit(entry):
            received.setdefault((entry.entry_date.year, entry.entry_date.month), entry)

    records: list[RentRecord] = []
    year, month = purchase_date.year, purchase_date.month

    while True:
        due = due_date_for(year, month, rental_details.rent_due_date)
        if due > window_end:
            break

        rent_entry = received.get((year, month))
        records.append(
            RentRecord(
                year=year,
                month=month,
                due_date=due,
                amount=rent_amount,
                is_received=rent_entry is not None,
                received_date=rent_entry.entry_date if rent_entry else None,
                source_entry_id=rent_entry.entry_id if rent_entry else None,
            )
        )

        month += 1
        if month > 12:
            year, month = year + 1, 1

    return records


def summarize_rent_schedule(records: Iterable[RentRecord]) -> RentRegisterSummary:
    """미수 합계/건수, 수령 건수"""
    total_pending = ZERO
    pending_count = 0
    received_count = 0
    for record in records:
        if record.is_received:
            received_count += 1
        else:
            pending_count += 1
            total_pending += record.amount
    return RentRegisterSummary(
        total_pending=total_pending,
        pending_count=pending_count,
        received_count=received_count,
    )


def _require_rental_details(prop: Property) -> RentalDetails:
    if prop.rental_details is None:
        raise ValidationError(f"Property {prop.property_id} has no rental details")
    return prop.rental_details


def property_rent_schedule(
    store: LedgerStore,
    prop: Property,
    as_of: date | None = None,
    lookahead_months: int = Defaults.RENT_LOOKAHEAD_MONTHS,
) -> list[RentRecord]:
    """저장소의 장부로 부동산의 임대료 일정 생성"""
    return generate_rent_schedule(
        _require_rental_details(prop),
        prop.purchase_date,
        store.list_by_property(prop.property_id),
        as_of=as_of,
        lookahead_months=lookahead_months,
    )


def receipt_entry_date(record: RentRecord, received_on: date) -> date:
    """수령 항목 날짜

    수령 항목은 날짜의 (연, 월)로 대조되므로 대상 월 안에 있어야 한다.
    대상 월 안에 수령했으면 수령일, 아니면 그 달의 납부일.
    """
    if (received_on.year, received_on.month) == (record.year, record.month):
        return received_on
    return record.due_date


def build_rent_receipt_entry(
    record: RentRecord,
    tenant_name: str,
    received_on: date,
) -> LedgerEntryDraft:
    """임대료 수령 항목 (대상 월 안의 날짜로 기록)"""
    label = record.month_label
    entry_date = receipt_entry_date(record, received_on)
    notes = f"Rent for {label}"
    if entry_date != received_on:
        notes += f" (received {received_on.isoformat()})"
    return LedgerEntryDraft(
        entry_date=entry_date,
        description=f"Monthly Rent - {label}",
        entry_type=EntryType.CREDIT,
        amount=record.amount,
        category=EntryCategory.RENT.value,
        counterparty=tenant_name,
        notes=notes,
    )


def _find_record(schedule: list[RentRecord], year: int, month: int) -> RentRecord | None:
    return next((r for r in schedule if (r.year, r.month) == (year, month)), None)


def mark_rent_received(
    store: LedgerStore,
    prop: Property,
    year: int,
    month: int,
    today: date | None = None,
    lookahead_months: int = Defaults.RENT_LOOKAHEAD_MONTHS,
) -> RentReceipt:
    """해당 월 임대료 수령 처리

    Credit/"Rent" 항목을 정확히 하나 추가하고 그 달만 수령으로 바뀐다.
    이미 수령된 달이면 아무것도 추가하지 않고 notice가 담긴 결과를 반환.

    Raises:
        NotFoundError: 일정에 없는 월
        ValidationError: 임대 조건이 없거나 잘못된 경우
    """
    if today is None:
        today = today_local()

    rental_details = _require_rental_details(prop)
    schedule = property_rent_schedule(store, prop, as_of=today, lookahead_months=lookahead_months)

    record = _find_record(schedule, year, month)
    if record is None:
        raise NotFoundError(f"No rent record for {year}-{month:02d} (property {prop.property_id})")

    if record.is_received:
        notice = AlreadyRecordedError(year, month, record.source_entry_id)
        logger.warning(f"{notice} (property {prop.property_id})")
        return RentReceipt(record=record, entry_id=None, notice=notice)

    draft = build_rent_receipt_entry(record, rental_details.tenant_name, today)
    entry_id = store.add(prop.property_id, draft)

    schedule = property_rent_schedule(store, prop, as_of=today, lookahead_months=lookahead_months)
    received_record = _find_record(schedule, year, month)
    logger.info(f"Rent marked received: {record.month_label} (property {prop.property_id})")
    return RentReceipt(record=received_record, entry_id=entry_id)


def build_rental_expense(
    entry_date: date,
    description: str,
    amount: Decimal | int | str,
    payment_method: PaymentMethod | None = None,
    paid_to: str | None = None,
    notes: str | None = None,
) -> LedgerEntryDraft:
    """임대 부동산 관리비 지출 항목 (Debit/"Maintenance")

    Raises:
        ValidationError: 설명 누락 또는 금액 0 이하
    """
    if not description or not description.strip():
        raise ValidationError("description is required")
    return LedgerEntryDraft(
        entry_date=entry_date,
        description=description.strip(),
        entry_type=EntryType.DEBIT,
        amount=to_positive_decimal(amount),
        category=EntryCategory.MAINTENANCE.value,
        payment_method=payment_method,
        counterparty=paid_to or None,
        notes=notes or None,
    )
