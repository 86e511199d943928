"""
기초 잔액 (Opening Balance)

장부 시작 시점 잔액을 표시하는 정보성 항목. 별도 대조 대상이 아니다.
"""

import logging
from datetime import date
from decimal import Decimal

from core.constants import Defaults
from core.errors import ValidationError
from core.ledger.entry import LedgerEntryDraft
from core.ledger.store import LedgerStore
from core.types import EntryType
from core.utils.money import to_positive_decimal

logger = logging.getLogger(__name__)


def build_opening_balance_entry(
    amount: Decimal | int | str,
    entry_date: date,
    entry_type: EntryType = EntryType.CREDIT,
    notes: str | None = Defaults.OPENING_BALANCE_NOTES,
) -> LedgerEntryDraft:
    """기초 잔액 항목 생성 (기본 Credit, 날짜는 보통 매입일)"""
    return LedgerEntryDraft(
        entry_date=entry_date,
        description=Defaults.OPENING_BALANCE_DESCRIPTION,
        entry_type=EntryType(entry_type),
        amount=to_positive_decimal(amount),
        notes=notes,
        is_opening_balance=True,
    )


def add_opening_balance(
    store: LedgerStore,
    property_id: str,
    draft: LedgerEntryDraft,
) -> str:
    """빈 장부에 기초 잔액 추가

    기초 잔액은 장부의 첫 항목이어야 한다.

    Raises:
        ValidationError: 장부에 이미 항목이 있거나 기초 잔액 항목이 아닌 경우
    """
    if not draft.is_opening_balance:
        raise ValidationError("Draft is not an opening balance entry")
    if store.list_by_property(property_id):
        raise ValidationError(
            f"Opening balance must be the first entry (property {property_id} already has entries)"
        )

    entry_id = store.add(property_id, draft)
    logger.info(f"Opening balance recorded: {draft.entry_type.value} {draft.amount} (property {property_id})")
    return entry_id
