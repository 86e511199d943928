"""
장부 항목 모델

LedgerEntryDraft: 입력 폼/하위 장부가 만드는 ID 없는 항목
LedgerEntry: 저장소가 ID를 부여한 항목 (잠금 플래그, 버전 포함)
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import date
from decimal import Decimal
from typing import Any

from core.errors import ValidationError
from core.types import EntryType, PaymentMethod
from core.utils.money import to_positive_decimal
from core.utils.timezone import parse_iso_date


@dataclass(frozen=True)
class Attachment:
    """첨부 파일 참조 (파일 저장 자체는 외부 협력자 몫)"""

    url: str
    file_name: str | None = None


@dataclass(frozen=True)
class LedgerEntryDraft:
    """저장 전 장부 항목"""

    entry_date: date
    description: str
    entry_type: EntryType
    amount: Decimal

    category: str | None = None
    payment_method: PaymentMethod | None = None
    counterparty: str | None = None  # 지급처 / 수령처

    linked_document_id: str | None = None
    linked_image_id: str | None = None
    attachment: Attachment | None = None
    notes: str | None = None

    is_opening_balance: bool = False


@dataclass(frozen=True)
class LedgerEntry:
    """장부 항목

    부동산 하나에 속하는 Debit/Credit 기록.
    is_locked=True 이면 unlock 전까지 수정/삭제 불가.
    version은 변경마다 1씩 증가 (낙관적 락용 etag).
    """

    entry_id: str
    entry_date: date
    description: str
    entry_type: EntryType
    amount: Decimal

    category: str | None = None
    payment_method: PaymentMethod | None = None
    counterparty: str | None = None

    linked_document_id: str | None = None
    linked_image_id: str | None = None
    attachment: Attachment | None = None
    notes: str | None = None

    is_opening_balance: bool = False
    is_locked: bool = False
    version: int = 1

    @classmethod
    def from_draft(cls, entry_id: str, draft: LedgerEntryDraft) -> LedgerEntry:
        """Draft에 ID를 부여해 항목 생성"""
        values = {f.name: getattr(draft, f.name) for f in fields(draft)}
        return cls(entry_id=entry_id, **values)

    @property
    def signed_amount(self) -> Decimal:
        """잔액 기여분 (Credit +, Debit -)"""
        if self.entry_type == EntryType.CREDIT:
            return self.amount
        return -self.amount


# 수정 가능한 필드 (ID, 잠금, 버전은 별도 연산으로만 변경)
EDITABLE_FIELDS: frozenset[str] = frozenset(
    f.name for f in fields(LedgerEntryDraft)
)


def normalize_draft(draft: LedgerEntryDraft) -> LedgerEntryDraft:
    """Draft 검증 및 타입 정규화

    저장소 경계에서 호출. 폼 검증과 별개로 금액 > 0 불변식을 강제한다.

    Raises:
        ValidationError: 금액이 0 이하, 설명 누락, 잘못된 Enum 값 등
    """
    if not isinstance(draft.description, str) or not draft.description.strip():
        raise ValidationError("description is required")

    try:
        entry_type = EntryType(draft.entry_type)
    except ValueError as e:
        raise ValidationError(f"type must be Debit or Credit, got {draft.entry_type!r}") from e

    payment_method = draft.payment_method
    if payment_method is not None:
        try:
            payment_method = PaymentMethod(payment_method)
        except ValueError as e:
            raise ValidationError(
                f"payment_method must be Cash, Bank or Cheque, got {payment_method!r}"
            ) from e

    try:
        entry_date = parse_iso_date(draft.entry_date)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"date must be YYYY-MM-DD, got {draft.entry_date!r}") from e

    return replace(
        draft,
        entry_date=entry_date,
        description=draft.description.strip(),
        entry_type=entry_type,
        amount=to_positive_decimal(draft.amount),
        payment_method=payment_method,
    )


def apply_patch(entry: LedgerEntry, patch: dict[str, Any]) -> LedgerEntry:
    """항목에 부분 수정 적용 (검증 포함, 버전 +1)

    Raises:
        ValidationError: 수정 불가 필드가 포함되었거나 결과가 유효하지 않은 경우
    """
    unknown = set(patch) - EDITABLE_FIELDS
    if unknown:
        raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

    draft_values = {name: getattr(entry, name) for name in EDITABLE_FIELDS}
    draft_values.update(patch)
    draft = normalize_draft(LedgerEntryDraft(**draft_values))

    return replace(
        LedgerEntry.from_draft(entry.entry_id, draft),
        is_locked=entry.is_locked,
        version=entry.version + 1,
    )
