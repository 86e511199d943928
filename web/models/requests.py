"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증.
금액은 Decimal로 받는다 (JSON 숫자 또는 문자열). 금액 > 0 같은 업무 규칙은
도메인 계층에서 검증한다.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from core.types import (
    EntryType,
    ExpensePaymentMethod,
    PaymentMethod,
    PropertyType,
    SaleStage,
)


# =========================================================================
# Property
# =========================================================================


class RentalDetailsRequest(BaseModel):
    """임대 조건"""

    tenant_name: str = Field(..., description="임차인 이름")
    monthly_rent_amount: Decimal = Field(..., description="월세")
    rent_due_date: int = Field(..., description="매월 납부일 (1~31)")
    tenant_phone: str | None = Field(default=None, description="임차인 연락처")
    security_advance_amount: Decimal | None = Field(default=None, description="보증금")


class PropertyCreateRequest(BaseModel):
    """부동산 등록 요청"""

    property_id: str = Field(..., min_length=1, description="부동산 ID")
    name: str = Field(..., description="이름")
    property_type: PropertyType = Field(..., description="Sale / Rent")
    purchase_date: date = Field(..., description="매입일 (YYYY-MM-DD)")
    rental_details: RentalDetailsRequest | None = Field(default=None, description="임대 조건")


# =========================================================================
# Ledger
# =========================================================================


class AttachmentModel(BaseModel):
    """첨부 파일 참조"""

    url: str = Field(..., description="파일 URL")
    file_name: str | None = Field(default=None, description="파일 이름")


class LedgerEntryCreateRequest(BaseModel):
    """장부 항목 추가 요청"""

    entry_date: date = Field(..., description="날짜 (YYYY-MM-DD)")
    description: str = Field(..., description="설명")
    entry_type: EntryType = Field(..., description="Debit / Credit")
    amount: Decimal = Field(..., description="금액 (> 0)")
    category: str | None = Field(default=None, description="카테고리 (Rent, Tax 등)")
    payment_method: PaymentMethod | None = Field(default=None, description="Cash / Bank / Cheque")
    counterparty: str | None = Field(default=None, description="지급처 / 수령처")
    linked_document_id: str | None = Field(default=None)
    linked_image_id: str | None = Field(default=None)
    attachment: AttachmentModel | None = Field(default=None)
    notes: str | None = Field(default=None)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "entry_date": "2024-03-05",
                    "description": "Plumbing repair",
                    "entry_type": "Debit",
                    "amount": "2500",
                    "category": "Maintenance",
                    "payment_method": "Cash",
                }
            ]
        }
    }


class LedgerEntryUpdateRequest(BaseModel):
    """장부 항목 수정 요청 (보낸 필드만 변경)"""

    entry_date: date | None = None
    description: str | None = None
    entry_type: EntryType | None = None
    amount: Decimal | None = None
    category: str | None = None
    payment_method: PaymentMethod | None = None
    counterparty: str | None = None
    linked_document_id: str | None = None
    linked_image_id: str | None = None
    attachment: AttachmentModel | None = None
    notes: str | None = None
    expected_version: int | None = Field(
        default=None,
        description="예상 버전 (낙관적 락, None이면 무시)",
    )


class OpeningBalanceRequest(BaseModel):
    """기초 잔액 요청"""

    amount: Decimal = Field(..., description="금액 (> 0)")
    entry_type: EntryType = Field(default=EntryType.CREDIT, description="Debit / Credit")
    entry_date: date | None = Field(default=None, description="날짜 (None이면 매입일)")
    notes: str | None = Field(default=None, description="메모 (None이면 기본 문구)")


class TaxEntryRequest(BaseModel):
    """세금 납부 기록 요청"""

    tax_type: str = Field(..., description="세금 유형")
    amount: Decimal = Field(..., description="금액 (> 0)")
    entry_date: date = Field(..., description="납부일")
    description: str | None = Field(default=None, description="설명 (None이면 세금 유형)")
    tax_rate: str | None = Field(default=None, description="세율 (%)")
    challan_number: str | None = Field(default=None, description="납부서 번호")
    payment_method: PaymentMethod | None = None
    paid_to: str | None = None
    notes: str | None = None


class SaleEntryRequest(BaseModel):
    """매각 대금 기록 요청"""

    stage: SaleStage = Field(..., description="Advance / Partial Payment / Final Settlement")
    amount: Decimal = Field(..., description="금액 (> 0)")
    entry_date: date = Field(..., description="수령일")
    payment_method: PaymentMethod | None = None
    received_from: str | None = Field(default=None, description="매수인")
    notes: str | None = None


class RentalExpenseRequest(BaseModel):
    """임대 관리비 지출 요청"""

    entry_date: date = Field(..., description="지출일")
    description: str = Field(..., description="설명")
    amount: Decimal = Field(..., description="금액 (> 0)")
    payment_method: PaymentMethod | None = None
    paid_to: str | None = None
    notes: str | None = None


# =========================================================================
# Daily log
# =========================================================================


class BalancesModel(BaseModel):
    """현금 + 은행별 잔액"""

    cash: Decimal = Field(default=Decimal("0"), description="현금")
    banks: dict[str, Decimal] = Field(default_factory=dict, description="은행 이름 → 잔액")


class DailyLogCreateRequest(BaseModel):
    """일일 로그 생성 요청"""

    log_date: date = Field(..., description="날짜 (YYYY-MM-DD)")
    opening_balances: BalancesModel | None = Field(default=None, description="기초 잔액")


class DailyOpeningBalanceRequest(BaseModel):
    """일일 기초 잔액 설정 요청 (bank_name이 없으면 현금)"""

    amount: Decimal = Field(..., description="금액")
    bank_name: str | None = Field(default=None, description="은행 이름")


class DailyExpenseRequest(BaseModel):
    """일일 지출 추가 요청"""

    description: str = Field(..., description="설명")
    amount: Decimal = Field(..., description="금액 (> 0)")
    payment_method: ExpensePaymentMethod = Field(..., description="Cash / Bank / Split")
    property_id: str | None = Field(default=None, description="관련 부동산")
    bank_name: str | None = Field(default=None, description="Bank/Split이면 필수")
    cash_amount: Decimal | None = Field(default=None, description="Split 현금 부분")
    bank_amount: Decimal | None = Field(default=None, description="Split 은행 부분")
    is_pending: bool = Field(default=False, description="보류 (잔액 미반영)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "description": "Electrician",
                    "amount": "1000",
                    "payment_method": "Split",
                    "bank_name": "Bank A",
                    "cash_amount": "400",
                    "bank_amount": "600",
                }
            ]
        }
    }


class ReopenRequest(BaseModel):
    """정산 해제 요청"""

    reason: str = Field(..., description="해제 사유")


# =========================================================================
# Bank
# =========================================================================


class BankCreateRequest(BaseModel):
    """은행 추가 요청"""

    name: str = Field(..., description="은행 이름 (대소문자 무시 유일)")
    account_number: str | None = None
    branch_name: str | None = None
    account_type: str | None = None
    balance: Decimal | None = None
    notes: str | None = None


class BankUpdateRequest(BaseModel):
    """은행 수정 요청 (보낸 필드만 변경)"""

    name: str | None = None
    account_number: str | None = None
    branch_name: str | None = None
    account_type: str | None = None
    balance: Decimal | None = None
    notes: str | None = None
