"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 정밀도 손실이 없도록 문자열로 내보낸다.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    version: str = Field(..., description="API 버전")
    currency: str = Field(..., description="표시 통화")
    timestamp: datetime = Field(..., description="응답 시간 (UTC)")


class ErrorResponse(BaseModel):
    """도메인 오류 응답"""

    error: str = Field(..., description="오류 종류 (예외 클래스 이름)")
    detail: str = Field(..., description="사용자 메시지")


class MessageResponse(BaseModel):
    message: str


# =========================================================================
# Property
# =========================================================================


class RentalDetailsResponse(BaseModel):
    tenant_name: str
    monthly_rent_amount: str
    rent_due_date: int
    tenant_phone: str | None = None
    security_advance_amount: str | None = None


class PropertyResponse(BaseModel):
    """부동산 응답"""

    property_id: str
    name: str
    property_type: str
    purchase_date: date
    rental_details: RentalDetailsResponse | None = None


# =========================================================================
# Ledger
# =========================================================================


class AttachmentResponse(BaseModel):
    url: str
    file_name: str | None = None


class LedgerEntryResponse(BaseModel):
    """장부 항목 응답"""

    entry_id: str = Field(..., description="항목 ID")
    entry_date: date = Field(..., description="날짜")
    description: str = Field(..., description="설명")
    entry_type: str = Field(..., description="Debit / Credit")
    amount: str = Field(..., description="금액")
    category: str | None = None
    payment_method: str | None = None
    counterparty: str | None = None
    linked_document_id: str | None = None
    linked_image_id: str | None = None
    attachment: AttachmentResponse | None = None
    notes: str | None = None
    is_opening_balance: bool = False
    is_locked: bool = Field(..., description="잠금 여부")
    version: int = Field(..., description="낙관적 락 버전")


class LedgerTotalsResponse(BaseModel):
    """장부 합계 응답"""

    total_debit: str = Field(..., description="Debit 합계")
    total_credit: str = Field(..., description="Credit 합계")
    balance: str = Field(..., description="Credit - Debit")
    display_side: str = Field(..., description="표시 방향 (Credit / Debit)")
    display_balance: str = Field(..., description="표시용 잔액")


class LedgerResponse(BaseModel):
    """부동산 장부 응답"""

    property_id: str
    is_locked: bool = Field(..., description="잠긴 항목이 하나라도 있으면 True")
    entries: list[LedgerEntryResponse]
    totals: LedgerTotalsResponse


class RentRecordResponse(BaseModel):
    """월별 임대료 기록"""

    year: int
    month: int
    month_label: str = Field(..., description="예: January 2024")
    due_date: date
    amount: str
    is_received: bool
    received_date: date | None = None
    source_entry_id: str | None = None


class RentScheduleResponse(BaseModel):
    """임대료 일정 응답"""

    property_id: str
    records: list[RentRecordResponse]
    total_pending: str
    pending_count: int
    received_count: int


class RentReceiptResponse(BaseModel):
    """임대료 수령 처리 결과"""

    record: RentRecordResponse
    entry_id: str | None = Field(default=None, description="추가된 항목 ID (이미 수령이면 None)")
    already_recorded: bool
    notice: str | None = None


class SaleSummaryResponse(BaseModel):
    """매각 대금 요약"""

    total: str
    by_category: dict[str, str]
    recent_entries: list[LedgerEntryResponse]


class TaxTypesResponse(BaseModel):
    property_type: str
    tax_types: list[str]


# =========================================================================
# Daily log
# =========================================================================


class BalancesResponse(BaseModel):
    cash: str
    banks: dict[str, str]
    total: str


class DailyExpenseResponse(BaseModel):
    """일일 지출 응답"""

    expense_id: str
    description: str
    amount: str
    payment_method: str
    property_id: str | None = None
    bank_name: str | None = None
    cash_amount: str | None = None
    bank_amount: str | None = None
    is_pending: bool = False


class ReopenRecordResponse(BaseModel):
    reopened_at: datetime
    reason: str


class DailyLogResponse(BaseModel):
    """일일 로그 응답"""

    log_id: str
    log_date: date
    status: str = Field(..., description="OPEN / CONSOLIDATED")
    is_locked: bool
    opening_balances: BalancesResponse
    expenses: list[DailyExpenseResponse]
    closing_balances: BalancesResponse
    total_daily_expenses: str
    bank_usage: dict[str, str]
    reopen_history: list[ReopenRecordResponse]
    version: int


class DaySummaryResponse(BaseModel):
    """정산 미리보기 응답"""

    total_daily_expenses: str
    cash_spent: str
    bank_usage: dict[str, str]
    closing_balances: BalancesResponse


class DailyReportResponse(BaseModel):
    """일일 보고서 응답"""

    log_date: date
    status: str
    opening_balances: BalancesResponse
    closing_balances: BalancesResponse
    paid_expenses: list[DailyExpenseResponse]
    pending_expenses: list[DailyExpenseResponse]
    total_daily_expenses: str
    pending_total: str
    cash_spent: str
    bank_usage: dict[str, str]
    net_change: str
    text: str = Field(..., description="텍스트 보고서")


# =========================================================================
# Bank
# =========================================================================


class BankResponse(BaseModel):
    """은행 응답"""

    bank_id: str
    name: str
    account_number: str | None = None
    branch_name: str | None = None
    account_type: str | None = None
    balance: str | None = None
    notes: str | None = None
