"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    BankCreateRequest,
    BankUpdateRequest,
    DailyExpenseRequest,
    DailyLogCreateRequest,
    DailyOpeningBalanceRequest,
    LedgerEntryCreateRequest,
    LedgerEntryUpdateRequest,
    OpeningBalanceRequest,
    PropertyCreateRequest,
    RentalExpenseRequest,
    ReopenRequest,
    SaleEntryRequest,
    TaxEntryRequest,
)
from web.models.responses import (
    BankResponse,
    DailyLogResponse,
    DailyReportResponse,
    DaySummaryResponse,
    ErrorResponse,
    HealthResponse,
    LedgerEntryResponse,
    LedgerResponse,
    PropertyResponse,
    RentReceiptResponse,
    RentScheduleResponse,
    SaleSummaryResponse,
)

__all__ = [
    # Requests
    "BankCreateRequest",
    "BankUpdateRequest",
    "DailyExpenseRequest",
    "DailyLogCreateRequest",
    "DailyOpeningBalanceRequest",
    "LedgerEntryCreateRequest",
    "LedgerEntryUpdateRequest",
    "OpeningBalanceRequest",
    "PropertyCreateRequest",
    "RentalExpenseRequest",
    "ReopenRequest",
    "SaleEntryRequest",
    "TaxEntryRequest",
    # Responses
    "BankResponse",
    "DailyLogResponse",
    "DailyReportResponse",
    "DaySummaryResponse",
    "ErrorResponse",
    "HealthResponse",
    "LedgerEntryResponse",
    "LedgerResponse",
    "PropertyResponse",
    "RentReceiptResponse",
    "RentScheduleResponse",
    "SaleSummaryResponse",
]
