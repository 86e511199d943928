"""
Ledger 라우트

부동산별 장부 API (항목 CRUD, 잠금, 합계, 하위 장부)
"""

from datetime import date

from fastapi import APIRouter, Depends, Path, Query, Request

from core.workspace import Workspace
from web.dependencies import get_workspace, persist
from web.models.requests import (
    LedgerEntryCreateRequest,
    LedgerEntryUpdateRequest,
    OpeningBalanceRequest,
    RentalExpenseRequest,
    SaleEntryRequest,
    TaxEntryRequest,
)
from web.models.responses import (
    LedgerEntryResponse,
    LedgerResponse,
    LedgerTotalsResponse,
    MessageResponse,
    RentReceiptResponse,
    RentScheduleResponse,
    SaleSummaryResponse,
    TaxTypesResponse,
)
from web.services.ledger_service import LedgerService

router = APIRouter(prefix="/api/properties/{property_id}/ledger", tags=["Ledger"])


def get_ledger_service(workspace: Workspace = Depends(get_workspace)) -> LedgerService:
    return LedgerService(workspace)


# =========================================================================
# 장부 / 항목
# =========================================================================


@router.get("", response_model=LedgerResponse)
async def get_ledger(
    property_id: str = Path(..., description="부동산 ID"),
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """장부 전체 (입력 순서) + 합계"""
    return service.get_ledger(property_id)


@router.get("/totals", response_model=LedgerTotalsResponse)
async def get_totals(
    property_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerTotalsResponse:
    """Debit/Credit 합계와 잔액"""
    return service.get_totals(property_id)


@router.post("/entries", response_model=LedgerEntryResponse, status_code=201)
async def add_entry(
    property_id: str,
    body: LedgerEntryCreateRequest,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    """항목 추가"""
    result = service.add_entry(property_id, body)
    await persist(request)
    return result


@router.get("/entries/{entry_id}", response_model=LedgerEntryResponse)
async def get_entry(
    property_id: str,
    entry_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    return service.get_entry(property_id, entry_id)


@router.patch("/entries/{entry_id}", response_model=LedgerEntryResponse)
async def update_entry(
    property_id: str,
    entry_id: str,
    body: LedgerEntryUpdateRequest,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    """항목 수정

    잠긴 항목은 423. expected_version이 현재 버전과 다르면 409.
    """
    result = service.update_entry(property_id, entry_id, body)
    await persist(request)
    return result


@router.delete("/entries/{entry_id}", response_model=MessageResponse)
async def delete_entry(
    property_id: str,
    entry_id: str,
    request: Request,
    expected_version: int | None = Query(default=None, description="예상 버전 (낙관적 락)"),
    service: LedgerService = Depends(get_ledger_service),
) -> MessageResponse:
    """항목 삭제 (잠긴 항목은 423)"""
    service.delete_entry(property_id, entry_id, expected_version)
    await persist(request)
    return MessageResponse(message=f"Entry deleted: {entry_id}")


@router.post("/entries/{entry_id}/lock", response_model=LedgerEntryResponse)
async def lock_entry(
    property_id: str,
    entry_id: str,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    result = service.lock_entry(property_id, entry_id)
    await persist(request)
    return result


@router.post("/entries/{entry_id}/unlock", response_model=LedgerEntryResponse)
async def unlock_entry(
    property_id: str,
    entry_id: str,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    result = service.unlock_entry(property_id, entry_id)
    await persist(request)
    return result


@router.post("/lock-all", response_model=LedgerResponse)
async def lock_all(
    property_id: str,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """전체 항목 잠금"""
    result = service.lock_all(property_id)
    await persist(request)
    return result


@router.post("/unlock-all", response_model=LedgerResponse)
async def unlock_all(
    property_id: str,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerResponse:
    """전체 항목 잠금 해제"""
    result = service.unlock_all(property_id)
    await persist(request)
    return result


# =========================================================================
# 하위 장부
# =========================================================================


@router.post("/opening-balance", response_model=LedgerEntryResponse, status_code=201)
async def add_opening_balance(
    property_id: str,
    body: OpeningBalanceRequest,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    """기초 잔액 (빈 장부에만)"""
    result = service.add_opening_balance(property_id, body)
    await persist(request)
    return result


@router.get("/tax-types", response_model=TaxTypesResponse)
async def get_tax_types(
    property_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> TaxTypesResponse:
    """부동산 유형별 선택 가능한 세금 유형"""
    return service.tax_types(property_id)


@router.post("/tax", response_model=LedgerEntryResponse, status_code=201)
async def record_tax(
    property_id: str,
    body: TaxEntryRequest,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    """세금 납부 기록 (Debit/Tax)"""
    result = service.record_tax(property_id, body)
    await persist(request)
    return result


@router.post("/sale", response_model=LedgerEntryResponse, status_code=201)
async def record_sale(
    property_id: str,
    body: SaleEntryRequest,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    """매각 대금 기록 (Credit)"""
    result = service.record_sale(property_id, body)
    await persist(request)
    return result


@router.get("/sale-summary", response_model=SaleSummaryResponse)
async def get_sale_summary(
    property_id: str,
    service: LedgerService = Depends(get_ledger_service),
) -> SaleSummaryResponse:
    return service.sale_summary(property_id)


@router.get("/rent-schedule", response_model=RentScheduleResponse)
async def get_rent_schedule(
    property_id: str,
    as_of: date | None = Query(default=None, description="기준일 (None이면 오늘)"),
    service: LedgerService = Depends(get_ledger_service),
) -> RentScheduleResponse:
    """월별 임대료 일정 (매입월 ~ 기준일 + lookahead)"""
    return service.rent_schedule(property_id, as_of)


@router.post("/rent/{year}/{month}/receive", response_model=RentReceiptResponse)
async def receive_rent(
    property_id: str,
    request: Request,
    year: int = Path(..., ge=1900, description="연도"),
    month: int = Path(..., ge=1, le=12, description="월"),
    received_on: date | None = Query(default=None, description="수령일 (None이면 오늘)"),
    service: LedgerService = Depends(get_ledger_service),
) -> RentReceiptResponse:
    """임대료 수령 처리

    이미 수령된 달이면 항목을 추가하지 않고 already_recorded=True 로 응답.
    """
    result = service.receive_rent(property_id, year, month, received_on)
    if not result.already_recorded:
        await persist(request)
    return result


@router.post("/rental-expense", response_model=LedgerEntryResponse, status_code=201)
async def record_rental_expense(
    property_id: str,
    body: RentalExpenseRequest,
    request: Request,
    service: LedgerService = Depends(get_ledger_service),
) -> LedgerEntryResponse:
    """임대 관리비 지출 (Debit/Maintenance)"""
    result = service.record_rental_expense(property_id, body)
    await persist(request)
    return result
