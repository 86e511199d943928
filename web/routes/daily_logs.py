"""
DailyLog 라우트

일일 현금/은행 로그와 End-of-Day 정산 API
"""

from datetime import date

from fastapi import APIRouter, Depends, Request

from core.workspace import Workspace
from web.dependencies import get_workspace, persist
from web.models.requests import (
    DailyExpenseRequest,
    DailyLogCreateRequest,
    DailyOpeningBalanceRequest,
    ReopenRequest,
)
from web.models.responses import (
    DailyExpenseResponse,
    DailyLogResponse,
    DailyReportResponse,
    DaySummaryResponse,
    MessageResponse,
)
from web.services.daily_log_service import DailyLogService

router = APIRouter(prefix="/api/daily-logs", tags=["Daily Logs"])


def get_daily_log_service(workspace: Workspace = Depends(get_workspace)) -> DailyLogService:
    return DailyLogService(workspace)


@router.get("", response_model=list[DailyLogResponse])
async def list_logs(
    service: DailyLogService = Depends(get_daily_log_service),
) -> list[DailyLogResponse]:
    """전체 로그 (날짜 오름차순)"""
    return service.list_logs()


@router.post("", response_model=DailyLogResponse, status_code=201)
async def create_log(
    body: DailyLogCreateRequest,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    """로그 생성 (같은 날짜가 있으면 422)"""
    result = service.create_log(body)
    await persist(request)
    return result


@router.get("/by-date/{log_date}", response_model=DailyLogResponse)
async def get_log_by_date(
    log_date: date,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    return service.get_by_date(log_date)


@router.post("/by-date/{log_date}", response_model=DailyLogResponse)
async def open_log_for_date(
    log_date: date,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    """해당 날짜 로그 반환, 없으면 0 잔액으로 생성"""
    result = service.get_or_create(log_date)
    await persist(request)
    return result


@router.get("/{log_id}", response_model=DailyLogResponse)
async def get_log(
    log_id: str,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    return service.get_log(log_id)


@router.put("/{log_id}/opening-balance", response_model=DailyLogResponse)
async def set_opening_balance(
    log_id: str,
    body: DailyOpeningBalanceRequest,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    """기초 잔액 설정 (정산된 로그는 423)"""
    result = service.set_opening_balance(log_id, body)
    await persist(request)
    return result


@router.post("/{log_id}/expenses", response_model=DailyExpenseResponse, status_code=201)
async def add_expense(
    log_id: str,
    body: DailyExpenseRequest,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyExpenseResponse:
    """지출 추가 (정산된 로그는 423)"""
    result = service.add_expense(log_id, body)
    await persist(request)
    return result


@router.delete("/{log_id}/expenses/{expense_id}", response_model=MessageResponse)
async def delete_expense(
    log_id: str,
    expense_id: str,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> MessageResponse:
    service.delete_expense(log_id, expense_id)
    await persist(request)
    return MessageResponse(message=f"Expense deleted: {expense_id}")


@router.post("/{log_id}/expenses/{expense_id}/mark-paid", response_model=DailyExpenseResponse)
async def mark_expense_paid(
    log_id: str,
    expense_id: str,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyExpenseResponse:
    """보류 지출을 지급 완료로 전환"""
    result = service.mark_expense_paid(log_id, expense_id)
    await persist(request)
    return result


@router.get("/{log_id}/preview", response_model=DaySummaryResponse)
async def preview(
    log_id: str,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DaySummaryResponse:
    """정산 결과 미리보기 (잠그지 않음)"""
    return service.preview(log_id)


@router.post("/{log_id}/consolidate", response_model=DailyLogResponse)
async def consolidate(
    log_id: str,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    """End-of-Day 정산 후 잠금 (이미 정산된 로그는 423)"""
    result = service.consolidate(log_id)
    await persist(request)
    return result


@router.post("/{log_id}/reopen", response_model=DailyLogResponse)
async def reopen(
    log_id: str,
    body: ReopenRequest,
    request: Request,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyLogResponse:
    """정산 해제 (사유 필수, 이력 보존)"""
    result = service.reopen(log_id, body.reason)
    await persist(request)
    return result


@router.get("/{log_id}/report", response_model=DailyReportResponse)
async def report(
    log_id: str,
    service: DailyLogService = Depends(get_daily_log_service),
) -> DailyReportResponse:
    return service.report(log_id)
