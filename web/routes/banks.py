"""
Bank 라우트

은행 계좌 레지스트리 API
"""

from fastapi import APIRouter, Depends, Request

from core.workspace import Workspace
from web.dependencies import get_workspace, persist
from web.models.requests import BankCreateRequest, BankUpdateRequest
from web.models.responses import BankResponse, MessageResponse
from web.services.bank_service import BankService

router = APIRouter(prefix="/api/banks", tags=["Banks"])


def get_bank_service(workspace: Workspace = Depends(get_workspace)) -> BankService:
    return BankService(workspace)


@router.get("", response_model=list[BankResponse])
async def list_banks(
    service: BankService = Depends(get_bank_service),
) -> list[BankResponse]:
    return service.list_banks()


@router.post("", response_model=BankResponse, status_code=201)
async def add_bank(
    body: BankCreateRequest,
    request: Request,
    service: BankService = Depends(get_bank_service),
) -> BankResponse:
    """은행 추가 (이름 중복이면 422)"""
    result = service.add_bank(body)
    await persist(request)
    return result


@router.get("/{bank_id}", response_model=BankResponse)
async def get_bank(
    bank_id: str,
    service: BankService = Depends(get_bank_service),
) -> BankResponse:
    return service.get_bank(bank_id)


@router.patch("/{bank_id}", response_model=BankResponse)
async def update_bank(
    bank_id: str,
    body: BankUpdateRequest,
    request: Request,
    service: BankService = Depends(get_bank_service),
) -> BankResponse:
    result = service.update_bank(bank_id, body)
    await persist(request)
    return result


@router.delete("/{bank_id}", response_model=MessageResponse)
async def delete_bank(
    bank_id: str,
    request: Request,
    service: BankService = Depends(get_bank_service),
) -> MessageResponse:
    """은행 삭제 (일일 지출에서 사용 중이면 422)"""
    service.delete_bank(bank_id)
    await persist(request)
    return MessageResponse(message=f"Bank deleted: {bank_id}")
