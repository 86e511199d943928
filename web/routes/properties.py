"""
Property 라우트

부동산 등록/조회 API
"""

from fastapi import APIRouter, Depends, Path, Request

from core.workspace import Workspace
from web.dependencies import get_workspace, persist
from web.models.requests import PropertyCreateRequest
from web.models.responses import PropertyResponse
from web.services.property_service import PropertyService

router = APIRouter(prefix="/api/properties", tags=["Properties"])


@router.get("", response_model=list[PropertyResponse])
async def list_properties(
    workspace: Workspace = Depends(get_workspace),
) -> list[PropertyResponse]:
    """부동산 목록 (등록 순서)"""
    return PropertyService(workspace).list_properties()


@router.post("", response_model=PropertyResponse, status_code=201)
async def register_property(
    body: PropertyCreateRequest,
    request: Request,
    workspace: Workspace = Depends(get_workspace),
) -> PropertyResponse:
    """부동산 등록 (빈 장부가 함께 생성됨)"""
    result = PropertyService(workspace).register(body)
    await persist(request)
    return result


@router.get("/{property_id}", response_model=PropertyResponse)
async def get_property(
    property_id: str = Path(..., description="부동산 ID"),
    workspace: Workspace = Depends(get_workspace),
) -> PropertyResponse:
    """부동산 조회"""
    return PropertyService(workspace).get_property(property_id)
