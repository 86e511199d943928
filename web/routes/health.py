"""
헬스 체크 엔드포인트

GET /api/health - 서버 상태 확인
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from core.workspace import Workspace
from web.dependencies import get_workspace
from web.models.responses import HealthResponse

API_VERSION = "1.0.0"

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    workspace: Workspace = Depends(get_workspace),
) -> HealthResponse:
    """서버 상태 확인"""
    return HealthResponse(
        status="ok",
        version=API_VERSION,
        currency=workspace.config.currency,
        timestamp=datetime.now(timezone.utc),
    )
