"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
Workspace와 StateStore는 lifespan에서 app.state에 올려 둔다.
"""

from fastapi import Request

from core.storage.state_store import StateStore
from core.workspace import Workspace


def get_workspace(request: Request) -> Workspace:
    """현재 작업 공간"""
    return request.app.state.workspace


def get_state_store(request: Request) -> StateStore:
    """작업 공간 저장소 (변경 후 save_workspace 호출용)"""
    return request.app.state.state_store


async def persist(request: Request) -> None:
    """변경된 작업 공간을 DB에 저장"""
    await get_state_store(request).save_workspace(get_workspace(request))
