"""
스토리지 모듈

Workspace 전체를 SQLite에 저장/복원하는 StateStore 제공
"""

from core.storage.state_store import StateStore

__all__ = [
    "StateStore",
]
