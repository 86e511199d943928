"""
DB 초기화

스키마를 만들고, 저장된 작업 공간이 없으면 기본 은행을 채워 저장한다.

사용법:
    python -m scripts.init_db
    python -m scripts.init_db --settings config/settings.yaml
"""

import argparse
import asyncio
import logging
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import AppConfig, load_settings
from core.logging import setup_logging
from core.storage.state_store import StateStore

logger = logging.getLogger(__name__)


async def main(config: AppConfig) -> None:
    logger.info(f"DB 초기화 시작: {config.db_path}")

    async with SQLiteAdapter(config.db_path) as db:
        await init_schema(db)
        store = StateStore(db)
        workspace = await store.load_workspace(config)
        await store.save_workspace(workspace)

    logger.info(
        f"DB 초기화 완료: 은행 {len(workspace.banks.list())}개, "
        f"부동산 {len(workspace.properties.list())}개"
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="PropLedger DB 초기화")
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="settings.yaml 경로 (기본: config/settings.yaml)",
    )
    args = parser.parse_args()

    config = load_settings(args.settings)
    setup_logging("scripts", config.log_level)
    asyncio.run(main(config))
