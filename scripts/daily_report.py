"""
일일 보고서 출력

사용법:
    python -m scripts.daily_report --date 2024-03-01
    python -m scripts.daily_report            # 오늘 (현지 시간)
"""

import argparse
import asyncio
import logging
from datetime import date
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import AppConfig, load_settings
from core.daily import build_daily_report, render_daily_report
from core.logging import setup_logging
from core.storage.state_store import StateStore
from core.utils.timezone import make_local_tz, parse_iso_date, today_local

logger = logging.getLogger(__name__)


async def main(config: AppConfig, log_date: date | None) -> int:
    if log_date is None:
        log_date = today_local(make_local_tz(config.timezone_offset_hours))

    async with SQLiteAdapter(config.db_path) as db:
        await init_schema(db)
        workspace = await StateStore(db).load_workspace(config)

    log = workspace.daily_logs.get_by_date(log_date)
    if log is None:
        logger.error(f"{log_date.isoformat()} 일일 로그가 없습니다")
        return 1

    print(render_daily_report(build_daily_report(log), config.currency))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="일일 현금/은행 보고서")
    parser.add_argument(
        "--date",
        type=parse_iso_date,
        default=None,
        help="보고 날짜 YYYY-MM-DD (기본: 오늘)",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="settings.yaml 경로 (기본: config/settings.yaml)",
    )
    args = parser.parse_args()

    config = load_settings(args.settings)
    setup_logging("scripts", config.log_level)
    sys.exit(asyncio.run(main(config, args.date)))
