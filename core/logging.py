"""
로깅 설정

Web 서버와 운영 스크립트가 같은 형식으로 콘솔 + 일별 파일에 기록한다.
레벨은 settings.yaml의 log_level (기본 INFO).

사용법:
    from core.logging import setup_logging
    setup_logging("web", config.log_level)
    setup_logging("scripts", config.log_level)
"""

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from core.constants import Defaults, Paths


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_BACKUP_COUNT = 7  # 최대 7일치 파일 유지

# 요청/쿼리마다 로그를 남기는 라이브러리 로거 (WARNING 이상만)
NOISY_LOGGERS = [
    "aiosqlite",
    "httpcore",
    "httpx",
    "asyncio",
    "uvicorn.access",
]

_PROCESS_LOG_DIRS = {
    "web": Paths.WEB_LOGS_DIR,
    "scripts": Paths.SCRIPT_LOGS_DIR,
}


def resolve_level(level: str | int) -> int:
    """"INFO" 같은 레벨 이름 또는 숫자를 logging 레벨로 변환

    Raises:
        ValueError: 알 수 없는 레벨 이름
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    process_name: str,
    level: str | int = Defaults.LOG_LEVEL,
    log_dir: Path | None = None,
) -> logging.Logger:
    """루트 로거 초기화

    기존 핸들러는 모두 교체된다 (여러 번 호출해도 중복 출력 없음).

    Args:
        process_name: "web" 또는 "scripts" (로그 디렉토리와 파일 이름 결정)
        level: 콘솔/파일 공통 레벨
        log_dir: 로그 디렉토리 (None이면 logs/<process_name>/)

    Returns:
        설정된 루트 Logger
    """
    handler_level = resolve_level(level)
    if log_dir is None:
        log_dir = _PROCESS_LOG_DIRS.get(process_name, Paths.LOGS_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"{process_name}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # 필터링은 핸들러에서
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        backupCount=LOG_FILE_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.suffix = "%Y-%m-%d"  # web.log.2024-03-01
    file_handler.setLevel(handler_level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    root_logger.info(
        f"로깅 초기화 완료: {process_name} ({logging.getLevelName(handler_level)}, {log_file})"
    )
    return root_logger
