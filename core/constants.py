"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → propledger/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class Defaults:
    """기본값 상수 (settings.yaml이 없을 때 사용)"""

    CURRENCY: str = "PKR"
    TIMEZONE_OFFSET_HOURS: int = 5  # PKT (UTC+5)

    RENT_LOOKAHEAD_MONTHS: int = 3  # 오늘 + 3개월까지 임대료 일정 생성
    RECENT_SALE_ENTRIES: int = 5

    BANK_NAMES: tuple[str, ...] = ("Bank A", "Bank B", "Bank C")

    OPENING_BALANCE_DESCRIPTION: str = "Opening Balance"
    OPENING_BALANCE_NOTES: str = "Purana hisaab (Opening Balance)"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"
    WEB_LOGS_DIR: Path = LOGS_DIR / "web"
    SCRIPT_LOGS_DIR: Path = LOGS_DIR / "scripts"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일
    DB_FILE: Path = DATA_DIR / "propledger.db"
