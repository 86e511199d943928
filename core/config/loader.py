"""
설정 로더

settings.yaml 로드 및 애플리케이션 설정 생성
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from core.constants import PROJECT_ROOT, Defaults, Paths

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class WebConfig:
    """Web 서버 설정"""

    host: str = Defaults.WEB_HOST
    port: int = Defaults.WEB_PORT


@dataclass(frozen=True)
class AppConfig:
    """애플리케이션 설정 (settings.yaml에서 로드)

    불변 데이터 구조로 설정 변경 방지
    """

    currency: str = Defaults.CURRENCY
    timezone_offset_hours: int = Defaults.TIMEZONE_OFFSET_HOURS
    rent_lookahead_months: int = Defaults.RENT_LOOKAHEAD_MONTHS
    db_path: Path = Paths.DB_FILE
    default_banks: tuple[str, ...] = Defaults.BANK_NAMES
    log_level: str = Defaults.LOG_LEVEL
    web: WebConfig = field(default_factory=WebConfig)


class SettingsLoadError(Exception):
    """Settings 로드 실패 예외"""

    pass


def _require_int(data: dict[str, Any], key: str, default: int, minimum: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsLoadError(f"settings.yaml의 '{key}'는 정수여야 합니다: {value!r}")
    if value < minimum:
        raise SettingsLoadError(f"settings.yaml의 '{key}'는 {minimum} 이상이어야 합니다: {value}")
    return value


def _resolve_db_path(raw: Any) -> Path:
    if raw is None:
        return Paths.DB_FILE
    if not isinstance(raw, str) or not raw.strip():
        raise SettingsLoadError(f"settings.yaml의 'db_file'이 올바르지 않습니다: {raw!r}")
    path = Path(raw)
    # 상대 경로는 프로젝트 루트 기준
    return path if path.is_absolute() else PROJECT_ROOT / path


def parse_settings(data: dict[str, Any]) -> AppConfig:
    """YAML 딕셔너리에서 AppConfig 생성

    Args:
        data: yaml.safe_load 결과

    Returns:
        AppConfig 인스턴스

    Raises:
        SettingsLoadError: 값의 형식이 잘못된 경우
    """
    currency = data.get("currency", Defaults.CURRENCY)
    if not isinstance(currency, str) or not currency.strip():
        raise SettingsLoadError(f"settings.yaml의 'currency'가 올바르지 않습니다: {currency!r}")

    offset = data.get("timezone_offset_hours", Defaults.TIMEZONE_OFFSET_HOURS)
    if isinstance(offset, bool) or not isinstance(offset, int) or not -12 <= offset <= 14:
        raise SettingsLoadError(
            f"settings.yaml의 'timezone_offset_hours'가 올바르지 않습니다: {offset!r}"
        )

    lookahead = _require_int(
        data, "rent_lookahead_months", Defaults.RENT_LOOKAHEAD_MONTHS, minimum=0
    )

    banks = data.get("default_banks", list(Defaults.BANK_NAMES))
    if not isinstance(banks, list) or not all(isinstance(b, str) and b.strip() for b in banks):
        raise SettingsLoadError("settings.yaml의 'default_banks'는 은행 이름 목록이어야 합니다")

    log_level = data.get("log_level", Defaults.LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.strip().upper() not in LOG_LEVELS:
        raise SettingsLoadError(f"settings.yaml의 'log_level'이 올바르지 않습니다: {log_level!r}")

    web_data = data.get("web")
    if web_data is None:
        web_data = {}
    if not isinstance(web_data, dict):
        raise SettingsLoadError("settings.yaml의 'web' 섹션은 매핑이어야 합니다")
    host = web_data.get("host", Defaults.WEB_HOST)
    port = _require_int(web_data, "port", Defaults.WEB_PORT, minimum=1)

    return AppConfig(
        currency=currency.strip(),
        timezone_offset_hours=offset,
        rent_lookahead_months=lookahead,
        db_path=_resolve_db_path(data.get("db_file")),
        default_banks=tuple(b.strip() for b in banks),
        log_level=log_level.strip().upper(),
        web=WebConfig(host=str(host), port=port),
    )


def load_settings(path: Path | None = None) -> AppConfig:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        AppConfig 인스턴스. 기본 경로에 파일이 없으면 기본값.

    Raises:
        SettingsLoadError: 지정한 파일이 없거나 형식이 잘못된 경우
    """
    explicit = path is not None
    if path is None:
        path = Paths.SETTINGS_FILE

    if not path.exists():
        if explicit:
            raise SettingsLoadError(f"settings.yaml 파일을 찾을 수 없습니다: {path}")
        return AppConfig()

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise SettingsLoadError("settings.yaml 최상위는 매핑이어야 합니다")

    return parse_settings(data)


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _config: AppConfig | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._config is None:
            self._config = load_settings(settings_path)

    @property
    def config(self) -> AppConfig:
        """전체 설정"""
        assert self._config is not None
        return self._config

    @property
    def currency(self) -> str:
        """표시 통화 코드"""
        return self.config.currency

    @property
    def db_path(self) -> Path:
        """DB 경로"""
        return self.config.db_path

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._config = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)
