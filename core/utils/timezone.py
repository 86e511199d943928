"""
타임존 유틸리티

내부 저장: UTC | "오늘" 판정: 현지 시간(기본 PKT, UTC+5) 원칙 준수를 위한 헬퍼 함수
"""

from datetime import date, datetime, timedelta, timezone

from core.constants import Defaults

# 현지 타임존 (기본 PKT, UTC+5)
LOCAL_TZ = timezone(timedelta(hours=Defaults.TIMEZONE_OFFSET_HOURS))


def make_local_tz(offset_hours: int) -> timezone:
    """UTC 오프셋(시간)으로 타임존 생성

    Args:
        offset_hours: UTC 기준 오프셋 (예: 5 → UTC+5)

    Returns:
        고정 오프셋 timezone
    """
    return timezone(timedelta(hours=offset_hours))


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def today_local(tz: timezone = LOCAL_TZ) -> date:
    """현지 기준 오늘 날짜

    임대료 수령일, 일일 로그 날짜 등 "오늘"은 현지 날짜를 사용.

    Example:
        >>> # UTC 2026-02-20 20:00 → PKT 2026-02-21 01:00
        >>> today_local()
        datetime.date(2026, 2, 21)
    """
    return datetime.now(tz).date()


def parse_iso_date(value: str | date) -> date:
    """YYYY-MM-DD 문자열을 date로 변환 (date는 그대로 반환)

    Raises:
        ValueError: 형식이 잘못된 경우
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)
