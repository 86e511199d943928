"""
유틸리티 패키지

금액(Decimal) 변환, 타임존 처리 등 공통 유틸리티
"""

from core.utils.money import (
    ZERO,
    format_amount,
    to_decimal,
    to_positive_decimal,
)
from core.utils.timezone import (
    LOCAL_TZ,
    make_local_tz,
    now_utc,
    parse_iso_date,
    today_local,
)

__all__ = [
    "ZERO",
    "format_amount",
    "to_decimal",
    "to_positive_decimal",
    "LOCAL_TZ",
    "make_local_tz",
    "now_utc",
    "parse_iso_date",
    "today_local",
]
