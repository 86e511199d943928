"""
금액 유틸리티

모든 금액은 Decimal로 다룬다 (float 누적 오차 방지).
"""

from decimal import Decimal, InvalidOperation

from core.errors import ValidationError

ZERO = Decimal("0")


def to_decimal(value: Decimal | int | float | str, field: str = "amount") -> Decimal:
    """금액 값을 Decimal로 변환

    float는 이진 표현 오차가 섞이므로 str을 거쳐 변환한다.

    Args:
        value: 금액 (Decimal, int, str, float)
        field: 오류 메시지에 쓸 필드명

    Returns:
        Decimal 금액

    Raises:
        ValidationError: 숫자로 해석할 수 없거나 유한수가 아닌 경우
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise ValidationError(f"{field} must be a number, got {value!r}") from e

    if not result.is_finite():
        raise ValidationError(f"{field} must be finite, got {value!r}")
    return result


def to_positive_decimal(value: Decimal | int | float | str, field: str = "amount") -> Decimal:
    """0보다 큰 금액만 허용

    Raises:
        ValidationError: 0 이하인 경우
    """
    result = to_decimal(value, field)
    if result <= ZERO:
        raise ValidationError(f"{field} must be greater than 0, got {result}")
    return result


def format_amount(value: Decimal, currency: str = "PKR") -> str:
    """표시용 금액 문자열 (소수점 없이 천 단위 구분)

    Example:
        >>> format_amount(Decimal("1500.40"))
        'PKR 1,500'
    """
    return f"{currency} {value:,.0f}"
