"""
금액 유틸리티

금/KWD 수량은 모두 Decimal, 소수점 3자리 고정.
float 입력은 str 변환 후 Decimal로 만든다 (이진 부동소수점 오차 방지).
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from core.constants import AMOUNT_QUANT

ZERO = Decimal("0.000")


def to_amount(value: Decimal | int | float | str | None) -> Decimal:
    """입력값을 소수점 3자리 Decimal로 변환

    Args:
        value: 숫자 또는 숫자 문자열 (None이면 0)

    Returns:
        quantize(0.001) 된 Decimal

    Raises:
        ValueError: 숫자로 해석할 수 없는 값
    """
    if value is None:
        return ZERO
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"금액으로 변환할 수 없습니다: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"유한한 금액이 아닙니다: {value!r}")
    return amount.quantize(AMOUNT_QUANT, rounding=ROUND_HALF_UP)


def sum_amounts(values) -> Decimal:
    """Decimal 합계 (빈 시퀀스는 0.000)"""
    total = ZERO
    for value in values:
        total += value
    return total
