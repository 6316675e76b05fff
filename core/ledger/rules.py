"""
전표 유형별 잔액 반영 규칙

회사 전체의 회계 정책. 규칙표는 변경 불가:

    유형    gold   kwd
    INV     +      +
    Alloy   +      +
    REC     -      -
    GFV     +      -

알 수 없는 유형은 0으로 처리하지 않고 UnknownVoucherType 으로 실패한다.
"""

from decimal import Decimal

from core.ledger.types import VoucherType
from core.utils.amounts import ZERO


class LedgerError(Exception):
    """원장 계산 예외 (기본 클래스)"""

    pass


class UnknownVoucherType(LedgerError):
    """규칙표에 없는 전표 유형

    데이터 무결성 문제. 원장 계산 단계는 잡지 않고 호출자에게 전파한다.
    """

    def __init__(self, voucher_type: str, voucher_id: str | None = None):
        self.voucher_type = voucher_type
        self.voucher_id = voucher_id
        where = f" (voucher_id={voucher_id})" if voucher_id else ""
        super().__init__(f"알 수 없는 전표 유형: {voucher_type!r}{where}")


# (gold 부호, kwd 부호)
_EFFECT_SIGNS: dict[str, tuple[int, int]] = {
    VoucherType.INVOICE.value: (1, 1),
    VoucherType.ALLOY.value: (1, 1),
    VoucherType.RECEIPT.value: (-1, -1),
    VoucherType.GOLD_FIXING.value: (1, -1),
}


def is_known_type(voucher_type: str) -> bool:
    """규칙표에 있는 유형인지 확인"""
    return voucher_type in _EFFECT_SIGNS


def effect_signs(voucher_type: str, voucher_id: str | None = None) -> tuple[int, int]:
    """유형별 (gold, kwd) 부호

    Raises:
        UnknownVoucherType: 규칙표에 없는 유형
    """
    try:
        return _EFFECT_SIGNS[voucher_type]
    except KeyError:
        raise UnknownVoucherType(voucher_type, voucher_id) from None


def apply_effect(
    voucher_type: str,
    gold: Decimal,
    kwd: Decimal,
    voucher_id: str | None = None,
) -> tuple[Decimal, Decimal]:
    """전표가 잔액에 미치는 영향 (gold_delta, kwd_delta)

    Args:
        voucher_type: 전표 유형 태그 (INV, REC, GFV, Alloy)
        gold: 금 수량 (>= 0)
        kwd: KWD 금액 (>= 0)
        voucher_id: 오류 메시지용 전표 ID

    Returns:
        부호가 적용된 (gold_delta, kwd_delta)

    Raises:
        UnknownVoucherType: 규칙표에 없는 유형

    Example:
        >>> apply_effect("GFV", Decimal("3"), Decimal("2"))
        (Decimal('3'), Decimal('-2'))
    """
    gold_sign, kwd_sign = effect_signs(voucher_type, voucher_id)
    return gold * gold_sign, kwd * kwd_sign


def split_delta(delta: Decimal) -> tuple[Decimal, Decimal]:
    """부호 있는 변동을 (debit, credit) 으로 분리

    양수는 차변, 음수는 절대값으로 대변. 둘 다 0이 아닌 경우는 없다.
    """
    if delta > 0:
        return delta, ZERO
    if delta < 0:
        return ZERO, -delta
    return ZERO, ZERO
