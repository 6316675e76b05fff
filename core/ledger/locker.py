"""
금고(Locker) 금 원장

고객 전표에서 회사 실물 금 재고의 이동을 파생한다.
판매(INV)는 금이 금고에서 나가고, 수령(REC)은 들어온다.

    계정 유형                    INV     REC                 GFV/Alloy
    Market                       -gold   +gold (수표 결제 0)  0
    Casting/Faceting/Project     -gold   +gold               0
    Gold Fixing                  0       +gold               0
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Mapping

from core.ledger.calculator import sort_vouchers
from core.ledger.models import Account, LedgerEntry, Voucher
from core.ledger.rules import effect_signs, split_delta
from core.ledger.types import CHEQUE_PAYMENT_METHOD, AccountType, VoucherType
from core.utils.amounts import ZERO

logger = logging.getLogger(__name__)

_CUSTOMER_TYPES = frozenset({
    AccountType.CASTING.value,
    AccountType.FACETING.value,
    AccountType.PROJECT.value,
})


def locker_change(voucher: Voucher, account: Account) -> Decimal:
    """전표 1건의 금고 금 변동

    Raises:
        UnknownVoucherType: 규칙표에 없는 전표 유형
    """
    # 유형 검증 (GFV/Alloy 처럼 금고 영향이 0인 유형과 구분)
    effect_signs(voucher.type, voucher.id)

    if account.type == AccountType.MARKET.value:
        if voucher.type == VoucherType.INVOICE.value:
            return -voucher.gold
        if voucher.type == VoucherType.RECEIPT.value:
            if (voucher.payment_method or "").lower() == CHEQUE_PAYMENT_METHOD:
                return ZERO
            return voucher.gold
    elif account.type in _CUSTOMER_TYPES:
        if voucher.type == VoucherType.INVOICE.value:
            return -voucher.gold
        if voucher.type == VoucherType.RECEIPT.value:
            return voucher.gold
    elif account.type == AccountType.GOLD_FIXING.value:
        if voucher.type == VoucherType.RECEIPT.value:
            return voucher.gold
    return ZERO


def compute_locker_ledger(
    vouchers: Iterable[Voucher],
    accounts: Mapping[str, Account],
    include_zero: bool = False,
) -> list[LedgerEntry]:
    """금고 금 누적 원장

    Args:
        vouchers: 전체 고객 전표
        accounts: account_id → Account
        include_zero: 변동 0인 전표도 행으로 남길지 여부 (기본: 제외)

    Returns:
        금 컬럼만 채워진 LedgerEntry 목록 (kwd 컬럼은 0)

    Raises:
        UnknownVoucherType: 규칙표에 없는 전표 유형
        KeyError: accounts 에 없는 계정의 전표
    """
    balance = ZERO
    entries: list[LedgerEntry] = []

    for voucher in sort_vouchers(vouchers):
        account = accounts[voucher.account_id]
        change = locker_change(voucher, account)
        balance += change
        if change == 0 and not include_zero:
            continue

        debit, credit = split_delta(change)
        entries.append(LedgerEntry(
            voucher_id=voucher.id,
            date=voucher.date,
            type=voucher.type,
            description=f"{account.name} - {voucher.display_description()}",
            account_id=voucher.account_id,
            gold_debit=debit,
            gold_credit=credit,
            gold_balance=balance,
        ))

    logger.debug(f"금고 원장 계산 완료: entries={len(entries)}, balance={balance}")
    return entries


def locker_gold_by_type(
    vouchers: Iterable[Voucher],
    accounts: Mapping[str, Account],
) -> dict[str, Decimal]:
    """계정 유형별 금고 금 변동 합계 (유형별 요약 보고서용)"""
    totals: dict[str, Decimal] = {}
    for voucher in vouchers:
        account = accounts[voucher.account_id]
        totals[account.type] = totals.get(account.type, ZERO) + locker_change(voucher, account)
    return totals
