"""
누적 잔액 계산기

날짜순 전표 목록을 누적 잔액이 붙은 원장 행으로 변환.
순수 함수: 같은 입력이면 항상 같은 결과 (기간 재필터 시 재조회 불필요).
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.ledger.models import Balance, LedgerEntry, Voucher
from core.ledger.rules import apply_effect, split_delta
from core.types import LedgerScope

logger = logging.getLogger(__name__)


def sort_vouchers(vouchers: Iterable[Voucher]) -> list[Voucher]:
    """일자 오름차순 정렬

    sorted()는 안정 정렬이므로 같은 날짜의 전표는 입력(생성) 순서를 유지.
    """
    return sorted(vouchers, key=lambda v: v.date)


def compute_ledger(
    vouchers: Iterable[Voucher],
    scope: LedgerScope | None = None,
    opening: Balance | None = None,
) -> list[LedgerEntry]:
    """전표 → 누적 잔액 원장

    단일 순방향 패스로 (gold, kwd) 누적값을 유지하며
    각 전표 반영 후의 잔액을 행에 기록한다.

    Args:
        vouchers: 전표 목록 (정렬 여부 무관)
        scope: 원장 범위. 지정 시 범위 밖 계정의 전표는 제외
        opening: 시작 잔액 (기본: 0)

    Returns:
        전표 수와 같은 길이의 LedgerEntry 목록 (전표가 없으면 빈 목록)

    Raises:
        UnknownVoucherType: 규칙표에 없는 전표 유형. 부분 결과는 반환하지 않는다.
    """
    selected = [
        v for v in vouchers
        if scope is None or scope.includes(v.account_id)
    ]
    ordered = sort_vouchers(selected)

    start = opening or Balance.zero()
    gold_balance = start.gold
    kwd_balance = start.kwd

    entries: list[LedgerEntry] = []
    for voucher in ordered:
        gold_delta, kwd_delta = apply_effect(
            voucher.type, voucher.gold, voucher.kwd, voucher_id=voucher.id
        )
        gold_debit, gold_credit = split_delta(gold_delta)
        kwd_debit, kwd_credit = split_delta(kwd_delta)

        gold_balance += gold_delta
        kwd_balance += kwd_delta

        entries.append(LedgerEntry(
            voucher_id=voucher.id,
            date=voucher.date,
            type=voucher.type,
            description=voucher.display_description(),
            account_id=voucher.account_id,
            gold_debit=gold_debit,
            gold_credit=gold_credit,
            gold_balance=gold_balance,
            kwd_debit=kwd_debit,
            kwd_credit=kwd_credit,
            kwd_balance=kwd_balance,
        ))

    logger.debug(
        f"원장 계산 완료: scope={scope.label if scope else '-'}, "
        f"entries={len(entries)}"
    )
    return entries


def final_balance(entries: list[LedgerEntry]) -> Balance:
    """마지막 행의 누적 잔액 (빈 원장은 0)"""
    if not entries:
        return Balance.zero()
    return entries[-1].balance
