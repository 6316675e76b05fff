"""
시세 고정(Open Balance) 원장

회사 전체의 미정산 시세 고정 포지션. 모든 계정의 전표 중 두 종류만 반영한다.

    전표                                   gold     kwd
    Market 계정 REC (gold_rate 있음)       +gold    +fixing_amount
    GFV (모든 계정)                        -gold    -kwd
    그 외                                  행 없음

기초 잔액, 기간 필터는 일반 원장과 같은 apply_window 를 사용한다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence

from core.ledger.calculator import sort_vouchers
from core.ledger.models import Account, LedgerEntry, Voucher
from core.ledger.rules import effect_signs, split_delta
from core.ledger.types import AccountType, VoucherType
from core.utils.amounts import ZERO

logger = logging.getLogger(__name__)


def is_fixing_receipt(voucher: Voucher, account: Account) -> bool:
    """Market 계정의 시세 고정 수령 전표 (gold_rate 가 0 보다 큼)"""
    return (
        voucher.type == VoucherType.RECEIPT.value
        and account.type == AccountType.MARKET.value
        and bool(voucher.gold_rate)
    )


def open_balance_change(voucher: Voucher, account: Account) -> tuple[Decimal, Decimal] | None:
    """전표 1건의 시세 고정 잔액 변동 (gold_delta, kwd_delta)

    Returns:
        반영 대상이 아니면 None

    Raises:
        UnknownVoucherType: 규칙표에 없는 전표 유형
    """
    effect_signs(voucher.type, voucher.id)

    if is_fixing_receipt(voucher, account):
        return voucher.gold, voucher.fixing_amount or ZERO
    if voucher.type == VoucherType.GOLD_FIXING.value:
        return -voucher.gold, -voucher.kwd
    return None


def _description(voucher: Voucher) -> str:
    description = voucher.description or ""
    if voucher.mvn:
        description = f"{voucher.mvn} - {description}" if description else f"Voucher {voucher.mvn}"
    return description or f"Transaction {voucher.id[:8]}"


def compute_open_balance_ledger(
    vouchers: Iterable[Voucher],
    accounts: Mapping[str, Account],
) -> list[LedgerEntry]:
    """시세 고정 누적 원장

    Args:
        vouchers: 전체 전표
        accounts: account_id → Account

    Returns:
        금/KWD 컬럼이 모두 채워진 LedgerEntry 목록 (전표의 gold_rate 유지)

    Raises:
        UnknownVoucherType: 규칙표에 없는 전표 유형
        KeyError: accounts 에 없는 계정의 전표
    """
    gold = kwd = ZERO
    entries: list[LedgerEntry] = []

    for voucher in sort_vouchers(vouchers):
        account = accounts[voucher.account_id]
        change = open_balance_change(voucher, account)
        if change is None:
            continue

        gold_delta, kwd_delta = change
        gold += gold_delta
        kwd += kwd_delta
        gold_debit, gold_credit = split_delta(gold_delta)
        kwd_debit, kwd_credit = split_delta(kwd_delta)
        entries.append(LedgerEntry(
            voucher_id=voucher.id,
            date=voucher.date,
            type=voucher.type,
            description=_description(voucher),
            account_id=voucher.account_id,
            gold_debit=gold_debit,
            gold_credit=gold_credit,
            gold_balance=gold,
            kwd_debit=kwd_debit,
            kwd_credit=kwd_credit,
            kwd_balance=kwd,
            gold_rate=voucher.gold_rate,
        ))

    logger.debug(f"시세 고정 원장 계산 완료: entries={len(entries)}, gold={gold}, kwd={kwd}")
    return entries


@dataclass(frozen=True)
class VoucherSummary:
    """기간 내 시세 고정 전표 수"""

    market_rec: int = 0
    gfv: int = 0

    @property
    def total(self) -> int:
        return self.market_rec + self.gfv

    def to_dict(self) -> dict[str, Any]:
        return {"market_rec": self.market_rec, "gfv": self.gfv, "total": self.total}


def summarize_open_balance(entries: Sequence[LedgerEntry]) -> VoucherSummary:
    """기간 내 행의 유형별 전표 수 (합성 행 제외)"""
    rows = [e for e in entries if not e.is_synthetic]
    return VoucherSummary(
        market_rec=sum(1 for e in rows if e.type == VoucherType.RECEIPT.value),
        gfv=sum(1 for e in rows if e.type == VoucherType.GOLD_FIXING.value),
    )
