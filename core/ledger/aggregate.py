"""
계정 유형별 잔액 집계

같은 유형 계정들의 (기간 적용된) 원장을 계정별 요약 + 그룹 합계로 묶는다.
계정 간 상계는 하지 않는 단순 합산이며 입력 순서(account_no 오름차순)를 그대로 유지한다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence

from core.ledger.models import Account, LedgerEntry
from core.utils.amounts import ZERO, sum_amounts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountSummary:
    """계정별 요약 (기간 말 잔액 + 거래 수)"""

    account_id: str
    account_no: int
    name: str
    gold_balance: Decimal = ZERO
    kwd_balance: Decimal = ZERO
    transaction_count: int = 0

    @property
    def is_active(self) -> bool:
        return self.transaction_count > 0

    @property
    def is_zero_balance(self) -> bool:
        return self.gold_balance == 0 and self.kwd_balance == 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "account_no": self.account_no,
            "name": self.name,
            "gold_balance": str(self.gold_balance),
            "kwd_balance": str(self.kwd_balance),
            "transaction_count": self.transaction_count,
        }


@dataclass(frozen=True)
class GroupSummary:
    """계정 유형 그룹 합계"""

    account_type: str | None
    accounts: tuple[AccountSummary, ...] = ()
    total_gold: Decimal = ZERO
    total_kwd: Decimal = ZERO
    total_transactions: int = 0
    accounts_with_positive_gold: int = 0
    accounts_with_positive_kwd: int = 0
    accounts_with_zero_balance: int = 0
    active_accounts: int = 0

    @property
    def total_accounts(self) -> int:
        return len(self.accounts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_type": self.account_type,
            "accounts": [a.to_dict() for a in self.accounts],
            "total_gold": str(self.total_gold),
            "total_kwd": str(self.total_kwd),
            "total_transactions": self.total_transactions,
            "total_accounts": self.total_accounts,
            "accounts_with_positive_gold": self.accounts_with_positive_gold,
            "accounts_with_positive_kwd": self.accounts_with_positive_kwd,
            "accounts_with_zero_balance": self.accounts_with_zero_balance,
            "active_accounts": self.active_accounts,
        }


def summarize_account(account: Account, entries: Sequence[LedgerEntry]) -> AccountSummary:
    """계정 1개 요약

    합성 행(기초/기말)은 거래 수에서 제외. 잔액은 마지막 행 기준이며 원장이 비면 0.
    기간 내 전표가 없는 계정은 끝에 붙은 기말 합성 행의 이월 잔액을 쓴다.
    """
    transactions = [e for e in entries if not e.is_synthetic]
    last = entries[-1] if entries else None
    return AccountSummary(
        account_id=account.id,
        account_no=account.account_no,
        name=account.name,
        gold_balance=last.gold_balance if last else ZERO,
        kwd_balance=last.kwd_balance if last else ZERO,
        transaction_count=len(transactions),
    )


def aggregate(per_account: Iterable[tuple[Account, Sequence[LedgerEntry]]]) -> GroupSummary:
    """계정별 원장 → 그룹 요약

    Args:
        per_account: (Account, 기간 적용된 원장) 목록. 모두 같은 유형이어야 함

    Returns:
        GroupSummary (계정 순서는 입력 순서 유지)

    Raises:
        ValueError: 서로 다른 계정 유형이 섞여 있음
    """
    summaries: list[AccountSummary] = []
    account_type: str | None = None

    for account, entries in per_account:
        if account_type is None:
            account_type = account.type
        elif account.type != account_type:
            raise ValueError(
                f"한 그룹에 여러 계정 유형이 섞여 있습니다: "
                f"{account_type!r}, {account.type!r} (account_id={account.id})"
            )
        summaries.append(summarize_account(account, entries))

    group = GroupSummary(
        account_type=account_type,
        accounts=tuple(summaries),
        total_gold=sum_amounts(s.gold_balance for s in summaries),
        total_kwd=sum_amounts(s.kwd_balance for s in summaries),
        total_transactions=sum(s.transaction_count for s in summaries),
        accounts_with_positive_gold=sum(1 for s in summaries if s.gold_balance > 0),
        accounts_with_positive_kwd=sum(1 for s in summaries if s.kwd_balance > 0),
        accounts_with_zero_balance=sum(1 for s in summaries if s.is_zero_balance),
        active_accounts=sum(1 for s in summaries if s.is_active),
    )
    logger.debug(
        f"그룹 집계: type={account_type}, accounts={group.total_accounts}, "
        f"transactions={group.total_transactions}"
    )
    return group


@dataclass(frozen=True)
class TypeSummaryRow:
    """유형별 요약 보고서의 1행"""

    account_type: str
    total_accounts: int
    total_transactions: int
    gold_balance: Decimal
    kwd_balance: Decimal
    locker_gold: Decimal = ZERO

    @property
    def status(self) -> str:
        return "Active" if self.total_transactions > 0 else "Inactive"

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_type": self.account_type,
            "total_accounts": self.total_accounts,
            "total_transactions": self.total_transactions,
            "gold_balance": str(self.gold_balance),
            "kwd_balance": str(self.kwd_balance),
            "locker_gold": str(self.locker_gold),
            "status": self.status,
        }


@dataclass(frozen=True)
class TypeSummaryReport:
    """여러 유형 그룹의 전체 합계"""

    rows: tuple[TypeSummaryRow, ...] = field(default_factory=tuple)
    overall_gold: Decimal = ZERO
    overall_kwd: Decimal = ZERO
    total_accounts: int = 0
    total_active_accounts: int = 0
    total_transactions: int = 0
    locker_total_gold: Decimal = ZERO

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [r.to_dict() for r in self.rows],
            "overall_gold": str(self.overall_gold),
            "overall_kwd": str(self.overall_kwd),
            "total_accounts": self.total_accounts,
            "total_active_accounts": self.total_active_accounts,
            "total_transactions": self.total_transactions,
            "locker_total_gold": str(self.locker_total_gold),
        }


def summarize_types(
    groups: Iterable[GroupSummary],
    locker_gold: Mapping[str, Decimal] | None = None,
) -> TypeSummaryReport:
    """유형별 그룹 요약 → 전체 요약 보고서

    Args:
        groups: 유형별 GroupSummary (표시 순서 유지)
        locker_gold: 유형별 금고 금 변동 합계 (locker.locker_gold_by_type 결과)
    """
    locker_gold = locker_gold or {}
    groups = list(groups)
    rows = tuple(
        TypeSummaryRow(
            account_type=g.account_type or "-",
            total_accounts=g.total_accounts,
            total_transactions=g.total_transactions,
            gold_balance=g.total_gold,
            kwd_balance=g.total_kwd,
            locker_gold=locker_gold.get(g.account_type or "", ZERO),
        )
        for g in groups
    )
    return TypeSummaryReport(
        rows=rows,
        overall_gold=sum_amounts(r.gold_balance for r in rows),
        overall_kwd=sum_amounts(r.kwd_balance for r in rows),
        total_accounts=sum(r.total_accounts for r in rows),
        total_active_accounts=sum(g.active_accounts for g in groups),
        total_transactions=sum(r.total_transactions for r in rows),
        locker_total_gold=sum_amounts(r.locker_gold for r in rows),
    )
