"""
기간 필터 및 기초 잔액 산출

전체 원장을 기간 이전(기초 잔액 1행으로 압축) / 기간 내 / 기말 잔액으로 나눈다.
기초/기말 합성 행은 저장하지 않고 조회마다 다시 만든다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from core.ledger.models import Balance, LedgerEntry
from core.utils.amounts import ZERO, sum_amounts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateRange:
    """조회 기간 (양 끝 포함)

    start/end 가 None 이면 해당 방향은 무제한.
    """

    start: date | None = None
    end: date | None = None

    @property
    def is_unbounded(self) -> bool:
        """양쪽 모두 비어 있음 ("전체 보기")"""
        return self.start is None and self.end is None

    @property
    def is_inverted(self) -> bool:
        """시작일이 종료일보다 뒤 (빈 기간으로 처리)"""
        return (
            self.start is not None
            and self.end is not None
            and self.start > self.end
        )

    def contains(self, day: date) -> bool:
        if self.start is not None and day < self.start:
            return False
        if self.end is not None and day > self.end:
            return False
        return True


@dataclass(frozen=True)
class WindowResult:
    """기간 적용 결과"""

    opening: Balance
    windowed: list[LedgerEntry]
    closing: Balance


@dataclass(frozen=True)
class StatementTotals:
    """기간 내 차변/대변 합계"""

    gold_debit: Decimal = ZERO
    gold_credit: Decimal = ZERO
    kwd_debit: Decimal = ZERO
    kwd_credit: Decimal = ZERO

    def to_dict(self) -> dict[str, str]:
        return {
            "gold_debit": str(self.gold_debit),
            "gold_credit": str(self.gold_credit),
            "kwd_debit": str(self.kwd_debit),
            "kwd_credit": str(self.kwd_credit),
        }


def opening_balance(ledger: list[LedgerEntry], start: date | None) -> Balance:
    """start 이전(같은 날 제외) 마지막 행의 누적 잔액

    start 가 없거나 이전 행이 없으면 0.
    """
    if start is None:
        return Balance.zero()
    for entry in reversed(ledger):
        if entry.date is not None and entry.date < start:
            return entry.balance
    return Balance.zero()


def apply_window(ledger: list[LedgerEntry], date_range: DateRange | None = None) -> WindowResult:
    """원장에 기간 적용

    Args:
        ledger: compute_ledger() 결과 (날짜순)
        date_range: 조회 기간 (None이면 전체)

    Returns:
        WindowResult(opening, windowed, closing)

    start > end 인 경우 예외 없이 빈 기간을 반환하며,
    기초 = 기말 = start 경계 시점의 잔액.
    """
    date_range = date_range or DateRange()
    opening = opening_balance(ledger, date_range.start)

    if date_range.is_inverted:
        logger.warning(
            f"시작일이 종료일보다 늦습니다: {date_range.start} > {date_range.end}, "
            f"빈 기간으로 처리"
        )
        return WindowResult(opening=opening, windowed=[], closing=opening)

    if date_range.is_unbounded:
        windowed = list(ledger)
    else:
        windowed = [
            entry for entry in ledger
            if entry.date is not None and date_range.contains(entry.date)
        ]

    closing = windowed[-1].balance if windowed else opening
    return WindowResult(opening=opening, windowed=windowed, closing=closing)


def window_totals(windowed: list[LedgerEntry]) -> StatementTotals:
    """기간 내 행의 차변/대변 합계 (합성 행 제외)"""
    rows = [e for e in windowed if not e.is_synthetic]
    return StatementTotals(
        gold_debit=sum_amounts(e.gold_debit for e in rows),
        gold_credit=sum_amounts(e.gold_credit for e in rows),
        kwd_debit=sum_amounts(e.kwd_debit for e in rows),
        kwd_credit=sum_amounts(e.kwd_credit for e in rows),
    )


def build_statement_rows(
    window: WindowResult,
    date_range: DateRange | None = None,
    account_id: str | None = None,
) -> tuple[list[LedgerEntry], list[LedgerEntry], list[LedgerEntry]]:
    """보고서용 (선두, 본문, 후미) 행 구성

    기초 잔액 행: start 가 있거나 기간이 전체일 때.
    기말 잔액 행: end 가 있거나 기간이 전체일 때.
    날짜가 없는 합성 행은 표시 시 "Beginning"/"Present" 로 렌더링된다.
    """
    date_range = date_range or DateRange()
    leading: list[LedgerEntry] = []
    trailing: list[LedgerEntry] = []

    if date_range.start is not None or date_range.is_unbounded:
        leading.append(LedgerEntry.opening(window.opening, date_range.start, account_id))
    if date_range.end is not None or date_range.is_unbounded:
        trailing.append(LedgerEntry.closing(window.closing, date_range.end, account_id))

    return leading, list(window.windowed), trailing
