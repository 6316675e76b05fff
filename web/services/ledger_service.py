"""
원장 서비스

요청 스키마 → 도메인 모델 변환 후 core.ledger 순수 함수 호출.
결과는 응답 스키마용 dict 로 직렬화.
"""

import logging
from typing import Any, Iterable

from core.ledger import (
    Account,
    GroupSummary,
    LedgerEntry,
    TypeSummaryReport,
    Voucher,
    aggregate,
    apply_window,
    build_statement_rows,
    compute_ledger,
    compute_locker_ledger,
    compute_open_balance_ledger,
    final_balance,
    locker_gold_by_type,
    summarize_open_balance,
    summarize_types,
    window_totals,
)
from core.ledger.period import DateRange
from core.ledger.types import AccountType
from core.report.formatting import voucher_type_label
from core.types import LedgerScope

logger = logging.getLogger(__name__)

# 유형별 요약 보고서의 유형 표시 순서
TYPE_ORDER = [t.value for t in AccountType]


def entry_to_dict(entry: LedgerEntry) -> dict[str, Any]:
    """원장 행 → 응답 dict (유형 표시 이름 포함)"""
    data = entry.to_dict()
    data["type_label"] = voucher_type_label(entry.type)
    return data


def sort_accounts(accounts: Iterable[Account]) -> list[Account]:
    """account_no 오름차순 (보고서 표시 순서)"""
    return sorted(accounts, key=lambda a: a.account_no)


def resolve_scope(
    account_id: str | None,
    account_type: str | None,
    accounts: Iterable[Account],
) -> LedgerScope | None:
    """요청 파라미터 → 원장 범위 (둘 다 없으면 None)"""
    accounts = list(accounts)
    if account_id:
        label = next((a.name for a in accounts if a.id == account_id), account_id)
        return LedgerScope.for_account(account_id, label=label)
    if account_type:
        ids = [a.id for a in accounts if a.type == account_type]
        return LedgerScope.for_type(account_type, ids)
    return None


class LedgerService:
    """원장 계산 서비스

    상태 없음. 모든 입력은 메서드 인자로 받는다.
    UnknownVoucherType 등 core 예외는 잡지 않고 라우트로 전파.
    """

    def compute(self, vouchers: list[Voucher], scope: LedgerScope | None = None) -> dict[str, Any]:
        """전체 원장"""
        ledger = compute_ledger(vouchers, scope)
        return {
            "entries": [entry_to_dict(e) for e in ledger],
            "count": len(ledger),
            "final_balance": final_balance(ledger).to_dict(),
        }

    def statement(
        self,
        vouchers: list[Voucher],
        scope: LedgerScope | None,
        date_range: DateRange,
    ) -> dict[str, Any]:
        """기간 명세 (기초/기말 합성 행 포함)"""
        ledger = compute_ledger(vouchers, scope)
        window = apply_window(ledger, date_range)
        account_id = next(iter(scope.account_ids)) if scope and len(scope.account_ids) == 1 else None
        leading, body, trailing = build_statement_rows(window, date_range, account_id)
        return {
            "opening": window.opening.to_dict(),
            "closing": window.closing.to_dict(),
            "rows": [entry_to_dict(e) for e in leading + body + trailing],
            "transaction_count": len(body),
            "totals": window_totals(body).to_dict(),
        }

    def windowed_ledgers(
        self,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> list[tuple[Account, list[LedgerEntry]]]:
        """계정별 (기간 적용된) 원장, account_no 순

        각 원장 끝에 기말 잔액 합성 행을 붙인다. 기간 내 전표가 없는 계정도
        이월된 잔액(= 기초 잔액)으로 집계된다.
        """
        result = []
        for account in sort_accounts(accounts):
            ledger = compute_ledger(vouchers, LedgerScope.for_account(account.id, account.name))
            window = apply_window(ledger, date_range)
            closing = LedgerEntry.closing(window.closing, date_range.end, account.id)
            result.append((account, window.windowed + [closing]))
        return result

    def group_summary(
        self,
        account_type: str,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> GroupSummary:
        """계정 유형 그룹 요약"""
        members = [a for a in accounts if a.type == account_type]
        group = aggregate(self.windowed_ledgers(members, vouchers, date_range))
        if group.account_type is None:
            # 계정이 없는 유형도 유형명은 표시
            group = GroupSummary(account_type=account_type)
        return group

    def type_summary(
        self,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> TypeSummaryReport:
        """모든 계정 유형 요약 (고정 유형 순서, 알 수 없는 유형은 뒤에)"""
        types = TYPE_ORDER + sorted({a.type for a in accounts} - set(TYPE_ORDER))
        groups = [
            self.group_summary(t, accounts, vouchers, date_range)
            for t in types
        ]
        account_map = {a.id: a for a in accounts}
        in_range = [
            v for v in vouchers
            if v.account_id in account_map and date_range.contains(v.date)
        ]
        return summarize_types(groups, locker_gold_by_type(in_range, account_map))

    def locker_ledger(self, accounts: list[Account], vouchers: list[Voucher]) -> list[LedgerEntry]:
        """금고 금 원장 (기간 적용 전)"""
        return compute_locker_ledger(vouchers, {a.id: a for a in accounts})

    def locker_statement(
        self,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> dict[str, Any]:
        """금고 금 기간 명세"""
        ledger = self.locker_ledger(accounts, vouchers)
        window = apply_window(ledger, date_range)
        leading, body, trailing = build_statement_rows(window, date_range)
        return {
            "opening": window.opening.to_dict(),
            "closing": window.closing.to_dict(),
            "rows": [entry_to_dict(e) for e in leading + body + trailing],
            "transaction_count": len(body),
            "totals": window_totals(body).to_dict(),
        }

    def open_balance_ledger(self, accounts: list[Account], vouchers: list[Voucher]) -> list[LedgerEntry]:
        """시세 고정 원장 (기간 적용 전)"""
        return compute_open_balance_ledger(vouchers, {a.id: a for a in accounts})

    def open_balance_statement(
        self,
        accounts: list[Account],
        vouchers: list[Voucher],
        date_range: DateRange,
    ) -> dict[str, Any]:
        """시세 고정 기간 명세

        일반 명세와 달리 기초/기말 잔액 행을 항상 포함한다.
        """
        ledger = self.open_balance_ledger(accounts, vouchers)
        window = apply_window(ledger, date_range)
        rows = (
            [LedgerEntry.opening(window.opening, date_range.start)]
            + window.windowed
            + [LedgerEntry.closing(window.closing, date_range.end)]
        )
        return {
            "opening": window.opening.to_dict(),
            "closing": window.closing.to_dict(),
            "rows": [entry_to_dict(e) for e in rows],
            "transaction_count": len(window.windowed),
            "totals": window_totals(window.windowed).to_dict(),
            "summary": summarize_open_balance(window.windowed).to_dict(),
        }
