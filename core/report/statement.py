"""
보고서 명세서 구성

보고서 종류(단일 계정, 유형 전체, 금고, 시세 고정, 잔액, 유형 요약)마다 다른 것은
컬럼 세트, 헤더 문구, 선두/후미 행뿐이다. 이 모듈이 그것을 Statement 로 묶고,
페이지 분할과 그리기는 paginator / renderer 가 공통으로 처리한다.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, Mapping, Sequence

from core.ledger.aggregate import GroupSummary, TypeSummaryReport
from core.ledger.models import Account, LedgerEntry
from core.ledger.open_balance import summarize_open_balance
from core.ledger.period import DateRange, apply_window, build_statement_rows, window_totals
from core.ledger.types import is_gold_only_type
from core.report.formatting import format_balance
from core.report.layout import (
    LOCKER_LEDGER,
    OPEN_BALANCE,
    TYPE_SUMMARY,
    ColumnSet,
    balances_columns,
    group_ledger_columns,
    ledger_columns,
)
from core.types import ReportKind
from core.utils.timezone import format_display_date

# 설명 컬럼 최대 글자 수
DESCRIPTION_LIMIT = 40
DESCRIPTION_LIMIT_GOLD_ONLY = 50
DESCRIPTION_LIMIT_OPEN_BALANCE = 35


@dataclass(frozen=True)
class TotalsRow:
    """합계 행

    values 는 컬럼 key → 값. 없는 컬럼은 빈 칸.
    """

    label: str = "Totals"
    values: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SummaryLine:
    """헤더 오른쪽 요약 문구 (잔액이면 부호별 색상)"""

    text: str
    value: Decimal | None = None


@dataclass(frozen=True)
class StatementHeader:
    """페이지 상단 헤더 내용"""

    title: str
    footer_label: str
    period: str = ""
    card_lines: tuple[str, ...] = ()
    summary: tuple[SummaryLine, ...] = ()


@dataclass(frozen=True)
class Statement:
    """렌더링 직전의 보고서 1건"""

    kind: ReportKind
    column_set: ColumnSet
    header: StatementHeader
    body: tuple[Any, ...]
    leading: tuple[Any, ...] = ()
    trailing: tuple[Any, ...] = ()
    accounts: Mapping[str, Account] = field(default_factory=dict)
    description_limit: int = DESCRIPTION_LIMIT

    @property
    def row_count(self) -> int:
        return len(self.leading) + len(self.body) + len(self.trailing)


def period_text(date_range: DateRange | None) -> str:
    """ "Period: 01/02/2024 to Present" """
    date_range = date_range or DateRange()
    start = format_display_date(date_range.start, "Beginning")
    end = format_display_date(date_range.end, "Present")
    return f"Period: {start} to {end}"


def _ledger_totals_row(windowed: Sequence[LedgerEntry], closing: LedgerEntry | None, gold_only: bool) -> TotalsRow:
    totals = window_totals(list(windowed))
    values: dict[str, Any] = {
        "gold_debit": totals.gold_debit,
        "gold_credit": totals.gold_credit,
    }
    if closing is not None:
        values["gold_balance"] = closing.gold_balance
    if not gold_only:
        values["kwd_debit"] = totals.kwd_debit
        values["kwd_credit"] = totals.kwd_credit
        if closing is not None:
            values["kwd_balance"] = closing.kwd_balance
    return TotalsRow(label="Totals", values=values)


def _windowed_rows(
    ledger: Sequence[LedgerEntry],
    date_range: DateRange | None,
    account_id: str | None,
    gold_only: bool,
) -> tuple[tuple[Any, ...], tuple[Any, ...], tuple[Any, ...], LedgerEntry]:
    window = apply_window(list(ledger), date_range)
    leading, body, trailing = build_statement_rows(window, date_range, account_id)
    closing = LedgerEntry.closing(window.closing, date_range.end if date_range else None, account_id)
    totals = _ledger_totals_row(body, closing, gold_only)
    return tuple(leading), tuple(body), tuple(trailing) + (totals,), closing


def ledger_statement(
    account: Account,
    ledger: Sequence[LedgerEntry],
    date_range: DateRange | None = None,
) -> Statement:
    """단일 계정 원장 보고서

    Args:
        account: 대상 계정
        ledger: compute_ledger() 결과 (기간 적용 전 전체 원장)
        date_range: 조회 기간
    """
    gold_only = is_gold_only_type(account.type)
    leading, body, trailing, closing = _windowed_rows(ledger, date_range, account.id, gold_only)

    summary = [SummaryLine(f"Closing Gold: {format_balance(closing.gold_balance)}", closing.gold_balance)]
    if not gold_only:
        summary.append(SummaryLine(
            f"Closing Amount: {format_balance(closing.kwd_balance)} KWD", closing.kwd_balance
        ))

    header = StatementHeader(
        title="Account Ledger Statement",
        footer_label="Account Ledger",
        period=period_text(date_range),
        card_lines=(
            f"Account No: {account.account_no}",
            " | ".join([
                f"Name: {account.name}",
                f"Type: {account.type}",
                f"Phone: {account.phone or 'N/A'}",
                f"CR/ID: {account.cr_or_civil_id_no or 'N/A'}",
            ]),
        ),
        summary=tuple(summary),
    )
    return Statement(
        kind=ReportKind.LEDGER,
        column_set=ledger_columns(gold_only),
        header=header,
        leading=leading,
        body=body,
        trailing=trailing,
        accounts={account.id: account},
        description_limit=DESCRIPTION_LIMIT_GOLD_ONLY if gold_only else DESCRIPTION_LIMIT,
    )


def group_ledger_statement(
    account_type: str,
    accounts: Iterable[Account],
    ledger: Sequence[LedgerEntry],
    date_range: DateRange | None = None,
) -> Statement:
    """계정 유형 전체 원장 보고서

    ledger 는 LedgerScope.for_type() 범위로 계산한 통합 원장.
    """
    gold_only = is_gold_only_type(account_type)
    account_map = {a.id: a for a in accounts}
    leading, body, trailing, closing = _windowed_rows(ledger, date_range, None, gold_only)

    summary = [SummaryLine(f"Total Gold: {format_balance(closing.gold_balance)}", closing.gold_balance)]
    if not gold_only:
        summary.append(SummaryLine(
            f"Total Amount: {format_balance(closing.kwd_balance)} KWD", closing.kwd_balance
        ))

    header = StatementHeader(
        title=f"All {account_type} Accounts - Ledger Statement",
        footer_label=f"{account_type} Ledger",
        period=f"{period_text(date_range)} | Accounts: {len(account_map)}",
        summary=tuple(summary),
    )
    return Statement(
        kind=ReportKind.GROUP_LEDGER,
        column_set=group_ledger_columns(gold_only),
        header=header,
        leading=leading,
        body=body,
        trailing=trailing,
        accounts=account_map,
        description_limit=DESCRIPTION_LIMIT_GOLD_ONLY if gold_only else DESCRIPTION_LIMIT,
    )


def locker_statement(
    ledger: Sequence[LedgerEntry],
    accounts: Mapping[str, Account],
    date_range: DateRange | None = None,
) -> Statement:
    """금고 금 원장 보고서

    ledger 는 compute_locker_ledger() 결과.
    """
    leading, body, trailing, closing = _windowed_rows(ledger, date_range, None, gold_only=True)
    header = StatementHeader(
        title="Locker Gold Ledger Statement",
        footer_label="Locker Gold Ledger",
        period=period_text(date_range),
        summary=(SummaryLine(f"Locker Gold: {format_balance(closing.gold_balance)}", closing.gold_balance),),
    )
    return Statement(
        kind=ReportKind.LOCKER_LEDGER,
        column_set=LOCKER_LEDGER,
        header=header,
        leading=leading,
        body=body,
        trailing=trailing,
        accounts=dict(accounts),
    )


def open_balance_statement(
    ledger: Sequence[LedgerEntry],
    accounts: Mapping[str, Account],
    date_range: DateRange | None = None,
) -> Statement:
    """시세 고정 원장 보고서

    ledger 는 compute_open_balance_ledger() 결과.
    기간 지정 여부와 무관하게 기초/기말 잔액 행을 항상 둔다.
    """
    date_range = date_range or DateRange()
    window = apply_window(list(ledger), date_range)
    opening = LedgerEntry.opening(window.opening, date_range.start)
    closing = LedgerEntry.closing(window.closing, date_range.end)
    counts = summarize_open_balance(window.windowed)

    header = StatementHeader(
        title="Open Balance Ledger",
        footer_label="Open Balance Ledger",
        period=(
            f"{period_text(date_range)} | Transactions: {counts.total} total "
            f"({counts.market_rec} REC, {counts.gfv} GFV)"
        ),
        summary=(
            SummaryLine(f"Closing Gold: {format_balance(closing.gold_balance)}", closing.gold_balance),
            SummaryLine(f"Closing Amount: {format_balance(closing.kwd_balance)} KWD", closing.kwd_balance),
        ),
    )
    return Statement(
        kind=ReportKind.OPEN_BALANCE,
        column_set=OPEN_BALANCE,
        header=header,
        leading=(opening,),
        body=tuple(window.windowed),
        trailing=(closing, _ledger_totals_row(window.windowed, closing, gold_only=False)),
        accounts=dict(accounts),
        description_limit=DESCRIPTION_LIMIT_OPEN_BALANCE,
    )


def balances_statement(
    group: GroupSummary,
    accounts: Mapping[str, Account] | None = None,
    date_range: DateRange | None = None,
) -> Statement:
    """계정별 잔액 보고서

    accounts 는 전화번호 표시용 (없으면 "N/A").
    """
    account_type = group.account_type or "-"
    gold_only = is_gold_only_type(group.account_type)

    values: dict[str, Any] = {
        "gold_balance": group.total_gold,
        "transactions": group.total_transactions,
    }
    summary = [SummaryLine(f"Total Gold: {format_balance(group.total_gold)}", group.total_gold)]
    if not gold_only:
        values["kwd_balance"] = group.total_kwd
        summary.append(SummaryLine(f"Total Amount: {format_balance(group.total_kwd)} KWD", group.total_kwd))

    header = StatementHeader(
        title=f"{account_type} Accounts - Balance Summary",
        footer_label=f"{account_type} Balances",
        period=(
            f"{period_text(date_range)} | Accounts: {group.total_accounts} | "
            f"Active: {group.active_accounts}"
        ),
        summary=tuple(summary),
    )
    return Statement(
        kind=ReportKind.BALANCES,
        column_set=balances_columns(gold_only),
        header=header,
        body=group.accounts,
        trailing=(TotalsRow(label="Totals", values=values),),
        accounts=dict(accounts or {}),
    )


def type_summary_statement(report: TypeSummaryReport) -> Statement:
    """계정 유형별 요약 보고서"""
    totals = TotalsRow(
        label="Overall",
        values={
            "accounts": report.total_accounts,
            "transactions": report.total_transactions,
            "gold_balance": report.overall_gold,
            "kwd_balance": report.overall_kwd,
            "locker_gold": report.locker_total_gold,
            "status": "Active" if report.total_transactions > 0 else "Inactive",
        },
    )
    header = StatementHeader(
        title="Account Type Summary",
        footer_label="Account Type Summary",
        period=(
            f"Account Types: {len(report.rows)} | "
            f"Active Accounts: {report.total_active_accounts}"
        ),
        summary=(
            SummaryLine(f"Overall Gold: {format_balance(report.overall_gold)}", report.overall_gold),
            SummaryLine(f"Overall Amount: {format_balance(report.overall_kwd)} KWD", report.overall_kwd),
        ),
    )
    return Statement(
        kind=ReportKind.TYPE_SUMMARY,
        column_set=TYPE_SUMMARY,
        header=header,
        body=report.rows,
        trailing=(totals,),
    )
