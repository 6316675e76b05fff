"""
보고서 레이아웃 엔진

원장/잔액 행을 고정 기하의 페이지로 나누고 캔버스에 그린다.
모든 보고서 종류가 같은 paginator + renderer 를 공유하며,
종류별 차이는 Statement (컬럼 세트, 헤더, 선두/후미 행) 로만 표현한다.
"""

from core.report.formatting import (
    clean_description,
    format_amount,
    format_balance,
    format_grouped,
    truncate,
    voucher_type_label,
)
from core.report.layout import ColumnSet, column_widths
from core.report.paginator import PageTooSmall, ReportError, ReportPage, RowLayout, paginate
from core.report.renderer import StatementRenderer
from core.report.statement import (
    Statement,
    TotalsRow,
    balances_statement,
    group_ledger_statement,
    ledger_statement,
    locker_statement,
    open_balance_statement,
    type_summary_statement,
)

__all__ = [
    # 예외
    "ReportError",
    "PageTooSmall",
    # 페이지 분할
    "ReportPage",
    "RowLayout",
    "paginate",
    # 레이아웃
    "ColumnSet",
    "column_widths",
    # 포맷
    "format_balance",
    "format_amount",
    "format_grouped",
    "clean_description",
    "truncate",
    "voucher_type_label",
    # 명세서
    "Statement",
    "TotalsRow",
    "ledger_statement",
    "group_ledger_statement",
    "locker_statement",
    "open_balance_statement",
    "balances_statement",
    "type_summary_statement",
    # 렌더링
    "StatementRenderer",
]
