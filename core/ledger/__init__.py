"""
금/KWD 원장 계산 엔진

전표 목록에서 계정(또는 계정 유형) 단위의 누적 잔액 원장을 만들고,
기간 적용, 그룹 집계, 금고 금 원장, 시세 고정 원장을 제공한다. 모두 순수 함수.

사용 예시:
```python
from core.ledger import DateRange, Voucher, apply_window, compute_ledger

ledger = compute_ledger(vouchers, scope=LedgerScope.for_account(account.id))
window = apply_window(ledger, DateRange(date(2024, 2, 1), date(2024, 2, 29)))

window.opening  # 1월 말 누적 잔액
window.closing  # 2월 마지막 전표 후 잔액
```
"""

from core.ledger.aggregate import (
    AccountSummary,
    GroupSummary,
    TypeSummaryReport,
    TypeSummaryRow,
    aggregate,
    summarize_types,
)
from core.ledger.calculator import compute_ledger, final_balance, sort_vouchers
from core.ledger.locker import compute_locker_ledger, locker_change, locker_gold_by_type
from core.ledger.models import Account, Balance, LedgerEntry, Voucher
from core.ledger.open_balance import (
    VoucherSummary,
    compute_open_balance_ledger,
    open_balance_change,
    summarize_open_balance,
)
from core.ledger.period import (
    DateRange,
    StatementTotals,
    WindowResult,
    apply_window,
    build_statement_rows,
    window_totals,
)
from core.ledger.rules import (
    LedgerError,
    UnknownVoucherType,
    apply_effect,
    split_delta,
)
from core.ledger.types import AccountType, VoucherType

__all__ = [
    # 모델
    "Account",
    "Balance",
    "LedgerEntry",
    "Voucher",
    # Enum
    "AccountType",
    "VoucherType",
    # 예외
    "LedgerError",
    "UnknownVoucherType",
    # 규칙
    "apply_effect",
    "split_delta",
    # 계산
    "compute_ledger",
    "final_balance",
    "sort_vouchers",
    # 기간
    "DateRange",
    "WindowResult",
    "StatementTotals",
    "apply_window",
    "build_statement_rows",
    "window_totals",
    # 집계
    "AccountSummary",
    "GroupSummary",
    "TypeSummaryRow",
    "TypeSummaryReport",
    "aggregate",
    "summarize_types",
    # 금고
    "compute_locker_ledger",
    "locker_change",
    "locker_gold_by_type",
    # 시세 고정
    "VoucherSummary",
    "compute_open_balance_ledger",
    "open_balance_change",
    "summarize_open_balance",
]
