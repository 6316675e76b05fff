"""
보고서 컬럼 세트 및 컬럼 폭 계산

각 보고서는 고정 기본 폭 벡터를 갖고, 테이블 폭이 남으면 남는 폭을 나눠 준다.
기본 폭보다 줄어드는 일은 없다.
"""

from dataclasses import dataclass


# 컬럼 그룹 (테이블 헤더 위 밴드)
GOLD_GROUP = "gold"
AMOUNT_GROUP = "amount"

GROUP_LABELS: dict[str, str] = {
    GOLD_GROUP: "GOLD (g)",
    AMOUNT_GROUP: "AMOUNT (KWD)",
}


@dataclass(frozen=True)
class Column:
    """테이블 컬럼 1개

    key 는 렌더러가 셀 값을 꺼낼 때 쓰는 이름.
    """

    key: str
    header: str
    width: float
    align: str = "left"  # left | center | right
    group: str | None = None
    is_balance: bool = False  # 부호에 따라 색상 적용


@dataclass(frozen=True)
class ColumnSet:
    """보고서 1종의 컬럼 구성

    description_weight > 0 이면 남는 폭의 해당 비율을 description 컬럼에 먼저 준다.
    """

    name: str
    columns: tuple[Column, ...]
    description_weight: float = 0.0

    @property
    def base_widths(self) -> list[float]:
        return [c.width for c in self.columns]

    @property
    def headers(self) -> list[str]:
        return [c.header for c in self.columns]

    @property
    def keys(self) -> list[str]:
        return [c.key for c in self.columns]

    @property
    def has_groups(self) -> bool:
        return any(c.group for c in self.columns)

    def index_of(self, key: str) -> int | None:
        for i, column in enumerate(self.columns):
            if column.key == key:
                return i
        return None

    def widths(self, table_width: float) -> list[float]:
        """테이블 폭에 맞춘 컬럼 폭"""
        return column_widths(
            self.base_widths,
            table_width,
            weighted_index=self.index_of("description"),
            weight=self.description_weight,
        )


def column_widths(
    base_widths: list[float],
    table_width: float,
    weighted_index: int | None = None,
    weight: float = 0.0,
) -> list[float]:
    """기본 폭 벡터를 테이블 폭에 맞춘다

    Args:
        base_widths: 컬럼별 기본 폭
        table_width: 테이블 전체 폭
        weighted_index: 추가 몫을 받을 컬럼 인덱스 (None이면 균등 분배)
        weight: weighted_index 컬럼에 먼저 줄 남는 폭 비율 (0~1)

    Returns:
        컬럼 폭 목록. missing <= 0 이면 기본 폭 그대로

    Example:
        >>> column_widths([100, 100], 260)
        [130.0, 130.0]
    """
    widths = [float(w) for w in base_widths]
    missing = table_width - sum(widths)
    if missing <= 0 or not widths:
        return widths

    if weighted_index is None or weight <= 0:
        extra = missing / len(widths)
        return [w + extra for w in widths]

    weight = min(weight, 1.0)
    bonus = missing * weight
    extra = (missing - bonus) / len(widths)
    widths = [w + extra for w in widths]
    widths[weighted_index] += bonus
    return widths


def group_spans(column_set: ColumnSet, widths: list[float]) -> list[tuple[str, float, float]]:
    """컬럼 그룹 밴드의 (라벨, 시작 x 오프셋, 폭)

    연속된 같은 그룹 컬럼을 하나의 밴드로 묶는다.
    """
    spans: list[tuple[str, float, float]] = []
    offset = 0.0
    current: str | None = None
    start = 0.0
    span_width = 0.0

    for column, width in zip(column_set.columns, widths):
        if column.group != current:
            if current is not None:
                spans.append((GROUP_LABELS.get(current, current), start, span_width))
            current = column.group
            start = offset
            span_width = 0.0
        span_width += width
        offset += width

    if current is not None:
        spans.append((GROUP_LABELS.get(current, current), start, span_width))
    return spans


def _gold_columns(debit: float, credit: float, balance: float) -> tuple[Column, ...]:
    return (
        Column("gold_debit", "Debit", debit, "right", GOLD_GROUP),
        Column("gold_credit", "Credit", credit, "right", GOLD_GROUP),
        Column("gold_balance", "Balance", balance, "right", GOLD_GROUP, is_balance=True),
    )


def _amount_columns(debit: float, credit: float, balance: float) -> tuple[Column, ...]:
    return (
        Column("kwd_debit", "Debit", debit, "right", AMOUNT_GROUP),
        Column("kwd_credit", "Credit", credit, "right", AMOUNT_GROUP),
        Column("kwd_balance", "Balance", balance, "right", AMOUNT_GROUP, is_balance=True),
    )


# 단일 계정 원장
LEDGER = ColumnSet(
    name="ledger",
    columns=(
        Column("date", "Date", 50),
        Column("type", "Type", 40, "center"),
        Column("description", "Description", 200),
        *_gold_columns(60, 60, 75),
        *_amount_columns(60, 60, 75),
    ),
)

# 단일 계정 원장 (Project: 금 전용)
LEDGER_GOLD_ONLY = ColumnSet(
    name="ledger_gold_only",
    columns=(
        Column("date", "Date", 50),
        Column("type", "Type", 40, "center"),
        Column("description", "Description", 270),
        *_gold_columns(70, 70, 90),
    ),
)

# 계정 유형 전체 원장
GROUP_LEDGER = ColumnSet(
    name="group_ledger",
    columns=(
        Column("date", "Date", 55),
        Column("account", "Account", 85),
        Column("type", "Type", 35, "center"),
        Column("description", "Description", 150),
        *_gold_columns(60, 60, 85),
        *_amount_columns(60, 60, 85),
    ),
)

GROUP_LEDGER_GOLD_ONLY = ColumnSet(
    name="group_ledger_gold_only",
    columns=(
        Column("date", "Date", 60),
        Column("account", "Account", 90),
        Column("type", "Type", 40, "center"),
        Column("description", "Description", 200),
        *_gold_columns(70, 70, 100),
    ),
)

# 금고 금 원장
LOCKER_LEDGER = ColumnSet(
    name="locker_ledger",
    columns=(
        Column("date", "Date", 50),
        Column("account", "Account", 90),
        Column("type", "Type", 40, "center"),
        Column("description", "Description", 180),
        *_gold_columns(65, 65, 85),
    ),
)

# 시세 고정 원장 (회사 전체)
OPEN_BALANCE = ColumnSet(
    name="open_balance",
    columns=(
        Column("date", "Date", 50),
        Column("account", "Account", 70),
        Column("type", "Type", 30, "center"),
        Column("description", "Description", 120),
        Column("gold_rate", "Gold Rate", 40, "right"),
        *_gold_columns(40, 40, 60),
        *_amount_columns(40, 40, 60),
    ),
)

# 계정별 잔액
ACCOUNT_BALANCES = ColumnSet(
    name="balances",
    columns=(
        Column("account_no", "Account No", 60),
        Column("name", "Account Name", 180),
        Column("phone", "Phone", 70, "center"),
        Column("gold_balance", "Gold Balance", 100, "right", is_balance=True),
        Column("kwd_balance", "Amount Balance", 100, "right", is_balance=True),
        Column("transactions", "Txns", 60, "center"),
    ),
)

ACCOUNT_BALANCES_GOLD_ONLY = ColumnSet(
    name="balances_gold_only",
    columns=(
        Column("account_no", "Account No", 60),
        Column("name", "Account Name", 220),
        Column("phone", "Phone", 80, "center"),
        Column("gold_balance", "Gold Balance", 130, "right", is_balance=True),
        Column("transactions", "Txns", 80, "center"),
    ),
)

# 유형별 요약
TYPE_SUMMARY = ColumnSet(
    name="type_summary",
    columns=(
        Column("account_type", "Account Type", 120),
        Column("accounts", "Accounts", 80, "center"),
        Column("transactions", "Transactions", 80, "center"),
        Column("gold_balance", "Gold Balance", 90, "right", is_balance=True),
        Column("kwd_balance", "KWD Balance", 90, "right", is_balance=True),
        Column("locker_gold", "Locker Gold", 90, "right", is_balance=True),
        Column("status", "Status", 80, "center"),
    ),
)


def ledger_columns(gold_only: bool) -> ColumnSet:
    return LEDGER_GOLD_ONLY if gold_only else LEDGER


def group_ledger_columns(gold_only: bool) -> ColumnSet:
    return GROUP_LEDGER_GOLD_ONLY if gold_only else GROUP_LEDGER


def balances_columns(gold_only: bool) -> ColumnSet:
    return ACCOUNT_BALANCES_GOLD_ONLY if gold_only else ACCOUNT_BALANCES
