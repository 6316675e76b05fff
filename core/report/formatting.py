"""
보고서 셀 포맷팅

금액은 항상 소수점 3자리. 잔액은 부호 대신 Cr(>=0) / Db(<0) 접미사로 표시.
"""

from decimal import Decimal

from core.ledger.types import VOUCHER_TYPE_LABELS


class Colors:
    """보고서 색상 (#RRGGBB)"""

    WHITE = "#FFFFFF"
    BLUE50 = "#EFF6FF"
    BLUE100 = "#DBEAFE"
    BLUE300 = "#93C5FD"
    BLUE600 = "#2563EB"
    BLUE700 = "#1D4ED8"
    BLUE800 = "#1E40AF"
    INDIGO100 = "#E0E7FF"
    RED100 = "#FEE2E2"
    RED600 = "#DC2626"
    RED700 = "#B91C1C"
    GREEN100 = "#DCFCE7"
    GREEN600 = "#16A34A"
    YELLOW100 = "#FEF9C3"
    YELLOW600 = "#CA8A04"
    PURPLE100 = "#F3E8FF"
    PURPLE600 = "#9333EA"
    GRAY200 = "#E5E7EB"
    GRAY600 = "#4B5563"
    GRAY700 = "#374151"


# 전표 유형별 (글자색, 배경색)
TYPE_COLORS: dict[str, tuple[str, str]] = {
    "INV": (Colors.GREEN600, Colors.GREEN100),
    "REC": (Colors.RED600, Colors.RED100),
    "GFV": (Colors.YELLOW600, Colors.YELLOW100),
    "Alloy": (Colors.PURPLE600, Colors.PURPLE100),
    "BAL": (Colors.BLUE600, Colors.BLUE100),
}

_DESCRIPTION_PREFIXES = (
    "Invoice - ",
    "Receipt - ",
    "Gold Form Voucher - ",
    "Alloy - ",
)


def _fixed(value: Decimal) -> str:
    return f"{value:.3f}"


def format_balance(value: Decimal) -> str:
    """잔액 표시

    Example:
        >>> format_balance(Decimal("12.5"))
        '12.500 Cr'
        >>> format_balance(Decimal("-3"))
        '3.000 Db'
    """
    suffix = "Cr" if value >= 0 else "Db"
    return f"{_fixed(abs(value))} {suffix}"


def format_amount(value: Decimal) -> str:
    """차변/대변 금액 표시 (0이면 "-")"""
    if value == 0:
        return "-"
    return _fixed(value)


def format_grouped(value: Decimal) -> str:
    """천 단위 구분 기호 포함 (합계 행용)"""
    return f"{value:,.3f}"


def balance_color(value: Decimal) -> str:
    """잔액 부호별 글자색 (페이지와 무관하게 셀 단위로 결정)"""
    return Colors.BLUE700 if value >= 0 else Colors.RED700


def clean_description(text: str | None) -> str:
    """전표 유형 접두어 제거 ("Invoice - " 등)"""
    if not text:
        return ""
    for prefix in _DESCRIPTION_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):]
    return text


def truncate(text: str, limit: int) -> str:
    """limit 자를 넘으면 잘라서 "..." 을 붙인다 (결과 길이 = limit)"""
    if limit <= 3 or len(text) <= limit:
        return text[:limit] if limit > 0 else ""
    return text[:limit - 3] + "..."


def voucher_type_label(voucher_type: str) -> str:
    """전표 유형 표시 이름 (모르는 유형은 그대로)"""
    return VOUCHER_TYPE_LABELS.get(voucher_type, voucher_type)


def type_colors(voucher_type: str) -> tuple[str, str]:
    """전표 유형 배지 (글자색, 배경색)"""
    return TYPE_COLORS.get(voucher_type, (Colors.GRAY700, Colors.GRAY200))
