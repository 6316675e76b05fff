"""
유틸리티 패키지

금액 정규화, 타임존/영업일 처리 등 공통 유틸리티
"""

from core.utils.amounts import ZERO, sum_amounts, to_amount
from core.utils.timezone import (
    KWT,
    to_kwt,
    to_business_date,
    format_display_date,
    now_utc,
    now_kwt,
)

__all__ = [
    "ZERO",
    "to_amount",
    "sum_amounts",
    "KWT",
    "to_kwt",
    "to_business_date",
    "format_display_date",
    "now_utc",
    "now_kwt",
]
