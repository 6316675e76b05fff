"""
타임존 유틸리티

내부 저장: UTC | 영업일 판정 및 표시: KWT(UTC+3) 원칙 준수를 위한 헬퍼 함수
"""

from datetime import date, datetime, timezone, timedelta

# KWT 타임존 (UTC+3, 서머타임 없음)
KWT = timezone(timedelta(hours=3))

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


def to_kwt(dt: datetime) -> datetime:
    """UTC datetime을 KWT로 변환

    Args:
        dt: datetime 객체 (UTC 권장, naive면 UTC로 간주)

    Returns:
        KWT 타임존의 datetime

    Example:
        >>> utc_dt = datetime(2024, 2, 29, 22, 0, 0, tzinfo=timezone.utc)
        >>> to_kwt(utc_dt).day
        1  # 다음날 01:00 (3월 1일)
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 간주
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(KWT)


def to_business_date(value: date | datetime | str) -> date:
    """전표 일자를 영업일(KWT 기준 날짜)로 변환

    원장 정렬과 기간 필터는 일 단위로만 비교한다.

    Args:
        value: date, datetime 또는 ISO 문자열 ("2024-02-01", "2024-02-01T10:00:00Z")

    Returns:
        KWT 기준 date

    Raises:
        ValueError: 날짜로 해석할 수 없는 문자열
    """
    if isinstance(value, datetime):
        return to_kwt(value).date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    # fromisoformat은 3.11 미만에서 "Z" 접미사를 받지 않음
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return to_kwt(datetime.fromisoformat(text)).date()


def format_display_date(value: date | None, fallback: str = "") -> str:
    """보고서 표시용 날짜 (dd/mm/yyyy)

    Args:
        value: 날짜 (None이면 fallback 반환)
        fallback: 날짜가 없을 때 표시할 문자열 ("Beginning", "Present" 등)
    """
    if value is None:
        return fallback
    return value.strftime(DISPLAY_DATE_FORMAT)


def now_utc() -> datetime:
    """현재 UTC 시간 반환 (타임존 명시)

    datetime.now(timezone.utc)의 축약형.

    Returns:
        현재 UTC 시간 (tzinfo=timezone.utc)
    """
    return datetime.now(timezone.utc)


def now_kwt() -> datetime:
    """현재 KWT 시간 반환

    Returns:
        현재 KWT 시간 (tzinfo=KWT)
    """
    return datetime.now(KWT)
