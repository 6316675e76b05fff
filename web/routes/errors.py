"""
core 예외 → HTTPException 변환

- UnknownVoucherType: 422 (데이터 오류, 전표 유형 포함)
- PageTooSmall: 500 (보고서 페이지 설정 오류)
- ValueError: 422 (잘못된 금액/일자/혼합 계정 유형)
"""

import logging

from fastapi import HTTPException

from core.ledger.rules import UnknownVoucherType
from core.report.paginator import PageTooSmall

logger = logging.getLogger(__name__)


def to_http_exception(error: Exception) -> HTTPException:
    """core 예외를 HTTP 응답으로 변환

    처리 대상이 아닌 예외는 호출자가 그대로 다시 raise 한다.
    """
    if isinstance(error, UnknownVoucherType):
        logger.warning(f"알 수 없는 전표 유형: {error}")
        return HTTPException(
            status_code=422,
            detail={
                "error": "UnknownVoucherType",
                "message": str(error),
                "extra": {"voucher_type": error.voucher_type, "voucher_id": error.voucher_id},
            },
        )
    if isinstance(error, PageTooSmall):
        logger.error(f"보고서 페이지 설정 오류: {error}")
        return HTTPException(
            status_code=500,
            detail={
                "error": "PageTooSmall",
                "message": str(error),
                "extra": {"rows_per_page": error.rows_per_page, "required": error.required},
            },
        )
    logger.warning(f"요청 데이터 오류: {error}")
    return HTTPException(
        status_code=422,
        detail={"error": type(error).__name__, "message": str(error), "extra": {}},
    )
