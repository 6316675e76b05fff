"""
보고서 API 라우트

PDF 보고서 생성. 응답은 Base64 PDF + 페이지 수.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from core.ledger.rules import UnknownVoucherType
from core.report.paginator import PageTooSmall
from web.dependencies import get_report_service
from web.models.requests import (
    AggregateRequest,
    LedgerPdfRequest,
    LockerRequest,
    OpenBalanceRequest,
    TypeSummaryRequest,
)
from web.models.responses import PdfResponse
from web.routes.errors import to_http_exception
from web.services.report_service import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/reports", tags=["Reports"])


@router.post("/ledger-pdf", response_model=PdfResponse)
async def generate_ledger_pdf(
    request: LedgerPdfRequest,
    service: ReportService = Depends(get_report_service),
):
    """단일 계정 원장 PDF"""
    try:
        result = service.ledger_pdf(
            request.account.to_account(),
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except (UnknownVoucherType, PageTooSmall, ValueError) as e:
        raise to_http_exception(e) from e
    logger.info(f"원장 PDF 생성: account={request.account.id}, pages={result['total_pages']}")
    return result


@router.post("/group-ledger-pdf", response_model=PdfResponse)
async def generate_group_ledger_pdf(
    request: AggregateRequest,
    service: ReportService = Depends(get_report_service),
):
    """계정 유형 전체 원장 PDF"""
    try:
        result = service.group_ledger_pdf(
            request.account_type,
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except (UnknownVoucherType, PageTooSmall, ValueError) as e:
        raise to_http_exception(e) from e
    logger.info(f"유형 원장 PDF 생성: type={request.account_type}, pages={result['total_pages']}")
    return result


@router.post("/balances-pdf", response_model=PdfResponse)
async def generate_balances_pdf(
    request: AggregateRequest,
    service: ReportService = Depends(get_report_service),
):
    """계정별 잔액 PDF"""
    try:
        result = service.balances_pdf(
            request.account_type,
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except (UnknownVoucherType, PageTooSmall, ValueError) as e:
        raise to_http_exception(e) from e
    logger.info(f"잔액 PDF 생성: type={request.account_type}, pages={result['total_pages']}")
    return result


@router.post("/locker-pdf", response_model=PdfResponse)
async def generate_locker_pdf(
    request: LockerRequest,
    service: ReportService = Depends(get_report_service),
):
    """금고 금 원장 PDF"""
    try:
        result = service.locker_pdf(
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except KeyError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "UnknownAccount", "message": f"계정을 찾을 수 없습니다: {e}", "extra": {}},
        ) from e
    except (UnknownVoucherType, PageTooSmall, ValueError) as e:
        raise to_http_exception(e) from e
    logger.info(f"금고 원장 PDF 생성: pages={result['total_pages']}")
    return result


@router.post("/type-summary-pdf", response_model=PdfResponse)
async def generate_type_summary_pdf(
    request: TypeSummaryRequest,
    service: ReportService = Depends(get_report_service),
):
    """계정 유형별 요약 PDF"""
    try:
        result = service.type_summary_pdf(
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except (UnknownVoucherType, PageTooSmall, ValueError) as e:
        raise to_http_exception(e) from e
    logger.info(f"유형 요약 PDF 생성: pages={result['total_pages']}")
    return result


@router.post("/open-balance-pdf", response_model=PdfResponse)
async def generate_open_balance_pdf(
    request: OpenBalanceRequest,
    service: ReportService = Depends(get_report_service),
):
    """시세 고정 원장 PDF"""
    try:
        result = service.open_balance_pdf(
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except KeyError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "UnknownAccount", "message": f"계정을 찾을 수 없습니다: {e}", "extra": {}},
        ) from e
    except (UnknownVoucherType, PageTooSmall, ValueError) as e:
        raise to_http_exception(e) from e
    logger.info(f"시세 고정 원장 PDF 생성: pages={result['total_pages']}")
    return result
