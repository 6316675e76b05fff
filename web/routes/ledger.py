"""
원장 API 라우트

무상태 계산 API. 요청 본문의 계정/전표로 원장을 계산해 반환.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from core.ledger.rules import UnknownVoucherType
from web.dependencies import get_ledger_service
from web.models.requests import (
    AggregateRequest,
    LedgerComputeRequest,
    LockerRequest,
    OpenBalanceRequest,
    StatementRequest,
    TypeSummaryRequest,
)
from web.models.responses import (
    GroupSummaryResponse,
    LedgerResponse,
    OpenBalanceResponse,
    StatementResponse,
    TypeSummaryResponse,
)
from web.routes.errors import to_http_exception
from web.services.ledger_service import LedgerService, resolve_scope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ledger", tags=["Ledger"])


@router.post("/compute", response_model=LedgerResponse)
async def compute_ledger(
    request: LedgerComputeRequest,
    service: LedgerService = Depends(get_ledger_service),
):
    """누적 잔액 원장 계산"""
    try:
        vouchers = [v.to_voucher() for v in request.vouchers]
        accounts = [a.to_account() for a in request.accounts]
        scope = resolve_scope(request.account_id, request.account_type, accounts)
        return service.compute(vouchers, scope)
    except (UnknownVoucherType, ValueError) as e:
        raise to_http_exception(e) from e


@router.post("/statement", response_model=StatementResponse)
async def get_statement(
    request: StatementRequest,
    service: LedgerService = Depends(get_ledger_service),
):
    """기간 명세 (기초 잔액 + 기간 내 전표 + 기말 잔액)"""
    try:
        vouchers = [v.to_voucher() for v in request.vouchers]
        accounts = [a.to_account() for a in request.accounts]
        scope = resolve_scope(request.account_id, request.account_type, accounts)
        return service.statement(vouchers, scope, request.date_range.to_range())
    except (UnknownVoucherType, ValueError) as e:
        raise to_http_exception(e) from e


@router.post("/aggregate", response_model=GroupSummaryResponse)
async def aggregate_accounts(
    request: AggregateRequest,
    service: LedgerService = Depends(get_ledger_service),
):
    """계정 유형 그룹 잔액 집계"""
    try:
        group = service.group_summary(
            request.account_type,
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
        return group.to_dict()
    except (UnknownVoucherType, ValueError) as e:
        raise to_http_exception(e) from e


@router.post("/type-summary", response_model=TypeSummaryResponse)
async def summarize_account_types(
    request: TypeSummaryRequest,
    service: LedgerService = Depends(get_ledger_service),
):
    """계정 유형별 요약 (금고 금 포함)"""
    try:
        report = service.type_summary(
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
        return report.to_dict()
    except (UnknownVoucherType, ValueError) as e:
        raise to_http_exception(e) from e


@router.post("/locker", response_model=StatementResponse)
async def get_locker_statement(
    request: LockerRequest,
    service: LedgerService = Depends(get_ledger_service),
):
    """금고 금 기간 명세"""
    try:
        return service.locker_statement(
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except KeyError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "UnknownAccount", "message": f"계정을 찾을 수 없습니다: {e}", "extra": {}},
        ) from e
    except (UnknownVoucherType, ValueError) as e:
        raise to_http_exception(e) from e


@router.post("/open-balance", response_model=OpenBalanceResponse)
async def get_open_balance_statement(
    request: OpenBalanceRequest,
    service: LedgerService = Depends(get_ledger_service),
):
    """시세 고정 기간 명세 (Market 시세 고정 REC + GFV)"""
    try:
        return service.open_balance_statement(
            [a.to_account() for a in request.accounts],
            [v.to_voucher() for v in request.vouchers],
            request.date_range.to_range(),
        )
    except KeyError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": "UnknownAccount", "message": f"계정을 찾을 수 없습니다: {e}", "extra": {}},
        ) from e
    except (UnknownVoucherType, ValueError) as e:
        raise to_http_exception(e) from e
