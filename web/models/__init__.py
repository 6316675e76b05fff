"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import (
    AccountRequest,
    AggregateRequest,
    DateRangeRequest,
    LedgerComputeRequest,
    LedgerPdfRequest,
    LockerRequest,
    StatementRequest,
    TypeSummaryRequest,
    VoucherRequest,
)
from web.models.responses import (
    BalanceResponse,
    ErrorDetail,
    GroupSummaryResponse,
    HealthResponse,
    LedgerEntryResponse,
    LedgerResponse,
    PdfResponse,
    StatementResponse,
    TypeSummaryResponse,
)

__all__ = [
    # Requests
    "AccountRequest",
    "AggregateRequest",
    "DateRangeRequest",
    "LedgerComputeRequest",
    "LedgerPdfRequest",
    "LockerRequest",
    "StatementRequest",
    "TypeSummaryRequest",
    "VoucherRequest",
    # Responses
    "BalanceResponse",
    "ErrorDetail",
    "GroupSummaryResponse",
    "HealthResponse",
    "LedgerEntryResponse",
    "LedgerResponse",
    "PdfResponse",
    "StatementResponse",
    "TypeSummaryResponse",
]
