"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화.
금액은 정밀도 유지를 위해 모두 문자열.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    company: str = Field(..., description="회사명")
    version: str = Field(..., description="API 버전")
    timestamp: datetime = Field(..., description="응답 시간 (UTC)")


class BalanceResponse(BaseModel):
    """잔액 쌍"""

    gold: str = Field(..., description="금 잔액 (g)")
    kwd: str = Field(..., description="KWD 잔액")


class LedgerEntryResponse(BaseModel):
    """원장 행"""

    voucher_id: str = Field(..., description="전표 ID 또는 opening-balance / closing-balance")
    date: str | None = Field(default=None, description="일자 (합성 행은 null 가능)")
    type: str = Field(..., description="전표 유형 (합성 행은 BAL)")
    type_label: str = Field(..., description="전표 유형 표시 이름")
    description: str = Field(..., description="설명")
    account_id: str | None = Field(default=None, description="계정 ID")
    gold_debit: str
    gold_credit: str
    gold_balance: str
    kwd_debit: str
    kwd_credit: str
    kwd_balance: str
    is_opening_balance: bool = False
    is_closing_balance: bool = False
    gold_rate: str | None = Field(default=None, description="금 시세 고정 단가 (시세 고정 원장)")


class LedgerResponse(BaseModel):
    """원장 계산 응답"""

    entries: list[LedgerEntryResponse] = Field(default_factory=list, description="누적 잔액 원장")
    count: int = Field(..., description="행 수")
    final_balance: BalanceResponse = Field(..., description="마지막 누적 잔액")


class TotalsResponse(BaseModel):
    """기간 내 차변/대변 합계"""

    gold_debit: str
    gold_credit: str
    kwd_debit: str
    kwd_credit: str


class StatementResponse(BaseModel):
    """기간 명세 응답

    rows = 기초 잔액 행 + 기간 내 행 + 기말 잔액 행
    """

    opening: BalanceResponse = Field(..., description="기초 잔액")
    closing: BalanceResponse = Field(..., description="기말 잔액")
    rows: list[LedgerEntryResponse] = Field(default_factory=list, description="명세 행")
    transaction_count: int = Field(..., description="기간 내 전표 수")
    totals: TotalsResponse = Field(..., description="기간 내 합계")


class VoucherSummaryResponse(BaseModel):
    """시세 고정 전표 수"""

    market_rec: int = Field(..., description="Market 시세 고정 REC 수")
    gfv: int = Field(..., description="GFV 수")
    total: int = Field(..., description="합계")


class OpenBalanceResponse(StatementResponse):
    """시세 고정 원장 응답"""

    summary: VoucherSummaryResponse = Field(..., description="기간 내 전표 수")


class AccountSummaryResponse(BaseModel):
    """계정별 요약"""

    account_id: str
    account_no: int
    name: str
    gold_balance: str
    kwd_balance: str
    transaction_count: int


class GroupSummaryResponse(BaseModel):
    """계정 유형 그룹 요약"""

    account_type: str | None = Field(default=None, description="계정 유형")
    accounts: list[AccountSummaryResponse] = Field(default_factory=list, description="계정별 요약 (account_no 순)")
    total_gold: str
    total_kwd: str
    total_transactions: int
    total_accounts: int
    accounts_with_positive_gold: int
    accounts_with_positive_kwd: int
    accounts_with_zero_balance: int
    active_accounts: int


class TypeSummaryRowResponse(BaseModel):
    """유형별 요약 1행"""

    account_type: str
    total_accounts: int
    total_transactions: int
    gold_balance: str
    kwd_balance: str
    locker_gold: str
    status: str


class TypeSummaryResponse(BaseModel):
    """유형별 요약 응답"""

    rows: list[TypeSummaryRowResponse] = Field(default_factory=list)
    overall_gold: str
    overall_kwd: str
    total_accounts: int
    total_active_accounts: int
    total_transactions: int
    locker_total_gold: str


class PdfResponse(BaseModel):
    """PDF 생성 응답"""

    success: bool = Field(default=True, description="성공 여부")
    pdf_data: str = Field(..., description="Base64 인코딩된 PDF")
    total_pages: int = Field(..., description="페이지 수")
    filename: str = Field(..., description="권장 파일명")
    message: str | None = Field(default=None, description="결과 메시지")


class ErrorDetail(BaseModel):
    """오류 상세 (HTTPException detail)"""

    error: str = Field(..., description="오류 종류")
    message: str = Field(..., description="오류 메시지")
    extra: dict[str, Any] = Field(default_factory=dict, description="추가 정보")
