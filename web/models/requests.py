"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증.
API 는 무상태: 모든 요청이 계산에 필요한 계정/전표를 직접 싣고 온다.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from core.ledger.models import Account, Voucher
from core.ledger.period import DateRange


class VoucherRequest(BaseModel):
    """전표

    type 은 검증하지 않는다 (알 수 없는 유형은 계산 단계에서 422).
    """

    id: str = Field(..., description="전표 ID")
    date: str = Field(..., description="전표 일자 (ISO 날짜 또는 일시)")
    type: str = Field(..., description="전표 유형 (INV, REC, GFV, Alloy)")
    account_id: str = Field(..., description="계정 ID")
    gold: Decimal = Field(default=Decimal("0"), ge=0, description="금 수량 (g)")
    kwd: Decimal = Field(default=Decimal("0"), ge=0, description="금액 (KWD)")
    quantity: Decimal | None = Field(default=None, description="수량")
    description: str | None = Field(default=None, description="설명")
    mvn: str | None = Field(default=None, description="외부 전표 번호")
    payment_method: str | None = Field(default=None, description="결제 수단 (cash, cheque 등)")
    gold_rate: Decimal | None = Field(default=None, ge=0, description="금 시세 고정 단가 (Gold Fixing)")
    fixing_amount: Decimal | None = Field(default=None, ge=0, description="시세 고정 금액 (KWD)")

    def to_voucher(self) -> Voucher:
        return Voucher.from_dict(self.model_dump())


class AccountRequest(BaseModel):
    """계정"""

    id: str = Field(..., description="계정 ID")
    account_no: int = Field(..., description="유형 내 일련번호")
    name: str = Field(..., description="계정명")
    type: str = Field(..., description="계정 유형 (Market, Casting, Faceting, Project, Gold Fixing)")
    phone: str | None = Field(default=None, description="전화번호")
    cr_or_civil_id_no: str | None = Field(default=None, description="CR 또는 Civil ID 번호")

    def to_account(self) -> Account:
        return Account(
            id=self.id,
            account_no=self.account_no,
            name=self.name,
            type=self.type,
            phone=self.phone,
            cr_or_civil_id_no=self.cr_or_civil_id_no,
        )


class DateRangeRequest(BaseModel):
    """조회 기간 (양 끝 포함, 생략 시 무제한)"""

    start: date | None = Field(default=None, description="시작일")
    end: date | None = Field(default=None, description="종료일")

    def to_range(self) -> DateRange:
        return DateRange(start=self.start, end=self.end)


class LedgerComputeRequest(BaseModel):
    """원장 계산 요청

    account_id 가 있으면 단일 계정, account_type 이 있으면 해당 유형 계정 전체.
    둘 다 없으면 모든 전표.
    """

    vouchers: list[VoucherRequest] = Field(default_factory=list, description="전표 목록")
    accounts: list[AccountRequest] = Field(default_factory=list, description="계정 목록 (유형 범위 계산용)")
    account_id: str | None = Field(default=None, description="단일 계정 범위")
    account_type: str | None = Field(default=None, description="계정 유형 범위")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "vouchers": [
                        {"id": "v1", "date": "2024-01-05", "type": "INV", "account_id": "a1", "gold": "10", "kwd": "5"},
                        {"id": "v2", "date": "2024-01-09", "type": "REC", "account_id": "a1", "gold": "4", "kwd": "1"},
                    ],
                    "account_id": "a1",
                },
            ]
        }
    }


class StatementRequest(LedgerComputeRequest):
    """기간 명세 요청"""

    date_range: DateRangeRequest = Field(default_factory=DateRangeRequest, description="조회 기간")


class AggregateRequest(BaseModel):
    """계정 유형 집계 요청"""

    account_type: str = Field(..., description="집계할 계정 유형")
    accounts: list[AccountRequest] = Field(default_factory=list, description="계정 목록")
    vouchers: list[VoucherRequest] = Field(default_factory=list, description="전표 목록")
    date_range: DateRangeRequest = Field(default_factory=DateRangeRequest, description="조회 기간")


class TypeSummaryRequest(BaseModel):
    """유형별 요약 요청 (모든 유형)"""

    accounts: list[AccountRequest] = Field(default_factory=list, description="계정 목록")
    vouchers: list[VoucherRequest] = Field(default_factory=list, description="전표 목록")
    date_range: DateRangeRequest = Field(default_factory=DateRangeRequest, description="조회 기간")


class LockerRequest(BaseModel):
    """금고 금 원장 요청"""

    accounts: list[AccountRequest] = Field(default_factory=list, description="계정 목록")
    vouchers: list[VoucherRequest] = Field(default_factory=list, description="전표 목록")
    date_range: DateRangeRequest = Field(default_factory=DateRangeRequest, description="조회 기간")


class OpenBalanceRequest(LockerRequest):
    """시세 고정 원장 요청 (모든 계정의 전표)"""


class LedgerPdfRequest(BaseModel):
    """단일 계정 원장 PDF 요청"""

    account: AccountRequest = Field(..., description="대상 계정")
    vouchers: list[VoucherRequest] = Field(default_factory=list, description="전표 목록")
    date_range: DateRangeRequest = Field(default_factory=DateRangeRequest, description="조회 기간")
