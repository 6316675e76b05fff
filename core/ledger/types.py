"""
원장 타입 정의

VoucherType, AccountType 등 Ledger 시스템에서 사용하는 Enum 정의
"""

from enum import Enum


class VoucherType(str, Enum):
    """전표 유형

    잔액 반영 규칙은 core.ledger.rules 참고.
    str을 상속하여 JSON 직렬화 가능.
    """

    INVOICE = "INV"
    RECEIPT = "REC"
    GOLD_FIXING = "GFV"  # Gold Form Voucher
    ALLOY = "Alloy"


class AccountType(str, Enum):
    """계정 유형"""

    MARKET = "Market"
    CASTING = "Casting"
    FACETING = "Faceting"
    PROJECT = "Project"
    GOLD_FIXING = "Gold Fixing"

    @property
    def is_gold_only(self) -> bool:
        """금 잔액만 관리하는 유형 (KWD 컬럼 생략)"""
        return self is AccountType.PROJECT


# 기초/기말 잔액 행의 표시용 유형 (전표 유형 아님)
BALANCE_ROW_TYPE: str = "BAL"

# 합성 행의 voucher_id
OPENING_BALANCE_ID: str = "opening-balance"
CLOSING_BALANCE_ID: str = "closing-balance"

# 금고 원장에서 현금 외 결제로 간주하는 결제 수단
CHEQUE_PAYMENT_METHOD: str = "cheque"


# 표시용 전표 유형 이름
VOUCHER_TYPE_LABELS: dict[str, str] = {
    VoucherType.INVOICE.value: "Invoice",
    VoucherType.RECEIPT.value: "Receipt",
    VoucherType.GOLD_FIXING.value: "Gold Form",
    VoucherType.ALLOY.value: "Alloy",
    BALANCE_ROW_TYPE: "BAL",
}


def is_gold_only_type(account_type: str | None) -> bool:
    """문자열 계정 유형이 금 전용인지 확인"""
    return account_type == AccountType.PROJECT.value
