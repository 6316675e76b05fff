"""
원장 도메인 모델

Voucher, Account 는 외부(저장소)에서 받은 스냅샷.
LedgerEntry 는 전표로부터 파생되는 일회성 행이며 저장하지 않는다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from core.ledger.types import (
    BALANCE_ROW_TYPE,
    CLOSING_BALANCE_ID,
    OPENING_BALANCE_ID,
)
from core.utils.amounts import ZERO, to_amount
from core.utils.timezone import to_business_date


@dataclass(frozen=True)
class Balance:
    """금/KWD 누적 잔액 쌍"""

    gold: Decimal = ZERO
    kwd: Decimal = ZERO

    @classmethod
    def zero(cls) -> Balance:
        return cls(gold=ZERO, kwd=ZERO)

    def to_dict(self) -> dict[str, str]:
        return {"gold": str(self.gold), "kwd": str(self.kwd)}


@dataclass(frozen=True)
class Account:
    """계정

    account_no 는 같은 유형 안에서 유일한 일련번호.
    """

    id: str
    account_no: int
    name: str
    type: str
    phone: str | None = None
    cr_or_civil_id_no: str | None = None


@dataclass(frozen=True)
class Voucher:
    """전표 (단일 거래)

    gold, kwd 는 부호 없는 수량. 방향은 전표 유형에서 파생된다.
    """

    id: str
    date: date
    type: str
    account_id: str
    gold: Decimal = ZERO
    kwd: Decimal = ZERO
    quantity: Decimal | None = None
    description: str | None = None
    mvn: str | None = None  # 외부 전표 번호
    payment_method: str | None = None
    gold_rate: Decimal | None = None  # 금 시세 고정 단가 (Gold Fixing)
    fixing_amount: Decimal | None = None  # 시세 고정 금액 (KWD)

    def __post_init__(self) -> None:
        if self.gold < 0 or self.kwd < 0:
            raise ValueError(
                f"전표 금액은 음수일 수 없습니다: id={self.id}, "
                f"gold={self.gold}, kwd={self.kwd}"
            )
        if self.fixing_amount is not None and self.fixing_amount < 0:
            raise ValueError(
                f"시세 고정 금액은 음수일 수 없습니다: id={self.id}, "
                f"fixing_amount={self.fixing_amount}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Voucher:
        """외부 레코드(dict)에서 Voucher 생성

        금액은 소수점 3자리로 정규화, 일자는 KWT 영업일로 변환.
        """
        quantity = data.get("quantity")
        gold_rate = data.get("gold_rate", data.get("goldRate"))
        fixing_amount = data.get("fixing_amount", data.get("fixingAmount"))
        return cls(
            id=str(data["id"]),
            date=to_business_date(data["date"]),
            type=str(data.get("type") or data.get("vt") or ""),
            account_id=str(data.get("account_id") or data.get("accountId") or ""),
            gold=to_amount(data.get("gold")),
            kwd=to_amount(data.get("kwd")),
            quantity=to_amount(quantity) if quantity not in (None, "") else None,
            description=data.get("description") or None,
            mvn=data.get("mvn") or None,
            payment_method=data.get("payment_method") or data.get("paymentMethod"),
            gold_rate=to_amount(gold_rate) if gold_rate not in (None, "") else None,
            fixing_amount=to_amount(fixing_amount) if fixing_amount not in (None, "") else None,
        )

    def display_description(self) -> str:
        """원장에 표시할 설명

        수량이 있으면 "수량 - 설명", 설명이 없으면 외부 전표 번호 또는 ID 앞 8자리.
        """
        description = self.description or ""
        if self.quantity:
            description = f"{self.quantity.normalize():f} - {description}"
        if not description and self.mvn:
            return f"Voucher {self.mvn}"
        if not description:
            return f"Transaction {self.id[:8]}"
        return description


@dataclass(frozen=True)
class LedgerEntry:
    """원장 행

    전표 1건 또는 합성 잔액 행(기초/기말)에 누적 잔액을 붙인 것.
    """

    voucher_id: str
    date: date | None
    type: str
    description: str
    account_id: str | None = None
    gold_debit: Decimal = ZERO
    gold_credit: Decimal = ZERO
    gold_balance: Decimal = ZERO
    kwd_debit: Decimal = ZERO
    kwd_credit: Decimal = ZERO
    kwd_balance: Decimal = ZERO
    is_opening_balance: bool = False
    is_closing_balance: bool = False
    gold_rate: Decimal | None = None  # 시세 고정 원장에서만 사용

    def __post_init__(self) -> None:
        if self.is_opening_balance and self.is_closing_balance:
            raise ValueError("기초/기말 잔액 행 플래그는 동시에 설정할 수 없습니다")

    @property
    def balance(self) -> Balance:
        return Balance(gold=self.gold_balance, kwd=self.kwd_balance)

    @property
    def is_synthetic(self) -> bool:
        return self.is_opening_balance or self.is_closing_balance

    @classmethod
    def opening(
        cls,
        balance: Balance,
        on: date | None,
        account_id: str | None = None,
    ) -> LedgerEntry:
        """기초 잔액 합성 행"""
        return cls(
            voucher_id=OPENING_BALANCE_ID,
            date=on,
            type=BALANCE_ROW_TYPE,
            description="Opening Balance",
            account_id=account_id,
            gold_balance=balance.gold,
            kwd_balance=balance.kwd,
            is_opening_balance=True,
        )

    @classmethod
    def closing(
        cls,
        balance: Balance,
        on: date | None,
        account_id: str | None = None,
    ) -> LedgerEntry:
        """기말 잔액 합성 행"""
        return cls(
            voucher_id=CLOSING_BALANCE_ID,
            date=on,
            type=BALANCE_ROW_TYPE,
            description="Closing Balance",
            account_id=account_id,
            gold_balance=balance.gold,
            kwd_balance=balance.kwd,
            is_closing_balance=True,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "voucher_id": self.voucher_id,
            "date": self.date.isoformat() if self.date else None,
            "type": self.type,
            "description": self.description,
            "account_id": self.account_id,
            "gold_debit": str(self.gold_debit),
            "gold_credit": str(self.gold_credit),
            "gold_balance": str(self.gold_balance),
            "kwd_debit": str(self.kwd_debit),
            "kwd_credit": str(self.kwd_credit),
            "kwd_balance": str(self.kwd_balance),
            "is_opening_balance": self.is_opening_balance,
            "is_closing_balance": self.is_closing_balance,
            "gold_rate": str(self.gold_rate) if self.gold_rate is not None else None,
        }
